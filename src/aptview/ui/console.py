"""Console output handling with consistent styling"""

from contextlib import contextmanager
from typing import Collection, Optional, Sequence, Union

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..core.parser import Record
from ..core.schema import ColumnSchema, SortKey
from ..core.statistics import StatisticsSnapshot
from ..ui.style import (
    DEFAULT_PANEL,
    DEFAULT_TABLE,
    SUMMARY_LABELS,
    StyleType,
    SymbolType,
    get_status_style,
)

console = Console(force_terminal=True, color_system="auto")


def print_error(message: str, details: Optional[str] = None):
    """Display error message"""
    console.print(f"{SymbolType.ERROR} {message}", style=StyleType.ERROR())
    if details:
        console.print(details, style=StyleType.DIM(), highlight=False)


def print_warning(message: str):
    """Display warning message"""
    console.print(f"{SymbolType.WARNING} {message}", style=StyleType.WARNING())


def print_info(message: str):
    """Display info message"""
    console.print(f"{SymbolType.INFO} {message}", style=StyleType.INFO())


@contextmanager
def progress_status(message: str):
    """Show a spinner while a blocking command runs"""
    with console.status(message, spinner="dots"):
        yield


def create_package_table(
    title: str,
    schema: ColumnSchema,
    records: Sequence[Record],
    marked: Collection[int] = (),
) -> Table:
    """Create package table with consistent styling"""
    table = Table(
        title=title,
        show_header=DEFAULT_TABLE.show_header,
        header_style=DEFAULT_TABLE.header_style,
        title_justify=DEFAULT_TABLE.title_justify,
        expand=DEFAULT_TABLE.expand,
        padding=DEFAULT_TABLE.padding,
    )

    table.add_column("#", justify="right", style=StyleType.DIM())
    table.add_column("", width=1, style=StyleType.MARKED())
    for column in schema.columns:
        if column.name == "Name":
            style = StyleType.PACKAGE_NAME()
        elif column.name == "Version":
            style = StyleType.PACKAGE_VERSION()
        else:
            style = None
        table.add_column(
            column.name, max_width=column.width, style=style, overflow="ellipsis"
        )

    indexes = [schema.field_index(name) for name in schema.names]
    for record in records:
        cells = []
        for name, index in zip(schema.names, indexes):
            value = record.field(index)
            if name == "Status":
                cells.append(Text(value, style=get_status_style(value)))
            else:
                cells.append(value)
        mark = SymbolType.MARK.value if record.ordinal in marked else ""
        table.add_row(str(record.ordinal), mark, *cells)

    return table


def create_statistics_summary(
    statistics: StatisticsSnapshot, complete: bool = True
) -> Text:
    """Create statistics summary with consistent styling

    Args:
        statistics: Counters to show
        complete: False when only the upgradable counter has been computed;
            the other counters are shown as unknown
    """
    content = Text()
    for name, value in statistics.as_dict().items():
        label, style = SUMMARY_LABELS[name]
        content.append(f"• {label}: ")
        if complete or name == "upgradable":
            content.append(str(value), style=style)
        else:
            content.append("unknown", style=StyleType.DIM())
        content.append("\n")

    if content.plain.endswith("\n"):
        content.remove_suffix("\n")
    return content


def create_summary_panel(title: str, content: Union[str, Text]) -> Panel:
    """Create summary panel with consistent styling"""
    return Panel.fit(
        content,
        title=title,
        title_align=DEFAULT_PANEL.title_align,
        border_style=DEFAULT_PANEL.border_style,
        padding=DEFAULT_PANEL.padding,
    )


class TableView:
    """Renders session tables to the console"""

    def __init__(self, title: str = "Packages", output: Optional[Console] = None):
        self.title = title
        self.output = output or console
        self.last_sort_key: Optional[SortKey] = None

    def render(
        self,
        schema: ColumnSchema,
        sort_key: SortKey,
        records: Sequence[Record],
        marked: Collection[int] = (),
    ) -> None:
        """Print records ordered by sort_key"""
        self.last_sort_key = sort_key
        if not records:
            return
        ordered = schema.sort(records, sort_key)
        self.output.print(create_package_table(self.title, schema, ordered, marked))
