# Tests for console rendering

from rich.console import Console
from aptview.core.parser import parse_listing
from aptview.core.schema import Column, ColumnSchema, SortKey
from aptview.core.statistics import StatisticsSnapshot
from aptview.ui.console import (
    TableView,
    create_package_table,
    create_statistics_summary,
)
from aptview.ui.style import StyleType, get_status_style


def make_console():
    return Console(record=True, width=160, color_system=None)


def test_package_table_columns(installed_output):
    """Test that the table has ordinal, mark and schema columns"""
    table = create_package_table("Packages", ColumnSchema(), parse_listing(installed_output))

    headers = [str(column.header) for column in table.columns]
    assert headers == ["#", "", "Name", "Source", "Version", "Architecture", "Status"]
    assert table.row_count == 4


def test_table_view_sorts_and_marks(installed_output):
    """Test rendering in sort order with a marked row"""
    output = make_console()
    view = TableView("apt list --installed", output=output)
    records = parse_listing(installed_output)

    view.render(ColumnSchema(), SortKey("Name", descending=True), records, marked=[2])
    text = output.export_text()

    assert view.last_sort_key == SortKey("Name", True)
    assert text.index("pkg-d") < text.index("pkg-a")
    marked_line = next(line for line in text.splitlines() if "pkg-b" in line)
    assert "*" in marked_line


def test_table_view_empty():
    output = make_console()
    TableView(output=output).render(ColumnSchema(), SortKey(), [])
    assert output.export_text() == ""


def test_statistics_summary():
    summary = create_statistics_summary(
        StatisticsSnapshot(installed=3, upgradable=1, residual=1, auto_installed=2)
    )
    assert summary.plain == (
        "• Installed: 3\n"
        "• Upgradable: 1\n"
        "• Residual config: 1\n"
        "• Auto-installed: 2"
    )


def test_status_style_priority():
    assert get_status_style("[installed,upgradable to: 2.1]") == StyleType.UPGRADABLE()
    assert get_status_style("[installed,automatic]") == StyleType.AUTOMATIC()
    assert get_status_style("[installed]") == StyleType.INSTALLED()
    assert get_status_style("none") == StyleType.NONE()


def test_reordered_schema_renders_named_fields():
    """Test that each column shows its own field whatever the column order"""
    schema = ColumnSchema(columns=(Column("Status", 40), Column("Name", 10)))
    output = make_console()
    records = parse_listing("a/zzz 1.0 amd64 [installed]\n")

    TableView(output=output).render(schema, SortKey("Name"), records)
    text = output.export_text()
    row = next(line for line in text.splitlines() if "[installed]" in line)

    assert row.index("[installed]") < row.index(" a ")
    assert "zzz" not in text


def test_statistics_summary_incomplete():
    """Test that counters not yet computed are shown as unknown"""
    summary = create_statistics_summary(StatisticsSnapshot(upgradable=2), complete=False)
    assert summary.plain == (
        "• Installed: unknown\n"
        "• Upgradable: 2\n"
        "• Residual config: unknown\n"
        "• Auto-installed: unknown"
    )
