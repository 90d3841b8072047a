# Table session: command context, current table and statistics
from dataclasses import dataclass
from typing import (
    Callable,
    Collection,
    Dict,
    List,
    Optional,
    Protocol,
    Sequence,
    Set,
)

from .exceptions import CommandError
from .parser import Record, parse_listing
from .schema import ColumnSchema, SortKey
from .statistics import AggregationMode, StatisticsSnapshot, aggregate

Runner = Callable[[str, Optional[str]], str]


class Display(Protocol):
    """Anything that can render a table"""

    def render(
        self,
        schema: ColumnSchema,
        sort_key: SortKey,
        records: Sequence[Record],
        marked: Collection[int] = (),
    ) -> None: ...


@dataclass(frozen=True)
class CommandContext:
    """Command string that produced a table, plus its remote target"""

    command: str
    target: Optional[str] = None

    @property
    def mode(self) -> AggregationMode:
        return AggregationMode.from_command(self.command)


class TableSession:
    """
    Holds the current package table and its statistics.

    The session is idle until the first successful `run_list`; every
    later call replaces the table as a whole or, on failure, leaves
    everything as it was.
    """

    def __init__(
        self,
        runner: Runner,
        display: Optional[Display] = None,
        schema: Optional[ColumnSchema] = None,
    ):
        """
        Initialize table session.

        Args:
            runner: Callable taking (command, target) and returning stdout
            display: Optional display that receives every new table
            schema: Column schema, defaults to the standard five columns
        """
        self.runner = runner
        self.display = display
        self.schema = schema or ColumnSchema()
        self._context: Optional[CommandContext] = None
        self._table: List[Record] = []
        self._statistics = StatisticsSnapshot()
        self._statistics_complete = False
        self._marks: Set[int] = set()

    @property
    def context(self) -> Optional[CommandContext]:
        return self._context

    @property
    def is_populated(self) -> bool:
        return self._context is not None

    @property
    def table(self) -> List[Record]:
        """Current records in ordinal order"""
        return list(self._table)

    @property
    def statistics(self) -> StatisticsSnapshot:
        return self._statistics

    @property
    def statistics_complete(self) -> bool:
        """Whether a full listing has filled every counter"""
        return self._statistics_complete

    def run_list(self, command: str, target: Optional[str] = None) -> List[Record]:
        """
        Run a list command and replace the table with its output.

        Args:
            command: List command, e.g. "apt list --installed"
            target: Optional remote target in user@host form

        Returns:
            The new table

        Raises:
            CommandError: If the runner fails or returns something other
                than text; the previous table is kept
        """
        context = CommandContext(command=command, target=target or None)
        output = self.runner(context.command, context.target)
        if not isinstance(output, str):
            raise CommandError(
                f"Command returned non-text output: {command}",
                details=type(output).__name__,
            )

        table = parse_listing(output)
        statistics = aggregate(table, context.mode, previous=self._statistics)

        self._context = context
        self._table = table
        self._statistics = statistics
        if context.mode is AggregationMode.FULL:
            self._statistics_complete = True
        self._marks = set()

        if self.display is not None:
            self.display.render(self.schema, self.schema.sort_key, self.table)
        return self.table

    def refresh(self) -> List[Record]:
        """Re-run the last list command"""
        if self._context is None:
            raise CommandError("No list command has been run yet")
        return self.run_list(self._context.command, self._context.target)

    def redisplay(self, sort_key: Optional[SortKey] = None) -> None:
        """
        Render the current table again, with marks.

        Args:
            sort_key: Sort key to use instead of the schema default
        """
        sort_key = sort_key or self.schema.sort_key
        self.schema.validate_sort_key(sort_key)
        if self.display is not None:
            self.display.render(
                self.schema, sort_key, self.table, marked=sorted(self._marks)
            )

    def refresh_statistics(self) -> StatisticsSnapshot:
        """Recompute statistics from the current table"""
        if self._context is not None:
            self._statistics = aggregate(
                self._table, self._context.mode, previous=self._statistics
            )
        return self._statistics

    def record(self, ordinal: int) -> Record:
        """
        Get record by ordinal.

        Raises:
            KeyError: If no record has this ordinal
        """
        if 1 <= ordinal <= len(self._table):
            return self._table[ordinal - 1]
        raise KeyError(ordinal)

    def sorted_records(self, sort_key: Optional[SortKey] = None) -> List[Record]:
        """Current table ordered by a column, the schema default if omitted"""
        return self.schema.sort(self._table, sort_key)

    def mark(self, ordinal: int) -> None:
        self.record(ordinal)
        self._marks.add(ordinal)

    def unmark(self, ordinal: int) -> None:
        self.record(ordinal)
        self._marks.discard(ordinal)

    def unmark_all(self) -> None:
        self._marks.clear()

    def is_marked(self, ordinal: int) -> bool:
        return ordinal in self._marks

    def marked_records(self) -> List[Record]:
        """Marked records in ordinal order"""
        return [self._table[ordinal - 1] for ordinal in sorted(self._marks)]

    def summary(self) -> Dict[str, int]:
        """Statistics counters by name"""
        return self._statistics.as_dict()
