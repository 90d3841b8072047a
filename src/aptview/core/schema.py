# Column schema and sorting
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from debian.debian_support import Version

from .exceptions import SchemaError
from .parser import FIELD_NAMES, Record

DEFAULT_WIDTHS = {
    "Name": 40,
    "Source": 24,
    "Version": 30,
    "Architecture": 12,
    "Status": 30,
}


@dataclass(frozen=True)
class Column:
    """Named, sortable table column"""

    name: str
    width: int
    sortable: bool = True


@dataclass(frozen=True)
class SortKey:
    """Column name plus direction"""

    column: str = "Name"
    descending: bool = False


def _text_key(value: str) -> Tuple:
    return (value.lower(), value)


def _version_key(value: str) -> Tuple:
    """Order Debian versions (epoch, upstream, revision, ~), invalid ones last"""
    try:
        return (0, Version(value), "")
    except ValueError:
        return (1, None, value)


@dataclass(frozen=True)
class ColumnSchema:
    """
    Ordered column definitions with a default sort key.

    The sort key is validated on construction so a bad configuration
    fails before any listing is parsed.
    """

    columns: Tuple[Column, ...] = field(
        default_factory=lambda: tuple(
            Column(name, DEFAULT_WIDTHS[name]) for name in FIELD_NAMES
        )
    )
    sort_key: SortKey = field(default_factory=SortKey)

    def __post_init__(self):
        names = [column.name for column in self.columns]
        for name in names:
            if name not in FIELD_NAMES:
                raise SchemaError(
                    f"Unknown column: {name}",
                    details=f"Available: {', '.join(FIELD_NAMES)}",
                )
        if len(set(names)) != len(names):
            raise SchemaError("Duplicate column names", details=", ".join(names))
        for column in self.columns:
            if column.width <= 0:
                raise SchemaError(
                    f"Invalid width for column {column.name}",
                    details=str(column.width),
                )
        self.validate_sort_key(self.sort_key)

    @property
    def names(self) -> List[str]:
        return [column.name for column in self.columns]

    def field_index(self, name: str) -> int:
        """Position of a column's value in a record's fields"""
        self.column(name)
        return FIELD_NAMES.index(name)

    def column(self, name: str) -> Column:
        """Get column by name"""
        for column in self.columns:
            if column.name == name:
                return column
        raise SchemaError(
            f"Unknown column: {name}", details=f"Available: {', '.join(self.names)}"
        )

    def validate_sort_key(self, sort_key: SortKey) -> None:
        """
        Check that a sort key names a sortable column of this schema.

        Raises:
            SchemaError: If the column is missing or not sortable
        """
        column = self.column(sort_key.column)
        if not column.sortable:
            raise SchemaError(f"Column {column.name} is not sortable")

    def with_widths(self, widths: Dict[str, int]) -> "ColumnSchema":
        """Get a copy with some column widths overridden"""
        for name in widths:
            self.column(name)
        columns = tuple(
            Column(column.name, widths.get(column.name, column.width), column.sortable)
            for column in self.columns
        )
        return ColumnSchema(columns=columns, sort_key=self.sort_key)

    def with_sort_key(self, sort_key: SortKey) -> "ColumnSchema":
        """Get a copy with a different default sort key"""
        return ColumnSchema(columns=self.columns, sort_key=sort_key)

    def sort(
        self, records: Iterable[Record], sort_key: Optional[SortKey] = None
    ) -> List[Record]:
        """
        Sort records by a column without touching the records themselves.

        Args:
            records: Records to sort
            sort_key: Sort key, defaults to the schema's default

        Returns:
            New sorted list; ties keep input order
        """
        sort_key = sort_key or self.sort_key
        self.validate_sort_key(sort_key)
        index = self.field_index(sort_key.column)
        value_key: Callable[[str], Any] = (
            _version_key if sort_key.column == "Version" else _text_key
        )
        return sorted(
            records,
            key=lambda record: value_key(record.field(index)),
            reverse=sort_key.descending,
        )
