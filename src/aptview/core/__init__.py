# Core functionality: parsing, statistics and the table session
from .parser import Record, sanitize, tokenize, build_table, parse_listing
from .statistics import (
    AggregationMode,
    Category,
    StatisticsSnapshot,
    aggregate,
    classify,
)
from .schema import Column, ColumnSchema, SortKey
from .runner import CommandRunner
from .session import CommandContext, TableSession
from .config import PRESETS, Settings, load_settings
from .exceptions import AptViewError, CommandError, ConfigError, SchemaError

__all__ = [
    "Record",
    "sanitize",
    "tokenize",
    "build_table",
    "parse_listing",
    "AggregationMode",
    "Category",
    "StatisticsSnapshot",
    "aggregate",
    "classify",
    "Column",
    "ColumnSchema",
    "SortKey",
    "CommandRunner",
    "CommandContext",
    "TableSession",
    "PRESETS",
    "Settings",
    "load_settings",
    "AptViewError",
    "CommandError",
    "ConfigError",
    "SchemaError",
]
