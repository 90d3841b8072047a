# Parsing of `apt list` output into table records
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

# Lines apt prints around the data: notices, the CLI stability warning
# and the "Listing..." progress line
DIAGNOSTIC_PREFIXES = ("N:", "WARNING:", "Listing...", "Listing")

FIELD_NAMES = ("Name", "Source", "Version", "Architecture", "Status")
MISSING_STATUS = "none"

_DELIMITERS = re.compile(r"[ /]+")


@dataclass(frozen=True)
class Record:
    """One row of the package table"""

    ordinal: int
    fields: Tuple[str, ...]

    def field(self, index: int) -> str:
        """Get field by position, empty string for short records"""
        if index < len(self.fields):
            return self.fields[index]
        return ""

    @property
    def name(self) -> str:
        return self.field(0)

    @property
    def source(self) -> str:
        return self.field(1)

    @property
    def version(self) -> str:
        return self.field(2)

    @property
    def architecture(self) -> str:
        return self.field(3)

    @property
    def status(self) -> str:
        return self.field(4)


def sanitize(text: str) -> List[str]:
    """
    Drop empty and diagnostic lines from raw list output.

    Args:
        text: Raw multi-line command output

    Returns:
        Remaining lines in their original order
    """
    lines = []
    for line in text.splitlines():
        if not line.strip():
            continue
        if line.startswith(DIAGNOSTIC_PREFIXES):
            continue
        lines.append(line)
    return lines


def tokenize(line: str) -> List[str]:
    """
    Split a sanitized line into fields.

    Name, source, version and architecture are separated by runs of
    spaces or slashes. Whatever follows the architecture is the status
    segment and is kept whole, e.g. "[upgradable from: 1.9]".

    Args:
        line: One sanitized line

    Returns:
        List of 4 fields, or 5 when a status segment is present
    """
    return _DELIMITERS.split(line.strip(), maxsplit=len(FIELD_NAMES) - 1)


def build_table(rows: Iterable[List[str]], start: int = 1) -> List[Record]:
    """
    Number tokenized rows and normalize them into records.

    Args:
        rows: Tokenized field lists in input order
        start: First ordinal to assign

    Returns:
        Records with contiguous ordinals
    """
    records = []
    for ordinal, fields in enumerate(rows, start=start):
        fields = list(fields)
        if len(fields) == len(FIELD_NAMES) - 1:
            fields.append(MISSING_STATUS)
        records.append(Record(ordinal=ordinal, fields=tuple(fields)))
    return records


def parse_listing(text: Optional[str]) -> List[Record]:
    """Sanitize, tokenize and build a table from raw output"""
    if not text:
        return []
    return build_table(tokenize(line) for line in sanitize(text))
