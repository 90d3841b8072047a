# Package status statistics
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional, Set

from .parser import Record

UPGRADABLE_MARKERS = ("--upgradable", "--upgradeable")


class Category(str, Enum):
    """Status categories counted by the aggregator, valued by their keyword"""

    UPGRADABLE = "upgradable"
    INSTALLED = "installed"
    RESIDUAL = "residual-config"
    AUTOMATIC = "automatic"


class AggregationMode(str, Enum):
    """How a new snapshot replaces the previous one"""

    FULL = "full"
    UPGRADABLE_ONLY = "upgradable_only"

    @classmethod
    def from_command(cls, command: str) -> "AggregationMode":
        """Upgradable-only listings cannot say anything about other counters"""
        if any(marker in command for marker in UPGRADABLE_MARKERS):
            return cls.UPGRADABLE_ONLY
        return cls.FULL


@dataclass(frozen=True)
class StatisticsSnapshot:
    """Aggregate package counters"""

    installed: int = 0
    upgradable: int = 0
    residual: int = 0
    auto_installed: int = 0

    def as_dict(self) -> dict:
        return {
            "installed": self.installed,
            "upgradable": self.upgradable,
            "residual": self.residual,
            "auto_installed": self.auto_installed,
        }


def classify(status: str) -> Set[Category]:
    """
    Get every category whose keyword occurs in a status field.

    Categories are not exclusive: "[installed,automatic]" is both
    INSTALLED and AUTOMATIC.

    Args:
        status: Status field of a record

    Returns:
        Set of matching categories, empty when nothing matches
    """
    return {category for category in Category if category.value in status}


def aggregate(
    records: Iterable[Record],
    mode: AggregationMode = AggregationMode.FULL,
    previous: Optional[StatisticsSnapshot] = None,
) -> StatisticsSnapshot:
    """
    Count records per category.

    Args:
        records: Current table
        mode: FULL replaces every counter, UPGRADABLE_ONLY replaces only
            the upgradable counter and keeps the others from `previous`
        previous: Snapshot the counters are carried over from

    Returns:
        New statistics snapshot
    """
    counts = {category: 0 for category in Category}
    for record in records:
        for category in classify(record.status):
            counts[category] += 1

    if mode is AggregationMode.UPGRADABLE_ONLY:
        return replace(
            previous or StatisticsSnapshot(),
            upgradable=counts[Category.UPGRADABLE],
        )

    return StatisticsSnapshot(
        installed=counts[Category.INSTALLED],
        upgradable=counts[Category.UPGRADABLE],
        residual=counts[Category.RESIDUAL],
        auto_installed=counts[Category.AUTOMATIC],
    )
