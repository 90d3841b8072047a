"""Style definitions for consistent UI appearance"""

from rich.style import Style
from enum import Enum
from dataclasses import dataclass


@dataclass
class PanelConfig:
    """Standard panel configuration"""

    title_align: str = "left"
    border_style: str = "blue"
    padding: tuple = (1, 2)


@dataclass
class TableConfig:
    """Standard table configuration"""

    title_justify: str = "left"
    show_header: bool = True
    header_style: str = "bold magenta"
    expand: bool = False
    padding: tuple = (0, 1)


class StyleType(Enum):
    """Style definitions that can be used directly without .value"""

    # Status styles
    ERROR = Style(color="red", bold=True)
    WARNING = Style(color="yellow")
    INFO = Style(color="blue")

    # Package status styles
    INSTALLED = Style(color="green")
    UPGRADABLE = Style(color="red")
    RESIDUAL = Style(color="yellow")
    AUTOMATIC = Style(dim=True)
    NONE = Style(color="bright_black")

    # Package related styles
    PACKAGE_NAME = Style(color="cyan")
    PACKAGE_VERSION = Style(color="bright_black")
    MARKED = Style(color="magenta", bold=True)

    # Other styles
    DIM = Style(dim=True)

    def __call__(self):
        return self.value


class SymbolType(str, Enum):
    ERROR = "✗"
    WARNING = "⚠"
    INFO = "ℹ"
    MARK = "*"

    def __format__(self, format_spec):
        return str(self.value)


# Label and color for each statistics counter
SUMMARY_LABELS = {
    "installed": ("Installed", "green"),
    "upgradable": ("Upgradable", "red"),
    "residual": ("Residual config", "yellow"),
    "auto_installed": ("Auto-installed", "cyan"),
}


def get_status_style(status: str) -> Style:
    """Get style for a status field, most urgent keyword first"""
    for keyword, style in (
        ("upgradable", StyleType.UPGRADABLE),
        ("residual-config", StyleType.RESIDUAL),
        ("automatic", StyleType.AUTOMATIC),
        ("installed", StyleType.INSTALLED),
    ):
        if keyword in status:
            return style()
    return StyleType.NONE()


# Default configurations
DEFAULT_PANEL = PanelConfig()
DEFAULT_TABLE = TableConfig()
