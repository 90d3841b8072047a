# UI components for package tables
from .console import console, TableView
from .style import StyleType, SymbolType

__all__ = [
    # Console
    "console",
    "TableView",
    # Style
    "StyleType",
    "SymbolType",
]
