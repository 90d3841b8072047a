"""Package listing commands"""

from .list_command import list_packages, summary

__all__ = ["list_packages", "summary"]
