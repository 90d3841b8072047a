"""
APTView - structured, sortable views of APT package listings.
Parses `apt list` output (local or over ssh) into a markable table
and keeps installed / upgradable / residual / auto-installed counts.
"""

__version__ = "0.1.0"

from .core import TableSession

__all__ = ["TableSession", "__version__"]
