# Configuration file handling
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union

import tomlkit
from tomlkit.exceptions import TOMLKitError

from .exceptions import ConfigError, SchemaError
from .schema import ColumnSchema, SortKey

CONFIG_ENV = "APTVIEW_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/aptview/config.toml")

PRESETS = {
    "installed": "apt list --installed",
    "upgradable": "apt list --upgradable",
    "all": "apt list",
}


@dataclass
class Settings:
    """Resolved aptview settings"""

    command: str = PRESETS["installed"]
    target: Optional[str] = None
    schema: ColumnSchema = field(default_factory=ColumnSchema)


def default_config_path() -> Path:
    """Config path from the environment, or the per-user default"""
    return Path(os.environ.get(CONFIG_ENV) or DEFAULT_CONFIG_PATH).expanduser()


def _table(data, name: str) -> dict:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table")
    return section


def parse_settings(content: str) -> Settings:
    """
    Parse settings from TOML text.

    Args:
        content: TOML document

    Returns:
        Settings with a validated column schema

    Raises:
        ConfigError: If the document is not valid TOML or has wrong types
        SchemaError: If columns or the sort key do not fit the schema
    """
    try:
        data = tomlkit.parse(content).unwrap()
    except TOMLKitError as e:
        raise ConfigError("Invalid configuration file", details=str(e)) from e

    list_section = _table(data, "list")
    columns_section = _table(data, "columns")
    sort_section = _table(data, "sort")

    settings = Settings()
    if "command" in list_section:
        settings.command = str(list_section["command"])
    if list_section.get("target"):
        settings.target = str(list_section["target"])

    widths: Dict[str, int] = {}
    for name, width in columns_section.items():
        if not isinstance(width, int) or isinstance(width, bool):
            raise ConfigError(f"Width of column {name} must be an integer")
        widths[name] = width

    sort_key = SortKey(
        column=str(sort_section.get("column", "Name")),
        descending=bool(sort_section.get("descending", False)),
    )

    schema = ColumnSchema()
    if widths:
        schema = schema.with_widths(widths)
    settings.schema = schema.with_sort_key(sort_key)
    return settings


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load settings from a config file.

    Args:
        path: Config file path, defaults to default_config_path()

    Returns:
        Settings; defaults when the default file does not exist

    Raises:
        ConfigError: If an explicitly given file is missing or unreadable
        SchemaError: If the configured columns or sort key are invalid
    """
    explicit = path is not None
    file_path = Path(path).expanduser() if explicit else default_config_path()

    if not file_path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {file_path}")
        return Settings()

    try:
        with file_path.open("r", encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise ConfigError(f"Failed to read {file_path}", details=str(e)) from e

    try:
        return parse_settings(content)
    except SchemaError as e:
        raise SchemaError(f"{e.message} (in {file_path})", details=e.details) from e
