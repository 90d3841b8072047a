"""Package listing commands"""

import sys
from typing import Optional

import click

from ..core.config import PRESETS, Settings, load_settings
from ..core.exceptions import AptViewError
from ..core.runner import CommandRunner
from ..core.schema import SortKey
from ..core.session import TableSession
from ..ui.console import (
    TableView,
    console,
    create_statistics_summary,
    create_summary_panel,
    print_error,
    print_info,
    print_warning,
    progress_status,
)


def resolve_command(
    settings: Settings,
    upgradable: bool = False,
    show_all: bool = False,
    command: Optional[str] = None,
) -> str:
    """Pick the list command from options, falling back to the config"""
    if command:
        return command
    if upgradable:
        return PRESETS["upgradable"]
    if show_all:
        return PRESETS["all"]
    return settings.command


def build_session(
    settings: Settings,
    sort: Optional[str] = None,
    reverse: bool = False,
    display: Optional[TableView] = None,
) -> TableSession:
    """Create a session, applying any sort override to the schema"""
    schema = settings.schema
    if sort or reverse:
        schema = schema.with_sort_key(
            SortKey(
                column=sort or schema.sort_key.column,
                descending=reverse != schema.sort_key.descending,
            )
        )
    return TableSession(CommandRunner(), display=display, schema=schema)


def run_session(session: TableSession, command: str, target: Optional[str]) -> None:
    where = f" on {target}" if target else ""
    with progress_status(f"Running {command}{where}..."):
        session.run_list(command, target)


def fail(error: AptViewError) -> None:
    print_error(error.message, details=error.details)
    sys.exit(1)


def list_options(f):
    """Options shared by list and summary"""
    f = click.option(
        "-c", "--config", "config_path", type=click.Path(), help="Config file"
    )(f)
    f = click.option("-H", "--host", help="Remote target (user@host)")(f)
    f = click.option("--command", "command", help="Explicit list command")(f)
    f = click.option(
        "-a", "--all", "show_all", is_flag=True, help="List all known packages"
    )(f)
    f = click.option(
        "-u", "--upgradable", is_flag=True, help="List upgradable packages only"
    )(f)
    return f


@click.command(name="list")
@list_options
@click.option("-s", "--sort", help="Column to sort by")
@click.option("-r", "--reverse", is_flag=True, help="Reverse sort order")
def list_packages(
    upgradable: bool,
    show_all: bool,
    command: Optional[str],
    host: Optional[str],
    config_path: Optional[str],
    sort: Optional[str],
    reverse: bool,
):
    """List packages as a table"""
    try:
        settings = load_settings(config_path)
        list_command = resolve_command(settings, upgradable, show_all, command)
        session = build_session(
            settings, sort=sort, reverse=reverse, display=TableView(list_command)
        )
        run_session(session, list_command, host or settings.target)
    except AptViewError as e:
        fail(e)
        return

    if not session.table:
        print_warning("No packages found")
    summary_content = create_statistics_summary(
        session.statistics, complete=session.statistics_complete
    )
    console.print(create_summary_panel("Package Summary", summary_content))


@click.command()
@list_options
def summary(
    upgradable: bool,
    show_all: bool,
    command: Optional[str],
    host: Optional[str],
    config_path: Optional[str],
):
    """Show package counts only"""
    try:
        settings = load_settings(config_path)
        list_command = resolve_command(settings, upgradable, show_all, command)
        session = build_session(settings)
        run_session(session, list_command, host or settings.target)
    except AptViewError as e:
        fail(e)
        return

    print_info(f"{len(session.table)} packages listed by {list_command}")
    summary_content = create_statistics_summary(
        session.statistics, complete=session.statistics_complete
    )
    console.print(create_summary_panel("Package Summary", summary_content))
