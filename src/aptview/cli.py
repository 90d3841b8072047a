"""Command-line interface for APT package tables"""

import click
from rich.panel import Panel

from . import __version__
from .commands import list_packages, summary
from .ui.console import console
from .ui.style import DEFAULT_PANEL


class AptViewGroup(click.Group):
    """Command group with custom help formatting"""

    def format_help(self, ctx, formatter):
        """Format help message with panel styling"""
        console.print(
            Panel.fit(
                "\n".join(
                    [
                        "[bold blue]Package Tables:[/bold blue]",
                        f"  [cyan]list[/cyan]        [dim]List packages as a sortable table[/dim] ([cyan]-u[/cyan]: upgradable, [cyan]-a[/cyan]: all) (alias: [cyan]ls[/cyan])",
                        f"  [cyan]summary[/cyan]     [dim]Show installed / upgradable / residual / auto-installed counts[/dim] (alias: [cyan]stats[/cyan])",
                        "",
                        "[bold blue]Common Options:[/bold blue]",
                        f"  [cyan]-H, --host[/cyan]  [dim]Run the listing on user@host over ssh[/dim]",
                        f"  [cyan]-s, --sort[/cyan]  [dim]Sort by Name, Source, Version, Architecture or Status[/dim] ([cyan]-r[/cyan]: reverse)",
                        f"  [cyan]--config[/cyan]    [dim]Use another config file[/dim]",
                        "",
                        "[bold blue]Global Options:[/bold blue]",
                        f"  [cyan]--version[/cyan]   [dim]Show version number[/dim] ([cyan]alias: -V[/cyan])",
                    ]
                ),
                title="APTView - tables of APT package listings",
                title_align=DEFAULT_PANEL.title_align,
                border_style=DEFAULT_PANEL.border_style,
                padding=(2, 2),
            )
        )


@click.group(cls=AptViewGroup)
@click.option(
    "--version",
    "-V",
    is_flag=True,
    help="Show version number",
    is_eager=True,
    expose_value=False,
    callback=lambda ctx, param, value: value
    and (console.print(f"aptview {__version__}", highlight=False) or ctx.exit()),
)
def cli():
    """APTView - APT package listing tables"""
    pass


cli.add_command(list_packages)
cli.add_command(summary)

# Register command aliases
cli.add_command(list_packages, name="ls")
cli.add_command(summary, name="stats")


if __name__ == "__main__":
    cli()
