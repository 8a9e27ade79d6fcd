"""CLI interface for todolist using Typer.

Usage:
    todolist run              # Launch the TUI
    todolist run -f removed   # Start in the trash view
    todolist qr               # Print the share QR code
    todolist config show      # Show configuration

The CLI is structured as:
- app: Main Typer application
- commands/: Command groups (config)
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

import logging
from typing import Optional

import typer
from rich.console import Console

from todolist import __version__
from todolist.domain.task import Filter
from todolist.global_config import get_global_config
from todolist.interfaces.cli.commands import config
from todolist.interfaces.cli.common import (
    configure_console_logging,
    resolve_log_level,
)
from todolist.qr import qr_text

logger = logging.getLogger(__name__)

# Create the main Typer application
app = typer.Typer(
    name="todolist",
    help="A terminal todo list with a trash bin",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"todolist version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """todolist - add, check off, trash and restore tasks."""
    pass


# =============================================================================
# Register Command Groups
# =============================================================================

app.add_typer(config.app, name="config")


# =============================================================================
# Top-Level Commands
# =============================================================================


@app.command("run")
def run(
    filter: Optional[Filter] = typer.Option(
        None,
        "--filter",
        "-f",
        help="View to start in (default from config)",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Logging level (default from config)",
        envvar="TODOLIST_LOG_LEVEL",
    ),
) -> None:
    """Launch the terminal UI."""
    from todolist.application import TaskStore
    from todolist.tui.app import TodoApp, configure_logging

    settings = get_global_config()
    configure_logging(resolve_log_level(log_level, settings))

    store = TaskStore(filter=filter or settings.default_filter)
    TodoApp(store=store, config=settings).run()


@app.command("qr")
def qr(
    url: Optional[str] = typer.Option(
        None, "--url", "-u", help="URL to encode (default from config)"
    ),
) -> None:
    """Print the share QR code to the terminal."""
    settings = get_global_config()
    configure_console_logging(resolve_log_level(None, settings))
    target = url or settings.qr_url
    logger.debug(f"Rendering QR code for {target}")

    console = Console()
    console.print(qr_text(target))
    console.print(target)


__all__ = ["app"]
