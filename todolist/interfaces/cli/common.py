"""Shared utilities for todolist CLI commands.

Formatted output helpers (error, success, info) and the logging
setup used by every command.
"""

import logging
from typing import Optional

import typer

from todolist.global_config import LOG_LEVELS, AppConfig


def print_error(msg: str) -> None:
    """Print a formatted error message.

    Args:
        msg: Error message to display
    """
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    """Print a formatted success message.

    Args:
        msg: Success message to display
    """
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    """Print a formatted info message.

    Args:
        msg: Info message to display
    """
    typer.echo(typer.style(msg, fg=typer.colors.CYAN))


def resolve_log_level(explicit: Optional[str], config: AppConfig) -> str:
    """Pick the log level from the CLI option, else the config.

    Raises:
        typer.Exit: If the level is not a known logging level.
    """
    level = (explicit or config.log_level).upper()
    if level not in LOG_LEVELS:
        print_error(f"Unknown log level '{level}'. Use one of: {', '.join(LOG_LEVELS)}")
        raise typer.Exit(1)
    return level


def configure_console_logging(level: str) -> None:
    """Log to stderr for commands that do not start the TUI."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )
