"""Configuration CLI commands.

Commands for inspecting and changing ~/.todolist/config.json.
"""

from typing import Optional

import typer

from todolist.domain.task import Filter
from todolist.global_config import (
    AppConfig,
    get_config_file,
    get_global_config,
    save_global_config,
)
from todolist.interfaces.cli.common import print_error, print_info, print_success

app = typer.Typer(help="Configuration commands")


@app.command("show")
def show() -> None:
    """Show the effective configuration."""
    config = get_global_config()
    print_info(f"Config file: {get_config_file()}")
    typer.echo(f"qr_url:         {config.qr_url}")
    typer.echo(f"default_filter: {config.default_filter.value}")
    typer.echo(f"log_level:      {config.log_level}")


@app.command("set")
def set_values(
    qr_url: Optional[str] = typer.Option(None, "--qr-url", help="URL shown in the QR overlay"),
    default_filter: Optional[Filter] = typer.Option(
        None, "--default-filter", help="View selected at startup"
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level"),
) -> None:
    """Update one or more configuration values."""
    config = get_global_config()
    updates = {}
    if qr_url is not None:
        updates["qr_url"] = qr_url
    if default_filter is not None:
        updates["default_filter"] = default_filter
    if log_level is not None:
        updates["log_level"] = log_level

    if not updates:
        print_error("Nothing to set. Pass at least one option.")
        raise typer.Exit(1)

    try:
        updated = AppConfig(**{**config.model_dump(), **updates})
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(1)

    save_global_config(updated)
    print_success(f"Updated: {', '.join(sorted(updates))}")


@app.command("reset")
def reset() -> None:
    """Restore the default configuration."""
    save_global_config(AppConfig())
    print_success("Configuration reset to defaults")
