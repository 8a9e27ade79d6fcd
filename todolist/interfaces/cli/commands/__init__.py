"""CLI command groups for todolist.

Command groups:
- config: Show and change the stored configuration

Each command group is a Typer app that gets registered
with the main app using app.add_typer().
"""

from todolist.interfaces.cli.commands import config

__all__ = ["config"]
