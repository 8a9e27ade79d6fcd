"""todolist CLI.

This module re-exports the CLI from todolist.interfaces.cli so that
``python -m todolist.cli`` works without the installed entry point.
"""

from todolist.interfaces.cli import app
from todolist.interfaces.cli.main import main

__all__ = ["app", "main"]

if __name__ == "__main__":
    main()
