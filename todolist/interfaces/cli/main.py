"""Entry point for the todolist CLI.

Usage:
    python -m todolist.interfaces.cli.main

Or via installed entry point:
    todolist <command>
"""

from todolist.interfaces.cli import app


def main() -> None:
    """Run the todolist CLI application."""
    app()


if __name__ == "__main__":
    main()
