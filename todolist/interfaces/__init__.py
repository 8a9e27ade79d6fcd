"""Outer interfaces for todolist.

- cli: Typer command line (launches the TUI, prints the QR code,
  manages configuration)
"""
