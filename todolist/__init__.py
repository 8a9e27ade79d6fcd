"""todolist - a terminal todo list with a trash bin and a QR share overlay."""

__version__ = "0.1.0"
