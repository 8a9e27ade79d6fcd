"""TUI widgets for todolist."""

from .qr_code import QRCodeWidget
from .task_row import TaskRow

__all__ = [
    "QRCodeWidget",
    "TaskRow",
]
