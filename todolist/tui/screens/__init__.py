"""TUI screens for todolist."""

from .main import FILTER_OPTIONS, HelpModal, MainScreen
from .qr import QRModal

__all__ = [
    "FILTER_OPTIONS",
    "HelpModal",
    "MainScreen",
    "QRModal",
]
