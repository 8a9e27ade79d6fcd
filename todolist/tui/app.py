"""Main todolist TUI Application.

The TodoApp class is the entry point for the terminal user interface.
It owns nothing but the wiring: the TaskStore is created by the caller
and handed in, and the screens mutate it in response to user events.
"""

import logging
from typing import Optional

from textual.app import App
from textual.binding import Binding
from textual.logging import TextualHandler

from todolist.application import TaskStore
from todolist.global_config import AppConfig

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Route standard logging records to the Textual devtools console."""
    logging.basicConfig(level=level, handlers=[TextualHandler()], force=True)


class TodoApp(App):
    """todolist TUI Application.

    A terminal todo list with completed/active/trash views and a QR code
    overlay pointing at the deployed app.
    """

    TITLE = "todolist"
    SUB_TITLE = "Tasks"

    CSS = """
    Screen {
        background: $surface;
    }

    Footer {
        dock: bottom;
        height: 1;
    }
    """

    BINDINGS = [
        Binding("s", "show_qr", "QR", show=True),
        Binding("question_mark", "show_help", "Help", show=True, key_display="?"),
        Binding("q", "quit", "Quit", show=False),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        store: Optional[TaskStore] = None,
        config: Optional[AppConfig] = None,
    ):
        """Initialize the todolist TUI application.

        Args:
            store: Task store to drive. A new empty one is created if None.
            config: Configuration. Defaults are used if None.
        """
        super().__init__()
        self._app_config = config or AppConfig()
        self._task_store = store if store is not None else TaskStore(
            filter=self._app_config.default_filter
        )

    @property
    def store(self) -> TaskStore:
        """The task store behind the UI."""
        return self._task_store

    @property
    def app_config(self) -> AppConfig:
        return self._app_config

    def on_mount(self) -> None:
        """Handle app mount - show the task list."""
        from todolist.tui.screens import MainScreen

        logger.info(f"Starting with filter {self._task_store.filter.value}")
        self.push_screen(MainScreen(self._task_store))

    # =========================================================================
    # Actions
    # =========================================================================

    def action_show_qr(self) -> None:
        """Show the QR code overlay."""
        from todolist.tui.screens import QRModal

        if isinstance(self.screen, QRModal):
            return
        self.push_screen(QRModal(self._app_config.qr_url))

    def action_show_help(self) -> None:
        """Show the help modal with keybinding reference."""
        from todolist.tui.screens import HelpModal

        if isinstance(self.screen, HelpModal):
            return
        self.push_screen(HelpModal())


__all__ = ["TodoApp", "configure_logging"]
