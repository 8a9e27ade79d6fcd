"""QR share overlay for the todolist TUI."""

from textual import events
from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Label

from todolist.tui.widgets import QRCodeWidget


class QRModal(ModalScreen):
    """Dimmed overlay showing a QR code for the app URL.

    Any click, Escape, or pressing ``s`` again closes it.
    """

    BINDINGS = [
        ("escape", "dismiss", "Close"),
        ("s", "dismiss", "Close"),
    ]

    CSS = """
    QRModal {
        align: center middle;
        background: black 80%;
    }

    #qr-modal {
        width: auto;
        height: auto;
        padding: 1 2;
        background: white;
        color: black;
    }

    #qr-url {
        width: 100%;
        text-align: center;
        margin-top: 1;
    }
    """

    def __init__(self, url: str) -> None:
        super().__init__()
        self._url = url

    @property
    def url(self) -> str:
        return self._url

    def compose(self) -> ComposeResult:
        with Container(id="qr-modal"):
            yield QRCodeWidget(self._url, id="qr-code")
            yield Label(self._url, id="qr-url")

    def on_click(self, event: events.Click) -> None:
        self.dismiss()
