"""QR code display widget."""

from typing import Optional

from textual.widgets import Static

from todolist.qr import qr_text


class QRCodeWidget(Static):
    """Static block of half-block characters encoding a URL."""

    DEFAULT_CSS = """
    QRCodeWidget {
        width: auto;
        height: auto;
    }
    """

    def __init__(
        self,
        url: str,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        self._url = url
        super().__init__(qr_text(url), id=id, classes=classes)

    @property
    def url(self) -> str:
        """The encoded URL."""
        return self._url
