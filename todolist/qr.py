"""QR code rendering for the terminal.

Builds the module matrix with ``qrcode`` and packs two rows of modules into
each line of text using half-block characters, so the code keeps a roughly
square aspect ratio in a terminal cell grid.
"""

import qrcode
from rich.text import Text

# Dark modules are drawn in the foreground colour on a light background.
QR_STYLE = "black on white"

_BLOCKS = {
    (True, True): "█",  # full block
    (True, False): "▀",  # upper half
    (False, True): "▄",  # lower half
    (False, False): " ",
}


def qr_matrix(data: str, border: int = 2) -> list[list[bool]]:
    """Return the QR module matrix for ``data``, quiet zone included.

    Args:
        data: Payload to encode (usually a URL)
        border: Quiet zone width in modules

    Returns:
        Square matrix where True marks a dark module
    """
    code = qrcode.QRCode(border=border)
    code.add_data(data)
    code.make(fit=True)
    return code.get_matrix()


def qr_lines(data: str, border: int = 2) -> list[str]:
    """Render ``data`` as lines of half-block characters.

    Each output line covers two matrix rows. An odd final row is paired
    with a light row.
    """
    matrix = qr_matrix(data, border=border)
    width = len(matrix[0]) if matrix else 0
    blank = [False] * width
    lines = []
    for top_index in range(0, len(matrix), 2):
        top = matrix[top_index]
        bottom = matrix[top_index + 1] if top_index + 1 < len(matrix) else blank
        lines.append("".join(_BLOCKS[(t, b)] for t, b in zip(top, bottom)))
    return lines


def qr_text(data: str, border: int = 2) -> Text:
    """Render ``data`` as a Rich Text renderable ready for printing."""
    return Text("\n".join(qr_lines(data, border=border)), style=QR_STYLE)
