"""Text rendering of key bytes and of QR code pairs for terminal output."""

from __future__ import annotations

from collections.abc import Iterator
from enum import IntEnum

PRIVATE_KEY_LENGTH = 32
UNCOMPRESSED_PUBLIC_KEY_LENGTH = 64
PUBLIC_KEY_LENGTH = 33
CHAIN_CODE_LENGTH = 32
FINGERPRINT_LENGTH = 4

QR_CODE_SIZE = 29
QR_CODE_BYTES = 106

_FULL = "\u2588\u2588"
_EMPTY = "  "
_GAP = "    "


class BTCNetwork(IntEnum):
    """Address version byte of a Bitcoin network."""

    MAIN_NET = 0x00
    TEST_NET = 0x6F


def format_bytes(data: bytes, formatted: bool = False) -> str:
    """Render bytes as one hex string, or as a table of 0xNN values, eight per line."""
    if not formatted:
        return "0x" + bytes(data).hex().upper()
    parts = ["    "]
    for position, value in enumerate(data):
        parts.append(f"0x{value:02X}")
        parts.append("\n    " if position > 0 and (position + 1) % 8 == 0 else " ")
    return "".join(parts)


def _rows(qr: bytes) -> Iterator[str]:
    needed = -(-(QR_CODE_SIZE * QR_CODE_SIZE) // 8)
    if len(qr) < needed:
        raise ValueError(f"QR code needs {needed} bytes, got {len(qr)}")
    for y in range(QR_CODE_SIZE):
        cells = []
        for x in range(QR_CODE_SIZE):
            bit = y * QR_CODE_SIZE + x
            set_ = qr[bit // 8] & (1 << (7 - bit % 8))
            cells.append(_FULL if set_ else _EMPTY)
        yield "".join(cells)


def render_qr_pair(private_qr: bytes, public_qr: bytes) -> str:
    """Draw two bit-packed QR codes side by side, each framed by a border and quiet zone."""
    private_rows = list(_rows(private_qr))
    public_rows = list(_rows(public_qr))

    border = _FULL * (QR_CODE_SIZE + 2)
    blank = _EMPTY * QR_CODE_SIZE

    def framed(left: str, right: str) -> str:
        return (
            _FULL + _EMPTY + left + _EMPTY + _FULL + _GAP
            + _FULL + _EMPTY + right + _EMPTY + _FULL
        )

    lines = [border + _GAP + border, framed(blank, blank)]
    lines.extend(framed(left, right) for left, right in zip(private_rows, public_rows))
    lines.append(framed(blank, blank))
    lines.append(border + _GAP + border)
    return "\n".join(lines) + "\n"