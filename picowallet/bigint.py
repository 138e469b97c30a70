"""Arithmetic on big-endian byte strings holding unsigned integers."""

from __future__ import annotations


def _to_int(data: bytes) -> int:
    return int.from_bytes(data, "big")


def bytewise_add(a: bytes, b: bytes) -> tuple[bytes, int]:
    """Return (a + b) truncated to the longer operand's width, and the carry (0 or 1)."""
    width = max(len(a), len(b))
    total = _to_int(a) + _to_int(b)
    modulus = 1 << (8 * width)
    return (total % modulus).to_bytes(width, "big"), int(total >= modulus)


def bytewise_subtract(a: bytes, b: bytes) -> tuple[bytes, int]:
    """Return (a - b) modulo the longer operand's width, and the borrow (0 or 1)."""
    width = max(len(a), len(b))
    difference = _to_int(a) - _to_int(b)
    modulus = 1 << (8 * width)
    return (difference % modulus).to_bytes(width, "big"), int(difference < 0)


def insert_and_shift(a: bytes, value: int) -> bytes:
    """Return a with value placed at its head and the rest shifted one place right."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"value must fit in one byte, got {value}")
    return bytes([value]) + bytes(a)


def bytewise_cmp(a: bytes, b: bytes) -> int:
    """Compare the numbers held in a and b: 1 if a > b, 0 if equal, -1 if a < b."""
    x, y = _to_int(a), _to_int(b)
    return (x > y) - (x < y)


def bytewise_mod(a: bytes, b: bytes) -> bytes:
    """Return a % b, with the width of a."""
    divisor = _to_int(b)
    if divisor == 0:
        raise ZeroDivisionError("modulo by a zero byte string")
    return (_to_int(a) % divisor).to_bytes(len(a), "big")