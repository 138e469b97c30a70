"""Random byte source mixing a 32-bit entropy source with LCG and xorshift states."""

from __future__ import annotations

import secrets
from collections.abc import Callable


def _system_rand_32() -> int:
    return secrets.randbits(32)


class ByteGenerator:
    """Produces random bytes from a callable returning 32-bit integers."""

    def __init__(self, source: Callable[[], int] | None = None) -> None:
        self._source = source if source is not None else _system_rand_32
        self._lcg_state = 0
        self._xorshift_state = 0

    def next_byte(self) -> int:
        """Return the next byte, 0 to 255."""
        entropy = self._source() & 0xFF

        self._lcg_state = (5 * self._lcg_state + 129) & 0xFF

        state = self._xorshift_state
        state ^= (state << 6) & 0xFF
        state ^= state >> 3
        state ^= (state << 5) & 0xFF
        self._xorshift_state = state

        return self._lcg_state ^ self._xorshift_state ^ entropy

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self.next_byte()


_default_generator = ByteGenerator()


def get_random_byte() -> int:
    """Return one random byte from the shared generator."""
    return _default_generator.next_byte()