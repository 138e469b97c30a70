"""The BIP-39 English word list and lookups into it."""

from __future__ import annotations

from functools import lru_cache

from picowallet.wordlist_high import WORDS_HIGH
from picowallet.wordlist_low import WORDS_LOW

WORD_COUNT = 2048

_WORDS: tuple[str, ...] = WORDS_LOW + WORDS_HIGH


@lru_cache(maxsize=1)
def _index_map() -> dict[str, int]:
    return {word: position for position, word in enumerate(_WORDS)}


def word_list() -> tuple[str, ...]:
    """Return the 2048 BIP-39 words in their standard order."""
    return _WORDS


def word_index(word: str) -> int:
    """Return the position of word in the list; raise ValueError if it is not there."""
    try:
        return _index_map()[word]
    except KeyError:
        raise ValueError(f"{word!r} is not a BIP-39 word") from None