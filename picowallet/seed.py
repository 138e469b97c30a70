"""BIP-39 entropy, mnemonic sentences and seed derivation."""

from __future__ import annotations

import hashlib
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from picowallet.hashing import sha256
from picowallet.randomness import get_random_byte
from picowallet.wordlist import word_index, word_list

EXTENDED_MASTER_KEY_LENGTH = 64
ENTROPY_BITS = 256
ENTROPY_CHECKSUM_BYTES = 1
MAX_MNEMONIC_PASSPHRASE_LENGTH = 16
MNEMONIC_LENGTH = 24
MAX_MNEMONIC_WORD_LENGTH = 8

MIN_RANDOM_BITS = 128
MAX_RANDOM_BITS = 256
MNEMONIC_PREFIX = b"mnemonic"
PBKDF2_ROUNDS = 2048

_BITS_PER_WORD = 11
_WORD_MASK = (1 << _BITS_PER_WORD) - 1


@dataclass(frozen=True)
class SeedContext:
    """Entropy (with checksum), the mnemonic it encodes and the derived seed."""

    entropy: bytes
    mnemonic: tuple[str, ...]
    seed: bytes

    @property
    def private_key(self) -> bytes:
        """The first half of the seed, used as the master private key."""
        return self.seed[:32]

    @property
    def chain_code(self) -> bytes:
        """The second half of the seed, used as the master chain code."""
        return self.seed[32:]


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def _normalise_bits(num_bits: int) -> int:
    num_bits = min(max(num_bits, MIN_RANDOM_BITS), MAX_RANDOM_BITS)
    return -(-num_bits // 32) * 32


def create_random_bits(
    num_bits: int, random_byte: Callable[[], int] = get_random_byte
) -> bytes:
    """Return random bytes for num_bits, clamped to 128..256 and rounded up to a multiple of 32."""
    num_bits = _normalise_bits(num_bits)
    return bytes(random_byte() & 0xFF for _ in range(num_bits // 8))


def apply_entropy_checksum(data: bytes, num_bits: int) -> bytes:
    """Return the first num_bits of data followed by the whole bytes holding its SHA-256 checksum."""
    byte_count = num_bits // 8
    if len(data) < byte_count:
        raise ValueError(f"need {byte_count} bytes of entropy, got {len(data)}")
    payload = bytes(data[:byte_count])
    checksum_bits = num_bits // 32
    checksum_bytes = (checksum_bits + 7) // 8
    return payload + sha256(payload)[:checksum_bytes]


def create_entropy(
    num_bits: int, random_byte: Callable[[], int] = get_random_byte
) -> bytes:
    """Return fresh random entropy with its checksum appended."""
    random_bytes = create_random_bits(num_bits, random_byte)
    return apply_entropy_checksum(random_bytes, len(random_bytes) * 8)


def entropy_to_mnemonic(entropy: bytes, num_entropy_bits: int) -> list[str]:
    """Split checksummed entropy into 11-bit groups and map each to a BIP-39 word."""
    words = word_list()
    word_count = -(-num_entropy_bits // _BITS_PER_WORD)
    total_bits = len(entropy) * 8
    if word_count * _BITS_PER_WORD > total_bits:
        raise ValueError(
            f"{word_count} words need {word_count * _BITS_PER_WORD} bits, "
            f"entropy holds {total_bits}"
        )
    value = int.from_bytes(entropy, "big")
    return [
        words[(value >> (total_bits - (position + 1) * _BITS_PER_WORD)) & _WORD_MASK]
        for position in range(word_count)
    ]


def validate_mnemonic(words: Iterable[str]) -> bool:
    """Check that a 24-word sentence uses known words and carries a matching checksum."""
    words = list(words)
    if len(words) != MNEMONIC_LENGTH:
        return False
    value = 0
    for word in words:
        try:
            value = (value << _BITS_PER_WORD) | word_index(word)
        except ValueError:
            return False
    encoded = value.to_bytes(MNEMONIC_LENGTH * _BITS_PER_WORD // 8, "big")
    return sha256(encoded[:32])[0] == encoded[32]


def mnemonic_to_seed(words: Sequence[str], passphrase: str | bytes = "") -> bytes:
    """Derive the 64-byte seed from a mnemonic sentence and an optional passphrase."""
    sentence = " ".join(words).encode("utf-8")
    salt = MNEMONIC_PREFIX + _as_bytes(passphrase)
    return hashlib.pbkdf2_hmac(
        "sha512", sentence, salt, PBKDF2_ROUNDS, EXTENDED_MASTER_KEY_LENGTH
    )


def generate_seed(
    passphrase: str | bytes = "", entropy: bytes | None = None
) -> SeedContext:
    """Create (or use the given 32 bytes of) entropy, and derive its mnemonic and seed.

    The passphrase is capped at 16 bytes.
    """
    if entropy is None:
        entropy = create_random_bits(ENTROPY_BITS)
    elif len(entropy) != ENTROPY_BITS // 8:
        raise ValueError(f"entropy must be {ENTROPY_BITS // 8} bytes, got {len(entropy)}")

    checksummed = apply_entropy_checksum(entropy, ENTROPY_BITS)
    mnemonic = tuple(entropy_to_mnemonic(checksummed, ENTROPY_BITS))
    capped = _as_bytes(passphrase)[:MAX_MNEMONIC_PASSPHRASE_LENGTH]
    seed = mnemonic_to_seed(mnemonic, capped)
    return SeedContext(entropy=checksummed, mnemonic=mnemonic, seed=seed)