"""Hash helpers used for keys and addresses."""

from __future__ import annotations

import hashlib

from Crypto.Hash import RIPEMD160

SHA256_DIGEST_SIZE = 32
SHA512_DIGEST_SIZE = 64
RIPEMD_160_DIGEST_SIZE = 20
PBKDF2_HMAC_SHA256_SIZE = 32


def sha256(data: bytes) -> bytes:
    """SHA-256 digest of data."""
    return hashlib.sha256(data).digest()


def sha512(data: bytes) -> bytes:
    """SHA-512 digest of data."""
    return hashlib.sha512(data).digest()


def double_sha256(data: bytes) -> bytes:
    """SHA-256 applied twice."""
    return sha256(sha256(data))


def ripemd160(data: bytes) -> bytes:
    """RIPEMD-160 digest of data."""
    return RIPEMD160.new(data).digest()


def hash160(data: bytes) -> bytes:
    """RIPEMD-160 of the SHA-256 of data."""
    return ripemd160(sha256(data))