"""Hierarchical wallet state, its serialized layout and its encrypted storage.

Serialized layout (304 bytes):
    version (2, little-endian), validation bytes (16), master private key (32),
    master chain code (32), mnemonic (24 slots of 9 zero-padded bytes),
    then 0xFF padding up to a multiple of the AES block size.
"""

from __future__ import annotations

import hashlib
from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from Crypto.Cipher import AES
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from picowallet.errors import USER_PASSWORD_LENGTH, WalletError, WalletFileResult
from picowallet.hashing import PBKDF2_HMAC_SHA256_SIZE
from picowallet.keyprint import (
    CHAIN_CODE_LENGTH,
    FINGERPRINT_LENGTH,
    PRIVATE_KEY_LENGTH,
    PUBLIC_KEY_LENGTH,
)
from picowallet.seed import MAX_MNEMONIC_WORD_LENGTH, MNEMONIC_LENGTH
from picowallet.wallet_file import SERIALIZED_WALLET_SIZE, WalletStore

WALLET_VERSION_MAJOR = 0x00
WALLET_VERSION_MINOR = 0x01
WALLET_VERSION = (WALLET_VERSION_MAJOR << 8) | WALLET_VERSION_MINOR

PASSWORD_BLOCK_LENGTH = 16
VALIDATION_BYTES_LENGTH = PBKDF2_HMAC_SHA256_SIZE - PASSWORD_BLOCK_LENGTH
AES_BLOCK_SIZE = 16
PASSWORD_ROUNDS = 2048
PASSCODE_SALT = b"picowallet-passcode"

_VERSION_BYTES = WALLET_VERSION.to_bytes(2, "little")
_SLOT_LENGTH = MAX_MNEMONIC_WORD_LENGTH + 1
_KEY_OFFSET = 2 + VALIDATION_BYTES_LENGTH
_CHAIN_OFFSET = _KEY_OFFSET + PRIVATE_KEY_LENGTH
_MNEMONIC_OFFSET = _CHAIN_OFFSET + CHAIN_CODE_LENGTH
_PAYLOAD_LENGTH = _MNEMONIC_OFFSET + MNEMONIC_LENGTH * _SLOT_LENGTH


@dataclass
class ExtendedKey:
    """A key with its chain code and position in the key tree."""

    private_key: bytes = bytes(PRIVATE_KEY_LENGTH)
    chain_code: bytes = bytes(CHAIN_CODE_LENGTH)
    public_key: bytes = bytes(PUBLIC_KEY_LENGTH)
    depth: int = 0
    fingerprint: bytes = bytes(FINGERPRINT_LENGTH)
    parent_fingerprint: bytes = bytes(FINGERPRINT_LENGTH)
    index: int = 0


def _password_bytes(password: str | bytes) -> bytes:
    raw = password.encode("utf-8") if isinstance(password, str) else bytes(password)
    if len(raw) < USER_PASSWORD_LENGTH:
        raise ValueError(
            f"password must be at least {USER_PASSWORD_LENGTH} bytes, got {len(raw)}"
        )
    return raw[:USER_PASSWORD_LENGTH]


@dataclass
class HDWallet:
    """The master key, the recovery mnemonic and the password that encrypts them."""

    master_key: ExtendedKey = field(default_factory=ExtendedKey)
    mnemonic: tuple[str, ...] = ()
    password: bytes = bytes(USER_PASSWORD_LENGTH)

    def set_password(self, password: str | bytes | None) -> None:
        """Store the first 8 bytes of password; a missing password changes nothing."""
        if password:
            self.password = _password_bytes(password)


def compute_public_key(private_key: bytes) -> bytes:
    """Return the compressed secp256k1 public key of a 32-byte private key."""
    if len(private_key) != PRIVATE_KEY_LENGTH:
        raise ValueError(f"private key must be {PRIVATE_KEY_LENGTH} bytes")
    scalar = int.from_bytes(private_key, "big")
    key = ec.derive_private_key(scalar, ec.SECP256K1())
    return key.public_key().public_bytes(Encoding.X962, PublicFormat.CompressedPoint)


def password_hash(password: str | bytes) -> bytes:
    """PBKDF2-HMAC-SHA256 of the 8-byte password: AES key and validation bytes."""
    return hashlib.pbkdf2_hmac(
        "sha256",
        _password_bytes(password),
        PASSCODE_SALT,
        PASSWORD_ROUNDS,
        PBKDF2_HMAC_SHA256_SIZE,
    )


def _mnemonic_slots(words: Sequence[str]) -> bytes:
    if len(words) != MNEMONIC_LENGTH:
        raise ValueError(f"mnemonic must hold {MNEMONIC_LENGTH} words, got {len(words)}")
    slots = []
    for word in words:
        encoded = word.encode("ascii")
        if len(encoded) > MAX_MNEMONIC_WORD_LENGTH:
            raise ValueError(f"mnemonic word {word!r} is too long")
        slots.append(encoded.ljust(_SLOT_LENGTH, b"\0"))
    return b"".join(slots)


def serialize_wallet(wallet: HDWallet, validation_bytes: bytes) -> bytes:
    """Lay the wallet out as 304 plain bytes, headed by the validation bytes."""
    if len(validation_bytes) != VALIDATION_BYTES_LENGTH:
        raise ValueError(f"validation bytes must be {VALIDATION_BYTES_LENGTH} bytes")
    key = wallet.master_key
    if len(key.private_key) != PRIVATE_KEY_LENGTH or len(key.chain_code) != CHAIN_CODE_LENGTH:
        raise ValueError("master key has the wrong private key or chain code length")
    payload = (
        _VERSION_BYTES
        + bytes(validation_bytes)
        + bytes(key.private_key)
        + bytes(key.chain_code)
        + _mnemonic_slots(wallet.mnemonic)
    )
    padding = AES_BLOCK_SIZE - len(payload) % AES_BLOCK_SIZE
    return payload + b"\xFF" * padding


def deserialize_wallet(data: bytes, validation_bytes: bytes) -> HDWallet:
    """Rebuild a wallet from its plain bytes, checking the password and the version."""
    if len(data) < _PAYLOAD_LENGTH:
        raise WalletError(WalletFileResult.WALLET_FILE_CORRUPTED, 0)
    if data[2:_KEY_OFFSET] != bytes(validation_bytes):
        raise WalletError(WalletFileResult.INVALID_PASSWORD, 0)
    if data[:2] != _VERSION_BYTES:
        raise WalletError(WalletFileResult.FILE_VERSION_MISMATCH, 0)

    private_key = bytes(data[_KEY_OFFSET:_CHAIN_OFFSET])
    chain_code = bytes(data[_CHAIN_OFFSET:_MNEMONIC_OFFSET])
    try:
        public_key = compute_public_key(private_key)
    except ValueError:
        public_key = bytes(PUBLIC_KEY_LENGTH)

    mnemonic = tuple(
        data[start:start + _SLOT_LENGTH].split(b"\0", 1)[0].decode("latin-1")
        for start in range(_MNEMONIC_OFFSET, _PAYLOAD_LENGTH, _SLOT_LENGTH)
    )
    master = ExtendedKey(private_key=private_key, chain_code=chain_code, public_key=public_key)
    return HDWallet(master_key=master, mnemonic=mnemonic)


def encrypt_wallet(wallet: HDWallet) -> bytes:
    """Serialize the wallet and encrypt it with AES-256 under its password hash."""
    digest = password_hash(wallet.password)
    plain = serialize_wallet(wallet, digest[PASSWORD_BLOCK_LENGTH:])
    return AES.new(digest, AES.MODE_ECB).encrypt(plain)


def decrypt_wallet_data(data: bytes, password: str | bytes) -> HDWallet:
    """Decrypt wallet bytes loaded from disk into a wallet carrying the password."""
    if len(data) != SERIALIZED_WALLET_SIZE:
        raise WalletError(WalletFileResult.WALLET_FILE_CORRUPTED, 0)
    digest = password_hash(password)
    plain = AES.new(digest, AES.MODE_ECB).decrypt(bytes(data))
    wallet = deserialize_wallet(plain, digest[PASSWORD_BLOCK_LENGTH:])
    return replace(wallet, password=_password_bytes(password))


def save_wallet(wallet: HDWallet, store: WalletStore) -> None:
    """Encrypt the wallet and write it to the store."""
    store.save_wallet_data(encrypt_wallet(wallet))


def load_wallet(store: WalletStore, password: str | bytes) -> HDWallet:
    """Read the wallet from the store and decrypt it with password."""
    return decrypt_wallet_data(store.load_wallet_data(), password)