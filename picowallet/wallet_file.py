"""Storage of the encrypted wallet and the mnemonic recovery file on disk."""

from __future__ import annotations

import os
import re
from pathlib import Path

from picowallet.errors import WalletError, WalletFileResult
from picowallet.seed import MAX_MNEMONIC_WORD_LENGTH, MNEMONIC_LENGTH

WALLET_FILE = "wallet.dat"
MNEMONICS_FILE = "mnemonic.txt"
WALLET_DIRECTORY = "PicoWallet"
SERIALIZED_WALLET_SIZE = 304

# Low-level detail codes carried in the low byte of a wallet error.
_DETAIL_DISK_ERROR = 1
_DETAIL_NO_FILE = 4

_MNEMONIC_WORD = re.compile(r"[a-z]+")


def parse_mnemonics(text: str) -> list[str]:
    """Split mnemonic file text into its 24 words.

    Any character outside a-z separates words. Raises WalletError when the
    text holds no word at all, or not exactly 24 words of at most 8 letters.
    """
    words = _MNEMONIC_WORD.findall(text)
    if not words:
        raise WalletError(WalletFileResult.FATFS_ERROR, 0)
    if len(words) != MNEMONIC_LENGTH or any(
        len(word) > MAX_MNEMONIC_WORD_LENGTH for word in words
    ):
        raise WalletError(WalletFileResult.BAD_MNEMONIC_FILE_DATA, 0)
    return words


class WalletStore:
    """The wallet directory below a mount point, holding the wallet and mnemonic files."""

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self.root = Path(root)
        self.directory = self.root / WALLET_DIRECTORY

    def _open(self, name: str, mode: str):
        self.directory.mkdir(exist_ok=True)
        return open(self.directory / name, mode)

    def load_wallet_data(self) -> bytes:
        """Read the encrypted wallet bytes; raise WalletError if missing or damaged."""
        try:
            handle = self._open(WALLET_FILE, "rb")
        except FileNotFoundError:
            raise WalletError(WalletFileResult.FILE_NOT_FOUND, _DETAIL_NO_FILE) from None
        except OSError:
            raise WalletError(WalletFileResult.FAILED_TO_OPEN, _DETAIL_DISK_ERROR) from None

        with handle:
            try:
                data = handle.read()
            except OSError:
                raise WalletError(
                    WalletFileResult.FAILED_TO_READ_KEY_DATA, _DETAIL_DISK_ERROR
                ) from None

        if len(data) != SERIALIZED_WALLET_SIZE:
            raise WalletError(WalletFileResult.WALLET_FILE_CORRUPTED, 0)
        return data

    def save_wallet_data(self, data: bytes) -> None:
        """Write the encrypted wallet bytes; raise WalletError if that fails."""
        data = bytes(data)
        if len(data) != SERIALIZED_WALLET_SIZE:
            raise ValueError(
                f"wallet data must be {SERIALIZED_WALLET_SIZE} bytes, got {len(data)}"
            )
        try:
            handle = self._open(WALLET_FILE, "wb")
        except OSError:
            raise WalletError(WalletFileResult.FAILED_TO_OPEN, _DETAIL_DISK_ERROR) from None

        with handle:
            try:
                written = handle.write(data)
            except OSError:
                raise WalletError(
                    WalletFileResult.FAILED_TO_WRITE_KEY_DATA, _DETAIL_DISK_ERROR
                ) from None
        if written != len(data):
            raise WalletError(WalletFileResult.FAILED_TO_WRITE_KEY_DATA, 0)

    def read_mnemonics(self) -> list[str]:
        """Read the 24 recovery words from the mnemonic file."""
        try:
            handle = self._open(MNEMONICS_FILE, "rb")
        except FileNotFoundError:
            raise WalletError(WalletFileResult.FILE_NOT_FOUND, 0) from None
        except OSError:
            raise WalletError(WalletFileResult.FAILED_TO_OPEN, _DETAIL_DISK_ERROR) from None

        with handle:
            try:
                raw = handle.read()
            except OSError:
                raise WalletError(WalletFileResult.FATFS_ERROR, _DETAIL_DISK_ERROR) from None
        return parse_mnemonics(raw.decode("latin-1"))