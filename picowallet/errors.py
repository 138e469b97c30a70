"""Wallet error results and the packed 16-bit error code."""

from __future__ import annotations

from enum import IntEnum

USER_PASSWORD_LENGTH = 8


class WalletFileResult(IntEnum):
    """High-level outcome of a wallet file or wallet operation."""

    OK = 0
    FAIL = 1
    FATFS_ERROR = 2
    FILE_NOT_FOUND = 3
    FILE_VERSION_MISMATCH = 4
    FAILED_TO_OPEN = 5
    FAILED_TO_READ_KEY_DATA = 6
    FAILED_TO_WRITE_KEY_DATA = 7
    BAD_MNEMONIC_FILE_DATA = 8
    MNEMONIC_CHECKSUM_INVALID = 9
    INVALID_PASSWORD = 10
    WALLET_FILE_CORRUPTED = 11
    FILESYSTEM_INIT_FAILED = 12


def make_error_code(result: WalletFileResult | int, detail: int) -> int:
    """Pack a result and an 8-bit low-level detail into one 16-bit code."""
    result = WalletFileResult(result)
    if not 0 <= detail <= 0xFF:
        raise ValueError(f"detail must fit in one byte, got {detail}")
    return (int(result) << 8) | detail


def split_error_code(code: int) -> tuple[WalletFileResult, int]:
    """Unpack a 16-bit code into its result and its low-level detail."""
    if not 0 <= code <= 0xFFFF:
        raise ValueError(f"error code must fit in 16 bits, got {code}")
    return WalletFileResult(code >> 8), code & 0xFF


NO_ERROR = make_error_code(WalletFileResult.OK, 0)


class WalletError(Exception):
    """Raised when a wallet operation fails."""

    def __init__(self, result: WalletFileResult | int, detail: int = 0) -> None:
        self.result = WalletFileResult(result)
        if not 0 <= detail <= 0xFF:
            raise ValueError(f"detail must fit in one byte, got {detail}")
        self.detail = detail
        super().__init__(f"{self.result.name} (detail {detail})")

    @property
    def code(self) -> int:
        """The packed 16-bit error code."""
        return make_error_code(self.result, self.detail)

    @classmethod
    def from_code(cls, code: int) -> "WalletError":
        """Build an error from a packed 16-bit code."""
        result, detail = split_error_code(code)
        return cls(result, detail)