"""HD Bitcoin wallet core: mnemonics, seeds, hashing and encrypted wallet files."""

__version__ = "0.1.0"

__all__ = [
    "bigint",
    "errors",
    "hashing",
    "keyprint",
    "randomness",
    "seed",
    "wallet",
    "wallet_file",
    "wordlist",
]