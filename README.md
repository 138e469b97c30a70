# picowallet

The core of a small hierarchical deterministic (HD) Bitcoin wallet:

- BIP-39 entropy, checksums, mnemonic sentences and seed derivation
- SHA-256, SHA-512, double SHA-256, RIPEMD-160 and HASH160 helpers
- big-endian byte-array arithmetic (add, subtract, compare, modulo)
- a password-protected, AES-encrypted wallet file format of 304 bytes
- plain-text rendering of key bytes and QR code pairs for a terminal

## Installing

```
pip install picowallet
```

For running the tests:

```
pip install "picowallet[test]"
pytest
```

## Mnemonics and seeds

```python
from picowallet.seed import validate_mnemonic, mnemonic_to_seed
from picowallet.wordlist import word_index, word_list

words = ["abandon"] * 23 + ["art"]
assert validate_mnemonic(words)

seed = mnemonic_to_seed(words, b"")
assert len(seed) == 64

assert word_index("zoo") == len(word_list()) - 1
```

`generate_seed` builds a fresh 24-word sentence from 256 bits of entropy
and derives the 64-byte seed from it, with an optional passphrase of up to
16 characters.

## Hashing

```python
from picowallet.hashing import sha256, hash160

digest = sha256(b"")
assert digest.hex().startswith("e3b0c442")
assert len(hash160(b"\x02" + bytes(32))) == 20
```

## Byte-array arithmetic

Byte arrays are read as big-endian unsigned numbers. Addition and
subtraction return the result together with the carry or borrow out of the
top byte.

```python
from picowallet.bigint import bytewise_add, bytewise_cmp

result, carry = bytewise_add(bytes([0xFF]), bytes([0xFF]))
assert (result, carry) == (bytes([0x00]), 1)
assert bytewise_cmp(bytes([0x79]), bytes([0x32])) == 1
```

## Wallet files

A `WalletStore` keeps `wallet.dat` and `mnemonic.txt` inside a
`PicoWallet` directory under the root it is given. The wallet is encrypted
with a key derived from an 8-character password.

```python
from picowallet.wallet import load_wallet, save_wallet
from picowallet.wallet_file import WalletStore

store = WalletStore("/media/sdcard")
password = b"password"
wallet = load_wallet(store, password)
save_wallet(wallet, store)
```

Failures are raised as `picowallet.errors.WalletError`, whose `result`
is a `WalletFileResult` such as `INVALID_PASSWORD`,
`FILE_VERSION_MISMATCH` or `WALLET_FILE_CORRUPTED`.