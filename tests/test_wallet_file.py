import pytest

from picowallet.errors import WalletError, WalletFileResult
from picowallet.wallet_file import (
    MNEMONICS_FILE,
    SERIALIZED_WALLET_SIZE,
    WALLET_DIRECTORY,
    WALLET_FILE,
    WalletStore,
    parse_mnemonics,
)

WORDS = ["abandon"] * 23 + ["art"]


def test_parse_mnemonics_skips_leading_separators():
    text = "\n\n   " + "\n".join(WORDS) + "\n"
    assert parse_mnemonics(text) == WORDS


def test_parse_mnemonics_mixed_separators():
    text = "1. " + " , ".join(WORDS)
    assert parse_mnemonics(text) == WORDS


def test_parse_mnemonics_uppercase_separates_words():
    text = "abandonXability " + " ".join(["abandon"] * 22)
    result = parse_mnemonics(text)
    assert result[:2] == ["abandon", "ability"]
    assert len(result) == 24


def test_parse_mnemonics_empty_is_fatfs_error():
    with pytest.raises(WalletError) as info:
        parse_mnemonics("  \n 123 ")
    assert info.value.result is WalletFileResult.FATFS_ERROR


@pytest.mark.parametrize("count", [1, 23, 25])
def test_parse_mnemonics_wrong_count(count):
    with pytest.raises(WalletError) as info:
        parse_mnemonics(" ".join(["abandon"] * count))
    assert info.value.result is WalletFileResult.BAD_MNEMONIC_FILE_DATA


def test_parse_mnemonics_word_too_long():
    with pytest.raises(WalletError) as info:
        parse_mnemonics(" ".join(["abandon"] * 23 + ["abandonment"]))
    assert info.value.result is WalletFileResult.BAD_MNEMONIC_FILE_DATA


def test_save_and_load_round_trip(tmp_path):
    store = WalletStore(tmp_path)
    data = bytes(i % 256 for i in range(SERIALIZED_WALLET_SIZE))
    store.save_wallet_data(data)
    assert (tmp_path / WALLET_DIRECTORY / WALLET_FILE).read_bytes() == data
    assert store.load_wallet_data() == data


def test_save_overwrites_previous(tmp_path):
    store = WalletStore(tmp_path)
    store.save_wallet_data(bytes(SERIALIZED_WALLET_SIZE))
    store.save_wallet_data(b"\xAA" * SERIALIZED_WALLET_SIZE)
    assert store.load_wallet_data() == b"\xAA" * SERIALIZED_WALLET_SIZE


def test_load_missing_wallet(tmp_path):
    with pytest.raises(WalletError) as info:
        WalletStore(tmp_path).load_wallet_data()
    assert info.value.result is WalletFileResult.FILE_NOT_FOUND
    assert (tmp_path / WALLET_DIRECTORY).is_dir()


def test_load_wrong_size_is_corrupted(tmp_path):
    directory = tmp_path / WALLET_DIRECTORY
    directory.mkdir()
    (directory / WALLET_FILE).write_bytes(bytes(SERIALIZED_WALLET_SIZE - 1))
    with pytest.raises(WalletError) as info:
        WalletStore(tmp_path).load_wallet_data()
    assert info.value.result is WalletFileResult.WALLET_FILE_CORRUPTED


def test_save_wrong_length_rejected(tmp_path):
    with pytest.raises(ValueError):
        WalletStore(tmp_path).save_wallet_data(bytes(10))


def test_save_fails_to_open_when_root_is_a_file(tmp_path):
    root = tmp_path / "mount"
    root.write_text("not a directory")
    with pytest.raises(WalletError) as info:
        WalletStore(root).save_wallet_data(bytes(SERIALIZED_WALLET_SIZE))
    assert info.value.result is WalletFileResult.FAILED_TO_OPEN


def test_read_mnemonics(tmp_path):
    directory = tmp_path / WALLET_DIRECTORY
    directory.mkdir()
    (directory / MNEMONICS_FILE).write_text("\n".join(WORDS) + "\n")
    assert WalletStore(tmp_path).read_mnemonics() == WORDS


def test_read_mnemonics_missing(tmp_path):
    with pytest.raises(WalletError) as info:
        WalletStore(tmp_path).read_mnemonics()
    assert info.value.result is WalletFileResult.FILE_NOT_FOUND
    assert info.value.detail == 0