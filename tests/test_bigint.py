import pytest

from picowallet.bigint import (
    bytewise_add,
    bytewise_cmp,
    bytewise_mod,
    bytewise_subtract,
    insert_and_shift,
)

A32 = bytes([
    0xAB, 0xA1, 0x4A, 0x4A, 0xFD, 0xE2, 0x47, 0x11,
    0xC2, 0x91, 0x75, 0x81, 0x58, 0x43, 0x35, 0x97,
    0x0A, 0x4D, 0x90, 0x71, 0x06, 0xB6, 0x2E, 0x20,
    0x89, 0xDB, 0x47, 0x12, 0x3A, 0x4B, 0x5D, 0x1E,
])
B32 = bytes([
    0x5E, 0x8A, 0x84, 0xA4, 0xA3, 0xDD, 0x90, 0x8B,
    0x78, 0x7E, 0x2A, 0x61, 0xE0, 0x2B, 0x8E, 0x36,
    0x9C, 0x29, 0x9D, 0xF5, 0x41, 0xD9, 0x6F, 0x1A,
    0x0C, 0x62, 0xA0, 0x9F, 0x5E, 0x1C, 0xAC, 0x0C,
])


def test_add_single_byte_no_overflow():
    assert bytewise_add(bytes([0x32]), bytes([0x79])) == (bytes([0xAB]), 0)


def test_add_single_byte_overflow():
    result, carry = bytewise_add(bytes([0xFF]), bytes([0xFF]))
    assert carry == 1
    assert result == bytes([0xFE])


def test_add_multi_byte_overflow():
    expected = bytes([
        0x0A, 0x2B, 0xCE, 0xEF, 0xA1, 0xBF, 0xD7, 0x9D,
        0x3B, 0x0F, 0x9F, 0xE3, 0x38, 0x6E, 0xC3, 0xCD,
        0xA6, 0x77, 0x2E, 0x66, 0x48, 0x8F, 0x9D, 0x3A,
        0x96, 0x3D, 0xE7, 0xB1, 0x98, 0x68, 0x09, 0x2A,
    ])
    assert bytewise_add(A32, B32) == (expected, 1)


def test_add_multi_byte_no_overflow():
    a = bytes([
        0x72, 0x07, 0x75, 0x0C, 0x1E, 0x6D, 0x25, 0x4B,
        0x0F, 0x61, 0x71, 0x5B, 0xF4, 0x30, 0x64, 0x19,
        0x14, 0x0D, 0xF2, 0xBC, 0x17, 0x78, 0x5E, 0x53,
        0xEA, 0xC0, 0x81, 0x50, 0x07, 0xAF, 0xE3, 0x67,
    ])
    b = bytes([0x11]) + B32[1:]
    expected = bytes([
        0x83, 0x91, 0xF9, 0xB0, 0xC2, 0x4A, 0xB5, 0xD6,
        0x87, 0xDF, 0x9B, 0xBD, 0xD4, 0x5B, 0xF2, 0x4F,
        0xB0, 0x37, 0x90, 0xB1, 0x59, 0x51, 0xCD, 0x6D,
        0xF7, 0x23, 0x21, 0xEF, 0x65, 0xCC, 0x8F, 0x73,
    ])
    assert bytewise_add(a, b) == (expected, 0)


def test_add_heterogenous_arrays_no_overflow():
    a = bytes([0x72, 0x07, 0x75, 0x0C])
    b = bytes([0x11, 0x8A])
    assert bytewise_add(a, b) == (bytes([0x72, 0x07, 0x86, 0x96]), 0)


def test_add_heterogenous_arrays_overflow():
    a = bytes([0xFF, 0xFF, 0x75, 0x0C])
    b = bytes([0xFF, 0xFF])
    assert bytewise_add(a, b) == (bytes([0x00, 0x00, 0x75, 0x0B]), 1)


def test_subtract_single_byte_no_underflow():
    assert bytewise_subtract(bytes([0xA7]), bytes([0x25])) == (bytes([0x82]), 0)


def test_subtract_single_byte_underflow():
    assert bytewise_subtract(bytes([0x25]), bytes([0xA7])) == (bytes([0x7E]), 1)


def test_subtract_multi_byte_no_underflow():
    expected = bytes([
        0x4D, 0x16, 0xC5, 0xA6, 0x5A, 0x04, 0xB6, 0x86,
        0x4A, 0x13, 0x4B, 0x1F, 0x78, 0x17, 0xA7, 0x60,
        0x6E, 0x23, 0xF2, 0x7B, 0xC4, 0xDC, 0xBF, 0x06,
        0x7D, 0x78, 0xA6, 0x72, 0xDC, 0x2E, 0xB1, 0x12,
    ])
    assert bytewise_subtract(A32, B32) == (expected, 0)


def test_subtract_multi_byte_underflow():
    result, borrow = bytewise_subtract(B32[:4], A32[:4])
    assert borrow == 1
    assert result == bytes([0xB2, 0xE9, 0x3A, 0x5A])


def test_add_then_subtract_round_trip():
    total, _ = bytewise_add(A32, B32)
    back, _ = bytewise_subtract(total, B32)
    assert back == A32


def test_cmp_single_byte_greater():
    assert bytewise_cmp(bytes([0x79]), bytes([0x32])) == 1


def test_cmp_single_byte_lesser():
    assert bytewise_cmp(bytes([0x32]), bytes([0x79])) == -1


def test_cmp_single_byte_equal():
    assert bytewise_cmp(bytes([0x79]), bytes([0x79])) == 0


def test_cmp_multi_byte_greater():
    a = bytes([0x79, 0xA3, 0x99, 0xB3, 0x11, 0x85])
    b = bytes([0x32, 0x85, 0xA3, 0x99, 0xB3, 0x11])
    assert bytewise_cmp(a[:1], b[:1]) == 1
    assert bytewise_cmp(a, b) == 1


def test_cmp_multi_byte_lesser():
    a = bytes([0x32, 0x85, 0xA3, 0x99, 0xB3, 0x11])
    b = bytes([0x79, 0xA3, 0x99, 0xB3, 0x11, 0x85])
    assert bytewise_cmp(a[:1], b[:1]) == -1
    assert bytewise_cmp(a, b) == -1


def test_cmp_multi_byte_equal():
    a = bytes([0x79, 0xA5, 0x6E, 0x4D, 0x93])
    assert bytewise_cmp(a, bytes(a)) == 0


def test_cmp_different_widths():
    assert bytewise_cmp(bytes([0x00, 0x00, 0x05]), bytes([0x05])) == 0
    assert bytewise_cmp(bytes([0x01, 0x00]), bytes([0xFF])) == 1
    assert bytewise_cmp(bytes([0xFF]), bytes([0x01, 0x00])) == -1


def test_mod_single_byte_remainder():
    assert bytewise_mod(bytes([0x97]), bytes([0x05])) == bytes([0x01])


def test_mod_single_byte_no_remainder():
    assert bytewise_mod(bytes([0x96]), bytes([0x02])) == bytes([0x00])


def test_mod_multi_byte_remainder():
    a = bytes([0xAF, 0xB8, 0x23, 0x4A, 0x99, 0x97])
    b = bytes([0x05, 0x21])
    assert bytewise_mod(a[:1], b[:1]) == bytes([0x00])


def test_mod_multi_byte_no_remainder():
    b = bytes([0x00, 0x23, 0xA8, 0x7B])
    doubled, _ = bytewise_add(b, b)
    assert bytewise_mod(doubled, b) == bytes(4)


def test_mod_smaller_returns_copy():
    assert bytewise_mod(bytes([0x00, 0x03]), bytes([0x05])) == bytes([0x00, 0x03])


def test_mod_equal_is_zero():
    assert bytewise_mod(bytes([0x12, 0x34]), bytes([0x12, 0x34])) == bytes(2)


def test_mod_by_zero():
    with pytest.raises(ZeroDivisionError):
        bytewise_mod(bytes([0x10]), bytes([0x00]))


def test_insert_and_shift():
    assert insert_and_shift(bytes([0x01, 0x02]), 0x09) == bytes([0x09, 0x01, 0x02])


def test_insert_and_shift_rejects_large_value():
    with pytest.raises(ValueError):
        insert_and_shift(bytes([0x01]), 0x100)