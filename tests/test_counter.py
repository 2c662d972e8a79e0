"""Tests for the 128-bit counter arithmetic behind stream positioning."""

import pytest

from pyaesctr import InvalidIvLength, increment_iv
from pyaesctr.counter import int_to_iv, iv_to_int, split_offset

ZERO_IV = bytes(16)


@pytest.mark.parametrize(
    "iv_hex, blocks, expected_hex",
    [
        ("00000000000000000000000000000000", 1, "00000000000000000000000000000001"),
        ("00000000ffffffffffffffffffffffff", 1, "00000001000000000000000000000000"),
        ("00000000000000000000000000000000", 0xFFFFFFFF, "000000000000000000000000ffffffff"),
        ("00000000000000000000000000000000", 2**32, "00000000000000000000000100000000"),
        ("00000000000000000000000000000000", 2**33 - 1, "000000000000000000000001ffffffff"),
        ("000000000000000000000000000000ff", 2**64, "000000000000000100000000000000ff"),
        ("ffffffffffffffffffffffffffffffff", 3, "00000000000000000000000000000002"),
        ("00000000000000000000000000000000", 2**128 - 1, "ffffffffffffffffffffffffffffffff"),
        ("00000000000000000000000000000005", 2**128, "00000000000000000000000000000005"),
    ],
    ids=[
        "by-one",
        "carry-between-words",
        "max-uint32",
        "over-32-bits",
        "2^33-1",
        "over-64-bits",
        "wraparound",
        "max-increment",
        "full-period",
    ],
)
def test_increment(iv_hex, blocks, expected_hex):
    result = increment_iv(bytes.fromhex(iv_hex), blocks)
    assert len(result) == 16
    assert result.hex() == expected_hex


def test_identity():
    iv = bytes(range(16))
    assert increment_iv(iv, 0) == iv


@pytest.mark.parametrize("b1, b2", [(0, 0), (1, 2**70), (2**127, 2**127), (12345, 2**128 + 7)])
def test_additive(b1, b2):
    iv = bytes.fromhex("fedcba9876543210f0e1d2c3b4a59687")
    assert increment_iv(increment_iv(iv, b1), b2) == increment_iv(iv, b1 + b2)


def test_caller_iv_not_mutated():
    iv = bytearray(b"\xff" * 16)
    increment_iv(iv, 1)
    assert iv == bytearray(b"\xff" * 16)


def test_accepts_memoryview():
    iv = memoryview(bytearray(16))
    assert increment_iv(iv, 258) == bytes(14) + b"\x01\x02"


def test_negative_blocks_rejected():
    with pytest.raises(ValueError):
        increment_iv(ZERO_IV, -1)


def test_non_integer_blocks_rejected():
    with pytest.raises(TypeError):
        increment_iv(ZERO_IV, 1.0)


@pytest.mark.parametrize("size", [0, 15, 17])
def test_bad_iv_length(size):
    with pytest.raises(InvalidIvLength):
        increment_iv(bytes(size), 1)


def test_int_conversions():
    assert iv_to_int(b"\x00" * 15 + b"\x2a") == 42
    assert int_to_iv(2**128 + 1) == b"\x00" * 15 + b"\x01"
    assert int_to_iv(-1) == b"\xff" * 16


@pytest.mark.parametrize(
    "offset, expected",
    [(0, (0, 0)), (15, (0, 15)), (16, (1, 0)), (33, (2, 1)), (2**80 + 5, (2**76, 5))],
)
def test_split_offset(offset, expected):
    assert split_offset(offset) == expected
