#!/usr/bin/env python3
#-*- coding: utf-8 -*-
#
# Library of Babel Address Engine
# Copyright (C) 2025 Peter J. Marko
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
# Filename: tests/test_base_encoder.py

"""
Unit tests for src/base_encoder.py.
"""
import pytest

from alphabets import BASE64_CHARSET
from babel_errors import SymbolNotInAlphabetError, UnsupportedBaseError
from base_encoder import base_to_num, block_bits, num_to_base, to_fixed_width

# Test cases: (base, integer, encoded)
ENCODING_TEST_CASES = [
    (36, 0, "0"),
    (36, 36, "10"),
    (36, 69, "1x"),
    (36, -33, "-x"),
    (29, 0, "a"),
    (29, 29, "ba"),
    (29, 69, "cl"),
    (29, -33, "-be"),
    (64, 0, "A"),
    (64, 63, "/"),
    (64, 64, "BA"),
    (64, -65, "-BB"),
    (256, 0, b"\x00"),
    (256, 255, b"\xff"),
    (256, 256, b"\x01\x00"),
]


@pytest.mark.parametrize("base, num, expected", ENCODING_TEST_CASES)
def test_num_to_base_encoding(base, num, expected):
    """Test encoding of various integers into each registered base."""
    assert num_to_base(num, base) == expected


@pytest.mark.parametrize("base, expected_num, encoded", ENCODING_TEST_CASES)
def test_base_to_num_decoding(base, expected_num, encoded):
    """Test decoding of encoded sequences back to integers."""
    assert base_to_num(encoded, base) == expected_num


@pytest.mark.parametrize("base", [29, 36, 64, 256])
@pytest.mark.parametrize("num", [1, 28, 1000, 9876543210, 29 ** 3200 + 17, 2 ** 4099 - 1])
def test_round_trip_conversion(base, num):
    """Test that encoding and then decoding a number returns the original number."""
    assert base_to_num(num_to_base(num, base), base) == num


@pytest.mark.parametrize("base", [29, 36, 64])
def test_round_trip_negative_values(base):
    for num in (-1, -29, -123456789012345678901234567890):
        assert base_to_num(num_to_base(num, base), base) == num


def test_block_extraction_matches_repeated_division():
    """Base 64 uses 6-bit groups; the digits must equal those of plain divmod."""
    value = 123456789123456789123456789
    expected = []
    remaining = value
    while remaining:
        remaining, digit = divmod(remaining, 64)
        expected.append(BASE64_CHARSET[digit])
    assert num_to_base(value, 64) == "".join(reversed(expected))


def test_block_bits():
    assert block_bits(64) == 6
    assert block_bits(256) == 8
    assert block_bits(36) is None
    assert block_bits(29) is None


def test_leading_zero_symbols_are_ignored_when_decoding():
    assert base_to_num("aab", 29) == 1
    assert base_to_num("AAB", 64) == 1
    assert base_to_num(b"\x00\x00\x01", 256) == 1
    assert base_to_num("aa", 29) == 0


@pytest.mark.parametrize("base", [0, 1, 10, 58, 257])
def test_unregistered_base_raises_error(base):
    with pytest.raises(UnsupportedBaseError):
        num_to_base(5, base)
    with pytest.raises(UnsupportedBaseError):
        base_to_num("1", base)


@pytest.mark.parametrize("invalid_input", [1.5, "abc", None, True])
def test_num_to_base_invalid_input_raises_error(invalid_input):
    with pytest.raises(ValueError, match="Input must be an integer."):
        num_to_base(invalid_input, 36)


def test_negative_value_in_binary_alphabet_raises_error():
    with pytest.raises(ValueError, match="binary alphabet"):
        num_to_base(-1, 256)


@pytest.mark.parametrize("base, invalid", [(36, "1!"), (36, "ABC"), (29, "hello-world"), (64, "ab=")])
def test_base_to_num_invalid_symbols_raise_error(base, invalid):
    with pytest.raises(SymbolNotInAlphabetError):
        base_to_num(invalid, base)


@pytest.mark.parametrize("invalid", ["", "-"])
def test_base_to_num_empty_input_raises_error(invalid):
    with pytest.raises(ValueError):
        base_to_num(invalid, 36)


def test_to_fixed_width_pads_with_zero_symbol():
    assert to_fixed_width(0, 29, 5) == "aaaaa"
    assert to_fixed_width(29, 29, 4) == "aaba"
    assert to_fixed_width(1, 256, 3) == b"\x00\x00\x01"


def test_to_fixed_width_keeps_last_symbols():
    assert to_fixed_width(29 ** 4 + 1, 29, 4) == "aaab"
    assert to_fixed_width(-1, 29, 3) == "..."
    assert to_fixed_width(12345, 36, 0) == ""

# === End of tests/test_base_encoder.py ===
