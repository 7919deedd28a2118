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
# Filename: tests/test_alphabets.py

"""
Unit tests for src/alphabets.py.
"""
import pytest

from alphabets import (
    BASE29_CHARSET,
    BASE36_CHARSET,
    BASE64_CHARSET,
    BYTE_CHARSET,
    DEFAULT_REGISTRY,
    Alphabet,
    AlphabetRegistry,
    get_base_charset,
    index_of,
)
from babel_errors import SymbolNotInAlphabetError, UnsupportedBaseError


def test_get_base_charset():
    assert get_base_charset(36) == BASE36_CHARSET
    assert get_base_charset(29) == BASE29_CHARSET
    assert get_base_charset(64) == BASE64_CHARSET
    assert get_base_charset(256) == BYTE_CHARSET


def test_default_registry_bases():
    assert DEFAULT_REGISTRY.bases == (29, 36, 64, 256)
    assert 29 in DEFAULT_REGISTRY
    assert 10 not in DEFAULT_REGISTRY


@pytest.mark.parametrize("base", [0, 1, 2, 10, 58, 257, -36, "36", None])
def test_unsupported_base_raises_error(base):
    with pytest.raises(UnsupportedBaseError, match="Invalid base"):
        DEFAULT_REGISTRY.charset_for(base)


def test_index_of():
    assert index_of("0", 36) == 0
    assert index_of("x", 36) == 33
    assert index_of(".", 29) == 28
    assert index_of(" ", 29) == 27
    assert index_of(255, 256) == 255
    assert DEFAULT_REGISTRY.index_of("/", 64) == 63


@pytest.mark.parametrize("symbol, base", [("-", 36), ("A", 29), (":", 64), ("a", 256)])
def test_index_of_missing_symbol_raises_error(symbol, base):
    with pytest.raises(SymbolNotInAlphabetError) as excinfo:
        index_of(symbol, base)
    assert excinfo.value.base == base


def test_alphabet_fillers():
    assert DEFAULT_REGISTRY.charset_for(29).filler == " "
    assert DEFAULT_REGISTRY.charset_for(256).filler == 0
    # No blank available, so the first symbol is used
    assert DEFAULT_REGISTRY.charset_for(36).filler == "0"


def test_alphabet_join_and_repeat():
    text = Alphabet("abc")
    binary = Alphabet(b"\x00\x01\x02")
    assert text.join(["c", "a"]) == "ca"
    assert binary.join([2, 0]) == b"\x02\x00"
    assert text.repeat("b", 3) == "bbb"
    assert binary.repeat(1, 2) == b"\x01\x01"
    assert text.repeat("b", 0) == ""
    assert binary.empty() == b""


@pytest.mark.parametrize("symbols", ["abca", b"\x00\x00"])
def test_alphabet_rejects_duplicates(symbols):
    with pytest.raises(ValueError, match="duplicate"):
        Alphabet(symbols)


def test_alphabet_rejects_short_or_wrong_type():
    with pytest.raises(ValueError):
        Alphabet("a")
    with pytest.raises(TypeError):
        Alphabet(["a", "b"])


def test_registry_rejects_sign_marker_in_text_alphabet():
    with pytest.raises(ValueError, match="sign marker"):
        AlphabetRegistry(["abc-"])


def test_registry_rejects_two_alphabets_of_one_base():
    with pytest.raises(ValueError, match="base 3"):
        AlphabetRegistry(["abc", "xyz"])


def test_extended_registry_leaves_original_untouched():
    registry = DEFAULT_REGISTRY.extended(["01"])
    assert registry.charset_for(2).symbols == "01"
    assert registry.charset_for(29).symbols == BASE29_CHARSET
    assert 2 not in DEFAULT_REGISTRY

# === End of tests/test_alphabets.py ===
