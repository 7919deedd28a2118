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
# Filename: src/alphabets.py

"""
Alphabet registry for the address engine.

An alphabet is an ordered, duplicate-free set of symbols; its length is the
numeral base it represents. The registry maps a base to its alphabet and
answers symbol/index lookups in both directions.

Text alphabets are plain strings and their symbols are one-character strings.
The byte alphabet is `bytes(range(256))`, so its symbols are the integers
0-255 (that is what iterating or indexing a `bytes` object yields). Every
helper here works on both kinds without the caller having to care.

The registry is built once and never mutated afterwards, so it can be shared
freely between callers. `DEFAULT_REGISTRY` holds the stock alphabets:

-   base 29: lowercase letters plus comma, space and period (page text)
-   base 36: digits plus lowercase letters (addresses)
-   base 64: the standard Base64 set (compact addresses)
-   base 256: byte identity (raw binary payloads)
"""

import logging
from types import MappingProxyType

from babel_errors import SymbolNotInAlphabetError, UnsupportedBaseError

logger = logging.getLogger(__name__)

BASE29_CHARSET = "abcdefghijklmnopqrstuvwxyz, ."
BASE36_CHARSET = "0123456789abcdefghijklmnopqrstuvwxyz"
BASE64_CHARSET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
BYTE_CHARSET = bytes(range(256))

DEFAULT_CHARSETS = (BASE29_CHARSET, BASE36_CHARSET, BASE64_CHARSET, BYTE_CHARSET)

# Prefix for negative numbers; reserved in every text alphabet.
SIGN_MARKER = "-"


class Alphabet:
    """An immutable ordered symbol set. Its length is its base."""

    __slots__ = ("symbols", "is_binary", "filler", "_index")

    def __init__(self, symbols):
        if isinstance(symbols, bytearray):
            symbols = bytes(symbols)
        if not isinstance(symbols, (str, bytes)):
            raise TypeError(f"Alphabet symbols must be str or bytes, not {type(symbols).__name__}.")
        if len(symbols) < 2:
            raise ValueError("An alphabet needs at least two symbols.")

        index = {symbol: position for position, symbol in enumerate(symbols)}
        if len(index) != len(symbols):
            raise ValueError(f"Alphabet contains duplicate symbols: {symbols!r}")

        self.symbols = symbols
        self.is_binary = isinstance(symbols, bytes)
        self._index = MappingProxyType(index)
        # Deterministic padding uses a blank for text and NUL for bytes.
        if self.is_binary:
            self.filler = 0 if 0 in index else symbols[0]
        else:
            self.filler = " " if " " in index else symbols[0]

    @property
    def base(self) -> int:
        return len(self.symbols)

    @property
    def zero_symbol(self):
        return self.symbols[0]

    def __len__(self):
        return len(self.symbols)

    def __contains__(self, symbol):
        return symbol in self._index

    def __eq__(self, other):
        if isinstance(other, Alphabet):
            return self.symbols == other.symbols
        return self.symbols == other

    def __hash__(self):
        return hash(self.symbols)

    def __repr__(self):
        if self.is_binary:
            return f"Alphabet(base={self.base}, binary)"
        return f"Alphabet({self.symbols!r})"

    def index_of(self, symbol) -> int:
        """Returns the position of `symbol`, raising SymbolNotInAlphabetError if absent."""
        try:
            return self._index[symbol]
        except (KeyError, TypeError):
            raise SymbolNotInAlphabetError(symbol, self.base) from None

    def symbol_at(self, position: int):
        return self.symbols[position]

    def join(self, symbols):
        """Builds a sequence of this alphabet's native type from individual symbols."""
        if self.is_binary:
            return bytes(symbols)
        return "".join(symbols)

    def repeat(self, symbol, count: int):
        """Returns `symbol` repeated `count` times as a native sequence."""
        if count <= 0:
            return self.join([])
        if self.is_binary:
            return bytes((symbol,)) * count
        return symbol * count

    def empty(self):
        return b"" if self.is_binary else ""


class AlphabetRegistry:
    """
    Read-only mapping from numeral base to Alphabet.

    Args:
        charsets: An iterable of symbol sequences (str or bytes). Each one is
            registered under its own length. Defaults to DEFAULT_CHARSETS.
    """

    def __init__(self, charsets=None):
        if charsets is None:
            charsets = DEFAULT_CHARSETS

        alphabets = {}
        for charset in charsets:
            alphabet = charset if isinstance(charset, Alphabet) else Alphabet(charset)
            if not alphabet.is_binary and SIGN_MARKER in alphabet:
                raise ValueError(
                    f"Text alphabet {alphabet.symbols!r} may not contain the sign marker '{SIGN_MARKER}'."
                )
            if alphabet.base in alphabets:
                raise ValueError(f"More than one alphabet registered for base {alphabet.base}.")
            alphabets[alphabet.base] = alphabet

        self._alphabets = MappingProxyType(alphabets)
        logger.debug(f"Alphabet registry initialized with bases: {self.bases}")

    @property
    def bases(self):
        return tuple(sorted(self._alphabets))

    def __contains__(self, base):
        return base in self._alphabets

    def charset_for(self, base: int) -> Alphabet:
        """
        Gets the alphabet for a numeral base.

        Raises:
            UnsupportedBaseError: If no alphabet is registered for `base`.
        """
        try:
            return self._alphabets[base]
        except (KeyError, TypeError):
            raise UnsupportedBaseError(base) from None

    def index_of(self, symbol, base: int) -> int:
        return self.charset_for(base).index_of(symbol)

    def extended(self, charsets):
        """Returns a new registry holding this registry's alphabets plus `charsets`."""
        return AlphabetRegistry(list(self._alphabets.values()) + list(charsets))


DEFAULT_REGISTRY = AlphabetRegistry()


def get_base_charset(base: int):
    """Gets the symbol sequence that composes a number encoded in a given base."""
    return DEFAULT_REGISTRY.charset_for(base).symbols


def index_of(symbol, base: int) -> int:
    return DEFAULT_REGISTRY.index_of(symbol, base)

# === End of src/alphabets.py ===
