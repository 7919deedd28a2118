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
# Filename: src/base_encoder.py

"""
Positional numeral conversion between integers and registered alphabets.

Integers are written most-significant symbol first. Zero is the alphabet's
first symbol, never an empty sequence, and negative values carry a leading
'-' (text alphabets only; every byte value is already a symbol in the byte
alphabet, so it has no room for a sign).

Two strategies are used, fixed per base:
-   Bases that are exact powers of two (64, 256, ...) are converted by block
    extraction: the value's binary expansion is cut into groups of
    log2(base) bits. CPython converts to and from binary in linear time, so
    this stays fast for 100 kB payloads.
-   Every other base uses repeated divmod / multiply-add.

This module is not intended to be run directly but is imported by other scripts.
"""

from alphabets import DEFAULT_REGISTRY, SIGN_MARKER


def block_bits(base: int):
    """Returns log2(base) if base is an exact power of two, else None."""
    if base >= 2 and base & (base - 1) == 0:
        return base.bit_length() - 1
    return None


def _digits_of(value: int, base: int) -> list:
    """Splits a positive integer into its base-`base` digits, most significant first."""
    bits = block_bits(base)
    if bits == 8:
        return list(value.to_bytes((value.bit_length() + 7) // 8, "big"))
    if bits:
        binary = format(value, "b")
        binary = binary.zfill(-(-len(binary) // bits) * bits)
        return [int(binary[i:i + bits], 2) for i in range(0, len(binary), bits)]

    digits = []
    while value > 0:
        value, remainder = divmod(value, base)
        digits.append(remainder)
    digits.reverse()
    return digits


def _value_of(digits: list, base: int) -> int:
    bits = block_bits(base)
    if bits == 8:
        return int.from_bytes(bytes(digits), "big")
    if bits:
        return int("".join(format(digit, f"0{bits}b") for digit in digits), 2)

    value = 0
    for digit in digits:
        value = value * base + digit
    return value


def num_to_base(value: int, base: int, registry=DEFAULT_REGISTRY):
    """
    Encodes an integer as a symbol sequence in the given base.

    Args:
        value (int): The number to convert. May be negative for text alphabets.
        base (int): A base registered in `registry`.
        registry (AlphabetRegistry): Source of the alphabet.

    Returns:
        str | bytes: The encoded number (bytes for the byte alphabet).

    Raises:
        UnsupportedBaseError: If `base` is not registered.
        ValueError: If `value` is not an integer, or is negative and the
            alphabet is binary.
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError("Input must be an integer.")
    alphabet = registry.charset_for(base)

    if value == 0:
        return alphabet.join([alphabet.zero_symbol])

    negative = value < 0
    if negative:
        if alphabet.is_binary:
            raise ValueError("Negative values cannot be encoded in a binary alphabet.")
        value = -value

    encoded = alphabet.join(alphabet.symbol_at(digit) for digit in _digits_of(value, base))
    return SIGN_MARKER + encoded if negative else encoded


def base_to_num(symbols, base: int, registry=DEFAULT_REGISTRY) -> int:
    """
    Decodes a symbol sequence in the given base back into an integer.

    Raises:
        UnsupportedBaseError: If `base` is not registered.
        SymbolNotInAlphabetError: If any symbol has no index in the alphabet.
        ValueError: If the sequence is empty.
    """
    alphabet = registry.charset_for(base)
    if len(symbols) == 0:
        raise ValueError("Cannot decode an empty symbol sequence.")

    negative = not alphabet.is_binary and symbols[0] == SIGN_MARKER
    if negative:
        symbols = symbols[1:]
        if len(symbols) == 0:
            raise ValueError("A sign marker must be followed by at least one symbol.")

    # Zero is zero in any base
    if len(symbols) == 1 and symbols[0] == alphabet.zero_symbol:
        return 0

    value = _value_of([alphabet.index_of(symbol) for symbol in symbols], base)
    return -value if negative else value


def to_fixed_width(value: int, base: int, width: int, registry=DEFAULT_REGISTRY):
    """
    Encodes `value` modulo base**width as exactly `width` symbols.

    The encoding is left-padded with the alphabet's zero symbol, which keeps
    leading zero-valued symbols that a plain positional encoding drops.
    """
    alphabet = registry.charset_for(base)
    if width <= 0:
        return alphabet.empty()
    encoded = num_to_base(value % (base ** width), base, registry)
    missing = width - len(encoded)
    return alphabet.repeat(alphabet.zero_symbol, missing) + encoded

# === End of src/base_encoder.py ===
