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
# Filename: src/content_fitter.py

"""
Normalizes page content to the fixed length the address arithmetic expects.

Content that is too long keeps its LAST `length` symbols. Address decoding
mirrors this by returning the last `length` symbols of the recovered value.

Content that is too short is padded either deterministically (blanks for
text, NUL bytes for binary, appended on the right) or randomly: the content is
dropped at a uniformly random offset and surrounded by random symbols from
the content alphabet.

Random padding always draws from a generator supplied by the caller. When
none is given a fresh entropy-seeded `random.Random()` is created for that
call only. `padding_rng(content, "length")` seeds the generator from the
content length for deterministic test runs; every input of the same
length then gets the same padding layout.
"""

import logging
import random

from babel_errors import ContentExceedsAlphabetError

logger = logging.getLogger(__name__)

PADDING_SEED_MODES = ("entropy", "length")


def padding_rng(content, mode: str = "entropy") -> random.Random:
    """Creates the random generator used to pad `content`."""
    if mode == "entropy":
        return random.Random()
    if mode == "length":
        return random.Random(len(content))
    raise ValueError(f"Unknown padding seed mode '{mode}'. Expected one of: {', '.join(PADDING_SEED_MODES)}")


def check_content(content, alphabet, offset: int = 0):
    """
    Raises ContentExceedsAlphabetError on the first symbol outside `alphabet`.

    `offset` is added to reported positions when `content` is one chunk of a
    longer stream.
    """
    for position, symbol in enumerate(content, start=offset):
        if symbol not in alphabet:
            raise ContentExceedsAlphabetError(symbol, position, alphabet.base)


def sanitize_text(raw, alphabet, ignore_case: bool = False):
    """
    Drops every symbol of `raw` that the alphabet cannot represent.

    With `ignore_case` the text is lower-cased first, so "Hello World" becomes
    "hello world" under the stock page alphabet instead of "ello orld".
    Binary alphabets accept every byte, so raw bytes pass through unchanged.
    """
    if alphabet.is_binary:
        return bytes(raw)
    if ignore_case:
        raw = raw.lower()
    return alphabet.join(symbol for symbol in raw if symbol in alphabet)


def fit_to_length(content, length: int, alphabet, pad_random: bool, rng=None):
    """
    Fits content to exactly `length` symbols.

    Args:
        content (str | bytes): Page content drawn from `alphabet`.
        length (int): The target length.
        alphabet (Alphabet): The content alphabet.
        pad_random (bool): Pad with random symbols at a random offset instead
            of appending filler symbols.
        rng (random.Random, optional): Generator for random padding.

    Returns:
        str | bytes: The fitted content.

    Raises:
        ContentExceedsAlphabetError: If `content` holds a symbol outside
            `alphabet`. Checked before any truncation or padding.
    """
    if length < 0:
        raise ValueError(f"Target length must be non-negative, got {length}.")
    if isinstance(content, bytearray):
        content = bytes(content)

    check_content(content, alphabet)

    if len(content) >= length:
        # Truncate, keeping the tail
        return content[len(content) - length:]

    missing = length - len(content)
    if not pad_random:
        return content + alphabet.repeat(alphabet.filler, missing)

    if rng is None:
        rng = random.Random()
    placement = rng.randint(0, missing)
    before = alphabet.join(rng.choices(alphabet.symbols, k=placement))
    after = alphabet.join(rng.choices(alphabet.symbols, k=missing - placement))
    logger.debug(f"Placed {len(content)} content symbols at offset {placement} of {length}")
    return before + content + after

# === End of src/content_fitter.py ===
