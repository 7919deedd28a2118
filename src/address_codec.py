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
# Filename: src/address_codec.py

"""
The address codec: turns page content into an address and back.

Encoding a page (`BabelLibrary.compute_address`):
1.  Fit the content to `max_page_len` symbols (content_fitter).
2.  Read the fitted page as one positional number V over the content base.
3.  Draw a random library coordinate and take its seed.
4.  Fuse them: A = seed * base ** max_page_len + V. The exponent equals the
    page length, so the two parts never share a place value.
5.  Write A in the address alphabet; that string is the region.
6.  Return `region:wall:shelf:volume:page`.

Looking a page up (`BabelLibrary.search`) runs the same steps backwards:
parse and validate the coordinate, decode the region into A', subtract
seed * base ** max_page_len and write the remainder back in the content
alphabet as exactly `max_page_len` symbols. Content is never stored; every
page is recomputed from its address.

Addresses that were not produced by this codec still resolve to a page: the
remainder is reduced modulo base ** max_page_len, which keeps the last
`max_page_len` symbols of its encoding.

When `min_address_len` is set, regions shorter than it are extended with
pseudo-random address symbols drawn from a generator seeded by the SHA-256
digest of the short region, so short pages do not advertise their brevity.
The padding is recognized on lookup by recomputing it.
"""

import hashlib
import logging
import random

from alphabets import DEFAULT_REGISTRY
from babel_errors import UnsupportedBaseError
from base_encoder import base_to_num, num_to_base, to_fixed_width
from content_fitter import check_content, fit_to_length, padding_rng
from library_coordinate import ADDRESS_SEPARATOR, generate_coordinate, parse_coordinate
from library_settings import DEFAULT_PROFILE, LibrarySettings, load_library_settings, load_registry
from utils.stream_utils import DEFAULT_CHUNK_SIZE, read_tail, write_chunks

logger = logging.getLogger(__name__)

# Shortest padding appended to a short region.
MIN_REGION_PAD = 8


class BabelLibrary:
    """
    One configured library: content alphabet, address alphabet, page length
    and coordinate bounds.

    Instances hold no mutable state and can be shared between callers.

    Args:
        settings (LibrarySettings, optional): Defaults to the stock text library.
        registry (AlphabetRegistry, optional): Alphabet source.

    Raises:
        UnsupportedBaseError: If a base is not registered, or the address
            alphabet is binary or contains the address separator.
    """

    def __init__(self, settings=None, registry=DEFAULT_REGISTRY):
        self.settings = settings if settings is not None else LibrarySettings()
        self.registry = registry
        self.text_alphabet = registry.charset_for(self.settings.text_base)
        self.address_alphabet = registry.charset_for(self.settings.address_base)

        if self.address_alphabet.is_binary:
            raise UnsupportedBaseError(self.settings.address_base, "address alphabets must be printable text")
        if ADDRESS_SEPARATOR in self.address_alphabet:
            raise UnsupportedBaseError(
                self.settings.address_base, f"address alphabet contains the separator '{ADDRESS_SEPARATOR}'"
            )

        # Place value of the coordinate seed inside the address integer
        self._seed_multiplier = self.settings.text_base ** self.settings.max_page_len

    @classmethod
    def from_config(cls, config, profile: str = DEFAULT_PROFILE):
        """Builds the library described by one profile of a loaded config."""
        return cls(load_library_settings(config, profile), load_registry(config))

    @property
    def page_length(self) -> int:
        return self.settings.max_page_len

    @property
    def is_binary(self) -> bool:
        return self.text_alphabet.is_binary

    def compute_address(self, content, pad_random: bool = True, rng=None) -> str:
        """
        Computes an address for `content`.

        Args:
            content (str | bytes): Page content over the content alphabet.
            pad_random (bool): Pad short content with random symbols at a
                random offset instead of trailing filler.
            rng (random.Random, optional): Generator for the padding and the
                coordinate. Defaults to one chosen by the `padding_seed`
                setting, created fresh for this call.

        Returns:
            str: `region:wall:shelf:volume:page`.

        Raises:
            ContentExceedsAlphabetError: If `content` has a symbol outside the
                content alphabet.
        """
        if rng is None:
            rng = padding_rng(content, self.settings.padding_seed)

        page = fit_to_length(content, self.page_length, self.text_alphabet, pad_random, rng)
        page_value = base_to_num(page, self.settings.text_base, self.registry)

        coordinate = generate_coordinate(rng, self.settings.bounds)
        address_value = coordinate.seed * self._seed_multiplier + page_value

        region = num_to_base(address_value, self.settings.address_base, self.registry)
        region = self._pad_region(region)
        logger.debug(f"Computed region of {len(region)} symbols for coordinate seed {coordinate.seed}")
        return coordinate.format_address(region)

    def search(self, address: str):
        """
        Recomputes the page stored at `address`.

        Returns:
            str | bytes: Exactly `max_page_len` content symbols.

        Raises:
            MalformedAddressError: If the address is not five colon-separated fields.
            CoordinateOutOfRangeError: If a coordinate field exceeds its bound.
            SymbolNotInAlphabetError: If the region has a symbol outside the
                address alphabet.
        """
        region, coordinate = parse_coordinate(address, self.settings.bounds)
        region = self._strip_region_padding(region)

        address_value = base_to_num(region, self.settings.address_base, self.registry)
        page_value = address_value - coordinate.seed * self._seed_multiplier
        return to_fixed_width(page_value, self.settings.text_base, self.page_length, self.registry)

    def compute_address_from_stream(self, stream, pad_random: bool = True, rng=None,
                                    chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
        """
        Same as `compute_address`, reading the content from a stream.

        Every chunk is checked against the content alphabet as it arrives;
        only the last `max_page_len` symbols are kept in memory.
        """
        content = read_tail(
            stream,
            self.page_length,
            self.text_alphabet.empty(),
            chunk_size=chunk_size,
            on_chunk=lambda chunk, offset: check_content(chunk, self.text_alphabet, offset),
        )
        return self.compute_address(content, pad_random=pad_random, rng=rng)

    def search_to_stream(self, address: str, sink, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
        """Writes the page at `address` to `sink`; returns the number of symbols written."""
        return write_chunks(sink, self.search(address), chunk_size=chunk_size)

    def _region_padding(self, region: str, count: int) -> str:
        digest = hashlib.sha256(region.encode("utf-8")).digest()
        rng = random.Random(int.from_bytes(digest, "big"))
        return "".join(rng.choices(self.address_alphabet.symbols, k=count))

    def _padding_length(self, region_length: int) -> int:
        return max(self.settings.min_address_len - region_length, MIN_REGION_PAD)

    def _pad_region(self, region: str) -> str:
        if len(region) >= self.settings.min_address_len:
            return region
        return region + self._region_padding(region, self._padding_length(len(region)))

    def _strip_region_padding(self, region: str) -> str:
        min_len = self.settings.min_address_len
        if min_len == 0:
            return region
        for pad_length in range(MIN_REGION_PAD, len(region)):
            candidate = region[:-pad_length]
            if len(candidate) >= min_len or pad_length != self._padding_length(len(candidate)):
                continue
            if region[-pad_length:] == self._region_padding(candidate, pad_length):
                return candidate
        return region


_default_library = None


def get_default_library() -> BabelLibrary:
    """Returns the library of the [Library] profile in config.ini, built on first use."""
    global _default_library
    if _default_library is None:
        from config_loader import APP_CONFIG
        _default_library = BabelLibrary.from_config(APP_CONFIG, DEFAULT_PROFILE)
    return _default_library


def search_by_content(content, pad_random: bool = True, rng=None) -> str:
    """Computes an address for `content` in the default library."""
    return get_default_library().compute_address(content, pad_random=pad_random, rng=rng)


def search_by_address(address: str):
    """Recomputes the page at `address` in the default library."""
    return get_default_library().search(address)

# === End of src/address_codec.py ===
