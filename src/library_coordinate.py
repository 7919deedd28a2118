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
# Filename: src/library_coordinate.py

"""
Library coordinates: the wall/shelf/volume/page part of an address.

A coordinate is four bounded integers, each kept as a zero-left-padded
decimal string whose width is the digit count of its upper bound. With the
stock bounds (4 walls, 5 shelves, 32 volumes, 410 pages) a coordinate looks
like wall "3", shelf "5", volume "07", page "219".

Concatenating page + volume + shelf + wall and reading the result as a decimal
number gives the coordinate seed, which the address codec folds into the
high-order end of the address integer.

Addresses have the shape `REGION:WALL:SHELF:VOLUME:PAGE`. Two parsers are
provided:
-   `get_address_components()` only splits and re-pads the fields.
-   `parse_coordinate()` additionally checks every field against its bound.
"""

import logging
from dataclasses import dataclass

from babel_errors import CoordinateOutOfRangeError, MalformedAddressError

logger = logging.getLogger(__name__)

WALLS_PER_HEXAGON = 4
SHELVES_PER_WALL = 5
VOLUMES_PER_SHELF = 32
PAGES_PER_VOLUME = 410

ADDRESS_SEPARATOR = ":"
COORDINATE_FIELDS = ("wall", "shelf", "volume", "page")


@dataclass(frozen=True)
class CoordinateBounds:
    """Upper bounds of the four coordinate fields. Lower bounds are always 1."""
    walls_per_hexagon: int = WALLS_PER_HEXAGON
    shelves_per_wall: int = SHELVES_PER_WALL
    volumes_per_shelf: int = VOLUMES_PER_SHELF
    pages_per_volume: int = PAGES_PER_VOLUME

    def __post_init__(self):
        for name in ("walls_per_hexagon", "shelves_per_wall", "volumes_per_shelf", "pages_per_volume"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ValueError(f"Coordinate bound '{name}' must be a positive integer, got {value!r}.")

    def bound(self, field: str) -> int:
        return {
            "wall": self.walls_per_hexagon,
            "shelf": self.shelves_per_wall,
            "volume": self.volumes_per_shelf,
            "page": self.pages_per_volume,
        }[field]

    def width(self, field: str) -> int:
        return len(str(self.bound(field)))


DEFAULT_BOUNDS = CoordinateBounds()


@dataclass(frozen=True)
class LibraryCoordinate:
    wall: str
    shelf: str
    volume: str
    page: str

    @property
    def seed(self) -> int:
        """The decimal concatenation page + volume + shelf + wall as an integer."""
        return int(self.page + self.volume + self.shelf + self.wall)

    def format_address(self, region: str) -> str:
        return ADDRESS_SEPARATOR.join((region, self.wall, self.shelf, self.volume, self.page))


@dataclass(frozen=True)
class AddressComponents:
    region: str
    wall: str
    shelf: str
    volume: str
    page: str

    @property
    def coordinate(self) -> LibraryCoordinate:
        return LibraryCoordinate(self.wall, self.shelf, self.volume, self.page)


def gen_random_padded_int(max_value: int, rng) -> str:
    """
    Generates a random integer in [1, max_value], left-padded with zeros.

    Args:
        max_value (int): The inclusive upper bound.
        rng (random.Random): The caller's random generator.

    Returns:
        str: The number, padded to the digit count of `max_value`.
    """
    value = rng.randint(1, max_value)
    return str(value).zfill(len(str(max_value)))


def generate_coordinate(rng, bounds: CoordinateBounds = DEFAULT_BOUNDS) -> LibraryCoordinate:
    """Draws each coordinate field independently and uniformly from its range."""
    coordinate = LibraryCoordinate(
        wall=gen_random_padded_int(bounds.walls_per_hexagon, rng),
        shelf=gen_random_padded_int(bounds.shelves_per_wall, rng),
        volume=gen_random_padded_int(bounds.volumes_per_shelf, rng),
        page=gen_random_padded_int(bounds.pages_per_volume, rng),
    )
    logger.debug(f"Generated library coordinate {coordinate} (seed {coordinate.seed})")
    return coordinate


def get_address_components(address: str, bounds: CoordinateBounds = DEFAULT_BOUNDS) -> AddressComponents:
    """
    Splits an address into its region and coordinate fields.

    Coordinate fields are re-padded to their canonical widths (so volume "4"
    becomes "04" with the stock bounds). Field values are not range-checked.

    Raises:
        MalformedAddressError: If the address does not have exactly five
            colon-separated fields, the region is empty, or a coordinate field
            is not a plain decimal number.
    """
    if not isinstance(address, str):
        raise MalformedAddressError(f"Address must be a string, not {type(address).__name__}.")

    parts = address.strip().split(ADDRESS_SEPARATOR)
    if len(parts) != 5:
        raise MalformedAddressError(
            f"Address must have 5 colon-separated fields (REGION:WALL:SHELF:VOLUME:PAGE), got {len(parts)}."
        )

    region, *fields = parts
    if not region:
        raise MalformedAddressError("Address region is empty.")

    padded = []
    for name, value in zip(COORDINATE_FIELDS, fields):
        if not (value.isascii() and value.isdigit()):
            raise MalformedAddressError(f"Coordinate field '{name}' is not a decimal number: {value!r}")
        padded.append(value.zfill(bounds.width(name)))

    return AddressComponents(region, *padded)


def validate_coordinate(coordinate: LibraryCoordinate, bounds: CoordinateBounds = DEFAULT_BOUNDS):
    """Raises CoordinateOutOfRangeError if any field is outside [1, bound]."""
    for name in COORDINATE_FIELDS:
        value = int(getattr(coordinate, name))
        bound = bounds.bound(name)
        if not 1 <= value <= bound:
            raise CoordinateOutOfRangeError(name, value, bound)


def parse_coordinate(address: str, bounds: CoordinateBounds = DEFAULT_BOUNDS):
    """
    Parses and validates the coordinate of an address.

    Returns:
        tuple[str, LibraryCoordinate]: The region string and the coordinate.
    """
    components = get_address_components(address, bounds)
    coordinate = components.coordinate
    validate_coordinate(coordinate, bounds)
    return components.region, coordinate

# === End of src/library_coordinate.py ===
