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
# Filename: src/babel_errors.py

"""
Exception types raised by the address engine.

All errors are local validation failures. They derive from `ValueError` so
callers that only care about "bad input" can catch the built-in type, while
the command-line front end catches `BabelError` to report a clean message.
"""


class BabelError(ValueError):
    """Base class for every error raised by the address engine."""


class UnsupportedBaseError(BabelError):
    """The requested numeral base has no registered alphabet."""

    def __init__(self, base, reason=None):
        self.base = base
        message = f"Invalid base: {base}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class SymbolNotInAlphabetError(BabelError):
    """A symbol could not be indexed in the alphabet of the given base."""

    def __init__(self, symbol, base):
        self.symbol = symbol
        self.base = base
        super().__init__(f"Symbol {symbol!r} is not in the base-{base} alphabet.")


class ContentExceedsAlphabetError(BabelError):
    """Content holds a symbol outside the declared content alphabet."""

    def __init__(self, symbol, position, base):
        self.symbol = symbol
        self.position = position
        self.base = base
        super().__init__(
            f"Content symbol {symbol!r} at position {position} is outside the "
            f"base-{base} content alphabet."
        )


class CoordinateOutOfRangeError(BabelError):
    """A parsed coordinate field is outside [1, bound]."""

    def __init__(self, field, value, bound):
        self.field = field
        self.value = value
        self.bound = bound
        super().__init__(f"Coordinate field '{field}' = {value} is outside the range [1, {bound}].")


class MalformedAddressError(BabelError):
    """The address does not have the REGION:WALL:SHELF:VOLUME:PAGE shape."""

# === End of src/babel_errors.py ===
