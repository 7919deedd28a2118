#!/usr/bin/env python3
# -*- coding: utf-8 -*-
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
# Filename: tests/conftest.py

import sys
import os

# Add the 'src' directory to the Python path
# This ensures that modules like 'address_codec', 'base_encoder', etc.,
# can be imported directly from the 'src' directory by tests,
# allowing coverage.py to correctly track their execution.
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
src_path = os.path.join(project_root, 'src')

if src_path not in sys.path:
    sys.path.insert(0, src_path)

# Parametrized test IDs call str() on integers wider than the default
# 4300-digit conversion limit, which aborts collection.
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)

import random

import pytest

from address_codec import BabelLibrary
from library_settings import LibrarySettings


@pytest.fixture
def small_library():
    """A text library with 40-symbol pages, so arithmetic stays quick."""
    return BabelLibrary(LibrarySettings(max_page_len=40))


@pytest.fixture
def binary_library():
    """A byte library with 64-byte pages and Base64 addresses."""
    return BabelLibrary(LibrarySettings(max_page_len=64, text_base=256, address_base=64))


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def config_file(tmp_path):
    """A fixture to create a temporary config file for testing."""
    def _create_file(content):
        config_path = tmp_path / "config.ini"
        config_path.write_text(content, encoding="utf-8")
        return str(config_path)
    return _create_file

# === End of tests/conftest.py ===
