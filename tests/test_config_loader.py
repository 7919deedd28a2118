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
# Filename: tests/test_config_loader.py

import os

import pytest
from configparser import ConfigParser

from config_loader import (
    CONFIG_OVERRIDE_ENV,
    PROJECT_ROOT,
    get_config_section_as_dict,
    get_config_value,
    load_app_config,
)

# A valid config content for happy path testing
VALID_CONFIG_CONTENT = """
[Library]
max_page_len = 3200 ; symbols per page
address_base = 36
padding_seed = entropy # default

[Binary]
text_base = 256
"""


def test_get_config_value_happy_path(config_file):
    """
    Tests the get_config_value helper with correct types.
    """
    config_path = config_file(VALID_CONFIG_CONTENT)
    config = ConfigParser()
    config.read(config_path)

    # Test getting an integer
    page_len = get_config_value(config, 'Library', 'max_page_len', value_type=int)
    assert page_len == 3200
    assert isinstance(page_len, int)

    # Test getting a string with an inline comment stripped
    seed_mode = get_config_value(config, 'Library', 'padding_seed', value_type=str)
    assert seed_mode == 'entropy'
    assert isinstance(seed_mode, str)


def test_get_config_value_fallback(config_file):
    """
    Tests that the fallback mechanism works for missing keys.
    """
    config_path = config_file("[Library]\nkey = value")
    config = ConfigParser()
    config.read(config_path)

    fallback_val = get_config_value(config, 'Library', 'missing_key', fallback=123)
    assert fallback_val == 123


def test_get_config_value_fallback_key(config_file):
    config_path = config_file("[Library]\npage_length = 99")
    config = ConfigParser()
    config.read(config_path)

    value = get_config_value(config, 'Library', 'max_page_len', value_type=int, fallback_key='page_length')
    assert value == 99


def test_get_config_value_missing_section(config_file):
    """
    Tests that None is returned when a section is missing and no fallback is provided.
    """
    config_path = config_file("[Library]\nkey = value")
    config = ConfigParser()
    config.read(config_path)

    value = get_config_value(config, 'MissingSection', 'some_key')
    assert value is None


def test_get_config_value_invalid_type(config_file):
    """
    Tests that None is returned for incorrect data types when no fallback is provided.
    """
    config_path = config_file("[Library]\nmax_page_len = not_a_number")
    config = ConfigParser()
    config.read(config_path)

    value = get_config_value(config, 'Library', 'max_page_len', value_type=int)
    assert value is None


def test_get_config_value_bool(config_file):
    config_path = config_file("[Library]\nenabled = yes\nbroken = maybe")
    config = ConfigParser()
    config.read(config_path)

    assert get_config_value(config, 'Library', 'enabled', value_type=bool) is True
    assert get_config_value(config, 'Library', 'broken', value_type=bool, fallback=False) is False


def test_get_config_section_as_dict_raw(config_file):
    config_path = config_file("[Alphabets]\npercent = abc%\n")
    config = ConfigParser()
    config.read(config_path)

    assert get_config_section_as_dict(config, 'Alphabets', raw=True) == {'percent': 'abc%'}
    assert get_config_section_as_dict(config, 'Missing') == {}


def test_load_app_config_explicit_path(config_file):
    config = load_app_config(config_file(VALID_CONFIG_CONTENT))
    assert config.has_section('Binary')


def test_load_app_config_override_env(config_file, monkeypatch):
    path = config_file(VALID_CONFIG_CONTENT)
    monkeypatch.setenv(CONFIG_OVERRIDE_ENV, path)
    config = load_app_config()
    assert config.get('Binary', 'text_base') == '256'


def test_load_app_config_missing_file_is_empty(tmp_path):
    config = load_app_config(str(tmp_path / "missing.ini"))
    assert config.sections() == []


def test_project_root_contains_pyproject():
    assert os.path.exists(os.path.join(PROJECT_ROOT, "pyproject.toml"))

# === End of tests/test_config_loader.py ===
