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
# Filename: src/library_settings.py

"""
Library profiles: the constants one deployment of the engine runs with.

A profile is a section of config.ini. `[Library]` is the stock text library
(3200-symbol pages over the 29-symbol alphabet, base-36 addresses) and
`[Binary]` addresses raw byte payloads. Any key a section leaves out takes the
code default below.

    [Library]
    max_page_len = 3200
    text_base = 29
    address_base = 36
    walls_per_hexagon = 4
    shelves_per_wall = 5
    volumes_per_shelf = 32
    pages_per_volume = 410
    min_address_len = 0      ; 0 disables region padding
    padding_seed = entropy   ; or 'length' for reproducible test runs

Extra text alphabets can be registered in an `[Alphabets]` section, one
`name = symbols` entry each. Surround the symbols with double quotes to keep
leading or trailing blanks.
"""

import logging
from dataclasses import dataclass, field

from alphabets import DEFAULT_REGISTRY
from config_loader import get_config_section_as_dict, get_config_value
from content_fitter import PADDING_SEED_MODES
from library_coordinate import CoordinateBounds

logger = logging.getLogger(__name__)

DEFAULT_PROFILE = "Library"
ALPHABETS_SECTION = "Alphabets"

MAX_PAGE_LEN = 3200
TEXT_BASE = 29
ADDRESS_BASE = 36


@dataclass(frozen=True)
class LibrarySettings:
    max_page_len: int = MAX_PAGE_LEN
    text_base: int = TEXT_BASE
    address_base: int = ADDRESS_BASE
    bounds: CoordinateBounds = field(default_factory=CoordinateBounds)
    min_address_len: int = 0
    padding_seed: str = "entropy"

    def __post_init__(self):
        if self.max_page_len < 1:
            raise ValueError(f"max_page_len must be positive, got {self.max_page_len}.")
        if self.min_address_len < 0:
            raise ValueError(f"min_address_len must not be negative, got {self.min_address_len}.")
        if self.padding_seed not in PADDING_SEED_MODES:
            raise ValueError(
                f"padding_seed must be one of {', '.join(PADDING_SEED_MODES)}, got '{self.padding_seed}'."
            )


def load_library_settings(config, profile: str = DEFAULT_PROFILE) -> LibrarySettings:
    """
    Builds the settings of one profile from a loaded config.

    Args:
        config (configparser.ConfigParser): The loaded config object.
        profile (str): The section to read.

    Raises:
        ValueError: If a non-default profile has no section, or a value is invalid.
    """
    if profile != DEFAULT_PROFILE and not config.has_section(profile):
        raise ValueError(f"Unknown library profile '{profile}': no [{profile}] section in the configuration.")

    defaults = LibrarySettings()
    bounds = CoordinateBounds(
        walls_per_hexagon=get_config_value(config, profile, 'walls_per_hexagon',
                                           fallback=defaults.bounds.walls_per_hexagon, value_type=int),
        shelves_per_wall=get_config_value(config, profile, 'shelves_per_wall',
                                          fallback=defaults.bounds.shelves_per_wall, value_type=int),
        volumes_per_shelf=get_config_value(config, profile, 'volumes_per_shelf',
                                           fallback=defaults.bounds.volumes_per_shelf, value_type=int),
        pages_per_volume=get_config_value(config, profile, 'pages_per_volume',
                                          fallback=defaults.bounds.pages_per_volume, value_type=int),
    )
    settings = LibrarySettings(
        max_page_len=get_config_value(config, profile, 'max_page_len',
                                      fallback=defaults.max_page_len, value_type=int),
        text_base=get_config_value(config, profile, 'text_base', fallback=defaults.text_base, value_type=int),
        address_base=get_config_value(config, profile, 'address_base',
                                      fallback=defaults.address_base, value_type=int),
        bounds=bounds,
        min_address_len=get_config_value(config, profile, 'min_address_len',
                                         fallback=defaults.min_address_len, value_type=int),
        padding_seed=get_config_value(config, profile, 'padding_seed', fallback=defaults.padding_seed),
    )
    logger.debug(f"Loaded library profile [{profile}]: {settings}")
    return settings


def load_registry(config, base_registry=DEFAULT_REGISTRY):
    """
    Returns `base_registry` extended with the alphabets of the [Alphabets] section.

    The stock registry is returned unchanged when the section is absent.
    """
    entries = get_config_section_as_dict(config, ALPHABETS_SECTION, raw=True)
    if not entries:
        return base_registry

    charsets = []
    for name, symbols in entries.items():
        if len(symbols) >= 2 and symbols[0] == symbols[-1] == '"':
            symbols = symbols[1:-1]
        logger.debug(f"Registering alphabet '{name}' (base {len(symbols)})")
        charsets.append(symbols)
    return base_registry.extended(charsets)

# === End of src/library_settings.py ===
