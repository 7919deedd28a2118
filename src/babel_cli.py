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
# Filename: src/babel_cli.py

"""
Command-line front end for the Library of Babel address engine.

Sub-commands:
-   `address`: Computes the address of a page. The content comes from a
    positional argument, `--input FILE`, or standard input.
-   `page`: Recomputes the page stored at an address and prints it, or writes
    it to `--output FILE`.
-   `batch`: Addresses every file in a directory and writes a tab-separated
    manifest (`filename`, `address`).

Text profiles read and write UTF-8; binary profiles (e.g. `--profile Binary`)
read and write raw bytes. Addresses and pages go to standard output so a
calling script can capture them; status messages go to the log (stderr).

Usage:
    pdm run babel address "hello world"
    pdm run babel address --input notes.txt --sanitize --ignore-case
    pdm run babel page "<region>:3:5:07:219" --output page.txt
    pdm run babel batch data/pages --manifest output/manifest.tsv
"""

import argparse
import csv
import logging
import random
import sys
from pathlib import Path

from colorama import Fore, init
from tqdm import tqdm

from address_codec import BabelLibrary
from babel_errors import BabelError
from config_loader import APP_CONFIG, load_app_config
from content_fitter import padding_rng, sanitize_text
from library_settings import DEFAULT_PROFILE

# Initialize colorama
init(autoreset=True, strip=False)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Compute Library of Babel addresses for content, and content for addresses.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--config", help="Path to an alternative config.ini.")
    parser.add_argument("--profile", default=DEFAULT_PROFILE,
                        help="Library profile (config.ini section) to use.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    address = subparsers.add_parser("address", help="Compute the address of a page.")
    address.add_argument("text", nargs="?", help="Page content. Reads --input or stdin when omitted.")
    address.add_argument("--input", help="Read the page content from this file.")
    address.add_argument("--no-random-padding", action="store_true",
                         help="Pad short content with trailing blanks instead of random symbols.")
    address.add_argument("--ignore-case", action="store_true", help="Lower-case text content first.")
    address.add_argument("--sanitize", action="store_true",
                         help="Drop characters the content alphabet cannot represent.")
    address.add_argument("--length-seeded", action="store_true",
                         help="Seed padding from the content length (reproducible, for testing).")
    address.add_argument("--seed", type=int, help="Seed the random generator (reproducible, for testing).")

    page = subparsers.add_parser("page", help="Recompute the page stored at an address.")
    page.add_argument("address", help="An address of the form REGION:WALL:SHELF:VOLUME:PAGE.")
    page.add_argument("--output", help="Write the page to this file instead of stdout.")

    batch = subparsers.add_parser("batch", help="Address every file in a directory.")
    batch.add_argument("directory", help="Directory holding one page per file.")
    batch.add_argument("--manifest", help="Manifest path. Defaults to <directory>/addresses.tsv.")
    batch.add_argument("--no-random-padding", action="store_true",
                       help="Pad short content with trailing blanks instead of random symbols.")
    batch.add_argument("--quiet", action="store_true", help="Hide the progress bar.")
    return parser


def _make_rng(args, content):
    if getattr(args, "seed", None) is not None:
        return random.Random(args.seed)
    if getattr(args, "length_seeded", False):
        return padding_rng(content, "length")
    return None


def _read_file(path: Path, library: BabelLibrary):
    if library.is_binary:
        return path.read_bytes()
    return path.read_text(encoding="utf-8").rstrip("\r\n")


def _read_content(args, library: BabelLibrary):
    """Collects the page content from the argument, --input, or stdin."""
    if args.input:
        path = Path(args.input)
        if not path.is_file():
            logging.error(f"{Fore.RED}Error: Input file not found: {args.input}")
            sys.exit(1)
        return _read_file(path, library)
    if args.text is not None:
        return args.text.encode("utf-8") if library.is_binary else args.text
    if library.is_binary:
        return sys.stdin.buffer.read()
    return sys.stdin.read().rstrip("\r\n")


def run_address(args, library: BabelLibrary):
    content = _read_content(args, library)
    if not library.is_binary:
        if args.sanitize:
            content = sanitize_text(content, library.text_alphabet, ignore_case=args.ignore_case)
        elif args.ignore_case:
            content = content.lower()

    if len(content) > library.page_length:
        logging.warning(f"{Fore.YELLOW}Content is {len(content):,} symbols long; only the last "
                        f"{library.page_length:,} are addressed.")

    address = library.compute_address(content, pad_random=not args.no_random_padding,
                                      rng=_make_rng(args, content))
    print(address)


def run_page(args, library: BabelLibrary):
    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        if library.is_binary:
            with open(output_path, "wb") as f:
                written = library.search_to_stream(args.address, f)
        else:
            with open(output_path, "w", encoding="utf-8", newline="") as f:
                written = library.search_to_stream(args.address, f)
        logging.info(f"{Fore.CYAN}Wrote {written:,} symbols to '{output_path}'{Fore.RESET}")
        return

    page = library.search(args.address)
    if library.is_binary:
        sys.stdout.buffer.write(page)
        sys.stdout.buffer.flush()
    else:
        print(page)


def run_batch(args, library: BabelLibrary):
    directory = Path(args.directory)
    if not directory.is_dir():
        logging.error(f"{Fore.RED}Error: Provided path is not a valid directory: {args.directory}")
        sys.exit(1)

    manifest_path = Path(args.manifest) if args.manifest else directory / "addresses.tsv"
    files = sorted(p for p in directory.iterdir() if p.is_file() and p.resolve() != manifest_path.resolve())
    if not files:
        logging.warning(f"{Fore.YELLOW}No files found in '{directory}'. Nothing to address.")
        return

    rows = []
    failures = []
    with tqdm(total=len(files), desc="Addressing files", unit="file", ncols=80, disable=args.quiet) as pbar:
        for path in files:
            try:
                address = library.compute_address(_read_file(path, library),
                                                  pad_random=not args.no_random_padding)
                rows.append((path.name, address))
            except (BabelError, UnicodeDecodeError) as e:
                failures.append(path.name)
                tqdm.write(f"{Fore.YELLOW}  - Skipping '{path.name}': {e}")
            pbar.update(1)

    manifest_path.parent.mkdir(parents=True, exist_ok=True)
    with open(manifest_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, delimiter="\t")
        writer.writerow(["filename", "address"])
        writer.writerows(rows)

    if failures:
        logging.error(f"{Fore.RED}FAILURE: Addressed {len(rows):,} of {len(files):,} files; "
                      f"{len(failures):,} could not be encoded.{Fore.RESET}")
        sys.exit(1)
    logging.info(f"{Fore.GREEN}SUCCESS: Addressed {len(rows):,} files. Manifest saved to '{manifest_path}'.{Fore.RESET}")


COMMANDS = {
    "address": run_address,
    "page": run_page,
    "batch": run_batch,
}


def main():
    """Parses arguments, builds the selected library profile and runs the sub-command."""
    args = build_parser().parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")

    config = load_app_config(args.config) if args.config else APP_CONFIG
    try:
        library = BabelLibrary.from_config(config, args.profile)
        COMMANDS[args.command](args, library)
    except BabelError as e:
        logging.error(f"{Fore.RED}Error: {e}")
        sys.exit(1)
    except ValueError as e:
        # Invalid configuration values
        logging.error(f"{Fore.RED}Configuration error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

# === End of src/babel_cli.py ===
