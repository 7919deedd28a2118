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
# Filename: src/utils/stream_utils.py

"""
Provides shared helpers that move page content between streams and buffers.

Both helpers work on text streams (str chunks) and binary streams (bytes
chunks) alike.
"""

DEFAULT_CHUNK_SIZE = 64 * 1024


def read_tail(stream, limit: int, empty, chunk_size: int = DEFAULT_CHUNK_SIZE, on_chunk=None):
    """
    Reads a stream to exhaustion, keeping only its last `limit` elements.

    Args:
        stream: Any object with a `read(size)` method.
        limit (int): How many trailing elements to keep.
        empty (str | bytes): Returned when the stream is empty; also fixes the
            expected chunk type.
        chunk_size (int): Read size.
        on_chunk (callable, optional): Called as `on_chunk(chunk, offset)` for
            every chunk before it is merged, e.g. to validate symbols.

    Returns:
        str | bytes: The retained tail.
    """
    tail = empty
    consumed = 0
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        if on_chunk is not None:
            on_chunk(chunk, consumed)
        consumed += len(chunk)
        tail = tail + chunk
        if len(tail) > limit:
            tail = tail[len(tail) - limit:]
    return tail


def write_chunks(sink, content, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Writes `content` to `sink` in chunks and returns the number of elements written."""
    for start in range(0, len(content), chunk_size):
        sink.write(content[start:start + chunk_size])
    return len(content)

# === End of src/utils/stream_utils.py ===
