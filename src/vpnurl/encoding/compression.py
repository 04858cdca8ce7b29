#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import zlib

from ..core.errors import DecompressionError


def compress_data(data: bytes) -> bytes:
    return zlib.compress(data, zlib.Z_DEFAULT_COMPRESSION)


def decompress_data(data: bytes, *, max_length: int | None = None) -> bytes:
    """Inflate a zlib stream, stopping after ``max_length`` bytes of output.

    A stream that ends before its terminator is reported as malformed unless the
    output limit was reached first.
    """
    decompressor = zlib.decompressobj()
    try:
        if max_length is None:
            output = decompressor.decompress(data)
        else:
            output = decompressor.decompress(data, max_length)
    except zlib.error as exc:
        raise DecompressionError(f"invalid compressed data: {exc}") from exc
    limit_reached = max_length is not None and len(output) >= max_length
    if not decompressor.eof and not limit_reached:
        raise DecompressionError("compressed data is truncated")
    return output
