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

from ..core.errors import LengthOverflow, TruncatedHeader

HEADER_LEN = 4
MAX_LENGTH = 0xFFFFFFFF


def create_header(length: int) -> bytes:
    if length < 0:
        raise ValueError("length must be non-negative")
    if length > MAX_LENGTH:
        raise LengthOverflow(f"payload length exceeds 2^32-1 bytes: {length}")
    return length.to_bytes(HEADER_LEN, "big")


def read_header(data: bytes) -> int:
    if len(data) < HEADER_LEN:
        raise TruncatedHeader(f"data too short for header: {len(data)} bytes")
    return int.from_bytes(data[:HEADER_LEN], "big")
