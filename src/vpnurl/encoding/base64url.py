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

import base64
import binascii
import re

from ..core.errors import InvalidEncoding

_URLSAFE_RE = re.compile(r"[A-Za-z0-9_-]*")


def encode_base64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def decode_base64url(text: str) -> bytes:
    body = text.rstrip("=")
    if not _URLSAFE_RE.fullmatch(body):
        raise InvalidEncoding("invalid base64url data: unexpected character")
    if len(body) % 4 == 1:
        raise InvalidEncoding("invalid base64url data: bad length")
    padded = body + "=" * (-len(body) % 4)
    try:
        data = base64.urlsafe_b64decode(padded)
    except binascii.Error as exc:
        raise InvalidEncoding(f"invalid base64url data: {exc}") from exc
    if encode_base64url(data) != body:
        raise InvalidEncoding("invalid base64url data: non-zero trailing bits")
    return data
