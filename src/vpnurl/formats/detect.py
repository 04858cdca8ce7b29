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

from enum import Enum

from ..core.errors import InvalidDocument
from .document import parse_document
from .token_codec import PREFIX


class InputType(Enum):
    VPN_URL = "vpn_url"
    JSON = "json"
    UNKNOWN = "unknown"


def detect_input_type(text: str) -> InputType:
    """Guess whether raw input is a token or a JSON document.

    Only used to pick a default direction; a wrong guess never affects the data.
    """
    trimmed = text.strip()
    if trimmed.startswith(PREFIX):
        return InputType.VPN_URL
    if (trimmed.startswith("{") and trimmed.endswith("}")) or (
        trimmed.startswith("[") and trimmed.endswith("]")
    ):
        return InputType.JSON
    try:
        parse_document(trimmed)
    except InvalidDocument:
        return InputType.UNKNOWN
    return InputType.JSON
