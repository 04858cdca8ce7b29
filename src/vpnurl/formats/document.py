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

import json
from typing import Any

from ..core.errors import InvalidDocument, InvalidUtf8

Document = dict[str, Any] | list[Any] | str | int | float | bool | None

DEFAULT_INDENT = 2


def serialize_document(document: Document, *, indent: int | None = DEFAULT_INDENT) -> bytes:
    """Render a document as UTF-8 JSON text.

    Key order follows the mapping's insertion order, and non-ASCII text is kept
    literal. ``indent`` of ``None`` or ``0`` yields the compact form.
    """
    try:
        if indent:
            text = json.dumps(document, indent=indent, ensure_ascii=False, allow_nan=False)
        else:
            text = json.dumps(
                document, separators=(",", ":"), ensure_ascii=False, allow_nan=False
            )
        return text.encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise InvalidDocument(f"document is not JSON serializable: {exc}") from exc


def decode_text(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidUtf8(f"invalid UTF-8 text: {exc}") from exc


def parse_document(text: str) -> Document:
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except InvalidDocument:
        raise
    except json.JSONDecodeError as exc:
        raise InvalidDocument(f"invalid JSON: {exc}") from exc
    except ValueError as exc:
        # int() digit limit on oversized integer literals
        raise InvalidDocument(f"invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise InvalidDocument("invalid JSON: nesting too deep") from exc


def _reject_constant(name: str) -> Any:
    raise InvalidDocument(f"invalid JSON: non-finite number {name}")
