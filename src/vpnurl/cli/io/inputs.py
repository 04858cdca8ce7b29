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

import sys
from pathlib import Path


def _read_input(input_path: str | None, data: list[str] | None) -> str:
    """Return the raw input text: ``--input`` file, inline words, then stdin."""
    if input_path:
        if input_path == "-":
            return _read_stdin()
        path = Path(input_path).expanduser()
        if not path.exists():
            raise ValueError(f"input file not found: {path}")
        if not path.is_file():
            raise ValueError(f"input path is not a file: {path}")
        return path.read_text(encoding="utf-8")
    if data:
        return " ".join(data)
    return _read_stdin()


def _read_stdin() -> str:
    text = sys.stdin.read()
    if not text.strip():
        raise ValueError("stdin input is empty; pass data inline or use --input")
    return text
