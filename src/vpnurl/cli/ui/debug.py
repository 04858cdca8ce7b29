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

from rich.markup import escape

from ...encoding.header import HEADER_LEN
from ...formats.token_codec import DecodeReport
from ..api import build_kv_table, console_err, panel


def _normalize_debug_max_bytes(value: int | None) -> int | None:
    if value is None or value <= 0:
        return None
    return value


def _format_grouped_lines(
    encoded: str,
    *,
    group_size: int,
    line_length: int,
) -> list[str]:
    if not encoded:
        return []
    groups = [encoded[i : i + group_size] for i in range(0, len(encoded), group_size)]
    lines: list[str] = []
    current = ""
    for group in groups:
        candidate = group if not current else f"{current} {group}"
        if len(candidate) > line_length:
            lines.append(current)
            current = group
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


def _format_hex_lines(
    data: bytes,
    *,
    group_size: int = 4,
    line_length: int = 80,
    max_bytes: int | None = None,
) -> list[str]:
    max_bytes = _normalize_debug_max_bytes(max_bytes)
    if max_bytes is not None and len(data) > max_bytes:
        display = data[:max_bytes]
        truncated = len(data) - max_bytes
    else:
        display = data
        truncated = 0
    lines = _format_grouped_lines(display.hex(), group_size=group_size, line_length=line_length)
    if truncated:
        lines.append(f"... truncated {truncated} bytes; use --debug-max-bytes 0 to disable")
    return lines


def _report_rows(report: DecodeReport) -> list[tuple[str, str]]:
    rows = [
        ("Format", "header + zlib" if report.variant == "modern" else "plain JSON (legacy)"),
        ("Body bytes", str(len(report.body))),
    ]
    if report.header_length is not None:
        rows.append(("Header length", str(report.header_length)))
        rows.append(("Compressed bytes", str(len(report.body) - HEADER_LEN)))
    for error in report.discarded_errors:
        rows.append(("Discarded attempt", escape(f"{type(error).__name__}: {error}")))
    return rows


def print_decode_debug(report: DecodeReport, *, max_bytes: int | None) -> None:
    console_err.print(build_kv_table(_report_rows(report), title="Token"))
    lines = _format_hex_lines(report.body, max_bytes=max_bytes)
    console_err.print(panel("Decoded body (hex)", "\n".join(lines) or "(empty)"))


def print_encode_debug(
    token: str,
    *,
    serialized_len: int,
    max_bytes: int | None,
) -> None:
    rows = [
        ("Serialized bytes", str(serialized_len)),
        ("Token chars", str(len(token))),
    ]
    console_err.print(build_kv_table(rows, title="Token"))
    lines = _format_grouped_lines(
        token[: _normalize_debug_max_bytes(max_bytes)],
        group_size=8,
        line_length=80,
    )
    console_err.print(panel("Token", "\n".join(lines) or "(empty)"))
