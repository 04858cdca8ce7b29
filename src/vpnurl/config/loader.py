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

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from ..formats.document import DEFAULT_INDENT
from .installer import resolve_config_path

DEBUG_MAX_BYTES_DEFAULT = 4096


@dataclass(frozen=True)
class EncodeDefaults:
    indent: int = DEFAULT_INDENT


@dataclass(frozen=True)
class DecodeDefaults:
    indent: int = DEFAULT_INDENT


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    no_color: bool = False


@dataclass(frozen=True)
class DebugDefaults:
    max_bytes: int = DEBUG_MAX_BYTES_DEFAULT


@dataclass(frozen=True)
class AppConfig:
    source: Path
    encode: EncodeDefaults = field(default_factory=EncodeDefaults)
    decode: DecodeDefaults = field(default_factory=DecodeDefaults)
    ui: UiDefaults = field(default_factory=UiDefaults)
    debug: DebugDefaults = field(default_factory=DebugDefaults)


def load_app_config(path: str | Path | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    data = _load_toml(config_path)
    return AppConfig(
        source=config_path,
        encode=EncodeDefaults(
            indent=_parse_indent(_get_dict(data, "encode").get("indent"), field="encode.indent")
        ),
        decode=DecodeDefaults(
            indent=_parse_indent(_get_dict(data, "decode").get("indent"), field="decode.indent")
        ),
        ui=_parse_ui_defaults(_get_dict(data, "ui")),
        debug=_parse_debug_defaults(_get_dict(data, "debug")),
    )


def _parse_ui_defaults(cfg: dict[str, object]) -> UiDefaults:
    return UiDefaults(
        quiet=_parse_bool(cfg.get("quiet"), field="ui.quiet", default=False),
        no_color=_parse_bool(cfg.get("no_color"), field="ui.no_color", default=False),
    )


def _parse_debug_defaults(cfg: dict[str, object]) -> DebugDefaults:
    value = cfg.get("max_bytes")
    if value is None:
        return DebugDefaults()
    parsed = _parse_int_strict(value, field="debug.max_bytes")
    if parsed < 0:
        raise ValueError("debug.max_bytes must be a positive integer or 0")
    return DebugDefaults(max_bytes=parsed)


def _parse_indent(value: object, *, field: str) -> int:
    if value is None:
        return DEFAULT_INDENT
    parsed = _parse_int_strict(value, field=field)
    if parsed < 0:
        raise ValueError(f"{field} must be a non-negative integer")
    return parsed


def _load_toml(path: Path) -> dict[str, object]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"invalid config file {path}: {exc}") from exc


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"{field} must be a boolean")
    raise ValueError(f"{field} must be a boolean")


def _parse_int_strict(value: object, *, field: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{field} must be an integer")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError(f"{field} must be an integer")
        try:
            return int(text)
        except ValueError as exc:
            raise ValueError(f"{field} must be an integer") from exc
    raise ValueError(f"{field} must be an integer")
