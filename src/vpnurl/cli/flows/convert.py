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

from dataclasses import dataclass

from ...config import AppConfig, load_app_config
from ...formats.detect import InputType, detect_input_type
from ...formats.document import parse_document, serialize_document
from ...formats.token_codec import decode_token, encode
from ..api import configure_ui
from ..core.log import _info, _warn
from ..core.types import ConvertArgs, Mode
from ..io.inputs import _read_input
from ..io.outputs import _write_output
from ..ui.debug import print_decode_debug, print_encode_debug


@dataclass(frozen=True)
class _Settings:
    config: AppConfig
    quiet: bool
    debug_max_bytes: int


def _resolve_settings(args: ConvertArgs) -> _Settings:
    config = load_app_config(args.config)
    if config.ui.no_color:
        configure_ui(no_color=True)
    max_bytes = args.debug_max_bytes
    return _Settings(
        config=config,
        quiet=args.quiet or config.ui.quiet,
        debug_max_bytes=config.debug.max_bytes if max_bytes is None else max_bytes,
    )


def run_encode_command(args: ConvertArgs) -> None:
    settings = _resolve_settings(args)
    text = _read_input(args.input, args.data)
    _encode_text(text, args, settings)


def run_decode_command(args: ConvertArgs) -> None:
    settings = _resolve_settings(args)
    text = _read_input(args.input, args.data)
    _decode_text(text, args, settings)


def run_convert_command(args: ConvertArgs) -> None:
    settings = _resolve_settings(args)
    text = _read_input(args.input, args.data)
    mode = args.mode or _detect_mode(text, quiet=settings.quiet)
    if mode == "encode":
        _encode_text(text, args, settings)
    else:
        _decode_text(text, args, settings)


def _detect_mode(text: str, *, quiet: bool) -> Mode:
    input_type = detect_input_type(text)
    if input_type is InputType.VPN_URL:
        _info("Detected vpn:// token, decoding.", quiet=quiet)
        return "decode"
    if input_type is InputType.JSON:
        _info("Detected JSON document, encoding.", quiet=quiet)
        return "encode"
    raise ValueError(
        "unable to detect input type; use --encode (-e) or --decode (-d) to choose"
    )


def _encode_text(text: str, args: ConvertArgs, settings: _Settings) -> None:
    document = parse_document(text)
    indent = settings.config.encode.indent
    token = encode(document, indent=indent)
    if args.debug:
        serialized = serialize_document(document, indent=indent)
        print_encode_debug(
            token,
            serialized_len=len(serialized),
            max_bytes=settings.debug_max_bytes,
        )
    _write_output(args.output, token, quiet=settings.quiet)


def _decode_text(text: str, args: ConvertArgs, settings: _Settings) -> None:
    report = decode_token(text.strip())
    if args.debug:
        print_decode_debug(report, max_bytes=settings.debug_max_bytes)
    if report.variant == "legacy":
        _warn("Token has no compression header; decoded as plain JSON.", quiet=settings.quiet)
    rendered = serialize_document(report.document, indent=settings.config.decode.indent)
    _write_output(args.output, rendered.decode("utf-8"), quiet=settings.quiet)
