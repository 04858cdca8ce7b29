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

import functools

import typer

from ..core.common import _ctx_value, _run_cli
from ..core.types import ConvertArgs
from ..flows.convert import run_encode_command


def register(app: typer.Typer) -> None:
    app.command(
        help=(
            "Encode a JSON config into a vpn:// token.\n\n"
            "Examples:\n"
            "  vpnurl encode -i config.json -o token.txt\n"
            "  vpnurl encode '{\"server\": \"example.com\"}'\n"
            "  cat config.json | vpnurl encode\n"
        )
    )(encode)


def encode(
    ctx: typer.Context,
    data: list[str] | None = typer.Argument(
        None,
        help="Inline JSON (words are joined with spaces).",
        show_default=False,
    ),
    input_file: str | None = typer.Option(
        None,
        "--input",
        "-i",
        help="Read the JSON config from a file (use - for stdin).",
        rich_help_panel="Inputs",
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the token to a file (default: stdout).",
        rich_help_panel="Output",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Hide non-error output.",
        rich_help_panel="Behavior",
    ),
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))
    args = ConvertArgs(
        config=_ctx_value(ctx, "config"),
        data=list(data or []),
        input=input_file,
        output=output,
        mode="encode",
        debug=debug_value,
        debug_max_bytes=_ctx_value(ctx, "debug_max_bytes"),
        quiet=quiet or bool(_ctx_value(ctx, "quiet")),
    )
    _run_cli(functools.partial(run_encode_command, args), debug=debug_value)
