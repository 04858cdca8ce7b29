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

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from ..core.errors import DecodeFailed, IntegrityMismatch, InvalidScheme, TokenError
from ..encoding.base64url import decode_base64url, encode_base64url
from ..encoding.compression import compress_data, decompress_data
from ..encoding.header import HEADER_LEN, create_header, read_header
from .document import DEFAULT_INDENT, Document, decode_text, parse_document, serialize_document

PREFIX = "vpn://"

Variant = Literal["modern", "legacy"]


@dataclass(frozen=True)
class DecodeAttempt:
    variant: Variant
    document: Document = None
    error: TokenError | None = None
    header_length: int | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class DecodeReport:
    document: Document
    variant: Variant
    body: bytes
    attempts: tuple[DecodeAttempt, ...]

    @property
    def header_length(self) -> int | None:
        return self.attempts[-1].header_length

    @property
    def discarded_errors(self) -> tuple[TokenError, ...]:
        return tuple(attempt.error for attempt in self.attempts if attempt.error is not None)


def encode(document: Document, *, indent: int | None = DEFAULT_INDENT) -> str:
    """Convert a configuration document into a ``vpn://`` token."""
    original = serialize_document(document, indent=indent)
    header = create_header(len(original))
    compressed = compress_data(original)
    return PREFIX + encode_base64url(header + compressed)


def decode(token: str) -> Document:
    """Convert a ``vpn://`` token back into its configuration document."""
    return decode_token(token).document


def decode_token(token: str) -> DecodeReport:
    body = _token_body(token)
    attempts: list[DecodeAttempt] = []
    for attempt_decode in _ATTEMPTS:
        attempt = attempt_decode(body)
        attempts.append(attempt)
        if attempt.ok:
            return DecodeReport(
                document=attempt.document,
                variant=attempt.variant,
                body=body,
                attempts=tuple(attempts),
            )
    modern, legacy = (attempt.error for attempt in attempts)
    raise DecodeFailed(modern, legacy)  # type: ignore[arg-type]


def try_decode_compressed(data: bytes) -> DecodeAttempt:
    """Header + zlib interpretation of a decoded token body."""
    try:
        expected_len = read_header(data)
    except TokenError as exc:
        return DecodeAttempt(variant="modern", error=exc)
    try:
        # One extra byte is enough to detect a payload longer than the header claims.
        decompressed = decompress_data(data[HEADER_LEN:], max_length=expected_len + 1)
        if len(decompressed) != expected_len:
            raise IntegrityMismatch(expected_len, len(decompressed))
        document = parse_document(decode_text(decompressed))
    except TokenError as exc:
        return DecodeAttempt(variant="modern", error=exc, header_length=expected_len)
    return DecodeAttempt(variant="modern", document=document, header_length=expected_len)


def try_decode_plain(data: bytes) -> DecodeAttempt:
    """Headerless interpretation written by older encoders: raw JSON text."""
    try:
        document = parse_document(decode_text(data))
    except TokenError as exc:
        return DecodeAttempt(variant="legacy", error=exc)
    return DecodeAttempt(variant="legacy", document=document)


_ATTEMPTS: tuple[Callable[[bytes], DecodeAttempt], ...] = (
    try_decode_compressed,
    try_decode_plain,
)


def _token_body(token: str) -> bytes:
    if not token.startswith(PREFIX):
        raise InvalidScheme(f"invalid VPN URL: missing {PREFIX} prefix")
    return decode_base64url(token[len(PREFIX) :])
