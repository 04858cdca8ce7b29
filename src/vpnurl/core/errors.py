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


class TokenError(ValueError):
    """Base class for every vpn:// token failure."""


class InvalidScheme(TokenError):
    pass


class InvalidEncoding(TokenError):
    pass


class TruncatedHeader(TokenError):
    pass


class DecompressionError(TokenError):
    pass


class IntegrityMismatch(TokenError):
    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"data integrity check failed: expected {expected} bytes, got {actual}"
        )
        self.expected = expected
        self.actual = actual


class InvalidUtf8(TokenError):
    pass


class InvalidDocument(TokenError):
    pass


class LengthOverflow(TokenError):
    pass


class DecodeFailed(TokenError):
    """Raised when neither the compressed nor the plain interpretation succeeds."""

    def __init__(self, modern_error: TokenError, legacy_error: TokenError) -> None:
        super().__init__(
            f"unable to decode token (compressed: {modern_error}; plain: {legacy_error})"
        )
        self.modern_error = modern_error
        self.legacy_error = legacy_error
