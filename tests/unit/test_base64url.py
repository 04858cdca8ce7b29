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

import unittest

from vpnurl.core.errors import InvalidEncoding
from vpnurl.encoding.base64url import decode_base64url, encode_base64url


class TestBase64Url(unittest.TestCase):
    def test_roundtrip(self) -> None:
        data = b"Hello, World!"
        self.assertEqual(decode_base64url(encode_base64url(data)), data)

    def test_no_padding(self) -> None:
        for size in range(1, 7):
            with self.subTest(size=size):
                self.assertNotIn("=", encode_base64url(b"a" * size))

    def test_url_safe_alphabet(self) -> None:
        self.assertEqual(encode_base64url(b"\xfb\xff\xbf"), "-_-_")
        self.assertEqual(decode_base64url("-_-_"), b"\xfb\xff\xbf")

    def test_known_vector(self) -> None:
        self.assertEqual(
            encode_base64url(b'{"server":"example.com"}'),
            "eyJzZXJ2ZXIiOiJleGFtcGxlLmNvbSJ9",
        )

    def test_padding_accepted(self) -> None:
        self.assertEqual(decode_base64url("YQ=="), b"a")
        self.assertEqual(decode_base64url("YQ"), b"a")

    def test_rejects_standard_alphabet(self) -> None:
        with self.assertRaises(InvalidEncoding):
            decode_base64url("+/+/")

    def test_rejects_impossible_length(self) -> None:
        with self.assertRaises(InvalidEncoding):
            decode_base64url("abcde")

    def test_rejects_non_zero_trailing_bits(self) -> None:
        self.assertEqual(decode_base64url("QQ"), b"A")
        for text in ("QR", "QR==", "QUJ"):
            with self.subTest(text=text):
                with self.assertRaises(InvalidEncoding):
                    decode_base64url(text)

    def test_empty(self) -> None:
        self.assertEqual(encode_base64url(b""), "")
        self.assertEqual(decode_base64url(""), b"")


if __name__ == "__main__":
    unittest.main()
