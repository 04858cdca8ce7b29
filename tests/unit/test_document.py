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

from vpnurl.core.errors import InvalidDocument, InvalidUtf8
from vpnurl.formats.document import decode_text, parse_document, serialize_document


class TestDocument(unittest.TestCase):
    def test_pretty_serialization(self) -> None:
        serialized = serialize_document({"server": "example.com", "port": 8080})
        self.assertEqual(serialized, b'{\n  "server": "example.com",\n  "port": 8080\n}')

    def test_compact_serialization(self) -> None:
        for indent in (0, None):
            with self.subTest(indent=indent):
                self.assertEqual(serialize_document({"a": [1, 2]}, indent=indent), b'{"a":[1,2]}')

    def test_non_ascii_kept_as_utf8(self) -> None:
        serialized = serialize_document({"name": "сервер"}, indent=0)
        self.assertEqual(serialized, '{"name":"сервер"}'.encode("utf-8"))

    def test_parse(self) -> None:
        self.assertEqual(parse_document('{"a": [1, 2.5, null, true]}'), {"a": [1, 2.5, None, True]})

    def test_parse_rejects_invalid(self) -> None:
        for text in ("", "{", "random text", "{'a': 1}", "[1, 2,]"):
            with self.subTest(text=text):
                with self.assertRaises(InvalidDocument):
                    parse_document(text)

    def test_parse_rejects_non_finite_numbers(self) -> None:
        for text in ("NaN", "[Infinity]", '{"a": -Infinity}'):
            with self.subTest(text=text):
                with self.assertRaises(InvalidDocument):
                    parse_document(text)

    def test_parse_rejects_oversized_integer(self) -> None:
        with self.assertRaises(InvalidDocument) as ctx:
            parse_document("[" + "1" * 5000 + "]")
        self.assertTrue(str(ctx.exception).startswith("invalid JSON"))

    def test_decode_text(self) -> None:
        self.assertEqual(decode_text("тест".encode("utf-8")), "тест")
        with self.assertRaises(InvalidUtf8):
            decode_text(b"\xc3\x28")


if __name__ == "__main__":
    unittest.main()
