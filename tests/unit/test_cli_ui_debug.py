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

from tests.test_support import LEGACY_TOKEN, WIREGUARD_SERIALIZED_LEN, WIREGUARD_TOKEN
from vpnurl import decode_token
from vpnurl.cli.ui.debug import _format_hex_lines, _report_rows


class TestCliUiDebug(unittest.TestCase):
    def test_hex_lines_grouped(self) -> None:
        lines = _format_hex_lines(b"\x00\x01\x02\x03\x04\x05", group_size=4)
        self.assertEqual(lines, ["0001 0203 0405"])

    def test_hex_lines_truncated(self) -> None:
        lines = _format_hex_lines(b"\xaa" * 10, max_bytes=4)
        self.assertEqual(lines[0], "aaaa aaaa")
        self.assertIn("truncated 6 bytes", lines[-1])

    def test_hex_lines_zero_disables_limit(self) -> None:
        lines = _format_hex_lines(b"\xaa" * 10, max_bytes=0)
        self.assertEqual(len(lines), 1)
        self.assertNotIn("truncated", lines[0])

    def test_report_rows_modern(self) -> None:
        rows = dict(_report_rows(decode_token(WIREGUARD_TOKEN)))
        self.assertEqual(rows["Format"], "header + zlib")
        self.assertEqual(rows["Header length"], str(WIREGUARD_SERIALIZED_LEN))
        self.assertNotIn("Discarded attempt", rows)

    def test_report_rows_legacy(self) -> None:
        rows = dict(_report_rows(decode_token(LEGACY_TOKEN)))
        self.assertEqual(rows["Format"], "plain JSON (legacy)")
        self.assertNotIn("Header length", rows)
        self.assertIn("DecompressionError", rows["Discarded attempt"])


if __name__ == "__main__":
    unittest.main()
