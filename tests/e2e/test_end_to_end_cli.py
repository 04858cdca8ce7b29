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

import json
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path

from tests.test_support import REPO_ROOT, WIREGUARD_CONFIG, build_cli_env


class TestEndToEndCli(unittest.TestCase):
    def _run(self, args: list[str], *, env: dict[str, str], stdin: str | None = None):
        return subprocess.run(
            [sys.executable, "-m", "vpnurl", *args],
            cwd=REPO_ROOT,
            env=env,
            input=stdin,
            capture_output=True,
            text=True,
            check=False,
        )

    def test_encode_decode_through_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp_path = Path(tmpdir)
            config_path = tmp_path / "config.json"
            token_path = tmp_path / "token.txt"
            decoded_path = tmp_path / "decoded.json"
            config_path.write_text(json.dumps(WIREGUARD_CONFIG), encoding="utf-8")
            env = build_cli_env(overrides={"XDG_CONFIG_HOME": str(tmp_path / "xdg")})

            result = self._run(
                ["encode", "-i", str(config_path), "-o", str(token_path)], env=env
            )
            self.assertEqual(result.returncode, 0, result.stderr)
            self.assertTrue(token_path.read_text(encoding="utf-8").startswith("vpn://"))

            result = self._run(
                ["decode", "-i", str(token_path), "-o", str(decoded_path)], env=env
            )
            self.assertEqual(result.returncode, 0, result.stderr)
            decoded = json.loads(decoded_path.read_text(encoding="utf-8"))
            self.assertEqual(decoded, WIREGUARD_CONFIG)

    def test_piped_stdin_autodetects(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            env = build_cli_env(overrides={"XDG_CONFIG_HOME": str(Path(tmpdir) / "xdg")})
            encoded = self._run([], env=env, stdin=json.dumps(WIREGUARD_CONFIG))
            self.assertEqual(encoded.returncode, 0, encoded.stderr)
            self.assertIn("Detected JSON document", encoded.stderr)

            decoded = self._run([], env=env, stdin=encoded.stdout)
            self.assertEqual(decoded.returncode, 0, decoded.stderr)
            self.assertEqual(json.loads(decoded.stdout), WIREGUARD_CONFIG)

    def test_invalid_token_exit_code(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            env = build_cli_env(overrides={"XDG_CONFIG_HOME": str(Path(tmpdir) / "xdg")})
            result = self._run(["decode", "not-a-vpn-url"], env=env)
        self.assertEqual(result.returncode, 2)
        self.assertIn("Error:", result.stderr)
        self.assertEqual(result.stdout, "")


if __name__ == "__main__":
    unittest.main()
