import base64
import os
from contextlib import contextmanager
from pathlib import Path
from unittest import mock

# =============================================================================
# Test Constants
# =============================================================================

WIREGUARD_CONFIG = {
    "server": "example.com",
    "port": 8080,
    "protocol": "wireguard",
    "key": "test_key_12345",
}

# Produced by an independent zlib implementation at the default level; the
# body carries a 99-byte header for the 2-space indented document.
WIREGUARD_TOKEN = (
    "vpn://AAAAY3icq-ZSUFAqTi0qSy1SslJQSq1IzC3ISdVLzs9V0gFJFeQXlQAlLAwsDCD8ovyS_OT8HJDi8syi1PTSxKIUiNLs1EqQaElqcUk8kB1vaGRsYqrEVQsAoCwcww"
)
WIREGUARD_SERIALIZED_LEN = 99

LEGACY_TOKEN = "vpn://eyJzZXJ2ZXIiOiJleGFtcGxlLmNvbSJ9"
LEGACY_CONFIG = {"server": "example.com"}

REPO_ROOT = Path(__file__).resolve().parents[1]


# =============================================================================
# Token Helpers
# =============================================================================


def token_body(token: str) -> bytes:
    body = token.split("://", 1)[1]
    return base64.urlsafe_b64decode(body + "=" * (-len(body) % 4))


def make_token(body: bytes) -> str:
    return "vpn://" + base64.urlsafe_b64encode(body).decode("ascii").rstrip("=")


# =============================================================================
# Environment Helpers
# =============================================================================


@contextmanager
def temp_env(overrides: dict[str, str], *, clear: bool = False):
    with mock.patch.dict(os.environ, overrides, clear=clear):
        yield


def build_cli_env(*, overrides: dict[str, str] | None = None) -> dict[str, str]:
    env = os.environ.copy()
    src_root = str(REPO_ROOT / "src")
    existing = env.get("PYTHONPATH")
    env["PYTHONPATH"] = f"{src_root}{os.pathsep}{existing}" if existing else src_root
    if overrides:
        env.update(overrides)
    return env
