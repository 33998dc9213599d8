"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch
from urllib.parse import quote

import pytest

# ============================================================================
# URL Helpers
# ============================================================================
# Connections are opened from file:// URLs. Build them from tmp_path so tests
# never touch real user directories.


def file_url(path: Path, directory: bool = False) -> str:
    """Build a file:// URL for a local path.

    Args:
        path: Absolute path to convert.
        directory: Append the trailing '/' that marks a directory URL.

    Returns:
        Percent-encoded file:// URL.
    """
    url = "file://" + quote(path.as_posix())
    if directory and not url.endswith("/"):
        url += "/"
    return url


@pytest.fixture
def private_dir(tmp_path: Path) -> Path:
    """Create an empty directory standing in for the private root.

    Returns:
        Path to an existing, empty directory.
    """
    path = tmp_path / "private"
    path.mkdir()
    return path


@pytest.fixture
def private_url(private_dir: Path) -> str:
    """Directory URL of the private root, with trailing '/'."""
    return file_url(private_dir, directory=True)


@pytest.fixture
def make_file(private_dir: Path) -> Callable[[str, bytes], Path]:
    """Factory fixture that writes a file inside the private root.

    Example:
        path = make_file("data.bin", b"\\x01\\x02")
    """

    def _make(name: str, content: bytes = b"") -> Path:
        path = private_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    return _make


@pytest.fixture
def no_global_config(tmp_path: Path):
    """Mock global config path to ensure test isolation from user's actual config.

    Tests that assert default values must use this fixture to avoid reading
    the user's ~/.config/fileconn/config.toml which could override defaults.
    """
    nonexistent_global = tmp_path / "nonexistent_global" / "config.toml"
    with patch(
        "fileconn.adapters.config.toml_config_provider.get_global_config_path",
        return_value=nonexistent_global,
    ):
        yield nonexistent_global
