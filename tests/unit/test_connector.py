"""Tests for the connector entry point."""

from pathlib import Path

import pytest

import fileconn
from fileconn.adapters.fs.local import LocalFileConnection
from fileconn.connector import open as connector_open
from fileconn.domain.config import FileConnConfig, StreamConfig
from fileconn.domain.exceptions import InvalidPathError
from tests.conftest import file_url


class TestOpen:
    """Tests for connector.open."""

    def test_returns_open_connection(self, private_url: str) -> None:
        """open() returns an open LocalFileConnection."""
        conn = connector_open(private_url + "prova")
        assert isinstance(conn, LocalFileConnection)
        assert conn.is_open()

    def test_target_need_not_exist(self, private_url: str) -> None:
        """Opening does not create or require the target."""
        conn = connector_open(private_url + "missing")
        assert not conn.exists()

    def test_accepts_absolute_path(self, private_dir: Path) -> None:
        """Plain absolute paths are accepted."""
        conn = connector_open(str(private_dir))
        assert conn.is_directory()

    def test_exposed_at_package_level(self) -> None:
        """fileconn.open is the connector."""
        assert fileconn.open is connector_open

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "relative/prova",
            "http://example.com/prova",
            "file://remote/prova",
            "file:///tmp/../etc",
        ],
    )
    def test_invalid_urls_raise(self, url: str) -> None:
        """Malformed or foreign URLs raise InvalidPathError."""
        with pytest.raises(InvalidPathError) as exc_info:
            connector_open(url)
        assert exc_info.value.hint is not None
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_config_buffer_size_used(self, private_dir: Path) -> None:
        """The stream buffer size comes from config."""
        config = FileConnConfig(streams=StreamConfig(buffer_size=32))
        conn = connector_open(file_url(private_dir / "prova"), config)
        assert conn._buffer_size == 32

    def test_default_buffer_size_without_config(
        self, private_dir: Path, no_global_config: Path
    ) -> None:
        """Without any config file, the built-in buffer size is used."""
        conn = connector_open(file_url(private_dir / "prova"))
        assert conn._buffer_size == StreamConfig().buffer_size

    def test_global_config_buffer_size_used(
        self, private_dir: Path, no_global_config: Path
    ) -> None:
        """Without an explicit config, the global config.toml is honoured."""
        no_global_config.parent.mkdir(parents=True)
        no_global_config.write_text("[streams]\nbuffer_size = 64\n")
        conn = connector_open(file_url(private_dir / "prova"))
        assert conn._buffer_size == 64
