"""Tests for domain value objects."""

from pathlib import Path

import pytest

from fileconn.domain.value_objects import FileUrl


class TestFileUrlParsing:
    """Tests for accepted FileUrl forms."""

    def test_file_url_with_empty_host(self) -> None:
        """file:///path decodes to the absolute path."""
        url = FileUrl("file:///tmp/prova")
        assert url.path == "/tmp/prova"
        assert url.local_path == Path("/tmp/prova")

    def test_file_url_with_localhost(self) -> None:
        """localhost is accepted as the host."""
        url = FileUrl("file://localhost/tmp/prova")
        assert url.path == "/tmp/prova"

    def test_percent_encoding_is_decoded(self) -> None:
        """Escaped characters are decoded in the path."""
        url = FileUrl("file:///tmp/my%20file.txt")
        assert url.path == "/tmp/my file.txt"

    def test_plain_absolute_path(self) -> None:
        """Absolute paths without a scheme are accepted as-is."""
        url = FileUrl("/tmp/prova")
        assert url.path == "/tmp/prova"

    def test_trailing_separator_marks_directory(self) -> None:
        """A trailing '/' makes the URL a directory URL."""
        assert FileUrl("file:///tmp/").is_directory_url
        assert not FileUrl("file:///tmp/prova").is_directory_url

    def test_equality_uses_raw_string(self) -> None:
        """Two FileUrls from the same string compare equal."""
        assert FileUrl("file:///tmp/a") == FileUrl("file:///tmp/a")


class TestFileUrlValidation:
    """Tests for rejected FileUrl forms."""

    def test_empty_string_raises(self) -> None:
        """Empty URL is rejected."""
        with pytest.raises(ValueError, match="cannot be empty"):
            FileUrl("")

    def test_other_scheme_raises(self) -> None:
        """Schemes other than file:// are rejected."""
        with pytest.raises(ValueError, match="Unsupported scheme 'http'"):
            FileUrl("http://example.com/prova")

    def test_remote_host_raises(self) -> None:
        """Hosts other than localhost are rejected."""
        with pytest.raises(ValueError, match="Unsupported host"):
            FileUrl("file://server/share/prova")

    def test_missing_path_raises(self) -> None:
        """A file URL needs a path after the host."""
        with pytest.raises(ValueError, match="Missing path"):
            FileUrl("file://localhost")

    def test_relative_path_raises(self) -> None:
        """Plain paths must be absolute."""
        with pytest.raises(ValueError, match="must be absolute"):
            FileUrl("relative/prova")

    def test_parent_segment_raises(self) -> None:
        """'..' segments are rejected."""
        with pytest.raises(ValueError, match=r"'\.\.' segments"):
            FileUrl("file:///tmp/../etc/passwd")

    def test_nul_byte_raises(self) -> None:
        """Encoded NUL bytes are rejected."""
        with pytest.raises(ValueError, match="NUL"):
            FileUrl("file:///tmp/bad%00name")


class TestFileUrlNavigation:
    """Tests for name, child, parent and to_url."""

    def test_name_of_file(self) -> None:
        """name is the last segment."""
        assert FileUrl("file:///tmp/prova").name == "prova"

    def test_name_of_directory(self) -> None:
        """Directory names keep a trailing '/'."""
        assert FileUrl("file:///tmp/sub/").name == "sub/"

    def test_child_of_directory(self) -> None:
        """child() appends a name to a directory URL."""
        assert FileUrl("file:///tmp/").child("prova").path == "/tmp/prova"

    def test_child_of_url_without_trailing_separator(self) -> None:
        """child() inserts the separator when needed."""
        assert FileUrl("/tmp").child("prova").path == "/tmp/prova"

    def test_child_with_separator_raises(self) -> None:
        """Names containing '/' are rejected."""
        with pytest.raises(ValueError, match="Invalid entry name"):
            FileUrl("file:///tmp/").child("a/b")

    def test_child_empty_raises(self) -> None:
        """Empty names are rejected."""
        with pytest.raises(ValueError, match="Invalid entry name"):
            FileUrl("file:///tmp/").child("")

    def test_parent_is_directory_url(self) -> None:
        """parent() returns the enclosing directory with trailing '/'."""
        parent = FileUrl("file:///tmp/sub/prova").parent()
        assert parent.path == "/tmp/sub/"
        assert parent.is_directory_url

    def test_to_url_encodes_path(self) -> None:
        """to_url() percent-encodes reserved characters."""
        assert FileUrl("/tmp/my file").to_url() == "file:///tmp/my%20file"
        assert str(FileUrl("/tmp/x")) == "file:///tmp/x"
