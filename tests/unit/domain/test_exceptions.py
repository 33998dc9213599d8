"""Tests for domain exceptions."""

import pytest

from fileconn.domain.exceptions import (
    AlreadyExistsError,
    FileConnectionError,
    FileIOError,
    IllegalStateError,
    InvalidPathError,
    NotDirectoryError,
    NotFoundError,
)


class TestFileConnectionError:
    """Tests for FileConnectionError base exception class."""

    def test_message_stored_on_exception(self) -> None:
        """FileConnectionError stores the message attribute."""
        error = FileConnectionError("Test error message")
        assert error.message == "Test error message"
        assert error.hint is None

    def test_message_used_as_str(self) -> None:
        """The message is used for str()."""
        assert str(FileConnectionError("boom")) == "boom"

    def test_hint_stored(self) -> None:
        """An optional hint is kept alongside the message."""
        error = FileConnectionError("boom", hint="try again")
        assert error.hint == "try again"


@pytest.mark.parametrize(
    "error_cls",
    [
        InvalidPathError,
        AlreadyExistsError,
        NotFoundError,
        NotDirectoryError,
        IllegalStateError,
        FileIOError,
    ],
)
def test_error_kinds_share_base(error_cls: type[FileConnectionError]) -> None:
    """Every error kind can be caught as FileConnectionError."""
    with pytest.raises(FileConnectionError) as exc_info:
        raise error_cls("failure")
    assert exc_info.value.message == "failure"


def test_error_kinds_do_not_shadow_builtins() -> None:
    """Domain errors are distinct from the builtin OS error classes."""
    assert not issubclass(NotDirectoryError, OSError)
    assert not issubclass(FileIOError, OSError)
