"""Domain exceptions for file connections.

Every failure of a connection or stream operation surfaces as one of these.
Underlying OS errors are chained so callers can still inspect them.
"""


class FileConnectionError(Exception):
    """Base exception for all file connection errors.

    Attributes:
        message: User-facing error message.
        hint: Optional actionable suggestion.
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class InvalidPathError(FileConnectionError):
    """Raised when a connection URL is malformed or uses an unsupported scheme."""

    pass


class AlreadyExistsError(FileConnectionError):
    """Raised when creating an entry that is already present."""

    pass


class NotFoundError(FileConnectionError):
    """Raised when the target entry does not exist (or is not a file)."""

    pass


class NotDirectoryError(FileConnectionError):
    """Raised when a directory operation targets something that is not one."""

    pass


class IllegalStateError(FileConnectionError):
    """Raised when operating on a closed connection or stream."""

    pass


class FileIOError(FileConnectionError):
    """Raised when the underlying filesystem call fails."""

    pass
