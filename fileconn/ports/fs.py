"""File connection port interfaces.

Defines the abstract interface for a connection bound to one filesystem
entry and the byte streams it hands out. Enables testing and potential
alternative storage backends.
"""

from collections.abc import Iterable, Iterator
from typing import Protocol, Self


class InputStream(Protocol):
    """Protocol for sequential byte input."""

    def read(self) -> int:
        """Read the next byte.

        Returns:
            Byte value in 0..255, or -1 at end of stream.

        Raises:
            IllegalStateError: If the stream is closed.
            FileIOError: If the read fails.
        """
        ...

    def read_bytes(self, size: int = -1) -> bytes:
        """Read up to size bytes (all remaining when negative)."""
        ...

    def skip(self, n: int) -> int:
        """Skip up to n bytes, returning how many were skipped."""
        ...

    def close(self) -> None:
        """Release the underlying file. Safe to call multiple times."""
        ...

    def __iter__(self) -> Iterator[int]: ...

    def __enter__(self) -> Self: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> bool: ...


class OutputStream(Protocol):
    """Protocol for sequential byte output."""

    def write(self, data: bytes | bytearray | memoryview | int | Iterable[int]) -> None:
        """Write bytes at the current position.

        Args:
            data: Bytes-like object, a single byte value, or an iterable of
                byte values. Ints are truncated to their low 8 bits.

        Raises:
            IllegalStateError: If the stream is closed.
            FileIOError: If the write fails.
        """
        ...

    def flush(self) -> None:
        """Push buffered bytes to the filesystem."""
        ...

    def close(self) -> None:
        """Flush then release the underlying file. Safe to call multiple times."""
        ...

    def __enter__(self) -> Self: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> bool: ...


class FileConnection(Protocol):
    """Protocol for a handle bound to one file or directory.

    Existence and type are queried live on every call. Every operation other
    than close() and is_open() raises IllegalStateError once the connection
    has been closed.
    """

    @property
    def path(self) -> str:
        """Filesystem path this connection is bound to."""
        ...

    @property
    def url(self) -> str:
        """Canonical file:// URL of the target."""
        ...

    @property
    def name(self) -> str:
        """Last path segment, with a trailing '/' for directory URLs."""
        ...

    def is_open(self) -> bool:
        """True until close() is called."""
        ...

    def exists(self) -> bool:
        """Check if the target exists."""
        ...

    def is_directory(self) -> bool:
        """Check if the target exists and is a directory."""
        ...

    def create(self) -> None:
        """Create an empty file at the target.

        Raises:
            AlreadyExistsError: If an entry is already there.
            FileIOError: If the filesystem refuses (e.g. missing parent).
        """
        ...

    def mkdir(self) -> None:
        """Create a directory at the target."""
        ...

    def file_size(self) -> int:
        """Return the file length in bytes.

        Raises:
            NotFoundError: If the target is missing or a directory.
        """
        ...

    def delete(self) -> None:
        """Remove the file or empty directory.

        Raises:
            NotFoundError: If the target is missing.
            FileIOError: If the directory is not empty or removal is refused.
        """
        ...

    def rename(self, new_name: str) -> None:
        """Rename the target within its parent directory."""
        ...

    def truncate(self, byte_offset: int) -> None:
        """Cut the file down to byte_offset bytes."""
        ...

    def last_modified(self) -> int:
        """Modification time in epoch milliseconds, 0 if missing."""
        ...

    def is_hidden(self) -> bool:
        """Check if the target name marks a hidden entry."""
        ...

    def list(self, pattern: str | None = None, include_hidden: bool = True) -> list[str]:
        """Snapshot the directory's immediate children.

        Returns:
            Child names, each prefixed with '/', in filesystem order.

        Raises:
            NotDirectoryError: If the target is not an existing directory.
        """
        ...

    def directory_size(self, include_subdirs: bool = False) -> int:
        """Sum of file sizes inside the directory."""
        ...

    def total_size(self) -> int:
        """Total bytes of the volume holding the target."""
        ...

    def available_size(self) -> int:
        """Free bytes on the volume holding the target."""
        ...

    def used_size(self) -> int:
        """Used bytes on the volume holding the target."""
        ...

    def set_file_connection(self, name: str) -> None:
        """Re-bind this directory connection to a child or to '..'."""
        ...

    def open_input_stream(self) -> InputStream:
        """Open the file for sequential reading.

        Raises:
            NotFoundError: If the file does not exist.
        """
        ...

    def open_output_stream(self) -> OutputStream:
        """Open the file for writing, creating or truncating it."""
        ...

    def close(self) -> None:
        """Release the handle. Safe to call multiple times."""
        ...
