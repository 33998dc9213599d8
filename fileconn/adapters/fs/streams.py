"""Byte streams over native file objects.

Streams are created by a connection but owned by the caller: they stay
usable after the connection that produced them is closed.
"""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import BinaryIO, Self

from fileconn.domain.exceptions import FileIOError, IllegalStateError

logger = logging.getLogger(__name__)

EOF = -1


class _ByteStream:
    """Shared close/context-manager handling for byte streams."""

    def __init__(self, path: Path, fileobj: BinaryIO) -> None:
        self.path = path
        self._file: BinaryIO | None = fileobj

    @property
    def closed(self) -> bool:
        """True once close() has been called."""
        return self._file is None

    def _get_file(self) -> BinaryIO:
        if self._file is None:
            raise IllegalStateError(f"Stream for {self.path} is closed")
        return self._file

    def _release(self) -> None:
        if self._file is not None:
            fileobj = self._file
            self._file = None
            try:
                fileobj.close()
            except OSError as e:
                raise FileIOError(f"Failed to close {self.path}: {e}") from e
            logger.debug("Closed stream for %s", self.path)

    def close(self) -> None:
        """Release the underlying file. Safe to call multiple times."""
        self._release()

    def __enter__(self) -> Self:
        """Enter context manager."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> bool:
        """Exit context manager, closing the stream."""
        self.close()
        return False


class ByteInputStream(_ByteStream):
    """Sequential reader returning one byte value at a time.

    Example:
        with conn.open_input_stream() as stream:
            while (b := stream.read()) != EOF:
                ...
    """

    def read(self) -> int:
        """Read the next byte.

        Returns:
            Byte value in 0..255, or -1 at end of stream.

        Raises:
            IllegalStateError: If the stream is closed.
            FileIOError: If the read fails.
        """
        chunk = self.read_bytes(1)
        if not chunk:
            return EOF
        return chunk[0]

    def read_bytes(self, size: int = -1) -> bytes:
        """Read up to size bytes.

        Args:
            size: Maximum number of bytes; negative reads to end of file.

        Returns:
            The bytes read, b"" at end of stream.
        """
        fileobj = self._get_file()
        try:
            return fileobj.read(size)
        except OSError as e:
            raise FileIOError(f"Failed to read {self.path}: {e}") from e

    def skip(self, n: int) -> int:
        """Skip up to n bytes.

        Returns:
            Number of bytes actually skipped (less than n near the end).
        """
        if n <= 0:
            return 0
        return len(self.read_bytes(n))

    def __iter__(self) -> Iterator[int]:
        """Yield byte values until end of stream."""
        while (value := self.read()) != EOF:
            yield value


class ByteOutputStream(_ByteStream):
    """Sequential writer; content is flushed before the file is released."""

    def write(self, data: bytes | bytearray | memoryview | int | Iterable[int]) -> None:
        """Write bytes at the current position.

        Args:
            data: Bytes-like object, a single byte value, or an iterable of
                byte values. Ints keep only their low 8 bits, so signed
                values such as -1 are written as 0xFF.

        Raises:
            IllegalStateError: If the stream is closed.
            FileIOError: If the write fails.
        """
        fileobj = self._get_file()
        if isinstance(data, int):
            payload = bytes((data & 0xFF,))
        elif isinstance(data, (bytes, bytearray, memoryview)):
            payload = bytes(data)
        else:
            payload = bytes(value & 0xFF for value in data)
        try:
            fileobj.write(payload)
        except OSError as e:
            raise FileIOError(f"Failed to write {self.path}: {e}") from e

    def flush(self) -> None:
        """Push buffered bytes to the filesystem."""
        fileobj = self._get_file()
        try:
            fileobj.flush()
        except OSError as e:
            raise FileIOError(f"Failed to flush {self.path}: {e}") from e

    def close(self) -> None:
        """Flush then release the underlying file. Safe to call multiple times."""
        if self._file is None:
            return
        try:
            self.flush()
        finally:
            self._release()
