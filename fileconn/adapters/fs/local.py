"""Local file connection adapter.

Implements the FileConnection port on top of os/pathlib. This is the
default adapter returned by the connector for file:// URLs.
"""

import fnmatch
import logging
import os
import shutil
import stat
from pathlib import Path
from typing import Self

from fileconn.adapters.fs.streams import ByteInputStream, ByteOutputStream
from fileconn.domain.exceptions import (
    AlreadyExistsError,
    FileIOError,
    IllegalStateError,
    InvalidPathError,
    NotDirectoryError,
    NotFoundError,
)
from fileconn.domain.value_objects import SEPARATOR, FileUrl

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 8192


class LocalFileConnection:
    """Connection to one entry of the local filesystem.

    The connection is bound to a URL, not to an open file: existence and
    type are re-read from the filesystem on every query. Streams opened
    from the connection own their file objects and outlive close().

    Example:
        conn = LocalFileConnection(FileUrl("file:///tmp/prova"))
        conn.create()
        with conn.open_output_stream() as out:
            out.write(b"data")
        conn.close()
    """

    def __init__(self, url: FileUrl, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        """Bind the connection to a target.

        Args:
            url: Validated target; it does not need to exist.
            buffer_size: Buffer size for streams opened from this connection.
        """
        self._url = url
        self._buffer_size = buffer_size
        self._open = True

    @property
    def path(self) -> str:
        """Filesystem path this connection is bound to."""
        return self._url.path

    @property
    def url(self) -> str:
        """Canonical file:// URL of the target."""
        return self._url.to_url()

    @property
    def name(self) -> str:
        """Last path segment, with a trailing '/' for directory URLs."""
        return self._url.name

    def _target(self) -> Path:
        """Return the target path, enforcing the open state."""
        if not self._open:
            raise IllegalStateError(
                f"Connection to {self.path} is closed",
                hint="Open a new connection with fileconn.open()",
            )
        return self._url.local_path

    def is_open(self) -> bool:
        return self._open

    def exists(self) -> bool:
        return self._target().exists()

    def is_directory(self) -> bool:
        return self._target().is_dir()

    def is_hidden(self) -> bool:
        self._target()
        return self.name.rstrip(SEPARATOR).startswith(".")

    def create(self) -> None:
        """Create an empty file at the target.

        Raises:
            IllegalStateError: If the connection is closed.
            AlreadyExistsError: If a file or directory is already there.
            FileIOError: If the URL names a directory or the filesystem
                refuses (e.g. missing parent directory).
        """
        path = self._target()
        if self._url.is_directory_url:
            raise FileIOError(
                f"Cannot create a file at directory URL {self.url}",
                hint="Use mkdir() for directories",
            )
        try:
            path.touch(exist_ok=False)
        except FileExistsError as e:
            raise AlreadyExistsError(f"{self.path} already exists") from e
        except OSError as e:
            raise FileIOError(f"Failed to create {self.path}: {e}") from e
        logger.debug("Created file %s", path)

    def mkdir(self) -> None:
        """Create a directory at the target.

        Raises:
            AlreadyExistsError: If an entry is already there.
            FileIOError: If the filesystem refuses.
        """
        path = self._target()
        try:
            path.mkdir()
        except FileExistsError as e:
            raise AlreadyExistsError(f"{self.path} already exists") from e
        except OSError as e:
            raise FileIOError(f"Failed to create directory {self.path}: {e}") from e
        logger.debug("Created directory %s", path)

    def _stat_file(self) -> os.stat_result:
        path = self._target()
        try:
            st = path.stat()
        except FileNotFoundError as e:
            raise NotFoundError(f"{self.path} does not exist") from e
        except OSError as e:
            raise FileIOError(f"Failed to stat {self.path}: {e}") from e
        if stat.S_ISDIR(st.st_mode):
            raise NotFoundError(f"{self.path} is a directory, not a file")
        return st

    def file_size(self) -> int:
        """Return the file length in bytes.

        Raises:
            NotFoundError: If the target is missing or is a directory.
        """
        return self._stat_file().st_size

    def delete(self) -> None:
        """Remove the file or empty directory.

        Raises:
            NotFoundError: If the target is missing.
            FileIOError: If the directory is not empty or removal is refused.
        """
        path = self._target()
        try:
            if path.is_dir() and not path.is_symlink():
                path.rmdir()
            else:
                path.unlink()
        except FileNotFoundError as e:
            raise NotFoundError(f"{self.path} does not exist") from e
        except OSError as e:
            raise FileIOError(f"Failed to delete {self.path}: {e}") from e
        logger.debug("Deleted %s", path)

    def rename(self, new_name: str) -> None:
        """Rename the target within its parent directory.

        The connection is re-bound to the new name on success.

        Args:
            new_name: New entry name, without any path separator.

        Raises:
            InvalidPathError: If new_name is empty, contains a separator, or
                ends with one while the target is a file.
            NotFoundError: If the target is missing.
            AlreadyExistsError: If an entry named new_name already exists.
            FileIOError: If the filesystem refuses.
        """
        path = self._target()
        if self._url.is_directory_url:
            if not new_name.endswith(SEPARATOR):
                new_name += SEPARATOR
        elif new_name.endswith(SEPARATOR):
            raise InvalidPathError(
                f"Cannot rename file {self.path} to directory name '{new_name}'"
            )
        try:
            new_url = self._url.parent().child(new_name)
        except ValueError as e:
            raise InvalidPathError(str(e)) from e

        if not path.exists():
            raise NotFoundError(f"{self.path} does not exist")
        new_path = new_url.local_path
        if new_path.exists():
            raise AlreadyExistsError(f"{new_url.path} already exists")
        try:
            path.rename(new_path)
        except OSError as e:
            raise FileIOError(f"Failed to rename {self.path}: {e}") from e
        logger.debug("Renamed %s to %s", path, new_path)
        self._url = new_url

    def truncate(self, byte_offset: int) -> None:
        """Cut the file down to byte_offset bytes.

        Offsets at or beyond the current size leave the file unchanged.

        Raises:
            IllegalStateError: If the connection is closed.
            ValueError: If byte_offset is negative.
            NotFoundError: If the target is missing or is a directory.
        """
        st = self._stat_file()
        if byte_offset < 0:
            raise ValueError(f"byte_offset cannot be negative, got {byte_offset}")
        if byte_offset >= st.st_size:
            return
        try:
            os.truncate(self._url.local_path, byte_offset)
        except OSError as e:
            raise FileIOError(f"Failed to truncate {self.path}: {e}") from e

    def last_modified(self) -> int:
        """Modification time in milliseconds since the epoch, 0 if missing."""
        path = self._target()
        try:
            return path.stat().st_mtime_ns // 1_000_000
        except FileNotFoundError:
            return 0
        except OSError as e:
            raise FileIOError(f"Failed to stat {self.path}: {e}") from e

    def list(self, pattern: str | None = None, include_hidden: bool = True) -> list[str]:
        """Snapshot the directory's immediate children.

        Args:
            pattern: Optional glob applied to child names (e.g. "*.txt").
            include_hidden: Whether to keep names starting with '.'.

        Returns:
            Child names, each prefixed with '/'. Subdirectories also end
            with '/'. Order is whatever the filesystem reports.

        Raises:
            IllegalStateError: If the connection is closed.
            NotDirectoryError: If the target is missing or not a directory.
            FileIOError: If the directory cannot be read.
        """
        path = self._target()
        try:
            with os.scandir(path) as it:
                entries = [(entry.name, _is_dir_entry(entry)) for entry in it]
        except (FileNotFoundError, NotADirectoryError) as e:
            raise NotDirectoryError(f"{self.path} is not a directory") from e
        except OSError as e:
            raise FileIOError(f"Failed to list {self.path}: {e}") from e

        names = []
        for entry_name, is_dir in entries:
            if not include_hidden and entry_name.startswith("."):
                continue
            if pattern is not None and not fnmatch.fnmatchcase(entry_name, pattern):
                continue
            suffix = SEPARATOR if is_dir else ""
            names.append(SEPARATOR + entry_name + suffix)
        return names

    def directory_size(self, include_subdirs: bool = False) -> int:
        """Sum of file sizes inside the directory.

        Args:
            include_subdirs: Recurse into subdirectories.

        Raises:
            NotDirectoryError: If the target is not an existing directory.
        """
        path = self._target()
        if not path.is_dir():
            raise NotDirectoryError(f"{self.path} is not a directory")
        try:
            if include_subdirs:
                return sum(
                    (Path(root) / f).stat().st_size
                    for root, _dirs, files in os.walk(path)
                    for f in files
                )
            with os.scandir(path) as it:
                return sum(
                    entry.stat().st_size for entry in it if entry.is_file()
                )
        except OSError as e:
            raise FileIOError(f"Failed to size {self.path}: {e}") from e

    def _disk_usage(self) -> tuple[int, int, int]:
        path = self._target()
        # Target may not exist yet; measure the volume of its nearest ancestor
        probe = path
        while not probe.exists() and probe != probe.parent:
            probe = probe.parent
        try:
            usage = shutil.disk_usage(probe)
        except OSError as e:
            raise FileIOError(f"Failed to read volume size for {self.path}: {e}") from e
        return usage.total, usage.used, usage.free

    def total_size(self) -> int:
        total, _used, _free = self._disk_usage()
        return total

    def available_size(self) -> int:
        _total, _used, free = self._disk_usage()
        return free

    def used_size(self) -> int:
        _total, used, _free = self._disk_usage()
        return used

    def set_file_connection(self, name: str) -> None:
        """Re-bind this directory connection to a child or to its parent.

        Args:
            name: Child entry name, or ".." for the parent directory.

        Raises:
            NotDirectoryError: If the current target is not a directory.
            InvalidPathError: If name contains a separator.
            NotFoundError: If the named child does not exist.
        """
        path = self._target()
        if not path.is_dir():
            raise NotDirectoryError(f"{self.path} is not a directory")

        if name == "..":
            self._url = self._url.parent()
            return

        try:
            new_url = self._url.child(name)
        except ValueError as e:
            raise InvalidPathError(str(e)) from e
        if not new_url.local_path.exists():
            raise NotFoundError(f"{new_url.path} does not exist")
        if new_url.local_path.is_dir() and not new_url.is_directory_url:
            new_url = FileUrl(new_url.path + SEPARATOR)
        self._url = new_url

    def open_input_stream(self) -> ByteInputStream:
        """Open the file for sequential reading.

        Raises:
            IllegalStateError: If the connection is closed.
            NotFoundError: If the file does not exist.
            FileIOError: If the target is a directory or cannot be opened.
        """
        path = self._target()
        try:
            fileobj = path.open("rb", buffering=self._buffer_size)
        except FileNotFoundError as e:
            raise NotFoundError(f"{self.path} does not exist") from e
        except OSError as e:
            raise FileIOError(f"Failed to open {self.path} for reading: {e}") from e
        logger.debug("Opened input stream for %s", path)
        return ByteInputStream(path, fileobj)

    def open_output_stream(self) -> ByteOutputStream:
        """Open the file for writing, creating it or truncating existing content.

        Raises:
            IllegalStateError: If the connection is closed.
            FileIOError: If the target is a directory or its parent is missing.
        """
        path = self._target()
        try:
            fileobj = path.open("wb", buffering=self._buffer_size)
        except OSError as e:
            raise FileIOError(f"Failed to open {self.path} for writing: {e}") from e
        logger.debug("Opened output stream for %s", path)
        return ByteOutputStream(path, fileobj)

    def close(self) -> None:
        """Release the handle. Safe to call multiple times."""
        if self._open:
            self._open = False
            logger.debug("Closed connection to %s", self.path)

    def __enter__(self) -> Self:
        """Enter context manager."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> bool:
        """Exit context manager, closing the connection."""
        self.close()
        return False

    def __repr__(self) -> str:
        state = "open" if self._open else "closed"
        return f"<LocalFileConnection {self.url} ({state})>"


def _is_dir_entry(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False
