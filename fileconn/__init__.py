"""File connections: URL-bound handles to local files and directories."""

from fileconn.adapters.fs.local import LocalFileConnection
from fileconn.adapters.fs.streams import EOF, ByteInputStream, ByteOutputStream
from fileconn.connector import open
from fileconn.domain.exceptions import (
    AlreadyExistsError,
    FileConnectionError,
    FileIOError,
    IllegalStateError,
    InvalidPathError,
    NotDirectoryError,
    NotFoundError,
)
from fileconn.ports.fs import FileConnection, InputStream, OutputStream
from fileconn.properties import get_property
from fileconn.version import __version__

__all__ = [
    "EOF",
    "AlreadyExistsError",
    "ByteInputStream",
    "ByteOutputStream",
    "FileConnection",
    "FileConnectionError",
    "FileIOError",
    "IllegalStateError",
    "InputStream",
    "InvalidPathError",
    "LocalFileConnection",
    "NotDirectoryError",
    "NotFoundError",
    "OutputStream",
    "__version__",
    "get_property",
    "open",
]
