"""Connector: turns a URL into a file connection.

    >>> import fileconn
    >>> conn = fileconn.open("file:///tmp/prova")
    >>> conn.exists()
    False
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fileconn.adapters.config.toml_config_provider import TomlConfigProvider
from fileconn.adapters.fs.local import LocalFileConnection
from fileconn.domain.exceptions import InvalidPathError
from fileconn.domain.value_objects import FileUrl

if TYPE_CHECKING:
    from fileconn.domain.config import FileConnConfig
    from fileconn.ports.fs import FileConnection

logger = logging.getLogger(__name__)


def open(url: str, config: FileConnConfig | None = None) -> FileConnection:
    """Open a connection to a file or directory.

    The target does not need to exist. The returned connection is open.

    Args:
        url: A file:// URL (empty host or "localhost") or an absolute path.
            A trailing '/' marks a directory URL.
        config: Configuration for the streams the connection hands out.
            If None, the global config.toml is loaded over the defaults.

    Returns:
        An open connection bound to url.

    Raises:
        InvalidPathError: If url is malformed or uses another scheme.
    """
    try:
        target = FileUrl(url)
    except ValueError as e:
        raise InvalidPathError(
            str(e),
            hint="Use a file:/// URL or an absolute path",
        ) from e

    if config is None:
        config = TomlConfigProvider().load()

    conn = LocalFileConnection(target, buffer_size=config.streams.buffer_size)
    logger.debug("Opened connection to %s", target)
    return conn
