"""System property lookup for file connection roots.

Applications discover their storage roots through well-known property
names rather than hard-coded paths.
"""

import logging

from fileconn.adapters.config.toml_config_provider import TomlConfigProvider
from fileconn.domain.config import FileConnConfig
from fileconn.domain.value_objects import SEPARATOR

logger = logging.getLogger(__name__)

PRIVATE_DIR = "fileconn.dir.private"
MEMORYCARD_DIR = "fileconn.dir.memorycard"
FILE_SEPARATOR = "file.separator"


def get_property(name: str, config: FileConnConfig | None = None) -> str | None:
    """Look up a file connection system property.

    Args:
        name: Property name, e.g. "fileconn.dir.private".
        config: Configuration to read directories from. If None, the
            global config.toml is loaded over the built-in defaults.

    Returns:
        The property value, or None for an unknown property.
    """
    if config is None:
        config = TomlConfigProvider().load()

    if name == PRIVATE_DIR:
        return config.directories.private
    elif name == MEMORYCARD_DIR:
        return config.directories.memorycard
    elif name == FILE_SEPARATOR:
        return SEPARATOR

    logger.warning("Unknown property: %s", name)
    return None
