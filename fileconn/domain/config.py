"""Config domain models for fileconn.

Configuration is stored in config.toml and supplies the base directories
handed to applications (the "private" and "memory card" roots) plus stream
tuning. This module defines the domain models that represent validated
configuration state.
"""

from dataclasses import dataclass, field

DEFAULT_DIRECTORY_URL = "file:///tmp/"


def _validate_directory_url(key: str, value: str) -> None:
    if not value:
        raise ValueError(f"{key} directory URL cannot be empty")
    if not value.startswith("file://"):
        raise ValueError(f"{key} directory must be a file:// URL, got {value!r}")
    if not value.endswith("/"):
        raise ValueError(f"{key} directory URL must end with '/', got {value!r}")


@dataclass(frozen=True)
class DirectoryConfig:
    """Base directories exposed through system properties.

    Attributes:
        private: Application-private directory URL (fileconn.dir.private)
        memorycard: Removable storage root URL (fileconn.dir.memorycard)

    Raises:
        ValueError: If a URL is empty, not a file:// URL, or lacks the
                   trailing '/' that marks a directory.
    """

    private: str = DEFAULT_DIRECTORY_URL
    memorycard: str = DEFAULT_DIRECTORY_URL

    def __post_init__(self) -> None:
        """Validate directory URLs after initialization."""
        _validate_directory_url("private", self.private)
        _validate_directory_url("memorycard", self.memorycard)


@dataclass(frozen=True)
class StreamConfig:
    """Configuration for byte streams.

    Attributes:
        buffer_size: Buffer size in bytes for stream file objects

    Raises:
        ValueError: If buffer_size is not positive.
    """

    buffer_size: int = 8192

    def __post_init__(self) -> None:
        """Validate stream config after initialization."""
        if self.buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {self.buffer_size}")


@dataclass(frozen=True)
class FileConnConfig:
    """Complete fileconn configuration.

    Attributes:
        directories: Base directory configuration
        streams: Stream configuration
    """

    directories: DirectoryConfig = field(default_factory=DirectoryConfig)
    streams: StreamConfig = field(default_factory=StreamConfig)

    @staticmethod
    def default() -> "FileConnConfig":
        """Create a config with all default values."""
        return FileConnConfig(
            directories=DirectoryConfig(),
            streams=StreamConfig(),
        )
