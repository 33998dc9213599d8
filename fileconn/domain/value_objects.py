"""Domain value objects with validation.

Value objects that provide validation at construction time,
ensuring invalid states are unrepresentable.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from urllib.parse import quote, unquote

FILE_SCHEME = "file://"
SEPARATOR = "/"

_LOCAL_HOSTS: frozenset[str] = frozenset({"", "localhost"})


@dataclass(frozen=True)
class FileUrl:
    """Validated connection target.

    Accepts either a ``file://<host>/<path>`` URL (host empty or
    ``localhost``, path percent-encoded) or a plain absolute path.
    A trailing separator marks the target as a directory URL.

    Attributes:
        raw: The string the URL was built from.

    Raises:
        ValueError: If the string is empty, uses another scheme, names a
            remote host, is not absolute, or contains NUL or ``..`` segments.
    """

    raw: str
    _decoded: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate and decode the URL."""
        if not self.raw:
            raise ValueError("Connection URL cannot be empty")

        if self.raw.startswith(FILE_SCHEME):
            rest = self.raw[len(FILE_SCHEME) :]
            host, sep, encoded = rest.partition(SEPARATOR)
            if host not in _LOCAL_HOSTS:
                raise ValueError(f"Unsupported host '{host}' in '{self.raw}'")
            if not sep:
                raise ValueError(f"Missing path in '{self.raw}'")
            decoded = SEPARATOR + unquote(encoded)
        elif "://" in self.raw:
            scheme = self.raw.split("://", 1)[0]
            raise ValueError(f"Unsupported scheme '{scheme}' in '{self.raw}'")
        else:
            decoded = self.raw
            if not os.path.isabs(decoded):
                raise ValueError(f"Path must be absolute, got '{self.raw}'")

        if "\x00" in decoded:
            raise ValueError(f"Path contains a NUL byte: {self.raw!r}")
        if ".." in decoded.split(SEPARATOR):
            raise ValueError(f"Path must not contain '..' segments: '{self.raw}'")

        # Frozen dataclass: cache the decoded path once
        object.__setattr__(self, "_decoded", decoded)

    @property
    def path(self) -> str:
        """Decoded filesystem path, trailing separator preserved."""
        return self._decoded

    @property
    def local_path(self) -> Path:
        """Path object for native filesystem calls."""
        return Path(self.path)

    @property
    def is_directory_url(self) -> bool:
        """True when the URL ends with a separator."""
        return self.path.endswith(SEPARATOR)

    @property
    def name(self) -> str:
        """Last path segment, with a trailing separator for directory URLs."""
        name = self.local_path.name
        if self.is_directory_url and name:
            return name + SEPARATOR
        return name

    def to_url(self) -> str:
        """Canonical ``file://`` form of this target."""
        return FILE_SCHEME + quote(self.path)

    def child(self, name: str) -> "FileUrl":
        """Build the URL of an entry inside this directory.

        Args:
            name: Child name, optionally with a trailing separator.

        Raises:
            ValueError: If name is empty or contains an inner separator.
        """
        bare = name[:-1] if name.endswith(SEPARATOR) else name
        if not bare or SEPARATOR in bare:
            raise ValueError(f"Invalid entry name '{name}'")
        base = self.path if self.is_directory_url else self.path + SEPARATOR
        return FileUrl(base + name)

    def parent(self) -> "FileUrl":
        """Build the URL of the enclosing directory."""
        parent = self.local_path.parent.as_posix()
        if not parent.endswith(SEPARATOR):
            parent += SEPARATOR
        return FileUrl(parent)

    def __str__(self) -> str:
        """Return the canonical URL."""
        return self.to_url()
