"""TOML persistence for FileConnConfig.

A config file holds up to two tables, ``[directories]`` and ``[streams]``,
whose keys mirror the fields of DirectoryConfig and StreamConfig.
"""

import os
import platform
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from fileconn.domain.config import DirectoryConfig, FileConnConfig, StreamConfig

SECTIONS = ("directories", "streams")


def _config_home() -> Path:
    if platform.system() == "Windows":
        env = os.environ.get("APPDATA")
    else:
        env = os.environ.get("XDG_CONFIG_HOME")
    return Path(env) if env else Path.home() / ".config"


def get_global_config_path() -> Path:
    """Per-user config.toml: $XDG_CONFIG_HOME (or %APPDATA%) / fileconn.

    The file may not exist.
    """
    return _config_home() / "fileconn" / "config.toml"


def load_config_data(path: Path) -> dict[str, Any]:
    """Parse one config file into its raw tables.

    Raises:
        FileNotFoundError: If path does not exist.
        ValueError: If the file is not valid TOML.
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        raise FileNotFoundError(f"Config file not found: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {path}: {e}") from e


def merge_config_data(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Layer override on top of base, one key at a time within each table.

    Raises:
        ValueError: If override names an unknown table or a table is not
            a mapping.
    """
    unknown = sorted(set(override) - set(SECTIONS))
    if unknown:
        raise ValueError(f"Unknown config section(s): {', '.join(unknown)}")

    merged = {section: dict(base.get(section, {})) for section in SECTIONS}
    for section, values in override.items():
        if not isinstance(values, dict):
            raise ValueError(f"Config section [{section}] must be a table")
        merged[section].update(values)
    return merged


def config_data_to_config(data: dict[str, Any]) -> FileConnConfig:
    """Convert raw config data dictionary to FileConnConfig.

    Args:
        data: Dictionary with config sections

    Returns:
        FileConnConfig instance

    Raises:
        ValueError: If a section holds unknown keys or invalid values
    """
    directories_data = data.get("directories", {})
    streams_data = data.get("streams", {})

    try:
        return FileConnConfig(
            directories=DirectoryConfig(**directories_data),
            streams=StreamConfig(**streams_data),
        )
    except TypeError as e:
        # Unknown keys surface as unexpected keyword arguments
        raise ValueError(f"Invalid config section: {e}") from e


def load_config(path: Path) -> FileConnConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to config.toml file

    Returns:
        Parsed FileConnConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is malformed
    """
    data = load_config_data(path)
    return config_data_to_config(data)


def config_to_data(config: FileConnConfig) -> dict[str, Any]:
    """Convert a FileConnConfig to a TOML-ready dictionary."""
    return {
        "directories": {
            "private": config.directories.private,
            "memorycard": config.directories.memorycard,
        },
        "streams": {
            "buffer_size": config.streams.buffer_size,
        },
    }


def save_config(config: FileConnConfig, path: Path) -> None:
    """Save configuration to a TOML file.

    Args:
        config: FileConnConfig to save
        path: Destination path for config.toml
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("wb") as f:
        tomli_w.dump(config_to_data(config), f)
