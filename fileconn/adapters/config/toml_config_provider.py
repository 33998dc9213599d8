"""TOML-based configuration provider.

Config loading priority (highest to lowest):
1. Local: <config_dir>/config.toml
2. Global: ~/.config/fileconn/config.toml (user defaults)
3. Built-in defaults
"""

import logging
from pathlib import Path

from fileconn.domain.config import FileConnConfig
from fileconn.shared.config_io import (
    config_data_to_config,
    config_to_data,
    get_global_config_path,
    load_config_data,
    merge_config_data,
)

logger = logging.getLogger(__name__)


class TomlConfigProvider:
    """Configuration provider that loads from TOML files.

    Local values override global values key by key; anything missing falls
    back to built-in defaults. Missing or invalid files are skipped with a
    warning rather than failing the load.
    """

    def load(self, config_dir: Path | None = None) -> FileConnConfig:
        """Load configuration with global fallback.

        Args:
            config_dir: Directory holding a local config.toml, if any.

        Returns:
            FileConnConfig with merged global/local values or defaults
        """
        data = config_to_data(FileConnConfig.default())

        global_path = get_global_config_path()
        if global_path.exists():
            data = self._apply(data, global_path, "global")

        if config_dir is not None:
            local_path = config_dir / "config.toml"
            if local_path.exists():
                data = self._apply(data, local_path, "local")

        return config_data_to_config(data)

    def _apply(self, data: dict, path: Path, label: str) -> dict:
        """Merge one config file over data, keeping data if the file is invalid."""
        try:
            merged = merge_config_data(data, load_config_data(path))
            # Validate after each layer
            config_data_to_config(merged)
        except (FileNotFoundError, ValueError) as e:
            logger.warning(
                "Failed to parse %s config at %s: %s. Ignoring it.", label, path, e
            )
            return data
        logger.debug("Loaded %s config from %s", label, path)
        return merged
