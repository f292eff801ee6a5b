"""Configuration loader for http-utility.

This module loads the YAML configuration files shipped next to it and provides
a singleton config object for easy access throughout the package.
"""

from pathlib import Path
from typing import Any, cast

import yaml

from ..exceptions import ConfigurationError
from ..logging_config import get_module_logger

logger = get_module_logger("config")

_MISSING = object()


class Config:
    """Configuration manager that loads and provides access to all config files."""

    config_files = {
        "transport": "transport_config.yaml",
        "client": "client_config.yaml",
    }

    def __init__(self, config_dict: dict[str, Any] | None = None, config_dir: Path | None = None):
        """
        Initialize the configuration manager.

        Args:
            config_dict: Optional dictionary of config values for testing.
                        If provided, config files won't be loaded from disk.
            config_dir: Directory holding the YAML files (defaults to this package directory)
        """
        self._configs: dict[str, Any]
        self._config_dir: Path | None

        if config_dict is not None:
            # Testing mode: use provided config
            self._configs = config_dict
            self._config_dir = None
        else:
            self._configs = {}
            self._config_dir = config_dir or self._find_config_dir()
            self._load_all_configs()

    def _find_config_dir(self) -> Path:
        """The YAML defaults live alongside this module."""
        return Path(__file__).resolve().parent

    def _load_all_configs(self):
        """Load all YAML configuration files from the config directory."""
        if self._config_dir is None:
            return

        for key, filename in self.config_files.items():
            config_path = self._config_dir / filename
            if config_path.exists():
                with open(config_path, encoding="utf-8") as f:
                    loaded_config = yaml.safe_load(f)

                if not isinstance(loaded_config, dict):
                    logger.warning(
                        f"Config file {filename} must contain a dictionary, "
                        f"got {type(loaded_config).__name__}. Using empty config."
                    )
                    self._configs[key] = {}
                else:
                    self._configs[key] = loaded_config
            else:
                logger.warning(f"Config file {filename} not found at {config_path}")
                self._configs[key] = {}

    def get(self, path: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Args:
            path: Dot-separated path to the config value (e.g., "transport.timeout_seconds")
            default: Default value to return if path is not found

        Returns:
            The configuration value or default if not found

        Example:
            >>> config.get("transport.timeout_seconds")
            60
            >>> config.get("client.executor.max_workers")
            8
        """
        parts = path.split(".")
        value = self._configs

        for part in parts:
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    def get_required(self, path: str) -> Any:
        """Get a configuration value that must be present.

        Raises:
            ConfigurationError: If the path does not resolve to a value
        """
        value = self.get(path, _MISSING)
        if value is _MISSING or value is None:
            raise ConfigurationError("required value is missing", config_key=path)
        return value

    @property
    def transport(self) -> dict[str, Any]:
        """Get transport configuration."""
        return cast(dict[str, Any], self._configs.get("transport", {}))

    @property
    def client(self) -> dict[str, Any]:
        """Get client configuration."""
        return cast(dict[str, Any], self._configs.get("client", {}))

    def reload(self):
        """Reload all configuration files."""
        self._configs.clear()
        self._load_all_configs()


# Create a singleton instance
config = Config()
