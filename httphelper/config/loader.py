"""Configuration loader for httphelper.

This module loads the YAML files from the config/ directory and provides
a singleton config object for easy access throughout the package.
"""

import logging
from pathlib import Path
from typing import Any, cast

import yaml

logger = logging.getLogger("httphelper.config")


class Config:
    """Configuration manager that loads and provides access to all config files."""

    CONFIG_FILES = {
        "transport": "transport_config.yaml",
        "parser": "parser_config.yaml",
        "logging": "logging_config.yaml",
    }

    def __init__(self, config_dict: dict[str, Any] | None = None, config_dir: Path | None = None):
        """
        Initialize the configuration manager.

        Args:
            config_dict: Optional dictionary of config values for testing.
                        If provided, config files won't be loaded from disk.
            config_dir: Optional directory to load YAML files from instead
                        of the project's config/ directory.
        """
        self._configs: dict[str, Any]
        self._config_dir: Path | None

        if config_dict is not None:
            # Testing mode: use provided config
            self._configs = config_dict
            self._config_dir = None
        else:
            self._configs = {}
            self._config_dir = config_dir if config_dir is not None else self._find_config_dir()
            self._load_all_configs()

    def _find_config_dir(self) -> Path | None:
        """Find the config directory relative to the project root."""
        # Go up from httphelper/config/loader.py to project root
        project_root = Path(__file__).resolve().parent.parent.parent
        config_dir = project_root / "config"

        if not config_dir.exists():
            logger.debug(f"Config directory not found at {config_dir}, using built-in defaults")
            return None

        return config_dir

    def _load_all_configs(self):
        """Load all YAML configuration files from the config directory."""
        if self._config_dir is None:
            return

        for key, filename in self.CONFIG_FILES.items():
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
            path: Dot-separated path to the config value (e.g., "transport.chunk_size")
            default: Default value to return if path is not found

        Returns:
            The configuration value or default if not found

        Example:
            >>> config.get("transport.chunk_size")
            16384
            >>> config.get("parser.default_port")
            80
        """
        parts = path.split(".")
        value = self._configs

        for part in parts:
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    @property
    def transport(self) -> dict[str, Any]:
        """Get transport configuration."""
        return cast(dict[str, Any], self._configs.get("transport", {}))

    @property
    def parser(self) -> dict[str, Any]:
        """Get URL parser configuration."""
        return cast(dict[str, Any], self._configs.get("parser", {}))

    @property
    def logging(self) -> dict[str, Any]:
        """Get logging configuration."""
        return cast(dict[str, Any], self._configs.get("logging", {}))

    def reload(self):
        """Reload all configuration files."""
        self._configs.clear()
        self._load_all_configs()


# Create a singleton instance
config = Config()
