"""
Configuration Module for the billscan extraction engine.

Settings live in ``settings.yaml`` next to this file and are loaded with
PyYAML. Every component reads its parameters through ``get_config`` with an
in-code default, so a missing key never breaks extraction.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional

from billscan.utils.exceptions import ConfigurationError


DEFAULT_CONFIG_PATH = Path(__file__).parent / "settings.yaml"


class ConfigurationManager:
    """
    Centralized configuration access for billscan.

    Attributes:
        config_path (Path): Path to the configuration file.

    Example:
        >>> config = ConfigurationManager()
        >>> config.get("extraction.locale")
        'fr'
    """

    _instance: Optional['ConfigurationManager'] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[str] = None) -> 'ConfigurationManager':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize the configuration manager.

        Args:
            config_path: Optional path to a YAML file. Passing a different
                path to an already initialized manager reloads from it.
        """
        requested = Path(config_path) if config_path else None

        if self._initialized:
            if requested is not None and requested != self.config_path:
                self.config_path = requested
                self._load_config()
            return

        self.config_path = requested or DEFAULT_CONFIG_PATH
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """
        Load configuration from the YAML file.

        Raises:
            ConfigurationError: If the file is missing or is not valid YAML.
        """
        if not self.config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {self.config_path}",
                {"path": str(self.config_path)}
            )

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid configuration file: {self.config_path}",
                {"path": str(self.config_path), "reason": str(e)}
            ) from e

        self._config = loaded or {}
        self._resolve_paths()

    def _resolve_paths(self) -> None:
        """Make relative ``logging.file.path`` absolute against the project root."""
        project_root = Path(__file__).parent.parent
        file_cfg = self._config.get('logging', {}).get('file', {})
        path = file_cfg.get('path') if isinstance(file_cfg, dict) else None

        if path and not Path(path).is_absolute():
            file_cfg['path'] = str(project_root / path)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "logging.level").
            default: Value returned when the key is absent.

        Returns:
            Configuration value or default.
        """
        value = self._config

        try:
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def get_all(self) -> Dict[str, Any]:
        """Return a shallow copy of the whole configuration."""
        return self._config.copy()

    def reload(self) -> None:
        """Reload configuration from the current file."""
        self._load_config()

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton instance (used by tests and the CLI)."""
        cls._instance = None


def get_config(key: str, default: Any = None) -> Any:
    """
    Convenience accessor for configuration values.

    Args:
        key: Configuration key in dot notation.
        default: Default value if key doesn't exist.

    Returns:
        Configuration value or default.
    """
    return ConfigurationManager().get(key, default)


__all__ = ['ConfigurationManager', 'get_config', 'DEFAULT_CONFIG_PATH']
