"""
Configuration management for Shipyard CLI.

Settings are stored as JSON in ``~/.shipyard/config.json`` (or the directory
named by ``SHIPYARD_CONFIG_DIR``) and can be overridden per process with
environment variables.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_SERVER_URL = "http://localhost:8080"
DEFAULT_TIMEOUT = 30
CONFIG_FILE_NAME = "config.json"

ENV_CONFIG_DIR = "SHIPYARD_CONFIG_DIR"

# Environment variable -> config field
ENV_OVERRIDES = {
    "SHIPYARD_URL": "url",
    "SHIPYARD_USERNAME": "username",
    "SHIPYARD_TOKEN": "token",
    "SHIPYARD_SERVICE_KEY": "service_key",
}


@dataclass(frozen=True)
class ShipyardConfig:
    """
    Immutable client configuration.

    ``service_key`` takes priority over the ``username``/``token`` pair when
    both are present. ``verify_ssl`` and ``timeout`` are handed to the HTTP
    transport and never interpreted by the client itself.
    """

    url: str = ""
    username: str = ""
    token: str = ""
    service_key: str = ""
    verify_ssl: bool = True
    timeout: Optional[float] = DEFAULT_TIMEOUT

    def is_configured(self) -> bool:
        """Check whether the config has a server and usable credentials."""
        if not self.url:
            return False
        return bool(self.service_key) or bool(self.username and self.token)

    def with_updates(self, **changes: Any) -> "ShipyardConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShipyardConfig":
        """Build a config from a dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


class ConfigManager:
    """Loads, caches and persists the CLI configuration file."""

    def __init__(self, config_dir: Optional[Path] = None):
        if config_dir is None:
            env_dir = os.environ.get(ENV_CONFIG_DIR)
            config_dir = Path(env_dir) if env_dir else Path.home() / ".shipyard"
        self.config_dir = Path(config_dir)
        self._config: Optional[ShipyardConfig] = None

    def get_config_path(self) -> Path:
        return self.config_dir / CONFIG_FILE_NAME

    def load(self) -> ShipyardConfig:
        """
        Read the configuration file.

        Returns a default config when the file does not exist.

        Raises:
            ConfigurationError: If the file exists but is not a JSON object.
        """
        path = self.get_config_path()
        if not path.exists():
            logger.debug("No config file at %s, using defaults", path)
            return ShipyardConfig(url=DEFAULT_SERVER_URL)

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Could not read config file {path}", details=str(e)) from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Invalid config file {path}: expected a JSON object")

        return ShipyardConfig.from_dict(data)

    def get(self) -> ShipyardConfig:
        """Get the configuration with environment overrides applied."""
        if self._config is None:
            self._config = self.load()
        return self._apply_env(self._config)

    def save(self, config: ShipyardConfig) -> None:
        """Write the configuration file, creating the directory if needed."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        path = self.get_config_path()
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config.to_dict(), f, indent=2)

        # Credentials live in this file
        try:
            os.chmod(path, 0o600)
        except OSError as e:
            logger.warning(f"Could not restrict permissions on {path}: {e}")

        self._config = config
        logger.debug("Configuration saved to %s", path)

    def update(self, **changes: Any) -> ShipyardConfig:
        """Apply changes to the stored configuration and save it."""
        if self._config is None:
            self._config = self.load()
        config = self._config.with_updates(**changes)
        self.save(config)
        return config

    def clear(self) -> None:
        """Remove the configuration file."""
        path = self.get_config_path()
        if path.exists():
            path.unlink()
        self._config = None

    @staticmethod
    def _apply_env(config: ShipyardConfig) -> ShipyardConfig:
        overrides = {
            field: os.environ[var]
            for var, field in ENV_OVERRIDES.items()
            if os.environ.get(var)
        }
        if overrides:
            return config.with_updates(**overrides)
        return config


_config_manager: Optional[ConfigManager] = None


def get_config_manager(config_dir: Optional[Path] = None) -> ConfigManager:
    """Get the shared config manager, creating it for ``config_dir`` if given."""
    global _config_manager
    if config_dir is not None or _config_manager is None:
        _config_manager = ConfigManager(config_dir)
    return _config_manager


def get_config() -> ShipyardConfig:
    """Get the current configuration."""
    return get_config_manager().get()
