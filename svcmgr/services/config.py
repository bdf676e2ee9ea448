"""Configuration file discovery and loading."""

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from svcmgr.exceptions import ConfigError
from svcmgr.models.config import ManagerConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SVCMGR_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".svcmgr" / "config.yaml"


class ConfigService:
    """Service for locating and reading config.yaml."""

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize the config service.

        Args:
            config_path: Optional explicit config file. If not provided,
                        the file is discovered.
        """
        self._config_path = config_path

    @property
    def config_path(self) -> Path:
        """Get the config file path.

        Search order:
        1. Explicit path passed to the constructor
        2. SVCMGR_CONFIG environment variable
        3. ~/.svcmgr/config.yaml
        """
        if self._config_path is not None:
            return self._config_path.expanduser()
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            return Path(env_path).expanduser()
        return DEFAULT_CONFIG_PATH

    def load(self) -> ManagerConfig:
        """Load the configuration.

        Returns:
            Parsed configuration, or defaults when the file doesn't exist.

        Raises:
            ConfigError: If the file is not valid YAML or fails validation.
        """
        path = self.config_path
        if not path.exists():
            logger.debug("No config file at %s, using defaults", path)
            return ManagerConfig()

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")

        try:
            return ManagerConfig(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid config file {path}: {e}") from e
