"""Configuration management backed by a YAML file."""

import logging
import os
import shutil
from typing import Any

import yaml
from pydantic import ValidationError

from florascan.config.models import FloraScanConfig
from florascan.system.path_resolver import PathResolver

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading and saving."""

    CURRENT_VERSION = "1.0.0"

    def __init__(self, path_resolver: PathResolver | None = None):
        """Initialize ConfigManager.

        Args:
            path_resolver: Optional PathResolver instance. If None, creates a new one.
        """
        self.path_resolver = path_resolver or PathResolver()
        self.config_path = self.path_resolver.get_florascan_config_path()

    def load(self) -> FloraScanConfig:
        """Load and validate configuration.

        Returns:
            FloraScanConfig: Loaded and validated configuration

        Raises:
            ValueError: If the file content does not validate
        """
        self._ensure_config_exists()
        raw_config = self._read_yaml()
        raw_config.setdefault("config_version", self.CURRENT_VERSION)

        if raw_config["config_version"] != self.CURRENT_VERSION:
            raise ValueError(f"Unknown config version: {raw_config['config_version']}")

        try:
            config = FloraScanConfig(**raw_config)
        except ValidationError as e:
            raise ValueError(f"Configuration validation failed: {e}") from e

        # Secrets may come from the environment instead of the file
        api_key = os.getenv("FLORASCAN_PLANTID_API_KEY")
        if api_key:
            config.identification.api_key = api_key

        return config

    def save(self, config: FloraScanConfig) -> None:
        """Save configuration to file with backup.

        Args:
            config: Configuration to save

        Raises:
            PermissionError: If config file cannot be written
        """
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        if self.config_path.exists():
            backup_path = self.config_path.with_suffix(".yaml.backup")
            try:
                shutil.copy2(self.config_path, backup_path)
            except PermissionError:
                logger.warning("Could not create backup at %s", backup_path)

        config_yaml = yaml.dump(config.model_dump(), default_flow_style=False, sort_keys=False)
        self.config_path.write_text(config_yaml)
        logger.info("Configuration saved successfully to %s", self.config_path)

    def reload(self) -> FloraScanConfig:
        """Reload configuration from disk."""
        return self.load()

    def _ensure_config_exists(self) -> None:
        """Create the config file from model defaults if it is missing."""
        if not self.config_path.exists():
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            defaults = FloraScanConfig().model_dump()
            config_yaml = yaml.dump(defaults, default_flow_style=False, sort_keys=False)
            self.config_path.write_text(config_yaml)

    def _read_yaml(self) -> dict[str, Any]:
        """Read YAML config file.

        Returns:
            dict: Raw configuration dictionary
        """
        config_text = self.config_path.read_text()
        return yaml.safe_load(config_text) or {}
