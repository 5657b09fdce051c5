"""
Configuration management for the Task List application.

Loads settings from settings.ini with environment variable overrides.
"""

import configparser
import os
from pathlib import Path
from typing import Optional, Dict, Any

from tasklist.logging_config import get_logger
from tasklist.models import is_blank_name

logger = get_logger(__name__)

DEFAULT_SEED_COUNT = 20
DEFAULT_SEED_NAME_TEMPLATE = "Task {number}"
DEFAULT_ID_STRATEGY = "counter"
ID_STRATEGIES = ("counter", "length")


class Config:
    """Application configuration manager."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config file, defaults to config/settings.ini
        """
        self.config_path = config_path or self._default_config_path()
        self._config = configparser.ConfigParser(interpolation=None)
        self._load()

    def _default_config_path(self) -> Path:
        """Get default config path."""
        project_root = Path(__file__).parent.parent
        return project_root / "config" / "settings.ini"

    def _load(self):
        """Load configuration from file."""
        if self.config_path.exists():
            try:
                self._config.read(self.config_path)
                logger.info(f"Loaded configuration from {self.config_path}")
            except configparser.Error as e:
                logger.warning(f"Failed to read config file: {e}. Using defaults.")
        else:
            logger.debug(f"Config file not found at {self.config_path}. Using defaults.")

    def get_task_config(self) -> Dict[str, Any]:
        """
        Get task collection configuration with environment overrides.

        Environment variables take precedence over config file:
        - TASKLIST_SEED_COUNT
        - TASKLIST_SEED_NAME_TEMPLATE
        - TASKLIST_ID_STRATEGY (counter/length)

        Invalid values are logged and replaced by their defaults.

        Returns:
            Dictionary with task configuration
        """
        config = {
            'seed_count': self._seed_count(),
            'seed_name_template': self._seed_name_template(),
            'id_strategy': self._id_strategy(),
        }

        logger.debug(f"Task config: seed_count={config['seed_count']}, "
                     f"id_strategy={config['id_strategy']}")

        return config

    def _task_setting(self, key: str, env_var: str, default: str) -> str:
        return os.getenv(env_var) or self._config.get('tasks', key, fallback=default)

    def _seed_count(self) -> int:
        raw = self._task_setting('seed_count', 'TASKLIST_SEED_COUNT', str(DEFAULT_SEED_COUNT))
        try:
            seed_count = int(raw)
        except ValueError:
            seed_count = -1
        if seed_count < 0:
            logger.warning(f"Invalid seed_count {raw!r}. Using {DEFAULT_SEED_COUNT}.")
            return DEFAULT_SEED_COUNT
        return seed_count

    def _seed_name_template(self) -> str:
        template = self._task_setting(
            'seed_name_template', 'TASKLIST_SEED_NAME_TEMPLATE', DEFAULT_SEED_NAME_TEMPLATE
        )
        try:
            sample = template.format(number=1)
        except (KeyError, IndexError, ValueError) as e:
            logger.warning(f"Invalid seed_name_template {template!r} ({e!r}). "
                           f"Using {DEFAULT_SEED_NAME_TEMPLATE!r}.")
            return DEFAULT_SEED_NAME_TEMPLATE
        if is_blank_name(sample):
            logger.warning(f"seed_name_template {template!r} gives blank names. "
                           f"Using {DEFAULT_SEED_NAME_TEMPLATE!r}.")
            return DEFAULT_SEED_NAME_TEMPLATE
        return template

    def _id_strategy(self) -> str:
        id_strategy = self._task_setting('id_strategy', 'TASKLIST_ID_STRATEGY', DEFAULT_ID_STRATEGY).lower()
        if id_strategy not in ID_STRATEGIES:
            logger.warning(f"Unknown id_strategy {id_strategy!r}. Using {DEFAULT_ID_STRATEGY!r}.")
            return DEFAULT_ID_STRATEGY
        return id_strategy

    def get(self, section: str, key: str, fallback: Any = None) -> Any:
        """
        Get configuration value with fallback.

        Args:
            section: Config section name
            key: Config key name
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        return self._config.get(section, key, fallback=fallback)

    def get_bool(self, section: str, key: str, fallback: bool = False) -> bool:
        """Get boolean configuration value."""
        return self._config.getboolean(section, key, fallback=fallback)

    def get_int(self, section: str, key: str, fallback: int = 0) -> int:
        """Get integer configuration value."""
        return self._config.getint(section, key, fallback=fallback)

    def has_section(self, section: str) -> bool:
        """Check if config section exists."""
        return self._config.has_section(section)

    def sections(self) -> list:
        """Get list of all configuration sections."""
        return self._config.sections()
