"""
Configuration Loading

YAML-based configuration with environment variable substitution.

Usage:
    from config import ConfigManager

    manager = ConfigManager()                  # searches for config.yaml
    etrade_config = manager.get_etrade_config()
    logging_config = manager.get_logging_config()

config.yaml shape (every value may use ``${VAR}`` or ``${VAR:default}``):

    environment: ${ENVIRONMENT:dev}
    etrade:
      mode: sandbox
      key: ${ETRADE_CONSUMER_KEY}
      secret: ${ETRADE_CONSUMER_SECRET}
      access_token: ${ETRADE_ACCESS_TOKEN:}
      access_secret: ${ETRADE_ACCESS_SECRET:}
      connection_limit: 10
    logging:
      min_level: INFO
"""

import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from dotenv import load_dotenv

from infrastructure.exceptions import ConfigurationError
from infrastructure.logging import get_logger, LoggingConfig
from .structs import ETradeConfig

ENV_VAR_PATTERN = re.compile(r'\$\{([^}]+)\}')


def guess_file_paths(file_name: str) -> List[Path]:
    """
    Returns a list of possible file locations to search.
    """
    return [
        Path(__file__).parent.parent.parent / file_name,  # Project root
        Path(__file__).parent.parent / file_name,         # src directory
        Path.cwd() / file_name,                           # Current working directory
        Path.home() / file_name,                          # User home directory (fallback)
    ]


class ConfigManager:
    """
    Loads config.yaml and .env, then builds typed configuration structs.

    An explicit ``config_path`` must exist; otherwise the usual locations
    are searched and the first match wins.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None,
                 env_file: Optional[Union[str, Path]] = None, load_env: bool = True):
        self._logger = get_logger('config.manager')
        self._config_path = Path(config_path) if config_path else None
        self._config_data: Dict[str, Any] = {}

        if load_env:
            self._load_env_file(Path(env_file) if env_file else None)
        self._load_yaml_config()

    @property
    def config_path(self) -> Optional[Path]:
        return self._config_path

    @property
    def environment(self) -> str:
        return str(self._config_data.get('environment') or os.getenv('ENVIRONMENT', 'dev'))

    def _load_env_file(self, env_file: Optional[Path]) -> None:
        """Load environment variables from .env without overriding the process environment."""
        candidates = [env_file] if env_file else guess_file_paths('.env')
        for env_path in candidates:
            if env_path.exists():
                load_dotenv(dotenv_path=env_path, override=False)
                self._logger.info("Loaded environment variables", path=str(env_path))
                return
        self._logger.debug("No .env file found - using system environment variables only")

    def _resolve_config_path(self) -> Path:
        if self._config_path is not None:
            if not self._config_path.exists():
                raise ConfigurationError(f"Configuration file not found: {self._config_path}",
                                         setting_name="config_path")
            return self._config_path

        for path in guess_file_paths('config.yaml'):
            if path.exists():
                return path
        raise ConfigurationError("config.yaml not found in project root, src, "
                                 "current directory or home directory",
                                 setting_name="config_path")

    def _load_yaml_config(self) -> None:
        """Load configuration from YAML file with environment variable substitution."""
        path = self._resolve_config_path()
        self._config_path = path

        try:
            content = self._substitute_env_vars(path.read_text(encoding='utf-8'))
            data = yaml.safe_load(content) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError(f"Top level of {path} must be a mapping")

        self._config_data = data
        self._logger.info("Configuration loaded", path=str(path), environment=self.environment)

    def _substitute_env_vars(self, content: str) -> str:
        """
        Substitute environment variables in configuration content.

        Supports syntax:
        - ${VAR_NAME} - Required environment variable
        - ${VAR_NAME:default} - Optional with default value
        """
        def replace_var(match):
            var_expr = match.group(1)

            if ':' in var_expr:
                var_name, default_value = var_expr.split(':', 1)
                env_value = os.getenv(var_name.strip())
                if env_value is None:
                    return default_value
                return env_value

            var_name = var_expr.strip()
            env_value = os.getenv(var_name)
            if env_value is None:
                self._logger.warning("Environment variable not set - using empty value",
                                     variable=var_name)
                return ""
            return env_value

        return ENV_VAR_PATTERN.sub(replace_var, content)

    def get_logging_config(self) -> LoggingConfig:
        section = dict(self._config_data.get('logging') or {})
        section.setdefault('environment', self.environment)
        try:
            return LoggingConfig.from_dict(section)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid logging configuration: {e}", setting_name="logging")

    def get_etrade_config(self) -> ETradeConfig:
        """Build the client configuration from the ``etrade`` section."""
        section = self._config_data.get('etrade')
        if not isinstance(section, dict):
            raise ConfigurationError("Missing 'etrade' section in configuration", setting_name="etrade")

        options = dict(section)
        options['logging'] = self.get_logging_config()
        config = ETradeConfig.from_options(options)

        self._logger.info("E-Trade configuration built",
                          mode=config.mode.value,
                          consumer_key=config.credentials.get_preview(),
                          authorized=config.is_authorized)
        return config


def load_config(config_path: Optional[Union[str, Path]] = None) -> ETradeConfig:
    """Load the client configuration from config.yaml."""
    return ConfigManager(config_path).get_etrade_config()
