"""
Logging Factory

Creates cached logger instances and applies LoggingConfig to the
standard logging hierarchy.
"""

import logging
import os
import sys
from typing import Dict, Optional

from .hft_logger import HFTLogger, ContextFormatter
from .interfaces import HFTLoggerInterface
from .structs import LoggingConfig

# Loggers created by this package live under these roots
ROOT_LOGGERS = ("infrastructure", "brokers", "config")


class LoggerFactory:
    """Simplified logging factory - trust config, fail fast."""

    _cached_loggers: Dict[str, HFTLogger] = {}
    _config: Optional[LoggingConfig] = None
    _handler: Optional[logging.Handler] = None

    @classmethod
    def create_logger(cls, name: str) -> HFTLoggerInterface:
        """Create or return the cached logger for ``name``."""
        if name in cls._cached_loggers:
            return cls._cached_loggers[name]

        logger = HFTLogger(name)
        cls._cached_loggers[name] = logger
        return logger

    @classmethod
    def configure(cls, config: LoggingConfig, stream=None) -> None:
        """Install a single stream handler on the package root loggers."""
        config.validate()
        cls._config = config

        if cls._handler is None:
            cls._handler = logging.StreamHandler(stream or sys.stderr)
        elif stream is not None:
            cls._handler.setStream(stream)
        cls._handler.setFormatter(ContextFormatter(
            json_lines=config.format == "json",
            include_context=config.include_context,
            max_message_length=config.max_message_length,
        ))

        level = logging.getLevelName(config.min_level.upper())
        for root in ROOT_LOGGERS:
            py_logger = logging.getLogger(root)
            py_logger.setLevel(level)
            if cls._handler not in py_logger.handlers:
                py_logger.addHandler(cls._handler)
            # Tests and dev keep propagation so caplog sees records
            py_logger.propagate = config.environment in ("dev", "test")

        for name, override in (config.overrides or {}).items():
            logging.getLogger(name).setLevel(logging.getLevelName(override.upper()))

    @classmethod
    def get_config(cls) -> LoggingConfig:
        if cls._config is None:
            if os.getenv('ENVIRONMENT', 'dev') == 'prod':
                return LoggingConfig.default_production()
            return LoggingConfig.default_development()
        return cls._config

    @classmethod
    def clear_cache(cls) -> None:
        """Clear cached logger instances, detach the handler and reset root levels."""
        cls._cached_loggers.clear()
        for root in ROOT_LOGGERS:
            py_logger = logging.getLogger(root)
            py_logger.setLevel(logging.NOTSET)
            py_logger.propagate = True
            if cls._handler is not None:
                py_logger.removeHandler(cls._handler)
        cls._handler = None
        cls._config = None


def get_logger(name: str) -> HFTLoggerInterface:
    """Get logger instance. Simple, fast."""
    return LoggerFactory.create_logger(name)


def get_broker_logger(broker: str, component: Optional[str] = None) -> HFTLoggerInterface:
    """Get broker logger with optional component, e.g. ``brokers.etrade.rest``."""
    name = f"brokers.{broker}.{component}" if component else f"brokers.{broker}"
    return get_logger(name)


def configure_logging(config: Optional[LoggingConfig] = None, stream=None) -> None:
    """Apply logging configuration (environment default when omitted)."""
    LoggerFactory.configure(config or LoggerFactory.get_config(), stream=stream)
