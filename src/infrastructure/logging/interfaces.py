"""
Core Logging Interfaces

Defines the structured logger contract injected into transport and broker
components as ``self.logger``. Context is passed as keyword arguments and
rendered by the configured formatter.
"""

from abc import ABC, abstractmethod
from enum import IntEnum


class LogLevel(IntEnum):
    """Log levels with numeric values matching the standard logging module."""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


class HFTLoggerInterface(ABC):
    """
    Interface for the structured logger.

    This is what gets injected into components via the factory.
    """

    @abstractmethod
    def debug(self, msg: str, **context) -> None:
        """Log debug message."""
        pass

    @abstractmethod
    def info(self, msg: str, **context) -> None:
        """Log info message."""
        pass

    @abstractmethod
    def warning(self, msg: str, **context) -> None:
        """Log warning message."""
        pass

    @abstractmethod
    def error(self, msg: str, **context) -> None:
        """Log error message."""
        pass

    @abstractmethod
    def critical(self, msg: str, **context) -> None:
        """Log critical message."""
        pass

    @abstractmethod
    def metric(self, name: str, value: float, **tags) -> None:
        """Log metric value."""
        pass

    @abstractmethod
    def latency(self, operation: str, duration_ms: float, **tags) -> None:
        """Log latency metric. Convenience method for timing."""
        pass

    @abstractmethod
    def counter(self, name: str, value: int = 1, **tags) -> None:
        """Log counter metric. Increment by value."""
        pass

    @abstractmethod
    def set_context(self, **context) -> None:
        """Set persistent context for all logs from this logger."""
        pass

    # Python logging compatibility methods
    @abstractmethod
    def isEnabledFor(self, level: int) -> bool:
        pass

    @abstractmethod
    def log(self, level: int, msg: str, *args, **kwargs) -> None:
        pass
