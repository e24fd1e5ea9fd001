"""
Structured Logger Implementation

Thin wrapper over the standard ``logging`` module that accepts keyword
context on every call and provides metric/latency/counter helpers.
Context is carried on the LogRecord as ``record.context`` and rendered by
``ContextFormatter``.
"""

import logging
import time
from typing import Any, Dict, Optional

import msgspec

from .interfaces import HFTLoggerInterface, LogLevel


class ContextFormatter(logging.Formatter):
    """Renders ``record.context`` as key=value pairs or as a JSON line."""

    def __init__(self, json_lines: bool = False, include_context: bool = True,
                 max_message_length: int = 0):
        super().__init__("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
        self.json_lines = json_lines
        self.include_context = include_context
        self.max_message_length = max_message_length

    def format(self, record: logging.LogRecord) -> str:
        context: Dict[str, Any] = getattr(record, "context", None) or {}

        if self.json_lines:
            payload = {
                "ts": record.created,
                "level": record.levelname,
                "logger": record.name,
                "msg": record.getMessage(),
            }
            if self.include_context:
                payload.update(context)
            if record.exc_info:
                payload["exc"] = self.formatException(record.exc_info)
            line = msgspec.json.encode(payload, enc_hook=str).decode()
        else:
            line = super().format(record)
            if self.include_context and context:
                line += " | " + " ".join(f"{k}={v}" for k, v in context.items())

        if self.max_message_length and len(line) > self.max_message_length:
            line = line[:self.max_message_length] + "..."
        return line


class HFTLogger(HFTLoggerInterface):
    """
    Logger with persistent and per-call keyword context.

    Delegates emission to a standard library logger of the same name so
    handlers, propagation and pytest's caplog keep working.
    """

    def __init__(self, name: str, py_logger: Optional[logging.Logger] = None):
        self.name = name
        self.context: Dict[str, Any] = {}
        self._py_logger = py_logger or logging.getLogger(name)

    @property
    def propagate(self) -> bool:
        """Get propagation setting from underlying Python logger."""
        return self._py_logger.propagate

    @propagate.setter
    def propagate(self, value: bool) -> None:
        self._py_logger.propagate = value

    def _log(self, level: LogLevel, msg: str, exc_info: Any = None, **context) -> None:
        if not self._py_logger.isEnabledFor(level):
            return
        full_context = {**self.context, **context}
        self._py_logger.log(int(level), msg, exc_info=exc_info,
                            extra={"context": full_context})

    # Standard logging methods
    def debug(self, msg: str, **context) -> None:
        self._log(LogLevel.DEBUG, msg, **context)

    def info(self, msg: str, **context) -> None:
        self._log(LogLevel.INFO, msg, **context)

    def warning(self, msg: str, **context) -> None:
        self._log(LogLevel.WARNING, msg, **context)

    def error(self, msg: str, **context) -> None:
        self._log(LogLevel.ERROR, msg, **context)

    def critical(self, msg: str, **context) -> None:
        self._log(LogLevel.CRITICAL, msg, **context)

    def exception(self, msg: str, **context) -> None:
        """Log error message with the active exception traceback."""
        self._log(LogLevel.ERROR, msg, exc_info=True, **context)

    # Metric helpers
    def metric(self, name: str, value: float, **tags) -> None:
        """Log metric value as a DEBUG record tagged with metric name and value."""
        self._log(LogLevel.DEBUG, f"metric {name}", metric=name, value=value, **tags)

    def latency(self, operation: str, duration_ms: float, **tags) -> None:
        """Log latency metric."""
        self.metric(f"{operation}_latency_ms", duration_ms, **tags)

    def counter(self, name: str, value: int = 1, **tags) -> None:
        """Log counter metric."""
        self.metric(f"{name}_count", float(value), **tags)

    def set_context(self, **context) -> None:
        """Set persistent context for all logs."""
        self.context.update(context)

    def set_level(self, level: Any) -> None:
        if isinstance(level, str):
            level = LogLevel[level.upper()]
        self._py_logger.setLevel(int(level))

    # Python logging compatibility
    def isEnabledFor(self, level: int) -> bool:
        return self._py_logger.isEnabledFor(level)

    def log(self, level: int, msg: str, *args, **kwargs) -> None:
        """Generic log method for Python logging compatibility."""
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                pass
        self._log(self._convert_py_level(level), msg, **kwargs)

    def _convert_py_level(self, py_level: int) -> LogLevel:
        if py_level >= logging.CRITICAL:
            return LogLevel.CRITICAL
        elif py_level >= logging.ERROR:
            return LogLevel.ERROR
        elif py_level >= logging.WARNING:
            return LogLevel.WARNING
        elif py_level >= logging.INFO:
            return LogLevel.INFO
        else:
            return LogLevel.DEBUG


# Context manager for timing operations
class LoggingTimer:
    """Context manager for timing operations with automatic logging."""

    def __init__(self, logger: HFTLoggerInterface, operation: str, **tags):
        self.logger = logger
        self.operation = operation
        self.tags = tags
        self.start_time = None
        self.end_time = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.start_time is not None:
            self.end_time = time.perf_counter()
            duration_ms = (self.end_time - self.start_time) * 1000
            self.logger.latency(self.operation, duration_ms, **self.tags)

        if exc_type is not None:
            self.logger.error(f"{self.operation} failed",
                              error_type=exc_type.__name__,
                              **self.tags)

    @property
    def elapsed_ms(self) -> float:
        """Get elapsed time in milliseconds."""
        if self.start_time is None:
            return 0.0
        end_time = self.end_time or time.perf_counter()
        return (end_time - self.start_time) * 1000
