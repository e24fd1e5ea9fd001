"""
Logging Configuration Structures

Structured configuration for the logging system using msgspec.Struct
for type safety and fast decoding from YAML/dict sources.
"""

from typing import Optional, Dict, Any
from msgspec import Struct

VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
VALID_FORMATS = {"text", "json"}


class LoggingConfig(Struct, frozen=True):
    """
    Logging configuration.

    Attributes:
        environment: Environment name (dev, prod, test)
        min_level: Minimum level emitted by broker loggers
        format: ``text`` renders context as key=value pairs, ``json`` emits one JSON object per line
        include_context: Append keyword context to each message
        max_message_length: Truncate rendered messages beyond this length (0 disables)
        overrides: Per-logger minimum levels, e.g. ``{"brokers.etrade.rest": "WARNING"}``
    """
    environment: str = "dev"
    min_level: str = "INFO"
    format: str = "text"
    include_context: bool = True
    max_message_length: int = 2000
    overrides: Optional[Dict[str, str]] = None

    def validate(self) -> None:
        """Validate logging configuration."""
        if self.min_level.upper() not in VALID_LEVELS:
            raise ValueError(f"Invalid log level: {self.min_level}")
        if self.format not in VALID_FORMATS:
            raise ValueError(f"Invalid format: {self.format}")
        if self.max_message_length < 0:
            raise ValueError("max_message_length cannot be negative")
        for name, level in (self.overrides or {}).items():
            if level.upper() not in VALID_LEVELS:
                raise ValueError(f"Invalid log level for {name}: {level}")

    @classmethod
    def default_development(cls) -> 'LoggingConfig':
        return cls(environment="dev", min_level="DEBUG")

    @classmethod
    def default_production(cls) -> 'LoggingConfig':
        return cls(environment="prod", min_level="INFO", format="json")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LoggingConfig':
        """Build from a plain mapping (the ``logging`` section of config.yaml)."""
        known = {k: v for k, v in data.items() if k in cls.__struct_fields__}
        config = cls(**known)
        config.validate()
        return config
