from typing import Optional


class ConfigurationError(Exception):
    """Configuration-specific exception for setup errors."""

    def __init__(self, message: str, setting_name: Optional[str] = None):
        self.setting_name = setting_name
        super().__init__(message)


class SigningError(ValueError):
    """Consumer credentials are unusable for OAuth1.0a signing."""
    pass


class ThrottleLimitError(RuntimeError):
    """Raised instead of queuing when the throttle is at capacity and configured to reject."""

    def __init__(self, limit: int, in_flight: int, queued: int = 0) -> None:
        self.limit = limit
        self.in_flight = in_flight
        self.queued = queued
        super().__init__(
            f"Throttle limit reached: {in_flight}/{limit} in flight, {queued} waiting"
        )
