"""
Broker Exception Hierarchy

- broker: normalized API errors surfaced by the request dispatcher
- system: configuration, signing and throttling errors raised locally
"""

from .broker import (
    BrokerRestError,
    AuthenticationError,
    TooManyRequestsError,
    BrokerServerError,
    UnexpectedResponseError,
)
from .system import (
    ConfigurationError,
    SigningError,
    ThrottleLimitError,
)

__all__ = [
    'BrokerRestError',
    'AuthenticationError',
    'TooManyRequestsError',
    'BrokerServerError',
    'UnexpectedResponseError',
    'ConfigurationError',
    'SigningError',
    'ThrottleLimitError',
]
