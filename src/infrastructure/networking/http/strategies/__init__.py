"""
REST Transport Strategy Module

Strategy interfaces and data structures for REST transport.
"""

from .structs import (
    RequestContext,
    AuthenticationData,
    RequestMetrics,
)

from .auth import AuthStrategy
from .exception_handler import ExceptionHandlerStrategy
from .oauth1_auth import OAuth1Signer, OAuth1AuthStrategy
from .strategy_set import RestStrategySet

__all__ = [
    # Data structures
    'RequestContext',
    'AuthenticationData',
    'RequestMetrics',

    # Strategy interfaces
    'AuthStrategy',
    'ExceptionHandlerStrategy',

    # OAuth1.0a
    'OAuth1Signer',
    'OAuth1AuthStrategy',

    # Strategy container
    'RestStrategySet',
]
