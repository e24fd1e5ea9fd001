from .structs import HTTPMethod, RequestDescriptor, PreparedRequest
from .strategies import (
    AuthStrategy, ExceptionHandlerStrategy, OAuth1Signer, OAuth1AuthStrategy,
    RestStrategySet,
    RequestContext, RequestMetrics, AuthenticationData
)
from .throttle import Throttle, ThrottleTicket
from .rest_manager import RestManager
from .utils import deep_merge, percent_encode, stringify_value

__all__ = [
    "HTTPMethod", "RequestDescriptor", "PreparedRequest",
    # Strategy interfaces
    "AuthStrategy", "ExceptionHandlerStrategy", "OAuth1Signer", "OAuth1AuthStrategy",
    "RestStrategySet",
    # Data structures
    "RequestContext", "RequestMetrics", "AuthenticationData",
    # Throttling
    "Throttle", "ThrottleTicket",
    # Transport manager
    "RestManager",
    # Helpers
    "deep_merge", "percent_encode", "stringify_value",
]
