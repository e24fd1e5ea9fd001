"""
REST Transport Strategy Data Structures

Common data structures used by REST transport strategies.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Any


@dataclass(frozen=True)
class RequestContext:
    """
    Client-wide request defaults merged under every RequestDescriptor.

    ``proxy`` follows the shape ``{"host", "port", "protocol", "auth": {"username", "password"}}``
    so request overrides can deep-merge into it.
    """
    base_url: str
    default_headers: Dict[str, str] = field(default_factory=dict)
    timeout: Optional[float] = None
    proxy: Optional[Dict[str, Any]] = None

    def as_defaults(self) -> Dict[str, Any]:
        return {
            "method": "GET",
            "base_url": self.base_url,
            "headers": dict(self.default_headers),
            "proxy": self.proxy,
        }


@dataclass(frozen=True)
class AuthenticationData:
    """Authentication data containing headers and already-encoded query parameters."""
    headers: Dict[str, str]
    params: Dict[str, str]


@dataclass
class RequestMetrics:
    """Request counters kept by RestManager."""
    total_requests: int = 0
    successful_requests: int = 0
    failed_requests: int = 0
    api_errors: int = 0
    transport_errors: int = 0
    avg_latency_ms: float = 0.0
