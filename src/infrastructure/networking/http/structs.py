from enum import Enum
from typing import Any, Dict, Optional

import msgspec


class HTTPMethod(Enum):
    """HTTP methods used by the broker REST API."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class RequestDescriptor(msgspec.Struct, kw_only=True):
    """
    Logical API call before defaults are merged and the request is signed.

    Attributes:
        path: Path relative to the base URL (already URL-safe)
        method: HTTP method
        base_url: Override of the mode-selected base URL (OAuth endpoints)
        params: Query parameters, signed and transmitted
        data: JSON body fields, always signed; transmitted unless ``omit``
        headers: Header overrides merged over the client defaults
        proxy: Proxy override merged over the client default
        omit: Sign the body but transmit only ``oauth_*`` query parameters
        authenticated: Sign with a token pair; False for the initial request-token call
        token: Explicit token pair overriding the client's current access token
    """
    path: str
    method: HTTPMethod = HTTPMethod.GET
    base_url: Optional[str] = None
    params: Dict[str, Any] = {}
    data: Optional[Dict[str, Any]] = None
    headers: Dict[str, str] = {}
    proxy: Optional[Dict[str, Any]] = None
    omit: bool = False
    authenticated: bool = True
    token: Optional[Any] = None


class PreparedRequest(msgspec.Struct, frozen=True, kw_only=True):
    """Fully merged and signed request, ready for transmission."""
    call_id: int
    method: HTTPMethod
    url: str
    headers: Dict[str, str]
    body: Optional[bytes] = None
    intended_body: Optional[Dict[str, Any]] = None
    proxy: Optional[str] = None
    proxy_auth: Optional[Dict[str, str]] = None
