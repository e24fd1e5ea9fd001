"""
Authentication Strategy Interface

Strategy for request authentication and signing.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional

from ..structs import HTTPMethod
from .structs import AuthenticationData


class AuthStrategy(ABC):
    """
    Strategy for request authentication and signing.

    Implementations receive the fully merged request (absolute URL without
    query string, every parameter that must be covered by the signature)
    and return the authentication headers/parameters to attach.
    """

    @abstractmethod
    async def sign_request(
        self,
        method: HTTPMethod,
        url: str,
        params: Dict[str, Any],
        json_data: Optional[Dict[str, Any]],
        token: Optional[Any] = None,
        authenticated: bool = True
    ) -> AuthenticationData:
        """
        Generate authentication data for request.

        Args:
            method: HTTP method
            url: Absolute request URL without query string
            params: Query parameters
            json_data: JSON body fields, covered by the signature
            token: Explicit token pair overriding the strategy's current one
            authenticated: False signs with consumer credentials only

        Returns:
            AuthenticationData with headers and additional parameters
        """
        pass

    @abstractmethod
    def requires_auth(self, endpoint: str) -> bool:
        """
        Check if endpoint requires authentication.

        Args:
            endpoint: API endpoint

        Returns:
            True if authentication required
        """
        pass
