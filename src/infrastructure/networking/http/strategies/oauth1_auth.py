"""
OAuth1.0a Request Signing

HMAC-SHA1 signer and the authentication strategy that applies it to
every dispatched request.
"""

import base64
import hashlib
import hmac
import secrets
import string
import time
from typing import Any, Callable, Dict, Mapping, Optional

from yarl import URL

from ....exceptions import SigningError
from ....logging import get_logger
from ..structs import HTTPMethod
from ..utils import encode_pairs, percent_encode
from .auth import AuthStrategy
from .structs import AuthenticationData

NONCE_ALPHABET = string.ascii_letters + string.digits
NONCE_LENGTH = 32


def generate_nonce() -> str:
    return ''.join(secrets.choice(NONCE_ALPHABET) for _ in range(NONCE_LENGTH))


def generate_timestamp() -> int:
    return int(time.time())


class OAuth1Signer:
    """
    Computes OAuth1.0a authorization parameters.

    Holds only the consumer credentials and the nonce/timestamp sources;
    every call is a pure function of its arguments plus those sources.
    """

    SIGNATURE_METHOD = "HMAC-SHA1"
    VERSION = "1.0"

    def __init__(self, consumer_key: str, consumer_secret: str,
                 nonce_factory: Callable[[], str] = generate_nonce,
                 timestamp_factory: Callable[[], int] = generate_timestamp):
        if not consumer_key or not consumer_secret:
            raise SigningError("Consumer key and secret must be non-empty")
        self.consumer_key = consumer_key
        self._consumer_secret = consumer_secret
        self._nonce_factory = nonce_factory
        self._timestamp_factory = timestamp_factory

    @staticmethod
    def normalize_url(url: str) -> str:
        """
        Base string URI of ``url``: lowercase scheme and host, no default
        port, no query string or fragment. The path keeps its encoding.
        """
        parsed = URL(url, encoded=True)
        authority = (parsed.raw_host or '').lower()
        if parsed.port is not None and not parsed.is_default_port():
            authority = f"{authority}:{parsed.port}"
        return f"{parsed.scheme.lower()}://{authority}{parsed.raw_path or '/'}"

    @staticmethod
    def signature_base_string(method: str, url: str, params: Mapping[str, Any]) -> str:
        pairs = sorted(encode_pairs(params))
        normalized = '&'.join(f"{key}={value}" for key, value in pairs)
        return '&'.join([
            method.upper(),
            percent_encode(OAuth1Signer.normalize_url(url)),
            percent_encode(normalized),
        ])

    def signing_key(self, token_secret: Optional[str] = None) -> str:
        return f"{percent_encode(self._consumer_secret)}&{percent_encode(token_secret or '')}"

    def sign(self, base_string: str, token_secret: Optional[str] = None) -> str:
        digest = hmac.new(
            self.signing_key(token_secret).encode('utf-8'),
            base_string.encode('utf-8'),
            hashlib.sha1,
        ).digest()
        return base64.b64encode(digest).decode('ascii')

    def authorize(self, method: str, url: str, params: Optional[Mapping[str, Any]] = None,
                  token_key: Optional[str] = None, token_secret: Optional[str] = None,
                  nonce: Optional[str] = None, timestamp: Optional[int] = None) -> Dict[str, str]:
        """
        Build the percent-encoded ``oauth_*`` parameter set for one request.

        Args:
            method: HTTP method
            url: Absolute URL; any query string is ignored
            params: Every non-oauth parameter covered by the signature (query and body fields)
            token_key: Token key; ``oauth_token`` is omitted when empty
            token_secret: Token secret; empty for unauthenticated signing
            nonce: Fixed nonce, defaults to the nonce factory
            timestamp: Fixed Unix timestamp in seconds, defaults to the timestamp factory

        Returns:
            Mapping of oauth parameter name to percent-encoded value
        """
        oauth: Dict[str, str] = {
            "oauth_consumer_key": self.consumer_key,
            "oauth_nonce": nonce if nonce is not None else self._nonce_factory(),
            "oauth_signature_method": self.SIGNATURE_METHOD,
            "oauth_timestamp": str(timestamp if timestamp is not None else self._timestamp_factory()),
            "oauth_version": self.VERSION,
        }
        if token_key:
            oauth["oauth_token"] = token_key

        base_string = self.signature_base_string(method, url, {**(params or {}), **oauth})
        oauth["oauth_signature"] = self.sign(base_string, token_secret if token_key else None)

        return {key: percent_encode(value) for key, value in oauth.items()}


class OAuth1AuthStrategy(AuthStrategy):
    """
    Signs every request with OAuth1.0a, query-string transport.

    The current access token is read through ``token_provider`` at signing
    time so token rotation on the client is picked up by the next request.
    """

    def __init__(self, signer: OAuth1Signer,
                 token_provider: Callable[[], Optional[Any]] = lambda: None,
                 logger=None):
        self.signer = signer
        self._token_provider = token_provider
        self.logger = logger or get_logger('infrastructure.networking.http.oauth1')

    def _resolve_token(self, token: Optional[Any], authenticated: bool):
        if not authenticated:
            return None, None
        if token is None:
            token = self._token_provider()
        if token is None:
            return None, None
        return token.key, token.secret

    async def sign_request(
        self,
        method: HTTPMethod,
        url: str,
        params: Dict[str, Any],
        json_data: Optional[Dict[str, Any]],
        token: Optional[Any] = None,
        authenticated: bool = True
    ) -> AuthenticationData:
        token_key, token_secret = self._resolve_token(token, authenticated)
        signed_params = {**(params or {}), **(json_data or {})}

        oauth_params = self.signer.authorize(
            method.value, url, signed_params,
            token_key=token_key, token_secret=token_secret,
        )

        self.logger.debug("Request signed",
                          method=method.value,
                          url=url,
                          with_token=bool(token_key),
                          signed_fields=len(signed_params))

        return AuthenticationData(headers={}, params=oauth_params)

    def requires_auth(self, endpoint: str) -> bool:
        return True
