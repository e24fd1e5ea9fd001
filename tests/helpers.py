"""
Test doubles for the HTTP layer.

FakeSession stands in for aiohttp.ClientSession so the request pipeline
can be exercised end to end without network access.
"""

from collections import deque
from typing import Any, Dict, List, Optional, Union

import msgspec

CONSUMER_KEY = "consumer-key-1234"
CONSUMER_SECRET = "consumer-secret-5678"
ACCESS_KEY = "access-token-abcd"
ACCESS_SECRET = "access-secret-efgh"
FIXED_NONCE = "abcdefghijklmnopqrstuvwxyz012345"
FIXED_TIMESTAMP = 1700000000


class FakeResponse:
    """Minimal aiohttp response: status line, content type and body (str or raw bytes)."""

    def __init__(self, status: int = 200, body: Union[str, bytes] = "", content_type: str = "application/json",
                 reason: str = "OK", charset: str = "utf-8"):
        self.status = status
        self.reason = reason
        self.content_type = content_type
        self.charset = charset
        self._body = body

    async def text(self, encoding: Optional[str] = None, errors: str = "strict") -> str:
        if isinstance(self._body, str):
            return self._body
        return self._body.decode(encoding or self.charset, errors)


class _ResponseContext:
    def __init__(self, outcome):
        self._outcome = outcome

    async def __aenter__(self):
        if isinstance(self._outcome, BaseException):
            raise self._outcome
        return self._outcome

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False


class FakeSession:
    """Records every request and replays queued responses in order."""

    def __init__(self):
        self.calls: List[Dict[str, Any]] = []
        self.closed = False
        self._outcomes = deque()

    def queue_json(self, payload: Any, status: int = 200, reason: str = "OK") -> None:
        self._outcomes.append(FakeResponse(status, msgspec.json.encode(payload).decode(), reason=reason))

    def queue_text(self, body: Union[str, bytes], status: int = 200, content_type: str = "text/plain",
                   reason: str = "OK") -> None:
        self._outcomes.append(FakeResponse(status, body, content_type, reason))

    def queue_error(self, error: BaseException) -> None:
        self._outcomes.append(error)

    def request(self, method: str, url: Any, **kwargs) -> _ResponseContext:
        self.calls.append({"method": method, "url": str(url), **kwargs})
        outcome = self._outcomes.popleft() if self._outcomes else FakeResponse(200, "{}")
        return _ResponseContext(outcome)

    @property
    def last_call(self) -> Optional[Dict[str, Any]]:
        return self.calls[-1] if self.calls else None

    async def close(self) -> None:
        self.closed = True


def split_url(url: str):
    """Split a request URL into its base and the list of raw (still encoded) query pairs."""
    base, _, query = url.partition('?')
    pairs = [tuple(part.split('=', 1)) for part in query.split('&')] if query else []
    return base, pairs

