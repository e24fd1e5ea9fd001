from typing import Any, Dict, Optional, Sequence, Union


class BrokerRestError(Exception):
    """
    Normalized broker API error.

    Raised for any HTTP response with a non-success status and for success
    responses whose body carries a structured ``Error`` object.

    Attributes:
        message: Human-readable message (API message when supplied, else HTTP reason)
        code: API error code when supplied, else the HTTP status
        raw: Decoded response body (or raw text when not JSON)
        status_code: HTTP status of the response
    """

    def __init__(self, message: str, code: int, raw: Any = None,
                 status_code: Optional[int] = None) -> None:
        self.message = message
        self.code = code
        self.raw = raw
        self.status_code = code if status_code is None else status_code
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "code": self.code, "raw": self.raw}

    def __str__(self) -> str:
        return f"{self.message} (code={self.code}, status={self.status_code})"


class AuthenticationError(BrokerRestError):
    """HTTP 401/403 - rejected signature, expired or revoked token."""
    pass


class TooManyRequestsError(BrokerRestError):
    """HTTP 429 - broker-side rate limit hit."""
    pass


class BrokerServerError(BrokerRestError):
    """HTTP 5xx."""
    pass


class UnexpectedResponseError(Exception):
    """Response payload does not contain the field an endpoint unwraps."""

    def __init__(self, operation: str, path: Sequence[Union[str, int]], raw: Any = None) -> None:
        self.operation = operation
        self.path = tuple(path)
        self.raw = raw
        dotted = ".".join(str(p) for p in self.path)
        super().__init__(f"{operation}: response has no '{dotted}'")
