from typing import Any, Dict, Optional, Type

from infrastructure.exceptions import (
    BrokerRestError, AuthenticationError, TooManyRequestsError, BrokerServerError
)
from infrastructure.logging import get_broker_logger
from infrastructure.networking.http.strategies.exception_handler import ExceptionHandlerStrategy

STATUS_CODE_MAPPING: Dict[int, Type[BrokerRestError]] = {
    401: AuthenticationError,
    403: AuthenticationError,
    429: TooManyRequestsError,
}


def error_class_for_status(status_code: int) -> Type[BrokerRestError]:
    if status_code in STATUS_CODE_MAPPING:
        return STATUS_CODE_MAPPING[status_code]
    if status_code >= 500:
        return BrokerServerError
    return BrokerRestError


class ETradeExceptionHandlerStrategy(ExceptionHandlerStrategy):
    """
    Normalizes E-Trade errors.

    Message and code come from the body's ``Error`` object when present,
    otherwise from the HTTP status line.
    """

    def __init__(self, logger=None):
        self.logger = logger or get_broker_logger('etrade', 'rest.exception_handler')

    @staticmethod
    def _error_object(payload: Any) -> Optional[Dict[str, Any]]:
        if isinstance(payload, dict) and isinstance(payload.get("Error"), dict):
            return payload["Error"]
        return None

    def handle_error(self, status_code: int, reason: str, payload: Any) -> BrokerRestError:
        message = reason or f"HTTP {status_code}"
        code = status_code

        error = self._error_object(payload)
        if error is not None:
            if error.get("code"):
                code = error["code"]
            if "message" in error:
                message = error["message"]

        error_class = error_class_for_status(status_code)
        self.logger.debug("Normalized API error",
                          status=status_code,
                          code=code,
                          error_class=error_class.__name__)
        return error_class(message, code, payload, status_code=status_code)

    def should_handle_error(self, status_code: int, payload: Any) -> bool:
        """Success responses are errors when they carry an ``Error`` object."""
        return self._error_object(payload) is not None
