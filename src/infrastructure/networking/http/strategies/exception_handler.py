"""
Exception Handler Strategy Interface

Strategy for handling broker-specific API errors.
Converts broker error responses to the unified BrokerRestError shape.
"""

from abc import ABC, abstractmethod
from typing import Any

from ....exceptions import BrokerRestError


class ExceptionHandlerStrategy(ABC):
    """
    Strategy for handling broker-specific API errors.

    The dispatcher calls ``handle_error`` for every non-success status and
    for success responses where ``should_handle_error`` returns True.
    """

    @abstractmethod
    def handle_error(self, status_code: int, reason: str, payload: Any) -> BrokerRestError:
        """
        Handle broker-specific API error.

        Args:
            status_code: HTTP status code
            reason: HTTP status text
            payload: Decoded response body (raw text when not JSON)

        Returns:
            BrokerRestError or subclass
        """
        pass

    @abstractmethod
    def should_handle_error(self, status_code: int, payload: Any) -> bool:
        """
        Check if a response must be treated as an error.

        Args:
            status_code: HTTP status code
            payload: Decoded response body

        Returns:
            True if the response carries an API error
        """
        pass
