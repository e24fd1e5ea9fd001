"""
REST Strategy Set Container

Container for complete REST strategy configuration.
"""

from typing import Optional

from .auth import AuthStrategy
from .exception_handler import ExceptionHandlerStrategy
from .structs import RequestContext

from infrastructure.logging import get_logger


class RestStrategySet:
    """Container for request defaults plus auth and error handling strategies."""

    def __init__(
        self,
        request_context: RequestContext,
        auth_strategy: Optional[AuthStrategy] = None,
        exception_handler_strategy: Optional[ExceptionHandlerStrategy] = None,
        logger=None
    ):
        self.request_context = request_context
        self.auth_strategy = auth_strategy
        self.exception_handler_strategy = exception_handler_strategy

        self.logger = logger or get_logger('infrastructure.networking.http.strategy_set')

        self._validate_strategies()

        self.logger.info("REST strategy set created",
                         base_url=request_context.base_url,
                         has_auth=auth_strategy is not None,
                         has_exception_handler=exception_handler_strategy is not None)

    def _validate_strategies(self) -> None:
        """Validate strategy compatibility at initialization."""
        if self.request_context is None or not self.request_context.base_url:
            raise ValueError("Request context with a base URL must be provided")
