from .exception_handler import ETradeExceptionHandlerStrategy
from .rest_factory import create_rest_manager
from .unwrap import unwrap, UNWRAP_PATHS

__all__ = ['ETradeExceptionHandlerStrategy', 'create_rest_manager', 'unwrap', 'UNWRAP_PATHS']
