"""
Structured Logging

Usage:
    from infrastructure.logging import get_logger

    logger = get_logger('brokers.etrade.rest')
    logger.info("Request submitted", call_id=3, method="GET")

    # Metrics logging
    logger.latency("get_quotes", 12.5, call_id=3)
"""

from .interfaces import LogLevel, HFTLoggerInterface
from .hft_logger import HFTLogger, LoggingTimer, ContextFormatter
from .factory import (
    LoggerFactory,
    get_logger,
    get_broker_logger,
    configure_logging,
)
from .structs import LoggingConfig

__all__ = [
    'LogLevel',
    'HFTLoggerInterface',
    'HFTLogger',
    'LoggingTimer',
    'ContextFormatter',
    'LoggerFactory',
    'get_logger',
    'get_broker_logger',
    'configure_logging',
    'LoggingConfig',
]
