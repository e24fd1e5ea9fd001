"""
E-Trade Broker Integration

Usage:
    from brokers.etrade import ETradeClient

    async with ETradeClient.from_options({"key": KEY, "secret": SECRET, "mode": "dev"}) as client:
        accounts = await client.list_accounts()
"""

from .etrade_client import ETradeClient
from .rest import ETradeExceptionHandlerStrategy, create_rest_manager, unwrap

__all__ = [
    'ETradeClient',
    'ETradeExceptionHandlerStrategy',
    'create_rest_manager',
    'unwrap',
]
