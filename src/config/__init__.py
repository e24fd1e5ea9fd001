"""
Configuration

Typed, immutable client configuration and the YAML/.env loader.
"""

from .structs import (
    Mode,
    ConsumerCredentials,
    AccessToken,
    BrokerUrls,
    ThrottleConfig,
    ProxyConfig,
    ETradeConfig,
)
from .config_manager import ConfigManager, load_config, guess_file_paths

__all__ = [
    'Mode',
    'ConsumerCredentials',
    'AccessToken',
    'BrokerUrls',
    'ThrottleConfig',
    'ProxyConfig',
    'ETradeConfig',
    'ConfigManager',
    'load_config',
    'guess_file_paths',
]
