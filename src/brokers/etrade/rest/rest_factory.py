from typing import Callable, Optional

import aiohttp

from config.structs import AccessToken, ETradeConfig
from infrastructure.networking.http import (
    OAuth1AuthStrategy, OAuth1Signer, RequestContext, RestManager, RestStrategySet, Throttle
)
from .exception_handler import ETradeExceptionHandlerStrategy


def create_request_context(config: ETradeConfig) -> RequestContext:
    return RequestContext(
        base_url=config.base_url,
        default_headers={"User-Agent": config.user_agent, "Accept": "application/json"},
        timeout=config.request_timeout,
        proxy=config.proxy.to_request_proxy() if config.proxy else None,
    )


def create_throttle(config: ETradeConfig, logger=None) -> Throttle:
    return Throttle(
        limit=config.throttle.connection_limit,
        window_ms=config.throttle.connection_limit_period,
        reject_on_limit=config.throttle.error_on_connection_limit,
        logger=logger,
    )


def create_rest_manager(config: ETradeConfig,
                        token_provider: Callable[[], Optional[AccessToken]],
                        logger=None,
                        session: Optional[aiohttp.ClientSession] = None,
                        signer: Optional[OAuth1Signer] = None) -> RestManager:
    """Create the E-Trade REST manager: OAuth1 signing, throttle and error normalization."""
    signer = signer or OAuth1Signer(config.credentials.key, config.credentials.secret)

    strategy_set = RestStrategySet(
        request_context=create_request_context(config),
        auth_strategy=OAuth1AuthStrategy(signer, token_provider, logger),
        exception_handler_strategy=ETradeExceptionHandlerStrategy(logger),
        logger=logger,
    )

    return RestManager(strategy_set, throttle=create_throttle(config, logger), session=session, logger=logger)
