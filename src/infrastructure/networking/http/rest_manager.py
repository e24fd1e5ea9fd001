"""
REST Transport Manager

Single choke point for every broker API call: merges request defaults,
signs through the auth strategy, admits through the throttle, executes
with aiohttp and normalizes API errors through the exception handler.
"""

import asyncio
import itertools
import time
from typing import Any, Dict, Optional

import aiohttp
import msgspec
from yarl import URL

from ...exceptions import BrokerRestError, ThrottleLimitError
from ...logging import get_logger
from .strategies import RestStrategySet, RequestMetrics
from .structs import HTTPMethod, RequestDescriptor, PreparedRequest
from .throttle import Throttle
from .utils import build_query_string, deep_merge, encode_pairs


class RestManager:
    """
    REST transport manager with strategy composition.

    The aiohttp session is created lazily unless one is injected; an
    injected session is left open by ``close()``.
    """

    def __init__(
        self,
        strategy_set: RestStrategySet,
        throttle: Optional[Throttle] = None,
        session: Optional[aiohttp.ClientSession] = None,
        logger=None):
        self.strategy_set = strategy_set
        self.throttle = throttle or Throttle()

        # Session management
        self._session = session
        self._owns_session = session is None

        self._call_ids = itertools.count(1)
        self._metrics = RequestMetrics()
        self._latency_total_ms = 0.0

        self.logger = logger or get_logger('infrastructure.networking.http.rest_manager')

    async def __aenter__(self):
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit with proper cleanup."""
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure aiohttp session is created."""
        if self._session is None or (self._owns_session and self._session.closed):
            context = self.strategy_set.request_context
            timeout = aiohttp.ClientTimeout(total=context.timeout) if context.timeout else None
            kwargs: Dict[str, Any] = {
                "json_serialize": lambda obj: msgspec.json.encode(obj).decode('utf-8'),
            }
            if timeout is not None:
                kwargs["timeout"] = timeout
            self._session = aiohttp.ClientSession(**kwargs)
            self._owns_session = True
        return self._session

    @staticmethod
    def _proxy_settings(proxy: Optional[Dict[str, Any]]):
        """Translate the proxy mapping to aiohttp ``proxy``/``proxy_auth`` values."""
        if not proxy or not proxy.get("host"):
            return None, None
        protocol = proxy.get("protocol") or "http"
        port = proxy.get("port")
        proxy_url = f"{protocol}://{proxy['host']}" + (f":{port}" if port else "")
        auth = proxy.get("auth") or {}
        proxy_auth = None
        if auth.get("username"):
            proxy_auth = {"username": auth["username"], "password": auth.get("password") or ""}
        return proxy_url, proxy_auth

    async def prepare(self, descriptor: RequestDescriptor, call_id: int = 0) -> PreparedRequest:
        """
        Merge defaults, sign and assemble the outgoing request.

        In omit mode the signature covers ``descriptor.data`` but only the
        ``oauth_*`` parameters are transmitted and the body is dropped.
        """
        overrides: Dict[str, Any] = {"method": descriptor.method.value, "headers": descriptor.headers}
        if descriptor.base_url is not None:
            overrides["base_url"] = descriptor.base_url
        if descriptor.proxy is not None:
            overrides["proxy"] = descriptor.proxy
        merged = deep_merge(self.strategy_set.request_context.as_defaults(), overrides)

        method = HTTPMethod(merged["method"])
        url = f"{merged['base_url']}{descriptor.path}"
        headers: Dict[str, str] = dict(merged["headers"])
        params = dict(descriptor.params)
        data = descriptor.data

        auth_params: Dict[str, str] = {}
        auth_strategy = self.strategy_set.auth_strategy
        if auth_strategy and auth_strategy.requires_auth(descriptor.path):
            auth_data = await auth_strategy.sign_request(
                method, url, params, data,
                token=descriptor.token, authenticated=descriptor.authenticated,
            )
            headers.update(auth_data.headers)
            auth_params = auth_data.params

        body: Optional[bytes] = None
        if descriptor.omit:
            query = build_query_string(auth_params)
        else:
            query = build_query_string(dict(encode_pairs(params)), auth_params)
            if data is not None:
                body = msgspec.json.encode(data)
                headers.setdefault("Content-Type", "application/json")

        proxy, proxy_auth = self._proxy_settings(merged.get("proxy"))

        return PreparedRequest(
            call_id=call_id,
            method=method,
            url=f"{url}?{query}" if query else url,
            headers=headers,
            body=body,
            intended_body=data,
            proxy=proxy,
            proxy_auth=proxy_auth,
        )

    def _parse_response(self, response_text: str, content_type: str) -> Any:
        """Decode JSON bodies with msgspec, return anything else as text."""
        if not response_text:
            return None
        looks_like_json = response_text.lstrip()[:1] in ('{', '[')
        if 'json' in (content_type or '') or looks_like_json:
            try:
                return msgspec.json.decode(response_text)
            except msgspec.DecodeError:
                return response_text
        return response_text

    def _update_metrics(self, latency_ms: float, success: bool,
                        api_error: bool = False, transport_error: bool = False) -> None:
        self._metrics.total_requests += 1
        if success:
            self._metrics.successful_requests += 1
        else:
            self._metrics.failed_requests += 1
        if api_error:
            self._metrics.api_errors += 1
        if transport_error:
            self._metrics.transport_errors += 1
        self._latency_total_ms += latency_ms
        self._metrics.avg_latency_ms = self._latency_total_ms / self._metrics.total_requests

    def _normalize_error(self, status: int, reason: str, payload: Any) -> BrokerRestError:
        handler = self.strategy_set.exception_handler_strategy
        if handler:
            return handler.handle_error(status, reason, payload)
        return BrokerRestError(reason or f"HTTP {status}", status, payload, status_code=status)

    async def _execute(self, prepared: PreparedRequest) -> Any:
        session = await self._ensure_session()
        handler = self.strategy_set.exception_handler_strategy

        kwargs: Dict[str, Any] = {"headers": prepared.headers}
        if prepared.body is not None:
            kwargs["data"] = prepared.body
        if prepared.proxy:
            kwargs["proxy"] = prepared.proxy
            if prepared.proxy_auth:
                kwargs["proxy_auth"] = aiohttp.BasicAuth(
                    prepared.proxy_auth["username"], prepared.proxy_auth["password"]
                )

        start_time = time.perf_counter()
        try:
            async with session.request(prepared.method.value, URL(prepared.url, encoded=True),
                                       **kwargs) as response:
                response_text = await response.text(errors='replace')
                payload = self._parse_response(response_text, response.content_type)

                if response.status >= 400 or (
                        handler is not None and handler.should_handle_error(response.status, payload)):
                    raise self._normalize_error(response.status, response.reason, payload)

        except BrokerRestError as e:
            latency_ms = (time.perf_counter() - start_time) * 1000
            self._update_metrics(latency_ms, success=False, api_error=True)
            self.logger.warning("Request failed",
                                call_id=prepared.call_id,
                                status=e.status_code,
                                code=e.code,
                                error=e.message,
                                latency_ms=round(latency_ms, 2))
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            latency_ms = (time.perf_counter() - start_time) * 1000
            self._update_metrics(latency_ms, success=False, transport_error=True)
            self.logger.error("Request transport failure",
                              call_id=prepared.call_id,
                              error_type=type(e).__name__,
                              error=str(e),
                              latency_ms=round(latency_ms, 2))
            raise

        latency_ms = (time.perf_counter() - start_time) * 1000
        self._update_metrics(latency_ms, success=True)
        self.logger.debug("Response received",
                          call_id=prepared.call_id,
                          status=response.status,
                          latency_ms=round(latency_ms, 2))
        return payload

    async def request(self, descriptor: RequestDescriptor) -> Any:
        """
        Dispatch one API call and return the decoded response body.

        Raises:
            BrokerRestError: The API answered with an error status or an ``Error`` body
            ThrottleLimitError: The throttle is at capacity and configured to reject
            aiohttp.ClientError, asyncio.TimeoutError: No HTTP response was obtained
        """
        call_id = next(self._call_ids)
        prepared = await self.prepare(descriptor, call_id)

        self.logger.debug("Request submitted",
                          call_id=call_id,
                          method=prepared.method.value,
                          path=descriptor.path,
                          omit=descriptor.omit,
                          has_body=prepared.body is not None)

        try:
            return await self.throttle.acquire(lambda: self._execute(prepared))
        except ThrottleLimitError as e:
            self.logger.warning("Request rejected by throttle",
                                call_id=call_id,
                                limit=e.limit,
                                in_flight=e.in_flight,
                                waiting=e.queued)
            raise

    # Convenience HTTP method wrappers

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None, **kwargs) -> Any:
        """Execute GET request."""
        return await self.request(RequestDescriptor(
            path=path, method=HTTPMethod.GET, params=params or {}, **kwargs
        ))

    async def post(self, path: str, json_data: Optional[Dict[str, Any]] = None,
                   params: Optional[Dict[str, Any]] = None, **kwargs) -> Any:
        """Execute POST request."""
        return await self.request(RequestDescriptor(
            path=path, method=HTTPMethod.POST, params=params or {}, data=json_data, **kwargs
        ))

    async def delete(self, path: str, params: Optional[Dict[str, Any]] = None, **kwargs) -> Any:
        """Execute DELETE request."""
        return await self.request(RequestDescriptor(
            path=path, method=HTTPMethod.DELETE, params=params or {}, **kwargs
        ))

    def get_metrics(self) -> RequestMetrics:
        """Get current request metrics."""
        return self._metrics

    async def close(self):
        """Close the session if this manager created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
        self.logger.debug("RestManager closed")
