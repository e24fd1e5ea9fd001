"""
RestManager tests: request assembly, omit mode, response decoding, error
normalization and metrics, driven through a recording fake session.
"""

import asyncio
import io
import logging

import aiohttp
import pytest

from config.structs import AccessToken
from infrastructure.exceptions import BrokerRestError, ThrottleLimitError
from infrastructure.logging import LoggingConfig, configure_logging
from infrastructure.networking.http import (
    HTTPMethod, OAuth1AuthStrategy, RequestContext, RequestDescriptor, RestManager, RestStrategySet,
    Throttle,
)

from tests.helpers import FakeSession, split_url

BASE_URL = "https://api.example.com/v1/"


@pytest.fixture
def token():
    return AccessToken(key="tok", secret="toksec")


@pytest.fixture
def manager(fake_session, fixed_signer, token):
    strategy_set = RestStrategySet(
        request_context=RequestContext(
            base_url=BASE_URL,
            default_headers={"User-Agent": "test-agent", "Accept": "application/json"},
        ),
        auth_strategy=OAuth1AuthStrategy(fixed_signer, token_provider=lambda: token),
    )
    return RestManager(strategy_set, throttle=Throttle(limit=5, window_ms=0), session=fake_session)


class TestPrepare:

    @pytest.mark.asyncio
    async def test_query_carries_params_and_oauth(self, manager, fixed_signer, token):
        prepared = await manager.prepare(RequestDescriptor(path="market/quote/A.json",
                                                           params={"detailFlag": "ALL", "flag": False}))

        base, pairs = split_url(prepared.url)
        assert base == BASE_URL + "market/quote/A.json"
        assert pairs[:2] == [("detailFlag", "ALL"), ("flag", "false")]

        expected = fixed_signer.authorize("GET", base, {"detailFlag": "ALL", "flag": False},
                                          token_key=token.key, token_secret=token.secret)
        assert dict(pairs[2:]) == expected
        assert prepared.body is None
        assert prepared.headers["User-Agent"] == "test-agent"

    @pytest.mark.asyncio
    async def test_body_is_json_and_signed(self, manager, fixed_signer, token):
        body = {"Order": [{"priceType": "MARKET"}], "count": 2}
        prepared = await manager.prepare(RequestDescriptor(path="orders.json", method=HTTPMethod.POST,
                                                           data=body))

        base, pairs = split_url(prepared.url)
        expected = fixed_signer.authorize("POST", base, body, token_key=token.key, token_secret=token.secret)
        assert dict(pairs) == expected
        assert prepared.body == b'{"Order":[{"priceType":"MARKET"}],"count":2}'
        assert prepared.headers["Content-Type"] == "application/json"

    @pytest.mark.asyncio
    async def test_omit_signs_body_but_sends_only_oauth(self, manager, fixed_signer, token):
        body = {"CancelOrderRequest": {"orderId": 9}}
        prepared = await manager.prepare(RequestDescriptor(path="orders/cancel.json", method=HTTPMethod.PUT,
                                                           params={"extra": "x"}, data=body, omit=True))

        base, pairs = split_url(prepared.url)
        assert all(key.startswith("oauth_") for key, _ in pairs)
        expected = fixed_signer.authorize("PUT", base, {"extra": "x", **body},
                                          token_key=token.key, token_secret=token.secret)
        assert dict(pairs)["oauth_signature"] == expected["oauth_signature"]
        assert prepared.body is None
        assert prepared.intended_body == body

    @pytest.mark.asyncio
    async def test_overrides_merge_over_defaults(self, manager):
        prepared = await manager.prepare(RequestDescriptor(
            path="request_token",
            base_url="https://auth.example.com/oauth/",
            headers={"Accept": "text/plain"},
            proxy={"host": "proxy.local", "port": 3128, "auth": {"username": "u", "password": "p"}},
            authenticated=False,
        ))

        base, pairs = split_url(prepared.url)
        assert base == "https://auth.example.com/oauth/request_token"
        assert "oauth_token" not in dict(pairs)
        assert prepared.headers == {"User-Agent": "test-agent", "Accept": "text/plain"}
        assert prepared.proxy == "http://proxy.local:3128"
        assert prepared.proxy_auth == {"username": "u", "password": "p"}

    @pytest.mark.asyncio
    async def test_call_ids_increase(self, manager, fake_session):
        await manager.request(RequestDescriptor(path="a.json"))
        await manager.request(RequestDescriptor(path="b.json"))
        first = await manager.prepare(RequestDescriptor(path="c.json"), call_id=7)
        assert first.call_id == 7
        assert len(fake_session.calls) == 2


class TestExecute:

    @pytest.mark.asyncio
    async def test_json_response_decoded(self, manager, fake_session):
        fake_session.queue_json({"QuoteResponse": {"QuoteData": []}})
        assert await manager.get("market/quote/A.json") == {"QuoteResponse": {"QuoteData": []}}

        call = fake_session.last_call
        assert call["method"] == "GET"
        assert "data" not in call

    @pytest.mark.asyncio
    async def test_text_response_returned_verbatim(self, manager, fake_session):
        fake_session.queue_text("oauth_token=a&oauth_token_secret=b")
        assert await manager.get("request_token") == "oauth_token=a&oauth_token_secret=b"

    @pytest.mark.asyncio
    async def test_json_body_detected_without_content_type(self, manager, fake_session):
        fake_session.queue_text('{"ok": true}', content_type="text/html")
        assert await manager.get("x.json") == {"ok": True}

    @pytest.mark.asyncio
    async def test_malformed_json_falls_back_to_text(self, manager, fake_session):
        fake_session.queue_text("{not json", content_type="application/json")
        assert await manager.get("x.json") == "{not json"

    @pytest.mark.asyncio
    async def test_empty_body_is_none(self, manager, fake_session):
        fake_session.queue_text("", content_type="application/json")
        assert await manager.delete("x.json") is None

    @pytest.mark.asyncio
    async def test_body_sent_as_bytes(self, manager, fake_session):
        await manager.post("orders.json", json_data={"a": 1})
        assert fake_session.last_call["data"] == b'{"a":1}'

    @pytest.mark.asyncio
    async def test_error_status_without_handler(self, manager, fake_session):
        fake_session.queue_text("nope", status=404, reason="Not Found")

        with pytest.raises(BrokerRestError) as exc_info:
            await manager.get("missing.json")

        assert exc_info.value.code == 404
        assert exc_info.value.message == "Not Found"
        assert exc_info.value.raw == "nope"
        metrics = manager.get_metrics()
        assert metrics.api_errors == 1
        assert metrics.failed_requests == 1

    @pytest.mark.asyncio
    async def test_undecodable_error_body_still_normalized(self, manager, fake_session):
        fake_session.queue_text(b"<html>Bad Gateway \xff\xfe</html>", status=502,
                                content_type="text/html", reason="Bad Gateway")

        with pytest.raises(BrokerRestError) as exc_info:
            await manager.get("accounts/list.json")

        assert exc_info.value.code == 502
        assert exc_info.value.raw.startswith("<html>Bad Gateway")
        assert "\ufffd" in exc_info.value.raw
        assert manager.get_metrics().api_errors == 1
        assert manager.throttle.in_flight == 0

    @pytest.mark.asyncio
    async def test_throttle_rejection_logged_with_call_id(self, fake_session, fixed_signer, caplog):
        configure_logging(LoggingConfig(environment="test", min_level="DEBUG"), stream=io.StringIO())
        strategy_set = RestStrategySet(
            request_context=RequestContext(base_url=BASE_URL),
            auth_strategy=OAuth1AuthStrategy(fixed_signer),
        )
        manager = RestManager(strategy_set, session=fake_session,
                              throttle=Throttle(limit=1, window_ms=1000, reject_on_limit=True))

        await manager.get("first.json")
        with caplog.at_level(logging.DEBUG, logger="infrastructure"):
            with pytest.raises(ThrottleLimitError):
                await manager.get("second.json")

        submitted = [r for r in caplog.records if r.getMessage() == "Request submitted"]
        rejected = [r for r in caplog.records if r.getMessage() == "Request rejected by throttle"]
        assert len(rejected) == 1
        assert rejected[0].levelno == logging.WARNING
        assert rejected[0].context["call_id"] == submitted[-1].context["call_id"] == 2
        assert len(fake_session.calls) == 1

    @pytest.mark.asyncio
    async def test_transport_errors_propagate(self, manager, fake_session):
        fake_session.queue_error(aiohttp.ClientConnectionError("refused"))
        with pytest.raises(aiohttp.ClientConnectionError):
            await manager.get("x.json")

        fake_session.queue_error(asyncio.TimeoutError())
        with pytest.raises(asyncio.TimeoutError):
            await manager.get("x.json")

        assert manager.get_metrics().transport_errors == 2
        assert manager.throttle.in_flight == 0

    @pytest.mark.asyncio
    async def test_metrics_count_success(self, manager, fake_session):
        await manager.get("x.json")
        metrics = manager.get_metrics()
        assert metrics.total_requests == 1
        assert metrics.successful_requests == 1
        assert metrics.avg_latency_ms >= 0

    @pytest.mark.asyncio
    async def test_injected_session_left_open(self, manager, fake_session):
        async with manager:
            await manager.get("x.json")
        assert fake_session.closed is False

    @pytest.mark.asyncio
    async def test_owned_session_closed(self):
        strategy_set = RestStrategySet(request_context=RequestContext(base_url=BASE_URL, timeout=5))
        manager = RestManager(strategy_set)
        async with manager:
            session = manager._session
            assert isinstance(session, aiohttp.ClientSession)
        assert session.closed
