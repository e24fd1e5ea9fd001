from unittest.mock import Mock

import pytest

from infrastructure.exceptions import (
    AuthenticationError, BrokerRestError, BrokerServerError, TooManyRequestsError,
)
from brokers.etrade.rest import ETradeExceptionHandlerStrategy
from brokers.etrade.rest.exception_handler import error_class_for_status


class TestETradeExceptionHandler:

    @pytest.fixture
    def handler(self):
        return ETradeExceptionHandlerStrategy()

    def test_error_object_supplies_code_and_message(self, handler):
        payload = {"Error": {"code": 1032, "message": "Invalid symbol"}}
        error = handler.handle_error(400, "Bad Request", payload)

        assert type(error) is BrokerRestError
        assert error.code == 1032
        assert error.message == "Invalid symbol"
        assert error.status_code == 400
        assert error.raw == payload

    def test_status_line_fallback(self, handler):
        error = handler.handle_error(500, "Internal Server Error", {})

        assert isinstance(error, BrokerServerError)
        assert error.code == 500
        assert error.message == "Internal Server Error"

    def test_zero_code_keeps_status(self, handler):
        error = handler.handle_error(400, "Bad Request", {"Error": {"code": 0, "message": "Odd"}})
        assert error.code == 400
        assert error.message == "Odd"

    def test_text_payload(self, handler):
        error = handler.handle_error(401, "Unauthorized", "oauth_problem=signature_invalid")
        assert isinstance(error, AuthenticationError)
        assert error.raw == "oauth_problem=signature_invalid"

    def test_should_handle_error_on_success_body(self, handler):
        assert handler.should_handle_error(200, {"Error": {"code": 10033, "message": "x"}})
        assert not handler.should_handle_error(200, {"QuoteResponse": {}})
        assert not handler.should_handle_error(200, "plain text")

    @pytest.mark.parametrize("status,expected", [
        (400, BrokerRestError),
        (401, AuthenticationError),
        (403, AuthenticationError),
        (429, TooManyRequestsError),
        (503, BrokerServerError),
    ])
    def test_status_mapping(self, status, expected):
        assert error_class_for_status(status) is expected

    def test_normalization_logged(self):
        logger = Mock()
        handler = ETradeExceptionHandlerStrategy(logger)

        handler.handle_error(429, "Too Many Requests", {})

        logger.debug.assert_called_once()
        assert logger.debug.call_args.kwargs["error_class"] == "TooManyRequestsError"

    def test_error_serialization(self, handler):
        error = handler.handle_error(400, "Bad Request", {"Error": {"code": 1032, "message": "Invalid symbol"}})
        assert error.to_dict() == {
            "message": "Invalid symbol",
            "code": 1032,
            "raw": {"Error": {"code": 1032, "message": "Invalid symbol"}},
        }
        assert str(error) == "Invalid symbol (code=1032, status=400)"
