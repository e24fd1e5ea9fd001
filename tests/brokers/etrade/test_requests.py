from brokers.etrade.structs import (
    CancelOrderRequest, GetQuotesRequest, ListOrdersRequest, PlaceChangedOrderRequest,
    PreviewOrderRequest, ViewPortfolioRequest,
)


class TestRequestParams:

    def test_path_fields_and_none_excluded(self):
        request = ListOrdersRequest(accountIdKey="k1", status="OPEN", count=None)
        assert request.to_params() == {"status": "OPEN"}

    def test_defaults_always_sent(self):
        assert ViewPortfolioRequest(accountIdKey="k1", count=5).to_params() == {
            "count": 5,
            "sortOrder": "DESC",
            "marketSession": "REGULAR",
            "totalsRequired": False,
            "lotsRequired": False,
            "view": "QUICK",
        }

    def test_symbol_list(self):
        assert GetQuotesRequest(symbols=["A", "B"]).symbol_list == "A,B"
        assert GetQuotesRequest(symbols="A").symbol_list == "A"
        assert "symbols" not in GetQuotesRequest(symbols="A").to_params()


class TestOrderBodies:

    def test_preview_body(self):
        request = PreviewOrderRequest(accountIdKey="k1", orderType="EQ", order=[{"priceType": "MARKET"}],
                                      clientOrderId="c1")
        assert request.to_body() == {"PreviewOrderRequest": {
            "orderType": "EQ", "clientOrderId": "c1", "Order": [{"priceType": "MARKET"}],
        }}

    def test_place_changed_body_carries_preview_ids(self):
        request = PlaceChangedOrderRequest(accountIdKey="k1", orderId=5, orderType="EQ", order=[],
                                           clientOrderId="c1", previewIds=[{"previewId": 9}])
        assert request.to_body()["PlaceOrderRequest"]["PreviewIds"] == [{"previewId": 9}]

    def test_cancel_body(self):
        assert CancelOrderRequest(accountIdKey="k1", orderId=42).to_body() == {
            "CancelOrderRequest": {"orderId": 42},
        }
