"""
E-Trade Data Structures

- requests: typed endpoint inputs (msgspec structs)
- responses: response shapes (TypedDict declarations)
- enums: literal value sets shared by both
"""

from . import enums, requests, responses
from .requests import (
    ETradeRequest,
    GetAccessTokenRequest,
    RenewAccessTokenRequest,
    GetAccountBalancesRequest,
    ListTransactionsRequest,
    ListTransactionDetailsRequest,
    ViewPortfolioRequest,
    ViewLotsDetailsRequest,
    GetQuotesRequest,
    GetOptionChainsRequest,
    GetOptionExpireDatesRequest,
    ListAlertsRequest,
    ListAlertDetailsRequest,
    ListOrdersRequest,
    ListOrderDetailsRequest,
    PreviewOrderRequest,
    PlaceOrderRequest,
    ChangePreviewedOrderRequest,
    PlaceChangedOrderRequest,
    CancelOrderRequest,
)
from .responses import (
    RequestTokenResponse,
    AccessTokenResponse,
    Account,
    BalanceResponse,
    ListTransactionsResponse,
    TransactionDetail,
    Portfolio,
    PositionLotsResponse,
    QuoteData,
    LookupProduct,
    OptionChainResponse,
    ExpirationDate,
    AlertsResponse,
    AlertDetails,
    DeleteAlertResponse,
    OrdersResponse,
    Order,
    PreviewOrderResponse,
    PlaceOrderResponse,
    CancelOrderResponse,
)

__all__ = [
    'enums', 'requests', 'responses',
    # Requests
    'ETradeRequest', 'GetAccessTokenRequest', 'RenewAccessTokenRequest',
    'GetAccountBalancesRequest', 'ListTransactionsRequest', 'ListTransactionDetailsRequest',
    'ViewPortfolioRequest', 'ViewLotsDetailsRequest', 'GetQuotesRequest',
    'GetOptionChainsRequest', 'GetOptionExpireDatesRequest', 'ListAlertsRequest',
    'ListAlertDetailsRequest', 'ListOrdersRequest', 'ListOrderDetailsRequest',
    'PreviewOrderRequest', 'PlaceOrderRequest', 'ChangePreviewedOrderRequest',
    'PlaceChangedOrderRequest', 'CancelOrderRequest',
    # Responses
    'RequestTokenResponse', 'AccessTokenResponse', 'Account', 'BalanceResponse',
    'ListTransactionsResponse', 'TransactionDetail', 'Portfolio', 'PositionLotsResponse',
    'QuoteData', 'LookupProduct', 'OptionChainResponse', 'ExpirationDate',
    'AlertsResponse', 'AlertDetails', 'DeleteAlertResponse', 'OrdersResponse', 'Order',
    'PreviewOrderResponse', 'PlaceOrderResponse', 'CancelOrderResponse',
]
