"""
E-Trade request structures.

Field names are the wire names. Path fields are excluded from the query
parameters; ``None`` fields are omitted, defaults are always sent.
"""

from typing import Any, ClassVar, Dict, List, Optional, Tuple, Union

import msgspec

from .enums import (
    AccountType, AlertCategory, AlertStatus, ChainType, DetailFlag, ExpiryType,
    InstitutionType, MarketSession, OptionCategory, OrderStatus, OrderType,
    PortfolioView, PriceType, SecurityType, SortBy, SortOrder, TransactionType,
)


class ETradeRequest(msgspec.Struct, kw_only=True):
    """Base for typed endpoint inputs."""

    path_fields: ClassVar[Tuple[str, ...]] = ()

    def to_params(self) -> Dict[str, Any]:
        """Query parameters: every non-path field that is not None."""
        return {
            key: value
            for key, value in msgspec.to_builtins(self).items()
            if value is not None and key not in self.path_fields
        }


# OAuth

class GetAccessTokenRequest(ETradeRequest):
    key: str
    secret: str
    code: str


class RenewAccessTokenRequest(ETradeRequest):
    key: str
    secret: str


# Accounts

class GetAccountBalancesRequest(ETradeRequest):
    path_fields: ClassVar[Tuple[str, ...]] = ('accountIdKey',)

    accountIdKey: str
    accountType: Optional[AccountType] = None
    instType: InstitutionType = 'BROKERAGE'
    realTimeNAV: bool = True


class ListTransactionsRequest(ETradeRequest):
    """
    startDate/endDate are MMDDYYYY. ``count`` must be 1..50 (server default 50).
    Page by passing the ``marker`` from the previous response.
    """
    path_fields: ClassVar[Tuple[str, ...]] = ('accountIdKey',)

    accountIdKey: str
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    sortOrder: Optional[SortOrder] = None
    marker: Optional[str] = None
    count: Optional[int] = None


class ListTransactionDetailsRequest(ETradeRequest):
    path_fields: ClassVar[Tuple[str, ...]] = ('accountIdKey', 'transactionId')

    accountIdKey: str
    transactionId: Union[int, str]
    storeId: Optional[str] = None


class ViewPortfolioRequest(ETradeRequest):
    path_fields: ClassVar[Tuple[str, ...]] = ('accountIdKey',)

    accountIdKey: str
    count: Optional[int] = None
    sortBy: Optional[SortBy] = None
    sortOrder: SortOrder = 'DESC'
    marketSession: MarketSession = 'REGULAR'
    totalsRequired: bool = False
    lotsRequired: bool = False
    view: PortfolioView = 'QUICK'


class ViewLotsDetailsRequest(ETradeRequest):
    path_fields: ClassVar[Tuple[str, ...]] = ('accountIdKey', 'positionId')

    accountIdKey: str
    positionId: Union[int, str]


# Market

class GetQuotesRequest(ETradeRequest):
    path_fields: ClassVar[Tuple[str, ...]] = ('symbols',)

    symbols: Union[str, List[str]]
    detailFlag: Optional[DetailFlag] = None
    requireEarningsDate: bool = False
    overrideSymbolCount: bool = False
    skipMiniOptionsCheck: bool = False

    @property
    def symbol_list(self) -> str:
        return self.symbols if isinstance(self.symbols, str) else ','.join(self.symbols)


class GetOptionChainsRequest(ETradeRequest):
    symbol: str
    expiryYear: Optional[int] = None
    expiryMonth: Optional[int] = None
    expiryDay: Optional[int] = None
    strikePriceNear: Optional[float] = None
    noOfStrikes: Optional[int] = None
    includeWeekly: bool = False
    skipAdjusted: bool = True
    optionCategory: OptionCategory = 'STANDARD'
    chainType: ChainType = 'CALLPUT'
    priceType: PriceType = 'ATNM'


class GetOptionExpireDatesRequest(ETradeRequest):
    symbol: str
    expiryType: Optional[ExpiryType] = None


# Alerts

class ListAlertsRequest(ETradeRequest):
    count: Optional[int] = None
    category: Optional[AlertCategory] = None
    status: Optional[AlertStatus] = None
    direction: Optional[SortOrder] = None
    search: Optional[str] = None


class ListAlertDetailsRequest(ETradeRequest):
    path_fields: ClassVar[Tuple[str, ...]] = ('alertId',)

    alertId: Union[int, str]
    htmlTags: bool = False


# Orders

class ListOrdersRequest(ETradeRequest):
    """fromDate/toDate are MMDDYYYY."""
    path_fields: ClassVar[Tuple[str, ...]] = ('accountIdKey',)

    accountIdKey: str
    marker: Optional[str] = None
    count: Optional[int] = None
    status: Optional[OrderStatus] = None
    fromDate: Optional[str] = None
    toDate: Optional[str] = None
    symbol: Optional[str] = None
    securityType: Optional[SecurityType] = None
    transactionType: Optional[TransactionType] = None
    marketSession: Optional[MarketSession] = None


class ListOrderDetailsRequest(ETradeRequest):
    path_fields: ClassVar[Tuple[str, ...]] = ('accountIdKey', 'orderId')

    accountIdKey: str
    orderId: Union[int, str]


class PreviewOrderRequest(ETradeRequest):
    """
    ``order`` is a list of partial OrderDetail mappings sent as ``Order``.
    """
    accountIdKey: str
    orderType: OrderType
    order: List[Dict[str, Any]]
    clientOrderId: Union[str, int]

    def to_body(self) -> Dict[str, Any]:
        return {
            "PreviewOrderRequest": {
                "orderType": self.orderType,
                "clientOrderId": self.clientOrderId,
                "Order": self.order,
            }
        }


class PlaceOrderRequest(ETradeRequest):
    """``previewIds`` is passed through exactly as returned by the preview call."""
    accountIdKey: str
    orderType: OrderType
    order: List[Dict[str, Any]]
    clientOrderId: Union[str, int]
    previewIds: List[Dict[str, Any]]

    def to_body(self) -> Dict[str, Any]:
        return {
            "PlaceOrderRequest": {
                "orderType": self.orderType,
                "clientOrderId": self.clientOrderId,
                "Order": self.order,
                "PreviewIds": self.previewIds,
            }
        }


class ChangePreviewedOrderRequest(PreviewOrderRequest):
    orderId: Union[int, str]


class PlaceChangedOrderRequest(PlaceOrderRequest):
    orderId: Union[int, str]


class CancelOrderRequest(ETradeRequest):
    accountIdKey: str
    orderId: Union[int, str]

    def to_body(self) -> Dict[str, Any]:
        return {"CancelOrderRequest": {"orderId": self.orderId}}
