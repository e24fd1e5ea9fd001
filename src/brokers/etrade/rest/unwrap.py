"""
Response unwrap table.

Each endpoint returns one nested field of the decoded payload. Paths are
declared here by operation name so a validation step can later be added
in one place.
"""

from typing import Any, Dict, Sequence, Tuple, Union

from infrastructure.exceptions import UnexpectedResponseError

PathElement = Union[str, int]

_MISSING = object()

UNWRAP_PATHS: Dict[str, Tuple[PathElement, ...]] = {
    "list_accounts": ("AccountListResponse", "Accounts", "Account"),
    "get_account_balances": ("BalanceResponse",),
    "list_transactions": ("TransactionListResponse",),
    "list_transaction_details": ("TransactionDetailsResponse",),
    "view_portfolio": ("PortfolioResponse", "AccountPortfolio"),
    "view_lots_details": ("PositionLotsResponse",),
    "get_quotes": ("QuoteResponse", "QuoteData", 0),
    "lookup_product": ("LookupResponse", "Data"),
    "get_option_chains": ("OptionChainResponse",),
    "get_option_expire_dates": ("OptionExpireDateResponse", "ExpirationDate"),
    "list_alerts": ("AlertsResponse",),
    "list_alert_details": ("AlertDetailsResponse",),
    "delete_alert": ("AlertsResponse",),
    "list_orders": ("OrdersResponse",),
    "list_order_details": ("OrdersResponse", "Order", 0),
    "preview_order": ("PreviewOrderResponse",),
    "place_order": ("PlaceOrderResponse",),
    "change_previewed_order": ("PreviewOrderResponse",),
    "place_changed_order": ("PlaceOrderResponse",),
    "cancel_order": ("CancelOrderResponse",),
}

# Operations that return a fallback instead of raising when the path is absent
UNWRAP_DEFAULTS: Dict[str, Any] = {
    "view_portfolio": dict,
}


def extract(payload: Any, path: Sequence[PathElement]) -> Any:
    """Walk ``path`` through nested dicts/lists, returning _MISSING on the first gap."""
    current = payload
    for element in path:
        if isinstance(element, int):
            if not isinstance(current, list) or not -len(current) <= element < len(current):
                return _MISSING
            current = current[element]
        else:
            if not isinstance(current, dict) or element not in current:
                return _MISSING
            current = current[element]
    return current


def unwrap(operation: str, payload: Any) -> Any:
    """
    Return the field ``operation`` exposes from ``payload``.

    Raises:
        UnexpectedResponseError: the path is absent and the operation has no fallback
    """
    path = UNWRAP_PATHS[operation]
    value = extract(payload, path)
    if value is _MISSING or (value is None and operation in UNWRAP_DEFAULTS):
        if operation in UNWRAP_DEFAULTS:
            return UNWRAP_DEFAULTS[operation]()
        raise UnexpectedResponseError(operation, path, payload)
    return value
