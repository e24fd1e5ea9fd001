"""
E-Trade API client.

One coroutine per API operation. Each builds a typed request, turns it
into a RequestDescriptor, dispatches it through the RestManager and
unwraps the relevant part of the response.

Usage:
    async with ETradeClient.from_options({"key": KEY, "secret": SECRET}) as client:
        token = await client.request_token()
        # user visits token["url"] and returns a verifier code
        access = await client.get_access_token(token["oauth_token"], token["oauth_token_secret"], code)
        client.set_access_token(access["oauth_token"], access["oauth_token_secret"])
        quote = await client.get_quotes(["TSLA"])
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union
from urllib.parse import parse_qsl, quote, urlencode

import aiohttp

from config.structs import AccessToken, ETradeConfig
from infrastructure.exceptions import ConfigurationError, UnexpectedResponseError
from infrastructure.logging import get_broker_logger, configure_logging
from infrastructure.networking.http import HTTPMethod, OAuth1Signer, RequestDescriptor, RestManager

from .rest.rest_factory import create_rest_manager
from .rest.unwrap import unwrap
from .structs import requests as req
from .structs import responses as resp


def _segment(value: Any, safe: str = '') -> str:
    return quote(str(value), safe=safe)


class ETradeClient:
    """
    Asynchronous E-Trade client.

    The configuration is immutable; the access token is the only state that
    changes, through ``set_access_token``/``clear_access_token``. Requests
    already submitted keep the token they were signed with.
    """

    def __init__(self, config: ETradeConfig, session: Optional[aiohttp.ClientSession] = None,
                 logger=None, signer: Optional[OAuth1Signer] = None):
        config.validate()
        self._config = config
        self.logger = logger or get_broker_logger('etrade', 'client')
        self._rest: RestManager = create_rest_manager(
            config, lambda: self._config.access_token, session=session, signer=signer
        )

        self.logger.info("E-Trade client created",
                         mode=config.mode.value,
                         base_url=config.base_url,
                         consumer_key=config.credentials.get_preview(),
                         authorized=config.is_authorized)

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None, **kwargs) -> 'ETradeClient':
        """
        Build a client from plain options (see ``ETradeConfig.from_options``).

        A ``logging`` option is applied to the package loggers; without one
        the logging setup is left to the application.
        """
        config = ETradeConfig.from_options(options)
        if options and options.get("logging") is not None:
            configure_logging(config.logging)
        return cls(config, **kwargs)

    @classmethod
    def from_config_file(cls, config_path=None, **kwargs) -> 'ETradeClient':
        """Load config.yaml, apply its logging section and build a client."""
        from config.config_manager import ConfigManager

        config = ConfigManager(config_path).get_etrade_config()
        configure_logging(config.logging)
        return cls(config, **kwargs)

    @property
    def config(self) -> ETradeConfig:
        return self._config

    @property
    def rest(self) -> RestManager:
        return self._rest

    @property
    def access_token(self) -> Optional[AccessToken]:
        return self._config.access_token

    def set_access_token(self, key: str, secret: str) -> None:
        """Replace the access token pair used to sign subsequent requests."""
        self._config = self._config.with_access_token(key, secret)
        self.logger.info("Access token updated",
                         token=self._config.access_token.get_preview() if self._config.access_token else None)

    def clear_access_token(self) -> None:
        self._config = self._config.with_access_token(None, None)
        self.logger.info("Access token cleared")

    async def close(self) -> None:
        await self._rest.close()

    async def __aenter__(self) -> 'ETradeClient':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _call(self, operation: str, descriptor: RequestDescriptor) -> Any:
        payload = await self._rest.request(descriptor)
        return unwrap(operation, payload)

    # OAuth

    def _oauth_descriptor(self, path: str, params: Optional[Dict[str, Any]] = None,
                          token: Optional[AccessToken] = None, authenticated: bool = True) -> RequestDescriptor:
        return RequestDescriptor(
            path=path,
            method=HTTPMethod.GET,
            base_url=self._config.urls.oauth,
            params=params or {},
            token=token,
            authenticated=authenticated,
        )

    @staticmethod
    def _parse_token_response(operation: str, payload: Any) -> Dict[str, str]:
        if isinstance(payload, dict):
            values = {k: str(v) for k, v in payload.items()}
        else:
            values = dict(parse_qsl(str(payload or ''), keep_blank_values=True))
        if 'oauth_token' not in values or 'oauth_token_secret' not in values:
            raise UnexpectedResponseError(operation, ('oauth_token',), payload)
        return values

    async def request_token(self) -> resp.RequestTokenResponse:
        """Obtain a request token and the URL where the user authorizes it."""
        payload = await self._rest.request(
            self._oauth_descriptor('request_token', {'oauth_callback': 'oob'}, authenticated=False)
        )
        values = self._parse_token_response('request_token', payload)
        authorize_query = urlencode(
            {'key': self._config.credentials.key, 'token': values['oauth_token']}, quote_via=quote
        )
        return {
            'oauth_token': values['oauth_token'],
            'oauth_token_secret': values['oauth_token_secret'],
            'oauth_callback_confirmed': values.get('oauth_callback_confirmed') == 'true',
            'url': f"{self._config.urls.authorize}?{authorize_query}",
        }

    async def get_access_token(self, key: str, secret: str, code: str) -> resp.AccessTokenResponse:
        """
        Exchange an authorized request token and verifier code for an access token.

        The client keeps its current token; call ``set_access_token`` with the result.
        """
        request = req.GetAccessTokenRequest(key=key, secret=secret, code=code)
        payload = await self._rest.request(self._oauth_descriptor(
            'access_token', {'oauth_verifier': request.code},
            token=AccessToken(key=request.key, secret=request.secret),
        ))
        values = self._parse_token_response('access_token', payload)
        return {
            'oauth_token': values['oauth_token'],
            'oauth_token_secret': values['oauth_token_secret'],
        }

    def _token_or_current(self, key: Optional[str], secret: Optional[str]) -> AccessToken:
        if key or secret:
            request = req.RenewAccessTokenRequest(key=key or '', secret=secret or '')
            token = AccessToken.from_pair(request.key, request.secret)
        else:
            token = self._config.access_token
        if token is None:
            raise ConfigurationError("No access token configured", setting_name="access_token")
        return token

    async def renew_access_token(self, key: Optional[str] = None, secret: Optional[str] = None) -> Any:
        """Reactivate an access token after inactivity. Defaults to the current token."""
        token = self._token_or_current(key, secret)
        return await self._rest.request(self._oauth_descriptor('renew_access_token', token=token))

    async def revoke_access_token(self, key: Optional[str] = None, secret: Optional[str] = None) -> Any:
        """Revoke an access token. Defaults to the current token."""
        token = self._token_or_current(key, secret)
        return await self._rest.request(self._oauth_descriptor('revoke_access_token', token=token))

    # Accounts

    async def list_accounts(self) -> List[resp.Account]:
        return await self._call('list_accounts', RequestDescriptor(path='accounts/list.json'))

    async def get_account_balances(self, account_id_key: str, account_type: Optional[str] = None,
                                   inst_type: str = 'BROKERAGE', real_time_nav: bool = True) -> resp.BalanceResponse:
        request = req.GetAccountBalancesRequest(
            accountIdKey=account_id_key, accountType=account_type,
            instType=inst_type, realTimeNAV=real_time_nav,
        )
        return await self._call('get_account_balances', RequestDescriptor(
            path=f"accounts/{_segment(request.accountIdKey)}/balance.json",
            params=request.to_params(),
        ))

    async def list_transactions(self, account_id_key: str, start_date: Optional[str] = None,
                                end_date: Optional[str] = None, sort_order: Optional[str] = None,
                                marker: Optional[str] = None,
                                count: Optional[int] = None) -> resp.ListTransactionsResponse:
        request = req.ListTransactionsRequest(
            accountIdKey=account_id_key, startDate=start_date, endDate=end_date,
            sortOrder=sort_order, marker=marker, count=count,
        )
        return await self._call('list_transactions', RequestDescriptor(
            path=f"accounts/{_segment(request.accountIdKey)}/transactions.json",
            params=request.to_params(),
        ))

    async def list_transaction_details(self, account_id_key: str, transaction_id: Union[int, str],
                                       store_id: Optional[str] = None) -> resp.TransactionDetail:
        request = req.ListTransactionDetailsRequest(
            accountIdKey=account_id_key, transactionId=transaction_id, storeId=store_id,
        )
        return await self._call('list_transaction_details', RequestDescriptor(
            path=f"accounts/{_segment(request.accountIdKey)}/transactions/{_segment(request.transactionId)}.json",
            params=request.to_params(),
        ))

    async def view_portfolio(self, account_id_key: str, count: Optional[int] = None,
                             sort_by: Optional[str] = None, sort_order: str = 'DESC',
                             market_session: str = 'REGULAR', totals_required: bool = False,
                             lots_required: bool = False,
                             view: str = 'QUICK') -> Union[List[resp.Portfolio], Dict[str, Any]]:
        """Positions per account. Returns ``{}`` when the account holds no portfolio."""
        request = req.ViewPortfolioRequest(
            accountIdKey=account_id_key, count=count, sortBy=sort_by, sortOrder=sort_order,
            marketSession=market_session, totalsRequired=totals_required,
            lotsRequired=lots_required, view=view,
        )
        return await self._call('view_portfolio', RequestDescriptor(
            path=f"accounts/{_segment(request.accountIdKey)}/portfolio.json",
            params=request.to_params(),
        ))

    async def view_lots_details(self, account_id_key: str,
                                position_id: Union[int, str]) -> resp.PositionLotsResponse:
        request = req.ViewLotsDetailsRequest(accountIdKey=account_id_key, positionId=position_id)
        return await self._call('view_lots_details', RequestDescriptor(
            path=f"accounts/{_segment(request.accountIdKey)}/portfolio/{_segment(request.positionId)}.json",
        ))

    # Market

    async def get_quotes(self, symbols: Union[str, Sequence[str]], detail_flag: Optional[str] = None,
                         require_earnings_date: bool = False, override_symbol_count: bool = False,
                         skip_mini_options_check: bool = False) -> resp.QuoteData:
        """Quote for the first symbol returned by the API."""
        request = req.GetQuotesRequest(
            symbols=symbols if isinstance(symbols, str) else list(symbols),
            detailFlag=detail_flag,
            requireEarningsDate=require_earnings_date,
            overrideSymbolCount=override_symbol_count,
            skipMiniOptionsCheck=skip_mini_options_check,
        )
        return await self._call('get_quotes', RequestDescriptor(
            path=f"market/quote/{_segment(request.symbol_list, safe=',')}.json",
            params=request.to_params(),
        ))

    async def lookup_product(self, search: str) -> List[resp.LookupProduct]:
        return await self._call('lookup_product', RequestDescriptor(
            path=f"market/lookup/{_segment(search)}.json",
        ))

    async def get_option_chains(self, symbol: str, expiry_year: Optional[int] = None,
                                expiry_month: Optional[int] = None, expiry_day: Optional[int] = None,
                                strike_price_near: Optional[float] = None, no_of_strikes: Optional[int] = None,
                                include_weekly: bool = False, skip_adjusted: bool = True,
                                option_category: str = 'STANDARD', chain_type: str = 'CALLPUT',
                                price_type: str = 'ATNM') -> resp.OptionChainResponse:
        request = req.GetOptionChainsRequest(
            symbol=symbol, expiryYear=expiry_year, expiryMonth=expiry_month, expiryDay=expiry_day,
            strikePriceNear=strike_price_near, noOfStrikes=no_of_strikes,
            includeWeekly=include_weekly, skipAdjusted=skip_adjusted,
            optionCategory=option_category, chainType=chain_type, priceType=price_type,
        )
        return await self._call('get_option_chains', RequestDescriptor(
            path='market/optionchains.json',
            params=request.to_params(),
        ))

    async def get_option_expire_dates(self, symbol: str,
                                      expiry_type: Optional[str] = None) -> List[resp.ExpirationDate]:
        request = req.GetOptionExpireDatesRequest(symbol=symbol, expiryType=expiry_type)
        return await self._call('get_option_expire_dates', RequestDescriptor(
            path='market/optionexpiredate.json',
            params=request.to_params(),
        ))

    # Alerts

    async def list_alerts(self, count: Optional[int] = None, category: Optional[str] = None,
                          status: Optional[str] = None, direction: Optional[str] = None,
                          search: Optional[str] = None) -> resp.AlertsResponse:
        request = req.ListAlertsRequest(
            count=count, category=category, status=status, direction=direction, search=search,
        )
        return await self._call('list_alerts', RequestDescriptor(
            path='user/alerts.json',
            params=request.to_params(),
        ))

    async def list_alert_details(self, alert_id: Union[int, str],
                                 html_tags: bool = False) -> resp.AlertDetails:
        request = req.ListAlertDetailsRequest(alertId=alert_id, htmlTags=html_tags)
        return await self._call('list_alert_details', RequestDescriptor(
            path=f"user/alerts/{_segment(request.alertId)}.json",
            params=request.to_params(),
        ))

    async def delete_alert(self, alert_id: Union[int, str, Sequence[Union[int, str]]]) -> resp.DeleteAlertResponse:
        """Delete one alert or several at once."""
        if isinstance(alert_id, (int, str)):
            ids = str(alert_id)
        else:
            ids = ','.join(str(a) for a in alert_id)
        return await self._call('delete_alert', RequestDescriptor(
            path=f"user/alerts/{_segment(ids, safe=',')}.json",
            method=HTTPMethod.DELETE,
        ))

    # Orders

    async def list_orders(self, account_id_key: str, marker: Optional[str] = None,
                          count: Optional[int] = None, status: Optional[str] = None,
                          from_date: Optional[str] = None, to_date: Optional[str] = None,
                          symbol: Optional[str] = None, security_type: Optional[str] = None,
                          transaction_type: Optional[str] = None,
                          market_session: Optional[str] = None) -> resp.OrdersResponse:
        request = req.ListOrdersRequest(
            accountIdKey=account_id_key, marker=marker, count=count, status=status,
            fromDate=from_date, toDate=to_date, symbol=symbol, securityType=security_type,
            transactionType=transaction_type, marketSession=market_session,
        )
        return await self._call('list_orders', RequestDescriptor(
            path=f"accounts/{_segment(request.accountIdKey)}/orders.json",
            params=request.to_params(),
        ))

    async def list_order_details(self, account_id_key: str, order_id: Union[int, str]) -> resp.Order:
        request = req.ListOrderDetailsRequest(accountIdKey=account_id_key, orderId=order_id)
        return await self._call('list_order_details', RequestDescriptor(
            path=f"accounts/{_segment(request.accountIdKey)}/orders/{_segment(request.orderId)}.json",
        ))

    def _write_descriptor(self, method: HTTPMethod, path: str, body: Dict[str, Any]) -> RequestDescriptor:
        return RequestDescriptor(path=path, method=method, data=body, omit=True)

    async def preview_order(self, account_id_key: str, order_type: str, order: List[Dict[str, Any]],
                            client_order_id: Union[str, int]) -> resp.PreviewOrderResponse:
        request = req.PreviewOrderRequest(
            accountIdKey=account_id_key, orderType=order_type, order=order, clientOrderId=client_order_id,
        )
        return await self._call('preview_order', self._write_descriptor(
            HTTPMethod.POST,
            f"accounts/{_segment(request.accountIdKey)}/orders/preview.json",
            request.to_body(),
        ))

    async def place_order(self, account_id_key: str, order_type: str, order: List[Dict[str, Any]],
                          client_order_id: Union[str, int],
                          preview_ids: List[Dict[str, Any]]) -> resp.PlaceOrderResponse:
        """Place a previously previewed order; ``preview_ids`` is the preview's ``PreviewIds``."""
        request = req.PlaceOrderRequest(
            accountIdKey=account_id_key, orderType=order_type, order=order,
            clientOrderId=client_order_id, previewIds=preview_ids,
        )
        return await self._call('place_order', self._write_descriptor(
            HTTPMethod.POST,
            f"accounts/{_segment(request.accountIdKey)}/orders/place.json",
            request.to_body(),
        ))

    async def change_previewed_order(self, account_id_key: str, order_id: Union[int, str], order_type: str,
                                     order: List[Dict[str, Any]],
                                     client_order_id: Union[str, int]) -> resp.PreviewOrderResponse:
        request = req.ChangePreviewedOrderRequest(
            accountIdKey=account_id_key, orderId=order_id, orderType=order_type,
            order=order, clientOrderId=client_order_id,
        )
        return await self._call('change_previewed_order', self._write_descriptor(
            HTTPMethod.PUT,
            f"accounts/{_segment(request.accountIdKey)}/orders/{_segment(request.orderId)}/change/preview.json",
            request.to_body(),
        ))

    async def place_changed_order(self, account_id_key: str, order_id: Union[int, str], order_type: str,
                                  order: List[Dict[str, Any]], client_order_id: Union[str, int],
                                  preview_ids: List[Dict[str, Any]]) -> resp.PlaceOrderResponse:
        request = req.PlaceChangedOrderRequest(
            accountIdKey=account_id_key, orderId=order_id, orderType=order_type,
            order=order, clientOrderId=client_order_id, previewIds=preview_ids,
        )
        return await self._call('place_changed_order', self._write_descriptor(
            HTTPMethod.PUT,
            f"accounts/{_segment(request.accountIdKey)}/orders/{_segment(request.orderId)}/change/place.json",
            request.to_body(),
        ))

    async def cancel_order(self, account_id_key: str, order_id: Union[int, str]) -> resp.CancelOrderResponse:
        request = req.CancelOrderRequest(accountIdKey=account_id_key, orderId=order_id)
        return await self._call('cancel_order', self._write_descriptor(
            HTTPMethod.PUT,
            f"accounts/{_segment(request.accountIdKey)}/orders/cancel.json",
            request.to_body(),
        ))
