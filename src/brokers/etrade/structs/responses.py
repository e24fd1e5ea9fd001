"""
E-Trade response shapes.

Type-level contracts only: payloads are plain decoded JSON and are never
validated against these declarations. Every shape is ``total=False`` since
E-Trade omits fields freely.
"""

from typing import List, TypedDict, Union

from .enums import (
    AccountMode, AccountStatus, AccountType, AlertStatus, CashMargin, ConditionFollowPrice,
    ConditionType, Currency, DeleteAlertResult, EgQual, ExpiryType, InstitutionType,
    MarketSession, MessageType, MfTransaction, OffsetType, OrderAction, OrderPriceType,
    OrderStatus, OrderTerm, OrderType, PositionQuantity, QuantityType, QuoteStatus,
    ReInvestOption, RoutingDestination,
)


# OAuth

class RequestTokenResponse(TypedDict):
    oauth_token: str
    oauth_token_secret: str
    oauth_callback_confirmed: bool
    url: str


class AccessTokenResponse(TypedDict):
    oauth_token: str
    oauth_token_secret: str


# Shared

class Product(TypedDict, total=False):
    symbol: str
    securityType: str
    securitySubType: str
    callPut: str
    expiryYear: int
    expiryMonth: int
    expiryDay: int
    strikePrice: float
    expiryType: str


class Message(TypedDict, total=False):
    description: str
    code: int
    type: MessageType


class Messages(TypedDict, total=False):
    Message: List[Message]


# Accounts

class Account(TypedDict, total=False):
    accountId: str
    accountIdKey: str
    accountMode: str
    accountDesc: str
    accountName: str
    accountType: AccountType
    institutionType: InstitutionType
    accountStatus: AccountStatus
    closedDate: int


class OpenCall(TypedDict, total=False):
    minEquityCall: float
    fedCall: float
    cashCall: float
    houseCall: float


class Cash(TypedDict, total=False):
    fundsForOpenOrdersCash: float
    moneyMktBalance: float


class Margin(TypedDict, total=False):
    dtCashOpenOrderReserve: float
    dtMarginOpenOrderReserve: float


class Lending(TypedDict, total=False):
    currentBalance: float
    creditLine: float
    outstandingBalance: float
    minPaymentDue: float
    amountPastDue: float
    availableCredit: float
    ytdInterestPaid: float
    lastYtdInterestPaid: float
    paymentDueDate: int
    lastPaymentReceivedDate: int
    paymentReceivedMtd: float


class RealTimeValues(TypedDict, total=False):
    totalAccountValue: float
    netMv: float
    netMvLong: float
    netMvShort: float
    totalLongValue: float


class PortfolioMargin(TypedDict, total=False):
    dtCashOpenOrderReserve: float
    dtMarginOpenOrderReserve: float
    liquidatingEquity: float
    houseExcessEquity: float
    totalHouseRequirement: float
    excessEquityMinusRequirement: float
    totalMarginRqmts: float
    availExcessEquity: float
    excessEquity: float
    openOrderReserve: float
    fundsOnHold: float


class ComputedBalance(TypedDict, total=False):
    cashAvailableForInvestment: float
    cashAvailableForWithdrawal: float
    totalAvailableForWithdrawal: float
    netCash: float
    cashBalance: float
    settledCashForInvestment: float
    unSettledCashForInvestment: float
    fundsWithheldFromPurchasePower: float
    fundsWithheldFromWithdrawal: float
    marginBuyingPower: float
    cashBuyingPower: float
    dtMarginBuyingPower: float
    dtCashBuyingPower: float
    marginBalance: float
    shortAdjustBalance: float
    regtEquity: float
    regtEquityPercent: float
    accountBalance: float
    OpenCalls: OpenCall
    RealTimeValues: RealTimeValues
    PortfolioMargin: PortfolioMargin


class BalanceResponse(TypedDict, total=False):
    accountId: str
    institutionType: InstitutionType
    asOfDate: int
    accountType: AccountType
    optionLevel: str
    accountDescription: str
    quoteMode: int
    dayTraderStatus: str
    accountMode: AccountMode
    accountDesc: str
    OpenCalls: List[OpenCall]
    Cash: Cash
    Margin: Margin
    Lending: Lending
    Computed: ComputedBalance


# Transactions

class Category(TypedDict, total=False):
    categoryId: str
    parentId: str
    categoryName: str
    parentName: str


class BrokerageBase(TypedDict, total=False):
    transactionType: str
    quantity: float
    price: float
    settlementCurrency: str
    paymentCurrency: str
    fee: float
    memo: str
    checkNo: str
    orderNo: str


class TransactionBrokerage(BrokerageBase, total=False):
    product: Product


class Brokerage(BrokerageBase, total=False):
    Product: Product


class TransactionBase(TypedDict, total=False):
    transactionId: int
    accountId: str
    transactionDate: int
    transactionType: str
    postDate: int
    amount: float
    description: str
    description2: str
    memo: str
    storeId: int
    imageFlag: bool


class Transaction(TransactionBase, total=False):
    """List endpoint shape: lower-case nested keys."""
    category: Category
    brokerage: TransactionBrokerage


class TransactionDetail(TransactionBase, total=False):
    """Details endpoint shape: capitalized nested keys."""
    Category: Category
    Brokerage: Brokerage


class ListTransactionsResponse(TypedDict, total=False):
    pageMarkers: str
    moreTransactions: bool
    transactionCount: int
    totalCount: int
    next: str
    marker: str
    Transaction: List[Transaction]


# Portfolio

class PerformanceView(TypedDict, total=False):
    change: float
    changePct: float
    lastTrade: float
    daysGain: float
    totalGain: float
    totalGainPct: float
    marketValue: float
    quoteStatus: str
    lastTradeTime: int


class FundamentalView(TypedDict, total=False):
    lastTrade: float
    lastTradeTime: int
    change: float
    changePct: float
    peRatio: float
    eps: float
    dividend: float
    divYield: float
    marketCap: float
    week52Range: str
    quoteStatus: str


class OptionsWatchView(TypedDict, total=False):
    baseSymbolAndPrice: str
    premium: float
    lastTrade: float
    bid: float
    ask: float
    quoteStatus: str
    lastTradeTime: int


class QuickView(TypedDict, total=False):
    lastTrade: float
    lastTradeTime: int
    change: float
    changePct: float
    volume: int
    quoteStatus: str
    sevenDayCurrentYield: float
    annualTotalReturn: float
    weightedAverageMaturity: float


class CompleteView(TypedDict, total=False):
    priceAdjustedFlag: bool
    price: float
    adjPrice: float
    change: float
    changePct: float
    prevClose: float
    adjPrevClose: float
    volume: int
    lastTrade: float
    lastTradeTime: int
    adjLastTrade: float
    symbolDescription: str
    perform1Month: float
    perform3Month: float
    perform6Month: float
    perform12Month: float
    prevDayVolume: int
    tenDayVolume: int
    beta: float
    sv10DaysAvg: float
    sv20DaysAvg: float
    sv1MonAvg: float
    sv2MonAvg: float
    sv3MonAvg: float
    sv4MonAvg: float
    sv6MonAvg: float
    week52High: float
    week52Low: float
    week52Range: str
    marketCap: float
    daysRange: str
    delta52WkHigh: float
    delta52WkLow: float
    currency: str
    exchange: str
    marginable: bool
    bid: float
    ask: float
    bidAskSpread: float
    bidSize: int
    askSize: int
    open: float
    delta: float
    gamma: float
    ivPct: float
    rho: float
    theta: float
    vega: float
    premium: float
    daysToExpiration: int
    intrinsicValue: float
    openInterest: int
    optionsAdjustedFlag: bool
    deliverablesStr: str
    optionMultiplier: float
    baseSymbolAndPrice: str
    estEarnings: float
    eps: float
    peRatio: float
    annualDividend: float
    dividend: float
    divYield: float
    divPayDate: int
    exDividendDate: int
    cusip: str
    quoteStatus: str


class PositionLot(TypedDict, total=False):
    positionId: int
    positionLotId: int
    price: float
    termCode: int
    daysGain: float
    daysGainPct: float
    marketValue: float
    totalCost: float
    totalCostForGainPct: float
    totalGain: float
    lotSourceCode: int
    originalQty: float
    remainingQty: float
    availableQty: float
    orderNo: int
    legNo: int
    acquiredDate: int
    locationCode: int
    exchangeRate: float
    settlementCurrency: str
    paymentCurrency: str
    adjPrice: float
    commPerShare: float
    feesPerShare: float
    premiumAdj: float
    shortType: int


class Position(TypedDict, total=False):
    positionId: int
    accountId: str
    Product: Product
    osiKey: str
    symbolDescription: str
    dateAcquired: int
    pricePaid: float
    price: float
    commissions: float
    otherFees: float
    quantity: float
    positionIndicator: str
    positionType: str
    change: float
    changePct: float
    daysGain: float
    daysGainPct: float
    marketValue: float
    totalCost: float
    totalGain: float
    totalGainPct: float
    pctOfPortfolio: float
    costPerShare: float
    todayCommissions: float
    todayFees: float
    todayPricePaid: float
    todayQuantity: float
    quotestatus: str
    dateTimeUTC: int
    adjPrevClose: float
    Performance: PerformanceView
    Fundamental: FundamentalView
    OptionsWatch: OptionsWatchView
    Quick: QuickView
    Complete: CompleteView
    lotsDetails: str
    quoteDetails: str
    PositionLot: List[PositionLot]


class Portfolio(TypedDict, total=False):
    accountId: str
    next: str
    totalNoOfPages: int
    nextPageNo: str
    Position: List[Position]


class PositionLotsResponse(TypedDict, total=False):
    shortType: int
    PositionLot: List[PositionLot]


# Market

class OptionGreeks(TypedDict, total=False):
    rho: float
    vega: float
    theta: float
    delta: float
    gamma: float
    iv: float
    currentValue: bool


class ExtendedHourQuoteDetail(TypedDict, total=False):
    lastPrice: float
    change: float
    percentChange: float
    bid: float
    bidSize: int
    ask: float
    askSize: int
    volume: int
    timeOfLastTrade: int
    timeZone: str
    quoteStatus: QuoteStatus


class OptionDeliverable(TypedDict, total=False):
    rootSymbol: str
    deliverableSymbol: str
    deliverableTypeCode: str
    deliverableExchangeCode: str
    deliverableStrikePercent: float
    deliverableCILShares: float
    deliverableWholeShares: float


# ``yield`` is a keyword, hence the functional form
AllQuoteDetails = TypedDict('AllQuoteDetails', {
    'adjustedFlag': bool,
    'annualDividend': float,
    'ask': float,
    'askExchange': str,
    'askSize': int,
    'askTime': str,
    'bid': float,
    'bidExchange': str,
    'bidSize': int,
    'bidTime': str,
    'changeClose': float,
    'changeClosePercentage': float,
    'companyName': str,
    'daysToExpiration': int,
    'dirLast': str,
    'dividend': float,
    'eps': float,
    'estEarnings': float,
    'exDividendDate': int,
    'exchgLastTrade': str,
    'fsi': str,
    'high': float,
    'high52': float,
    'highAsk': float,
    'highBid': float,
    'lastTrade': float,
    'low': float,
    'low52': float,
    'lowAsk': float,
    'lowBid': float,
    'numberOfTrades': int,
    'open': float,
    'openInterest': int,
    'optionStyle': str,
    'optionUnderlier': str,
    'optionUnderlierExchange': str,
    'previousClose': float,
    'previousDayVolume': int,
    'primaryExchange': str,
    'symbolDescription': str,
    'todayClose': float,
    'totalVolume': int,
    'upc': int,
    'volume10Day': int,
    'OptionDeliverableList': List[OptionDeliverable],
    'cashDeliverable': float,
    'marketCap': float,
    'sharesOutstanding': float,
    'nextEarningDate': str,
    'beta': float,
    'yield': float,
    'declaredDividend': float,
    'dividendPayableDate': int,
    'pe': float,
    'marketCloseBidSize': int,
    'marketCloseAskSize': int,
    'marketCloseVolume': int,
    'week52LowDate': int,
    'week52HiDate': int,
    'intrinsicValue': float,
    'timePremium': float,
    'optionMultiplier': float,
    'contractSize': float,
    'expirationDate': int,
    'EhQuote': ExtendedHourQuoteDetail,
    'optionPreviousBidPrice': float,
    'optionPreviousAskPrice': float,
    'osiKey': str,
    'timeOfLastTrade': int,
    'averageVolume': int,
}, total=False)


class FundamentalQuoteDetails(TypedDict, total=False):
    companyName: str
    eps: float
    estEarnings: float
    high52: float
    lastTrade: float
    low52: float
    symbolDescription: str
    volume10Day: int


class IntradayQuoteDetails(TypedDict, total=False):
    ask: float
    bid: float
    changeClose: float
    changeClosePercentage: float
    companyName: str
    high: float
    lastTrade: float
    low: float
    totalVolume: int


class OptionQuoteDetails(TypedDict, total=False):
    ask: float
    askSize: int
    bid: float
    bidSize: int
    companyName: str
    daysToExpiration: int
    lastTrade: float
    openInterest: int
    optionPreviousBidPrice: float
    optionPreviousAskPrice: float
    osiKey: str
    intrinsicValue: float
    timePremium: float
    optionMultiplier: float
    contractSize: float
    symbolDescription: str
    OptionGreeks: OptionGreeks


class Week52QuoteDetails(TypedDict, total=False):
    annualDividend: float
    companyName: str
    high52: float
    lastTrade: float
    low52: float
    perf12Months: float
    previousClose: float
    symbolDescription: str
    totalVolume: int


class NetAsset(TypedDict, total=False):
    value: float
    asOfDate: int


class Values(TypedDict, total=False):
    low: str
    high: str
    percent: str


class Redemption(TypedDict, total=False):
    minMonth: str
    feePercent: str
    isFrontEnd: str
    FrontEndValues: List[Values]
    redemptionDurationType: str
    isSales: str
    salesDurationType: str
    SalesValues: List[Values]


class SaleChargeValues(TypedDict, total=False):
    lowhigh: str
    percent: str


class MutualFund(TypedDict, total=False):
    symbolDescription: str
    cusip: str
    changeClose: float
    previousClose: float
    transactionFee: str
    earlyRedemptionFee: str
    availability: str
    initialInvestment: float
    subsequentInvestment: float
    fundFamily: str
    fundName: str
    changeClosePercentage: float
    timeOfLastTrade: int
    netAssetValue: float
    publicOfferPrice: float
    netExpenseRatio: float
    grossExpenseRatio: float
    orderCutoffTime: int
    salesCharge: str
    initialIraInvestment: float
    subsequentIraInvestment: float
    NetAssets: NetAsset
    fundInceptionDate: int
    averageAnnualReturns: float
    sevenDayCurrentYield: float
    annualTotalReturn: float
    weightedAverageMaturity: float
    averageAnnualReturn1Yr: float
    averageAnnualReturn3Yr: float
    averageAnnualReturn5Yr: float
    averageAnnualReturn10Yr: float
    high52: float
    low52: float
    week52LowDate: int
    week52HiDate: int
    exchangeName: str
    sinceInception: float
    quarterlySinceInception: float
    lastTrade: float
    actual12B1Fee: float
    performanceAsOfDate: str
    qtrlyPerformanceAsOfDate: str
    Redemption: Redemption
    morningStarCategory: str
    monthlyTrailingReturn1Y: float
    monthlyTrailingReturn3Y: float
    monthlyTrailingReturn5Y: float
    monthlyTrailingReturn10Y: float
    etradeEarlyRedemptionFee: str
    maxSalesLoad: float
    monthlyTrailingReturnYTD: float
    monthlyTrailingReturn1M: float
    monthlyTrailingReturn3M: float
    monthlyTrailingReturn6M: float
    qtrlyTrailingReturnYTD: float
    qtrlyTrailingReturn1M: float
    qtrlyTrailingReturn3M: float
    qtrlyTrailingReturn6M: float
    DeferredSalesCharges: List[SaleChargeValues]
    FrontEndSalesCharges: List[SaleChargeValues]
    exchangeCode: str


class QuoteData(TypedDict, total=False):
    All: AllQuoteDetails
    dateTime: str
    dateTimeUTC: int
    quoteStatus: QuoteStatus
    ahFlag: str
    errorMessage: str
    Fundamental: FundamentalQuoteDetails
    Intraday: IntradayQuoteDetails
    Option: OptionQuoteDetails
    Product: Product
    Week52: Week52QuoteDetails
    MutualFund: MutualFund
    timeZone: str
    dstFlag: bool
    hasMiniOptions: bool


class LookupProduct(TypedDict, total=False):
    symbol: str
    description: str
    type: str


class OptionDetails(TypedDict, total=False):
    optionCategory: str
    optionRootSymbol: str
    timeStamp: int
    adjustedFlag: bool
    displaySymbol: str
    optionType: str
    strikePrice: float
    symbol: str
    bid: float
    ask: float
    bidSize: int
    askSize: int
    inTheMoney: str
    volume: int
    openInterest: int
    netChange: float
    lastPrice: float
    quoteDetail: str
    osiKey: str
    OptionGreeks: OptionGreeks


class OptionChainPair(TypedDict, total=False):
    Call: OptionDetails
    Put: OptionDetails


class SelectedED(TypedDict, total=False):
    month: int
    year: int
    day: int


class OptionChainResponse(TypedDict, total=False):
    OptionPair: List[OptionChainPair]
    SelectedED: SelectedED


class ExpirationDate(TypedDict, total=False):
    year: int
    month: int
    day: int
    expiryType: ExpiryType


# Alerts

class Alert(TypedDict, total=False):
    id: int
    createTime: int
    subject: str
    status: AlertStatus


class AlertDetails(TypedDict, total=False):
    id: int
    createTime: int
    subject: str
    msgText: str
    readTime: int
    deleteTime: int


class AlertsResponse(TypedDict, total=False):
    totalAlerts: int
    Alert: List[Alert]


class FailedAlerts(TypedDict, total=False):
    alertId: List[int]


class DeleteAlertResponse(TypedDict, total=False):
    result: DeleteAlertResult
    failedAlerts: FailedAlerts


# Orders

class Lot(TypedDict, total=False):
    id: int
    size: float


class Lots(TypedDict, total=False):
    Lot: List[Lot]


class MFQuantity(TypedDict, total=False):
    cash: float
    margin: float
    cusip: str


class Instrument(TypedDict, total=False):
    Product: Product
    symbolDescription: str
    orderAction: OrderAction
    quantityType: QuantityType
    quantity: float
    cancelQuantity: float
    orderedQuantity: float
    filledQuantity: float
    averageExecutionPrice: float
    estimatedCommission: float
    estimatedFees: float
    bid: float
    ask: float
    lastprice: float
    currency: Currency
    Lots: Lots
    MfQuantity: MFQuantity
    osiKey: str
    mfTransaction: MfTransaction
    reserveOrder: bool
    reserveQuantity: float


class OrderDetail(TypedDict, total=False):
    orderNumber: int
    accountId: str
    previewTime: int
    placedTime: int
    executedTime: int
    orderValue: float
    status: OrderStatus
    orderType: OrderType
    orderTerm: OrderTerm
    priceType: OrderPriceType
    priceValue: str
    limitPrice: float
    stopPrice: Union[float, str]
    stopLimitPrice: float
    offsetType: OffsetType
    offsetValue: float
    marketSession: MarketSession
    routingDestination: RoutingDestination
    bracketedLimitPrice: float
    initialStopPrice: float
    trailPrice: float
    triggerPrice: float
    conditionPrice: float
    conditionSymbol: str
    conditionType: ConditionType
    conditionFollowPrice: ConditionFollowPrice
    conditionSecurityType: str
    replacedByOrderId: int
    replacesOrderId: int
    allOrNone: bool
    previewId: int
    Instrument: List[Instrument]
    Messages: Messages
    preClearanceCode: str
    overrideRestrictedCd: int
    investmentAmount: float
    positionQuantity: PositionQuantity
    aipFlag: bool
    egQual: EgQual
    reInvestOption: ReInvestOption
    estimatedCommission: float
    estimatedFees: float
    estimatedTotalAmount: float
    netPrice: float
    netBid: float
    netAsk: float
    gcd: int
    ratio: str
    mfpriceType: str


class Order(TypedDict, total=False):
    orderId: int
    details: str
    orderType: str
    totalOrderValue: float
    totalCommission: float
    OrderDetail: List[OrderDetail]


class OrderEvent(TypedDict, total=False):
    name: str
    dateTime: int
    Instrument: List[Instrument]


class OrderEvents(TypedDict, total=False):
    Event: List[OrderEvent]


class OrdersResponse(TypedDict, total=False):
    marker: str
    next: str
    Order: List[Order]


class OrderDetailsResponse(TypedDict, total=False):
    orderId: int
    orderType: OrderType
    OrderDetail: List[OrderDetail]
    Events: OrderEvents


class PreviewId(TypedDict, total=False):
    previewId: int
    cashMargin: str


class OrderId(TypedDict, total=False):
    orderId: int
    cashMargin: CashMargin


class Disclosure(TypedDict, total=False):
    ehDisclosureFlag: bool
    ahDisclosureFlag: bool
    conditionalDisclosureFlag: bool
    aoDisclosureFlag: bool
    mfFLConsent: bool
    mfEOConsent: bool


class PreviewOrderResponse(TypedDict, total=False):
    previewTime: int
    orderType: str
    messageList: Messages
    totalOrderValue: float
    totalCommission: float
    orderId: int
    Order: List[OrderDetail]
    dstFlag: bool
    optionLevelCd: int
    marginLevelCd: str
    isEmployee: bool
    commissionMsg: str
    orderIds: List[OrderId]
    placedTime: int
    accountId: str
    portfolioMargin: PortfolioMargin
    disclosure: Disclosure
    PreviewIds: List[PreviewId]
    clientOrderId: str


class PlacedOrderId(TypedDict, total=False):
    orderId: int


class PlaceOrderResponse(TypedDict, total=False):
    orderType: str
    MessageList: Messages
    totalOrderValue: float
    totalCommission: float
    OrderIds: List[PlacedOrderId]
    Order: List[OrderDetail]
    dstFlag: bool
    optionLevelCd: int
    marginLevelCd: str
    isEmployee: bool
    commissionMsg: str
    placedTime: int
    accountId: str
    PortfolioMargin: PortfolioMargin
    Disclosure: Disclosure
    clientOrderId: str


class CancelOrderResponse(TypedDict, total=False):
    accountId: str
    orderId: int
    cancelTime: int
    Messages: Messages
