"""String domains used by E-Trade request and response fields."""

from typing import Literal

AccountMode = Literal['CASH', 'MARGIN']
InstitutionType = Literal['BROKERAGE']
AccountType = Literal[
    'AMMCHK', 'ARO', 'BCHK', 'BENFIRA', 'BENFROTHIRA', 'BENF_ESTATE_IRA', 'BENF_MINOR_IRA',
    'BENF_ROTH_ESTATE_IRA', 'BENF_ROTH_MINOR_IRA', 'BENF_ROTH_TRUST_IRA', 'BENF_TRUST_IRA',
    'BRKCD', 'BROKER', 'CASH', 'C_CORP', 'CONTRIBUTORY', 'COVERDELL_ESA', 'CONVERSION_ROTH_IRA',
    'CREDITCARD', 'COMM_PROP', 'CONSERVATOR', 'CORPORATION', 'CSA', 'CUSTODIAL', 'DVP', 'ESTATE',
    'EMPCHK', 'EMPMMCA', 'ETCHK', 'ETMMCHK', 'HEIL', 'HELOC', 'INDCHK', 'INDIVIDUAL', 'INDIVIDUAL_K',
    'INVCLUB', 'INVCLUB_C_CORP', 'INVCLUB_LLC_C_CORP', 'INVCLUB_LLC_PARTNERSHIP', 'INVCLUB_LLC_S_CORP',
    'INVCLUB_PARTNERSHIP', 'INVCLUB_S_CORP', 'INVCLUB_TRUST', 'IRA_ROLLOVER', 'JOINT', 'JTTEN',
    'JTWROS', 'LLC_C_CORP', 'LLC_PARTNERSHIP', 'LLC_S_CORP', 'LLP', 'LLP_C_CORP', 'LLP_S_CORP',
    'IRA', 'IRACD', 'MONEY_PURCHASE', 'MARGIN', 'MRCHK', 'MUTUAL_FUND', 'NONCUSTODIAL', 'NON_PROFIT',
    'OTHER', 'PARTNER', 'PARTNERSHIP', 'PARTNERSHIP_C_CORP', 'PARTNERSHIP_S_CORP', 'PDT_ACCOUNT',
    'PM_ACCOUNT', 'PREFCD', 'PREFIRACD', 'PROFIT_SHARING', 'PROPRIETARY', 'REGCD', 'ROTHIRA',
    'ROTH_INDIVIDUAL_K', 'ROTH_IRA_MINORS', 'SARSEPIRA', 'S_CORP', 'SEPIRA', 'SIMPLE_IRA', 'TIC',
    'TRD_IRA_MINORS', 'TRUST', 'VARCD', 'VARIRACD',
]
AccountStatus = Literal['ACTIVE', 'CLOSED']
SortBy = Literal[
    'SYMBOL', 'TYPE_NAME', 'EXCHANGE_NAME', 'CURRENCY', 'QUANTITY', 'LONG_OR_SHORT', 'DATE_ACQUIRED',
    'PRICEPAID', 'TOTAL_GAIN', 'TOTAL_GAIN_PCT', 'MARKET_VALUE', 'BI', 'ASK', 'PRICE_CHANGE',
    'PRICE_CHANGE_PCT', 'VOLUME', 'WEEK_52_HIGH', 'WEEK_52_LOW', 'EPS', 'PE_RATIO', 'OPTION_TYPE',
    'STRIKE_PRICE', 'PREMIUM', 'EXPIRATION', 'DAYS_GAIN', 'COMMISSION', 'MARKETCAP', 'PREV_CLOSE',
    'OPEN', 'DAYS_RANGE', 'TOTAL_COST', 'DAYS_GAIN_PCT', 'PCT_OF_PORTFOLIO', 'LAST_TRADE_TIME',
    'BASE_SYMBOL_PRICE', 'WEEK_52_RANGE', 'LAST_TRADE', 'SYMBOL_DESC', 'BID_SIZE', 'ASK_SIZE',
    'OTHER_FEES', 'HELD_AS', 'OPTION_MULTIPLIER', 'DELIVERABLES', 'COST_PERSHARE', 'DIVIDEND',
    'DIV_YIELD', 'DIV_PAY_DATE', 'EST_EARN', 'EX_DIV_DATE', 'TEN_DAY_AVG_VOL', 'BETA',
    'BID_ASK_SPREAD', 'MARGINABLE', 'DELTA_52WK_HI', 'DELTA_52WK_LOW', 'PERF_1MON', 'ANNUAL_DIV',
    'PERF_12MON', 'PERF_3MON', 'PERF_6MON', 'PRE_DAY_VOL', 'SV_1MON_AVG', 'SV_10DAY_AVG',
    'SV_20DAY_AVG', 'SV_2MON_AVG', 'SV_3MON_AVG', 'SV_4MON_AVG', 'SV_6MON_AVG', 'DELTA', 'GAMMA',
    'IV_PCT', 'THETA', 'VEGA', 'ADJ_NONADJ_FLAG', 'DAYS_EXPIRATION', 'OPEN_INTEREST',
    'INSTRINIC_VALUE', 'RHO', 'TYPE_CODE', 'DISPLAY_SYMBOL', 'AFTER_HOURS_PCTCHANGE',
    'PRE_MARKET_PCTCHANGE', 'EXPAND_COLLAPSE_FLAG',
]
SortOrder = Literal['ASC', 'DESC']
MarketSession = Literal['REGULAR', 'EXTENDED']
PortfolioView = Literal['PERFORMANCE', 'FUNDAMENTAL', 'OPTIONSWATCH', 'QUICK', 'COMPLETE']
AlertCategory = Literal['STOCK', 'ACCOUNT']
AlertStatus = Literal['UNREAD', 'READ', 'DELETED', 'UNDELETED']
DetailFlag = Literal['ALL', 'FUNDAMENTAL', 'INTRADAY', 'OPTIONS', 'WEEK_52', 'MF_DETAIL']
QuoteStatus = Literal['REALTIME', 'DELAYED', 'CLOSING', 'EH_REALTIME', 'EH_BEFORE_OPEN', 'EH_CLOSED']
OptionCategory = Literal['STANDARD', 'ALL', 'MINI']
ChainType = Literal['CALL', 'PUT', 'CALLPUT']
PriceType = Literal['ATNM', 'ALL']
ExpiryType = Literal['UNSPECIFIED', 'DAILY', 'WEEKLY', 'MONTHLY', 'QUARTERLY', 'VIX', 'ALL', 'MONTHEND']
TransactionType = Literal['ATNM', 'BUY', 'SELL', 'SELL_SHORT', 'BUY_TO_COVER', 'MF_EXCHANGE']
SecurityType = Literal['EQ', 'OPTN', 'BOND', 'MF', 'MMF']
OrderStatus = Literal[
    'OPEN', 'EXECUTED', 'CANCELLED', 'INDIVIDUAL_FILLS', 'CANCEL_REQUESTED', 'EXPIRED', 'REJECTED',
    'PARTIAL', 'OPTION_EXERCISE', 'OPTION_ASSIGNMENT', 'DO_NOT_EXERCISE', 'DONE_TRADE_EXECUTED',
]
OrderType = Literal[
    'EQ', 'OPTN', 'SPREADS', 'BUY_WRITES', 'BUTTERFLY', 'IRON_BUTTERFLY', 'CONDOR', 'IRON_CONDOR',
    'MF', 'MMF', 'BOND', 'CONTINGENT', 'ONE_CANCELS_ALL', 'ONE_TRIGGERS_ALL', 'ONE_TRIGGERS_OCO',
    'OPTION_EXERCISE', 'OPTION_ASSIGNMENT', 'OPTION_EXPIRED', 'DO_NOT_EXERCISE', 'BRACKETED',
]
OrderTerm = Literal['GOOD_UNTIL_CANCEL', 'GOOD_FOR_DAY', 'GOOD_TILL_DATE', 'IMMEDIATE_OR_CANCEL', 'FILL_OR_KILL']
OrderPriceType = Literal[
    'MARKET', 'LIMIT', 'STOP', 'STOP_LIMIT', 'TRAILING_STOP_CNST_BY_LOWER_TRIGGER',
    'UPPER_TRIGGER_BY_TRAILING_STOP_CNST', 'TRAILING_STOP_PRCT_BY_LOWER_TRIGGER',
    'UPPER_TRIGGER_BY_TRAILING_STOP_PRCT', 'TRAILING_STOP_CNST', 'TRAILING_STOP_PRCT', 'HIDDEN_STOP',
    'HIDDEN_STOP_BY_LOWER_TRIGGER', 'UPPER_TRIGGER_BY_HIDDEN_STOP', 'NET_DEBIT', 'NET_CREDIT',
    'NET_EVEN', 'MARKET_ON_OPEN', 'MARKET_ON_CLOSE', 'LIMIT_ON_OPEN', 'LIMIT_ON_CLOSE',
]
OffsetType = Literal['TRAILING_STOP_CNST', 'TRAILING_STOP_PRCT']
RoutingDestination = Literal['AUTO', 'AMEX', 'BOX', 'CBOE', 'ISE', 'NOM', 'NYSE', 'PHX']
ConditionType = Literal['CONTINGENT_GTE', 'CONTINGENT_LTE']
ConditionFollowPrice = Literal['ASK', 'BID', 'LAST']
PositionQuantity = Literal['ENTIRE_POSITION', 'CASH', 'MARGIN']
EgQual = Literal[
    'EG_QUAL_UNSPECIFIED', 'EG_QUAL_QUALIFIED', 'EG_QUAL_NOT_IN_FORCE', 'EG_QUAL_NOT_A_MARKET_ORDER',
    'EG_QUAL_NOT_AN_ELIGIBLE_SECURITY', 'EG_QUAL_INVALID_ORDER_TYPE', 'EG_QUAL_SIZE_NOT_QUALIFIED',
    'EG_QUAL_OUTSIDE_GUARANTEED_PERIOD', 'EG_QUAL_INELIGIBLE_GATEWAY', 'EG_QUAL_INELIGIBLE_DUE_TO_IPO',
    'EG_QUAL_INELIGIBLE_DUE_TO_SELF_DIRECTED', 'EG_QUAL_INELIGIBLE_DUE_TO_CHANGEORDER',
]
ReInvestOption = Literal['REINVEST', 'DEPOSIT', 'CURRENT_HOLDING']
OrderAction = Literal[
    'BUY', 'SELL', 'BUY_TO_COVER', 'SELL_SHORT', 'BUY_OPEN', 'BUY_CLOSE', 'SELL_OPEN', 'SELL_CLOSE', 'EXCHANGE',
]
QuantityType = Literal['QUANTITY', 'DOLLAR', 'ALL_I_OWN']
Currency = Literal['USD', 'EUR', 'GBP', 'HKD', 'JPY', 'CAD']
MfTransaction = Literal['BUY', 'SELL']
MessageType = Literal['WARNING', 'INFO', 'INFO_HOLD', 'ERROR']
CashMargin = Literal['CASH', 'MARGIN']
DeleteAlertResult = Literal['SUCCESS', 'ERROR']
