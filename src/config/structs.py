import platform
from enum import Enum
from typing import Any, Dict, Mapping, Optional

import msgspec
import msgspec.structs
from msgspec import Struct

from infrastructure.exceptions import ConfigurationError
from infrastructure.logging.structs import LoggingConfig
from infrastructure.networking.http.utils import deep_merge

CLIENT_VERSION = "0.1.0"

DEFAULT_OAUTH_URL = "https://api.etrade.com/oauth/"
DEFAULT_SANDBOX_URL = "https://apisb.etrade.com/v1/"
DEFAULT_PRODUCTION_URL = "https://api.etrade.com/v1/"
DEFAULT_AUTHORIZE_URL = "https://us.etrade.com/e/t/etws/authorize"


class Mode(str, Enum):
    """API environment; selects the trading/market base URL."""
    SANDBOX = 'sandbox'
    PRODUCTION = 'production'

    @classmethod
    def parse(cls, value: Any) -> 'Mode':
        """Parse a mode name, accepting the legacy ``dev``/``prod`` aliases."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        aliases = {'dev': cls.SANDBOX, 'prod': cls.PRODUCTION}
        if normalized in aliases:
            return aliases[normalized]
        try:
            return cls(normalized)
        except ValueError:
            raise ConfigurationError(f"Unknown mode: {value!r}", setting_name="mode")


class ConsumerCredentials(Struct, frozen=True):
    """Consumer key/secret issued to the application."""
    key: str
    secret: str

    def get_preview(self) -> str:
        """Get safe preview of credentials for logging."""
        if not self.key:
            return "Not configured"
        if len(self.key) > 8:
            return f"{self.key[:4]}...{self.key[-4:]}"
        return "***"

    def validate(self) -> None:
        if not isinstance(self.key, str) or not isinstance(self.secret, str):
            raise ValueError("Consumer key and secret must be strings")


class AccessToken(Struct, frozen=True):
    """Access token pair obtained from the authorization flow. Always complete."""
    key: str
    secret: str

    @classmethod
    def from_pair(cls, key: Optional[str], secret: Optional[str]) -> Optional['AccessToken']:
        """Return None when both halves are empty, reject a half-filled pair."""
        if not key and not secret:
            return None
        if not key or not secret:
            raise ConfigurationError(
                "Access token key and secret must be provided together or both empty",
                setting_name="access_token",
            )
        return cls(key=key, secret=secret)

    def get_preview(self) -> str:
        if len(self.key) > 8:
            return f"{self.key[:4]}...{self.key[-4:]}"
        return "***"


class BrokerUrls(Struct, frozen=True):
    """Base URLs; trading URLs end with a slash so paths append directly."""
    oauth: str = DEFAULT_OAUTH_URL
    sandbox: str = DEFAULT_SANDBOX_URL
    production: str = DEFAULT_PRODUCTION_URL
    authorize: str = DEFAULT_AUTHORIZE_URL

    def validate(self) -> None:
        for name in ('oauth', 'sandbox', 'production', 'authorize'):
            value = getattr(self, name)
            if not value.startswith(('http://', 'https://')):
                raise ValueError(f"urls.{name} must be an http(s) URL, got {value!r}")


class ThrottleConfig(Struct, frozen=True):
    """
    Throttle settings.

    Attributes:
        connection_limit: Maximum operations in flight at once
        connection_limit_period: Window in milliseconds before a slot is reused
        error_on_connection_limit: Reject instead of queuing when at capacity
    """
    connection_limit: int = 10
    connection_limit_period: int = 1000
    error_on_connection_limit: bool = False

    def validate(self) -> None:
        if self.connection_limit < 1:
            raise ValueError("connection_limit must be at least 1")
        if self.connection_limit_period < 0:
            raise ValueError("connection_limit_period cannot be negative")


class ProxyConfig(Struct, frozen=True):
    """Forward proxy with optional basic auth."""
    host: str
    port: Optional[int] = None
    username: Optional[str] = None
    password: Optional[str] = None
    protocol: str = 'http'

    def validate(self) -> None:
        if not self.host:
            raise ValueError("proxy.host is required")
        if self.port is not None and not 0 < self.port < 65536:
            raise ValueError(f"Invalid proxy port: {self.port}")
        if self.password and not self.username:
            raise ValueError("proxy.password requires proxy.username")

    def to_request_proxy(self) -> Dict[str, Any]:
        proxy: Dict[str, Any] = {"host": self.host, "port": self.port, "protocol": self.protocol}
        if self.username:
            proxy["auth"] = {"username": self.username, "password": self.password or ""}
        return proxy


def default_user_agent() -> str:
    return f"etrade-api-client/v{CLIENT_VERSION} python/{platform.python_version()}"


DEFAULT_OPTIONS: Dict[str, Any] = {
    "mode": "sandbox",
    "key": "",
    "secret": "",
    "access_token": "",
    "access_secret": "",
    "urls": {
        "oauth": DEFAULT_OAUTH_URL,
        "sandbox": DEFAULT_SANDBOX_URL,
        "production": DEFAULT_PRODUCTION_URL,
        "authorize": DEFAULT_AUTHORIZE_URL,
    },
    "connection_limit": 10,
    "connection_limit_period": 1000,
    "error_on_connection_limit": False,
    "proxy": None,
    "request_timeout": None,
    "user_agent": None,
    "logging": {},
}

# camelCase option names accepted alongside the snake_case ones
OPTION_ALIASES = {
    "accessToken": "access_token",
    "accessSecret": "access_secret",
    "connectionLimit": "connection_limit",
    "connectionLimitPeriod": "connection_limit_period",
    "errorOnConnectionLimit": "error_on_connection_limit",
    "requestTimeout": "request_timeout",
    "userAgent": "user_agent",
}
URL_ALIASES = {"dev": "sandbox", "prod": "production"}


def _normalize_options(options: Mapping[str, Any]) -> Dict[str, Any]:
    normalized: Dict[str, Any] = {}
    for name, value in options.items():
        name = OPTION_ALIASES.get(name, name)
        if name == "urls" and isinstance(value, Mapping):
            value = {URL_ALIASES.get(k, k): v for k, v in value.items()}
        if name == "proxy" and value is False:
            value = None
        normalized[name] = value
    return normalized


def _proxy_from_option(value: Any) -> Optional[ProxyConfig]:
    if not value:
        return None
    if isinstance(value, ProxyConfig):
        return value
    auth = value.get("auth") or {}
    port = value.get("port")
    return ProxyConfig(
        host=value.get("host", ""),
        port=int(port) if port not in (None, "") else None,
        username=value.get("username", auth.get("username")) or None,
        password=value.get("password", auth.get("password")) or None,
        protocol=value.get("protocol") or "http",
    )


class ETradeConfig(Struct, frozen=True):
    """
    Complete client configuration.

    Immutable; rotate the access token with ``with_access_token`` which
    returns a new instance.

    Attributes:
        credentials: Consumer key/secret
        mode: Sandbox or production
        access_token: Current access token pair, None before authorization
        urls: OAuth, trading and authorization base URLs
        throttle: Throttle limits
        proxy: Optional forward proxy
        request_timeout: Total request timeout in seconds, None for the transport default
        user_agent: User-Agent header sent with every request
        logging: Logging configuration
    """
    credentials: ConsumerCredentials
    mode: Mode = Mode.SANDBOX
    access_token: Optional[AccessToken] = None
    urls: BrokerUrls = msgspec.field(default_factory=BrokerUrls)
    throttle: ThrottleConfig = msgspec.field(default_factory=ThrottleConfig)
    proxy: Optional[ProxyConfig] = None
    request_timeout: Optional[float] = None
    user_agent: str = msgspec.field(default_factory=default_user_agent)
    logging: LoggingConfig = msgspec.field(default_factory=LoggingConfig)

    @property
    def base_url(self) -> str:
        """Trading/market base URL for the configured mode."""
        return self.urls.production if self.mode is Mode.PRODUCTION else self.urls.sandbox

    @property
    def is_authorized(self) -> bool:
        return self.access_token is not None

    def with_access_token(self, key: Optional[str], secret: Optional[str]) -> 'ETradeConfig':
        """Return a copy with the access token replaced (both empty clears it)."""
        return msgspec.structs.replace(self, access_token=AccessToken.from_pair(key, secret))

    def validate(self) -> None:
        """Validate configuration, raising ConfigurationError on the first problem."""
        try:
            self.credentials.validate()
            self.urls.validate()
            self.throttle.validate()
            if self.proxy is not None:
                self.proxy.validate()
            self.logging.validate()
        except ValueError as e:
            raise ConfigurationError(str(e))
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise ConfigurationError("request_timeout must be positive", setting_name="request_timeout")

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> 'ETradeConfig':
        """
        Build a configuration from a plain option mapping.

        Options are deep-merged over the defaults, so a partial ``urls``
        mapping only overrides the URLs it names. Both snake_case and the
        camelCase names (``accessToken``, ``connectionLimit``...) are accepted.
        """
        merged = deep_merge(DEFAULT_OPTIONS, _normalize_options(options or {}))

        try:
            urls = BrokerUrls(**{k: v for k, v in merged["urls"].items() if k in BrokerUrls.__struct_fields__})
            throttle = ThrottleConfig(
                connection_limit=int(merged["connection_limit"]),
                connection_limit_period=int(merged["connection_limit_period"]),
                error_on_connection_limit=bool(merged["error_on_connection_limit"]),
            )
            logging_config = (merged["logging"] if isinstance(merged["logging"], LoggingConfig)
                              else LoggingConfig.from_dict(merged["logging"] or {}))
            timeout = merged["request_timeout"]
            config = cls(
                credentials=ConsumerCredentials(key=str(merged["key"] or ""), secret=str(merged["secret"] or "")),
                mode=Mode.parse(merged["mode"]),
                access_token=AccessToken.from_pair(merged["access_token"], merged["access_secret"]),
                urls=urls,
                throttle=throttle,
                proxy=_proxy_from_option(merged["proxy"]),
                request_timeout=float(timeout) if timeout not in (None, "") else None,
                user_agent=merged["user_agent"] or default_user_agent(),
                logging=logging_config,
            )
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid client options: {e}")

        config.validate()
        return config
