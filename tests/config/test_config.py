import os

import pytest

from config import ConfigManager, ETradeConfig, Mode
from config.structs import DEFAULT_PRODUCTION_URL, DEFAULT_SANDBOX_URL
from infrastructure.exceptions import ConfigurationError


class TestETradeConfig:

    def test_defaults(self):
        config = ETradeConfig.from_options({"key": "k", "secret": "s"})

        assert config.mode is Mode.SANDBOX
        assert config.base_url == DEFAULT_SANDBOX_URL
        assert config.access_token is None
        assert config.throttle.connection_limit == 10
        assert config.throttle.connection_limit_period == 1000
        assert config.throttle.error_on_connection_limit is False
        assert config.proxy is None
        assert config.user_agent.startswith("etrade-api-client/v")

    @pytest.mark.parametrize("mode,expected", [
        ("dev", Mode.SANDBOX),
        ("sandbox", Mode.SANDBOX),
        ("prod", Mode.PRODUCTION),
        ("PRODUCTION", Mode.PRODUCTION),
    ])
    def test_mode_aliases(self, mode, expected):
        assert ETradeConfig.from_options({"key": "k", "secret": "s", "mode": mode}).mode is expected

    def test_unknown_mode(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ETradeConfig.from_options({"key": "k", "secret": "s", "mode": "staging"})
        assert exc_info.value.setting_name == "mode"

    def test_production_base_url(self):
        config = ETradeConfig.from_options({"key": "k", "secret": "s", "mode": "prod"})
        assert config.base_url == DEFAULT_PRODUCTION_URL

    def test_partial_url_override_keeps_other_defaults(self):
        config = ETradeConfig.from_options({
            "key": "k", "secret": "s",
            "urls": {"dev": "https://sandbox.local/v1/"},
        })
        assert config.urls.sandbox == "https://sandbox.local/v1/"
        assert config.urls.production == DEFAULT_PRODUCTION_URL

    def test_camel_case_options(self):
        config = ETradeConfig.from_options({
            "key": "k", "secret": "s",
            "accessToken": "at", "accessSecret": "as",
            "connectionLimit": 3, "connectionLimitPeriod": 250, "errorOnConnectionLimit": True,
        })
        assert config.access_token.key == "at"
        assert config.throttle.connection_limit == 3
        assert config.throttle.connection_limit_period == 250
        assert config.throttle.error_on_connection_limit is True

    def test_half_access_token_rejected(self):
        with pytest.raises(ConfigurationError):
            ETradeConfig.from_options({"key": "k", "secret": "s", "access_token": "only"})

    def test_with_access_token_returns_copy(self):
        config = ETradeConfig.from_options({"key": "k", "secret": "s"})
        rotated = config.with_access_token("t", "ts")

        assert rotated.is_authorized
        assert not config.is_authorized
        assert rotated.with_access_token(None, None).access_token is None

    def test_proxy_options(self):
        config = ETradeConfig.from_options({
            "key": "k", "secret": "s",
            "proxy": {"host": "proxy.local", "port": "3128", "auth": {"username": "u", "password": "p"}},
        })
        assert config.proxy.port == 3128
        assert config.proxy.to_request_proxy() == {
            "host": "proxy.local", "port": 3128, "protocol": "http",
            "auth": {"username": "u", "password": "p"},
        }

    @pytest.mark.parametrize("options", [
        {"connection_limit": 0},
        {"connection_limit_period": -5},
        {"request_timeout": 0},
        {"urls": {"oauth": "ftp://nope"}},
        {"proxy": {"host": "proxy.local", "port": 70000}},
        {"connection_limit": "many"},
    ])
    def test_invalid_options(self, options):
        with pytest.raises(ConfigurationError):
            ETradeConfig.from_options({"key": "k", "secret": "s", **options})


class TestConfigManager:

    @pytest.fixture
    def config_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "environment: test\n"
            "etrade:\n"
            "  mode: ${TEST_ETRADE_MODE:sandbox}\n"
            "  key: ${TEST_ETRADE_KEY}\n"
            "  secret: ${TEST_ETRADE_SECRET:fallback-secret}\n"
            "  connection_limit: 4\n"
            "logging:\n"
            "  min_level: WARNING\n"
            "  format: json\n"
        )
        return path

    def test_loads_with_env_substitution(self, config_file, monkeypatch):
        monkeypatch.setenv("TEST_ETRADE_KEY", "env-key")
        monkeypatch.setenv("TEST_ETRADE_MODE", "prod")

        manager = ConfigManager(config_file, load_env=False)
        config = manager.get_etrade_config()

        assert config.credentials.key == "env-key"
        assert config.credentials.secret == "fallback-secret"
        assert config.mode is Mode.PRODUCTION
        assert config.throttle.connection_limit == 4
        assert config.logging.min_level == "WARNING"
        assert config.logging.format == "json"
        assert config.logging.environment == "test"

    def test_env_file_loaded(self, config_file, tmp_path, monkeypatch):
        monkeypatch.delenv("TEST_ETRADE_KEY", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("TEST_ETRADE_KEY=dotenv-key\n")

        manager = ConfigManager(config_file, env_file=env_file)
        try:
            assert manager.get_etrade_config().credentials.key == "dotenv-key"
        finally:
            os.environ.pop("TEST_ETRADE_KEY", None)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager(tmp_path / "absent.yaml", load_env=False)
        assert exc_info.value.setting_name == "config_path"

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("etrade: [unclosed\n")
        with pytest.raises(ConfigurationError):
            ConfigManager(path, load_env=False)

    def test_missing_etrade_section(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n  min_level: INFO\n")
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager(path, load_env=False).get_etrade_config()
        assert exc_info.value.setting_name == "etrade"

    def test_invalid_logging_section(self, config_file, monkeypatch):
        monkeypatch.setenv("TEST_ETRADE_KEY", "k")
        config_file.write_text(config_file.read_text().replace("WARNING", "CHATTY"))
        with pytest.raises(ConfigurationError):
            ConfigManager(config_file, load_env=False).get_logging_config()
