"""
OAuth1.0a signer tests.

The reference vector is the worked example from Twitter's "Creating a
signature" documentation, a widely used HMAC-SHA1 test case.
"""

import pytest

from infrastructure.exceptions import SigningError
from infrastructure.networking.http import OAuth1Signer, OAuth1AuthStrategy, HTTPMethod
from config.structs import AccessToken

REFERENCE = {
    "consumer_key": "xvz1evFS4wEEPTGEFPHBog",
    "consumer_secret": "kAcSOqF21Fu85e7zjz7ZN2U4ZRhfV3WpwPAoE3Z7kBw",
    "token": "370773112-GmHxMAgYyLbNEtIKZeRNFsMKPR9EyMZeS9weJAEb",
    "token_secret": "LswwdoUaIvS8ltyTt5jkRh4J50vUPVVHtR2YPi5kE",
    "url": "https://api.twitter.com/1.1/statuses/update.json",
    "nonce": "kYjzVBB8Y0ZFabxSWbWovY3uYSQ2pTgmZeNu2VS4cg",
    "timestamp": 1318622958,
    "params": {
        "include_entities": True,
        "status": "Hello Ladies + Gentlemen, a signed OAuth request!",
    },
}


class TestOAuth1Signer:

    @pytest.fixture
    def signer(self):
        return OAuth1Signer(REFERENCE["consumer_key"], REFERENCE["consumer_secret"])

    def authorize_reference(self, signer, **overrides):
        kwargs = dict(
            method="POST",
            url=REFERENCE["url"],
            params=REFERENCE["params"],
            token_key=REFERENCE["token"],
            token_secret=REFERENCE["token_secret"],
            nonce=REFERENCE["nonce"],
            timestamp=REFERENCE["timestamp"],
        )
        kwargs.update(overrides)
        return signer.authorize(**kwargs)

    def test_reference_signature(self, signer):
        oauth = self.authorize_reference(signer)
        assert oauth["oauth_signature"] == "hCtSmYh%2BiHYCEqBWrE7C7hYmtUk%3D"

    def test_reference_base_string(self):
        params = {
            **REFERENCE["params"],
            "oauth_consumer_key": REFERENCE["consumer_key"],
            "oauth_nonce": REFERENCE["nonce"],
            "oauth_signature_method": "HMAC-SHA1",
            "oauth_timestamp": str(REFERENCE["timestamp"]),
            "oauth_token": REFERENCE["token"],
            "oauth_version": "1.0",
        }
        base = OAuth1Signer.signature_base_string("post", REFERENCE["url"], params)
        assert base.startswith("POST&https%3A%2F%2Fapi.twitter.com%2F1.1%2Fstatuses%2Fupdate.json&")
        assert "include_entities%3Dtrue%26oauth_consumer_key" in base
        assert base.endswith("status%3DHello%2520Ladies%2520%252B%2520Gentlemen%252C"
                             "%2520a%2520signed%2520OAuth%2520request%2521")

    def test_output_parameter_set(self, signer):
        oauth = self.authorize_reference(signer)
        assert set(oauth) == {
            "oauth_consumer_key", "oauth_nonce", "oauth_signature", "oauth_signature_method",
            "oauth_timestamp", "oauth_token", "oauth_version",
        }
        assert oauth["oauth_signature_method"] == "HMAC-SHA1"
        assert oauth["oauth_version"] == "1.0"
        assert oauth["oauth_timestamp"] == "1318622958"

    def test_token_omitted_when_empty(self, signer):
        oauth = self.authorize_reference(signer, token_key=None, token_secret=None)
        assert "oauth_token" not in oauth

    def test_query_string_ignored_in_url(self, signer):
        plain = self.authorize_reference(signer)
        with_query = self.authorize_reference(signer, url=REFERENCE["url"] + "?ignored=1")
        assert plain["oauth_signature"] == with_query["oauth_signature"]

    @pytest.mark.parametrize("url, expected", [
        ("https://API.Example.com:443/v1/x.json", "https://api.example.com/v1/x.json"),
        ("HTTP://api.example.com:80/v1/x.json#frag", "http://api.example.com/v1/x.json"),
        ("https://api.example.com:8443/v1/a%20b.json?q=1", "https://api.example.com:8443/v1/a%20b.json"),
    ])
    def test_base_string_uri_normalized(self, url, expected):
        assert OAuth1Signer.normalize_url(url) == expected

    def test_host_case_and_default_port_do_not_change_signature(self, signer):
        plain = self.authorize_reference(signer)
        noisy = self.authorize_reference(signer, url="HTTPS://API.Twitter.com:443/1.1/statuses/update.json")
        assert plain["oauth_signature"] == noisy["oauth_signature"]

    def test_parameter_order_irrelevant(self, signer):
        reordered = dict(reversed(list(REFERENCE["params"].items())))
        assert (self.authorize_reference(signer)["oauth_signature"]
                == self.authorize_reference(signer, params=reordered)["oauth_signature"])

    def test_signature_covers_every_input(self, signer):
        baseline = self.authorize_reference(signer)["oauth_signature"]
        variants = [
            dict(method="GET"),
            dict(url=REFERENCE["url"].replace("update", "destroy")),
            dict(params={**REFERENCE["params"], "include_entities": False}),
            dict(nonce="different"),
            dict(timestamp=REFERENCE["timestamp"] + 1),
            dict(token_secret="other-secret"),
        ]
        for overrides in variants:
            assert self.authorize_reference(signer, **overrides)["oauth_signature"] != baseline, overrides

    def test_fresh_nonce_per_call(self, signer):
        first = signer.authorize("GET", REFERENCE["url"])
        second = signer.authorize("GET", REFERENCE["url"])
        assert first["oauth_nonce"] != second["oauth_nonce"]
        assert len(first["oauth_nonce"]) == 32
        assert first["oauth_nonce"].isalnum()

    def test_factories_are_used(self):
        signer = OAuth1Signer("key", "secret", nonce_factory=lambda: "n0nce", timestamp_factory=lambda: 42)
        oauth = signer.authorize("GET", "https://example.com/x")
        assert oauth["oauth_nonce"] == "n0nce"
        assert oauth["oauth_timestamp"] == "42"

    def test_signing_key(self, signer):
        assert signer.signing_key() == f"{REFERENCE['consumer_secret']}&"
        assert signer.signing_key("a b") == f"{REFERENCE['consumer_secret']}&a%20b"

    @pytest.mark.parametrize("key,secret", [("", "secret"), ("key", ""), ("", "")])
    def test_empty_consumer_credentials_rejected(self, key, secret):
        with pytest.raises(SigningError):
            OAuth1Signer(key, secret)


class TestOAuth1AuthStrategy:

    @pytest.fixture
    def signer(self):
        return OAuth1Signer("ckey", "csecret", nonce_factory=lambda: "nonce", timestamp_factory=lambda: 1)

    @pytest.mark.asyncio
    async def test_uses_current_token(self, signer):
        current = {"token": AccessToken(key="tok", secret="sec")}
        strategy = OAuth1AuthStrategy(signer, token_provider=lambda: current["token"])

        auth = await strategy.sign_request(HTTPMethod.GET, "https://example.com/a", {}, None)
        assert auth.params["oauth_token"] == "tok"

        current["token"] = AccessToken(key="rotated", secret="sec2")
        auth = await strategy.sign_request(HTTPMethod.GET, "https://example.com/a", {}, None)
        assert auth.params["oauth_token"] == "rotated"

    @pytest.mark.asyncio
    async def test_unauthenticated_skips_token(self, signer):
        strategy = OAuth1AuthStrategy(signer, token_provider=lambda: AccessToken(key="tok", secret="sec"))
        auth = await strategy.sign_request(HTTPMethod.GET, "https://example.com/a", {}, None,
                                           authenticated=False)
        assert "oauth_token" not in auth.params

    @pytest.mark.asyncio
    async def test_explicit_token_overrides_current(self, signer):
        strategy = OAuth1AuthStrategy(signer, token_provider=lambda: AccessToken(key="tok", secret="sec"))
        auth = await strategy.sign_request(HTTPMethod.GET, "https://example.com/a", {}, None,
                                           token=AccessToken(key="request", secret="rsec"))
        assert auth.params["oauth_token"] == "request"

    @pytest.mark.asyncio
    async def test_body_fields_are_signed(self, signer):
        strategy = OAuth1AuthStrategy(signer)
        body = {"CancelOrderRequest": {"orderId": 7}}
        auth = await strategy.sign_request(HTTPMethod.PUT, "https://example.com/a", {}, body)
        expected = signer.authorize("PUT", "https://example.com/a", body)
        assert auth.params["oauth_signature"] == expected["oauth_signature"]
        assert auth.headers == {}
