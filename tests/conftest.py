"""
Pytest configuration and shared fixtures.
"""

import os
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# Configure test environment
os.environ['ENVIRONMENT'] = 'test'

from infrastructure.logging.factory import LoggerFactory
from infrastructure.networking.http import OAuth1Signer
from config.structs import ETradeConfig

from tests.helpers import (
    FakeSession, CONSUMER_KEY, CONSUMER_SECRET, ACCESS_KEY, ACCESS_SECRET,
    FIXED_NONCE, FIXED_TIMESTAMP,
)


@pytest.fixture(autouse=True)
def reset_logging():
    LoggerFactory.clear_cache()
    yield
    LoggerFactory.clear_cache()


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def fixed_signer():
    return OAuth1Signer(
        CONSUMER_KEY, CONSUMER_SECRET,
        nonce_factory=lambda: FIXED_NONCE,
        timestamp_factory=lambda: FIXED_TIMESTAMP,
    )


@pytest.fixture
def etrade_config():
    return ETradeConfig.from_options({
        "key": CONSUMER_KEY,
        "secret": CONSUMER_SECRET,
        "mode": "sandbox",
        "access_token": ACCESS_KEY,
        "access_secret": ACCESS_SECRET,
    })
