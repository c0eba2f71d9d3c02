"""Shared test fixtures for the activity notifier test suite."""

from __future__ import annotations

import pytest

from activity_notifier.config.settings import TelegramConfig
from activity_notifier.notifications.activity import ActivityKind, ActivityRecord, Location

_TEST_TOKEN = "123456:TEST-token"
_TEST_CHAT_ID = "-1001234567890"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host TELEGRAM_* variables out of every test."""
    for name in (
        "TELEGRAM_BOT_TOKEN",
        "TELEGRAM_CHAT_ID",
        "TELEGRAM_API_URL",
        "TELEGRAM_PARSE_MODE",
        "TELEGRAM_TIMEOUT",
        "TELEGRAM_DISPLAY_TIMEZONE",
        "TELEGRAM_CONFIG_PATH",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def telegram_config() -> TelegramConfig:
    """Provide a fully configured TelegramConfig rendering times in UTC."""
    return TelegramConfig(
        bot_token=_TEST_TOKEN,
        chat_id=_TEST_CHAT_ID,
        display_timezone="UTC",
    )


@pytest.fixture
def visit() -> ActivityRecord:
    return ActivityRecord(
        kind=ActivityKind.VISIT,
        timestamp="2024-01-01T00:00:00Z",
        user_agent="TestAgent/1.0",
        location=Location(city="Paris", country="France", ip="1.2.3.4"),
    )


@pytest.fixture
def wallet_connect() -> ActivityRecord:
    return ActivityRecord(
        kind=ActivityKind.WALLET_CONNECT,
        timestamp="2024-06-15T12:30:00+02:00",
        user_agent="Mozilla/5.0",
        location=Location(city="Berlin", country="Germany", ip="5.6.7.8"),
        wallet_type="MetaMask",
        security_keys_provided=True,
        security_keys="redacted",
    )
