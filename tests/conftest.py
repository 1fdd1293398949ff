"""
Shared fixtures for the trades API tests.

Storage tests run against a file-backed SQLite database so that every
connection sees the same tables. No network access is required.
"""

from datetime import date

import pytest

from trades_api.core.config import Settings
from trades_api.domain.trading.errors import EventPublishError
from trades_api.domain.trading.ports import TradeEventPublisher
from trades_api.infrastructure.database import build_engine

FIXED_TODAY = date(2026, 10, 19)


class RecordingPublisher(TradeEventPublisher):
    """Publisher that keeps every event it is asked to send."""

    def __init__(self) -> None:
        self.events = []

    def send(self, event) -> None:
        self.events.append(event)


class FailingPublisher(TradeEventPublisher):
    """Publisher whose bus is always unavailable."""

    def __init__(self) -> None:
        self.attempts = 0

    def send(self, event) -> None:
        self.attempts += 1
        raise EventPublishError("Event Grid unavailable")


@pytest.fixture
def sqlite_settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        database_url=f"sqlite:///{tmp_path / 'trades.db'}",
        event_grid_topic_endpoint=None,
        event_grid_topic_key=None,
    )


@pytest.fixture
def engine(sqlite_settings):
    engine = build_engine(sqlite_settings)
    yield engine
    engine.dispose()
