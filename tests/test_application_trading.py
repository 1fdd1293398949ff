"""
Tests for the trading application layer (use cases).

Tests CreateTradeUseCase with mocked ports. No real infrastructure needed.
Each test verifies orchestration logic, not business rules.
"""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from trades_api.application.trading.create_trade import CreateTradeUseCase
from trades_api.application.trading.dtos import CreateTradeCommand
from trades_api.domain.trading.errors import (
    GeneratedIdMissingError,
    TradeValidationError,
)
from trades_api.domain.trading.ports import TradeRepository
from trades_api.domain.trading.trade_notifier import NotificationResult, TradeNotifier

TODAY = date(2026, 10, 19)


def _use_case(repository=None, notifier=None) -> CreateTradeUseCase:
    if repository is None:
        repository = MagicMock(spec=TradeRepository)
        repository.insert.return_value = 101
    if notifier is None:
        notifier = MagicMock(spec=TradeNotifier)
        notifier.publish.return_value = NotificationResult(
            event_type="trade.created.v1", success=True, trade_id=101
        )
    return CreateTradeUseCase(
        repository=repository, notifier=notifier, today=lambda: TODAY
    )


class TestCreateTradeUseCase:
    """Tests for the CreateTradeUseCase."""

    def test_valid_request_persists_and_notifies(self) -> None:
        """Valid trade is inserted, then published with its new id."""
        repository = MagicMock(spec=TradeRepository)
        repository.insert.return_value = 101
        notifier = MagicMock(spec=TradeNotifier)
        notifier.publish.return_value = NotificationResult(
            event_type="trade.created.v1", success=True, trade_id=101
        )
        use_case = _use_case(repository, notifier)

        result = use_case.execute(
            CreateTradeCommand(amount=Decimal("150.5"), client_id=42, channel="web")
        )

        inserted = repository.insert.call_args.args[0]
        assert inserted.id is None
        assert inserted.creation_date == TODAY

        published = notifier.publish.call_args.args[0]
        assert published.id == 101
        assert published.channel == "web"

        assert result.trade_id == 101
        assert result.trade == published
        assert result.notification.success is True

    def test_explicit_date_kept(self) -> None:
        use_case = _use_case()
        result = use_case.execute(
            CreateTradeCommand(
                amount=Decimal("1"), client_id=1, creation_date=date(2024, 2, 29)
            )
        )
        assert result.trade.creation_date == date(2024, 2, 29)

    def test_validation_error_has_no_side_effects(self) -> None:
        """Rejected input never reaches storage or the event bus."""
        repository = MagicMock(spec=TradeRepository)
        notifier = MagicMock(spec=TradeNotifier)
        use_case = _use_case(repository, notifier)

        with pytest.raises(TradeValidationError):
            use_case.execute(CreateTradeCommand(amount=Decimal("-5"), client_id=1))

        repository.insert.assert_not_called()
        notifier.publish.assert_not_called()

    def test_persistence_error_propagates_without_notification(self) -> None:
        repository = MagicMock(spec=TradeRepository)
        repository.insert.side_effect = GeneratedIdMissingError()
        notifier = MagicMock(spec=TradeNotifier)
        use_case = _use_case(repository, notifier)

        with pytest.raises(GeneratedIdMissingError):
            use_case.execute(CreateTradeCommand(amount=Decimal("1"), client_id=1))

        notifier.publish.assert_not_called()

    def test_notification_failure_is_not_fatal(self, caplog) -> None:
        """A failed publish is logged as a warning and the trade is returned."""
        notifier = MagicMock(spec=TradeNotifier)
        notifier.publish.return_value = NotificationResult(
            event_type="trade.created.v1",
            success=False,
            trade_id=101,
            error="bus down",
        )
        use_case = _use_case(notifier=notifier)

        with caplog.at_level("WARNING"):
            result = use_case.execute(
                CreateTradeCommand(amount=Decimal("1"), client_id=1)
            )

        assert result.trade_id == 101
        assert result.notification.success is False
        assert "bus down" in caplog.text
        assert any(r.levelname == "WARNING" for r in caplog.records)
