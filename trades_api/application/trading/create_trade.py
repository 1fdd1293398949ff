"""
Use case: Create a trade and announce it.

Input: CreateTradeCommand
Output: CreateTradeResult
Side effects: One row inserted in storage (table created on first use),
    one trade.created.v1 event sent to the event bus (best-effort).
Failure cases: TradeValidationError, TradePersistenceError.
"""

import logging
from datetime import date
from typing import Callable

from trades_api.application.trading.dtos import CreateTradeCommand, CreateTradeResult
from trades_api.domain.trading.ports import TradeRepository
from trades_api.domain.trading.trade_notifier import TradeNotifier
from trades_api.domain.trading.trade_validator import validate_trade

logger = logging.getLogger(__name__)


class CreateTradeUseCase:
    """Orchestrates validate → persist → notify for a single trade.

    Validation and persistence failures propagate. A failed notification
    is logged and reported in the result, never raised.
    """

    def __init__(
        self,
        repository: TradeRepository,
        notifier: TradeNotifier,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._repository = repository
        self._notifier = notifier
        self._today = today

    def execute(self, command: CreateTradeCommand) -> CreateTradeResult:
        """Run the create-trade use case.

        Args:
            command: Decoded trade fields from the request.

        Returns:
            The generated id, the persisted trade and the notification outcome.
        """
        trade = validate_trade(
            amount=command.amount,
            client_id=command.client_id,
            creation_date=command.creation_date,
            channel=command.channel,
            today=self._today(),
        )

        trade_id = self._repository.insert(trade)
        persisted = trade.with_id(trade_id)
        logger.info(
            "Trade stored: idTrade=%d, idCliente=%d", trade_id, persisted.client_id
        )

        notification = self._notifier.publish(persisted)
        if not notification.success:
            logger.warning(
                "Trade creado pero falló publicar el evento: %s",
                notification.error,
            )

        return CreateTradeResult(
            trade_id=trade_id,
            trade=persisted,
            notification=notification,
        )
