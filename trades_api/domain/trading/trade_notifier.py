"""
"Trade created" notification.

Wraps a TradeEventPublisher so that publishing is always best-effort:
delivery failures come back as a NotificationResult value and are never
raised to the caller.

Usage:
    notifier = TradeNotifier(publisher=EventGridPublisherAdapter(...))
    result = notifier.publish(trade.with_id(new_id))
    if not result.success:
        logger.warning(...)
"""

import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from trades_api.domain.trading.entities import Trade
from trades_api.domain.trading.events import (
    TRADE_CREATED_EVENT_TYPE,
    TradeCreatedEvent,
)
from trades_api.domain.trading.ports import TradeEventPublisher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotificationResult:
    """Outcome of a single publish attempt."""

    event_type: str
    success: bool
    trade_id: int | None = None
    error: str | None = None
    latency_ms: float = 0.0


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TradeNotifier:
    """Publishes ``trade.created.v1`` events for persisted trades.

    Args:
        publisher: Port used to reach the event bus.
        clock: Returns the timestamp stamped on each event.
    """

    def __init__(
        self,
        publisher: TradeEventPublisher,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._publisher = publisher
        self._clock = clock

    def publish(self, trade: Trade) -> NotificationResult:
        """Send the creation event for ``trade``.

        Args:
            trade: A persisted trade (``id`` assigned).

        Returns:
            NotificationResult describing the attempt. Never raises.
        """
        start = time.monotonic()

        try:
            event = TradeCreatedEvent.for_trade(trade, now=self._clock())
            self._publisher.send(event)
        except Exception as exc:
            elapsed = (time.monotonic() - start) * 1000
            return NotificationResult(
                event_type=TRADE_CREATED_EVENT_TYPE,
                success=False,
                trade_id=trade.id,
                error=str(exc) or type(exc).__name__,
                latency_ms=round(elapsed, 2),
            )

        elapsed = (time.monotonic() - start) * 1000
        logger.info(
            "%s published for idTrade=%s", event.event_type, trade.id
        )
        return NotificationResult(
            event_type=event.event_type,
            success=True,
            trade_id=trade.id,
            latency_ms=round(elapsed, 2),
        )
