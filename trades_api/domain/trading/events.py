"""
Domain events for the trading bounded context.

Events are immutable envelopes describing something that already happened.
The payload uses the same field names as the HTTP API.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

from trades_api.domain.trading.entities import Trade

TRADE_CREATED_EVENT_TYPE = "trade.created.v1"
TRADES_SUBJECT = "/trades"
EVENT_DATA_VERSION = "1.0"


def trade_to_payload(trade: Trade) -> dict[str, Any]:
    """Serialize a Trade for JSON transport."""
    return {
        "idTrade": trade.id,
        "monto": float(trade.amount),
        "canal": trade.channel,
        "fechaCreacion": trade.creation_date.isoformat(),
        "idCliente": trade.client_id,
    }


@dataclass(frozen=True)
class TradeCreatedEvent:
    """Notification envelope emitted after a trade has been committed."""

    data: dict[str, Any]
    event_time: datetime
    id: UUID = field(default_factory=uuid4)
    subject: str = TRADES_SUBJECT
    event_type: str = TRADE_CREATED_EVENT_TYPE
    data_version: str = EVENT_DATA_VERSION

    @classmethod
    def for_trade(
        cls, trade: Trade, now: datetime | None = None
    ) -> "TradeCreatedEvent":
        """Build the event for a persisted trade, stamped with ``now``."""
        return cls(
            data=trade_to_payload(trade),
            event_time=now or datetime.now(timezone.utc),
        )
