"""
Data Transfer Objects for the trading application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from trades_api.domain.trading.entities import Trade
from trades_api.domain.trading.trade_notifier import NotificationResult


@dataclass(frozen=True)
class CreateTradeCommand:
    """Input DTO for creating a trade.

    Every field is optional here; presence and range rules are enforced
    by the domain validator so that rejections carry its messages.

    Attributes:
        amount: Trade amount.
        client_id: External client reference.
        creation_date: Creation date. Defaults to today when omitted.
        channel: Optional channel label.
    """

    amount: Decimal | None = None
    client_id: int | None = None
    creation_date: date | None = None
    channel: str | None = None


@dataclass(frozen=True)
class CreateTradeResult:
    """Output DTO for a created trade.

    Attributes:
        trade_id: Identifier generated by storage.
        trade: The persisted trade, carrying ``trade_id``.
        notification: Outcome of the best-effort event publish.
    """

    trade_id: int
    trade: Trade
    notification: NotificationResult
