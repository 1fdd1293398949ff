"""
Domain entities for the trading bounded context.

Entities carry no framework imports and perform no IO.
"""

from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Trade:
    """A single trade request, persisted once and never modified.

    Attributes:
        amount: Non-negative trade amount.
        creation_date: Calendar date the trade was created on.
        client_id: Reference to the external client entity.
        channel: Optional free-text channel label.
        id: Storage-generated identifier. None until persisted.
    """

    amount: Decimal
    creation_date: date
    client_id: int
    channel: Optional[str] = None
    id: Optional[int] = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def with_id(self, trade_id: int) -> "Trade":
        """Return a copy of this trade carrying the generated identifier."""
        return replace(self, id=trade_id)
