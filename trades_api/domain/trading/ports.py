"""
Port interfaces (ABCs) for the trading bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Any

from trades_api.domain.trading.entities import Trade
from trades_api.domain.trading.events import TradeCreatedEvent


class TradeRepository(ABC):
    """Port for persisting trades."""

    @abstractmethod
    def insert(self, trade: Trade) -> int:
        """Persist a trade as a single all-or-nothing unit of work.

        Args:
            trade: An unpersisted trade (``id`` is None).

        Returns:
            The identifier generated by the storage engine.

        Raises:
            TradePersistenceError: If the trade could not be stored.
        """
        raise NotImplementedError


class SchemaBootstrapper(ABC):
    """Port for ensuring the trade table exists before an insert."""

    @abstractmethod
    def ensure_schema(self, conn: Any) -> bool:
        """Create the trade table on ``conn`` if it does not exist yet.

        Args:
            conn: The open connection the upcoming insert will use.

        Returns:
            True if the table was created by this call, False otherwise.
        """
        raise NotImplementedError


class TradeEventPublisher(ABC):
    """Port for sending domain events to the external event bus."""

    @abstractmethod
    def send(self, event: TradeCreatedEvent) -> None:
        """Deliver a single event envelope.

        Raises:
            EventPublishError: If the bus rejected or never received the event.
        """
        raise NotImplementedError
