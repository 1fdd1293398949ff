"""
Domain-specific errors for the trading bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class TradingDomainError(Exception):
    """Base error for all trading domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class TradeValidationError(TradingDomainError):
    """Raised when a trade-creation request is rejected by validation."""


class TradePersistenceError(TradingDomainError):
    """Raised when a trade cannot be stored. The transaction is rolled back."""


class TradeNotInsertedError(TradePersistenceError):
    """Raised when the insert statement affected no rows."""

    def __init__(self) -> None:
        super().__init__("No se insertó el trade")


class GeneratedIdMissingError(TradePersistenceError):
    """Raised when the storage engine did not return the generated id."""

    def __init__(self) -> None:
        super().__init__("No se obtuvo ID_TRADE autogenerado")


class EventPublishError(TradingDomainError):
    """Raised by publishers when an event cannot be delivered to the bus."""
