"""
Adapter: Trade repository.

Implements the TradeRepository port with SQLAlchemy Core.
Each insert is one transaction: bootstrap the schema, insert the row,
read the generated id back through RETURNING, commit. Any failure rolls
everything back.
"""

import logging

from sqlalchemy import Insert, Row, insert
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from trades_api.domain.trading.entities import Trade
from trades_api.domain.trading.errors import (
    GeneratedIdMissingError,
    TradeNotInsertedError,
    TradePersistenceError,
)
from trades_api.domain.trading.ports import SchemaBootstrapper, TradeRepository
from trades_api.infrastructure.trading.trade_schema import (
    TradeSchemaBootstrapper,
    trade_table,
)

logger = logging.getLogger(__name__)


class SqlTradeRepository(TradeRepository):
    """Persists trades to a relational database.

    Implements the TradeRepository port defined in the domain layer.
    """

    def __init__(
        self,
        engine: Engine,
        bootstrapper: SchemaBootstrapper | None = None,
    ) -> None:
        self._engine = engine
        self._bootstrapper = bootstrapper or TradeSchemaBootstrapper()

    def insert(self, trade: Trade) -> int:
        """Insert a trade and return its generated identifier.

        The connection is released and the transaction rolled back on any
        failure; it is committed only once the id has been read back.

        Args:
            trade: An unpersisted Trade.

        Returns:
            The ``id_trade`` assigned by the database.

        Raises:
            TradeNotInsertedError: If the insert produced no row.
            GeneratedIdMissingError: If no generated id came back.
            TradePersistenceError: On any database error.
        """
        try:
            with self._engine.begin() as conn:
                self._bootstrapper.ensure_schema(conn)

                row = conn.execute(self._insert_statement(trade)).first()
                if row is None:
                    raise TradeNotInsertedError()

                trade_id = self._read_generated_id(row)
                if trade_id is None:
                    raise GeneratedIdMissingError()
        except SQLAlchemyError as exc:
            logger.error("Trade insert rolled back: %s", type(exc).__name__)
            raise TradePersistenceError(str(getattr(exc, "orig", None) or exc)) from exc

        logger.debug("Inserted trade id_trade=%d.", trade_id)
        return trade_id

    @staticmethod
    def _insert_statement(trade: Trade) -> Insert:
        return (
            insert(trade_table)
            .values(
                monto=trade.amount,
                fecha_creacion=trade.creation_date,
                id_cliente=trade.client_id,
            )
            .returning(trade_table.c.id_trade)
        )

    @staticmethod
    def _read_generated_id(row: Row) -> int | None:
        """Return the generated primary key from the RETURNING row."""
        if row[0] is None:
            return None
        return int(row[0])
