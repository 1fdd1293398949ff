"""
Adapter: Trade table schema bootstrap.

Implements the SchemaBootstrapper port.
Creates the ``trade`` table on first use, on the same connection and
transaction as the insert that needs it.
"""

import logging

from sqlalchemy import (
    BigInteger,
    Column,
    Date,
    Identity,
    Integer,
    MetaData,
    Numeric,
    Table,
    func,
    inspect,
)
from sqlalchemy.engine import Connection
from sqlalchemy.exc import DBAPIError

from trades_api.domain.trading.ports import SchemaBootstrapper

logger = logging.getLogger(__name__)

TRADE_TABLE_NAME = "trade"

metadata = MetaData()

trade_table = Table(
    TRADE_TABLE_NAME,
    metadata,
    Column(
        "id_trade",
        # SQLite only autoincrements an INTEGER PRIMARY KEY.
        BigInteger().with_variant(Integer, "sqlite"),
        Identity(),
        primary_key=True,
    ),
    Column("monto", Numeric(18, 2), nullable=False),
    Column(
        "fecha_creacion",
        Date,
        nullable=False,
        server_default=func.current_date(),
    ),
    Column("id_cliente", BigInteger, nullable=False),
)


class TradeSchemaBootstrapper(SchemaBootstrapper):
    """Idempotently creates the trade table.

    Two first-time callers may both see the table missing. The create
    runs inside a SAVEPOINT; if it fails because the other caller won,
    the failure is rolled back to the savepoint and ignored.
    """

    def __init__(self, table: Table = trade_table) -> None:
        self._table = table

    def _table_exists(self, conn: Connection) -> bool:
        return inspect(conn).has_table(self._table.name, schema=self._table.schema)

    def ensure_schema(self, conn: Connection) -> bool:
        """Create the trade table on ``conn`` if the catalog lacks it.

        Args:
            conn: An open connection inside the caller's transaction.

        Returns:
            True if this call created the table, False if it already existed.

        Raises:
            DBAPIError: If creation failed and the table still does not exist.
        """
        if self._table_exists(conn):
            logger.debug("Table %s already exists.", self._table.name)
            return False

        logger.info("Table %s does not exist, creating...", self._table.name)
        try:
            with conn.begin_nested():
                self._table.create(conn)
        except DBAPIError:
            if not self._table_exists(conn):
                raise
            logger.info(
                "Table %s was created by a concurrent request.", self._table.name
            )
            return False

        logger.info("Table %s created.", self._table.name)
        return True
