"""
SQLAlchemy engine construction.

The engine (and its connection pool) is built once per process by the
application factory and shared by every request.
"""

import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url

from trades_api.core.config import Settings

logger = logging.getLogger(__name__)


def _enable_sqlite_transactions(engine: Engine) -> None:
    """Let SQLAlchemy, not pysqlite, emit BEGIN.

    pysqlite defers BEGIN until the first DML statement, which leaves DDL
    and SAVEPOINTs outside the transaction.
    """

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, _connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


def build_engine(settings: Settings) -> Engine:
    """Build a SQLAlchemy engine from application settings.

    Args:
        settings: Application settings carrying the database URL and the
            optional Oracle wallet directory.

    Returns:
        A lazily-connecting engine with pre-ping enabled.
    """
    url = make_url(settings.get_database_url())
    connect_args = {}

    if url.get_backend_name() == "oracle" and settings.oracle_wallet_dir:
        connect_args = {
            "config_dir": settings.oracle_wallet_dir,
            "wallet_location": settings.oracle_wallet_dir,
        }

    engine = create_engine(url, pool_pre_ping=True, connect_args=connect_args)

    if url.get_backend_name() == "sqlite":
        _enable_sqlite_transactions(engine)

    logger.debug("Database engine ready for backend=%s", url.get_backend_name())
    return engine
