"""
CLI entry point for the trades API.

Usage:
    # Serve the API
    python -m trades_api.cli serve --port 8000

    # Create the trade table ahead of the first request
    python -m trades_api.cli init-db
"""

import argparse
import logging

from trades_api.core.config import settings
from trades_api.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the API under uvicorn."""
    import uvicorn

    logger.info("Starting Trades API at http://%s:%d", args.host, args.port)
    uvicorn.run("trades_api.main:app", host=args.host, port=args.port, reload=False)


def cmd_init_db(_args: argparse.Namespace) -> None:
    """Run the trade table bootstrap once."""
    from trades_api.infrastructure.database import build_engine
    from trades_api.infrastructure.trading.trade_schema import TradeSchemaBootstrapper

    engine = build_engine(settings)
    try:
        with engine.begin() as conn:
            created = TradeSchemaBootstrapper().ensure_schema(conn)
    finally:
        engine.dispose()

    logger.info("Trade table %s.", "created" if created else "already present")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Trades API CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="0.0.0.0")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.set_defaults(func=cmd_serve)

    init_parser = subparsers.add_parser(
        "init-db", help="Create the trade table if it does not exist"
    )
    init_parser.set_defaults(func=cmd_init_db)

    args = parser.parse_args(argv)
    configure_logging(level=settings.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
