"""
Dependency injection for the trading bounded context.

Builds the create-trade use case once, at application start, from
explicit settings and a shared engine. Routes receive it per request
through FastAPI dependencies.
"""

from fastapi import Request
from sqlalchemy.engine import Engine

from trades_api.application.trading.create_trade import CreateTradeUseCase
from trades_api.core.config import Settings
from trades_api.domain.trading.trade_notifier import TradeNotifier
from trades_api.infrastructure.trading.event_grid_publisher import (
    EventGridPublisherAdapter,
)
from trades_api.infrastructure.trading.trade_repository import SqlTradeRepository
from trades_api.infrastructure.trading.trade_schema import TradeSchemaBootstrapper


def build_create_trade_use_case(
    settings: Settings, engine: Engine
) -> CreateTradeUseCase:
    """Wire CreateTradeUseCase with its infrastructure dependencies."""
    return CreateTradeUseCase(
        repository=SqlTradeRepository(
            engine=engine,
            bootstrapper=TradeSchemaBootstrapper(),
        ),
        notifier=TradeNotifier(
            publisher=EventGridPublisherAdapter(
                endpoint=settings.event_grid_topic_endpoint,
                access_key=settings.event_grid_topic_key,
                timeout=settings.event_grid_timeout_seconds,
            ),
        ),
    )


def get_create_trade_use_case(request: Request) -> CreateTradeUseCase:
    """Return the use case built by the application factory."""
    return request.app.state.create_trade_use_case


async def read_raw_body(request: Request) -> str:
    """Return the undecoded request body as text.

    The body is read raw so that an empty body is reported by the
    validator rather than by FastAPI's own request parsing.
    """
    body = await request.body()
    return body.decode("utf-8", errors="replace")
