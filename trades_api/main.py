"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health, trades)
- Error handlers (centralized domain-to-HTTP mapping)
- Logging configuration
- The database engine and the create-trade use case

No business logic belongs here.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from trades_api.core.config import Settings, settings
from trades_api.infrastructure.database import build_engine
from trades_api.interfaces.health import router as health_router
from trades_api.interfaces.trading.dependencies import build_create_trade_use_case
from trades_api.interfaces.trading.router import router as trading_router
from trades_api.shared.errors.handlers import register_error_handlers
from trades_api.shared.logging import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: release pooled connections on shutdown."""
    yield
    app.state.engine.dispose()


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application. Settings are read
    once and handed to every component that needs them.

    Args:
        app_settings: Explicit settings. Defaults to the process-wide
            settings loaded from the environment.

    Returns:
        A fully configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    configure_logging(level=app_settings.log_level)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
        lifespan=lifespan,
    )

    engine = build_engine(app_settings)
    app.state.settings = app_settings
    app.state.engine = engine
    app.state.create_trade_use_case = build_create_trade_use_case(
        app_settings, engine
    )

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(trading_router)

    return app


app = create_app()
