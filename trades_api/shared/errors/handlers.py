"""
Centralized error handlers for FastAPI.

Maps domain errors to HTTP responses. Every error body has the shape
``{"error": "<message>"}``. If that body cannot be encoded, a hand-built
fallback with the same shape is returned so the caller never receives
a broken response.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from trades_api.domain.trading.errors import (
    TradePersistenceError,
    TradeValidationError,
    TradingDomainError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_500 = 500


def _fallback_error_body(message: str | None) -> bytes:
    """Build ``{"error": ...}`` by hand, without a JSON encoder."""
    safe = (message or "").replace("\\", "/").replace('"', "'")
    return ('{"error":"' + safe + '"}').encode("utf-8", errors="replace")


def error_response(status_code: int, message: str) -> Response:
    """Build a JSON error response, falling back to a hand-built body."""
    try:
        return JSONResponse(status_code=status_code, content={"error": message})
    except (TypeError, ValueError):
        logger.warning("Error body could not be encoded, using fallback.")
        return Response(
            content=_fallback_error_body(message),
            status_code=status_code,
            media_type="application/json",
        )


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(TradeValidationError)
    async def handle_validation(
        _request: Request, exc: TradeValidationError
    ) -> Response:
        """Handle rejected trade requests."""
        logger.warning("Trade rejected: %s", exc.message)
        return error_response(HTTP_400, exc.message)

    @app.exception_handler(TradePersistenceError)
    async def handle_persistence(
        _request: Request, exc: TradePersistenceError
    ) -> Response:
        """Handle storage failures. The transaction is already rolled back."""
        logger.error("Error en crearTrade: %s", exc.message)
        return error_response(HTTP_500, exc.message)

    @app.exception_handler(TradingDomainError)
    async def handle_trading_domain(
        _request: Request, exc: TradingDomainError
    ) -> Response:
        """Catch-all for unhandled trading domain errors."""
        logger.error("Unhandled trading domain error: %s", exc.message)
        return error_response(HTTP_500, exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> Response:
        """Catch-all for unexpected errors."""
        logger.exception("Error en crearTrade: %s", type(exc).__name__)
        return error_response(HTTP_500, str(exc) or type(exc).__name__)
