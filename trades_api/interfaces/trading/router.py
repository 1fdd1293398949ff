"""
FastAPI router for trade creation.

Routes delegate to the use case. No business logic here.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends
from pydantic import ValidationError

from trades_api.application.trading.create_trade import CreateTradeUseCase
from trades_api.application.trading.dtos import CreateTradeCommand
from trades_api.domain.trading.errors import TradeValidationError
from trades_api.domain.trading.trade_validator import ensure_body_present
from trades_api.interfaces.trading.dependencies import (
    get_create_trade_use_case,
    read_raw_body,
)
from trades_api.interfaces.trading.schemas import (
    CreateTradeRequest,
    CreateTradeResponse,
    ErrorResponse,
    TradePayload,
)

router = APIRouter(tags=["trades"])

SUCCESS_MESSAGE = "Trade creado"


def _describe_validation_error(exc: ValidationError) -> str:
    """Summarize a pydantic error as ``field: message`` pairs."""
    parts = []
    for err in exc.errors():
        field = ".".join(str(loc) for loc in err["loc"])
        parts.append(f"{field}: {err['msg']}" if field else err["msg"])
    return "; ".join(parts)


def parse_create_trade_request(body: str) -> CreateTradeRequest:
    """Decode a JSON body into a CreateTradeRequest.

    Raises:
        TradeValidationError: If the body is blank, not JSON, not an object,
            or carries a field of the wrong type.
    """
    ensure_body_present(body)
    try:
        return CreateTradeRequest.model_validate_json(body)
    except ValidationError as exc:
        raise TradeValidationError(_describe_validation_error(exc)) from exc


@router.post(
    "/trades",
    response_model=CreateTradeResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Create a trade",
    description=(
        "Validate and store a trade, then publish a trade.created.v1 event. "
        "Event publishing is best-effort and never fails the request."
    ),
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": CreateTradeRequest.model_json_schema(by_alias=True)
                }
            },
        }
    },
)
def create_trade(
    body: str = Depends(read_raw_body),
    use_case: CreateTradeUseCase = Depends(get_create_trade_use_case),
) -> CreateTradeResponse:
    """Create a trade from the raw JSON body."""
    request = parse_create_trade_request(body)
    command = CreateTradeCommand(
        amount=request.amount,
        client_id=request.client_id,
        creation_date=request.creation_date,
        channel=request.channel,
    )
    result = use_case.execute(command)
    trade = result.trade
    return CreateTradeResponse(
        message=SUCCESS_MESSAGE,
        trade_id=result.trade_id,
        payload=TradePayload(
            id=trade.id,
            amount=float(trade.amount),
            channel=trade.channel,
            creation_date=trade.creation_date,
            client_id=trade.client_id,
        ),
    )
