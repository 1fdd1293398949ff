"""
Pydantic schemas for the trades API request/response contract.

Field names on the wire are the public JSON names (monto, idCliente, ...);
Python attributes use snake_case through aliases.
Presence and range rules live in the domain validator, not here.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class CreateTradeRequest(BaseModel):
    """Request body for trade creation.

    Attributes:
        amount: Trade amount (``monto``). Required by the validator, >= 0.
        channel: Optional channel label (``canal``).
        creation_date: ISO date (``fechaCreacion``). Defaults to today.
        client_id: Client reference (``idCliente``). Required by the validator.
    """

    model_config = ConfigDict(populate_by_name=True)

    amount: Decimal | None = Field(default=None, alias="monto")
    channel: str | None = Field(default=None, alias="canal")
    creation_date: date | None = Field(default=None, alias="fechaCreacion")
    client_id: int | None = Field(default=None, alias="idCliente")


class TradePayload(BaseModel):
    """A persisted trade as returned to the caller."""

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = Field(default=None, alias="idTrade")
    amount: float = Field(alias="monto")
    channel: str | None = Field(default=None, alias="canal")
    creation_date: date = Field(alias="fechaCreacion")
    client_id: int = Field(alias="idCliente")


class CreateTradeResponse(BaseModel):
    """Response schema for a created trade."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    trade_id: int = Field(alias="idTrade")
    payload: TradePayload


class ErrorResponse(BaseModel):
    """Error body shared by every failure response."""

    error: str


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str
    version: str
