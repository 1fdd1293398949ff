"""
Validation rules for trade creation.

Checks field presence and ranges, applies the creation-date default and
produces an unpersisted Trade. Pure functions; the current date is injected.
"""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from trades_api.domain.trading.entities import Trade
from trades_api.domain.trading.errors import TradeValidationError

EMPTY_BODY_MESSAGE = "El body no puede ser vacío"
INVALID_AMOUNT_MESSAGE = "monto es obligatorio y debe ser >= 0"
MISSING_CLIENT_MESSAGE = "idCliente es obligatorio"

# Matches the NUMERIC(18,2) storage column.
AMOUNT_QUANTUM = Decimal("0.01")


def ensure_body_present(body: str | None) -> str:
    """Reject an empty or whitespace-only request body.

    Returns:
        The body, unchanged.

    Raises:
        TradeValidationError: If the body is blank.
    """
    if body is None or not body.strip():
        raise TradeValidationError(EMPTY_BODY_MESSAGE)
    return body


def validate_trade(
    *,
    amount: Optional[Decimal],
    client_id: Optional[int],
    today: date,
    creation_date: Optional[date] = None,
    channel: Optional[str] = None,
) -> Trade:
    """Build a valid, unpersisted Trade from decoded request fields.

    Rules are applied in order: amount, creation date default, client id.

    Args:
        amount: Trade amount. Required, must be >= 0. Rounded half-up
            to cents, the precision it is stored with.
        client_id: Client reference. Required.
        today: Date used when ``creation_date`` is omitted.
        creation_date: Optional explicit creation date.
        channel: Optional channel label, passed through untouched.

    Raises:
        TradeValidationError: On the first rule that fails.
    """
    if amount is None or amount < 0:
        raise TradeValidationError(INVALID_AMOUNT_MESSAGE)
    if creation_date is None:
        creation_date = today
    if client_id is None:
        raise TradeValidationError(MISSING_CLIENT_MESSAGE)

    return Trade(
        amount=amount.quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_UP),
        creation_date=creation_date,
        client_id=client_id,
        channel=channel,
    )
