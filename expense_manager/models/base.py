from __future__ import annotations

import uuid
from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")


def new_id(prefix: str) -> str:
    """Generate a prefixed record identifier, e.g. ``exp-3f2a9c0d1b7e``."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def now_utc() -> datetime:
    """Return the current UTC time."""
    return datetime.now(UTC)


def to_cents(value: Decimal) -> Decimal:
    """Round a currency amount to two decimal places."""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)
