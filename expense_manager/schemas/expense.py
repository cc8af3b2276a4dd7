# ruff: noqa: TC003
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Self

from pydantic import BaseModel, Field, model_validator

from expense_manager.models.enums import ExpenseSortKey, ExpenseStatus, SortOrder

# ---------------------------------------------------------------------------
# Request payloads
# ---------------------------------------------------------------------------


class CreateExpenseRequest(BaseModel):
    """Request body for submitting a new expense."""

    employee_id: str = Field(min_length=1, max_length=64)
    employee_name: str = Field(min_length=1, max_length=200)
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    category: str = Field(min_length=1, max_length=50)
    description: str = Field(default="", max_length=1000)
    date: date


class ReviewExpenseRequest(BaseModel):
    """Request body for approve/reject actions.

    ``reviewed_by`` may be omitted when the caller sends ``X-User-Id``; the
    reviewer's display name is then taken from that user's record.
    """

    reviewed_by: str | None = Field(default=None, min_length=1, max_length=200)


class ExpenseQuery(BaseModel):
    """Filter and sort criteria for listing expenses."""

    status: ExpenseStatus | None = None
    category: str | None = None
    employee_id: str | None = None
    date_from: date | None = None
    date_to: date | None = None
    sort_by: ExpenseSortKey = ExpenseSortKey.SUBMITTED_AT
    order: SortOrder = SortOrder.DESC
    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=50, ge=1, le=100)

    @model_validator(mode="after")
    def _validate_range(self) -> Self:
        if self.date_from is not None and self.date_to is not None and self.date_to < self.date_from:
            msg = "date_to must not be before date_from"
            raise ValueError(msg)
        return self


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class ExpenseResponse(BaseModel):
    """Response schema for a single expense."""

    id: str
    employee_id: str
    employee_name: str
    amount: Decimal
    category: str
    description: str
    date: date
    status: ExpenseStatus
    submitted_at: datetime
    reviewed_at: datetime | None
    reviewed_by: str | None


class ExpenseListResponse(BaseModel):
    """Paginated list of expenses."""

    items: list[ExpenseResponse]
    total: int
