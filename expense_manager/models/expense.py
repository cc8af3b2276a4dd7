from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from expense_manager.models.base import new_id, now_utc, to_cents
from expense_manager.models.enums import ExpenseStatus


class Expense(BaseModel):
    """A single reimbursement request held in the mock store."""

    id: str = Field(default_factory=lambda: new_id("exp"))
    employee_id: str
    employee_name: str
    amount: Decimal = Field(gt=0)
    category: str
    description: str
    date: date
    status: ExpenseStatus = ExpenseStatus.PENDING
    submitted_at: datetime = Field(default_factory=now_utc)
    reviewed_at: datetime | None = None
    reviewed_by: str | None = None

    @field_validator("amount")
    @classmethod
    def _round_amount(cls, value: Decimal) -> Decimal:
        return to_cents(value)

    @property
    def is_reviewed(self) -> bool:
        return self.status != ExpenseStatus.PENDING
