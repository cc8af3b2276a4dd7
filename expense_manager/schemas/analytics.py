from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel


class CategoryTotal(BaseModel):
    """Amount spent in one category across all statuses."""

    category: str
    total_amount: Decimal
    count: int


class StatusCount(BaseModel):
    """Number of expenses in one status."""

    status: str
    count: int


class AnalyticsSummaryResponse(BaseModel):
    """Company-wide expense statistics."""

    total_employees: int
    total_expenses: int
    pending_count: int
    approved_count: int
    rejected_count: int
    total_approved_amount: Decimal
    pending_amount: Decimal
    by_category: list[CategoryTotal]
    by_status: list[StatusCount]
