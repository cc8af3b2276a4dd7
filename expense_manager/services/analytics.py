"""Expense statistics shown on the analytics and manager dashboards."""

from __future__ import annotations

import asyncio
from collections import defaultdict
from decimal import Decimal
from typing import TYPE_CHECKING

from expense_manager.models import ExpenseStatus, UserStatus, to_cents
from expense_manager.schemas.analytics import AnalyticsSummaryResponse, CategoryTotal, StatusCount
from expense_manager.services import expense as expense_service
from expense_manager.services import user as user_service

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from expense_manager.models import Expense, User
    from expense_manager.store import InMemoryStore


def total_amount(expenses: Iterable[Expense]) -> Decimal:
    """Sum expense amounts, rounded to cents."""
    return to_cents(sum((e.amount for e in expenses), Decimal(0)))


def category_totals(expenses: Iterable[Expense]) -> list[CategoryTotal]:
    """Per-category amount and count, ordered by category name."""
    amounts: dict[str, Decimal] = defaultdict(Decimal)
    counts: dict[str, int] = defaultdict(int)
    for expense in expenses:
        amounts[expense.category] += expense.amount
        counts[expense.category] += 1
    return [
        CategoryTotal(category=category, total_amount=to_cents(amounts[category]), count=counts[category])
        for category in sorted(amounts)
    ]


def summarize(expenses: Sequence[Expense], users: Iterable[User]) -> AnalyticsSummaryResponse:
    """Compute dashboard statistics over a snapshot of expenses and users."""
    by_status: dict[ExpenseStatus, list[Expense]] = {status: [] for status in ExpenseStatus}
    for expense in expenses:
        by_status[expense.status].append(expense)

    return AnalyticsSummaryResponse(
        total_employees=sum(1 for u in users if u.status == UserStatus.ACTIVE),
        total_expenses=len(expenses),
        pending_count=len(by_status[ExpenseStatus.PENDING]),
        approved_count=len(by_status[ExpenseStatus.APPROVED]),
        rejected_count=len(by_status[ExpenseStatus.REJECTED]),
        total_approved_amount=total_amount(by_status[ExpenseStatus.APPROVED]),
        pending_amount=total_amount(by_status[ExpenseStatus.PENDING]),
        by_category=category_totals(expenses),
        by_status=[StatusCount(status=s.value, count=len(items)) for s, items in by_status.items()],
    )


async def get_summary(store: InMemoryStore) -> AnalyticsSummaryResponse:
    """Fetch expenses and users concurrently, then summarize them."""
    expenses, users = await asyncio.gather(
        expense_service.get_all_expenses(store),
        user_service.get_all_users(store),
    )
    return summarize(expenses, users)
