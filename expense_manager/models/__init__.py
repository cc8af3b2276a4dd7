from expense_manager.models.base import new_id, now_utc, to_cents
from expense_manager.models.enums import (
    ApprovalRequirement,
    ExpenseSortKey,
    ExpenseStatus,
    SortOrder,
    UserRole,
    UserStatus,
)
from expense_manager.models.expense import Expense
from expense_manager.models.user import User, UserProfile
from expense_manager.models.workflow import WorkflowSettings

__all__ = [
    "ApprovalRequirement",
    "Expense",
    "ExpenseSortKey",
    "ExpenseStatus",
    "SortOrder",
    "User",
    "UserProfile",
    "UserRole",
    "UserStatus",
    "WorkflowSettings",
    "new_id",
    "now_utc",
    "to_cents",
]
