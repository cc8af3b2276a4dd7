"""Static seed data loaded into the mock store on every process start."""

from __future__ import annotations

from datetime import UTC, date, datetime
from decimal import Decimal

from expense_manager.models import (
    ApprovalRequirement,
    Expense,
    ExpenseStatus,
    User,
    UserProfile,
    UserRole,
    UserStatus,
    WorkflowSettings,
)

# Well-known user IDs
JOHN_ID = "user-001"
SARAH_ID = "user-002"
MIKE_ID = "user-003"
EMILY_ID = "user-004"
DAVID_ID = "user-005"


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=UTC)


EXPENSES: tuple[Expense, ...] = (
    Expense(
        id="exp-001",
        employee_id=JOHN_ID,
        employee_name="John Smith",
        amount=Decimal("250.00"),
        category="travel",
        description="Client meeting transportation - Uber to downtown office",
        date=date(2025, 1, 15),
        status=ExpenseStatus.PENDING,
        submitted_at=_ts("2025-01-15T10:30:00"),
    ),
    Expense(
        id="exp-002",
        employee_id=MIKE_ID,
        employee_name="Mike Davis",
        amount=Decimal("85.50"),
        category="meals",
        description="Team lunch at Italian restaurant",
        date=date(2025, 1, 14),
        status=ExpenseStatus.PENDING,
        submitted_at=_ts("2025-01-14T14:20:00"),
    ),
    Expense(
        id="exp-003",
        employee_id=DAVID_ID,
        employee_name="David Wilson",
        amount=Decimal("450.00"),
        category="equipment",
        description="New mechanical keyboard and ergonomic mouse",
        date=date(2025, 1, 13),
        status=ExpenseStatus.APPROVED,
        submitted_at=_ts("2025-01-13T09:15:00"),
        reviewed_at=_ts("2025-01-13T16:45:00"),
        reviewed_by="Sarah Johnson",
    ),
    Expense(
        id="exp-004",
        employee_id=JOHN_ID,
        employee_name="John Smith",
        amount=Decimal("125.00"),
        category="office",
        description="Office supplies - notebooks, pens, sticky notes",
        date=date(2025, 1, 12),
        status=ExpenseStatus.APPROVED,
        submitted_at=_ts("2025-01-12T11:00:00"),
        reviewed_at=_ts("2025-01-12T15:30:00"),
        reviewed_by="Sarah Johnson",
    ),
    Expense(
        id="exp-005",
        employee_id=DAVID_ID,
        employee_name="David Wilson",
        amount=Decimal("75.00"),
        category="meals",
        description="Dinner with potential client",
        date=date(2025, 1, 11),
        status=ExpenseStatus.REJECTED,
        submitted_at=_ts("2025-01-11T19:30:00"),
        reviewed_at=_ts("2025-01-11T20:15:00"),
        reviewed_by="Sarah Johnson",
    ),
    Expense(
        id="exp-006",
        employee_id=MIKE_ID,
        employee_name="Mike Davis",
        amount=Decimal("320.00"),
        category="travel",
        description="Flight tickets for conference",
        date=date(2025, 1, 10),
        status=ExpenseStatus.APPROVED,
        submitted_at=_ts("2025-01-10T08:00:00"),
        reviewed_at=_ts("2025-01-10T10:30:00"),
        reviewed_by="Admin User",
    ),
)

USERS: tuple[User, ...] = (
    User(
        id=JOHN_ID,
        name="John Smith",
        email="john@company.com",
        role=UserRole.EMPLOYEE,
        status=UserStatus.ACTIVE,
        created_at=_ts("2024-01-15T00:00:00"),
    ),
    User(
        id=SARAH_ID,
        name="Sarah Johnson",
        email="sarah@company.com",
        role=UserRole.MANAGER,
        status=UserStatus.ACTIVE,
        created_at=_ts("2024-01-10T00:00:00"),
    ),
    User(
        id=MIKE_ID,
        name="Mike Davis",
        email="mike@company.com",
        role=UserRole.EMPLOYEE,
        status=UserStatus.ACTIVE,
        created_at=_ts("2024-02-01T00:00:00"),
    ),
    User(
        id=EMILY_ID,
        name="Emily Brown",
        email="emily@company.com",
        role=UserRole.ADMIN,
        status=UserStatus.ACTIVE,
        created_at=_ts("2024-01-05T00:00:00"),
    ),
    User(
        id=DAVID_ID,
        name="David Wilson",
        email="david@company.com",
        role=UserRole.EMPLOYEE,
        status=UserStatus.INACTIVE,
        created_at=_ts("2024-03-15T00:00:00"),
    ),
)

PROFILES: tuple[UserProfile, ...] = (
    UserProfile(
        user_id=JOHN_ID,
        phone="+1 (555) 123-4567",
        department="Sales",
        manager="Sarah Johnson",
        company="Acme Corporation",
    ),
    UserProfile(user_id=SARAH_ID, phone="+1 (555) 234-5678", department="Sales", company="Acme Corporation"),
    UserProfile(
        user_id=MIKE_ID,
        phone="+1 (555) 345-6789",
        department="Engineering",
        manager="Sarah Johnson",
        company="Acme Corporation",
    ),
    UserProfile(user_id=EMILY_ID, department="Operations", company="Acme Corporation"),
    UserProfile(user_id=DAVID_ID, department="Engineering", manager="Sarah Johnson", company="Acme Corporation"),
)

WORKFLOW = WorkflowSettings(
    auto_approve_threshold=Decimal("100.00"),
    require_manager_approval=ApprovalRequirement.ALWAYS,
    approval_sequence=[UserRole.MANAGER, UserRole.ADMIN],
)
