from __future__ import annotations

import enum


class ExpenseStatus(enum.StrEnum):
    """Review state of an expense. Only PENDING may change, and only once."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class UserRole(enum.StrEnum):
    """Role selected at login; decides which dashboard a user sees."""

    EMPLOYEE = "employee"
    MANAGER = "manager"
    ADMIN = "admin"


class UserStatus(enum.StrEnum):
    """Whether a user account is active."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class ApprovalRequirement(enum.StrEnum):
    """When manager approval is required. Stored only, never enforced."""

    ALWAYS = "always"
    THRESHOLD = "threshold"
    NEVER = "never"


class SortOrder(enum.StrEnum):
    """Direction for sorted expense listings."""

    ASC = "asc"
    DESC = "desc"


class ExpenseSortKey(enum.StrEnum):
    """Fields an expense listing can be sorted by."""

    DATE = "date"
    AMOUNT = "amount"
    SUBMITTED_AT = "submitted_at"
    EMPLOYEE_NAME = "employee_name"
    CATEGORY = "category"
    STATUS = "status"
