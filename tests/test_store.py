"""Tests for the in-memory store and its fixture seeding."""

from __future__ import annotations

from expense_manager import fixtures
from expense_manager.models import ExpenseStatus
from expense_manager.store import InMemoryStore, build_seeded_store, get_store, reset_store, set_store


def test_seeded_store_contents() -> None:
    store = build_seeded_store()
    assert [e.id for e in store.expenses] == ["exp-001", "exp-002", "exp-003", "exp-004", "exp-005", "exp-006"]
    assert len(store.users) == 5
    assert set(store.profiles) == {u.id for u in store.users}
    assert store.workflow.auto_approve_threshold == fixtures.WORKFLOW.auto_approve_threshold


def test_mutating_store_leaves_fixtures_untouched() -> None:
    store = build_seeded_store()
    store.expenses[0] = store.expenses[0].model_copy(update={"status": ExpenseStatus.APPROVED})
    store.workflow.approval_sequence.clear()
    store.users.clear()

    assert fixtures.EXPENSES[0].status == ExpenseStatus.PENDING
    assert len(fixtures.WORKFLOW.approval_sequence) == 2
    assert len(fixtures.USERS) == 5


def test_reset_store_reseeds() -> None:
    get_store().expenses.clear()
    store = reset_store()
    assert get_store() is store
    assert len(store.expenses) == 6


def test_reset_store_without_seed() -> None:
    store = reset_store(seed=False)
    assert store.expenses == []
    assert store.users == []


def test_set_store_overrides() -> None:
    custom = InMemoryStore()
    set_store(custom)
    assert get_store() is custom


def test_find_indexes() -> None:
    store = build_seeded_store()
    assert store.find_expense_index("exp-003") == 2
    assert store.find_expense_index("exp-999") is None
    assert store.find_user_index("user-005") == 4
    assert store.find_user_index("user-999") is None
