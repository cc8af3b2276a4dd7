"""Process-wide in-memory store standing in for a database.

Records are pydantic models replaced wholesale on update, so a reader holding
an old reference never sees a half-applied change. Nothing here is durable:
the store is rebuilt from :mod:`expense_manager.fixtures` on each start.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Annotated

from fastapi import Depends

from expense_manager import fixtures
from expense_manager.models import Expense, User, UserProfile, WorkflowSettings

logger = logging.getLogger(__name__)


@dataclass
class InMemoryStore:
    """Holds every record the mock API serves."""

    expenses: list[Expense] = field(default_factory=list)  # newest first
    users: list[User] = field(default_factory=list)
    profiles: dict[str, UserProfile] = field(default_factory=dict)
    workflow: WorkflowSettings = field(default_factory=WorkflowSettings)

    def find_expense_index(self, expense_id: str) -> int | None:
        for index, expense in enumerate(self.expenses):
            if expense.id == expense_id:
                return index
        return None

    def find_user_index(self, user_id: str) -> int | None:
        for index, user in enumerate(self.users):
            if user.id == user_id:
                return index
        return None


def seed_store(store: InMemoryStore) -> InMemoryStore:
    """Replace the store's contents with copies of the fixture records."""
    store.expenses = [e.model_copy() for e in fixtures.EXPENSES]
    store.users = [u.model_copy() for u in fixtures.USERS]
    store.profiles = {p.user_id: p.model_copy() for p in fixtures.PROFILES}
    store.workflow = fixtures.WORKFLOW.model_copy(deep=True)
    logger.info(
        "Seeded store: %d expenses, %d users",
        len(store.expenses),
        len(store.users),
    )
    return store


def build_seeded_store() -> InMemoryStore:
    """Return a new store loaded with fixture data."""
    return seed_store(InMemoryStore())


_store: InMemoryStore = InMemoryStore()


def get_store() -> InMemoryStore:
    """FastAPI dependency for the in-memory store."""
    return _store


def set_store(store: InMemoryStore) -> None:
    """Override the store (for testing or startup seeding)."""
    global _store
    _store = store


def reset_store(*, seed: bool = True) -> InMemoryStore:
    """Install a fresh store, seeded from fixtures unless ``seed`` is false."""
    store = build_seeded_store() if seed else InMemoryStore()
    set_store(store)
    return store


StoreDep = Annotated[InMemoryStore, Depends(get_store)]
