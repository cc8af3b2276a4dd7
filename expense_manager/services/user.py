from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from expense_manager.exceptions import ConflictError, NotFoundError
from expense_manager.models import User, UserProfile, UserStatus, now_utc
from expense_manager.schemas.user import UserResponse
from expense_manager.services.latency import simulate_latency

if TYPE_CHECKING:
    from expense_manager.schemas.user import CreateUserRequest
    from expense_manager.store import InMemoryStore

logger = logging.getLogger(__name__)


def build_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role,
        status=user.status,
        created_at=user.created_at,
    )


def _get_user_index_or_404(store: InMemoryStore, user_id: str) -> int:
    index = store.find_user_index(user_id)
    if index is None:
        raise NotFoundError("User not found")
    return index


async def get_all_users(store: InMemoryStore) -> list[User]:
    """Return every user in creation order."""
    await simulate_latency("get_all_users")
    return list(store.users)


async def get_user_by_id(store: InMemoryStore, user_id: str) -> User | None:
    """Fetch a user. Returns None if not found."""
    await simulate_latency("get_user_by_id")
    index = store.find_user_index(user_id)
    return None if index is None else store.users[index]


async def create_user(store: InMemoryStore, payload: CreateUserRequest) -> User:
    """Add a user. Email must not already be in use.

    Uniqueness is checked here only; profile edits may later reuse an
    address.
    """
    await simulate_latency("create_user")
    if any(u.email == payload.email for u in store.users):
        raise ConflictError("Email already exists")

    user = User(
        name=payload.name,
        email=payload.email,
        role=payload.role,
        status=payload.status,
        created_at=now_utc(),
    )
    store.users.append(user)
    store.profiles[user.id] = UserProfile(user_id=user.id)
    logger.info("User %s created with role %s", user.id, user.role.value)
    return user


async def update_user_status(store: InMemoryStore, user_id: str, status: UserStatus) -> User:
    """Activate or deactivate a user."""
    await simulate_latency("update_user_status")
    index = _get_user_index_or_404(store, user_id)
    updated = store.users[index].model_copy(update={"status": status})
    store.users[index] = updated
    logger.info("User %s marked %s", user_id, status.value)
    return updated


async def delete_user(store: InMemoryStore, user_id: str) -> None:
    """Remove a user and their profile. Their expenses are kept."""
    await simulate_latency("delete_user")
    _get_user_index_or_404(store, user_id)
    store.users = [u for u in store.users if u.id != user_id]
    store.profiles.pop(user_id, None)
    logger.info("User %s deleted", user_id)
