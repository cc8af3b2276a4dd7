from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from expense_manager.exceptions import NotFoundError
from expense_manager.models import UserProfile
from expense_manager.schemas.profile import ProfileResponse
from expense_manager.services.latency import simulate_latency

if TYPE_CHECKING:
    from expense_manager.models import User
    from expense_manager.schemas.profile import UpdateProfileRequest
    from expense_manager.store import InMemoryStore

logger = logging.getLogger(__name__)

_USER_FIELDS = frozenset({"name", "email"})


def _build_profile_response(user: User, profile: UserProfile) -> ProfileResponse:
    return ProfileResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role,
        phone=profile.phone,
        department=profile.department,
        manager=profile.manager,
        company=profile.company,
        currency=profile.currency,
    )


async def get_user_profile(store: InMemoryStore, user_id: str) -> ProfileResponse | None:
    """Return the user's profile, or None if the user does not exist."""
    await simulate_latency("get_user_profile")
    index = store.find_user_index(user_id)
    if index is None:
        return None
    profile = store.profiles.get(user_id) or UserProfile(user_id=user_id)
    return _build_profile_response(store.users[index], profile)


async def update_user_profile(
    store: InMemoryStore,
    user_id: str,
    payload: UpdateProfileRequest,
) -> ProfileResponse:
    """Apply a partial profile edit.

    Name and email are written to the user record; email is not re-checked
    for uniqueness.
    """
    await simulate_latency("update_user_profile")
    index = store.find_user_index(user_id)
    if index is None:
        raise NotFoundError("User not found")

    changes = payload.model_dump(exclude_none=True)
    user_changes = {k: v for k, v in changes.items() if k in _USER_FIELDS}
    profile_changes = {k: v for k, v in changes.items() if k not in _USER_FIELDS}

    user = store.users[index].model_copy(update=user_changes)
    store.users[index] = user
    profile = (store.profiles.get(user_id) or UserProfile(user_id=user_id)).model_copy(update=profile_changes)
    store.profiles[user_id] = profile

    logger.info("Profile %s updated: %s", user_id, sorted(changes))
    return _build_profile_response(user, profile)
