"""Artificial network delay for the mock API."""

from __future__ import annotations

import asyncio
import logging

from expense_manager.config import get_settings

logger = logging.getLogger(__name__)

DEFAULT_DELAY_MS = 500

OPERATION_DELAYS_MS: dict[str, int] = {
    # expenses
    "get_all_expenses": 800,
    "get_expenses_by_employee": 600,
    "get_expenses_by_status": 700,
    "get_expense": 500,
    "query_expenses": 800,
    "create_expense": 1000,
    "update_expense_status": 800,
    # users
    "get_all_users": 700,
    "get_user_by_id": 500,
    "create_user": 900,
    "update_user_status": 600,
    "delete_user": 700,
    # workflow
    "get_workflow_settings": 500,
    "update_workflow_settings": 800,
    # profile, auth
    "get_user_profile": 500,
    "update_user_profile": 800,
    "login": 500,
    "signup": 800,
}


def delay_for(operation: str) -> float:
    """Return the delay in seconds for ``operation`` under current settings."""
    settings = get_settings()
    if not settings.simulate_latency:
        return 0.0
    delay_ms = OPERATION_DELAYS_MS.get(operation, DEFAULT_DELAY_MS)
    return delay_ms * settings.latency_scale / 1000


async def simulate_latency(operation: str) -> None:
    """Sleep for the configured delay of ``operation``."""
    seconds = delay_for(operation)
    if seconds <= 0:
        return
    logger.debug("Simulating %.3fs latency for %s", seconds, operation)
    await asyncio.sleep(seconds)
