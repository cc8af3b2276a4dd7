import logging
from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel

from expense_manager.config import get_settings
from expense_manager.store import StoreDep

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["ok", "degraded", "error"]
    version: str
    environment: str
    expenses: int
    users: int


@router.get("/health", response_model=HealthResponse)
async def health(store: StoreDep) -> HealthResponse:
    """Return the health status of the API service and the size of the mock store."""
    settings = get_settings()
    status: Literal["ok", "degraded", "error"] = "ok"

    if settings.seed_fixtures and not store.users:
        logger.warning("Health check: store expected fixtures but holds no users")
        status = "degraded"

    return HealthResponse(
        status=status,
        version=settings.app_version,
        environment=settings.environment,
        expenses=len(store.expenses),
        users=len(store.users),
    )
