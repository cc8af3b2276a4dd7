from __future__ import annotations

from fastapi import APIRouter

from expense_manager.api.deps import ReviewerDep
from expense_manager.schemas.analytics import AnalyticsSummaryResponse
from expense_manager.services import analytics as analytics_service
from expense_manager.store import StoreDep

analytics_router = APIRouter(prefix="/analytics", tags=["analytics"])


@analytics_router.get("/summary", response_model=AnalyticsSummaryResponse)
async def get_summary(
    store: StoreDep,
    auth: ReviewerDep,
) -> AnalyticsSummaryResponse:
    """Expense totals by status and category (manager or admin)."""
    return await analytics_service.get_summary(store)
