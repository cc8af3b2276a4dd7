from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from expense_manager.schemas.workflow import WorkflowSettingsResponse
from expense_manager.services.latency import simulate_latency

if TYPE_CHECKING:
    from expense_manager.models import WorkflowSettings
    from expense_manager.schemas.workflow import UpdateWorkflowSettingsRequest
    from expense_manager.store import InMemoryStore

logger = logging.getLogger(__name__)


def build_workflow_response(settings: WorkflowSettings) -> WorkflowSettingsResponse:
    return WorkflowSettingsResponse(
        auto_approve_threshold=settings.auto_approve_threshold,
        require_manager_approval=settings.require_manager_approval,
        approval_sequence=list(settings.approval_sequence),
    )


async def get_workflow_settings(store: InMemoryStore) -> WorkflowSettings:
    """Return a copy of the workflow settings singleton."""
    await simulate_latency("get_workflow_settings")
    return store.workflow.model_copy(deep=True)


async def update_workflow_settings(
    store: InMemoryStore,
    payload: UpdateWorkflowSettingsRequest,
) -> WorkflowSettings:
    """Merge the provided fields over the current settings.

    The previous value is discarded; no history is kept.
    """
    await simulate_latency("update_workflow_settings")
    changes = payload.model_dump(exclude_none=True)
    store.workflow = store.workflow.model_copy(update=changes)
    logger.info("Workflow settings updated: %s", sorted(changes))
    return store.workflow.model_copy(deep=True)
