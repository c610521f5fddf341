"""
Template API Routes

Occurrence generation and template-to-children sync.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.error import raise_for_error
from src.app.services.scheduling_policy import SchedulingPolicy
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.scheduling import GenerateOccurrencesResponse, GenerateOccurrencesUseCase
from src.app.use_cases.sync import SyncChildrenFromTemplateUseCase, SyncResponse
from src.depends import get_scheduling_policy, get_unit_of_work
from src.domain.entities import SyncScope

router = APIRouter(prefix="/templates", tags=["Templates"])


@router.post(
    "/{template_id}/occurrences",
    status_code=status.HTTP_200_OK,
    response_model=GenerateOccurrencesResponse,
)
async def generate_occurrences(
    template_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    policy: SchedulingPolicy = Depends(get_scheduling_policy),
):
    """
    Generate Occurrences

    Expands a recurring template into occurrence sessions up to its end date
    (or the configured horizon). Idempotent: only missing dates are created.
    Called after a template is saved and by the periodic job.

    Raises:
        - 404 Not Found: SESSION_NOT_FOUND
        - 422 Unprocessable Entity: VALIDATION_ERROR (malformed recurrence rule)
        - 500 Internal Server Error: STORE_ERROR
    """
    use_case = GenerateOccurrencesUseCase(uow, policy)
    result = await use_case.execute(template_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{template_id}/sync-children",
    status_code=status.HTTP_200_OK,
    response_model=SyncResponse,
)
async def sync_children_from_template(
    template_id: UUID,
    scope: Optional[SyncScope] = Query(None, description="Override the configured template sync scope"),
    uow: UnitOfWork = Depends(get_unit_of_work),
    policy: SchedulingPolicy = Depends(get_scheduling_policy),
):
    """
    Sync Children From Template

    Overwrites the item and user assignments of the template's occurrences
    with the template's own. Default scope touches every occurrence.

    Raises:
        - 404 Not Found: SESSION_NOT_FOUND
        - 500 Internal Server Error: STORE_ERROR
    """
    use_case = SyncChildrenFromTemplateUseCase(uow, policy)
    result = await use_case.execute(template_id, scope=scope)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
