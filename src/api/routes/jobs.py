"""
Job API Routes

Entry points for the periodic trigger (cron, scheduler service).
Every job is idempotent and safe to call more than once a day.
"""

from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.scheduling_policy import SchedulingPolicy
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.lifecycle import (
    ActivateScheduledSessionsUseCase,
    AutoCloseExpiredSessionsUseCase,
    StatusJobResponse,
)
from src.app.use_cases.scheduling import (
    GenerateAllOccurrencesResponse,
    GenerateAllOccurrencesUseCase,
)
from src.depends import get_scheduling_policy, get_unit_of_work

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.post(
    "/generate-occurrences",
    status_code=status.HTTP_200_OK,
    response_model=GenerateAllOccurrencesResponse,
)
async def generate_all_occurrences(
    uow: UnitOfWork = Depends(get_unit_of_work),
    policy: SchedulingPolicy = Depends(get_scheduling_policy),
):
    """Slide the generation horizon forward for every recurring template"""
    use_case = GenerateAllOccurrencesUseCase(uow, policy)
    result = await use_case.execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/activate-scheduled",
    status_code=status.HTTP_200_OK,
    response_model=StatusJobResponse,
)
async def activate_scheduled_sessions(
    uow: UnitOfWork = Depends(get_unit_of_work),
    policy: SchedulingPolicy = Depends(get_scheduling_policy),
):
    """Activate scheduled sessions dated today"""
    use_case = ActivateScheduledSessionsUseCase(uow, policy)
    result = await use_case.execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/auto-close-expired",
    status_code=status.HTTP_200_OK,
    response_model=StatusJobResponse,
)
async def auto_close_expired_sessions(
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Close active sessions whose validity window has ended"""
    use_case = AutoCloseExpiredSessionsUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value
