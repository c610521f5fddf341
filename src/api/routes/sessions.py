"""
Session API Routes

Access checks, selection lists, assignments, status and deletion.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.scheduling_policy import SchedulingPolicy
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.access import (
    CheckWriteAccessUseCase,
    ListSelectableSessionsUseCase,
    SelectableSessionsResponse,
    WriteAccessResponse,
)
from src.app.use_cases.lifecycle import (
    ChangeSessionStatusUseCase,
    ChangeStatusResponse,
    DeleteSessionResponse,
    DeleteSessionUseCase,
)
from src.app.use_cases.sync import (
    ReplaceAssignmentsResponse,
    ReplaceAssignmentsUseCase,
    SyncResponse,
    SyncSiblingsForwardUseCase,
)
from src.depends import get_scheduling_policy, get_unit_of_work
from src.domain.entities import SyncScope

router = APIRouter(prefix="/sessions", tags=["Sessions"])


class ReplaceAssignmentsRequest(BaseModel):
    """Request to replace the assignment sets of a session"""

    item_ids: List[UUID] = Field(default_factory=list)
    user_ids: List[UUID] = Field(default_factory=list)
    propagate: bool = Field(
        False, description="Also sync siblings (occurrence) or children (template)"
    )


class ChangeStatusRequest(BaseModel):
    """Request to change a session status"""

    status: str


@router.get(
    "/selectable",
    status_code=status.HTTP_200_OK,
    response_model=SelectableSessionsResponse,
)
async def list_selectable_sessions(
    user_id: Optional[UUID] = Query(None, description="Only sessions assigned to this user"),
    uow: UnitOfWork = Depends(get_unit_of_work),
    policy: SchedulingPolicy = Depends(get_scheduling_policy),
):
    """
    List Selectable Sessions

    Sessions a counter may see and pick right now. Hides templates,
    scheduled sessions not dated today and sessions outside their window.
    """
    use_case = ListSelectableSessionsUseCase(uow, policy)
    result = await use_case.execute(user_id=user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{session_id}/write-access",
    status_code=status.HTTP_200_OK,
    response_model=WriteAccessResponse,
)
async def check_write_access(
    session_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Check Write Access

    Whether counts may be saved to the session now, with a typed reason when
    blocked and the remaining-time bucket for countdown display. An unknown
    session is reported as blocked (session_not_found), not as 404.
    """
    use_case = CheckWriteAccessUseCase(uow)
    result = await use_case.execute(session_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put(
    "/{session_id}/assignments",
    status_code=status.HTTP_200_OK,
    response_model=ReplaceAssignmentsResponse,
)
async def replace_assignments(
    session_id: UUID,
    request: ReplaceAssignmentsRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    policy: SchedulingPolicy = Depends(get_scheduling_policy),
):
    """
    Replace Assignments

    Full replace of the session's items and users.

    Raises:
        - 404 Not Found: SESSION_NOT_FOUND
        - 500 Internal Server Error: STORE_ERROR
    """
    use_case = ReplaceAssignmentsUseCase(uow, policy)
    result = await use_case.execute(
        session_id, request.item_ids, request.user_ids, propagate=request.propagate
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{session_id}/sync-forward",
    status_code=status.HTTP_200_OK,
    response_model=SyncResponse,
)
async def sync_siblings_forward(
    session_id: UUID,
    scope: Optional[SyncScope] = Query(None, description="Override the configured sibling sync scope"),
    uow: UnitOfWork = Depends(get_unit_of_work),
    policy: SchedulingPolicy = Depends(get_scheduling_policy),
):
    """
    Sync Siblings Forward

    Copies the occurrence's item and user sets onto its sibling occurrences
    dated after it (default scope). No-op for sessions without a template.

    Raises:
        - 404 Not Found: SESSION_NOT_FOUND
        - 500 Internal Server Error: STORE_ERROR
    """
    use_case = SyncSiblingsForwardUseCase(uow, policy)
    result = await use_case.execute(session_id, scope=scope)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/{session_id}/status",
    status_code=status.HTTP_200_OK,
    response_model=ChangeStatusResponse,
)
async def change_session_status(
    session_id: UUID,
    request: ChangeStatusRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change Session Status

    Raises:
        - 400 Bad Request: INVALID_STATUS
        - 404 Not Found: SESSION_NOT_FOUND
        - 409 Conflict: INVALID_TRANSITION
        - 422 Unprocessable Entity: VALIDATION_ERROR
        - 500 Internal Server Error: STORE_ERROR
    """
    use_case = ChangeSessionStatusUseCase(uow)
    result = await use_case.execute(session_id, request.status)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{session_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteSessionResponse,
)
async def delete_session(
    session_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Session

    Hard delete with its assignments. Occurrences of a deleted template are
    kept and detached.

    Raises:
        - 404 Not Found: SESSION_NOT_FOUND
        - 500 Internal Server Error: STORE_ERROR
    """
    use_case = DeleteSessionUseCase(uow)
    result = await use_case.execute(session_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
