"""
List Selectable Sessions Use Case

Filters sessions down to the ones a counter may see and pick.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.scheduling_policy import SchedulingPolicy
from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_control import is_visible_for_selection, remaining_time_bucket
from src.domain.clock import local_today, utc_now
from src.domain.entities import SessionStatus
from src.domain.errors import StoreError

from .dtos import SelectableSession, SelectableSessionsResponse


def _iso(value) -> Optional[str]:
    return value.isoformat() if value is not None else None


class ListSelectableSessionsUseCase:
    """
    Use case for the session picker.

    Business Rules:
    - Every session passes through is_visible_for_selection
    - Status is left to check_write_access, so a closed session may be listed
    - With a user_id, only sessions assigned to that user are listed
    """

    def __init__(self, uow: UnitOfWork, policy: Optional[SchedulingPolicy] = None):
        self.uow = uow
        self.policy = policy or SchedulingPolicy()

    async def execute(
        self, user_id: Optional[UUID] = None, now: Optional[datetime] = None
    ) -> Result[SelectableSessionsResponse]:
        now = now or utc_now()
        today = local_today(now, self.policy.tz)

        async with self.uow:
            try:
                candidates = await self.uow.sessions.get_selection_candidates(user_id=user_id)
            except StoreError as exc:
                return Return.err(Error("STORE_ERROR", "Could not load sessions", reason=str(exc)))

            sessions = [
                SelectableSession(
                    id=str(s.id),
                    name=s.name,
                    type=s.type,
                    status=SessionStatus(s.status).value,
                    session_date=_iso(s.session_date),
                    valid_from=_iso(s.valid_from),
                    valid_until=_iso(s.valid_until),
                    remaining_bucket=remaining_time_bucket(s.valid_until, now),
                )
                for s in candidates
                if is_visible_for_selection(s, now, today)
            ]

        return Return.ok(SelectableSessionsResponse(sessions=sessions))
