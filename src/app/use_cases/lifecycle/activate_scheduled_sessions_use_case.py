"""
Activate Scheduled Sessions Use Case

Periodic job: opens the sessions scheduled for today.
"""

import logging
from datetime import datetime
from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.scheduling_policy import SchedulingPolicy
from src.app.services.unit_of_work import UnitOfWork
from src.domain.clock import local_today, utc_now
from src.domain.entities import OccurrenceLogStatus, SessionStatus
from src.domain.errors import StoreError

from .dtos import StatusJobResponse

logger = logging.getLogger(__name__)


class ActivateScheduledSessionsUseCase:
    """
    Business Rules:
    - scheduled sessions with scheduled_date == today become active
    - a session whose valid_from is still in the future waits for a later run
    - the generation log of activated occurrences moves to "activated"
    """

    def __init__(self, uow: UnitOfWork, policy: Optional[SchedulingPolicy] = None):
        self.uow = uow
        self.policy = policy or SchedulingPolicy()

    async def execute(self, now: Optional[datetime] = None) -> Result[StatusJobResponse]:
        now = now or utc_now()
        today = local_today(now, self.policy.tz)

        async with self.uow:
            try:
                due = await self.uow.sessions.get_scheduled_due(today, now)
                for session in due:
                    session.status = SessionStatus.active
                    await self.uow.sessions.update(session)

                session_ids = [session.id for session in due]
                if session_ids:
                    await self.uow.occurrence_logs.mark(session_ids, OccurrenceLogStatus.activated)
                await self.uow.commit()
            except StoreError as exc:
                logger.error(f"Activating scheduled sessions failed: {exc}")
                return Return.err(
                    Error("STORE_ERROR", "Could not activate scheduled sessions", reason=str(exc))
                )

        logger.info(f"Activated {len(session_ids)} scheduled sessions for {today.isoformat()}")
        return Return.ok(
            StatusJobResponse(count=len(session_ids), session_ids=[str(i) for i in session_ids])
        )
