"""
Auto Close Expired Sessions Use Case

Periodic job: closes active sessions whose validity window has ended.
"""

import logging
from datetime import datetime
from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.clock import to_utc, utc_now
from src.domain.entities import OccurrenceLogStatus, SessionStatus
from src.domain.errors import StoreError

from .dtos import StatusJobResponse

logger = logging.getLogger(__name__)


class AutoCloseExpiredSessionsUseCase:
    """
    Business Rules:
    - active sessions with valid_until < now become closed
    - auto_closed_at records when the job closed them
    - the generation log of closed occurrences moves to "closed"
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, now: Optional[datetime] = None) -> Result[StatusJobResponse]:
        now = to_utc(now or utc_now())

        async with self.uow:
            try:
                expired = await self.uow.sessions.get_active_expired(now)
                for session in expired:
                    session.status = SessionStatus.closed
                    session.auto_closed_at = now
                    await self.uow.sessions.update(session)

                session_ids = [session.id for session in expired]
                if session_ids:
                    await self.uow.occurrence_logs.mark(session_ids, OccurrenceLogStatus.closed)
                await self.uow.commit()
            except StoreError as exc:
                logger.error(f"Auto-closing expired sessions failed: {exc}")
                return Return.err(
                    Error("STORE_ERROR", "Could not close expired sessions", reason=str(exc))
                )

        logger.info(f"Auto-closed {len(session_ids)} expired sessions")
        return Return.ok(
            StatusJobResponse(count=len(session_ids), session_ids=[str(i) for i in session_ids])
        )
