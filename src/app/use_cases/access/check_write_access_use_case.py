"""
Check Write Access Use Case

Loads a session and classifies whether counts may be saved to it now.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_control import classify_write_access, remaining_time, remaining_time_bucket
from src.domain.clock import utc_now
from src.domain.errors import StoreError

from .dtos import WriteAccessResponse


class CheckWriteAccessUseCase:
    """
    Use case for the write path.

    A missing session is a blocked classification (session_not_found),
    not an error: callers always get a typed reason back.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, session_id: UUID, now: Optional[datetime] = None
    ) -> Result[WriteAccessResponse]:
        now = now or utc_now()

        async with self.uow:
            try:
                session = await self.uow.sessions.get_by_id(session_id)
            except StoreError as exc:
                return Return.err(Error("STORE_ERROR", "Could not load session", reason=str(exc)))

            access = classify_write_access(session, now)
            valid_until = session.valid_until if session is not None else None

        left = remaining_time(valid_until, now)

        return Return.ok(
            WriteAccessResponse(
                session_id=str(session_id),
                access=access,
                remaining_seconds=int(left.total_seconds()) if left is not None else None,
                remaining_bucket=remaining_time_bucket(valid_until, now),
            )
        )
