"""
Delete Session Use Case

Hard delete of a template, occurrence or standalone session.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import StoreError

from .dtos import DeleteSessionResponse

logger = logging.getLogger(__name__)


class DeleteSessionUseCase:
    """
    Business Rules:
    - Item and user assignments of the session are deleted with it
    - Generation log rows that mention the session are deleted
    - Occurrences of a deleted template are kept and detached (parent cleared)
    - Everything happens in one transaction
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session_id: UUID) -> Result[DeleteSessionResponse]:
        async with self.uow:
            try:
                session = await self.uow.sessions.get_by_id(session_id)
                if session is None:
                    return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))

                assignments_deleted = await self.uow.assignments.delete_all_for_session(session_id)
                await self.uow.occurrence_logs.delete_for_session(session_id)
                children_detached = await self.uow.sessions.detach_children(session_id)
                await self.uow.sessions.delete(session)
                await self.uow.commit()
            except StoreError as exc:
                logger.error(f"Deleting session {session_id} failed: {exc}")
                return Return.err(Error("STORE_ERROR", "Could not delete session", reason=str(exc)))

        logger.info(
            f"Deleted session {session_id} with {assignments_deleted} assignments, "
            f"detached {children_detached} occurrences"
        )
        return Return.ok(
            DeleteSessionResponse(
                session_id=str(session_id),
                assignments_deleted=assignments_deleted,
                children_detached=children_detached,
            )
        )
