"""
Sync Siblings Forward Use Case

Copies an edited occurrence's assignments onto its sibling occurrences.
"""

import logging
from typing import Optional, Union
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.assignment_propagator import AssignmentPropagator
from src.app.services.keyed_lock import KeyedLock, assignment_locks
from src.app.services.scheduling_policy import SchedulingPolicy
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import SyncScope
from src.domain.errors import StoreError

from .dtos import SyncResponse

logger = logging.getLogger(__name__)


class SyncSiblingsForwardUseCase:
    """
    Use case for pushing one occurrence's item/user sets to its siblings.

    Business Rules:
    - Only generated occurrences (with a parent) have siblings; others are a no-op
    - future_only (default): siblings dated strictly after the edited occurrence
    - all: every sibling regardless of date
    - The edited occurrence itself is never a target
    - Full replace per target; one target failing does not stop the others
    """

    def __init__(
        self,
        uow: UnitOfWork,
        policy: Optional[SchedulingPolicy] = None,
        locks: KeyedLock = assignment_locks,
    ):
        self.uow = uow
        self.policy = policy or SchedulingPolicy()
        self.propagator = AssignmentPropagator(uow, locks)

    async def execute(
        self, session_id: UUID, scope: Optional[Union[SyncScope, str]] = None
    ) -> Result[SyncResponse]:
        """
        Execute sync siblings forward use case.

        Args:
            session_id: The edited occurrence
            scope: Date filter for siblings (defaults to the configured sibling scope)

        Returns:
            Result with SyncResponse, or Error

        Errors:
            - SESSION_NOT_FOUND: Session does not exist
            - STORE_ERROR: Loading the session or its siblings failed
        """
        scope = SyncScope(scope or self.policy.sibling_sync_scope)

        async with self.uow:
            try:
                session = await self.uow.sessions.get_by_id(session_id)
                if session is None:
                    return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))

                response = SyncResponse(source_session_id=str(session_id), scope=scope)

                if session.parent_session_id is None:
                    logger.info(f"Session {session_id} is not an occurrence, no siblings to sync")
                    return Return.ok(response)

                if scope == SyncScope.future_only and session.session_date is None:
                    return Return.ok(response)

                after_date = session.session_date if scope == SyncScope.future_only else None
                siblings = await self.uow.sessions.get_children(
                    session.parent_session_id, after_date=after_date, exclude_id=session_id
                )
                target_ids = [sibling.id for sibling in siblings]
                item_ids = await self.uow.assignments.get_item_ids(session_id)
                user_ids = await self.uow.assignments.get_user_ids(session_id)
            except StoreError as exc:
                logger.error(f"Loading siblings of {session_id} failed: {exc}")
                return Return.err(
                    Error("STORE_ERROR", "Could not load sibling sessions", reason=str(exc))
                )

            results = await self.propagator.replace_many(target_ids, item_ids, user_ids)

        response.targets = len(target_ids)
        response.updated = sum(1 for r in results if r.ok)
        for r in results:
            response.errors.extend(r.errors)

        logger.info(
            f"Synced {response.updated}/{response.targets} siblings of session {session_id}"
        )
        return Return.ok(response)
