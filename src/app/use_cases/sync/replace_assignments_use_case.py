"""
Replace Assignments Use Case

Sets the item and user assignments of one session, optionally pushing the
new sets to related sessions.
"""

import logging
from typing import Iterable, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.assignment_propagator import AssignmentPropagator
from src.app.services.keyed_lock import KeyedLock, assignment_locks
from src.app.services.scheduling_policy import SchedulingPolicy
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import StoreError

from .dtos import ReplaceAssignmentsResponse
from .sync_children_from_template_use_case import SyncChildrenFromTemplateUseCase
from .sync_siblings_forward_use_case import SyncSiblingsForwardUseCase

logger = logging.getLogger(__name__)


class ReplaceAssignmentsUseCase:
    """
    Use case for replacing a session's assignment sets.

    Business Rules:
    - Full replace of items and users (empty lists clear them)
    - propagate on an occurrence runs the sibling-forward sync
    - propagate on a template runs the template-to-children sync
    - propagate on a standalone session does nothing more
    """

    def __init__(
        self,
        uow: UnitOfWork,
        policy: Optional[SchedulingPolicy] = None,
        locks: KeyedLock = assignment_locks,
    ):
        self.uow = uow
        self.policy = policy or SchedulingPolicy()
        self.locks = locks
        self.propagator = AssignmentPropagator(uow, locks)

    async def execute(
        self,
        session_id: UUID,
        item_ids: Iterable[UUID],
        user_ids: Iterable[UUID],
        propagate: bool = False,
    ) -> Result[ReplaceAssignmentsResponse]:
        async with self.uow:
            try:
                session = await self.uow.sessions.get_by_id(session_id)
            except StoreError as exc:
                return Return.err(Error("STORE_ERROR", "Could not load session", reason=str(exc)))
            if session is None:
                return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))

            is_occurrence = session.is_occurrence
            is_template = session.is_recurring_template

            replaced = await self.propagator.replace_assignments(session_id, item_ids, user_ids)

        response = ReplaceAssignmentsResponse(
            session_id=str(session_id),
            items=replaced.items_replaced or 0,
            users=replaced.users_replaced or 0,
            errors=list(replaced.errors),
        )

        if not propagate:
            return Return.ok(response)

        if is_occurrence:
            synced = await SyncSiblingsForwardUseCase(self.uow, self.policy, self.locks).execute(
                session_id
            )
        elif is_template:
            synced = await SyncChildrenFromTemplateUseCase(
                self.uow, self.policy, self.locks
            ).execute(session_id)
        else:
            return Return.ok(response)

        if synced.is_err():
            response.errors.append(f"propagation: {synced.error.code}: {synced.error.message}")
        else:
            response.propagated = synced.value

        return Return.ok(response)
