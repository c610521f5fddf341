"""
Assignment Propagator

Overwrites the item and user sets of a target session.
"""

import logging
from typing import Iterable, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from src.app.services.keyed_lock import KeyedLock, assignment_locks
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import StoreError

logger = logging.getLogger(__name__)


class PropagationResult(BaseModel):
    """Outcome of one replace on one target session"""

    session_id: str
    items_replaced: Optional[int] = None
    users_replaced: Optional[int] = None
    errors: List[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.items_replaced is not None and self.users_replaced is not None


def _unique(ids: Iterable[UUID]) -> List[UUID]:
    return list(dict.fromkeys(ids))


class AssignmentPropagator:
    """
    Full-replace propagation of assignment sets.

    Business Rules:
    - Replace, never merge: the target ends up with exactly the given sets
    - Items and users are committed separately; one failing does not block the other
    - Empty sets clear the target
    - Replaces for the same target are serialized, different targets are independent
    """

    def __init__(self, uow: UnitOfWork, locks: KeyedLock = assignment_locks):
        self.uow = uow
        self.locks = locks

    async def replace_assignments(
        self,
        target_session_id: UUID,
        item_ids: Iterable[UUID],
        user_ids: Iterable[UUID],
    ) -> PropagationResult:
        items = _unique(item_ids)
        users = _unique(user_ids)
        result = PropagationResult(session_id=str(target_session_id))

        async with self.locks.hold(target_session_id):
            try:
                await self.uow.assignments.replace_items(target_session_id, items)
                await self.uow.commit()
                result.items_replaced = len(items)
            except StoreError as exc:
                await self.uow.rollback()
                logger.warning(f"Replacing items of session {target_session_id} failed: {exc}")
                result.errors.append(f"items of session {target_session_id}: {exc}")

            try:
                await self.uow.assignments.replace_users(target_session_id, users)
                await self.uow.commit()
                result.users_replaced = len(users)
            except StoreError as exc:
                await self.uow.rollback()
                logger.warning(f"Replacing users of session {target_session_id} failed: {exc}")
                result.errors.append(f"users of session {target_session_id}: {exc}")

        return result

    async def replace_many(
        self,
        target_session_ids: Iterable[UUID],
        item_ids: Iterable[UUID],
        user_ids: Iterable[UUID],
    ) -> List[PropagationResult]:
        """Replace the sets on each target in turn; failures stay per target."""
        items = _unique(item_ids)
        users = _unique(user_ids)
        return [
            await self.replace_assignments(target_id, items, users)
            for target_id in target_session_ids
        ]
