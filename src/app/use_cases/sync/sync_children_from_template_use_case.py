"""
Sync Children From Template Use Case

Copies a template's assignments onto its generated occurrences.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional, Union
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.assignment_propagator import AssignmentPropagator
from src.app.services.keyed_lock import KeyedLock, assignment_locks
from src.app.services.scheduling_policy import SchedulingPolicy
from src.app.services.unit_of_work import UnitOfWork
from src.domain.clock import local_today, utc_now
from src.domain.entities import SyncScope
from src.domain.errors import StoreError

from .dtos import SyncResponse

logger = logging.getLogger(__name__)


class SyncChildrenFromTemplateUseCase:
    """
    Use case for pushing a template's item/user sets to its occurrences.

    Business Rules:
    - all (default): every occurrence regardless of date; the template is
      authoritative over past occurrences too
    - future_only: occurrences dated today or later (configured timezone)
    - Full replace per target; one target failing does not stop the others
    - A template without occurrences is a no-op
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
        self,
        template_id: UUID,
        scope: Optional[Union[SyncScope, str]] = None,
        now: Optional[datetime] = None,
    ) -> Result[SyncResponse]:
        """
        Execute sync children from template use case.

        Args:
            template_id: The edited template
            scope: Date filter for occurrences (defaults to the configured template scope)
            now: Current instant, used by future_only

        Returns:
            Result with SyncResponse, or Error

        Errors:
            - SESSION_NOT_FOUND: Template does not exist
            - STORE_ERROR: Loading the template or its occurrences failed
        """
        scope = SyncScope(scope or self.policy.template_sync_scope)
        now = now or utc_now()

        async with self.uow:
            try:
                template = await self.uow.sessions.get_by_id(template_id)
                if template is None:
                    return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))

                after_date = None
                if scope == SyncScope.future_only:
                    after_date = local_today(now, self.policy.tz) - timedelta(days=1)

                children = await self.uow.sessions.get_children(template_id, after_date=after_date)
                target_ids = [child.id for child in children]
                item_ids = await self.uow.assignments.get_item_ids(template_id)
                user_ids = await self.uow.assignments.get_user_ids(template_id)
            except StoreError as exc:
                logger.error(f"Loading occurrences of template {template_id} failed: {exc}")
                return Return.err(
                    Error("STORE_ERROR", "Could not load template occurrences", reason=str(exc))
                )

            results = await self.propagator.replace_many(target_ids, item_ids, user_ids)

        response = SyncResponse(
            source_session_id=str(template_id),
            scope=scope,
            targets=len(target_ids),
            updated=sum(1 for r in results if r.ok),
        )
        for r in results:
            response.errors.extend(r.errors)

        logger.info(
            f"Synced {response.updated}/{response.targets} occurrences of template {template_id}"
        )
        return Return.ok(response)
