"""
Generate All Occurrences Use Case

Periodic trigger: slides the generation horizon forward for every template.
"""

import logging
from datetime import datetime
from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.keyed_lock import KeyedLock, assignment_locks, generation_locks
from src.app.services.scheduling_policy import SchedulingPolicy
from src.app.services.unit_of_work import UnitOfWork
from src.domain.clock import local_today, utc_now
from src.domain.entities import SessionStatus
from src.domain.errors import StoreError

from .dtos import GenerateAllOccurrencesResponse
from .generate_occurrences_use_case import GenerateOccurrencesUseCase

logger = logging.getLogger(__name__)

INACTIVE_TEMPLATE_STATUSES = (SessionStatus.cancelled, SessionStatus.closed)


class GenerateAllOccurrencesUseCase:
    """
    Run occurrence generation for all recurring templates.

    Business Rules:
    - Cancelled and closed templates are skipped
    - Templates whose repeat_end_date is already past are skipped
    - One template failing does not stop the others; its error is returned
    - Safe to run repeatedly (daily): each run only fills missing dates
    """

    def __init__(
        self,
        uow: UnitOfWork,
        policy: Optional[SchedulingPolicy] = None,
        locks: KeyedLock = generation_locks,
        assignment_lock: KeyedLock = assignment_locks,
    ):
        self.uow = uow
        self.policy = policy or SchedulingPolicy()
        self.generator = GenerateOccurrencesUseCase(uow, self.policy, locks, assignment_lock)

    async def execute(
        self, now: Optional[datetime] = None
    ) -> Result[GenerateAllOccurrencesResponse]:
        now = now or utc_now()
        today = local_today(now, self.policy.tz)

        async with self.uow:
            try:
                templates = await self.uow.sessions.get_recurring_templates(
                    excluded_statuses=INACTIVE_TEMPLATE_STATUSES
                )
            except StoreError as exc:
                logger.error(f"Loading recurring templates failed: {exc}")
                return Return.err(
                    Error("STORE_ERROR", "Could not load recurring templates", reason=str(exc))
                )
            template_ids = [
                t.id
                for t in templates
                if t.repeat_end_date is None or t.repeat_end_date >= today
            ]

        response = GenerateAllOccurrencesResponse(templates=len(template_ids))

        for template_id in template_ids:
            result = await self.generator.execute(template_id, now=now)
            if result.is_err():
                error = result.error
                logger.warning(f"Template {template_id} skipped: {error.code} {error.message}")
                response.errors.append(f"template {template_id}: {error.code}: {error.message}")
                continue

            generated = result.value
            response.results.append(generated)
            response.created += generated.created
            response.seeded += generated.seeded
            response.errors.extend(generated.errors)

        logger.info(
            f"Generation run over {response.templates} templates: "
            f"created {response.created}, seeded {response.seeded}"
        )
        return Return.ok(response)
