"""
Generate Occurrences Use Case

Expands a recurring template into dated occurrence sessions.
"""

import logging
from datetime import date, datetime
from typing import List, Optional, Tuple
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.assignment_propagator import AssignmentPropagator
from src.app.services.keyed_lock import KeyedLock, assignment_locks, generation_locks
from src.app.services.scheduling_policy import SchedulingPolicy
from src.app.services.unit_of_work import UnitOfWork
from src.domain.clock import local_today, utc_now
from src.domain.entities import OccurrenceLog, RepeatType, Session
from src.domain.errors import RecurrenceValidationError, StoreError
from src.domain.occurrences import build_occurrence
from src.domain.recurrence import candidate_window, occurrence_dates, validate_rule

from .dtos import GenerateOccurrencesResponse

logger = logging.getLogger(__name__)


class GenerateOccurrencesUseCase:
    """
    Use case for generating the occurrences of one template.

    Business Rules:
    - one_time sessions never spawn occurrences (no-op)
    - Window starts the day after the anchor, or today once the anchor is
      past, and ends at repeat_end_date or after the configured horizon;
      daily runs slide the horizon forward
    - At most one occurrence per template and date; re-runs only fill gaps
    - Occurrences are active, one_time and linked through parent_session_id
    - Each new occurrence is seeded once with the template's items and users;
      a seeding failure is reported and does not stop the others
    - Runs for the same template are serialized
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
        self.locks = locks
        self.propagator = AssignmentPropagator(uow, assignment_lock)

    async def execute(
        self, template_id: UUID, now: Optional[datetime] = None
    ) -> Result[GenerateOccurrencesResponse]:
        """
        Execute generate occurrences use case.

        Args:
            template_id: Template session to expand
            now: Current instant (defaults to the wall clock)

        Returns:
            Result with GenerateOccurrencesResponse, or Error

        Errors:
            - SESSION_NOT_FOUND: Template does not exist
            - VALIDATION_ERROR: Recurrence rule cannot be evaluated
            - STORE_ERROR: Storage failed before anything was created
        """
        now = now or utc_now()

        async with self.locks.hold(template_id):
            async with self.uow:
                try:
                    return await self._generate(template_id, now)
                except StoreError as exc:
                    logger.error(f"Generating occurrences of {template_id} failed: {exc}")
                    return Return.err(
                        Error("STORE_ERROR", "Could not generate occurrences", reason=str(exc))
                    )

    async def _generate(
        self, template_id: UUID, now: datetime
    ) -> Result[GenerateOccurrencesResponse]:
        template = await self.uow.sessions.get_by_id(template_id)
        if template is None:
            return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))

        response = GenerateOccurrencesResponse(template_id=str(template_id))

        try:
            rule = validate_rule(template.repeat_type, template.repeat_days)
        except RecurrenceValidationError as exc:
            return Return.err(Error("VALIDATION_ERROR", str(exc)))

        if rule == RepeatType.one_time:
            logger.info(f"Session {template_id} is one_time, nothing to generate")
            return Return.ok(response)

        if template.parent_session_id is not None:
            return Return.err(
                Error("VALIDATION_ERROR", "An occurrence cannot generate occurrences")
            )

        tz = self.policy.tz
        today = local_today(now, tz)
        anchor = template.session_date or today
        start, end = candidate_window(
            anchor, template.repeat_end_date, self.policy.horizon_days, today=today
        )
        if end < start:
            return Return.ok(response)

        existing = await self.uow.sessions.get_occurrence_dates(template_id, start, end)
        dates = occurrence_dates(
            anchor,
            rule,
            template.repeat_days,
            template.repeat_end_date,
            self.policy.horizon_days,
            self.policy.monthly_overflow,
            exclude=existing,
            today=today,
        )
        if not dates:
            logger.info(f"Template {template_id} is up to date, no occurrences to create")
            return Return.ok(response)

        # Snapshot the template before any commit or rollback expires it
        item_ids = await self.uow.assignments.get_item_ids(template_id)
        user_ids = await self.uow.assignments.get_user_ids(template_id)
        staged = [
            build_occurrence(
                template,
                occurrence_date,
                tz,
                locale=self.policy.name_locale,
                derive_from_session_times=self.policy.derive_window_from_session_times,
            )
            for occurrence_date in dates
        ]

        created = await self._insert(template_id, staged, response)

        for occurrence_id, _ in created:
            seeding = await self.propagator.replace_assignments(occurrence_id, item_ids, user_ids)
            if seeding.ok:
                response.seeded += 1
            response.errors.extend(seeding.errors)

        response.created = len(created)
        response.dates = [occurrence_date.isoformat() for _, occurrence_date in created]

        logger.info(
            f"Template {template_id}: created {response.created} occurrences, "
            f"seeded {response.seeded}, {len(response.errors)} errors"
        )
        return Return.ok(response)

    async def _insert(
        self,
        template_id: UUID,
        staged: List[Session],
        response: GenerateOccurrencesResponse,
    ) -> List[Tuple[UUID, date]]:
        planned = [(occurrence.id, occurrence.session_date) for occurrence in staged]

        try:
            await self.uow.sessions.create_many(staged)
            await self.uow.occurrence_logs.create_many(
                [_log_for(template_id, occurrence_id, d) for occurrence_id, d in planned]
            )
            await self.uow.commit()
            return planned
        except StoreError as exc:
            await self.uow.rollback()
            logger.warning(
                f"Batch insert for template {template_id} failed, retrying row by row: {exc}"
            )

        # Another run may have filled some dates in the meantime
        existing = await self.uow.sessions.get_occurrence_dates(
            template_id, planned[0][1], planned[-1][1]
        )
        created = []
        for occurrence, (occurrence_id, occurrence_date) in zip(staged, planned):
            if occurrence_date in existing:
                continue
            try:
                await self.uow.sessions.create(occurrence)
                await self.uow.occurrence_logs.create_many(
                    [_log_for(template_id, occurrence_id, occurrence_date)]
                )
                await self.uow.commit()
                created.append((occurrence_id, occurrence_date))
            except StoreError as exc:
                await self.uow.rollback()
                logger.warning(
                    f"Creating occurrence {occurrence_date} of template {template_id} failed: {exc}"
                )
                response.errors.append(f"occurrence {occurrence_date.isoformat()}: {exc}")
        return created


def _log_for(template_id: UUID, occurrence_id: UUID, occurrence_date: date) -> OccurrenceLog:
    return OccurrenceLog(
        master_session_id=template_id,
        generated_session_id=occurrence_id,
        scheduled_date=occurrence_date,
    )
