"""
Integration tests for the SQLModel repositories against SQLite
"""

from datetime import date, timedelta
from uuid import uuid4

import pytest
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.domain.clock import utc_now
from src.domain.entities import OccurrenceLog, OccurrenceLogStatus, SessionStatus
from src.domain.errors import StoreError
from tests.factories import assign, make_occurrence, make_session, make_template, persist


@pytest.mark.asyncio
async def test_occurrence_dates_and_children(db_session: AsyncSession):
    template = make_template()
    (template_id,) = await persist(db_session, template)
    _, second, third = await persist(
        db_session,
        make_occurrence(template, date(2025, 1, 2)),
        make_occurrence(template, date(2025, 1, 3)),
        make_occurrence(template, date(2025, 1, 4)),
    )

    async with SqlAlchemyUnitOfWork(db_session) as uow:
        dates = await uow.sessions.get_occurrence_dates(
            template_id, date(2025, 1, 3), date(2025, 1, 10)
        )
        later = await uow.sessions.get_children(
            template_id, after_date=date(2025, 1, 2), exclude_id=third
        )

    assert dates == {date(2025, 1, 3), date(2025, 1, 4)}
    assert [s.id for s in later] == [second]


@pytest.mark.asyncio
async def test_duplicate_occurrence_date_raises_store_error(db_session: AsyncSession):
    template = make_template()
    await persist(db_session, template, make_occurrence(template, date(2025, 1, 2)))

    async with SqlAlchemyUnitOfWork(db_session) as uow:
        with pytest.raises(StoreError):
            await uow.sessions.create_many([make_occurrence(template, date(2025, 1, 2))])


@pytest.mark.asyncio
async def test_occurrence_log_lifecycle(db_session: AsyncSession):
    template = make_template()
    (template_id,) = await persist(db_session, template)
    first_id, second_id = await persist(
        db_session,
        make_occurrence(template, date(2025, 1, 3)),
        make_occurrence(template, date(2025, 1, 2)),
    )

    async with SqlAlchemyUnitOfWork(db_session) as uow:
        await uow.occurrence_logs.create_many(
            [
                OccurrenceLog(
                    master_session_id=template_id,
                    generated_session_id=first_id,
                    scheduled_date=date(2025, 1, 3),
                ),
                OccurrenceLog(
                    master_session_id=template_id,
                    generated_session_id=second_id,
                    scheduled_date=date(2025, 1, 2),
                ),
            ]
        )
        marked = await uow.occurrence_logs.mark([first_id], OccurrenceLogStatus.activated)
        await uow.commit()

        logs = await uow.occurrence_logs.get_by_master_id(template_id)
        statuses = [(log.scheduled_date, log.status) for log in logs]

        removed = await uow.occurrence_logs.delete_for_session(second_id)
        await uow.commit()
        remaining = await uow.occurrence_logs.get_by_master_id(template_id)
        remaining_ids = [log.generated_session_id for log in remaining]

    assert marked == 1
    assert statuses == [
        (date(2025, 1, 2), OccurrenceLogStatus.generated),
        (date(2025, 1, 3), OccurrenceLogStatus.activated),
    ]
    assert removed == 1
    assert remaining_ids == [first_id]


@pytest.mark.asyncio
async def test_status_job_queries(db_session: AsyncSession):
    now = utc_now()
    today = now.date()
    due_id, _, expired_id, _ = await persist(
        db_session,
        make_session(status=SessionStatus.scheduled, scheduled_date=today),
        make_session(
            status=SessionStatus.scheduled,
            scheduled_date=today,
            valid_from=now + timedelta(hours=1),
        ),
        make_session(valid_until=now - timedelta(minutes=1)),
        make_session(status=SessionStatus.closed, valid_until=now - timedelta(minutes=1)),
    )

    async with SqlAlchemyUnitOfWork(db_session) as uow:
        due = [s.id for s in await uow.sessions.get_scheduled_due(today, now)]
        expired = [s.id for s in await uow.sessions.get_active_expired(now)]

    assert due == [due_id]
    assert expired == [expired_id]


@pytest.mark.asyncio
async def test_recurring_templates_exclude_statuses(db_session: AsyncSession):
    live_id, _, _ = await persist(
        db_session,
        make_template(),
        make_template(status=SessionStatus.cancelled),
        make_session(),
    )

    async with SqlAlchemyUnitOfWork(db_session) as uow:
        templates = await uow.sessions.get_recurring_templates(
            excluded_statuses=[SessionStatus.cancelled, SessionStatus.closed]
        )
        template_ids = [t.id for t in templates]

    assert template_ids == [live_id]


@pytest.mark.asyncio
async def test_replace_items_drops_previous_rows(db_session: AsyncSession):
    (session_id,) = await persist(db_session, make_session())
    first, second = uuid4(), uuid4()

    async with SqlAlchemyUnitOfWork(db_session) as uow:
        await uow.assignments.replace_items(session_id, [first, second])
        await uow.commit()
        await uow.assignments.replace_items(session_id, [second])
        await uow.commit()
        item_ids = await uow.assignments.get_item_ids(session_id)

    assert item_ids == [second]


@pytest.mark.asyncio
async def test_selection_candidates_keep_every_status(db_session: AsyncSession):
    user = uuid4()
    closed_id, open_id, _ = await persist(
        db_session,
        make_session(name="b", status=SessionStatus.closed, session_date=date(2025, 1, 2)),
        make_session(name="a", session_date=date(2025, 1, 2)),
        make_session(name="c", status=SessionStatus.cancelled, session_date=date(2025, 1, 1)),
    )
    await assign(db_session, closed_id, user_ids=[user])

    async with SqlAlchemyUnitOfWork(db_session) as uow:
        every = [s.name for s in await uow.sessions.get_selection_candidates()]
        mine = [s.id for s in await uow.sessions.get_selection_candidates(user_id=user)]

    assert every == ["c", "a", "b"]
    assert mine == [closed_id]
    assert open_id not in mine
