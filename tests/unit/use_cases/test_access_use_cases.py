from datetime import date, timedelta
from uuid import uuid4

import pytest

from src.app.services.scheduling_policy import SchedulingPolicy
from src.app.use_cases.access import CheckWriteAccessUseCase, ListSelectableSessionsUseCase
from src.domain.entities import RemainingTimeBucket, SessionStatus, WriteAccessReason
from src.domain.errors import StoreError
from tests.factories import make_session, make_template


@pytest.mark.asyncio
async def test_write_access_for_missing_session_is_blocked_not_error(mock_uow, now):
    use_case = CheckWriteAccessUseCase(mock_uow)
    result = await use_case.execute(uuid4(), now=now)

    assert result.is_ok()
    assert not result.value.access.allowed
    assert result.value.access.reason == WriteAccessReason.session_not_found
    assert result.value.remaining_bucket is None


@pytest.mark.asyncio
async def test_write_access_reports_remaining_time(mock_uow, now):
    session = make_session(
        valid_from=now - timedelta(hours=1), valid_until=now + timedelta(minutes=5)
    )
    mock_uow.sessions.get_by_id.return_value = session

    use_case = CheckWriteAccessUseCase(mock_uow)
    result = await use_case.execute(session.id, now=now)

    assert result.value.access.allowed
    assert result.value.remaining_seconds == 300
    assert result.value.remaining_bucket == RemainingTimeBucket.critical


@pytest.mark.asyncio
async def test_write_access_store_error(mock_uow, now):
    mock_uow.sessions.get_by_id.side_effect = StoreError("down", "get_by_id")

    use_case = CheckWriteAccessUseCase(mock_uow)
    result = await use_case.execute(uuid4(), now=now)

    assert result.is_err()
    assert result.error.code == "STORE_ERROR"


@pytest.mark.asyncio
async def test_selectable_filters_hidden_sessions(mock_uow, now):
    today = now.date()
    visible = make_session(name="open", valid_until=now + timedelta(hours=1))
    scheduled_today = make_session(
        name="scheduled today", status=SessionStatus.scheduled, scheduled_date=today
    )
    scheduled_later = make_session(
        name="scheduled later",
        status=SessionStatus.scheduled,
        scheduled_date=today + timedelta(days=1),
    )
    expired = make_session(name="expired", valid_until=now - timedelta(minutes=1))
    template = make_template(name="template")
    mock_uow.sessions.get_selection_candidates.return_value = [
        visible,
        scheduled_today,
        scheduled_later,
        expired,
        template,
    ]

    use_case = ListSelectableSessionsUseCase(mock_uow, SchedulingPolicy())
    result = await use_case.execute(now=now)

    assert result.is_ok()
    assert [s.name for s in result.value.sessions] == ["open", "scheduled today"]
    assert result.value.sessions[0].remaining_bucket == RemainingTimeBucket.normal
    assert result.value.sessions[1].session_date == date(2025, 1, 1).isoformat()


@pytest.mark.asyncio
async def test_selectable_lists_closed_sessions_inside_their_window(mock_uow, now):
    """Status is not a list filter; a closed session is refused only on write"""
    user_id = uuid4()
    closed = make_session(name="closed", status=SessionStatus.closed)
    completed = make_session(name="completed", status=SessionStatus.completed)
    mock_uow.sessions.get_selection_candidates.return_value = [closed, completed]

    use_case = ListSelectableSessionsUseCase(mock_uow, SchedulingPolicy())
    result = await use_case.execute(user_id=user_id, now=now)

    mock_uow.sessions.get_selection_candidates.assert_awaited_once_with(user_id=user_id)
    assert [s.status for s in result.value.sessions] == ["closed", "completed"]
