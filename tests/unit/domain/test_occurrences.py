from datetime import UTC, date, datetime, time
from uuid import uuid4
from zoneinfo import ZoneInfo

import pytest

from src.domain.entities import RepeatType, SessionStatus
from src.domain.occurrences import (
    build_occurrence,
    format_occurrence_name,
    occurrence_window,
    project_window,
)
from tests.factories import make_template

JAKARTA = ZoneInfo("Asia/Jakarta")


def test_name_in_indonesian_by_default():
    assert format_occurrence_name("Gudang A", date(2025, 1, 2)) == "Gudang A - Kamis 2 Januari 2025"


def test_name_in_english():
    name = format_occurrence_name("Gudang A", date(2025, 1, 2), locale="en")

    assert name == "Gudang A - Thursday 2 January 2025"


def test_unknown_locale_is_rejected():
    with pytest.raises(ValueError):
        format_occurrence_name("Gudang A", date(2025, 1, 2), locale="fr")


def test_project_window_converts_local_times_to_utc():
    valid_from, valid_until = project_window(date(2025, 1, 2), time(8), time(17), JAKARTA)

    assert valid_from == datetime(2025, 1, 2, 1, 0, tzinfo=UTC)
    assert valid_until == datetime(2025, 1, 2, 10, 0, tzinfo=UTC)


def test_project_window_rolls_overnight_end_to_next_day():
    valid_from, valid_until = project_window(date(2025, 1, 2), time(22), time(6), JAKARTA)

    assert valid_from == datetime(2025, 1, 2, 15, 0, tzinfo=UTC)
    assert valid_until == datetime(2025, 1, 2, 23, 0, tzinfo=UTC)


def test_window_follows_template_time_of_day():
    template = make_template(
        valid_from=datetime(2025, 1, 1, 1, 0, tzinfo=UTC),
        valid_until=datetime(2025, 1, 1, 10, 0, tzinfo=UTC),
    )

    valid_from, valid_until = occurrence_window(template, date(2025, 1, 5), JAKARTA)

    assert valid_from == datetime(2025, 1, 5, 1, 0, tzinfo=UTC)
    assert valid_until == datetime(2025, 1, 5, 10, 0, tzinfo=UTC)


def test_window_accepts_naive_template_times_as_utc():
    template = make_template(
        valid_from=datetime(2025, 1, 1, 8, 0),
        valid_until=datetime(2025, 1, 1, 12, 0),
    )

    valid_from, valid_until = occurrence_window(template, date(2025, 1, 3), UTC)

    assert valid_from == datetime(2025, 1, 3, 8, 0, tzinfo=UTC)
    assert valid_until == datetime(2025, 1, 3, 12, 0, tzinfo=UTC)


def test_window_from_session_times_only_when_enabled():
    template = make_template(start_time="08:00", end_time="17:00")

    assert occurrence_window(template, date(2025, 1, 3), UTC) == (None, None)

    valid_from, valid_until = occurrence_window(
        template, date(2025, 1, 3), UTC, derive_from_session_times=True
    )
    assert valid_from == datetime(2025, 1, 3, 8, 0, tzinfo=UTC)
    assert valid_until == datetime(2025, 1, 3, 17, 0, tzinfo=UTC)


def test_build_occurrence_copies_template_fields():
    creator = uuid4()
    template = make_template(
        created_by=creator,
        status=SessionStatus.draft,
        repeat_type=RepeatType.weekly,
        repeat_days=["thursday"],
    )

    occurrence = build_occurrence(template, date(2025, 1, 2), UTC)

    assert occurrence.id != template.id
    assert occurrence.parent_session_id == template.id
    assert occurrence.status == SessionStatus.active
    assert occurrence.repeat_type == RepeatType.one_time
    assert occurrence.repeat_days == []
    assert occurrence.session_date == date(2025, 1, 2)
    assert occurrence.scheduled_date == date(2025, 1, 2)
    assert occurrence.name == "Gudang A - Kamis 2 Januari 2025"
    assert occurrence.type == template.type
    assert occurrence.start_time == "08:00"
    assert occurrence.end_time == "17:00"
    assert occurrence.created_by == creator
    assert occurrence.is_occurrence
    assert not occurrence.is_recurring_template
