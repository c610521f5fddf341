from datetime import date

import pytest

from src.domain.entities import MonthlyOverflow, RepeatType
from src.domain.errors import RecurrenceValidationError
from src.domain.recurrence import candidate_window, matches, occurrence_dates, validate_rule


def test_daily_until_end_date_excludes_anchor():
    dates = occurrence_dates(
        date(2025, 1, 1), RepeatType.daily, [], date(2025, 1, 5), horizon_days=30
    )

    assert dates == [date(2025, 1, 2), date(2025, 1, 3), date(2025, 1, 4), date(2025, 1, 5)]


def test_daily_without_end_date_uses_horizon():
    dates = occurrence_dates(date(2025, 1, 1), "daily", None, None, horizon_days=30)

    assert dates[0] == date(2025, 1, 2)
    assert dates[-1] == date(2025, 2, 1)
    assert len(dates) == 31


def test_weekly_with_listed_weekdays():
    dates = occurrence_dates(
        date(2025, 1, 6),  # Monday
        RepeatType.weekly,
        ["monday", "thursday"],
        date(2025, 1, 20),
        horizon_days=30,
    )

    assert dates == [date(2025, 1, 9), date(2025, 1, 13), date(2025, 1, 16), date(2025, 1, 20)]


def test_weekly_without_days_uses_anchor_weekday():
    dates = occurrence_dates(
        date(2025, 1, 1),  # Wednesday
        RepeatType.weekly,
        [],
        date(2025, 1, 22),
        horizon_days=30,
    )

    assert dates == [date(2025, 1, 8), date(2025, 1, 15), date(2025, 1, 22)]


def test_monthly_clamps_to_last_day_of_short_months():
    dates = occurrence_dates(
        date(2025, 1, 31), RepeatType.monthly, [], date(2025, 5, 31), horizon_days=30
    )

    assert dates == [date(2025, 2, 28), date(2025, 3, 31), date(2025, 4, 30), date(2025, 5, 31)]


def test_monthly_clamp_in_leap_year():
    assert matches(date(2024, 1, 31), date(2024, 2, 29), RepeatType.monthly)
    assert not matches(date(2024, 1, 31), date(2024, 2, 28), RepeatType.monthly)


def test_monthly_skip_drops_short_months():
    dates = occurrence_dates(
        date(2025, 1, 31),
        RepeatType.monthly,
        [],
        date(2025, 5, 31),
        horizon_days=30,
        monthly_overflow=MonthlyOverflow.skip,
    )

    assert dates == [date(2025, 3, 31), date(2025, 5, 31)]


def test_monthly_listed_days_are_literal():
    dates = occurrence_dates(
        date(2025, 1, 1), RepeatType.monthly, ["15", "31"], date(2025, 3, 31), horizon_days=30
    )

    assert dates == [
        date(2025, 1, 15),
        date(2025, 1, 31),
        date(2025, 2, 15),
        date(2025, 3, 15),
        date(2025, 3, 31),
    ]


def test_one_time_never_matches():
    assert occurrence_dates(date(2025, 1, 1), "one_time", [], date(2025, 2, 1), 30) == []
    assert not matches(date(2025, 1, 1), date(2025, 1, 2), RepeatType.one_time)


def test_exclude_removes_existing_dates():
    dates = occurrence_dates(
        date(2025, 1, 1),
        RepeatType.daily,
        [],
        date(2025, 1, 5),
        horizon_days=30,
        exclude={date(2025, 1, 2), date(2025, 1, 4)},
    )

    assert dates == [date(2025, 1, 3), date(2025, 1, 5)]


def test_end_date_before_window_start_yields_nothing():
    dates = occurrence_dates(date(2025, 1, 10), "daily", [], date(2025, 1, 5), horizon_days=30)

    assert dates == []


def test_candidate_window_bounds():
    assert candidate_window(date(2025, 1, 1), date(2025, 1, 5), 30) == (
        date(2025, 1, 2),
        date(2025, 1, 5),
    )
    assert candidate_window(date(2025, 1, 1), None, 7) == (date(2025, 1, 2), date(2025, 1, 9))


def test_candidate_window_slides_to_today_once_anchor_is_past():
    assert candidate_window(date(2025, 1, 1), None, 30, today=date(2025, 6, 1)) == (
        date(2025, 6, 1),
        date(2025, 7, 1),
    )
    # a future anchor still starts the day after itself
    assert candidate_window(date(2025, 6, 10), None, 7, today=date(2025, 6, 1)) == (
        date(2025, 6, 11),
        date(2025, 6, 18),
    )


def test_occurrences_of_old_template_start_today():
    dates = occurrence_dates(
        date(2025, 1, 1), RepeatType.daily, [], None, horizon_days=30, today=date(2025, 6, 1)
    )

    assert dates[0] == date(2025, 6, 1)
    assert dates[-1] == date(2025, 7, 1)
    assert len(dates) == 31


def test_weekly_old_template_keeps_anchor_weekday_after_sliding():
    dates = occurrence_dates(
        date(2025, 1, 1),  # Wednesday
        RepeatType.weekly,
        [],
        date(2025, 6, 20),
        horizon_days=30,
        today=date(2025, 6, 1),
    )

    assert dates == [date(2025, 6, 4), date(2025, 6, 11), date(2025, 6, 18)]


def test_end_date_before_today_yields_nothing():
    dates = occurrence_dates(
        date(2025, 1, 1), "daily", [], date(2025, 3, 1), horizon_days=30, today=date(2025, 6, 1)
    )

    assert dates == []


def test_validate_rule_returns_parsed_type():
    assert validate_rule("weekly", ["friday"]) == RepeatType.weekly


@pytest.mark.parametrize(
    "repeat_type, repeat_days",
    [
        ("fortnightly", []),
        ("weekly", ["funday"]),
        ("weekly", ["Monday"]),
        ("monthly", ["32"]),
        ("monthly", ["0"]),
        ("monthly", ["first"]),
    ],
)
def test_malformed_rules_are_rejected(repeat_type, repeat_days):
    with pytest.raises(RecurrenceValidationError):
        validate_rule(repeat_type, repeat_days)
