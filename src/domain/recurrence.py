"""
Calendar rule evaluation for recurring sessions.

Everything here works on plain ``datetime.date`` values. Callers convert
instants to dates in the configured timezone before asking, so the result
never depends on the host's local time.
"""

from datetime import date, datetime, time, timedelta
from typing import Iterable, Iterator, Optional, Sequence, Union

from dateutil.relativedelta import relativedelta
from dateutil.rrule import DAILY, rrule

from .entities.enums import MonthlyOverflow, RepeatType
from .errors import RecurrenceValidationError

WEEKDAY_NAMES = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


def parse_repeat_type(value: Union[str, RepeatType]) -> RepeatType:
    try:
        return RepeatType(value)
    except ValueError:
        raise RecurrenceValidationError(f"Unknown repeat type: {value!r}") from None


def validate_rule(
    repeat_type: Union[str, RepeatType], repeat_days: Optional[Sequence[str]]
) -> RepeatType:
    """
    Check a recurrence rule before any dates are evaluated.

    Returns:
        The parsed RepeatType

    Raises:
        RecurrenceValidationError: unknown repeat type, weekday name or day of month
    """
    rule = parse_repeat_type(repeat_type)
    days = list(repeat_days or [])

    if rule == RepeatType.weekly:
        unknown = [d for d in days if d not in WEEKDAY_NAMES]
        if unknown:
            raise RecurrenceValidationError(f"Unknown weekday names in repeat_days: {unknown}")

    if rule == RepeatType.monthly:
        for d in days:
            if not str(d).isdigit() or not 1 <= int(d) <= 31:
                raise RecurrenceValidationError(f"Invalid day of month in repeat_days: {d!r}")

    return rule


def _last_day_of_month(value: date) -> int:
    return (value + relativedelta(day=31)).day


def matches(
    anchor_date: date,
    candidate_date: date,
    repeat_type: Union[str, RepeatType],
    repeat_days: Optional[Sequence[str]] = None,
    monthly_overflow: MonthlyOverflow = MonthlyOverflow.clamp,
) -> bool:
    """
    Decide whether candidate_date is an occurrence date of the rule.

    - daily: every date
    - weekly: listed weekday names, else the anchor's weekday
    - monthly: listed days of month (literal), else the anchor's day of month;
      when the anchor day does not exist in the candidate's month, ``clamp``
      matches the last day of that month and ``skip`` matches nothing
    - one_time: never
    """
    rule = validate_rule(repeat_type, repeat_days)
    days = list(repeat_days or [])

    if rule == RepeatType.one_time:
        return False

    if rule == RepeatType.daily:
        return True

    if rule == RepeatType.weekly:
        if days:
            return WEEKDAY_NAMES[candidate_date.weekday()] in days
        return candidate_date.weekday() == anchor_date.weekday()

    # monthly
    if days:
        return str(candidate_date.day) in {str(int(d)) for d in days}

    if candidate_date.day == anchor_date.day:
        return True
    last_day = _last_day_of_month(candidate_date)
    if anchor_date.day > last_day and monthly_overflow == MonthlyOverflow.clamp:
        return candidate_date.day == last_day
    return False


def candidate_window(
    anchor_date: date,
    repeat_end_date: Optional[date],
    horizon_days: int,
    today: Optional[date] = None,
) -> tuple[date, date]:
    """
    Dates the generator considers for one run.

    Starts the day after the anchor, or today when the anchor is older, so
    daily runs keep sliding the horizon forward. Ends at repeat_end_date when
    set, otherwise horizon_days after the start.
    """
    start = anchor_date + timedelta(days=1)
    if today is not None and today > start:
        start = today
    if repeat_end_date is not None:
        return start, repeat_end_date
    return start, start + timedelta(days=horizon_days)


def iter_dates(start: date, end: date) -> Iterator[date]:
    if end < start:
        return
    series = rrule(
        DAILY, dtstart=datetime.combine(start, time()), until=datetime.combine(end, time())
    )
    for moment in series:
        yield moment.date()


def occurrence_dates(
    anchor_date: date,
    repeat_type: Union[str, RepeatType],
    repeat_days: Optional[Sequence[str]],
    repeat_end_date: Optional[date],
    horizon_days: int,
    monthly_overflow: MonthlyOverflow = MonthlyOverflow.clamp,
    exclude: Iterable[date] = (),
    today: Optional[date] = None,
) -> list[date]:
    """All matching dates of the candidate window, ascending, minus ``exclude``."""
    rule = validate_rule(repeat_type, repeat_days)
    if rule == RepeatType.one_time:
        return []

    skip = set(exclude)
    start, end = candidate_window(anchor_date, repeat_end_date, horizon_days, today)
    return [
        d
        for d in iter_dates(start, end)
        if d not in skip and matches(anchor_date, d, rule, repeat_days, monthly_overflow)
    ]
