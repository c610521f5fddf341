"""
Building occurrence rows from a recurring template.
"""

from datetime import UTC, date, datetime, time, timedelta, tzinfo
from typing import Optional

from .clock import ensure_aware
from .entities import RepeatType, Session, SessionStatus

# Weekday and month names per supported locale (Monday first, January first)
LOCALE_NAMES = {
    "id": {
        "weekdays": ("Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu"),
        "months": (
            "Januari", "Februari", "Maret", "April", "Mei", "Juni",
            "Juli", "Agustus", "September", "Oktober", "November", "Desember",
        ),
    },
    "en": {
        "weekdays": (
            "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
        ),
        "months": (
            "January", "February", "March", "April", "May", "June",
            "July", "August", "September", "October", "November", "December",
        ),
    },
}


def format_occurrence_name(template_name: str, occurrence_date: date, locale: str = "id") -> str:
    """``"{template} - {weekday} {day} {month} {year}"`` in the given locale."""
    names = LOCALE_NAMES.get(locale)
    if names is None:
        raise ValueError(f"Unsupported locale: {locale}")

    weekday = names["weekdays"][occurrence_date.weekday()]
    month = names["months"][occurrence_date.month - 1]
    return f"{template_name} - {weekday} {occurrence_date.day} {month} {occurrence_date.year}"


def parse_time_of_day(value: str) -> time:
    hours, minutes = value.split(":")[:2]
    return time(int(hours), int(minutes))


def project_window(
    occurrence_date: date, start: time, end: time, tz: tzinfo
) -> tuple[datetime, datetime]:
    """
    Place a local time-of-day window on occurrence_date, returned in UTC.

    The end rolls over to the next day when it is not after the start.
    """
    valid_from = datetime.combine(occurrence_date, start, tzinfo=tz)
    valid_until = datetime.combine(occurrence_date, end, tzinfo=tz)
    if valid_until <= valid_from:
        valid_until += timedelta(days=1)
    return valid_from.astimezone(UTC), valid_until.astimezone(UTC)


def occurrence_window(
    template: Session,
    occurrence_date: date,
    tz: tzinfo,
    derive_from_session_times: bool = False,
) -> tuple[Optional[datetime], Optional[datetime]]:
    """
    Validity window of an occurrence.

    Uses the local time of day of the template's own window. Falls back to
    start_time/end_time only when derive_from_session_times is set.
    """
    if template.valid_from is not None and template.valid_until is not None:
        start = ensure_aware(template.valid_from).astimezone(tz).time()
        end = ensure_aware(template.valid_until).astimezone(tz).time()
        return project_window(occurrence_date, start, end, tz)

    if derive_from_session_times and template.start_time and template.end_time:
        return project_window(
            occurrence_date,
            parse_time_of_day(template.start_time),
            parse_time_of_day(template.end_time),
            tz,
        )

    return None, None


def build_occurrence(
    template: Session,
    occurrence_date: date,
    tz: tzinfo,
    locale: str = "id",
    derive_from_session_times: bool = False,
) -> Session:
    valid_from, valid_until = occurrence_window(
        template, occurrence_date, tz, derive_from_session_times
    )
    return Session(
        name=format_occurrence_name(template.name, occurrence_date, locale),
        type=template.type,
        status=SessionStatus.active,
        repeat_type=RepeatType.one_time,
        repeat_days=[],
        session_date=occurrence_date,
        scheduled_date=occurrence_date,
        start_time=template.start_time,
        end_time=template.end_time,
        valid_from=valid_from,
        valid_until=valid_until,
        parent_session_id=template.id,
        created_by=template.created_by,
    )
