from datetime import UTC, date, datetime, tzinfo
from zoneinfo import ZoneInfo


def utc_now() -> datetime:
    return datetime.now(UTC)


def ensure_aware(value: datetime) -> datetime:
    """Treat naive datetimes (e.g. read back from SQLite) as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def local_today(now: datetime, tz: tzinfo) -> date:
    return ensure_aware(now).astimezone(tz).date()


def load_timezone(name: str) -> tzinfo:
    if name.upper() == "UTC":
        return UTC
    return ZoneInfo(name)


def to_utc(value: datetime) -> datetime:
    return ensure_aware(value).astimezone(UTC)
