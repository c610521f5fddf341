"""
Temporal access control for count sessions.

Two deliberately different predicates:

- ``classify_write_access`` decides whether counts may be saved now.
  Status is checked strictly before the validity window.
- ``is_visible_for_selection`` decides whether a counter may see/select the
  session in a list at all.

A draft session is visible and writable. A scheduled session is visible on
its scheduled date but blocked for writes until it is activated.
"""

from datetime import date, datetime, timedelta
from typing import Optional

from pydantic import BaseModel

from .clock import ensure_aware
from .entities import RemainingTimeBucket, Session, SessionStatus, WriteAccessReason

CLOSED_STATUSES = frozenset(
    {SessionStatus.closed, SessionStatus.completed, SessionStatus.cancelled}
)

CRITICAL_THRESHOLD = timedelta(minutes=10)
WARNING_THRESHOLD = timedelta(minutes=30)


class AccessResult(BaseModel):
    """Outcome of a write-access check"""

    allowed: bool
    reason: Optional[WriteAccessReason] = None
    detail: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def allow(cls) -> "AccessResult":
        return cls(allowed=True)

    @classmethod
    def block(
        cls, reason: WriteAccessReason, message: str, detail: Optional[str] = None
    ) -> "AccessResult":
        return cls(allowed=False, reason=reason, detail=detail, message=message)


def classify_write_access(session: Optional[Session], now: datetime) -> AccessResult:
    if session is None:
        return AccessResult.block(WriteAccessReason.session_not_found, "Session not found")

    status = SessionStatus(session.status)

    if status in CLOSED_STATUSES:
        return AccessResult.block(
            WriteAccessReason.session_closed,
            f"Cannot save count. Session is {status.value}.",
            detail=status.value,
        )

    if status == SessionStatus.scheduled:
        return AccessResult.block(
            WriteAccessReason.session_not_yet_active,
            "Cannot save count. Session is not yet active.",
        )

    if session.valid_from is not None and session.valid_until is not None:
        now = ensure_aware(now)
        valid_from = ensure_aware(session.valid_from)
        valid_until = ensure_aware(session.valid_until)

        if now < valid_from:
            return AccessResult.block(
                WriteAccessReason.session_not_started,
                f"Session has not started yet. It will open at {valid_from.isoformat()}",
                detail=valid_from.isoformat(),
            )

        if now > valid_until:
            return AccessResult.block(
                WriteAccessReason.session_expired,
                f"Session has expired. It closed at {valid_until.isoformat()}",
                detail=valid_until.isoformat(),
            )

    return AccessResult.allow()


def is_visible_for_selection(session: Session, now: datetime, today: date) -> bool:
    now = ensure_aware(now)

    if session.status == SessionStatus.scheduled and session.scheduled_date != today:
        return False

    if session.valid_until is not None and ensure_aware(session.valid_until) < now:
        return False

    if session.valid_from is not None and ensure_aware(session.valid_from) > now:
        return False

    if session.is_recurring_template:
        return False

    return True


def remaining_time(valid_until: Optional[datetime], now: datetime) -> Optional[timedelta]:
    if valid_until is None:
        return None
    return ensure_aware(valid_until) - ensure_aware(now)


def remaining_time_bucket(
    valid_until: Optional[datetime], now: datetime
) -> Optional[RemainingTimeBucket]:
    """Display bucket only; has no effect on access."""
    left = remaining_time(valid_until, now)
    if left is None:
        return None
    if left <= timedelta(0):
        return RemainingTimeBucket.expired
    if left < CRITICAL_THRESHOLD:
        return RemainingTimeBucket.critical
    if left < WARNING_THRESHOLD:
        return RemainingTimeBucket.warning
    return RemainingTimeBucket.normal
