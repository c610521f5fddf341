"""
Allowed session status transitions.

Administrators move sessions between statuses by hand; the table keeps
those moves to a known set and keeps a scheduled session from existing
without the date it is scheduled for.
"""

from datetime import date
from typing import Optional

from .entities import Session, SessionStatus
from .errors import SessionValidationError

ALLOWED_TRANSITIONS: dict[SessionStatus, frozenset[SessionStatus]] = {
    SessionStatus.draft: frozenset(
        {SessionStatus.scheduled, SessionStatus.active, SessionStatus.cancelled}
    ),
    SessionStatus.scheduled: frozenset(
        {SessionStatus.draft, SessionStatus.active, SessionStatus.cancelled}
    ),
    SessionStatus.active: frozenset(
        {SessionStatus.completed, SessionStatus.closed, SessionStatus.cancelled}
    ),
    SessionStatus.completed: frozenset({SessionStatus.closed}),
    SessionStatus.closed: frozenset({SessionStatus.active}),
    SessionStatus.cancelled: frozenset(),
}


class InvalidTransitionError(ValueError):
    def __init__(self, current: SessionStatus, target: SessionStatus):
        self.current = current
        self.target = target
        super().__init__(f"Cannot change status from {current.value} to {target.value}")


def can_transition(current: SessionStatus, target: SessionStatus) -> bool:
    if current == target:
        return True
    return target in ALLOWED_TRANSITIONS[current]


def apply_transition(session: Session, target: SessionStatus) -> Optional[date]:
    """
    Move session to target in place.

    Returns:
        The scheduled_date the session ends up with

    Raises:
        InvalidTransitionError: target is not reachable from the current status
        SessionValidationError: scheduling a session that has no date
    """
    current = SessionStatus(session.status)
    if not can_transition(current, target):
        raise InvalidTransitionError(current, target)

    if target == SessionStatus.scheduled and session.scheduled_date is None:
        if session.session_date is None:
            raise SessionValidationError(
                "A scheduled session needs a scheduled_date or session_date"
            )
        session.scheduled_date = session.session_date

    session.status = target
    return session.scheduled_date
