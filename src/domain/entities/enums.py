"""
Session Scheduling Domain Enums

All enumeration types used across domain entities and rules.
"""

from enum import Enum


class SessionStatus(str, Enum):
    """Lifecycle status of a count session"""

    draft = "draft"
    active = "active"
    scheduled = "scheduled"
    completed = "completed"
    cancelled = "cancelled"
    closed = "closed"


class RepeatType(str, Enum):
    """Recurrence rule of a session"""

    one_time = "one_time"
    daily = "daily"
    weekly = "weekly"
    monthly = "monthly"


class OccurrenceLogStatus(str, Enum):
    """Status of a generated occurrence in the generation log"""

    generated = "generated"
    activated = "activated"
    closed = "closed"


class WriteAccessReason(str, Enum):
    """Why a write to a session is blocked"""

    session_not_found = "session_not_found"
    session_closed = "session_closed"
    session_not_yet_active = "session_not_yet_active"
    session_not_started = "session_not_started"
    session_expired = "session_expired"


class RemainingTimeBucket(str, Enum):
    """Display bucket for the time left before valid_until"""

    expired = "expired"
    critical = "critical"
    warning = "warning"
    normal = "normal"


class SyncScope(str, Enum):
    """Which related sessions an assignment sync may touch"""

    all = "all"
    future_only = "future_only"


class MonthlyOverflow(str, Enum):
    """What a monthly rule does when the anchor day does not exist in a month"""

    clamp = "clamp"
    skip = "skip"
