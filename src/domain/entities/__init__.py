"""
Session Scheduling Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    SessionStatus,
    RepeatType,
    OccurrenceLogStatus,
    WriteAccessReason,
    RemainingTimeBucket,
    SyncScope,
    MonthlyOverflow,
)

# Export all entities
from .session import Session
from .session_item import SessionItemAssignment
from .session_user import SessionUserAssignment
from .occurrence_log import OccurrenceLog

__all__ = [
    # Enums
    "SessionStatus",
    "RepeatType",
    "OccurrenceLogStatus",
    "WriteAccessReason",
    "RemainingTimeBucket",
    "SyncScope",
    "MonthlyOverflow",
    # Entities
    "Session",
    "SessionItemAssignment",
    "SessionUserAssignment",
    "OccurrenceLog",
]
