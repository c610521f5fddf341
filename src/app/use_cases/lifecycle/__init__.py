"""
Lifecycle Use Cases

Status changes, periodic status jobs and hard delete.
"""

from .dtos import ChangeStatusResponse, StatusJobResponse, DeleteSessionResponse
from .change_session_status_use_case import ChangeSessionStatusUseCase
from .activate_scheduled_sessions_use_case import ActivateScheduledSessionsUseCase
from .auto_close_expired_sessions_use_case import AutoCloseExpiredSessionsUseCase
from .delete_session_use_case import DeleteSessionUseCase

__all__ = [
    "ChangeStatusResponse",
    "StatusJobResponse",
    "DeleteSessionResponse",
    "ChangeSessionStatusUseCase",
    "ActivateScheduledSessionsUseCase",
    "AutoCloseExpiredSessionsUseCase",
    "DeleteSessionUseCase",
]
