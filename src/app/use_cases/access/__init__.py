"""
Access Use Cases

Write-access checks and session selection lists.
"""

from .dtos import WriteAccessResponse, SelectableSession, SelectableSessionsResponse
from .check_write_access_use_case import CheckWriteAccessUseCase
from .list_selectable_sessions_use_case import ListSelectableSessionsUseCase

__all__ = [
    "WriteAccessResponse",
    "SelectableSession",
    "SelectableSessionsResponse",
    "CheckWriteAccessUseCase",
    "ListSelectableSessionsUseCase",
]
