"""
Sync Use Case DTOs (Data Transfer Objects)

Response classes for assignment propagation workflows.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from src.domain.entities import SyncScope


class SyncResponse(BaseModel):
    """Response for sibling-forward and template-to-children syncs"""

    source_session_id: str
    scope: SyncScope
    targets: int = 0
    updated: int = 0
    errors: List[str] = Field(default_factory=list)


class ReplaceAssignmentsResponse(BaseModel):
    """Response for replacing the assignments of one session"""

    session_id: str
    items: int
    users: int
    errors: List[str] = Field(default_factory=list)
    propagated: Optional[SyncResponse] = None
