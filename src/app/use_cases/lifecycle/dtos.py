"""
Lifecycle Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ChangeStatusResponse(BaseModel):
    """Response for a manual status change"""

    session_id: str
    previous_status: str
    status: str
    scheduled_date: Optional[str] = None


class StatusJobResponse(BaseModel):
    """Response for the activation and auto-close jobs"""

    count: int
    session_ids: List[str] = Field(default_factory=list)


class DeleteSessionResponse(BaseModel):
    """Response for a hard delete"""

    session_id: str
    assignments_deleted: int
    children_detached: int
