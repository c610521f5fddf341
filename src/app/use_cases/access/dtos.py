"""
Access Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.access_control import AccessResult
from src.domain.entities import RemainingTimeBucket


class WriteAccessResponse(BaseModel):
    """Write-access classification of one session"""

    session_id: str
    access: AccessResult
    remaining_seconds: Optional[int] = None
    remaining_bucket: Optional[RemainingTimeBucket] = None


class SelectableSession(BaseModel):
    """A session a counter may pick"""

    id: str
    name: str
    type: Optional[str]
    status: str
    session_date: Optional[str]
    valid_from: Optional[str]
    valid_until: Optional[str]
    remaining_bucket: Optional[RemainingTimeBucket] = None


class SelectableSessionsResponse(BaseModel):
    """Sessions visible for selection"""

    sessions: List[SelectableSession]
