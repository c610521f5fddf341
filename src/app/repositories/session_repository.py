from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Iterable, List, Optional, Set
from uuid import UUID

from src.domain.entities import Session, SessionStatus


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, session_id: UUID) -> Optional[Session]:
        """Get session by ID"""
        pass

    @abstractmethod
    async def create(self, session: Session) -> Session:
        """Create a new session"""
        pass

    @abstractmethod
    async def create_many(self, sessions: List[Session]) -> List[Session]:
        """Insert several sessions in one batch"""
        pass

    @abstractmethod
    async def update(self, session: Session) -> Session:
        """Update existing session"""
        pass

    @abstractmethod
    async def delete(self, session: Session) -> None:
        """Hard delete a session row"""
        pass

    @abstractmethod
    async def get_children(
        self,
        parent_session_id: UUID,
        after_date: Optional[date] = None,
        exclude_id: Optional[UUID] = None,
    ) -> List[Session]:
        """Occurrences of a template ordered by session_date, optionally only after a date"""
        pass

    @abstractmethod
    async def get_occurrence_dates(
        self, parent_session_id: UUID, start: date, end: date
    ) -> Set[date]:
        """Dates in [start, end] that already have an occurrence of the template"""
        pass

    @abstractmethod
    async def detach_children(self, parent_session_id: UUID) -> int:
        """Clear parent_session_id on all occurrences of a template. Returns count."""
        pass

    @abstractmethod
    async def get_recurring_templates(
        self, excluded_statuses: Iterable[SessionStatus] = ()
    ) -> List[Session]:
        """Templates (recurring, no parent) whose status is not excluded"""
        pass

    @abstractmethod
    async def get_scheduled_due(self, today: date, now: datetime) -> List[Session]:
        """Scheduled sessions for today whose valid_from is unset or reached"""
        pass

    @abstractmethod
    async def get_active_expired(self, now: datetime) -> List[Session]:
        """Active sessions whose valid_until has passed"""
        pass

    @abstractmethod
    async def get_selection_candidates(self, user_id: Optional[UUID] = None) -> List[Session]:
        """Every session, or only those assigned to a user"""
        pass
