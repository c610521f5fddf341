from datetime import date, datetime
from typing import Iterable, List, Optional, Set
from uuid import UUID

from sqlalchemy import or_
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.base import translate_store_errors
from src.app.repositories.session_repository import ISessionRepository
from src.domain.clock import to_utc
from src.domain.entities import RepeatType, Session, SessionStatus, SessionUserAssignment


class SessionRepository(ISessionRepository):
    """Session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @translate_store_errors
    async def get_by_id(self, session_id: UUID) -> Optional[Session]:
        """Get session by ID"""
        stmt = select(Session).where(Session.id == session_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @translate_store_errors
    async def create(self, session_obj: Session) -> Session:
        """Create a new session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    @translate_store_errors
    async def create_many(self, sessions: List[Session]) -> List[Session]:
        """Insert several sessions in one flush"""
        self.session.add_all(sessions)
        await self.session.flush()
        return sessions

    @translate_store_errors
    async def update(self, session_obj: Session) -> Session:
        """Update existing session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    @translate_store_errors
    async def delete(self, session_obj: Session) -> None:
        """Hard delete a session row"""
        await self.session.delete(session_obj)
        await self.session.flush()

    @translate_store_errors
    async def get_children(
        self,
        parent_session_id: UUID,
        after_date: Optional[date] = None,
        exclude_id: Optional[UUID] = None,
    ) -> List[Session]:
        """Occurrences of a template ordered by session_date"""
        stmt = select(Session).where(Session.parent_session_id == parent_session_id)
        if after_date is not None:
            stmt = stmt.where(Session.session_date > after_date)
        if exclude_id is not None:
            stmt = stmt.where(Session.id != exclude_id)
        stmt = stmt.order_by(Session.session_date)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    @translate_store_errors
    async def get_occurrence_dates(
        self, parent_session_id: UUID, start: date, end: date
    ) -> Set[date]:
        """Dates in [start, end] that already have an occurrence"""
        stmt = select(Session.session_date).where(
            Session.parent_session_id == parent_session_id,
            Session.session_date >= start,
            Session.session_date <= end,
        )
        result = await self.session.execute(stmt)
        return set(result.scalars().all())

    @translate_store_errors
    async def detach_children(self, parent_session_id: UUID) -> int:
        """Clear parent_session_id on all occurrences of a template"""
        stmt = (
            update(Session)
            .where(Session.parent_session_id == parent_session_id)
            .values(parent_session_id=None)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    @translate_store_errors
    async def get_recurring_templates(
        self, excluded_statuses: Iterable[SessionStatus] = ()
    ) -> List[Session]:
        """Recurring templates whose status is not excluded"""
        stmt = select(Session).where(
            Session.repeat_type != RepeatType.one_time,
            Session.parent_session_id == None,  # noqa: E711
        )
        excluded = list(excluded_statuses)
        if excluded:
            stmt = stmt.where(Session.status.not_in(excluded))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    @translate_store_errors
    async def get_scheduled_due(self, today: date, now: datetime) -> List[Session]:
        """Scheduled sessions for today whose valid_from is unset or reached"""
        stmt = select(Session).where(
            Session.status == SessionStatus.scheduled,
            Session.scheduled_date == today,
            or_(Session.valid_from == None, Session.valid_from <= to_utc(now)),  # noqa: E711
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    @translate_store_errors
    async def get_active_expired(self, now: datetime) -> List[Session]:
        """Active sessions whose valid_until has passed"""
        stmt = select(Session).where(
            Session.status == SessionStatus.active,
            Session.valid_until != None,  # noqa: E711
            Session.valid_until < to_utc(now),
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    @translate_store_errors
    async def get_selection_candidates(self, user_id: Optional[UUID] = None) -> List[Session]:
        """Every session, or only those assigned to a user"""
        stmt = select(Session)
        if user_id is not None:
            stmt = stmt.join(
                SessionUserAssignment, SessionUserAssignment.session_id == Session.id
            ).where(SessionUserAssignment.user_id == user_id)
        stmt = stmt.order_by(Session.session_date, Session.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
