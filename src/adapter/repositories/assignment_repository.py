from typing import Iterable, List
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.base import translate_store_errors
from src.app.repositories.assignment_repository import IAssignmentRepository
from src.domain.entities import SessionItemAssignment, SessionUserAssignment


class AssignmentRepository(IAssignmentRepository):
    """Assignment repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @translate_store_errors
    async def get_item_ids(self, session_id: UUID) -> List[UUID]:
        """Item ids assigned to a session"""
        stmt = select(SessionItemAssignment.item_id).where(
            SessionItemAssignment.session_id == session_id
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    @translate_store_errors
    async def get_user_ids(self, session_id: UUID) -> List[UUID]:
        """User ids assigned to a session"""
        stmt = select(SessionUserAssignment.user_id).where(
            SessionUserAssignment.session_id == session_id
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    @translate_store_errors
    async def replace_items(self, session_id: UUID, item_ids: Iterable[UUID]) -> int:
        """Delete then insert the item rows of a session"""
        await self.session.execute(
            delete(SessionItemAssignment).where(SessionItemAssignment.session_id == session_id)
        )
        rows = [
            SessionItemAssignment(session_id=session_id, item_id=item_id)
            for item_id in dict.fromkeys(item_ids)
        ]
        self.session.add_all(rows)
        await self.session.flush()
        return len(rows)

    @translate_store_errors
    async def replace_users(self, session_id: UUID, user_ids: Iterable[UUID]) -> int:
        """Delete then insert the user rows of a session"""
        await self.session.execute(
            delete(SessionUserAssignment).where(SessionUserAssignment.session_id == session_id)
        )
        rows = [
            SessionUserAssignment(session_id=session_id, user_id=user_id)
            for user_id in dict.fromkeys(user_ids)
        ]
        self.session.add_all(rows)
        await self.session.flush()
        return len(rows)

    @translate_store_errors
    async def delete_all_for_session(self, session_id: UUID) -> int:
        """Delete item and user rows of a session"""
        items = await self.session.execute(
            delete(SessionItemAssignment).where(SessionItemAssignment.session_id == session_id)
        )
        users = await self.session.execute(
            delete(SessionUserAssignment).where(SessionUserAssignment.session_id == session_id)
        )
        await self.session.flush()
        return items.rowcount + users.rowcount
