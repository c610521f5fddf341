from typing import Iterable, List
from uuid import UUID

from sqlalchemy import delete, or_
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.base import translate_store_errors
from src.app.repositories.occurrence_log_repository import IOccurrenceLogRepository
from src.domain.entities import OccurrenceLog, OccurrenceLogStatus


class OccurrenceLogRepository(IOccurrenceLogRepository):
    """Occurrence log repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @translate_store_errors
    async def create_many(self, logs: List[OccurrenceLog]) -> List[OccurrenceLog]:
        """Insert log rows"""
        self.session.add_all(logs)
        await self.session.flush()
        return logs

    @translate_store_errors
    async def get_by_master_id(self, master_session_id: UUID) -> List[OccurrenceLog]:
        """Log rows of a template ordered by scheduled_date"""
        stmt = (
            select(OccurrenceLog)
            .where(OccurrenceLog.master_session_id == master_session_id)
            .order_by(OccurrenceLog.scheduled_date)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    @translate_store_errors
    async def mark(
        self, generated_session_ids: Iterable[UUID], status: OccurrenceLogStatus
    ) -> int:
        """Set the status of the rows for the given occurrences"""
        stmt = (
            update(OccurrenceLog)
            .where(OccurrenceLog.generated_session_id.in_(list(generated_session_ids)))
            .values(status=status)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    @translate_store_errors
    async def delete_for_session(self, session_id: UUID) -> int:
        """Delete rows where the session is the template or the occurrence"""
        stmt = delete(OccurrenceLog).where(
            or_(
                OccurrenceLog.master_session_id == session_id,
                OccurrenceLog.generated_session_id == session_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
