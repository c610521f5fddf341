from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.assignment_repository import AssignmentRepository
from src.adapter.repositories.occurrence_log_repository import OccurrenceLogRepository
from src.adapter.repositories.session_repository import SessionRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import StoreError


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.sessions = SessionRepository(self.session)
        self.assignments = AssignmentRepository(self.session)
        self.occurrence_logs = OccurrenceLogRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        try:
            await self.session.commit()
        except SQLAlchemyError as exc:
            raise StoreError(str(exc), operation="commit") from exc

    async def rollback(self):
        await self.session.rollback()
