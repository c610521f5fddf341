from abc import ABC, abstractmethod
from typing import Iterable, List
from uuid import UUID

from src.domain.entities import OccurrenceLog, OccurrenceLogStatus


class IOccurrenceLogRepository(ABC):
    """Occurrence generation log repository interface - application layer"""

    @abstractmethod
    async def create_many(self, logs: List[OccurrenceLog]) -> List[OccurrenceLog]:
        """Insert log rows"""
        pass

    @abstractmethod
    async def get_by_master_id(self, master_session_id: UUID) -> List[OccurrenceLog]:
        """Log rows of a template ordered by scheduled_date"""
        pass

    @abstractmethod
    async def mark(
        self, generated_session_ids: Iterable[UUID], status: OccurrenceLogStatus
    ) -> int:
        """Set the status of the rows for the given occurrences. Returns count."""
        pass

    @abstractmethod
    async def delete_for_session(self, session_id: UUID) -> int:
        """Delete rows where the session is the template or the occurrence"""
        pass
