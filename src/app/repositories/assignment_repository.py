from abc import ABC, abstractmethod
from typing import Iterable, List
from uuid import UUID


class IAssignmentRepository(ABC):
    """Item/user assignment repository interface - application layer"""

    @abstractmethod
    async def get_item_ids(self, session_id: UUID) -> List[UUID]:
        """Item ids assigned to a session"""
        pass

    @abstractmethod
    async def get_user_ids(self, session_id: UUID) -> List[UUID]:
        """User ids assigned to a session"""
        pass

    @abstractmethod
    async def replace_items(self, session_id: UUID, item_ids: Iterable[UUID]) -> int:
        """Delete all item rows of the session, insert the given ids. Returns inserted count."""
        pass

    @abstractmethod
    async def replace_users(self, session_id: UUID, user_ids: Iterable[UUID]) -> int:
        """Delete all user rows of the session, insert the given ids. Returns inserted count."""
        pass

    @abstractmethod
    async def delete_all_for_session(self, session_id: UUID) -> int:
        """Delete item and user rows of a session. Returns deleted count."""
        pass
