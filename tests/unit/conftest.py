from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.sessions = MagicMock()
    uow.sessions.get_by_id = AsyncMock(return_value=None)
    uow.sessions.create = AsyncMock(side_effect=lambda s: s)
    uow.sessions.create_many = AsyncMock(side_effect=lambda rows: rows)
    uow.sessions.update = AsyncMock(side_effect=lambda s: s)
    uow.sessions.delete = AsyncMock()
    uow.sessions.get_children = AsyncMock(return_value=[])
    uow.sessions.get_occurrence_dates = AsyncMock(return_value=set())
    uow.sessions.detach_children = AsyncMock(return_value=0)
    uow.sessions.get_recurring_templates = AsyncMock(return_value=[])
    uow.sessions.get_scheduled_due = AsyncMock(return_value=[])
    uow.sessions.get_active_expired = AsyncMock(return_value=[])
    uow.sessions.get_selection_candidates = AsyncMock(return_value=[])

    uow.assignments = MagicMock()
    uow.assignments.get_item_ids = AsyncMock(return_value=[])
    uow.assignments.get_user_ids = AsyncMock(return_value=[])
    uow.assignments.replace_items = AsyncMock(side_effect=lambda sid, ids: len(list(ids)))
    uow.assignments.replace_users = AsyncMock(side_effect=lambda sid, ids: len(list(ids)))
    uow.assignments.delete_all_for_session = AsyncMock(return_value=0)

    uow.occurrence_logs = MagicMock()
    uow.occurrence_logs.create_many = AsyncMock(side_effect=lambda rows: rows)
    uow.occurrence_logs.get_by_master_id = AsyncMock(return_value=[])
    uow.occurrence_logs.mark = AsyncMock(return_value=0)
    uow.occurrence_logs.delete_for_session = AsyncMock(return_value=0)

    return uow


@pytest.fixture
def now():
    return datetime(2025, 1, 1, 9, 0, tzinfo=UTC)
