"""
OccurrenceLog Entity

Tracks occurrences generated from recurring templates.
"""

from datetime import UTC, date, datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import OccurrenceLogStatus


class OccurrenceLog(SQLModel, table=True):
    """
    OccurrenceLog entity - one row per generated occurrence.

    Business Rules:
    - (master_session_id, scheduled_date) must be unique
    - Status follows the occurrence: generated -> activated -> closed
    - Rows are removed together with either session on hard delete
    """

    __tablename__ = "recurring_session_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    master_session_id: UUID = Field(foreign_key="sessions.id", nullable=False)
    generated_session_id: UUID = Field(foreign_key="sessions.id", nullable=False)
    scheduled_date: date = Field(nullable=False)

    status: OccurrenceLogStatus = Field(default=OccurrenceLogStatus.generated)

    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime(timezone=True))
    )

    __table_args__ = (
        Index("idx_recurring_logs_master_date", "master_session_id", "scheduled_date", unique=True),
        Index("idx_recurring_logs_generated", "generated_session_id"),
    )
