"""
Session Entity

A countable unit of work: a standalone session, a recurring template or a
generated occurrence of a template.
"""

from datetime import UTC, date, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel, UniqueConstraint

from .enums import RepeatType, SessionStatus


class Session(SQLModel, table=True):
    """
    Session entity - one stock count session.

    Business Rules:
    - repeat_type != one_time and no parent => recurring template
    - parent_session_id set => generated occurrence of that template
    - Occurrences are always one_time (they never recur themselves)
    - At most one occurrence per (parent_session_id, session_date)
    - valid_from/valid_until gate write access independent of status
    """

    __tablename__ = "sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    type: Optional[str] = Field(default=None, max_length=100)

    status: SessionStatus = Field(default=SessionStatus.draft)

    # Recurrence rule
    repeat_type: RepeatType = Field(default=RepeatType.one_time)
    repeat_days: list[str] = Field(default_factory=list, sa_column=Column(JSON))
    repeat_end_date: Optional[date] = None

    # Anchor date for templates, concrete date for occurrences
    session_date: Optional[date] = Field(default=None, index=True)
    scheduled_date: Optional[date] = Field(default=None, index=True)

    # Local time of day, HH:MM
    start_time: Optional[str] = Field(default=None, max_length=5)
    end_time: Optional[str] = Field(default=None, max_length=5)

    # Write-access window
    valid_from: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True))
    )
    valid_until: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True))
    )
    auto_closed_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True))
    )

    parent_session_id: Optional[UUID] = Field(
        default=None, foreign_key="sessions.id", index=True
    )
    created_by: Optional[UUID] = Field(default=None)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime(timezone=True))
    )

    __table_args__ = (
        UniqueConstraint(
            "parent_session_id", "session_date", name="uq_session_parent_date"
        ),
        Index("idx_session_status_scheduled", "status", "scheduled_date"),
        Index("idx_session_valid_times", "valid_from", "valid_until"),
    )

    @property
    def is_recurring_template(self) -> bool:
        return self.repeat_type != RepeatType.one_time and self.parent_session_id is None

    @property
    def is_occurrence(self) -> bool:
        return self.parent_session_id is not None
