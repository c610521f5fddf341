"""
SessionUserAssignment Entity

Links a counter (user) to a session.
"""

from uuid import UUID, uuid4

from sqlmodel import Field, Index, SQLModel


class SessionUserAssignment(SQLModel, table=True):
    """
    User assignment - membership of a user in a session.

    Business Rules:
    - (session_id, user_id) must be unique
    - Users live in the external user directory, only the id is stored here
    """

    __tablename__ = "session_users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    session_id: UUID = Field(foreign_key="sessions.id", nullable=False, index=True)
    user_id: UUID = Field(nullable=False, index=True)

    __table_args__ = (
        Index("idx_session_user_pair", "session_id", "user_id", unique=True),
    )
