"""
SessionItemAssignment Entity

Links an item to a session.
"""

from uuid import UUID, uuid4

from sqlmodel import Field, Index, SQLModel


class SessionItemAssignment(SQLModel, table=True):
    """
    Item assignment - membership of an item in a session.

    Business Rules:
    - (session_id, item_id) must be unique
    - No ordering semantics
    - Items live in the external catalog, only the id is stored here
    """

    __tablename__ = "session_items"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    session_id: UUID = Field(foreign_key="sessions.id", nullable=False, index=True)
    item_id: UUID = Field(nullable=False, index=True)

    __table_args__ = (
        Index("idx_session_item_pair", "session_id", "item_id", unique=True),
    )
