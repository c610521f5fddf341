"""
Change Session Status Use Case

Moves a session to another status along the allowed transitions.
"""

from typing import Union
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import SessionStatus
from src.domain.errors import SessionValidationError, StoreError
from src.domain.status_transitions import InvalidTransitionError, apply_transition

from .dtos import ChangeStatusResponse


class ChangeSessionStatusUseCase:
    """
    Use case for administrator status changes.

    Business Rules:
    - Only transitions in ALLOWED_TRANSITIONS are accepted
    - Setting the current status again is a no-op
    - A scheduled session must carry a scheduled_date
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, session_id: UUID, new_status: Union[SessionStatus, str]
    ) -> Result[ChangeStatusResponse]:
        """
        Errors:
            - INVALID_STATUS: Unknown status value
            - SESSION_NOT_FOUND: Session does not exist
            - INVALID_TRANSITION: Status cannot be reached from the current one
            - VALIDATION_ERROR: Scheduling a session without any date
            - STORE_ERROR: Storage failed
        """
        try:
            target = SessionStatus(new_status)
        except ValueError:
            return Return.err(
                Error(
                    "INVALID_STATUS",
                    f"Invalid status: {new_status}. Must be one of: "
                    + ", ".join(s.value for s in SessionStatus),
                )
            )

        async with self.uow:
            try:
                session = await self.uow.sessions.get_by_id(session_id)
                if session is None:
                    return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))

                previous = SessionStatus(session.status)
                try:
                    scheduled_date = apply_transition(session, target)
                except InvalidTransitionError as exc:
                    return Return.err(Error("INVALID_TRANSITION", str(exc)))
                except SessionValidationError as exc:
                    return Return.err(Error("VALIDATION_ERROR", str(exc)))

                if previous != target:
                    await self.uow.sessions.update(session)
                    await self.uow.commit()
            except StoreError as exc:
                return Return.err(
                    Error("STORE_ERROR", "Could not change session status", reason=str(exc))
                )

        return Return.ok(
            ChangeStatusResponse(
                session_id=str(session_id),
                previous_status=previous.value,
                status=target.value,
                scheduled_date=scheduled_date.isoformat() if scheduled_date else None,
            )
        )
