"""
Domain errors.

Expected, user-facing outcomes (blocked writes, missing sessions) are values,
not exceptions. These exceptions cover the failure kinds that do escape
lower layers.
"""


class StoreError(Exception):
    """The storage collaborator failed (I/O, constraint violation, lost connection)."""

    def __init__(self, message: str, operation: str = ""):
        self.operation = operation
        super().__init__(message)


class SessionValidationError(ValueError):
    """Input that must be rejected without any partial effect."""


class RecurrenceValidationError(SessionValidationError):
    """A recurrence rule cannot be evaluated (unknown repeat type, bad repeat_days)."""
