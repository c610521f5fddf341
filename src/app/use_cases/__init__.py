"""
Use Cases - organized by concern:
- scheduling/: Occurrence generation
- sync/: Assignment propagation
- access/: Write access and selection lists
- lifecycle/: Status changes, periodic jobs, hard delete
"""

from .scheduling import (
    GenerateOccurrencesUseCase,
    GenerateAllOccurrencesUseCase,
)
from .sync import (
    SyncSiblingsForwardUseCase,
    SyncChildrenFromTemplateUseCase,
    ReplaceAssignmentsUseCase,
)
from .access import (
    CheckWriteAccessUseCase,
    ListSelectableSessionsUseCase,
)
from .lifecycle import (
    ChangeSessionStatusUseCase,
    ActivateScheduledSessionsUseCase,
    AutoCloseExpiredSessionsUseCase,
    DeleteSessionUseCase,
)

__all__ = [
    # Scheduling
    "GenerateOccurrencesUseCase",
    "GenerateAllOccurrencesUseCase",
    # Sync
    "SyncSiblingsForwardUseCase",
    "SyncChildrenFromTemplateUseCase",
    "ReplaceAssignmentsUseCase",
    # Access
    "CheckWriteAccessUseCase",
    "ListSelectableSessionsUseCase",
    # Lifecycle
    "ChangeSessionStatusUseCase",
    "ActivateScheduledSessionsUseCase",
    "AutoCloseExpiredSessionsUseCase",
    "DeleteSessionUseCase",
]
