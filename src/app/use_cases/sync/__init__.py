"""
Sync Use Cases

Assignment propagation between templates and occurrences.
"""

from .dtos import SyncResponse, ReplaceAssignmentsResponse
from .sync_siblings_forward_use_case import SyncSiblingsForwardUseCase
from .sync_children_from_template_use_case import SyncChildrenFromTemplateUseCase
from .replace_assignments_use_case import ReplaceAssignmentsUseCase

__all__ = [
    "SyncResponse",
    "ReplaceAssignmentsResponse",
    "SyncSiblingsForwardUseCase",
    "SyncChildrenFromTemplateUseCase",
    "ReplaceAssignmentsUseCase",
]
