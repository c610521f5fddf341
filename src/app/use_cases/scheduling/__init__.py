"""
Scheduling Use Cases

Occurrence generation from recurring templates.
"""

from .dtos import GenerateOccurrencesResponse, GenerateAllOccurrencesResponse
from .generate_occurrences_use_case import GenerateOccurrencesUseCase
from .generate_all_occurrences_use_case import GenerateAllOccurrencesUseCase

__all__ = [
    "GenerateOccurrencesUseCase",
    "GenerateOccurrencesResponse",
    "GenerateAllOccurrencesUseCase",
    "GenerateAllOccurrencesResponse",
]
