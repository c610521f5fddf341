"""
Scheduling Use Case DTOs (Data Transfer Objects)

Response classes for occurrence generation.
"""

from typing import List

from pydantic import BaseModel, Field


class GenerateOccurrencesResponse(BaseModel):
    """Response for generating the occurrences of one template"""

    template_id: str
    created: int = 0
    seeded: int = 0
    dates: List[str] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)


class GenerateAllOccurrencesResponse(BaseModel):
    """Response for the periodic generation run over all templates"""

    templates: int = 0
    created: int = 0
    seeded: int = 0
    results: List[GenerateOccurrencesResponse] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)
