"""
Pydantic schemas for exercise entries and log queries.

Durations are numbers of minutes; whole values are emitted as JSON
integers.  Dates are always rendered strings such as
``"Sun Jan 15 2023"`` (see ``core.parsing.format_date``).
"""

from typing import List, Union

from pydantic import BaseModel, Field


class ExerciseAdded(BaseModel):
    """Response for ``POST /users/{id}/exercises``.

    Combines the owning user's identity with the new entry's fields.
    """

    username: str
    description: str = Field(..., example="test run")
    duration: Union[int, float] = Field(..., example=30)
    date: str = Field(..., example="Sun Jan 15 2023")
    id: str


class LogEntry(BaseModel):
    description: str
    duration: Union[int, float]
    date: str


class LogRead(BaseModel):
    """Response for ``GET /users/{id}/logs``."""

    username: str
    count: int
    id: str
    log: List[LogEntry]


class ErrorResponse(BaseModel):
    error: str = Field(..., example="unknown user id")
