"""
Exceptions raised by the service layer.

Services raise these instead of ``HTTPException`` so that they stay
usable outside of a request.  ``create_app`` registers a handler that
reports every ``ExerciseTrackerError`` as HTTP 400 with a JSON body of
the form ``{"error": message}``.
"""


class ExerciseTrackerError(Exception):
    """Base class for client‑correctable failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ExerciseTrackerError):
    """Missing or malformed caller input."""


class NotFoundError(ExerciseTrackerError):
    """A well‑formed user id with no matching record."""
