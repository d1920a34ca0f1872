"""
User endpoints.

Create and list users, log exercises against a user and read back a
user's exercise history.  Request bodies are form‑encoded
(``application/x-www-form-urlencoded``), matching what the landing
page's HTML forms submit.  Every client error is returned as HTTP 400
with ``{"error": message}`` by the handlers installed in ``main``.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Form, Query

from exercise_tracker.app.core.store import UserStore, get_store
from exercise_tracker.app.schemas.exercise import ErrorResponse, ExerciseAdded, LogRead
from exercise_tracker.app.schemas.user import UserRead
from exercise_tracker.app.services.exercise_service import ExerciseService
from exercise_tracker.app.services.log_service import LogService
from exercise_tracker.app.services.user_service import UserService

router = APIRouter(responses={400: {"model": ErrorResponse}})


def get_user_service(store: UserStore = Depends(get_store)) -> UserService:
    return UserService(store)


def get_exercise_service(store: UserStore = Depends(get_store)) -> ExerciseService:
    return ExerciseService(store)


def get_log_service(store: UserStore = Depends(get_store)) -> LogService:
    return LogService(store)


@router.post("", response_model=UserRead)
async def create_user(
    username: Optional[str] = Form(None),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Register a new user.  Usernames need not be unique."""
    return service.create_user(username)


@router.get("", response_model=List[UserRead])
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return all users in creation order."""
    return service.list_users()


@router.post("/{user_id}/exercises", response_model=ExerciseAdded)
async def add_exercise(
    user_id: str,
    description: Optional[str] = Form(None),
    duration: Optional[str] = Form(None),
    date: Optional[str] = Form(None),
    service: ExerciseService = Depends(get_exercise_service),
) -> ExerciseAdded:
    """Log an exercise for a user.

    ``date`` is optional (``yyyy-mm-dd``) and defaults to today.  The
    response combines the user's identity with the new entry.
    """
    return service.add_exercise(user_id, description, duration, date)


@router.get("/{user_id}/logs", response_model=LogRead)
async def get_logs(
    user_id: str,
    date_from: Optional[str] = Query(None, alias="from", description="Earliest date, inclusive (yyyy-mm-dd)"),
    date_to: Optional[str] = Query(None, alias="to", description="Latest date, inclusive (yyyy-mm-dd)"),
    limit: Optional[str] = Query(None, description="Maximum number of entries; ignored if not a number"),
    service: LogService = Depends(get_log_service),
) -> LogRead:
    """Return a user's exercise log, optionally filtered and capped.

    Entries keep their insertion order; ``limit`` keeps the first
    entries after date filtering.
    """
    return service.query_logs(user_id, date_from, date_to, limit)
