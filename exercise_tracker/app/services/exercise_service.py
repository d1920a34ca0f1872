"""
Business logic for logging exercises.

``ExerciseService.add_exercise`` validates the form input, builds an
``ExerciseEntry`` and appends it to the user's log.  Every check runs
before the append, so a rejected request never leaves a partial entry
behind.
"""

import logging
import math
from typing import Optional

from ..core.errors import NotFoundError, ValidationError
from ..core.parsing import format_date, parse_date, parse_number, render_number, today
from ..core.store import ExerciseEntry, UserStore
from ..schemas.exercise import ExerciseAdded

logger = logging.getLogger(__name__)


class ExerciseService:
    """Append exercise entries to user logs."""

    def __init__(self, store: UserStore) -> None:
        self.store = store

    def add_exercise(
        self,
        user_id: str,
        description: Optional[str],
        duration: Optional[str],
        date: Optional[str] = None,
    ) -> ExerciseAdded:
        """Log one exercise for ``user_id``.

        ``duration`` is parsed as a number of minutes; its sign is not
        checked.  ``date`` is optional and defaults to today; when given
        it must parse as a calendar date.

        Raises ``NotFoundError`` for an unknown user and
        ``ValidationError`` for missing fields, a non‑numeric duration
        or an unparseable date.
        """
        user = self.store.find_user(user_id)
        if user is None:
            raise NotFoundError("unknown user id")

        if not description or not duration:
            raise ValidationError("description and duration are required")

        try:
            minutes = parse_number(duration)
        except ValueError:
            raise ValidationError("duration must be a number")
        if not math.isfinite(minutes):
            raise ValidationError("duration must be a number")

        if date:
            try:
                entry_date = parse_date(date)
            except ValueError:
                raise ValidationError("Invalid Date")
        else:
            entry_date = today()

        entry = ExerciseEntry(description=str(description), duration=minutes, date=entry_date)
        self.store.append_entry(user, entry)
        logger.info("Logged exercise for user %s on %s", user.id, entry_date.isoformat())

        return ExerciseAdded(
            username=user.username,
            description=entry.description,
            duration=render_number(entry.duration),
            date=format_date(entry.date),
            id=user.id,
        )
