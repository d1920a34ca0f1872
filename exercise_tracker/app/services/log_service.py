"""
Business logic for reading exercise logs.

The ``from``, ``to`` and ``limit`` query parameters arrive as optional
strings.  ``LogFilter.parse`` turns them into typed values with the
following per‑field rules:

=========  ===================  ==========================================
field      absent / empty       present but malformed
=========  ===================  ==========================================
``from``   no lower bound       ``ValidationError("Invalid from date")``
``to``     no upper bound       ``ValidationError("Invalid to date")``
``limit``  no cut               ignored, as are negative values
=========  ===================  ==========================================

The bounds are inclusive.  ``limit`` keeps a prefix of the filtered log
in insertion order; it does not select the most recent entries.  A
``from`` later than ``to`` is not an error and simply matches nothing.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from ..core.errors import NotFoundError, ValidationError
from ..core.parsing import format_date, parse_date, parse_number, render_number
from ..core.store import ExerciseEntry, UserStore
from ..schemas.exercise import LogEntry, LogRead

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogFilter:
    """Typed view of the optional log query parameters."""

    date_from: Optional[date] = None
    date_to: Optional[date] = None
    limit: Optional[int] = None

    @classmethod
    def parse(
        cls,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> "LogFilter":
        lower = None
        if date_from:
            try:
                lower = parse_date(date_from)
            except ValueError:
                raise ValidationError("Invalid from date")

        upper = None
        if date_to:
            try:
                upper = parse_date(date_to)
            except ValueError:
                raise ValidationError("Invalid to date")

        return cls(date_from=lower, date_to=upper, limit=cls._parse_limit(limit))

    @staticmethod
    def _parse_limit(value: Optional[str]) -> Optional[int]:
        if not value:
            return None
        try:
            number = parse_number(value)
        except ValueError:
            logger.debug("Ignoring non-numeric limit %r", value)
            return None
        if number < 0 or math.isinf(number):
            return None
        return int(number)

    def apply(self, entries: List[ExerciseEntry]) -> List[ExerciseEntry]:
        """Return the matching entries; ``entries`` itself is not modified."""
        result = list(entries)
        if self.date_from is not None:
            result = [entry for entry in result if entry.date >= self.date_from]
        if self.date_to is not None:
            result = [entry for entry in result if entry.date <= self.date_to]
        if self.limit is not None:
            result = result[: self.limit]
        return result


class LogService:
    """Query a user's exercise history."""

    def __init__(self, store: UserStore) -> None:
        self.store = store

    def query_logs(
        self,
        user_id: str,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> LogRead:
        """Return the user's log filtered by the raw query parameters.

        The user is looked up before the parameters are parsed, so an
        unknown id is reported even when a date is also malformed.
        Raises ``NotFoundError`` or ``ValidationError``.
        """
        user = self.store.find_user(user_id)
        if user is None:
            raise NotFoundError("unknown user id")

        log_filter = LogFilter.parse(date_from, date_to, limit)
        entries = log_filter.apply(self.store.snapshot_log(user))
        log = [
            LogEntry(
                description=entry.description,
                duration=render_number(entry.duration),
                date=format_date(entry.date),
            )
            for entry in entries
        ]
        return LogRead(username=user.username, count=len(log), id=user.id, log=log)
