"""
In‑memory user store.

Users and their exercise logs live in a plain Python list for the
lifetime of the process; nothing is written to disk.  ``create_app``
constructs one ``UserStore`` at startup, attaches it to
``app.state.store`` and clears it at shutdown.  Route handlers receive
it through the ``get_store`` dependency.

Lookups are linear scans.  A single lock guards both reads and
appends so that a handler running on a worker thread never observes a
half‑applied mutation.
"""

import logging
import secrets
import threading
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from fastapi import Request

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExerciseEntry:
    """One logged activity.  Value type, owned by exactly one user."""

    description: str
    duration: float
    date: date


@dataclass
class User:
    id: str
    username: str
    log: List[ExerciseEntry] = field(default_factory=list)


def generate_id() -> str:
    """Return a 24‑character hex token (12 random bytes)."""
    return secrets.token_hex(12)


class UserStore:
    """Ordered, append‑only collection of users."""

    def __init__(self) -> None:
        self._users: List[User] = []
        self._issued_ids = set()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def add_user(self, username: str) -> User:
        """Append a new user with an empty log and return it.

        Input validation is the caller's job; the store only guarantees
        that the generated id has never been issued before.
        """
        with self._lock:
            user_id = generate_id()
            while user_id in self._issued_ids:
                user_id = generate_id()
            self._issued_ids.add(user_id)
            user = User(id=user_id, username=username)
            self._users.append(user)
            total = len(self._users)
        logger.debug("Stored user %s (%d total)", user.id, total)
        return user

    def list_users(self) -> List[Dict[str, str]]:
        """Return ``{"id", "username"}`` pairs in insertion order."""
        with self._lock:
            return [{"id": user.id, "username": user.username} for user in self._users]

    def find_user(self, user_id: str) -> Optional[User]:
        """Return the user with ``user_id`` or ``None``."""
        with self._lock:
            for user in self._users:
                if user.id == user_id:
                    return user
        return None

    def append_entry(self, user: User, entry: ExerciseEntry) -> None:
        with self._lock:
            user.log.append(entry)

    def snapshot_log(self, user: User) -> List[ExerciseEntry]:
        """Copy of ``user.log``; callers may filter it freely."""
        with self._lock:
            return list(user.log)

    def clear(self) -> None:
        """Drop every user.  Called once at application shutdown."""
        with self._lock:
            count = len(self._users)
            self._users.clear()
        logger.info("User store cleared (%d users dropped)", count)


def get_store(request: Request) -> UserStore:
    """FastAPI dependency returning the application's store."""
    return request.app.state.store
