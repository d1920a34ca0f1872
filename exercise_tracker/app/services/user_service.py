"""
Business logic for users.

``UserService`` validates the username and delegates storage to the
``UserStore``.  Usernames are not required to be unique.
"""

import logging
from typing import List, Optional

from ..core.errors import ValidationError
from ..core.store import UserStore
from ..schemas.user import UserRead

logger = logging.getLogger(__name__)


class UserService:
    """Create and enumerate users."""

    def __init__(self, store: UserStore) -> None:
        self.store = store

    def create_user(self, username: Optional[str]) -> UserRead:
        """Register a new user and return its public fields.

        Raises ``ValidationError`` if ``username`` is absent or empty.
        Duplicate usernames are accepted and get distinct ids.
        """
        if not username:
            raise ValidationError("username required")
        user = self.store.add_user(username)
        logger.info("Created user %s (%s)", user.id, user.username)
        return UserRead(username=user.username, id=user.id)

    def list_users(self) -> List[UserRead]:
        """Return every user in creation order, without logs."""
        return [UserRead(**row) for row in self.store.list_users()]
