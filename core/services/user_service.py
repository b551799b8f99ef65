# =============================================================================
# core/services/user_service.py - User Business Logic
# =============================================================================
# Owns the in-memory user store and the CRUD rules around it.
# Every operation holds a single lock for its whole read-modify-write
# sequence, so concurrent requests cannot produce duplicate ids or lost
# updates.
# =============================================================================

import logging
import threading
from typing import Iterable

from core.models.user import User, UserCreate, UserUpdate
from app.exceptions import (
    EmailAlreadyRegisteredError,
    EmailRequiredError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


def default_users() -> list[User]:
    """The two records the store is seeded with at startup."""
    return [
        User(id=1, first_name="John", last_name="Doe", email="john.doe@hr.com", department="HR"),
        User(id=2, first_name="Jane", last_name="Smith", email="jane.smith@it.com", department="IT"),
    ]


class UserService:
    """
    Service for user management operations.

    Holds the ordered list of users for the life of the process.
    Records handed out are copies; the stored ones are only touched
    under the lock.
    """

    def __init__(self, users: Iterable[User] = ()):
        self._users: list[User] = [user.model_copy() for user in users]
        self._lock = threading.RLock()

    @classmethod
    def with_default_users(cls) -> "UserService":
        """Create a service seeded with the default users."""
        return cls(default_users())

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def _find(self, user_id: int) -> User:
        # Caller must hold the lock
        for user in self._users:
            if user.id == user_id:
                return user
        raise UserNotFoundError(user_id)

    def list_users(self) -> list[User]:
        """
        Get all users in insertion order.

        Returns:
            List of user copies
        """
        with self._lock:
            return [user.model_copy() for user in self._users]

    def get_user(self, user_id: int) -> User:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If no user has this ID
        """
        with self._lock:
            return self._find(user_id).model_copy()

    def create_user(self, payload: UserCreate) -> User:
        """
        Create a new user.

        The new ID is one more than the highest existing ID, or 1 when the
        store is empty.

        Args:
            payload: The user data (email required)

        Returns:
            The created user

        Raises:
            EmailRequiredError: If email is missing or empty
            EmailAlreadyRegisteredError: If another user already has this email
        """
        if not payload.email:
            raise EmailRequiredError()

        with self._lock:
            if any(user.email == payload.email for user in self._users):
                raise EmailAlreadyRegisteredError(payload.email)

            next_id = max((user.id for user in self._users), default=0) + 1
            user = User(id=next_id, **payload.model_dump())
            self._users.append(user)

        logger.info(f"Created user: {user.id}")
        return user.model_copy()

    def update_user(self, user_id: int, payload: UserUpdate) -> User:
        """
        Apply a partial update to a user.

        Only fields supplied with a value are changed. Email uniqueness
        is not re-checked here.

        Returns:
            The updated user

        Raises:
            UserNotFoundError: If no user has this ID
        """
        changes = payload.changes()

        with self._lock:
            user = self._find(user_id)
            for field, value in changes.items():
                setattr(user, field, value)
            updated = user.model_copy()

        logger.info(f"Updated user {user_id}: {sorted(changes)}")
        return updated

    def delete_user(self, user_id: int) -> None:
        """
        Delete a user.

        Raises:
            UserNotFoundError: If no user has this ID
        """
        with self._lock:
            user = self._find(user_id)
            self._users.remove(user)

        logger.info(f"Deleted user: {user_id}")
