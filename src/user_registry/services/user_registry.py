"""In-memory user registry."""

import logging
import threading
from collections.abc import Iterable

from user_registry.models.user import User

logger = logging.getLogger(__name__)

SEED_USERS: tuple[User, ...] = (
    User(id="1", first_name="Jyri", surname="Kemppainen"),
    User(id="2", first_name="Petri", surname="Laitinen"),
)


class UserRegistry:
    """Ordered collection of users held in process memory.

    Records keep their insertion order; an update replaces a record at its
    current position. Each operation holds the registry lock for its whole
    read or read-modify-write sequence.
    """

    def __init__(self, users: Iterable[User] | None = None) -> None:
        """Initialize the registry.

        Args:
            users: Initial records, in order

        Raises:
            ValueError: If two initial records share an id
        """
        self._users: list[User] = []
        self._lock = threading.Lock()
        for user in users or ():
            if not self.add_user(user):
                raise ValueError(f"Duplicate user id in initial records: {user.id}")

    @classmethod
    def with_seed_users(cls) -> "UserRegistry":
        """Create a registry holding the two default users."""
        return cls(SEED_USERS)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def _index_of(self, user_id: str) -> int | None:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        return None

    def list_users(self) -> list[User]:
        with self._lock:
            return list(self._users)

    def get_user(self, user_id: str) -> User | None:
        with self._lock:
            index = self._index_of(user_id)
            return None if index is None else self._users[index]

    def add_user(self, user: User) -> bool:
        """Append a user.

        Returns:
            False if a user with the same id already exists, True otherwise
        """
        with self._lock:
            if self._index_of(user.id) is not None:
                return False
            self._users.append(user)
        logger.info("Added user %s", user.id)
        return True

    def upsert_user(self, user_id: str, first_name: str, surname: str) -> tuple[User, bool]:
        """Replace the name fields of a user, or create the user if absent.

        Args:
            user_id: Id of the user to update or create
            first_name: New first name
            surname: New surname

        Returns:
            The stored user and whether it was newly created
        """
        user = User(id=user_id, first_name=first_name, surname=surname)
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                self._users.append(user)
            else:
                self._users[index] = user
        created = index is None
        logger.info("%s user %s", "Created" if created else "Updated", user_id)
        return user, created

    def delete_user(self, user_id: str) -> bool:
        """Remove a user.

        Returns:
            False if no user has the given id, True otherwise
        """
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                return False
            del self._users[index]
        logger.info("Deleted user %s", user_id)
        return True
