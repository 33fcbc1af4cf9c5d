from __future__ import annotations

import logging
import threading
from dataclasses import replace

from lockerapi.core.entities.locker import Locker
from lockerapi.core.entities.user import User

logger = logging.getLogger(__name__)


class InMemoryStore:
    """
    Process-local state for users and lockers, guarded by a single lock.

    Lockers live in one canonical collection. A user's lockers are never stored on the user;
    they are read through `_lockers_by_user`, an index of locker ids kept in creation order,
    so the owner's view cannot drift from the locker records.

    Every public method holds the lock for its whole read-or-write and returns copies.
    """

    def __init__(self, *, initial_user_id: int = 0, initial_locker_id: int = 0) -> None:
        self._lock = threading.Lock()
        self._users: dict[int, User] = {}
        self._lockers: dict[int, Locker] = {}
        self._lockers_by_user: dict[int, list[int]] = {}
        self._next_user_id = initial_user_id
        self._next_locker_id = initial_locker_id

    # -----------------------------
    # Users
    # -----------------------------
    def add_user(self, user: User) -> User:
        with self._lock:
            user_id = self._next_user_id
            self._next_user_id += 1

            self._users[user_id] = replace(user, id=user_id, lockers=[])
            self._lockers_by_user[user_id] = []
            created = self._user_view(user_id)

        logger.debug("Created user %s", user_id)
        return created

    def get_user(self, user_id: int) -> User | None:
        with self._lock:
            if user_id not in self._users:
                return None
            return self._user_view(user_id)

    def list_users(self) -> list[User]:
        with self._lock:
            return [self._user_view(user_id) for user_id in sorted(self._users)]

    def update_user(self, user: User) -> User | None:
        with self._lock:
            if user.id not in self._users:
                return None
            self._users[user.id] = replace(user, lockers=[])
            updated = self._user_view(user.id)

        logger.debug("Updated user %s", user.id)
        return updated

    def delete_user(self, user_id: int) -> bool:
        with self._lock:
            if self._users.pop(user_id, None) is None:
                return False
            # Owned lockers stay in the canonical collection with their user_id unchanged
            orphaned = self._lockers_by_user.pop(user_id, [])

        logger.debug("Deleted user %s (%d lockers left orphaned)", user_id, len(orphaned))
        return True

    # -----------------------------
    # Lockers
    # -----------------------------
    def add_locker(self, user_id: int, locker: Locker) -> Locker | None:
        with self._lock:
            if user_id not in self._users:
                return None

            locker_id = self._next_locker_id
            self._next_locker_id += 1

            created = replace(locker, id=locker_id, user_id=user_id)
            self._lockers[locker_id] = created
            self._lockers_by_user[user_id].append(locker_id)
            created = replace(created)

        logger.debug("Created locker %s for user %s", locker_id, user_id)
        return created

    def get_locker(self, locker_id: int) -> Locker | None:
        with self._lock:
            locker = self._lockers.get(locker_id)
            return None if locker is None else replace(locker)

    def list_lockers(self) -> list[Locker]:
        with self._lock:
            return [replace(self._lockers[locker_id]) for locker_id in sorted(self._lockers)]

    def update_locker(self, locker: Locker) -> Locker | None:
        with self._lock:
            current = self._lockers.get(locker.id)
            if current is None:
                return None

            updated = replace(current, number=locker.number, status=locker.status)
            self._lockers[locker.id] = updated
            updated = replace(updated)

        logger.debug("Updated locker %s", locker.id)
        return updated

    def delete_locker(self, locker_id: int) -> bool:
        with self._lock:
            locker = self._lockers.pop(locker_id, None)
            if locker is None:
                return False

            owned = self._lockers_by_user.get(locker.user_id)
            if owned is not None and locker_id in owned:
                owned.remove(locker_id)

        logger.debug("Deleted locker %s", locker_id)
        return True

    def _user_view(self, user_id: int) -> User:
        """Copy of the user with its lockers resolved from the index. Caller holds the lock."""
        lockers = [replace(self._lockers[locker_id]) for locker_id in self._lockers_by_user.get(user_id, [])]
        return replace(self._users[user_id], lockers=lockers)
