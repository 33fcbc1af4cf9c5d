from __future__ import annotations

from abc import ABC, abstractmethod

from lockerapi.core.entities.user import User


class UserRepository(ABC):
    """
    Repository interface for users. Returned users carry their lockers in creation order.
    """

    @abstractmethod
    def add(self, user: User) -> User:
        """Assign a new id and store the user. The given `lockers` are ignored."""
        raise NotImplementedError

    @abstractmethod
    def get(self, user_id: int) -> User | None:
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[User]:
        """All users ordered by id."""
        raise NotImplementedError

    @abstractmethod
    def update(self, user: User) -> User | None:
        """Replace the profile fields of `user.id`; return None if the user is missing."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, user_id: int) -> bool:
        """Remove the user only. Its lockers keep their user_id."""
        raise NotImplementedError
