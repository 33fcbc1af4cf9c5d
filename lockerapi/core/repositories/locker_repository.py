from __future__ import annotations

from abc import ABC, abstractmethod

from lockerapi.core.entities.locker import Locker


class LockerRepository(ABC):
    @abstractmethod
    def add_for_user(self, user_id: int, locker: Locker) -> Locker | None:
        """
        Create a locker owned by `user_id` as one unit: the locker record and the owner's view
        change together. Returns None (and stores nothing) if the user does not exist.
        """
        raise NotImplementedError

    @abstractmethod
    def get(self, locker_id: int) -> Locker | None:
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[Locker]:
        raise NotImplementedError

    @abstractmethod
    def update(self, locker: Locker) -> Locker | None:
        """Replace number and status; id and owner are kept. None if the locker is missing."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, locker_id: int) -> bool:
        raise NotImplementedError
