from __future__ import annotations

from lockerapi.core.entities.locker import Locker
from lockerapi.core.repositories.locker_repository import LockerRepository
from lockerapi.infrastructure.memory_store import InMemoryStore


class InMemoryLockerRepository(LockerRepository):
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def add_for_user(self, user_id: int, locker: Locker) -> Locker | None:
        return self._store.add_locker(user_id, locker)

    def get(self, locker_id: int) -> Locker | None:
        return self._store.get_locker(locker_id)

    def list(self) -> list[Locker]:
        return self._store.list_lockers()

    def update(self, locker: Locker) -> Locker | None:
        return self._store.update_locker(locker)

    def delete(self, locker_id: int) -> bool:
        return self._store.delete_locker(locker_id)
