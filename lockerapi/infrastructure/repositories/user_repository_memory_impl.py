from __future__ import annotations

from lockerapi.core.entities.user import User
from lockerapi.core.repositories.user_repository import UserRepository
from lockerapi.infrastructure.memory_store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def add(self, user: User) -> User:
        return self._store.add_user(user)

    def get(self, user_id: int) -> User | None:
        return self._store.get_user(user_id)

    def list(self) -> list[User]:
        return self._store.list_users()

    def update(self, user: User) -> User | None:
        return self._store.update_user(user)

    def delete(self, user_id: int) -> bool:
        return self._store.delete_user(user_id)
