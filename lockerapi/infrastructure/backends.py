from __future__ import annotations

from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass
from typing import Protocol

from lockerapi.core.repositories.locker_repository import LockerRepository
from lockerapi.core.repositories.user_repository import UserRepository
from lockerapi.infrastructure.config import Settings
from lockerapi.infrastructure.database import build_engine, build_sessionmaker, create_tables
from lockerapi.infrastructure.memory_store import InMemoryStore
from lockerapi.infrastructure.repositories.locker_repository_impl import LockerRepositoryImpl
from lockerapi.infrastructure.repositories.locker_repository_memory_impl import InMemoryLockerRepository
from lockerapi.infrastructure.repositories.user_repository_impl import UserRepositoryImpl
from lockerapi.infrastructure.repositories.user_repository_memory_impl import InMemoryUserRepository


@dataclass(frozen=True, slots=True)
class Repositories:
    user_repo: UserRepository
    locker_repo: LockerRepository


class StorageBackend(Protocol):
    name: str

    def open(self) -> AbstractContextManager[Repositories]:
        """Context manager yielding the repositories for one request."""
        raise NotImplementedError


class MemoryBackend:
    name = "memory"

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    @contextmanager
    def open(self) -> Iterator[Repositories]:
        yield Repositories(
            user_repo=InMemoryUserRepository(self.store),
            locker_repo=InMemoryLockerRepository(self.store),
        )


class SqlBackend:
    name = "sql"

    def __init__(self, database_url: str) -> None:
        self.engine = build_engine(database_url)
        self._session_factory = build_sessionmaker(self.engine)
        create_tables(self.engine)

    @contextmanager
    def open(self) -> Iterator[Repositories]:
        db = self._session_factory()
        try:
            yield Repositories(
                user_repo=UserRepositoryImpl(db),
                locker_repo=LockerRepositoryImpl(db),
            )
        finally:
            db.close()


def build_backend(settings: Settings) -> StorageBackend:
    if settings.storage_backend == "sql":
        return SqlBackend(settings.database_url)
    return MemoryBackend(
        InMemoryStore(
            initial_user_id=settings.initial_user_id,
            initial_locker_id=settings.initial_locker_id,
        )
    )
