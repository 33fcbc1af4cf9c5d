from __future__ import annotations

from lockerapi.core.entities.locker import Locker
from lockerapi.core.repositories.locker_repository import LockerRepository
from lockerapi.core.use_cases.errors import NotFoundError


class CreateLockerUseCase:
    """
    Create a locker attached to an existing user.

    The repository performs the existence check and both writes as one step, so a missing
    user leaves the locker collection and its id counter unchanged.
    """

    def __init__(self, *, locker_repo: LockerRepository) -> None:
        self._locker_repo = locker_repo

    def execute(self, *, user_id: int, number: str, status: str) -> Locker:
        created = self._locker_repo.add_for_user(user_id, Locker(id=None, number=number, status=status))
        if created is None:
            raise NotFoundError("User not found")
        return created


class GetLockerUseCase:
    def __init__(self, *, locker_repo: LockerRepository) -> None:
        self._locker_repo = locker_repo

    def execute(self, *, locker_id: int) -> Locker:
        locker = self._locker_repo.get(locker_id)
        if locker is None:
            raise NotFoundError("Locker not found")
        return locker


class ListLockersUseCase:
    def __init__(self, *, locker_repo: LockerRepository) -> None:
        self._locker_repo = locker_repo

    def execute(self) -> list[Locker]:
        return self._locker_repo.list()


class UpdateLockerUseCase:
    def __init__(self, *, locker_repo: LockerRepository) -> None:
        self._locker_repo = locker_repo

    def execute(self, *, locker_id: int, number: str, status: str) -> Locker:
        updated = self._locker_repo.update(Locker(id=locker_id, number=number, status=status))
        if updated is None:
            raise NotFoundError("Locker not found")
        return updated


class DeleteLockerUseCase:
    def __init__(self, *, locker_repo: LockerRepository) -> None:
        self._locker_repo = locker_repo

    def execute(self, *, locker_id: int) -> None:
        if not self._locker_repo.delete(locker_id):
            raise NotFoundError("Locker not found")
