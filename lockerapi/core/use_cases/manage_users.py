from __future__ import annotations

from lockerapi.core.entities.user import User
from lockerapi.core.repositories.user_repository import UserRepository
from lockerapi.core.use_cases.errors import NotFoundError


class CreateUserUseCase:
    def __init__(self, *, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, *, email: str, first_name: str, last_name: str, password: str) -> User:
        user = User(id=None, email=email, first_name=first_name, last_name=last_name, password=password)
        return self._user_repo.add(user)


class GetUserUseCase:
    def __init__(self, *, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, *, user_id: int) -> User:
        user = self._user_repo.get(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user


class ListUsersUseCase:
    def __init__(self, *, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self) -> list[User]:
        return self._user_repo.list()


class UpdateUserUseCase:
    """
    Replace a user's profile fields. The id is kept and the user's lockers are untouched.
    """

    def __init__(self, *, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, *, user_id: int, email: str, first_name: str, last_name: str, password: str) -> User:
        updated = self._user_repo.update(
            User(id=user_id, email=email, first_name=first_name, last_name=last_name, password=password)
        )
        if updated is None:
            raise NotFoundError("User not found")
        return updated


class DeleteUserUseCase:
    """
    Remove a user. Lockers it owned are left in place with their user_id unchanged.
    """

    def __init__(self, *, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, *, user_id: int) -> None:
        if not self._user_repo.delete(user_id):
            raise NotFoundError("User not found")
