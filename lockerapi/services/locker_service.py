from __future__ import annotations

from lockerapi.core.entities.locker import Locker as CoreLocker
from lockerapi.core.entities.user import User as CoreUser
from lockerapi.core.use_cases.manage_lockers import (
    CreateLockerUseCase,
    DeleteLockerUseCase,
    GetLockerUseCase,
    ListLockersUseCase,
    UpdateLockerUseCase,
)
from lockerapi.core.use_cases.manage_users import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from lockerapi.infrastructure.backends import Repositories
from lockerapi.schemas.models import Locker, LockerInput, User, UserInput


def _to_locker_schema(locker: CoreLocker) -> Locker:
    return Locker(id=locker.id, number=locker.number, status=locker.status, user_id=locker.user_id)


def _to_user_schema(user: CoreUser) -> User:
    """
    Translate core User entity -> API schema. The password never leaves this layer.
    """
    return User(
        id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        lockers=[_to_locker_schema(locker) for locker in user.lockers],
    )


# -----------------------------
# Users
# -----------------------------
def list_users_service(repos: Repositories) -> list[User]:
    use_case = ListUsersUseCase(user_repo=repos.user_repo)
    return [_to_user_schema(user) for user in use_case.execute()]


def get_user_service(user_id: int, repos: Repositories) -> User:
    use_case = GetUserUseCase(user_repo=repos.user_repo)
    return _to_user_schema(use_case.execute(user_id=user_id))


def create_user_service(body: UserInput, repos: Repositories) -> User:
    use_case = CreateUserUseCase(user_repo=repos.user_repo)
    user = use_case.execute(
        email=body.email,
        first_name=body.first_name,
        last_name=body.last_name,
        password=body.password,
    )
    return _to_user_schema(user)


def update_user_service(user_id: int, body: UserInput, repos: Repositories) -> User:
    use_case = UpdateUserUseCase(user_repo=repos.user_repo)
    user = use_case.execute(
        user_id=user_id,
        email=body.email,
        first_name=body.first_name,
        last_name=body.last_name,
        password=body.password,
    )
    return _to_user_schema(user)


def delete_user_service(user_id: int, repos: Repositories) -> None:
    DeleteUserUseCase(user_repo=repos.user_repo).execute(user_id=user_id)


# -----------------------------
# Lockers
# -----------------------------
def list_lockers_service(repos: Repositories) -> list[Locker]:
    use_case = ListLockersUseCase(locker_repo=repos.locker_repo)
    return [_to_locker_schema(locker) for locker in use_case.execute()]


def get_locker_service(locker_id: int, repos: Repositories) -> Locker:
    use_case = GetLockerUseCase(locker_repo=repos.locker_repo)
    return _to_locker_schema(use_case.execute(locker_id=locker_id))


def create_locker_service(user_id: int, body: LockerInput, repos: Repositories) -> Locker:
    use_case = CreateLockerUseCase(locker_repo=repos.locker_repo)
    return _to_locker_schema(use_case.execute(user_id=user_id, number=body.number, status=body.status))


def update_locker_service(locker_id: int, body: LockerInput, repos: Repositories) -> Locker:
    use_case = UpdateLockerUseCase(locker_repo=repos.locker_repo)
    return _to_locker_schema(use_case.execute(locker_id=locker_id, number=body.number, status=body.status))


def delete_locker_service(locker_id: int, repos: Repositories) -> None:
    DeleteLockerUseCase(locker_repo=repos.locker_repo).execute(locker_id=locker_id)
