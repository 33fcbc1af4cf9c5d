from __future__ import annotations

from collections.abc import Iterator
from typing import List

from fastapi import APIRouter, Depends, Request, Response

from lockerapi.core.use_cases.errors import NotFoundError
from lockerapi.infrastructure.backends import Repositories
from lockerapi.schemas.models import Locker, LockerInput, User, UserInput
from lockerapi.services.locker_service import (
    create_locker_service,
    create_user_service,
    delete_locker_service,
    delete_user_service,
    get_locker_service,
    get_user_service,
    list_lockers_service,
    list_users_service,
    update_locker_service,
    update_user_service,
)

router = APIRouter()


def get_repositories(request: Request) -> Iterator[Repositories]:
    with request.app.state.backend.open() as repos:
        yield repos


def _not_found() -> Response:
    return Response(status_code=404)


# -----------------------------
# Users
# -----------------------------
@router.get("/users", response_model=List[User])
def get_users(repos: Repositories = Depends(get_repositories)) -> List[User]:
    """
    List all users with their lockers
    """
    return list_users_service(repos)


@router.get("/users/{user_id}", response_model=User)
def get_users_user_id(user_id: int, repos: Repositories = Depends(get_repositories)) -> User | Response:
    """
    Get one user with its lockers
    """
    try:
        return get_user_service(user_id, repos)
    except NotFoundError:
        return _not_found()


@router.post("/users", response_model=User, status_code=201)
def post_users(body: UserInput, repos: Repositories = Depends(get_repositories)) -> User:
    """
    Create a user. The new user starts without lockers.
    """
    return create_user_service(body, repos)


@router.put("/users/{user_id}", response_model=User)
def put_users_user_id(
    user_id: int,
    body: UserInput,
    repos: Repositories = Depends(get_repositories),
) -> User | Response:
    """
    Replace a user's fields, keeping its id
    """
    try:
        return update_user_service(user_id, body, repos)
    except NotFoundError:
        return _not_found()


@router.delete("/users/{user_id}", response_model=None, status_code=204)
def delete_users_user_id(user_id: int, repos: Repositories = Depends(get_repositories)) -> Response:
    """
    Delete a user. Its lockers are kept and still reference the deleted user id.
    """
    try:
        delete_user_service(user_id, repos)
    except NotFoundError:
        return _not_found()
    return Response(status_code=204)


@router.post("/users/{user_id}/lockers", response_model=Locker, status_code=201)
def post_users_user_id_lockers(
    user_id: int,
    body: LockerInput,
    repos: Repositories = Depends(get_repositories),
) -> Locker | Response:
    """
    Create a locker owned by the user

    Returns:
      - 201 with the new locker
      - 404 if the user does not exist
    """
    try:
        return create_locker_service(user_id, body, repos)
    except NotFoundError:
        return _not_found()


# -----------------------------
# Lockers
# -----------------------------
@router.get("/lockers", response_model=List[Locker])
def get_lockers(repos: Repositories = Depends(get_repositories)) -> List[Locker]:
    return list_lockers_service(repos)


@router.get("/lockers/{locker_id}", response_model=Locker)
def get_lockers_locker_id(locker_id: int, repos: Repositories = Depends(get_repositories)) -> Locker | Response:
    try:
        return get_locker_service(locker_id, repos)
    except NotFoundError:
        return _not_found()


@router.put("/lockers/{locker_id}", response_model=Locker)
def put_lockers_locker_id(
    locker_id: int,
    body: LockerInput,
    repos: Repositories = Depends(get_repositories),
) -> Locker | Response:
    """
    Replace a locker's number and status. The id and owner are kept.
    """
    try:
        return update_locker_service(locker_id, body, repos)
    except NotFoundError:
        return _not_found()


@router.delete("/lockers/{locker_id}", response_model=None, status_code=204)
def delete_lockers_locker_id(locker_id: int, repos: Repositories = Depends(get_repositories)) -> Response:
    try:
        delete_locker_service(locker_id, repos)
    except NotFoundError:
        return _not_found()
    return Response(status_code=204)
