from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from lockerapi.core.entities.user import User
from lockerapi.core.repositories.user_repository import UserRepository
from lockerapi.infrastructure.models.models import LockerModel, UserModel
from lockerapi.infrastructure.repositories.locker_repository_impl import to_locker


class UserRepositoryImpl(UserRepository):
    """
    SQLAlchemy implementation for User.

    A user's lockers are read with a query on lockers.user_id instead of being stored on the row.
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def add(self, user: User) -> User:
        row = UserModel(
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            password=user.password,
        )
        self._db.add(row)
        self._db.commit()
        return self._to_entity(row)

    def get(self, user_id: int) -> User | None:
        row = self._db.get(UserModel, user_id)
        if row is None:
            return None
        return self._to_entity(row)

    def list(self) -> list[User]:
        rows = self._db.scalars(select(UserModel).order_by(UserModel.id)).all()
        if not rows:
            return []

        # One locker query for all users, grouped by owner
        by_user: dict[int, list[LockerModel]] = {row.id: [] for row in rows}
        lockers = self._db.scalars(
            select(LockerModel).where(LockerModel.user_id.in_(list(by_user))).order_by(LockerModel.id)
        ).all()
        for locker in lockers:
            by_user[locker.user_id].append(locker)

        return [self._to_entity(row, by_user[row.id]) for row in rows]

    def update(self, user: User) -> User | None:
        row = self._db.get(UserModel, user.id)
        if row is None:
            return None

        row.email = user.email
        row.first_name = user.first_name
        row.last_name = user.last_name
        row.password = user.password

        self._db.add(row)
        self._db.commit()
        return self._to_entity(row)

    def delete(self, user_id: int) -> bool:
        row = self._db.get(UserModel, user_id)
        if row is None:
            return False

        self._db.delete(row)
        self._db.commit()
        return True

    def _to_entity(self, row: UserModel, lockers: list[LockerModel] | None = None) -> User:
        if lockers is None:
            lockers = self._db.scalars(
                select(LockerModel).where(LockerModel.user_id == row.id).order_by(LockerModel.id)
            ).all()
        return User(
            id=row.id,
            email=row.email,
            first_name=row.first_name,
            last_name=row.last_name,
            password=row.password,
            lockers=[to_locker(locker) for locker in lockers],
        )
