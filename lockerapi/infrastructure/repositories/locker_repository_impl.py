from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from lockerapi.core.entities.locker import Locker
from lockerapi.core.repositories.locker_repository import LockerRepository
from lockerapi.infrastructure.models.models import LockerModel, UserModel


def to_locker(row: LockerModel) -> Locker:
    return Locker(id=row.id, number=row.number, status=row.status, user_id=row.user_id)


class LockerRepositoryImpl(LockerRepository):
    """
    Simple SQLAlchemy implementation for Locker.

    Each write commits once, so the owner check and the insert in `add_for_user` share a transaction.
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def add_for_user(self, user_id: int, locker: Locker) -> Locker | None:
        owner = self._db.get(UserModel, user_id, with_for_update=True)
        if owner is None:
            self._db.rollback()
            return None

        row = LockerModel(number=locker.number, status=locker.status, user_id=user_id)
        self._db.add(row)
        self._db.commit()
        return to_locker(row)

    def get(self, locker_id: int) -> Locker | None:
        row = self._db.get(LockerModel, locker_id)
        if row is None:
            return None
        return to_locker(row)

    def list(self) -> list[Locker]:
        rows = self._db.scalars(select(LockerModel).order_by(LockerModel.id)).all()
        return [to_locker(row) for row in rows]

    def update(self, locker: Locker) -> Locker | None:
        row = self._db.get(LockerModel, locker.id)
        if row is None:
            return None

        row.number = locker.number
        row.status = locker.status

        self._db.add(row)
        self._db.commit()
        return to_locker(row)

    def delete(self, locker_id: int) -> bool:
        row = self._db.get(LockerModel, locker_id)
        if row is None:
            return False

        self._db.delete(row)
        self._db.commit()
        return True
