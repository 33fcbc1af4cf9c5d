from __future__ import annotations

from dataclasses import dataclass, field

from lockerapi.core.entities.locker import Locker


@dataclass(slots=True)
class User:
    id: int | None
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    password: str = ""
    lockers: list[Locker] = field(default_factory=list)
