from __future__ import annotations

from typing import List

from pydantic import BaseModel


class UserInput(BaseModel):
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    password: str = ""


class LockerInput(BaseModel):
    number: str = ""
    status: str = ""


class Locker(BaseModel):
    id: int
    number: str
    status: str
    user_id: int | None


class User(BaseModel):
    id: int
    email: str
    first_name: str
    last_name: str
    lockers: List[Locker]
