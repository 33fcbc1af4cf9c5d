from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Locker:
    id: int | None
    number: str = ""
    status: str = ""
    user_id: int | None = None
