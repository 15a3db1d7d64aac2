"""Member entity, referenced by the cart only through its id."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Member:

    email: str
    password: str
    id: int | None = None
