"""Domain Types — rich types that replace bare primitives and loose dicts.

Invariants:
    - UserId wraps int; ids are caller-supplied, never generated
    - User is immutable: the store hands out snapshots, mutations go through the store
    - UserCandidate keeps every client-supplied field Optional until validated

Design Decisions:
    - NewType over dataclass wrapper for ids: zero runtime cost, full type-checker support
    - Frozen dataclasses for records: core stays free of ORM and pydantic imports
"""

from dataclasses import dataclass
from typing import NewType


USERS_PATH = "/users"

# Range of the INTEGER primary key column (32-bit signed)
USER_ID_MIN = -(2**31)
USER_ID_MAX = 2**31 - 1

UserId = NewType("UserId", int)


@dataclass(frozen=True)
class User:
    """A live user record."""
    id: UserId
    name: str
    surname: str
    phone: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class UserCandidate:
    """An incoming user representation, not yet validated."""
    id: UserId
    name: str | None = None
    surname: str | None = None
    phone: str | None = None
    email: str | None = None

    def to_user(self) -> User:
        """Build the record to store. Absent surname is stored as empty."""
        return User(
            id=self.id,
            name=self.name or "",
            surname=self.surname or "",
            phone=self.phone,
            email=self.email,
        )


@dataclass(frozen=True)
class CreatedUser:
    """Outcome of a successful create: the stored record and where it lives."""
    user: User
    location: str


def user_location(user_id: int) -> str:
    """Path at which a user record is reachable."""
    return f"{USERS_PATH}/{user_id}"
