"""User Schemas — Pydantic models for the /users API boundary.

Invariants:
    - UserIn.id is required and within the INTEGER column range; everything else is Optional
    - UserIn does NOT validate name: the handler owns that rule and its ordering
    - UserOut mirrors the stored record, phone/email null when absent
"""

from pydantic import BaseModel, Field

from roster.core.domain_types import (
    USER_ID_MAX, USER_ID_MIN, User, UserCandidate, UserId,
)


class UserIn(BaseModel):
    """User representation sent by clients on create and update."""
    id: int = Field(ge=USER_ID_MIN, le=USER_ID_MAX)
    name: str | None = None
    surname: str | None = None
    phone: str | None = None
    email: str | None = None

    def to_candidate(self) -> UserCandidate:
        return UserCandidate(
            id=UserId(self.id),
            name=self.name,
            surname=self.surname,
            phone=self.phone,
            email=self.email,
        )


class UserOut(BaseModel):
    """User representation returned to clients."""
    id: int
    name: str
    surname: str
    phone: str | None = None
    email: str | None = None

    @classmethod
    def from_domain(cls, user: User) -> "UserOut":
        return cls(
            id=user.id, name=user.name, surname=user.surname,
            phone=user.phone, email=user.email,
        )
