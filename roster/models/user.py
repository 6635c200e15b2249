"""User ORM — persists user records in the `users` table.

Invariants:
    - id is an integer primary key supplied by the caller (no autoincrement)
    - name and surname are non-nullable; phone and email are optional passthrough
    - Text columns carry no length limit: name emptiness is the only value rule
    - Uniqueness of id is enforced by the primary key as a cross-process backstop only

Design Decisions:
    - to_domain() keeps ORM rows inside the infrastructure layer
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from roster.core.domain_types import User as UserRecord, UserId
from roster.db.base import Base


class User(Base):
    """A row in the users table."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    surname: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str | None] = mapped_column(Text, nullable=True)
    email: Mapped[str | None] = mapped_column(Text, nullable=True)

    @classmethod
    def from_domain(cls, user: UserRecord) -> "User":
        return cls(
            id=user.id, name=user.name, surname=user.surname,
            phone=user.phone, email=user.email,
        )

    def to_domain(self) -> UserRecord:
        return UserRecord(
            id=UserId(self.id), name=self.name, surname=self.surname,
            phone=self.phone, email=self.email,
        )
