"""SQL User Repository — Record Store for user records over an AsyncSession.

Invariants:
    - Implements core.repository_protocols.UserRepository
    - No validation and no uniqueness check: the handler verifies before calling
    - Every mutation commits before returning (visible to all later reads)
    - Returns domain records (core.domain_types.User), never ORM rows

Design Decisions:
    - Primary-key violation on insert mapped to ConflictError: only reachable when
      another process wins the race past the in-process mutation lock
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from roster.core.domain_types import User, UserId
from roster.core.errors import ConflictError
from roster.models.user import User as UserModel

logger = logging.getLogger(__name__)


class SqlUserRepository:
    """Keyed CRUD for users on a single database session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, user_id: UserId) -> User | None:
        row = await self.db.get(UserModel, user_id)
        return row.to_domain() if row else None

    async def insert(self, user: User) -> User:
        row = UserModel.from_domain(user)
        self.db.add(row)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning(
                f"Primary key collision inserting user {user.id}",
                extra={"user_id": user.id, "operation": "insert"},
            )
            raise ConflictError(user.id)
        return row.to_domain()

    async def remove(self, user_id: UserId) -> None:
        row = await self.db.get(UserModel, user_id)
        if row is not None:
            await self.db.delete(row)
            await self.db.commit()

    async def update_fields(
        self, user_id: UserId, name: str, surname: str,
    ) -> None:
        row = await self.db.get(UserModel, user_id)
        if row is not None:
            row.name = name
            row.surname = surname
            await self.db.commit()

    async def list_all(self) -> list[User]:
        result = await self.db.execute(select(UserModel).order_by(UserModel.id))
        return [row.to_domain() for row in result.scalars().all()]
