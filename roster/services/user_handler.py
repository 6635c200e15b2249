"""User Handler — validates user representations and drives the Record Store.

Invariants:
    - Each operation issues at most one store mutation, and none on rejection
    - Rejections raise InvalidInputError, ConflictError, or ResourceNotFoundError;
      the store is unmodified whenever one of them is raised
    - Check-then-mutate sequences (create, update, delete) run under mutation_lock
    - The handler holds no state of its own beyond its collaborators

Design Decisions:
    - Pure rules in core/validate_user decide; this shell raises and persists
      (impureim sandwich: read, decide, write)
    - Store and lock injected at construction: no ambient lookup of shared state
"""

import asyncio
import logging

from roster.core.domain_types import CreatedUser, User, UserCandidate, UserId, user_location
from roster.core.errors import ConflictError, ErrorContext, ResourceNotFoundError
from roster.core.repository_protocols import UserRepository
from roster.core.validate_user import check_create_candidate, check_update_candidate

logger = logging.getLogger(__name__)


class UserHandler:
    """Lifecycle operations for user records: list, get, create, update, delete."""

    def __init__(self, repository: UserRepository, mutation_lock: asyncio.Lock):
        self.repository = repository
        self.mutation_lock = mutation_lock

    async def list_users(self) -> list[User]:
        """All live records. An empty roster is a valid result."""
        return await self.repository.list_all()

    async def get_user(self, user_id: UserId) -> User:
        user = await self.repository.find_by_id(user_id)
        if user is None:
            raise _not_found(user_id)
        return user

    async def create_user(self, candidate: UserCandidate) -> CreatedUser:
        """Insert a new record. Name is checked before uniqueness."""
        error = check_create_candidate(candidate)
        if error:
            raise error

        async with self.mutation_lock:
            if await self.repository.find_by_id(candidate.id) is not None:
                raise ConflictError(candidate.id)
            user = await self.repository.insert(candidate.to_user())

        logger.info(
            f"User {user.id} created",
            extra={"user_id": user.id, "operation": "create"},
        )
        return CreatedUser(user=user, location=user_location(user.id))

    async def update_user(self, target_id: UserId, candidate: UserCandidate) -> None:
        """Overwrite name and surname of an existing record.

        Identity and name are checked before existence, so a mismatched id
        against a missing target is reported as invalid input.
        """
        error = check_update_candidate(target_id, candidate)
        if error:
            raise error

        async with self.mutation_lock:
            if await self.repository.find_by_id(target_id) is None:
                raise _not_found(target_id)
            await self.repository.update_fields(
                target_id, candidate.name, candidate.surname or "",
            )

        logger.info(
            f"User {target_id} updated",
            extra={"user_id": target_id, "operation": "update"},
        )

    async def delete_user(self, user_id: UserId) -> User:
        """Remove a record and return what was removed."""
        async with self.mutation_lock:
            user = await self.repository.find_by_id(user_id)
            if user is None:
                raise _not_found(user_id)
            await self.repository.remove(user_id)

        logger.info(
            f"User {user_id} deleted",
            extra={"user_id": user_id, "operation": "delete"},
        )
        return user


def _not_found(user_id: int) -> ResourceNotFoundError:
    return ResourceNotFoundError("User", user_id, ErrorContext(user_id=user_id))
