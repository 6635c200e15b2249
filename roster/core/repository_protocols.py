"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - The store has no validation or uniqueness logic: callers check first
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO
"""

from typing import Protocol

from roster.core.domain_types import User, UserId


class UserRepository(Protocol):
    """Contract for user record persistence, implemented by shell."""
    async def find_by_id(self, user_id: UserId) -> User | None: ...
    async def insert(self, user: User) -> User: ...
    async def remove(self, user_id: UserId) -> None: ...
    async def update_fields(
        self, user_id: UserId, name: str, surname: str,
    ) -> None: ...
    async def list_all(self) -> list[User]: ...
