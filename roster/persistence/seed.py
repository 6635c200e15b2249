"""Demo Seed Data — fills an empty roster with a fixed set of users.

Invariants:
    - Seeds only when the store is empty (never duplicates or overwrites)
    - Goes through the Record Store protocol, not raw SQL
"""

import logging

from roster.core.domain_types import User, UserId
from roster.core.repository_protocols import UserRepository

logger = logging.getLogger(__name__)

DEMO_USERS: tuple[User, ...] = (
    User(UserId(1), "Bojack", "Horseman", "Private Number", "horse@gmail.com"),
    User(UserId(2), "Sarah", "Lynn", "+37012345678", "rip@gmail.com"),
    User(UserId(3), "Diane", "Nguyne", "+37012345678", "human@gmail.com"),
    User(UserId(4), "Todd", "Chavez", "Private Number", "difficult@gmail.com"),
    User(UserId(5), "Mr.", "Peanutbutter", "+37012345678", "dog@gmail.com"),
    User(UserId(6), "Princess", "Carolyn", "+37012345678", "cat@gmail.com"),
)


async def seed_users(
    repository: UserRepository, users: tuple[User, ...] = DEMO_USERS,
) -> int:
    """Insert demo users into an empty store. Returns how many were inserted."""
    if await repository.list_all():
        logger.info("Roster already populated, skipping seed")
        return 0
    for user in users:
        await repository.insert(user)
    logger.info(f"Seeded {len(users)} users")
    return len(users)
