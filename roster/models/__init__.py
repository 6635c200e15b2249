"""ORM Models — SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the only entity

Design Decisions:
    - Models imported here so Base.metadata is populated before create_all runs
"""

from roster.models.user import User  # noqa: F401
