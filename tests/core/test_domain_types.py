"""Domain Types — verifies record types, candidate conversion, and locators.

Tests:
    - UserId wraps int
    - User is immutable
    - UserCandidate.to_user keeps contact fields and defaults surname to empty
"""

import dataclasses

import pytest

from roster.core.domain_types import (
    USERS_PATH, User, UserCandidate, UserId, user_location,
)


def test_user_id_wraps_int():
    assert UserId(5) == 5


def test_user_is_frozen():
    user = User(UserId(1), "Rokas", "Marcinkevičius")
    with pytest.raises(dataclasses.FrozenInstanceError):
        user.name = "Other"


def test_candidate_to_user_keeps_all_fields():
    candidate = UserCandidate(
        id=UserId(5), name="Gina", surname="Linetti",
        phone="+37000000000", email="gina@example.com",
    )
    assert candidate.to_user() == User(
        UserId(5), "Gina", "Linetti", "+37000000000", "gina@example.com",
    )


def test_candidate_without_surname_becomes_empty_surname():
    assert UserCandidate(id=UserId(5), name="Gina").to_user().surname == ""


def test_user_location_is_keyed_by_id():
    assert user_location(5) == f"{USERS_PATH}/5" == "/users/5"
