"""User Schemas — boundary parsing for /users bodies.

Invariants:
    - id is required and must be an integer
    - name, surname, phone, email are optional and never validated for content
    - UserOut renders phone/email as null when absent
"""

import pytest
from pydantic import ValidationError

from roster.core.domain_types import User, UserCandidate, UserId
from roster.schemas.user import UserIn, UserOut


def test_user_in_requires_id():
    with pytest.raises(ValidationError):
        UserIn(name="Gina", surname="Linetti")


def test_user_in_rejects_non_integer_id():
    with pytest.raises(ValidationError):
        UserIn(id="five", name="Gina")


def test_user_in_accepts_missing_name():
    body = UserIn(id=3)
    assert body.name is None
    assert body.surname is None


def test_user_in_accepts_empty_name():
    assert UserIn(id=3, name="").name == ""


def test_user_in_to_candidate():
    body = UserIn(id=5, name="Gina", surname="Linetti", phone="x", email="y")
    assert body.to_candidate() == UserCandidate(
        id=UserId(5), name="Gina", surname="Linetti", phone="x", email="y",
    )


def test_user_out_from_domain():
    out = UserOut.from_domain(User(UserId(1), "Rokas", "Marcinkevičius"))
    assert out.model_dump() == {
        "id": 1, "name": "Rokas", "surname": "Marcinkevičius",
        "phone": None, "email": None,
    }


@pytest.mark.parametrize("user_id", [2**31, -(2**31) - 1])
def test_user_in_rejects_id_outside_integer_column(user_id):
    with pytest.raises(ValidationError):
        UserIn(id=user_id, name="Gina")


@pytest.mark.parametrize("user_id", [2**31 - 1, -(2**31)])
def test_user_in_accepts_integer_column_bounds(user_id):
    assert UserIn(id=user_id, name="Gina").id == user_id
