"""User Validation — pure accept/reject rules for incoming user representations.

Invariants:
    - Functions are PURE: they return the first failing error, they never raise or touch the store
    - Create order: empty name, then (in the handler) uniqueness
    - Update order: identity mismatch, then empty name, then (in the handler) existence

Design Decisions:
    - Return RosterError | None instead of raising: the shell decides when to raise,
      so the check order is visible in one place per operation
    - Identity mismatch precedes the existence check: a mismatched id on a missing
      target reports InvalidInput, not NotFound (observable contract)
"""

from roster.core.domain_types import UserCandidate
from roster.core.errors import ErrorContext, InvalidInputError, RosterError


def check_name(candidate: UserCandidate) -> RosterError | None:
    """Name must be present and non-empty."""
    if not candidate.name:
        return InvalidInputError(
            "name is required and cannot be empty", "name",
            ErrorContext(user_id=candidate.id),
        )
    return None


def check_create_candidate(candidate: UserCandidate) -> RosterError | None:
    """Value-level checks for Create. Uniqueness is checked against the store."""
    return check_name(candidate)


def check_update_candidate(
    target_id: int, candidate: UserCandidate,
) -> RosterError | None:
    """Value-level checks for Update. Existence is checked against the store."""
    if candidate.id != target_id:
        return InvalidInputError(
            f"Body id {candidate.id} does not match addressed user {target_id}",
            "id", ErrorContext(user_id=target_id),
        )
    return check_name(candidate)
