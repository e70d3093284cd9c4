"""Ownership checks for mutating another account's data."""

from typing import Any

from core.exceptions import NotAuthorizedError
from domain.entities.identity import same_identity


def is_owner(owner_id: Any, caller_id: Any) -> bool:
    """Check whether the caller is the recorded owner.

    Store references and token claims may use different id types; both are
    reduced to their canonical string form first.
    """
    if owner_id is None or caller_id is None:
        return False
    return same_identity(owner_id, caller_id)


def require_owner(owner_id: Any, caller_id: Any) -> None:
    """Raise NotAuthorizedError unless the caller owns the resource."""
    if not is_owner(owner_id, caller_id):
        raise NotAuthorizedError()
