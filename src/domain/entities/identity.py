"""Canonical identity comparison.

Ids reach the domain as ``UUID`` objects from the store and as strings from
token claims and JSON sub-documents. Both sides are reduced to the same
string form before they are compared.
"""

from typing import Any
from uuid import UUID


def canonical_id(value: Any) -> str:
    """Return the canonical string form of an id."""
    if isinstance(value, UUID):
        return str(value)
    return str(UUID(str(value)))


def same_identity(left: Any, right: Any) -> bool:
    """Check whether two id representations refer to the same identity."""
    try:
        return canonical_id(left) == canonical_id(right)
    except ValueError:
        return str(left) == str(right)
