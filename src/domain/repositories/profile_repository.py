"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile entities.

    Profiles are keyed by their owning user; embedded experience and
    education lists are read and written together with the profile.
    """

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user, with the owner summary loaded."""
        ...

    async def get_all(self) -> list[Profile]:
        """Get all profiles with owner summaries."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        ...

    async def update(self, profile: Profile) -> Profile:
        """Persist all fields of an existing profile."""
        ...

    async def delete_by_user(self, user_id: UUID) -> bool:
        """Delete the profile owned by a user."""
        ...
