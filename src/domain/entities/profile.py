"""Profile domain entities."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, TypeVar
from uuid import UUID, uuid4

from domain.entities.identity import same_identity
from domain.entities.user import UserSummary

SOCIAL_PLATFORMS = ("youtube", "twitter", "facebook", "linkedin", "instagram")

# Scalar profile fields that take part in a partial update
PROFILE_FIELDS = (
    "company",
    "website",
    "location",
    "bio",
    "status",
    "github_username",
)


@dataclass
class Experience:
    """A job entry embedded in a profile."""

    title: str
    company: str
    from_date: date
    id: UUID = field(default_factory=uuid4)
    location: str | None = None
    to_date: date | None = None
    current: bool = False
    description: str | None = None


@dataclass
class Education:
    """A school entry embedded in a profile."""

    school: str
    degree: str
    field_of_study: str
    from_date: date
    id: UUID = field(default_factory=uuid4)
    to_date: date | None = None
    current: bool = False
    description: str | None = None


_Entry = TypeVar("_Entry", Experience, Education)


def _without(entries: list[_Entry], entry_id: UUID | str) -> list[_Entry] | None:
    """Return a copy of entries minus the one with entry_id, or None on a miss."""
    remaining = [entry for entry in entries if not same_identity(entry.id, entry_id)]
    if len(remaining) == len(entries):
        return None
    return remaining


@dataclass
class ProfileUpdate:
    """Sparse set of changes to apply to a profile.

    Only keys present in ``values`` or ``social`` are written; everything
    else on the profile is left as it is.
    """

    values: dict[str, Any] = field(default_factory=dict)
    social: dict[str, str] = field(default_factory=dict)


@dataclass
class Profile:
    """Domain entity for a developer profile (one per account)."""

    user_id: UUID
    id: UUID = field(default_factory=uuid4)
    status: str | None = None
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    skills: list[str] = field(default_factory=list)
    social: dict[str, str] = field(default_factory=dict)
    experience: list[Experience] = field(default_factory=list)
    education: list[Education] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)
    owner: UserSummary | None = None

    def apply(self, update: ProfileUpdate) -> None:
        """Apply a sparse update; social links are merged key by key."""
        for name, value in update.values.items():
            setattr(self, name, value)
        if update.social:
            self.social = {**self.social, **update.social}
        self.touch()

    def add_experience(self, entry: Experience) -> None:
        """Prepend an experience entry (newest first)."""
        self.experience = [entry, *self.experience]
        self.touch()

    def remove_experience(self, experience_id: UUID | str) -> bool:
        """Remove an experience entry by id. Returns False when absent."""
        remaining = _without(self.experience, experience_id)
        if remaining is None:
            return False
        self.experience = remaining
        self.touch()
        return True

    def add_education(self, entry: Education) -> None:
        """Prepend an education entry (newest first)."""
        self.education = [entry, *self.education]
        self.touch()

    def remove_education(self, education_id: UUID | str) -> bool:
        """Remove an education entry by id. Returns False when absent."""
        remaining = _without(self.education, education_id)
        if remaining is None:
            return False
        self.education = remaining
        self.touch()
        return True

    def touch(self) -> None:
        self.updated_at = datetime.utcnow()

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at
