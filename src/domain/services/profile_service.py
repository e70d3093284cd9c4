"""Profile service layer with business logic."""

from collections.abc import Callable, Mapping
from typing import Any
from uuid import UUID

import structlog

from core.exceptions import (
    EducationNotFoundError,
    ExperienceNotFoundError,
    ProfileNotFoundError,
    UserNotFoundError,
    ValidationFailedError,
)
from domain.entities.profile import (
    PROFILE_FIELDS,
    SOCIAL_PLATFORMS,
    Education,
    Experience,
    Profile,
    ProfileUpdate,
)
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


def parse_skills(raw: str | list[str]) -> list[str]:
    """Turn ``"python, go ,sql"`` into ``["python", "go", "sql"]``."""
    items = raw.split(",") if isinstance(raw, str) else raw
    return [skill.strip() for skill in items if skill and skill.strip()]


def build_profile_update(data: Mapping[str, Any]) -> ProfileUpdate:
    """Build a sparse update from request fields.

    Only fields that are present and non-empty take part; nothing is ever
    set to null. Social links may arrive flat (``youtube=...``) or nested
    under ``social``.
    """
    update = ProfileUpdate()

    for name in PROFILE_FIELDS:
        value = data.get(name)
        if value:
            update.values[name] = value

    skills = parse_skills(data.get("skills") or [])
    if skills:
        update.values["skills"] = skills

    nested = data.get("social") or {}
    for platform in SOCIAL_PLATFORMS:
        url = data.get(platform) or nested.get(platform)
        if url:
            update.social[platform] = url

    return update


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_my_profile(self, owner_id: UUID) -> Profile:
        """Get the caller's own profile."""
        return await self.get_by_user(owner_id)

    async def get_by_user(self, user_id: UUID) -> Profile:
        """Get the profile of any user."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(user_id)
            if not profile:
                raise ProfileNotFoundError(str(user_id))
            return profile

    async def list_profiles(self) -> list[Profile]:
        """Get all profiles."""
        async with self._uow_factory() as uow:
            return await uow.profiles.get_all()  # type: ignore[no-any-return]

    async def upsert_profile(self, owner_id: UUID, data: Mapping[str, Any]) -> Profile:
        """Create the caller's profile, or apply a partial update to it."""
        if not str(data.get("status") or "").strip():
            raise ValidationFailedError("Status is required", field="status")
        if not parse_skills(data.get("skills") or []):
            raise ValidationFailedError("Skills is required", field="skills")

        update = build_profile_update(data)

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(owner_id)

            if profile:
                profile.apply(update)
                saved = await uow.profiles.update(profile)
                logger.info("profile_updated", user_id=str(owner_id))
            else:
                if not await uow.users.get(owner_id):
                    raise UserNotFoundError(str(owner_id))
                profile = Profile(user_id=owner_id)
                profile.apply(update)
                saved = await uow.profiles.create(profile)
                logger.info("profile_created", user_id=str(owner_id))

            await uow.commit()
            return saved  # type: ignore[no-any-return]

    async def add_experience(self, owner_id: UUID, entry: Experience) -> Profile:
        """Prepend an experience entry to the caller's profile."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, owner_id)
            profile.add_experience(entry)
            saved = await uow.profiles.update(profile)
            await uow.commit()
            return saved  # type: ignore[no-any-return]

    async def remove_experience(self, owner_id: UUID, experience_id: UUID) -> Profile:
        """Remove an experience entry by id."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, owner_id)
            if not profile.remove_experience(experience_id):
                raise ExperienceNotFoundError(str(experience_id))
            saved = await uow.profiles.update(profile)
            await uow.commit()
            return saved  # type: ignore[no-any-return]

    async def add_education(self, owner_id: UUID, entry: Education) -> Profile:
        """Prepend an education entry to the caller's profile."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, owner_id)
            profile.add_education(entry)
            saved = await uow.profiles.update(profile)
            await uow.commit()
            return saved  # type: ignore[no-any-return]

    async def remove_education(self, owner_id: UUID, education_id: UUID) -> Profile:
        """Remove an education entry by id."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, owner_id)
            if not profile.remove_education(education_id):
                raise EducationNotFoundError(str(education_id))
            saved = await uow.profiles.update(profile)
            await uow.commit()
            return saved  # type: ignore[no-any-return]

    async def delete_account_cascade(self, owner_id: UUID) -> None:
        """Delete the caller's posts, then profile, then account.

        Each step commits on its own so earlier steps stay done if a later
        one fails; the failing step is logged and the error re-raised.
        """
        async with self._uow_factory() as uow:
            step = "posts"
            try:
                removed_posts = await uow.posts.delete_by_user(owner_id)
                await uow.commit()

                step = "profile"
                await uow.profiles.delete_by_user(owner_id)
                await uow.commit()

                step = "account"
                await uow.users.delete(owner_id)
                await uow.commit()
            except Exception:
                logger.exception("account_delete_step_failed", user_id=str(owner_id), step=step)
                raise

        logger.info("account_deleted", user_id=str(owner_id), posts_removed=removed_posts)

    async def _require_profile(self, uow: IUnitOfWork, owner_id: UUID) -> Profile:
        profile = await uow.profiles.get_by_user(owner_id)
        if not profile:
            raise ProfileNotFoundError(str(owner_id))
        return profile
