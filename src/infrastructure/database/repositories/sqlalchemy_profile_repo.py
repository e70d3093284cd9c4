"""SQLAlchemy implementation of Profile repository."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from domain.entities.profile import Profile
from domain.entities.user import UserSummary
from infrastructure.database.documents import (
    education_from_document,
    education_to_document,
    experience_from_document,
    experience_to_document,
)
from infrastructure.database.models import ProfileModel, UserModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        model = await self._get_model(user_id)
        return self._to_entity(model, model.user) if model else None

    async def get_all(self) -> list[Profile]:
        """Get all profiles with owner summaries."""
        stmt = (
            select(ProfileModel)
            .options(selectinload(ProfileModel.user))
            .order_by(ProfileModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model, model.user) for model in result.scalars()]

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        model = ProfileModel(
            id=profile.id,
            user_id=profile.user_id,
            created_at=profile.created_at,
        )
        self._copy_fields(profile, model)
        self._session.add(model)
        await self._session.flush()

        owner = await self._session.get(UserModel, profile.user_id)
        return self._to_entity(model, owner)

    async def update(self, profile: Profile) -> Profile:
        """Update an existing profile."""
        model = await self._get_model(profile.user_id)

        if not model:
            raise ValueError(f"Profile for user {profile.user_id} not found")

        self._copy_fields(profile, model)
        await self._session.flush()
        return self._to_entity(model, model.user)

    async def delete_by_user(self, user_id: UUID) -> bool:
        """Delete the profile owned by a user."""
        stmt = delete(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    async def _get_model(self, user_id: UUID) -> ProfileModel | None:
        stmt = (
            select(ProfileModel)
            .options(selectinload(ProfileModel.user))
            .where(ProfileModel.user_id == user_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _copy_fields(self, entity: Profile, model: ProfileModel) -> None:
        """Write every mutable field; JSON columns get fresh containers."""
        model.status = entity.status
        model.company = entity.company
        model.website = entity.website
        model.location = entity.location
        model.bio = entity.bio
        model.github_username = entity.github_username
        model.skills = list(entity.skills)
        model.social = dict(entity.social)
        model.experience = [experience_to_document(e) for e in entity.experience]
        model.education = [education_to_document(e) for e in entity.education]
        model.updated_at = entity.updated_at

    def _to_entity(self, model: ProfileModel, owner: UserModel | None) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            user_id=model.user_id,
            status=model.status,
            company=model.company,
            website=model.website,
            location=model.location,
            bio=model.bio,
            github_username=model.github_username,
            skills=list(model.skills or []),
            social=dict(model.social or {}),
            experience=[experience_from_document(d) for d in model.experience or []],
            education=[education_from_document(d) for d in model.education or []],
            created_at=model.created_at,
            updated_at=model.updated_at,
            owner=(
                UserSummary(id=owner.id, name=owner.name, avatar=owner.avatar)
                if owner
                else None
            ),
        )
