"""Unit tests for ProfileService."""

from datetime import date
from uuid import UUID, uuid4

import pytest

from core.exceptions import (
    EducationNotFoundError,
    ExperienceNotFoundError,
    ProfileNotFoundError,
    UserNotFoundError,
    ValidationFailedError,
)
from domain.entities.profile import Education, Experience, Profile
from domain.entities.user import User
from domain.services.profile_service import ProfileService, build_profile_update, parse_skills
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork) -> ProfileService:
    return ProfileService(lambda: uow)


def _echo(uow: FakeUnitOfWork) -> None:
    """Make create/update return what they were given."""
    uow.profiles.create.side_effect = lambda profile: profile
    uow.profiles.update.side_effect = lambda profile: profile


def _experience(title: str) -> Experience:
    return Experience(title=title, company="Acme", from_date=date(2020, 1, 1))


# --- parse_skills / build_profile_update ---


class TestParseSkills:
    def test_splits_and_trims(self):
        assert parse_skills(" python, go ,sql ") == ["python", "go", "sql"]

    def test_drops_empty_items(self):
        assert parse_skills("python,, ,go,") == ["python", "go"]

    def test_accepts_list(self):
        assert parse_skills([" a", "b ", ""]) == ["a", "b"]


class TestBuildProfileUpdate:
    def test_only_supplied_non_empty_fields(self):
        update = build_profile_update(
            {"status": "Dev", "skills": "a,b", "company": "", "bio": None, "website": "x.io"}
        )

        assert update.values == {"status": "Dev", "website": "x.io", "skills": ["a", "b"]}
        assert update.social == {}

    def test_separator_only_skills_are_left_out(self):
        update = build_profile_update({"status": "Dev", "skills": " , "})

        assert "skills" not in update.values

    def test_flat_social_links(self):
        update = build_profile_update({"twitter": "t", "youtube": ""})

        assert update.social == {"twitter": "t"}

    def test_nested_social_links(self):
        update = build_profile_update({"social": {"linkedin": "l", "facebook": None}})

        assert update.social == {"linkedin": "l"}

    def test_ignores_unknown_keys(self):
        update = build_profile_update({"status": "Dev", "role": "admin"})

        assert "role" not in update.values


# --- get ---


class TestGetProfile:
    @pytest.mark.asyncio
    async def test_get_my_profile(self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID):
        uow.profiles.get_by_user.return_value = Profile(user_id=user_id, status="Dev")

        result = await service.get_my_profile(user_id)

        assert result.status == "Dev"
        uow.profiles.get_by_user.assert_called_once_with(user_id)

    @pytest.mark.asyncio
    async def test_missing_profile_raises(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.profiles.get_by_user.return_value = None

        with pytest.raises(ProfileNotFoundError):
            await service.get_by_user(user_id)

    @pytest.mark.asyncio
    async def test_list_profiles(self, service: ProfileService, uow: FakeUnitOfWork):
        uow.profiles.get_all.return_value = [Profile(user_id=uuid4()), Profile(user_id=uuid4())]

        result = await service.list_profiles()

        assert len(result) == 2


# --- upsert_profile ---


class TestUpsertProfile:
    @pytest.mark.asyncio
    async def test_creates_with_status_and_skills_only(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID, author: User
    ):
        uow.profiles.get_by_user.return_value = None
        uow.users.get.return_value = author
        _echo(uow)

        result = await service.upsert_profile(user_id, {"status": "Dev", "skills": "python, sql"})

        assert result.user_id == user_id
        assert result.status == "Dev"
        assert result.skills == ["python", "sql"]
        assert result.social == {}
        assert result.experience == []
        assert result.education == []
        assert result.company is None
        uow.profiles.create.assert_called_once()
        assert uow.committed

    @pytest.mark.asyncio
    async def test_updates_in_place_without_nulling(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        existing = Profile(
            user_id=user_id,
            status="Junior",
            company="Acme",
            skills=["go"],
            social={"twitter": "old-t", "youtube": "yt"},
        )
        uow.profiles.get_by_user.return_value = existing
        _echo(uow)

        result = await service.upsert_profile(
            user_id, {"status": "Senior", "skills": "go, rust", "twitter": "new-t"}
        )

        assert result.id == existing.id
        assert result.status == "Senior"
        assert result.company == "Acme"
        assert result.skills == ["go", "rust"]
        assert result.social == {"twitter": "new-t", "youtube": "yt"}
        uow.profiles.update.assert_called_once()
        uow.profiles.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_requires_status(self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID):
        with pytest.raises(ValidationFailedError) as exc_info:
            await service.upsert_profile(user_id, {"status": "", "skills": "a"})

        assert exc_info.value.details == {"field": "status"}
        uow.profiles.get_by_user.assert_not_called()

    @pytest.mark.asyncio
    async def test_requires_skills(self, service: ProfileService, user_id: UUID):
        with pytest.raises(ValidationFailedError) as exc_info:
            await service.upsert_profile(user_id, {"status": "Dev"})

        assert exc_info.value.details == {"field": "skills"}

    @pytest.mark.asyncio
    async def test_blank_status_raises(self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID):
        with pytest.raises(ValidationFailedError) as exc_info:
            await service.upsert_profile(user_id, {"status": "   ", "skills": "go"})

        assert exc_info.value.details == {"field": "status"}
        uow.profiles.get_by_user.assert_not_called()

    @pytest.mark.asyncio
    async def test_separator_only_skills_raise(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        with pytest.raises(ValidationFailedError) as exc_info:
            await service.upsert_profile(user_id, {"status": "Dev", "skills": " , , "})

        assert exc_info.value.details == {"field": "skills"}
        uow.profiles.update.assert_not_called()
        uow.profiles.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_for_deleted_account_raises(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.profiles.get_by_user.return_value = None
        uow.users.get.return_value = None

        with pytest.raises(UserNotFoundError):
            await service.upsert_profile(user_id, {"status": "Dev", "skills": "a"})

        uow.profiles.create.assert_not_called()


# --- experience / education ---


class TestExperience:
    @pytest.mark.asyncio
    async def test_entries_are_prepended(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        profile = Profile(user_id=user_id)
        uow.profiles.get_by_user.return_value = profile
        _echo(uow)
        first, second = _experience("E1"), _experience("E2")

        await service.add_experience(user_id, first)
        result = await service.add_experience(user_id, second)

        assert [e.title for e in result.experience] == ["E2", "E1"]

    @pytest.mark.asyncio
    async def test_remove_by_id(self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID):
        first, second = _experience("E1"), _experience("E2")
        uow.profiles.get_by_user.return_value = Profile(user_id=user_id, experience=[second, first])
        _echo(uow)

        result = await service.remove_experience(user_id, first.id)

        assert [e.title for e in result.experience] == ["E2"]
        assert uow.committed

    @pytest.mark.asyncio
    async def test_remove_unknown_id_raises_and_keeps_list(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        entry = _experience("E1")
        profile = Profile(user_id=user_id, experience=[entry])
        uow.profiles.get_by_user.return_value = profile

        with pytest.raises(ExperienceNotFoundError):
            await service.remove_experience(user_id, uuid4())

        assert profile.experience == [entry]
        uow.profiles.update.assert_not_called()
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_add_without_profile_raises(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.profiles.get_by_user.return_value = None

        with pytest.raises(ProfileNotFoundError):
            await service.add_experience(user_id, _experience("E1"))


class TestEducation:
    @pytest.mark.asyncio
    async def test_add_and_remove(self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID):
        profile = Profile(user_id=user_id)
        uow.profiles.get_by_user.return_value = profile
        _echo(uow)
        entry = Education(
            school="MIT", degree="BSc", field_of_study="CS", from_date=date(2015, 9, 1)
        )

        added = await service.add_education(user_id, entry)
        assert [e.school for e in added.education] == ["MIT"]

        removed = await service.remove_education(user_id, entry.id)
        assert removed.education == []

    @pytest.mark.asyncio
    async def test_remove_unknown_id_raises(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.profiles.get_by_user.return_value = Profile(user_id=user_id)

        with pytest.raises(EducationNotFoundError):
            await service.remove_education(user_id, uuid4())


# --- delete_account_cascade ---


class TestDeleteAccountCascade:
    @pytest.mark.asyncio
    async def test_deletes_posts_then_profile_then_account(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        calls: list[str] = []
        uow.posts.delete_by_user.side_effect = lambda _: calls.append("posts") or 2
        uow.profiles.delete_by_user.side_effect = lambda _: calls.append("profile") or True
        uow.users.delete.side_effect = lambda _: calls.append("account") or True

        await service.delete_account_cascade(user_id)

        assert calls == ["posts", "profile", "account"]
        assert uow.commits == 3

    @pytest.mark.asyncio
    async def test_failing_step_is_reraised_and_earlier_steps_stay(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.posts.delete_by_user.return_value = 1
        uow.profiles.delete_by_user.side_effect = RuntimeError("disk full")

        with pytest.raises(RuntimeError, match="disk full"):
            await service.delete_account_cascade(user_id)

        assert uow.commits == 1
        uow.users.delete.assert_not_called()
