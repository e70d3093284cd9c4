"""Profile API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.dependencies.services import get_github_client, get_profile_service
from api.schemas.common import ErrorResponse, MessageResponse, ValidationErrorResponse
from api.schemas.profile import (
    EducationCreate,
    EducationResponse,
    ExperienceCreate,
    ExperienceResponse,
    GitHubReposResponse,
    OwnerResponse,
    ProfileDetailResponse,
    ProfileListResponse,
    ProfileResponse,
    ProfileUpsert,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.profile import Education, Experience, Profile
from domain.services.profile_service import ProfileService
from infrastructure.github.client import GitHubClient

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get(
    "/me",
    response_model=ProfileDetailResponse,
    summary="Get own profile",
    responses={
        404: {"model": ErrorResponse, "description": "No profile for this user"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_my_profile(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get the profile of the authenticated user."""
    profile = await service.get_my_profile(user.id)
    return ProfileDetailResponse(data=_build_profile_response(profile))


@router.post(
    "",
    response_model=ProfileDetailResponse,
    summary="Create or update own profile",
    responses={
        200: {"description": "Profile created or updated"},
        400: {"model": ValidationErrorResponse, "description": "Status or skills missing"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def upsert_profile(
    request: Request,
    body: ProfileUpsert,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """
    Create the profile on first call, update it afterwards.

    Only fields sent with a non-empty value are written. Social links are
    merged into the existing ones.
    """
    profile = await service.upsert_profile(user.id, body.model_dump(exclude_none=True))
    return ProfileDetailResponse(data=_build_profile_response(profile))


@router.get(
    "",
    response_model=ProfileListResponse,
    summary="List all profiles",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_profiles(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileListResponse:
    """Get every profile with its owner's name and avatar."""
    profiles = await service.list_profiles()
    return ProfileListResponse(data=[_build_profile_response(p) for p in profiles])


@router.get(
    "/user/{user_id}",
    response_model=ProfileDetailResponse,
    summary="Get a profile by user id",
    responses={
        404: {"model": ErrorResponse, "description": "No profile for this user"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile_by_user(
    request: Request,
    user_id: UUID,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get the profile of any user."""
    profile = await service.get_by_user(user_id)
    return ProfileDetailResponse(data=_build_profile_response(profile))


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Delete own account",
    responses={
        200: {"description": "Posts, profile and account removed"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_account(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """Delete the caller's posts, profile and account, in that order."""
    await service.delete_account_cascade(user.id)
    return MessageResponse(msg="User deleted")


@router.put(
    "/experience",
    response_model=ProfileDetailResponse,
    summary="Add an experience entry",
    responses={
        404: {"model": ErrorResponse, "description": "No profile for this user"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_experience(
    request: Request,
    body: ExperienceCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Add an experience entry at the top of the list."""
    entry = Experience(
        title=body.title,
        company=body.company,
        location=body.location,
        from_date=body.from_date,
        to_date=body.to_date,
        current=body.current,
        description=body.description,
    )
    profile = await service.add_experience(user.id, entry)
    return ProfileDetailResponse(data=_build_profile_response(profile))


@router.delete(
    "/experience/{exp_id}",
    response_model=ProfileDetailResponse,
    summary="Remove an experience entry",
    responses={
        404: {"model": ErrorResponse, "description": "Profile or experience entry not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def remove_experience(
    request: Request,
    exp_id: UUID,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Remove an experience entry by id."""
    profile = await service.remove_experience(user.id, exp_id)
    return ProfileDetailResponse(data=_build_profile_response(profile))


@router.put(
    "/education",
    response_model=ProfileDetailResponse,
    summary="Add an education entry",
    responses={
        404: {"model": ErrorResponse, "description": "No profile for this user"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_education(
    request: Request,
    body: EducationCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Add an education entry at the top of the list."""
    entry = Education(
        school=body.school,
        degree=body.degree,
        field_of_study=body.field_of_study,
        from_date=body.from_date,
        to_date=body.to_date,
        current=body.current,
        description=body.description,
    )
    profile = await service.add_education(user.id, entry)
    return ProfileDetailResponse(data=_build_profile_response(profile))


@router.delete(
    "/education/{edu_id}",
    response_model=ProfileDetailResponse,
    summary="Remove an education entry",
    responses={
        404: {"model": ErrorResponse, "description": "Profile or education entry not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def remove_education(
    request: Request,
    edu_id: UUID,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Remove an education entry by id."""
    profile = await service.remove_education(user.id, edu_id)
    return ProfileDetailResponse(data=_build_profile_response(profile))


@router.get(
    "/github/{username}",
    response_model=GitHubReposResponse,
    summary="List a GitHub user's repositories",
    responses={
        404: {"model": ErrorResponse, "description": "No GitHub profile found"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_github_repos(
    request: Request,
    username: str,
    client: GitHubClient = Depends(get_github_client),
) -> GitHubReposResponse:
    """Proxy to GitHub: the user's five oldest-created public repositories."""
    repos = await client.get_repos(username)
    return GitHubReposResponse(data=repos)


def _build_profile_response(profile: Profile) -> ProfileResponse:
    """Build a ProfileResponse from a Profile entity."""
    owner = None
    if profile.owner:
        owner = OwnerResponse(
            id=profile.owner.id,
            name=profile.owner.name,
            avatar=profile.owner.avatar,
        )

    return ProfileResponse(
        id=profile.id,
        user_id=profile.user_id,
        user=owner,
        status=profile.status,
        company=profile.company,
        website=profile.website,
        location=profile.location,
        bio=profile.bio,
        github_username=profile.github_username,
        skills=profile.skills,
        social=profile.social,
        experience=[_build_experience_response(e) for e in profile.experience],
        education=[_build_education_response(e) for e in profile.education],
        created_at=profile.created_at,
        updated_at=profile.updated_at,
    )


def _build_experience_response(entry: Experience) -> ExperienceResponse:
    return ExperienceResponse(
        id=entry.id,
        title=entry.title,
        company=entry.company,
        location=entry.location,
        from_date=entry.from_date,
        to_date=entry.to_date,
        current=entry.current,
        description=entry.description,
    )


def _build_education_response(entry: Education) -> EducationResponse:
    return EducationResponse(
        id=entry.id,
        school=entry.school,
        degree=entry.degree,
        field_of_study=entry.field_of_study,
        from_date=entry.from_date,
        to_date=entry.to_date,
        current=entry.current,
        description=entry.description,
    )
