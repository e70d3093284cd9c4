"""Pydantic schemas for Profile API."""

from datetime import date, datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SocialLinks(BaseModel):
    """Social network links, all optional."""

    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class ProfileUpsert(SocialLinks):
    """Schema for creating or updating the caller's profile.

    ``skills`` is a comma separated string. Social links may be sent flat
    or nested under ``social``.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "Developer",
                "skills": "python, fastapi, postgres",
                "company": "Acme",
                "github_username": "octocat",
                "twitter": "https://twitter.com/octocat",
            }
        },
    )

    status: str = Field(..., min_length=1)
    skills: str = Field(..., min_length=1)
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    social: SocialLinks | None = None


class ExperienceCreate(BaseModel):
    """Schema for adding an experience entry."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)
    location: str | None = None
    from_date: date = Field(..., alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None


class EducationCreate(BaseModel):
    """Schema for adding an education entry."""

    model_config = ConfigDict(populate_by_name=True)

    school: str = Field(..., min_length=1)
    degree: str = Field(..., min_length=1)
    field_of_study: str = Field(..., min_length=1)
    from_date: date = Field(..., alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None


class ExperienceResponse(ExperienceCreate):
    """Schema for an experience entry."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID


class EducationResponse(EducationCreate):
    """Schema for an education entry."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID


class OwnerResponse(BaseModel):
    """The account a profile belongs to."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    avatar: str | None = None


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    user: OwnerResponse | None = None
    status: str | None = None
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    skills: list[str] = []
    social: dict[str, str] = {}
    experience: list[ExperienceResponse] = []
    education: list[EducationResponse] = []
    created_at: datetime
    updated_at: datetime


class ProfileListResponse(BaseModel):
    """Schema for list of Profiles."""

    data: list[ProfileResponse]


class ProfileDetailResponse(BaseModel):
    """Schema for single Profile."""

    data: ProfileResponse


class GitHubReposResponse(BaseModel):
    """Repositories as GitHub returned them."""

    data: list[dict[str, Any]]
