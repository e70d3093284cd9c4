"""Conversion between embedded sub-documents and their JSON column form.

Ids are written as strings and dates as ISO-8601 so the documents survive
both the PostgreSQL JSONB and the SQLite JSON round trip unchanged.
"""

from datetime import date, datetime
from typing import Any
from uuid import UUID

from domain.entities.post import Comment, Like
from domain.entities.profile import Education, Experience


def _date_or_none(value: str | None) -> date | None:
    return date.fromisoformat(value) if value else None


def _iso_or_none(value: date | None) -> str | None:
    return value.isoformat() if value else None


def experience_to_document(entry: Experience) -> dict[str, Any]:
    return {
        "id": str(entry.id),
        "title": entry.title,
        "company": entry.company,
        "location": entry.location,
        "from": entry.from_date.isoformat(),
        "to": _iso_or_none(entry.to_date),
        "current": entry.current,
        "description": entry.description,
    }


def experience_from_document(doc: dict[str, Any]) -> Experience:
    return Experience(
        id=UUID(doc["id"]),
        title=doc["title"],
        company=doc["company"],
        location=doc.get("location"),
        from_date=date.fromisoformat(doc["from"]),
        to_date=_date_or_none(doc.get("to")),
        current=bool(doc.get("current", False)),
        description=doc.get("description"),
    )


def education_to_document(entry: Education) -> dict[str, Any]:
    return {
        "id": str(entry.id),
        "school": entry.school,
        "degree": entry.degree,
        "field_of_study": entry.field_of_study,
        "from": entry.from_date.isoformat(),
        "to": _iso_or_none(entry.to_date),
        "current": entry.current,
        "description": entry.description,
    }


def education_from_document(doc: dict[str, Any]) -> Education:
    return Education(
        id=UUID(doc["id"]),
        school=doc["school"],
        degree=doc["degree"],
        field_of_study=doc["field_of_study"],
        from_date=date.fromisoformat(doc["from"]),
        to_date=_date_or_none(doc.get("to")),
        current=bool(doc.get("current", False)),
        description=doc.get("description"),
    )


def like_to_document(like: Like) -> dict[str, Any]:
    return {"user": str(like.user_id)}


def like_from_document(doc: dict[str, Any]) -> Like:
    return Like(user_id=UUID(doc["user"]))


def comment_to_document(comment: Comment) -> dict[str, Any]:
    return {
        "id": str(comment.id),
        "user": str(comment.user_id),
        "text": comment.text,
        "name": comment.name,
        "avatar": comment.avatar,
        "created_at": comment.created_at.isoformat(),
    }


def comment_from_document(doc: dict[str, Any]) -> Comment:
    return Comment(
        id=UUID(doc["id"]),
        user_id=UUID(doc["user"]),
        text=doc["text"],
        name=doc.get("name"),
        avatar=doc.get("avatar"),
        created_at=datetime.fromisoformat(doc["created_at"]),
    )
