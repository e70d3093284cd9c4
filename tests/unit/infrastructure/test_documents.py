"""Unit tests for embedded sub-document conversion."""

from datetime import date, datetime
from uuid import UUID, uuid4

from domain.entities.post import Comment, Like
from domain.entities.profile import Education, Experience
from infrastructure.database.documents import (
    comment_from_document,
    comment_to_document,
    education_from_document,
    education_to_document,
    experience_from_document,
    experience_to_document,
    like_from_document,
    like_to_document,
)


class TestExperienceDocument:
    def test_uses_from_and_to_keys(self):
        entry = Experience(
            title="Engineer",
            company="Acme",
            from_date=date(2019, 5, 1),
            to_date=date(2021, 6, 30),
        )

        doc = experience_to_document(entry)

        assert doc["id"] == str(entry.id)
        assert doc["from"] == "2019-05-01"
        assert doc["to"] == "2021-06-30"
        assert experience_from_document(doc) == entry

    def test_open_ended_entry(self):
        doc = {
            "id": str(uuid4()),
            "title": "Engineer",
            "company": "Acme",
            "from": "2022-01-01",
        }

        entry = experience_from_document(doc)

        assert entry.to_date is None
        assert entry.current is False
        assert entry.location is None


class TestEducationDocument:
    def test_keeps_every_field(self):
        entry = Education(
            school="MIT",
            degree="BSc",
            field_of_study="CS",
            from_date=date(2015, 9, 1),
            current=True,
            description="Robotics",
        )

        assert education_from_document(education_to_document(entry)) == entry


class TestPostDocuments:
    def test_like_keyed_by_user(self):
        user = uuid4()

        assert like_to_document(Like(user_id=user)) == {"user": str(user)}
        assert like_from_document({"user": str(user)}).user_id == user

    def test_comment(self):
        comment = Comment(
            user_id=uuid4(),
            text="Nice",
            name="Ada",
            created_at=datetime(2026, 1, 2, 3, 4, 5),
        )

        doc = comment_to_document(comment)
        restored = comment_from_document(doc)

        assert doc["user"] == str(comment.user_id)
        assert doc["created_at"] == "2026-01-02T03:04:05"
        assert restored == comment
        assert isinstance(restored.id, UUID)
