"""Post domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from domain.entities.identity import same_identity


@dataclass(frozen=True, slots=True)
class Like:
    """A like on a post; at most one per user."""

    user_id: UUID


@dataclass
class Comment:
    """A comment embedded in a post."""

    user_id: UUID
    text: str
    id: UUID = field(default_factory=uuid4)
    name: str | None = None
    avatar: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class Post:
    """Domain entity for a feed post.

    ``name`` and ``avatar`` are a snapshot of the author taken when the post
    was written; they do not follow later account changes.
    """

    user_id: UUID
    text: str
    id: UUID = field(default_factory=uuid4)
    name: str | None = None
    avatar: str | None = None
    likes: list[Like] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def is_liked_by(self, user_id: UUID | str) -> bool:
        return any(same_identity(like.user_id, user_id) for like in self.likes)

    def add_like(self, user_id: UUID) -> bool:
        """Prepend a like. Returns False if the user already likes the post."""
        if self.is_liked_by(user_id):
            return False
        self.likes = [Like(user_id=user_id), *self.likes]
        return True

    def remove_like(self, user_id: UUID | str) -> bool:
        """Drop the user's like. Returns False if there was none."""
        if not self.is_liked_by(user_id):
            return False
        self.likes = [like for like in self.likes if not same_identity(like.user_id, user_id)]
        return True

    def find_comment(self, comment_id: UUID | str) -> Comment | None:
        for comment in self.comments:
            if same_identity(comment.id, comment_id):
                return comment
        return None

    def add_comment(self, comment: Comment) -> None:
        """Prepend a comment (newest first)."""
        self.comments = [comment, *self.comments]

    def remove_comment(self, comment_id: UUID | str) -> bool:
        """Remove a comment by its own id. Returns False when absent."""
        remaining = [c for c in self.comments if not same_identity(c.id, comment_id)]
        if len(remaining) == len(self.comments):
            return False
        self.comments = remaining
        return True
