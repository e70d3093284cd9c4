"""SQLAlchemy implementation of Post repository."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.post import Post
from infrastructure.database.documents import (
    comment_from_document,
    comment_to_document,
    like_from_document,
    like_to_document,
)
from infrastructure.database.models import PostModel


class SQLAlchemyPostRepository:
    """SQLAlchemy implementation of IPostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Post | None:
        """Get a post by ID."""
        model = await self._session.get(PostModel, id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Post]:
        """Get all posts, newest first."""
        stmt = select(PostModel).order_by(PostModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, post: Post) -> Post:
        """Create a new post."""
        model = self._to_model(post)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, post: Post) -> Post:
        """Rewrite the embedded likes and comments of a post."""
        model = await self._session.get(PostModel, post.id)

        if not model:
            raise ValueError(f"Post {post.id} not found")

        model.text = post.text
        model.likes = [like_to_document(like) for like in post.likes]
        model.comments = [comment_to_document(c) for c in post.comments]

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete a post."""
        stmt = delete(PostModel).where(PostModel.id == id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    async def delete_by_user(self, user_id: UUID) -> int:
        """Delete every post written by a user."""
        stmt = delete(PostModel).where(PostModel.user_id == user_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return int(result.rowcount or 0)

    def _to_entity(self, model: PostModel) -> Post:
        """Convert ORM model to domain entity."""
        return Post(
            id=model.id,
            user_id=model.user_id,
            text=model.text,
            name=model.name,
            avatar=model.avatar,
            likes=[like_from_document(d) for d in model.likes or []],
            comments=[comment_from_document(d) for d in model.comments or []],
            created_at=model.created_at,
        )

    def _to_model(self, entity: Post) -> PostModel:
        """Convert domain entity to ORM model."""
        return PostModel(
            id=entity.id,
            user_id=entity.user_id,
            text=entity.text,
            name=entity.name,
            avatar=entity.avatar,
            likes=[like_to_document(like) for like in entity.likes],
            comments=[comment_to_document(c) for c in entity.comments],
            created_at=entity.created_at,
        )
