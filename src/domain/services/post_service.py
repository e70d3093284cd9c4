"""Post service layer: feed, likes and comments."""

from collections.abc import Callable
from uuid import UUID

import structlog

from core.exceptions import (
    CommentNotFoundError,
    PostAlreadyLikedError,
    PostNotFoundError,
    PostNotLikedError,
    UserNotFoundError,
    ValidationFailedError,
)
from domain.entities.post import Comment, Like, Post
from domain.entities.user import User
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.ownership import require_owner

logger = structlog.get_logger()


class PostService:
    """Service layer for Post business logic.

    Every mutation is a single read-modify-write of one post; concurrent
    writers to the same post are not serialized (last write wins).
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def create_post(self, author_id: UUID, text: str) -> Post:
        """Create a post, snapshotting the author's name and avatar."""
        if not text:
            raise ValidationFailedError("Text is required", field="text")

        async with self._uow_factory() as uow:
            author = await self._require_user(uow, author_id)
            post = Post(
                user_id=author.id,
                text=text,
                name=author.name,
                avatar=author.avatar,
            )
            created = await uow.posts.create(post)
            await uow.commit()

        logger.info("post_created", post_id=str(created.id), user_id=str(author_id))
        return created  # type: ignore[no-any-return]

    async def list_posts(self) -> list[Post]:
        """Get all posts, newest first."""
        async with self._uow_factory() as uow:
            return await uow.posts.get_all()  # type: ignore[no-any-return]

    async def get_post(self, post_id: UUID) -> Post:
        """Get a single post."""
        async with self._uow_factory() as uow:
            return await self._require_post(uow, post_id)

    async def delete_post(self, post_id: UUID, caller_id: UUID) -> None:
        """Delete a post; only its author may do this."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            require_owner(post.user_id, caller_id)
            await uow.posts.delete(post_id)
            await uow.commit()

        logger.info("post_deleted", post_id=str(post_id), user_id=str(caller_id))

    async def like_post(self, post_id: UUID, caller_id: UUID) -> list[Like]:
        """Add the caller's like. Liking twice is an error, not a toggle."""
        async with self._uow_factory() as uow:
            await self._require_user(uow, caller_id)
            post = await self._require_post(uow, post_id)
            if not post.add_like(caller_id):
                raise PostAlreadyLikedError(str(post_id))
            saved = await uow.posts.update(post)
            await uow.commit()
            return saved.likes  # type: ignore[no-any-return]

    async def unlike_post(self, post_id: UUID, caller_id: UUID) -> list[Like]:
        """Remove the caller's like."""
        async with self._uow_factory() as uow:
            await self._require_user(uow, caller_id)
            post = await self._require_post(uow, post_id)
            if not post.remove_like(caller_id):
                raise PostNotLikedError(str(post_id))
            saved = await uow.posts.update(post)
            await uow.commit()
            return saved.likes  # type: ignore[no-any-return]

    async def add_comment(self, post_id: UUID, author_id: UUID, text: str) -> list[Comment]:
        """Prepend a comment, snapshotting the author's name and avatar."""
        if not text:
            raise ValidationFailedError("Text is required", field="text")

        async with self._uow_factory() as uow:
            author = await self._require_user(uow, author_id)
            post = await self._require_post(uow, post_id)
            post.add_comment(
                Comment(
                    user_id=author.id,
                    text=text,
                    name=author.name,
                    avatar=author.avatar,
                )
            )
            saved = await uow.posts.update(post)
            await uow.commit()
            return saved.comments  # type: ignore[no-any-return]

    async def remove_comment(
        self, post_id: UUID, comment_id: UUID, caller_id: UUID
    ) -> list[Comment]:
        """Remove a comment by id; only the comment's author may do this."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            comment = post.find_comment(comment_id)
            if not comment:
                raise CommentNotFoundError(str(comment_id))
            require_owner(comment.user_id, caller_id)

            post.remove_comment(comment.id)
            saved = await uow.posts.update(post)
            await uow.commit()
            return saved.comments  # type: ignore[no-any-return]

    async def _require_post(self, uow: IUnitOfWork, post_id: UUID) -> Post:
        post = await uow.posts.get(post_id)
        if not post:
            raise PostNotFoundError(str(post_id))
        return post

    async def _require_user(self, uow: IUnitOfWork, user_id: UUID) -> User:
        user = await uow.users.get(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))
        return user
