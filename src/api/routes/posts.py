"""Post API routes: feed, likes and comments."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.dependencies.services import get_post_service
from api.schemas.common import ErrorResponse, MessageResponse, ValidationErrorResponse
from api.schemas.post import (
    CommentCreate,
    CommentListResponse,
    CommentResponse,
    LikeListResponse,
    LikeResponse,
    PostCreate,
    PostDetailResponse,
    PostListResponse,
    PostResponse,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.post import Comment, Like, Post
from domain.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post(
    "",
    response_model=PostDetailResponse,
    summary="Write a post",
    responses={
        400: {"model": ValidationErrorResponse, "description": "Text is required"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_post(
    request: Request,
    body: PostCreate,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostDetailResponse:
    """Create a post signed with the author's current name and avatar."""
    post = await service.create_post(user.id, body.text)
    return PostDetailResponse(data=_build_post_response(post))


@router.get(
    "",
    response_model=PostListResponse,
    summary="List all posts",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_posts(
    request: Request,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostListResponse:
    """Get all posts, newest first."""
    posts = await service.list_posts()
    return PostListResponse(data=[_build_post_response(p) for p in posts])


@router.get(
    "/{post_id}",
    response_model=PostDetailResponse,
    summary="Get a post",
    responses={
        404: {"model": ErrorResponse, "description": "Post not found"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_post(
    request: Request,
    post_id: UUID,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostDetailResponse:
    """Get a single post with its likes and comments."""
    post = await service.get_post(post_id)
    return PostDetailResponse(data=_build_post_response(post))


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    summary="Delete a post",
    responses={
        401: {"model": ErrorResponse, "description": "Caller is not the author"},
        404: {"model": ErrorResponse, "description": "Post not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_post(
    request: Request,
    post_id: UUID,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> MessageResponse:
    """Delete a post. Only its author may do this."""
    await service.delete_post(post_id, user.id)
    return MessageResponse(msg="Post removed")


@router.put(
    "/like/{post_id}",
    response_model=LikeListResponse,
    summary="Like a post",
    responses={
        400: {"model": ValidationErrorResponse, "description": "Post already liked"},
        404: {"model": ErrorResponse, "description": "Post not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def like_post(
    request: Request,
    post_id: UUID,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> LikeListResponse:
    """Add the caller's like. Returns the post's likes."""
    likes = await service.like_post(post_id, user.id)
    return LikeListResponse(data=[_build_like_response(like) for like in likes])


@router.put(
    "/unlike/{post_id}",
    response_model=LikeListResponse,
    summary="Unlike a post",
    responses={
        400: {"model": ValidationErrorResponse, "description": "Post has not yet been liked"},
        404: {"model": ErrorResponse, "description": "Post not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def unlike_post(
    request: Request,
    post_id: UUID,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> LikeListResponse:
    """Remove the caller's like. Returns the post's likes."""
    likes = await service.unlike_post(post_id, user.id)
    return LikeListResponse(data=[_build_like_response(like) for like in likes])


@router.post(
    "/comment/{post_id}",
    response_model=CommentListResponse,
    summary="Comment on a post",
    responses={
        400: {"model": ValidationErrorResponse, "description": "Text is required"},
        404: {"model": ErrorResponse, "description": "Post not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_comment(
    request: Request,
    post_id: UUID,
    body: CommentCreate,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> CommentListResponse:
    """Add a comment at the top of the post's comments."""
    comments = await service.add_comment(post_id, user.id, body.text)
    return CommentListResponse(data=[_build_comment_response(c) for c in comments])


@router.delete(
    "/comment/{post_id}/{comment_id}",
    response_model=CommentListResponse,
    summary="Delete a comment",
    responses={
        401: {"model": ErrorResponse, "description": "Caller is not the comment's author"},
        404: {"model": ErrorResponse, "description": "Post or comment not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def remove_comment(
    request: Request,
    post_id: UUID,
    comment_id: UUID,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> CommentListResponse:
    """Delete a comment. Only the comment's author may do this."""
    comments = await service.remove_comment(post_id, comment_id, user.id)
    return CommentListResponse(data=[_build_comment_response(c) for c in comments])


def _build_like_response(like: Like) -> LikeResponse:
    return LikeResponse(user=like.user_id)


def _build_comment_response(comment: Comment) -> CommentResponse:
    return CommentResponse(
        id=comment.id,
        user=comment.user_id,
        text=comment.text,
        name=comment.name,
        avatar=comment.avatar,
        created_at=comment.created_at,
    )


def _build_post_response(post: Post) -> PostResponse:
    """Build a PostResponse from a Post entity."""
    return PostResponse(
        id=post.id,
        user=post.user_id,
        text=post.text,
        name=post.name,
        avatar=post.avatar,
        likes=[_build_like_response(like) for like in post.likes],
        comments=[_build_comment_response(c) for c in post.comments],
        created_at=post.created_at,
    )
