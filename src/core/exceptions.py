"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    MISSING_TOKEN = "MISSING_TOKEN"
    INVALID_TOKEN = "INVALID_TOKEN"
    NOT_AUTHORIZED = "NOT_AUTHORIZED"

    # Not found errors (404)
    USER_NOT_FOUND = "USER_NOT_FOUND"
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    POST_NOT_FOUND = "POST_NOT_FOUND"
    EXPERIENCE_NOT_FOUND = "EXPERIENCE_NOT_FOUND"
    EDUCATION_NOT_FOUND = "EDUCATION_NOT_FOUND"
    COMMENT_NOT_FOUND = "COMMENT_NOT_FOUND"
    GITHUB_PROFILE_NOT_FOUND = "GITHUB_PROFILE_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"

    # Conflict errors (400)
    ALREADY_LIKED = "ALREADY_LIKED"
    NOT_LIKED = "NOT_LIKED"
    USER_EXISTS = "USER_EXISTS"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ValidationFailedError(AppException):
    """A required field is missing or empty."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message=message,
            status_code=400,
            details={"field": field} if field else None,
        )


class AuthError(AppException):
    """Missing or invalid credentials, or the caller does not own the resource."""

    def __init__(
        self,
        message: str = "No token, authorization denied",
        error_code: ErrorCode = ErrorCode.MISSING_TOKEN,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class NotAuthorizedError(AuthError):
    """Caller is authenticated but is not the owner."""

    def __init__(self) -> None:
        super().__init__(
            message="User not authorized",
            error_code=ErrorCode.NOT_AUTHORIZED,
        )


class NotFoundError(AppException):
    """Entity or sub-entity does not exist."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        details: Any | None = None,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=404,
            details=details,
        )


class UserNotFoundError(NotFoundError):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            ErrorCode.USER_NOT_FOUND,
            "User not found",
            {"user_id": user_id},
        )


class ProfileNotFoundError(NotFoundError):
    """No profile exists for the user."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            ErrorCode.PROFILE_NOT_FOUND,
            "There is no profile for this user",
            {"user_id": user_id},
        )


class PostNotFoundError(NotFoundError):
    """Post not found."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            ErrorCode.POST_NOT_FOUND,
            "No post found",
            {"post_id": post_id},
        )


class ExperienceNotFoundError(NotFoundError):
    """Experience entry not found on the profile."""

    def __init__(self, experience_id: str) -> None:
        super().__init__(
            ErrorCode.EXPERIENCE_NOT_FOUND,
            "Experience not found",
            {"experience_id": experience_id},
        )


class EducationNotFoundError(NotFoundError):
    """Education entry not found on the profile."""

    def __init__(self, education_id: str) -> None:
        super().__init__(
            ErrorCode.EDUCATION_NOT_FOUND,
            "Education not found",
            {"education_id": education_id},
        )


class CommentNotFoundError(NotFoundError):
    """Comment not found on the post."""

    def __init__(self, comment_id: str) -> None:
        super().__init__(
            ErrorCode.COMMENT_NOT_FOUND,
            "Comment does not exist",
            {"comment_id": comment_id},
        )


class ConflictError(AppException):
    """The requested change contradicts the current state."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        details: Any | None = None,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=400,
            details=details,
        )


class PostAlreadyLikedError(ConflictError):
    """The caller already likes the post."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            ErrorCode.ALREADY_LIKED,
            "Post already liked",
            {"post_id": post_id},
        )


class PostNotLikedError(ConflictError):
    """The caller has not liked the post."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            ErrorCode.NOT_LIKED,
            "Post has not yet been liked",
            {"post_id": post_id},
        )


class UserAlreadyExistsError(ConflictError):
    """An account with the email already exists."""

    def __init__(self, email: str) -> None:
        super().__init__(
            ErrorCode.USER_EXISTS,
            "User already exists",
            {"email": email},
        )


class InvalidCredentialsError(AppException):
    """Unknown email or wrong password."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_CREDENTIALS,
            message="Invalid Credentials",
            status_code=400,
        )


class UpstreamError(AppException):
    """External repository lookup failed."""

    def __init__(self, username: str) -> None:
        super().__init__(
            error_code=ErrorCode.GITHUB_PROFILE_NOT_FOUND,
            message="No GitHub profile found",
            status_code=404,
            details={"username": username},
        )


class InternalError(AppException):
    """Unexpected store or runtime failure."""

    def __init__(self, message: str = "Server Error") -> None:
        super().__init__(
            error_code=ErrorCode.INTERNAL_ERROR,
            message=message,
            status_code=500,
        )
