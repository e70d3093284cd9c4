"""Login and current-account routes."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.dependencies.services import get_user_service
from api.schemas.common import ErrorResponse, ValidationErrorResponse
from api.schemas.user import TokenResponse, UserDetailResponse, UserLogin, UserResponse
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get(
    "",
    response_model=UserDetailResponse,
    summary="Get the current account",
    responses={
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
        404: {"model": ErrorResponse, "description": "Account no longer exists"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_me(
    request: Request,
    user: CurrentUser,
    service: UserService = Depends(get_user_service),
) -> UserDetailResponse:
    """Return the account the token was issued for."""
    account = await service.get_user(user.id)
    return UserDetailResponse(data=UserResponse.model_validate(account))


@router.post(
    "",
    response_model=TokenResponse,
    summary="Log in",
    responses={
        400: {"model": ValidationErrorResponse, "description": "Invalid credentials"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def login(
    request: Request,
    body: UserLogin,
    service: UserService = Depends(get_user_service),
) -> TokenResponse:
    """Exchange email and password for an access token."""
    token = await service.authenticate(body.email, body.password)
    return TokenResponse(token=token)
