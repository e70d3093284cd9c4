"""Account registration route."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.services import get_user_service
from api.schemas.common import ValidationErrorResponse
from api.schemas.user import TokenResponse, UserRegister
from core.rate_limit import WRITE_LIMIT, limiter
from domain.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=TokenResponse,
    status_code=status.HTTP_200_OK,
    summary="Register an account",
    responses={
        200: {"description": "Account created, token issued"},
        400: {
            "model": ValidationErrorResponse,
            "description": "Validation failed or email already registered",
        },
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def register_user(
    request: Request,
    body: UserRegister,
    service: UserService = Depends(get_user_service),
) -> TokenResponse:
    """Create an account. The avatar is taken from Gravatar."""
    token = await service.register(
        name=body.name,
        email=body.email,
        password=body.password,
    )
    return TokenResponse(token=token)
