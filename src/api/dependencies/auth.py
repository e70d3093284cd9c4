"""Authentication dependencies for FastAPI."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import APIKeyHeader, HTTPAuthorizationCredentials, HTTPBearer

from core.exceptions import AuthError, ErrorCode
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import TokenUser

# Security schemes for OpenAPI docs. x-auth-token wins when both are sent.
token_header = APIKeyHeader(name="x-auth-token", auto_error=False)
bearer = HTTPBearer(auto_error=False)

# Singleton auth provider
_auth_provider: JWTAuthProvider | None = None


def get_auth_provider() -> JWTAuthProvider:
    """Get or create the auth provider singleton."""
    global _auth_provider
    if _auth_provider is None:
        _auth_provider = JWTAuthProvider()
    return _auth_provider


def _pick_token(
    header_token: str | None,
    credentials: HTTPAuthorizationCredentials | None,
) -> str | None:
    if header_token:
        return header_token
    if credentials:
        return credentials.credentials
    return None


async def get_current_user(
    header_token: Annotated[str | None, Depends(token_header)],
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer)],
    auth_provider: JWTAuthProvider = Depends(get_auth_provider),
) -> TokenUser:
    """
    Dependency to get the current authenticated user.

    Raises:
        AuthError: MISSING_TOKEN if no token was sent, INVALID_TOKEN if it
            fails signature or expiry checks
    """
    token = _pick_token(header_token, credentials)
    if not token:
        raise AuthError(
            message="No token, authorization denied",
            error_code=ErrorCode.MISSING_TOKEN,
        )

    user = await auth_provider.validate_token(token)

    if not user:
        raise AuthError(
            message="Token is not valid",
            error_code=ErrorCode.INVALID_TOKEN,
        )

    return user


# Type alias for convenience in route handlers
CurrentUser = Annotated[TokenUser, Depends(get_current_user)]
