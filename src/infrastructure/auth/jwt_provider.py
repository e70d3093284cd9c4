"""JWT authentication provider implementation.

Tokens are signed with a shared secret (HS256 by default). Payload:
    {
        "sub": "user-uuid",
        "user": { "id": "user-uuid" },
        "iat": 1234567000,
        "exp": 1234567890
    }
"""

from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

import structlog
from jose import JWTError, jwt

from core.config import settings
from infrastructure.auth.provider import TokenUser

logger = structlog.get_logger()


class JWTAuthProvider:
    """JWT-based authentication provider."""

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_minutes: int = settings.jwt_expire_minutes,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    async def validate_token(self, token: str) -> TokenUser | None:
        """
        Validate a JWT and extract the identity claim.

        Signature and expiry are both checked.

        Args:
            token: The JWT to validate

        Returns:
            TokenUser if valid, None if invalid or expired
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
            )
        except JWTError as exc:
            logger.info("token_rejected", reason=str(exc))
            return None

        user_id = self._extract_user_id(payload)
        if not user_id:
            return None

        try:
            return TokenUser(id=UUID(user_id))
        except ValueError:
            return None

    def create_token(self, user: TokenUser) -> str:
        """
        Create a signed JWT for a user.

        Args:
            user: The user to create a token for

        Returns:
            The generated JWT string
        """
        now = datetime.now(timezone.utc)
        expire = now + timedelta(minutes=self._expire_minutes)

        payload: dict[str, Any] = {
            "sub": str(user.id),
            "user": {"id": str(user.id)},
            "iat": now,
            "exp": expire,
        }

        return str(jwt.encode(payload, self._secret_key, algorithm=self._algorithm))

    @staticmethod
    def _extract_user_id(payload: dict[str, Any]) -> str | None:
        """Prefer ``sub``; fall back to the nested ``user.id`` claim."""
        sub = payload.get("sub")
        if sub:
            return str(sub)
        nested = payload.get("user")
        if isinstance(nested, dict) and nested.get("id"):
            return str(nested["id"])
        return None
