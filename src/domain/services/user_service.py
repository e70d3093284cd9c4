"""Account service: registration, login and current-user lookup."""

import hashlib
from collections.abc import Callable
from urllib.parse import urlencode
from uuid import UUID

import structlog

from core.exceptions import InvalidCredentialsError, UserAlreadyExistsError, UserNotFoundError
from domain.entities.user import User
from domain.repositories.unit_of_work import IUnitOfWork
from infrastructure.auth.provider import IAuthProvider, IPasswordHasher, TokenUser

logger = structlog.get_logger()

GRAVATAR_URL = "https://www.gravatar.com/avatar"


def gravatar_url(email: str, size: int = 200) -> str:
    """Build the Gravatar URL for an email (PG rated, mystery-man fallback)."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    query = urlencode({"s": size, "r": "pg", "d": "mm"})
    return f"{GRAVATAR_URL}/{digest}?{query}"


class UserService:
    """Service layer for account business logic."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        auth_provider: IAuthProvider,
        password_hasher: IPasswordHasher,
    ) -> None:
        self._uow_factory = uow_factory
        self._auth = auth_provider
        self._hasher = password_hasher

    async def register(self, name: str, email: str, password: str) -> str:
        """Create an account and return a signed access token."""
        async with self._uow_factory() as uow:
            if await uow.users.get_by_email(email):
                raise UserAlreadyExistsError(email)

            user = User(
                name=name,
                email=email,
                avatar=gravatar_url(email),
                password_hash=self._hasher.hash(password),
            )
            created = await uow.users.create(user)
            await uow.commit()

        logger.info("user_registered", user_id=str(created.id))
        return self._auth.create_token(TokenUser(id=created.id))

    async def authenticate(self, email: str, password: str) -> str:
        """Check credentials and return a signed access token."""
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(email)

        # Same error for unknown email and wrong password
        if not user or not self._hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        return self._auth.create_token(TokenUser(id=user.id))

    async def get_user(self, user_id: UUID) -> User:
        """Get an account by id."""
        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)
            if not user:
                raise UserNotFoundError(str(user_id))
            return user
