"""Password hashing backed by passlib."""

from passlib.context import CryptContext


class PasslibPasswordHasher:
    """IPasswordHasher implementation using a passlib CryptContext."""

    def __init__(self, schemes: list[str] | None = None) -> None:
        self._context = CryptContext(schemes=schemes or ["pbkdf2_sha256"], deprecated="auto")

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed:
            return False
        try:
            return bool(self._context.verify(password, hashed))
        except ValueError:
            # Unrecognized hash format
            return False
