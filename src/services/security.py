"""Password hashing and JWT session tokens."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

DEFAULT_TOKEN_MINUTES = 15


def utc_now() -> datetime:
    return datetime.now(UTC)


class PasswordHasher:
    """Salted one-way password hashing."""

    def __init__(self, schemes: list[str] | None = None):
        self.context = CryptContext(schemes=schemes or ["bcrypt"], deprecated="auto")
        # Checked against when there is no stored hash, so misses cost the same
        self.dummy_hash = self.context.hash("dummy-password")

    def hash(self, password: str) -> str:
        """Hash a password."""
        return self.context.hash(password)

    def verify(self, password_hash: str, password: str) -> bool:
        """Verify a password against its hash. Never raises on mismatch."""
        try:
            return self.context.verify(password, password_hash)
        except (ValueError, TypeError):
            # Unrecognised or malformed stored hash
            return False


class TokenIssuer:
    """Signs short-lived access tokens asserting a user's identity."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_minutes: int = DEFAULT_TOKEN_MINUTES,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.lifetime = timedelta(minutes=expires_minutes)
        self.clock = clock

    def issue(self, user_id: int, email: str) -> str:
        """Create a signed JWT for the given user."""
        issued_at = self.clock()
        to_encode = {
            "sub": str(user_id),
            "email": email,
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)


def decode_access_token(token: str, secret: str, algorithm: str = "HS256") -> dict | None:
    """Decode and validate a JWT token.

    Returns None for a bad signature, a malformed token or an expired one.
    """
    try:
        return jwt.decode(token, secret, algorithms=[algorithm])
    except JWTError:
        return None
