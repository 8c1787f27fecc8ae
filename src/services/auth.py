"""Signup and signin workflow."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.database import is_unique_violation
from src.models.user import User
from src.schemas.auth import AccessToken
from src.services.exceptions import DuplicateCredentials, InvalidCredentials
from src.services.security import PasswordHasher, TokenIssuer

logger = logging.getLogger(__name__)


class AuthService:
    """Service for registering users and exchanging credentials for tokens."""

    def __init__(self, db: Session, hasher: PasswordHasher, token_issuer: TokenIssuer):
        self.db = db
        self.hasher = hasher
        self.token_issuer = token_issuer

    def signup(self, email: str, password: str) -> User:
        """Create a user. The email must not be registered yet."""
        user = User(email=email, password_hash=self.hasher.hash(password))
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if is_unique_violation(e):
                logger.info(f"Signup rejected, email already registered: {email}")
                raise DuplicateCredentials() from e
            raise
        self.db.refresh(user)
        logger.info(f"Registered user {user.id}")
        return user

    def signin(self, email: str, password: str) -> AccessToken:
        """Check credentials and issue an access token."""
        user = self.db.query(User).filter(User.email == email).first()
        password_hash = user.password_hash if user is not None else self.hasher.dummy_hash
        password_matches = self.hasher.verify(password_hash, password)
        if user is None or not password_matches:
            logger.info(f"Failed signin for {email}")
            raise InvalidCredentials()

        return AccessToken(access_token=self.token_issuer.issue(user.id, user.email))
