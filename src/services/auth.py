"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from src.config import get_settings
from src.exceptions import (
    AuthError,
    ConflictError,
    InvalidTokenError,
    MalformedAuthError,
    MissingAuthError,
    StorageError,
    ValidationError,
)
from src.models.user import User
from src.schemas.auth import TokenClaims

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)

BEARER_SCHEME = "Bearer"
INVALID_CREDENTIALS = "Invalid username or password."


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash (constant-time)."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: int, username: str, now: datetime | None = None) -> str:
    """Create a JWT access token that expires after the configured lifetime."""
    issued_at = now or datetime.now(UTC)
    expire = issued_at + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "username": username,
        "userId": user_id,
        "iat": issued_at,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token.

    Only the configured algorithm is accepted, and the expiry claim is
    required and checked.
    """
    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require_exp": True},
        )
    except JWTError:
        return None


def verify_bearer(authorization: str | None) -> TokenClaims:
    """Check an ``Authorization: Bearer <token>`` header and return its claims."""
    if not authorization:
        logger.warning("Rejected request: missing Authorization header")
        raise MissingAuthError("Authorization required.")

    scheme, _, token = authorization.partition(" ")
    if scheme != BEARER_SCHEME or not token:
        logger.warning("Rejected request: invalid authorization format")
        raise MalformedAuthError("Invalid authorization format. Use: Bearer <token>")

    payload = decode_access_token(token)
    if payload is None:
        logger.warning("Rejected request: invalid or expired token")
        raise InvalidTokenError("Invalid token.")

    username = payload.get("username")
    user_id = payload.get("userId")
    if not isinstance(username, str) or not isinstance(user_id, int):
        logger.warning("Rejected request: token is missing identity claims")
        raise InvalidTokenError("Invalid token.")

    return TokenClaims(username=username, user_id=user_id)


class AuthService:
    """Registers users and authenticates logins."""

    def __init__(self, db: Session):
        self.db = db

    def get_user_by_username(self, username: str) -> User | None:
        """Get a user by username (case-sensitive)."""
        try:
            return self.db.query(User).filter(User.username == username).first()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error looking up user '{username}': {e}")
            raise StorageError("Failed to look up user.") from e

    def register(self, username: str, password: str) -> tuple[str, User]:
        """Create a user and mint their first token.

        The pre-check only gives a friendlier fast path; the unique
        constraint on ``users.username`` decides conflicts.
        """
        if not username or not password:
            raise ValidationError("Username and password are required.")

        if self.get_user_by_username(username) is not None:
            raise ConflictError("Username already exists.")

        try:
            hashed_password = get_password_hash(password)
        except ValueError as e:
            logger.error(f"Error hashing password for '{username}': {e}")
            raise StorageError("Failed to register user.") from e

        user = User(username=username, password=hashed_password)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info(f"Signup lost race for username '{username}'")
            raise ConflictError("Username already exists.") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error registering user '{username}': {e}")
            raise StorageError("Failed to register user.") from e

        self.db.refresh(user)
        logger.info(f"Registered user {user.id} ('{username}')")
        return create_access_token(user.id, user.username), user

    def authenticate(self, username: str, password: str) -> str:
        """Check credentials and mint a fresh token."""
        user = self.get_user_by_username(username)
        if user is None or not verify_password(password, user.password):
            raise AuthError(INVALID_CREDENTIALS)
        return create_access_token(user.id, user.username)
