"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.config import Settings
from src.errors import InvalidTokenError, ServerMisconfiguredError, UserExistsError
from src.models.user import User
from src.schemas.auth import MAX_PASSWORD_BYTES

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


class TokenService:
    """Issues and verifies stateless session tokens carrying a user id."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expiration_minutes: int | None = None,
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.expiration_minutes = expiration_minutes

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expiration_minutes=settings.jwt_expiration_minutes,
        )

    def _require_secret(self) -> str:
        if not self.secret:
            logger.error("JWT secret is not configured")
            raise ServerMisconfiguredError("JWT secret is not configured")
        return self.secret

    def issue(self, user_id: int) -> str:
        """Create a signed token for the given user."""
        secret = self._require_secret()
        now = datetime.now(UTC)
        to_encode = {"sub": str(user_id), "iat": now}
        if self.expiration_minutes:
            to_encode["exp"] = now + timedelta(minutes=self.expiration_minutes)
        return jwt.encode(to_encode, secret, algorithm=self.algorithm)

    def verify(self, token: str) -> int:
        """Decode a token and return the user id it was issued for.

        Raises:
            InvalidTokenError: bad signature, malformed or expired token,
                or a payload that is not an object with a numeric ``sub``.
            ServerMisconfiguredError: the signing secret is unset.
        """
        secret = self._require_secret()
        try:
            payload = jwt.decode(token, secret, algorithms=[self.algorithm])
        except JWTError as e:
            raise InvalidTokenError(details=str(e)) from e

        if not isinstance(payload, dict):
            raise InvalidTokenError("You are not logged in")

        subject = payload.get("sub")
        if subject is None:
            raise InvalidTokenError("You are not logged in")
        try:
            return int(subject)
        except (TypeError, ValueError) as e:
            raise InvalidTokenError(details="Token subject is not a user id") from e


def get_user_by_username(db: Session, username: str) -> User | None:
    """Get a user by username."""
    return db.query(User).filter(User.username == username).first()


def create_user(db: Session, username: str, password: str) -> User:
    """Create a new user.

    Raises:
        UserExistsError: the username is already taken.
    """
    if get_user_by_username(db, username):
        raise UserExistsError()

    user = User(username=username, password_hash=get_password_hash(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent signup for the same username
        db.rollback()
        raise UserExistsError() from e
    db.refresh(user)
    logger.info(f"User signed up: id={user.id}")
    return user


def authenticate_user(db: Session, username: str, password: str) -> User | None:
    """Authenticate a user by username and password."""
    # Longer passwords were never accepted at signup; bcrypt would truncate them
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return None
    user = get_user_by_username(db, username)
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user
