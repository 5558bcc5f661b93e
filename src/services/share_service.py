"""Share link registry and public brain resolution."""

import logging
import secrets
import string
from collections.abc import Callable
from dataclasses import dataclass, field

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.errors import DataIntegrityError, NotFoundError, StoreError
from src.models.content import Content
from src.models.share_link import ShareLink
from src.models.user import User

logger = logging.getLogger(__name__)

HASH_ALPHABET = string.ascii_letters + string.digits


def generate_hash(length: int) -> str:
    """Generate a random alphanumeric share hash."""
    return "".join(secrets.choice(HASH_ALPHABET) for _ in range(length))


@dataclass(frozen=True)
class SharedBrain:
    """Public view of one user's brain."""

    username: str
    content: list[Content] = field(default_factory=list)


class ShareLinkRegistry:
    """Maps each user to at most one public share hash."""

    def __init__(
        self,
        db: Session,
        hash_length: int = 10,
        max_attempts: int = 5,
        hash_factory: Callable[[int], str] = generate_hash,
    ):
        self.db = db
        self.hash_length = hash_length
        self.max_attempts = max_attempts
        self.hash_factory = hash_factory

    def get_for_user(self, user_id: int) -> ShareLink | None:
        return self.db.query(ShareLink).filter(ShareLink.user_id == user_id).first()

    def set_sharing(self, user_id: int, enabled: bool) -> str | None:
        """Enable or disable sharing for a user.

        Enabling returns the user's hash, reusing an existing one. Disabling
        removes the link and returns None.
        """
        if enabled:
            return self.enable(user_id)
        self.disable(user_id)
        return None

    def enable(self, user_id: int) -> str:
        """Return the user's share hash, creating one if needed."""
        existing = self.get_for_user(user_id)
        if existing:
            return existing.hash

        for attempt in range(1, self.max_attempts + 1):
            share_hash = self.hash_factory(self.hash_length)
            self.db.add(ShareLink(user_id=user_id, hash=share_hash))
            try:
                self.db.commit()
            except IntegrityError:
                self.db.rollback()
                # Either a concurrent enable for this user won, or the hash collided
                existing = self.get_for_user(user_id)
                if existing:
                    return existing.hash
                logger.warning(f"Share hash collision on attempt {attempt} for user {user_id}")
                continue

            logger.info(f"Share link created for user {user_id}")
            return share_hash

        logger.error(f"Could not allocate a unique share hash for user {user_id}")
        raise StoreError("Could not allocate a unique share hash")

    def disable(self, user_id: int) -> None:
        """Remove the user's share link. No-op when none exists."""
        link = self.get_for_user(user_id)
        if not link:
            return
        self.db.delete(link)
        self.db.commit()
        logger.info(f"Share link removed for user {user_id}")


class ShareResolver:
    """Resolves a public share hash to its owner's username and content."""

    def __init__(self, db: Session):
        self.db = db

    def resolve(self, share_hash: str) -> SharedBrain:
        """Look up the brain published under a share hash.

        Raises:
            NotFoundError: no link has this hash.
            DataIntegrityError: the link points at a user that does not exist.
        """
        link = self.db.query(ShareLink).filter(ShareLink.hash == share_hash).first()
        if not link:
            raise NotFoundError()

        user = self.db.query(User).filter(User.id == link.user_id).first()
        if not user:
            logger.error(f"Share link {link.id} references missing user {link.user_id}")
            raise DataIntegrityError()

        content = (
            self.db.query(Content).filter(Content.user_id == user.id).order_by(Content.id).all()
        )
        return SharedBrain(username=user.username, content=content)
