"""Content service for a user's saved links."""

import logging

from sqlalchemy.orm import Session, joinedload

from src.models.content import Content
from src.models.enums import ContentType

logger = logging.getLogger(__name__)


class ContentService:
    """Owner-scoped create/list/delete for saved content."""

    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        user_id: int,
        link: str,
        content_type: ContentType,
        title: str,
        tags: list[str] | None = None,
    ) -> Content:
        """Save a new link for the user."""
        content = Content(
            user_id=user_id,
            link=link,
            type=ContentType(content_type).value,
            title=title,
            tags=list(tags or []),
        )
        self.db.add(content)
        self.db.commit()
        self.db.refresh(content)
        logger.info(f"Content {content.id} created for user {user_id}")
        return content

    def list_for_user(self, user_id: int) -> list[Content]:
        """Get every content row owned by the user, oldest first."""
        return (
            self.db.query(Content)
            .options(joinedload(Content.user))
            .filter(Content.user_id == user_id)
            .order_by(Content.id)
            .all()
        )

    def delete(self, user_id: int, content_id: int) -> int:
        """Delete a content row if the user owns it.

        Returns the number of rows removed (0 or 1).
        """
        deleted = (
            self.db.query(Content)
            .filter(Content.id == content_id, Content.user_id == user_id)
            .delete()
        )
        self.db.commit()
        if deleted:
            logger.info(f"Content {content_id} deleted by user {user_id}")
        return deleted
