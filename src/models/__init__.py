"""SQLAlchemy models."""

from src.models.content import Content
from src.models.enums import ContentType
from src.models.share_link import ShareLink
from src.models.user import User

__all__ = [
    "User",
    "Content",
    "ContentType",
    "ShareLink",
]
