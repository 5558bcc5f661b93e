"""Share link model."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class ShareLink(Base, TimestampMixin):
    """Public share hash for a user's brain. At most one per user."""

    __tablename__ = "share_links"

    id = Column(Integer, primary_key=True, index=True)
    # Unique at the storage level so concurrent enables cannot create two links
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False, index=True)
    hash = Column(String(64), unique=True, nullable=False, index=True)

    # Relationships
    user = relationship("User")
