"""Content model."""

from sqlalchemy import JSON, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class Content(Base, TimestampMixin):
    """A saved link to external content (YouTube video, tweet)."""

    __tablename__ = "contents"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(500), nullable=False)
    link = Column(String(2048), nullable=False)
    type = Column(String(20), nullable=False)  # "youtube" | "twitter"
    tags = Column(JSON, nullable=False, default=list)

    # Relationships
    user = relationship("User", backref="contents")
