"""Enums for model fields."""

from enum import Enum


class ContentType(str, Enum):
    """Kinds of external content a user can save."""

    YOUTUBE = "youtube"
    TWITTER = "twitter"
