"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import MessageResponse, TokenResponse, UserSignin, UserSignup
from src.schemas.brain import ShareHashResponse, SharedBrainResponse, ShareRequest
from src.schemas.content import (
    ContentCreate,
    ContentCreatedResponse,
    ContentDelete,
    ContentListResponse,
    ContentOwner,
    ContentResponse,
)

__all__ = [
    "UserSignup",
    "UserSignin",
    "TokenResponse",
    "MessageResponse",
    "ContentCreate",
    "ContentDelete",
    "ContentOwner",
    "ContentResponse",
    "ContentCreatedResponse",
    "ContentListResponse",
    "ShareRequest",
    "ShareHashResponse",
    "SharedBrainResponse",
]
