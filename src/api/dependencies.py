"""FastAPI dependencies for authentication and services."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from src.config import Settings, get_settings
from src.database import get_db
from src.errors import AuthError
from src.services.auth import TokenService
from src.services.content_service import ContentService
from src.services.share_service import ShareLinkRegistry, ShareResolver

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity resolved from a verified bearer token."""

    user_id: int


def get_token_service(settings: Annotated[Settings, Depends(get_settings)]) -> TokenService:
    """Get token service configured from settings."""
    return TokenService.from_settings(settings)


def get_current_user(
    token_service: Annotated[TokenService, Depends(get_token_service)],
    authorization: Annotated[str | None, Header()] = None,
) -> AuthenticatedUser:
    """Resolve the caller from the Authorization header.

    Accepts both ``Bearer <token>`` and a bare ``<token>``.
    """
    if not authorization or not authorization.strip():
        raise AuthError("Authorization header missing")

    token = authorization
    if token.startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX) :]
    user_id = token_service.verify(token.strip())
    return AuthenticatedUser(user_id=user_id)


def get_content_service(
    db: Annotated[Session, Depends(get_db)],
) -> ContentService:
    """Get content service with dependencies."""
    return ContentService(db)


def get_share_registry(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ShareLinkRegistry:
    """Get share link registry configured from settings."""
    return ShareLinkRegistry(
        db,
        hash_length=settings.share_hash_length,
        max_attempts=settings.share_hash_max_attempts,
    )


def get_share_resolver(
    db: Annotated[Session, Depends(get_db)],
) -> ShareResolver:
    return ShareResolver(db)
