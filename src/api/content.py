"""Content API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import AuthenticatedUser, get_content_service, get_current_user
from src.schemas.auth import MessageResponse
from src.schemas.content import (
    ContentCreate,
    ContentCreatedResponse,
    ContentDelete,
    ContentListResponse,
    ContentResponse,
)
from src.services.content_service import ContentService

router = APIRouter(prefix="/api/v1/content", tags=["content"])


@router.post("", response_model=ContentCreatedResponse)
async def create_content(
    content_data: ContentCreate,
    current_user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    service: Annotated[ContentService, Depends(get_content_service)],
):
    """Save a new link for the current user."""
    content = service.create(
        user_id=current_user.user_id,
        link=content_data.link,
        content_type=content_data.type,
        title=content_data.title,
        tags=content_data.tags,
    )
    return ContentCreatedResponse(
        message="Content added successfully",
        content=ContentResponse.model_validate(content),
    )


@router.get("", response_model=ContentListResponse)
async def get_content(
    current_user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    service: Annotated[ContentService, Depends(get_content_service)],
):
    """Get all content owned by the current user."""
    content = service.list_for_user(current_user.user_id)
    return ContentListResponse(content=[ContentResponse.model_validate(c) for c in content])


@router.delete("", response_model=MessageResponse)
async def delete_content(
    delete_data: ContentDelete,
    current_user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    service: Annotated[ContentService, Depends(get_content_service)],
):
    """Delete one of the current user's saved links."""
    service.delete(current_user.user_id, delete_data.content_id)
    return MessageResponse(message="Deleted")
