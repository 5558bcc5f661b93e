"""Shared brain API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import (
    AuthenticatedUser,
    get_current_user,
    get_share_registry,
    get_share_resolver,
)
from src.schemas.auth import MessageResponse
from src.schemas.brain import ShareHashResponse, SharedBrainResponse, ShareRequest
from src.schemas.content import ContentResponse
from src.services.share_service import ShareLinkRegistry, ShareResolver

router = APIRouter(prefix="/api/v1/brain", tags=["brain"])


@router.post("/share", response_model=ShareHashResponse | MessageResponse)
async def share_brain(
    share_data: ShareRequest,
    current_user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    registry: Annotated[ShareLinkRegistry, Depends(get_share_registry)],
):
    """Enable (returns the hash) or disable the current user's public link."""
    share_hash = registry.set_sharing(current_user.user_id, share_data.share)
    if share_hash is None:
        return MessageResponse(message="Removed link")
    return ShareHashResponse(hash=share_hash)


@router.get("/{share_link}", response_model=SharedBrainResponse)
async def get_shared_brain(
    share_link: str,
    resolver: Annotated[ShareResolver, Depends(get_share_resolver)],
):
    """Public view of the brain behind a share hash. No authentication."""
    brain = resolver.resolve(share_link)
    return SharedBrainResponse(
        username=brain.username,
        content=[ContentResponse.model_validate(c) for c in brain.content],
    )
