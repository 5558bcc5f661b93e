"""Shared brain schemas."""

from pydantic import BaseModel

from src.schemas.content import ContentResponse


class ShareRequest(BaseModel):
    """Enable or disable the public share link."""

    share: bool


class ShareHashResponse(BaseModel):
    hash: str


class SharedBrainResponse(BaseModel):
    """Public, read-only view of a user's brain."""

    username: str
    content: list[ContentResponse]
