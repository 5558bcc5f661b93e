"""Content schemas."""

from pydantic import BaseModel, ConfigDict, Field

from src.models.enums import ContentType

# Largest id a 64-bit integer primary key can hold
MAX_ROW_ID = 2**63 - 1


class ContentCreate(BaseModel):
    """Save a new link."""

    link: str = Field(..., min_length=1, max_length=2048)
    type: ContentType
    title: str = Field(..., min_length=1, max_length=500)
    tags: list[str] = Field(default_factory=list, max_length=50)


class ContentDelete(BaseModel):
    """Delete a saved link."""

    model_config = ConfigDict(populate_by_name=True)

    content_id: int = Field(..., alias="contentId", ge=1, le=MAX_ROW_ID)


class ContentOwner(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str


class ContentResponse(BaseModel):
    """Content response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    link: str
    type: ContentType
    tags: list[str]
    user_id: int = Field(..., serialization_alias="userId")
    user: ContentOwner | None = None


class ContentCreatedResponse(BaseModel):
    message: str
    content: ContentResponse


class ContentListResponse(BaseModel):
    content: list[ContentResponse]
