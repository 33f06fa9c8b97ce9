"""Post-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    """Schema for creating a new post.

    Missing fields default to empty values so that the validator can report
    which rule was violated first.
    """

    title: str = Field("", description="Post title (3-200 characters)")
    content: str = Field("", description="Post body (at least 10 characters)")
    slug: str = Field("", description="Globally unique URL slug (3-200 characters)")
    author_id: int = Field(0, description="Identifier of the writing author")
    status: str = Field("", description="draft, published or archived; defaults to draft")


class PostUpdate(BaseModel):
    """Schema for partially updating a post.

    ``None`` (omitted or null) leaves a field unchanged; any string is applied.
    """

    title: str | None = Field(None, description="New title")
    content: str | None = Field(None, description="New body")
    slug: str | None = Field(None, description="New slug")
    status: str | None = Field(None, description="New status")


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: int
    title: str
    content: str
    slug: str
    author_id: int
    status: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PostListResponse(BaseModel):
    """One page of posts plus pagination metadata."""

    posts: list[PostResponse]
    total_count: int
    page: int
    page_size: int
    total_pages: int
