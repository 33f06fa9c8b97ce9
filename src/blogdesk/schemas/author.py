"""Author-related Pydantic schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _normalize_identity(value: object) -> object:
    if isinstance(value, str):
        return value.strip().lower()
    return value


def _normalize_name(value: object) -> object:
    if isinstance(value, str):
        return value.strip()
    return value


Identity = Annotated[str, BeforeValidator(_normalize_identity)]
Name = Annotated[str, BeforeValidator(_normalize_name)]
OptionalIdentity = Annotated[str | None, BeforeValidator(_normalize_identity)]
OptionalName = Annotated[str | None, BeforeValidator(_normalize_name)]


class RegisterRequest(BaseModel):
    """Schema for account registration."""

    username: Identity = Field("", description="3-50 letters, digits or underscores")
    email: Identity = Field("", description="Contact email address")
    password: str = Field("", description="Plain-text password (at least 8 characters)")
    first_name: Name = Field("", description="Given name (2-50 characters)")
    last_name: Name = Field("", description="Family name (2-50 characters)")
    bio: str = Field("", description="Optional biography (up to 500 characters)")
    avatar_url: str = Field("", description="Optional http(s) avatar URL")


class LoginRequest(BaseModel):
    """Schema for login submissions."""

    username: Identity = Field("", description="Username or email address")
    password: str = Field("", description="Plain-text password")


class AuthorUpdateRequest(BaseModel):
    """Schema for partially updating the caller's profile.

    ``None`` (omitted or null) leaves a field unchanged. An empty string clears
    ``bio`` or ``avatar_url``; for the other fields it is validated like any value.
    """

    email: OptionalIdentity = Field(None, description="New email address")
    first_name: OptionalName = Field(None, description="New given name")
    last_name: OptionalName = Field(None, description="New family name")
    bio: str | None = Field(None, description="New biography, empty string clears it")
    avatar_url: str | None = Field(None, description="New avatar URL, empty string clears it")


class AuthorResponse(BaseModel):
    """Public author projection (never includes the password hash)."""

    id: int
    username: str
    email: str
    first_name: str
    last_name: str
    bio: str
    avatar_url: str
    is_active: bool
    is_verified: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class LoginResponse(BaseModel):
    """Response returned after successful login."""

    token: str = Field(..., description="Bearer token for authenticated calls")
    token_type: str = Field("bearer", description="Token type")
    author: AuthorResponse


class AuthorListResponse(BaseModel):
    """A window of active authors."""

    authors: list[AuthorResponse]
    limit: int
    offset: int
