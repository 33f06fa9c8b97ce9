"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization. Field rules
(lengths, formats, status membership) are enforced by ``blogdesk.validation``
so that the first violated rule can be reported verbatim.
"""

from .author import (
    AuthorListResponse,
    AuthorResponse,
    AuthorUpdateRequest,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
)
from .common import ApiResponse, ErrorResponse
from .post import PostCreate, PostListResponse, PostResponse, PostUpdate

__all__ = [
    "ApiResponse", "ErrorResponse",
    "AuthorListResponse", "AuthorResponse", "AuthorUpdateRequest",
    "LoginRequest", "LoginResponse", "RegisterRequest",
    "PostCreate", "PostListResponse", "PostResponse", "PostUpdate",
]
