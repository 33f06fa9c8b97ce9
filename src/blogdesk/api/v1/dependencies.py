"""Shared API dependencies for sessions, services and authentication."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from blogdesk.db.session import get_db
from blogdesk.models import Author
from blogdesk.services import AuthorService, PostService, UnauthorizedError

from .responses import http_error

# HTTP Bearer scheme for JWT authentication; missing headers are handled below.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_post_service(db: SessionDep) -> PostService:
    """Return a post service bound to the request session."""
    return PostService(db)


def get_author_service(db: SessionDep) -> AuthorService:
    """Return an author service bound to the request session."""
    return AuthorService(db)


PostServiceDep = Annotated[PostService, Depends(get_post_service)]
AuthorServiceDep = Annotated[AuthorService, Depends(get_author_service)]


def get_current_author(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    authors: AuthorServiceDep,
) -> Author:
    """Get the current authenticated author from the bearer token.

    Args:
        credentials: HTTP Bearer token credentials, if supplied
        authors: Author service used to resolve the token

    Returns:
        Author object for the authenticated caller

    Raises:
        HTTPException: If the token is missing or invalid, or the author is gone
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"message": "Authentication required", "error": "missing bearer token"},
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return authors.authenticate(credentials.credentials)
    except UnauthorizedError as err:
        raise http_error(err) from err


# Type alias for current author dependency
CurrentAuthorDep = Annotated[Author, Depends(get_current_author)]
