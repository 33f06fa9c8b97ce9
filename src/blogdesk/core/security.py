"""Password hashing and bearer-token helpers."""
from __future__ import annotations

from datetime import timedelta
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from blogdesk.core.settings import settings
from blogdesk.db.time import utcnow

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class TokenError(ValueError):
    """Raised when a bearer token cannot be decoded or lacks required claims."""


def hash_password(password: str) -> str:
    """Return a bcrypt hash of the supplied plain-text password."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain-text password against a stored hash."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Malformed or unknown hash format.
        return False


def create_access_token(
    author_id: int,
    username: str,
    expires_delta: timedelta | None = None,
) -> str:
    """Issue a signed JWT for an author.

    Args:
        author_id: Primary key of the authenticated author.
        username: Username stored as an informational claim.
        expires_delta: Optional override for the token lifetime.

    Returns:
        Encoded JWT string.
    """
    issued_at = utcnow()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    claims: dict[str, Any] = {
        "sub": str(author_id),
        "author_id": author_id,
        "username": username,
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }
    return jwt.encode(claims, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> int:
    """Return the author id carried by a bearer token.

    Raises:
        TokenError: If the token is invalid, expired or missing the author claim.
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as err:
        raise TokenError("Could not validate credentials") from err

    author_id = payload.get("author_id")
    if not isinstance(author_id, int) or author_id <= 0:
        raise TokenError("Invalid token claims")
    return author_id
