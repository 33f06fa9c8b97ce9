"""Service-level operations for author accounts and authentication."""
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from blogdesk.core import security
from blogdesk.models.author import Author
from blogdesk.repositories.author_repo import AuthorRepository
from blogdesk.schemas.author import (
    AuthorListResponse,
    AuthorResponse,
    AuthorUpdateRequest,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
)
from blogdesk.validation import (
    build_author_update,
    validate_author_update,
    validate_login,
    validate_register,
)
from blogdesk.validation.result import Failure

from .errors import (
    AccountInactiveError,
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    UnauthorizedError,
    error_for_failure,
)
from .pagination import QueryInt, normalize_window

logger = logging.getLogger(__name__)


class AuthorService:
    """Registration, login and profile management."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.repo = AuthorRepository(session)

    def _ensure_unique(self, *, username: str | None, email: str | None, author_id: int | None = None) -> None:
        if username is not None:
            existing = self.repo.get_by_username(username)
            if existing is not None and existing.id != author_id:
                raise ConflictError("username already exists")
        if email is not None:
            existing = self.repo.get_by_email(email)
            if existing is not None and existing.id != author_id:
                raise ConflictError("email already exists")

    def register(self, req: RegisterRequest) -> Author:
        """Create a new account with a hashed password.

        Raises:
            ValidationFailedError: If a registration rule is violated.
            ConflictError: If the username or email is taken.
        """
        failure = validate_register(req)
        if failure is not None:
            raise error_for_failure(failure)

        self._ensure_unique(username=req.username, email=req.email)

        try:
            author = self.repo.create(
                username=req.username,
                email=req.email,
                password_hash=security.hash_password(req.password),
                first_name=req.first_name,
                last_name=req.last_name,
                bio=req.bio,
                avatar_url=req.avatar_url,
            )
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise ConflictError("username or email already exists") from exc

        logger.info("Author registered: %d (%s)", author.id, author.username)
        return author

    def login(self, req: LoginRequest) -> LoginResponse:
        """Check credentials and issue a bearer token.

        Identifiers containing ``@`` are looked up by email, others by username.

        Raises:
            ValidationFailedError: If the identifier or password is missing.
            InvalidCredentialsError: If no account matches or the password is wrong.
            AccountInactiveError: If the account has been deactivated.
        """
        failure = validate_login(req)
        if failure is not None:
            raise error_for_failure(failure)

        if "@" in req.username:
            author = self.repo.get_by_email(req.username)
        else:
            author = self.repo.get_by_username(req.username)

        if author is None:
            logger.info("Login rejected: unknown identifier")
            raise InvalidCredentialsError("invalid username or password")
        if not author.is_active:
            logger.info("Login rejected: account %d is inactive", author.id)
            raise AccountInactiveError("account is inactive")
        if not security.verify_password(req.password, author.password_hash):
            logger.info("Login rejected: bad password for account %d", author.id)
            raise InvalidCredentialsError("invalid username or password")

        token = security.create_access_token(author.id, author.username)
        return LoginResponse(token=token, author=AuthorResponse.model_validate(author))

    def authenticate(self, token: str) -> Author:
        """Resolve a bearer token to an active author.

        Raises:
            UnauthorizedError: If the token is invalid or the author is gone or inactive.
        """
        try:
            author_id = security.decode_access_token(token)
        except security.TokenError as exc:
            raise UnauthorizedError(str(exc)) from exc

        author = self.repo.get_by_id(author_id)
        if author is None or not author.is_active:
            raise UnauthorizedError("author not found")
        return author

    def get_profile(self, author_id: int) -> Author:
        """Return an author or raise :class:`NotFoundError`."""
        author = self.repo.get_by_id(author_id)
        if author is None:
            raise NotFoundError("author not found")
        return author

    def update_profile(self, author_id: int, req: AuthorUpdateRequest) -> Author:
        """Apply a partial profile update.

        Raises:
            ValidationFailedError: If a supplied field is invalid.
            NothingToUpdateError: If no field was supplied.
            NotFoundError: If the author does not exist.
            ConflictError: If the new email belongs to another account.
        """
        failure = validate_author_update(req)
        if failure is not None:
            raise error_for_failure(failure)
        plan = build_author_update(author_id, req)
        if isinstance(plan, Failure):
            raise error_for_failure(plan)

        self._ensure_unique(username=None, email=req.email, author_id=author_id)

        try:
            author = self.repo.apply_update(plan)
            if author is None:
                raise NotFoundError("author not found")
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise ConflictError("email already exists") from exc

        logger.info("Author profile updated: %d (%s)", author.id, ", ".join(plan.columns))
        return author

    def list_authors(self, limit: QueryInt, offset: QueryInt) -> AuthorListResponse:
        """Return a window of active authors, newest first."""
        limit, offset = normalize_window(limit, offset)
        authors = self.repo.list_active(limit=limit, offset=offset)
        return AuthorListResponse(
            authors=[AuthorResponse.model_validate(author) for author in authors],
            limit=limit,
            offset=offset,
        )

    def delete_account(self, author_id: int) -> None:
        """Delete an account or raise :class:`NotFoundError`."""
        if not self.repo.delete(author_id):
            raise NotFoundError("author not found")
        self.session.commit()
        logger.info("Author account deleted: %d", author_id)
