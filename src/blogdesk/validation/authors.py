"""Validation rules for registration, login and profile updates."""
from __future__ import annotations

from blogdesk.schemas.author import AuthorUpdateRequest, LoginRequest, RegisterRequest

from .predicates import is_valid_email, is_valid_url, is_valid_username
from .result import Failure, ValidationResult

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 8
BIO_MAX_LENGTH = 500
# Column widths on the authors table.
EMAIL_MAX_LENGTH = 100
AVATAR_URL_MAX_LENGTH = 255


def _name_length_ok(name: str) -> bool:
    return NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH


def _check_bio(bio: str) -> ValidationResult:
    if len(bio) > BIO_MAX_LENGTH:
        return Failure.invalid("bio cannot exceed 500 characters")
    return None


def _check_email(email: str) -> ValidationResult:
    if not is_valid_email(email):
        return Failure.invalid("invalid email format")
    if len(email) > EMAIL_MAX_LENGTH:
        return Failure.invalid("email cannot exceed 100 characters")
    return None


def _check_avatar_url(avatar_url: str) -> ValidationResult:
    if not avatar_url:
        return None
    if not is_valid_url(avatar_url):
        return Failure.invalid("invalid avatar URL format")
    if len(avatar_url) > AVATAR_URL_MAX_LENGTH:
        return Failure.invalid("avatar URL cannot exceed 255 characters")
    return None


def validate_register(req: RegisterRequest) -> ValidationResult:
    """Return the first violated registration rule, or ``None``.

    Order: username, email, password, first name, last name, bio, avatar URL.
    """
    if not req.username:
        return Failure.invalid("username is required")
    if not USERNAME_MIN_LENGTH <= len(req.username) <= USERNAME_MAX_LENGTH:
        return Failure.invalid("username must be between 3 and 50 characters")
    if not is_valid_username(req.username):
        return Failure.invalid("username can only contain letters, numbers, and underscores")

    if not req.email:
        return Failure.invalid("email is required")
    if failure := _check_email(req.email):
        return failure

    if not req.password:
        return Failure.invalid("password is required")
    if len(req.password) < PASSWORD_MIN_LENGTH:
        return Failure.invalid("password must be at least 8 characters long")

    if not req.first_name:
        return Failure.invalid("first name is required")
    if not _name_length_ok(req.first_name):
        return Failure.invalid("first name must be between 2 and 50 characters")

    if not req.last_name:
        return Failure.invalid("last name is required")
    if not _name_length_ok(req.last_name):
        return Failure.invalid("last name must be between 2 and 50 characters")

    return _check_bio(req.bio) or _check_avatar_url(req.avatar_url)


def validate_login(req: LoginRequest) -> ValidationResult:
    """Require an identifier and a password; strength is not re-checked here."""
    if not req.username:
        return Failure.invalid("username or email is required")
    if not req.password:
        return Failure.invalid("password is required")
    return None


def validate_author_update(req: AuthorUpdateRequest) -> ValidationResult:
    """Check the fields present in a profile update.

    ``bio`` is length-checked whenever supplied, including ``""``. An empty
    ``avatar_url`` is a request to clear it and skips the URL check.
    """
    if req.email is not None and (failure := _check_email(req.email)):
        return failure
    if req.first_name is not None and not _name_length_ok(req.first_name):
        return Failure.invalid("first name must be between 2 and 50 characters")
    if req.last_name is not None and not _name_length_ok(req.last_name):
        return Failure.invalid("last name must be between 2 and 50 characters")
    if req.bio is not None and (failure := _check_bio(req.bio)):
        return failure
    if req.avatar_url is not None:
        return _check_avatar_url(req.avatar_url)
    return None
