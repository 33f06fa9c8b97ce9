"""Request validation and partial-update composition for posts and authors.

Everything in this package is pure: functions take a request model and return
a value. Failures are returned as :class:`Failure` instances, never raised.
"""

from .authors import validate_author_update, validate_login, validate_register
from .posts import validate_post_create, validate_post_update
from .predicates import is_valid_email, is_valid_url, is_valid_username
from .result import Failure, FailureKind, ValidationResult
from .status import POST_STATUSES, PostStatus
from .updates import UpdatePlan, build_author_update, build_post_update

__all__ = [
    "Failure", "FailureKind", "ValidationResult",
    "POST_STATUSES", "PostStatus",
    "UpdatePlan", "build_author_update", "build_post_update",
    "is_valid_email", "is_valid_url", "is_valid_username",
    "validate_author_update", "validate_login", "validate_register",
    "validate_post_create", "validate_post_update",
]
