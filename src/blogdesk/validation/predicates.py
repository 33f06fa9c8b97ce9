"""Syntactic field checks shared by the post and author validators."""
from __future__ import annotations

import re

_USERNAME_RE = re.compile(r"^[a-zA-Z0-9_]+$", re.ASCII)
_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$")
_URL_RE = re.compile(r"^https?://[^\s/$.?#].[^\s]*$")


def is_valid_username(value: str) -> bool:
    """Return True if ``value`` is non-empty ASCII letters, digits and underscores."""
    return _USERNAME_RE.fullmatch(value) is not None


def is_valid_email(value: str) -> bool:
    """Return True for ``local@domain.tld`` shaped addresses.

    A practical subset, not RFC 5322: the final label needs two or more letters.
    """
    return _EMAIL_RE.fullmatch(value) is not None


def is_valid_url(value: str) -> bool:
    """Return True for http(s) URLs with a host part and no whitespace."""
    return _URL_RE.fullmatch(value) is not None
