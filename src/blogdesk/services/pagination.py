"""Lenient parsing and clamping of list query parameters."""
from __future__ import annotations

from blogdesk.core.settings import settings

DEFAULT_PAGE = 1
DEFAULT_LIST_LIMIT = 10
MAX_LIST_LIMIT = 100

QueryInt = int | str | None


def parse_int(value: QueryInt, default: int) -> int:
    """Return ``value`` as an int, or ``default`` if it is missing or unparsable."""
    if value is None:
        return default
    if isinstance(value, int):
        return value
    # Plain decimal digits only; int() would also accept "1_0" and padding.
    if not value.lstrip("+-").isdecimal():
        return default
    try:
        return int(value)
    except ValueError:
        return default


def normalize_pagination(page: QueryInt, page_size: QueryInt) -> tuple[int, int]:
    """Clamp page-based pagination input.

    Unparsable or non-positive pages become 1; page sizes that are unparsable
    or outside ``1..MAX_PAGE_SIZE`` fall back to the default.
    """
    page = parse_int(page, DEFAULT_PAGE)
    page_size = parse_int(page_size, settings.default_page_size)
    if page <= 0:
        page = DEFAULT_PAGE
    if page_size <= 0 or page_size > settings.max_page_size:
        page_size = settings.default_page_size
    return page, page_size


def normalize_window(limit: QueryInt, offset: QueryInt) -> tuple[int, int]:
    """Clamp ``limit`` to 1..100 (default 10) and ``offset`` to >= 0 (default 0)."""
    limit = parse_int(limit, DEFAULT_LIST_LIMIT)
    offset = parse_int(offset, 0)
    if limit <= 0 or limit > MAX_LIST_LIMIT:
        limit = DEFAULT_LIST_LIMIT
    if offset < 0:
        offset = 0
    return limit, offset
