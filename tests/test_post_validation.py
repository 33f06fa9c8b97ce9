# tests/test_post_validation.py
"""Tests for post create and update validation."""

import pytest

from blogdesk.schemas.post import PostCreate, PostUpdate
from blogdesk.validation import FailureKind, validate_post_create, validate_post_update


def _valid_create(**overrides) -> PostCreate:
    fields = {
        "title": "A fine title",
        "content": "Some content that is long enough.",
        "slug": "a-fine-title",
        "author_id": 1,
        "status": "draft",
    }
    fields.update(overrides)
    return PostCreate(**fields)


class TestValidatePostCreate:
    """Create payloads are checked in a fixed order."""

    def test_valid_payload_passes(self) -> None:
        """A complete payload produces no failure."""
        assert validate_post_create(_valid_create()) is None

    def test_empty_status_defaults_to_draft(self) -> None:
        """An omitted status is accepted and the request is left untouched."""
        req = _valid_create(status="")
        assert validate_post_create(req) is None
        assert req.status == ""

    @pytest.mark.parametrize("status", ["draft", "published", "archived"])
    def test_known_statuses_pass(self, status: str) -> None:
        """Every lifecycle status is accepted."""
        assert validate_post_create(_valid_create(status=status)) is None

    @pytest.mark.parametrize(
        ("overrides", "message"),
        [
            ({"title": ""}, "title is required"),
            ({"title": "ab"}, "title must be between 3 and 200 characters"),
            ({"title": "x" * 201}, "title must be between 3 and 200 characters"),
            ({"content": ""}, "content is required"),
            ({"content": "too short"}, "content must be at least 10 characters"),
            ({"slug": ""}, "slug is required"),
            ({"slug": "ab"}, "slug must be between 3 and 200 characters"),
            ({"slug": "s" * 201}, "slug must be between 3 and 200 characters"),
            ({"author_id": 0}, "valid author ID is required"),
            ({"author_id": -3}, "valid author ID is required"),
            ({"status": "bogus"}, "invalid status: bogus"),
        ],
    )
    def test_rule_violations(self, overrides: dict, message: str) -> None:
        """Each broken rule reports its own message."""
        failure = validate_post_create(_valid_create(**overrides))
        assert failure is not None
        assert failure.kind is FailureKind.VALIDATION
        assert failure.message == message

    def test_boundary_lengths_pass(self) -> None:
        """Title lengths 3 and 200 and content length 10 are allowed."""
        assert validate_post_create(_valid_create(title="abc", content="x" * 10)) is None
        assert validate_post_create(_valid_create(title="x" * 200)) is None

    def test_first_violation_wins(self) -> None:
        """With every field missing, the title rule is reported."""
        failure = validate_post_create(PostCreate())
        assert failure is not None
        assert failure.message == "title is required"


class TestValidatePostUpdate:
    """Update payloads only check the fields that are present."""

    def test_empty_update_is_not_a_validation_error(self) -> None:
        """Absent fields never fail validation."""
        assert validate_post_update(PostUpdate()) is None

    def test_valid_partial_update_passes(self) -> None:
        """A single valid field passes."""
        assert validate_post_update(PostUpdate(status="published")) is None

    @pytest.mark.parametrize(
        ("fields", "message"),
        [
            ({"title": ""}, "title must be between 3 and 200 characters"),
            ({"title": "ab"}, "title must be between 3 and 200 characters"),
            ({"content": "short"}, "content must be at least 10 characters"),
            ({"slug": ""}, "slug cannot be empty"),
            ({"slug": "ab"}, "slug must be between 3 and 200 characters"),
            ({"slug": "s" * 201}, "slug must be between 3 and 200 characters"),
            ({"status": "bogus"}, "invalid status: bogus"),
            ({"status": ""}, "invalid status: "),
        ],
    )
    def test_present_fields_are_checked(self, fields: dict, message: str) -> None:
        """Present values, including empty strings, are validated."""
        failure = validate_post_update(PostUpdate(**fields))
        assert failure is not None
        assert failure.message == message

    def test_checks_run_title_first(self) -> None:
        """Title is reported before status when both are invalid."""
        failure = validate_post_update(PostUpdate(title="x", status="bogus"))
        assert failure is not None
        assert failure.message.startswith("title")

    def test_update_accepts_what_create_accepts(self) -> None:
        """Fields from a valid create payload are also a valid update."""
        create = _valid_create(status="published")
        assert validate_post_create(create) is None
        update = PostUpdate(
            title=create.title,
            content=create.content,
            slug=create.slug,
            status=create.status,
        )
        assert validate_post_update(update) is None


@pytest.mark.parametrize(("length", "ok"), [(2, False), (3, True), (200, True), (201, False)])
def test_slug_length_bounds(length: int, ok: bool) -> None:
    """Slugs must be 3 to 200 characters on create and update alike."""
    slug = "s" * length
    create_failure = validate_post_create(_valid_create(slug=slug))
    update_failure = validate_post_update(PostUpdate(slug=slug))

    if ok:
        assert create_failure is None
        assert update_failure is None
    else:
        assert create_failure is not None
        assert create_failure.message == "slug must be between 3 and 200 characters"
        assert update_failure is not None
        assert update_failure.message == "slug must be between 3 and 200 characters"
