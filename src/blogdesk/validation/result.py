"""Failure values returned by validators and update composers."""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias


class FailureKind(StrEnum):
    """Closed set of failure categories; callers branch on these, not on text."""

    VALIDATION = "validation"
    NO_FIELDS_TO_UPDATE = "no_fields_to_update"


@dataclass(frozen=True)
class Failure:
    """A single rule violation."""

    kind: FailureKind
    message: str

    @classmethod
    def invalid(cls, message: str) -> Failure:
        """Build a validation failure carrying a user-facing message."""
        return cls(FailureKind.VALIDATION, message)

    def __str__(self) -> str:
        return self.message


# ``None`` means the payload passed every rule.
ValidationResult: TypeAlias = Failure | None
