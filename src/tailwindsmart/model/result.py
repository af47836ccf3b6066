"""Validation result model: tagged Valid / Invalid outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IssueKind(Enum):
    """Why a class string was rejected."""

    INVALID_VARIANT = "invalid_variant"
    VARIANT_ORDER = "variant_order"
    INVALID_ARBITRARY_SYNTAX = "invalid_arbitrary_syntax"
    INVALID_ARBITRARY_PREFIX = "invalid_arbitrary_prefix"
    EMPTY_ARBITRARY_VALUE = "empty_arbitrary_value"
    EMPTY_BASE = "empty_base"
    UNKNOWN_CLASS = "unknown_class"


class ValidationResult:
    """Base type for validation outcomes. Use :class:`Valid` or :class:`Invalid`."""

    @property
    def is_valid(self) -> bool:
        return isinstance(self, Valid)


@dataclass(frozen=True)
class Valid(ValidationResult):
    """The class passed every check."""

    def __str__(self) -> str:
        return "valid"


@dataclass(frozen=True)
class Invalid(ValidationResult):
    """A reported (never raised) validation failure.

    Attributes:
        kind: Which check failed.
        reason: Human-readable description of the problem.
        class_name: The class string that was checked.
        suggestions: Advisory replacements, best first. May be empty.
    """

    kind: IssueKind
    reason: str
    class_name: str = ""
    suggestions: tuple[str, ...] = ()

    def __str__(self) -> str:
        text = f"{self.class_name}: {self.reason}" if self.class_name else self.reason
        if self.suggestions:
            text += f" (did you mean: {', '.join(self.suggestions)}?)"
        return text


VALID = Valid()
