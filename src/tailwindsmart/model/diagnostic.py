"""Diagnostic model: lint findings about a class attribute."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tailwindsmart.model.conflict import Conflict
from tailwindsmart.model.result import Invalid, IssueKind


class Severity(Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"


@dataclass(frozen=True)
class Diagnostic:
    """One lint finding.

    Attributes:
        rule: ``IssueKind`` value for validation failures, ``conflict_<kind>``
            for conflicts.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        class_name: The offending class, for single-class findings.
        classes: Every class involved, for conflicts.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    class_name: str | None = None
    classes: tuple[str, ...] = ()
    fix: str | None = None

    @classmethod
    def from_invalid(cls, raw: str, result: Invalid) -> Diagnostic:
        # An unknown class may only be missing from an incomplete universe.
        severity = Severity.WARNING if result.kind is IssueKind.UNKNOWN_CLASS else Severity.ERROR
        fix = None
        if result.suggestions:
            fix = f"Did you mean: {', '.join(result.suggestions)}"
        return cls(
            rule=result.kind.value,
            severity=severity,
            message=result.reason,
            class_name=raw,
            fix=fix,
        )

    @classmethod
    def from_conflict(cls, conflict: Conflict) -> Diagnostic:
        return cls(
            rule=f"conflict_{conflict.kind.name.lower()}",
            severity=Severity.WARNING,
            message=conflict.message,
            classes=tuple(conflict.class_names),
            fix=conflict.suggestion,
        )

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        if self.class_name:
            where = f" [class={self.class_name}]"
        elif self.classes:
            where = f" [classes={' '.join(self.classes)}]"
        else:
            where = ""
        return f"{self.severity.value}{where}: {self.message}"
