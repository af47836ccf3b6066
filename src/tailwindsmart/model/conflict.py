"""Conflict model: semantic contradictions between classes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tailwindsmart.model.token import ClassToken


class ConflictKind(Enum):
    """Kinds of class conflict. Each carries ``(message, suggestion)``."""

    PADDING = (
        "General padding class conflicts with specific padding classes",
        "Remove general padding class or specific padding classes",
    )
    MARGIN = (
        "General margin class conflicts with specific margin classes",
        "Remove general margin class or specific margin classes",
    )
    SIZING = (
        "Sizing classes contradict each other",
        "Keep only one width or height constraint",
    )
    DISPLAY = (
        "Multiple display classes conflict with each other",
        "Use only one display class",
    )
    POSITION = (
        "Multiple position classes conflict with each other",
        "Use only one position class",
    )

    def __init__(self, message: str, suggestion: str) -> None:
        self.message = message
        self.suggestion = suggestion


@dataclass(frozen=True)
class Conflict:
    """A conflict found among classes sharing one variant chain."""

    kind: ConflictKind
    tokens: tuple[ClassToken, ...]

    @property
    def message(self) -> str:
        return self.kind.message

    @property
    def suggestion(self) -> str:
        return self.kind.suggestion

    @property
    def class_names(self) -> list[str]:
        return [t.raw for t in self.tokens]

    def __str__(self) -> str:
        return f"{self.kind.name}: {self.message} [{' '.join(self.class_names)}]"
