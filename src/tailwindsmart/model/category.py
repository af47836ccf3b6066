"""Category model: semantic utility categories and resolved CSS."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Category(Enum):
    """Semantic category of a utility class.

    Each member carries ``(display_name, sort_rank, color)``. The color is a
    presentation hint only.
    """

    LAYOUT = ("Layout", 10, "#3b82f6")
    POSITION = ("Position", 20, "#6366f1")
    DISPLAY = ("Display", 30, "#0ea5e9")
    SPACING = ("Spacing", 40, "#ec4899")
    SIZING = ("Sizing", 50, "#6366f1")
    FLEXBOX = ("Flexbox", 60, "#14b8a6")
    GRID = ("Grid", 70, "#f97316")
    BACKGROUND = ("Background", 80, "#10b981")
    BORDER = ("Border", 90, "#f59e0b")
    TYPOGRAPHY = ("Typography", 100, "#ef4444")
    EFFECTS = ("Effects", 110, "#8b5cf6")
    TRANSFORM = ("Transform", 120, "#4b5563")
    TRANSITION = ("Transition", 130, "#a78bfa")
    ANIMATION = ("Animation", 140, "#f43f5e")
    INTERACTIVITY = ("Interactivity", 150, "#06b6d4")
    ACCESSIBILITY = ("Accessibility", 160, "#64748b")
    OTHER = ("Other", 170, "#6b7280")

    def __init__(self, display_name: str, rank: int, color: str) -> None:
        self.display_name = display_name
        self.rank = rank
        self.color = color


@dataclass(frozen=True)
class CssProperty:
    """One or more CSS properties sharing a single resolved value."""

    properties: tuple[str, ...]
    value: str

    @property
    def declaration(self) -> str:
        """Render as a CSS declaration list, e.g. ``padding-left: 1rem; padding-right: 1rem``."""
        return "; ".join(f"{name}: {self.value}" for name in self.properties)

    def __str__(self) -> str:
        return self.declaration


@dataclass(frozen=True)
class Classification:
    """Result of classifying a base utility string.

    ``group`` narrows the category where useful (``"padding"`` and
    ``"margin"`` inside SPACING, for instance). ``css`` is only set when a
    concrete declaration is known.
    """

    category: Category
    group: str | None = None
    css: CssProperty | None = None


UNCLASSIFIED = Classification(category=Category.OTHER)
