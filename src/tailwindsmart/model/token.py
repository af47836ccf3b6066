"""Token model: one utility-class occurrence inside a class attribute."""

from __future__ import annotations

from dataclasses import dataclass

from tailwindsmart.model.category import Category, Classification, CssProperty


@dataclass(frozen=True)
class TokenSpan:
    """A raw token and its ``[start, end)`` offsets in the source string."""

    text: str
    start: int
    end: int


@dataclass(frozen=True)
class ClassToken:
    """A decomposed and classified utility class.

    ``raw`` is the text exactly as written, so it can replace the source
    without loss. ``raw == ":".join(variants + (base,))`` always holds.
    """

    raw: str
    variants: tuple[str, ...]
    base: str
    is_arbitrary: bool
    classification: Classification

    @property
    def category(self) -> Category:
        return self.classification.category

    @property
    def css(self) -> CssProperty | None:
        return self.classification.css

    @property
    def variant_chain(self) -> str:
        """Bucket key: the variants joined as written, empty for none."""
        return ":".join(self.variants)

    def __str__(self) -> str:
        return self.raw
