"""Canonical class ordering.

Every class gets a priority: its category rank, or the breakpoint rank
(400-404) when any of its variants is responsive. Sorting is stable, so
classes with equal priority keep their relative order and sorting an
already sorted string is a no-op.
"""

from __future__ import annotations

from tailwindsmart.cache import ClassCache
from tailwindsmart.classify.classifier import classify
from tailwindsmart.model.variant import VariantKind, lookup_variant
from tailwindsmart.parser.tokenizer import tokenize
from tailwindsmart.parser.variants import split_variants

__all__ = ["group_by_category", "priority", "sort_classes", "sort_tokens"]


def priority(raw: str, cache: ClassCache | None = None) -> int:
    """Sort priority for one raw class token.

    The last responsive variant in the chain decides, so ``sm:md:flex``
    sorts with ``md``.
    """
    variants, base = split_variants(raw)
    rank = classify(base, cache=cache).category.rank
    for name in variants:
        rule = lookup_variant(name)
        if rule is not None and rule.kind is VariantKind.RESPONSIVE:
            rank = rule.rank
    return rank


def sort_tokens(tokens: list[str], cache: ClassCache | None = None) -> list[str]:
    """Stable-sort raw class tokens by :func:`priority`."""
    return sorted(tokens, key=lambda raw: priority(raw, cache=cache))


def sort_classes(class_string: str, cache: ClassCache | None = None) -> str:
    """Return *class_string* in canonical order, joined by single spaces.

    Leading, trailing and repeated whitespace is not preserved; a blank
    input sorts to ``""``. No class is added, dropped or altered.
    """
    return " ".join(sort_tokens(tokenize(class_string), cache=cache))


def group_by_category(class_string: str, cache: ClassCache | None = None) -> dict[str, list[str]]:
    """Group raw classes by the display name of their base's category.

    Groups and the classes inside them appear in first-seen order.
    """
    groups: dict[str, list[str]] = {}
    for raw in tokenize(class_string):
        _, base = split_variants(raw)
        name = classify(base, cache=cache).category.display_name
        groups.setdefault(name, []).append(raw)
    return groups
