"""Variant model: the static variant rule table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class VariantKind(Enum):
    RESPONSIVE = "responsive"
    STATE = "state"
    OTHER = "other"


@dataclass(frozen=True)
class VariantRule:
    name: str
    kind: VariantKind
    rank: int


def _rules(kind: VariantKind, ranked: dict[str, int]) -> dict[str, VariantRule]:
    return {name: VariantRule(name, kind, rank) for name, rank in ranked.items()}


# Responsive ranks double as sort priorities; they must stay strictly
# increasing with breakpoint size.
RESPONSIVE_RULES = _rules(
    VariantKind.RESPONSIVE,
    {"sm": 400, "md": 401, "lg": 402, "xl": 403, "2xl": 404},
)

STATE_RULES = _rules(
    VariantKind.STATE,
    {
        "focus": 360,
        "focus-within": 361,
        "focus-visible": 362,
        "hover": 370,
        "visited": 371,
        "checked": 372,
        "required": 373,
        "invalid": 374,
        "first": 375,
        "last": 376,
        "odd": 377,
        "even": 378,
        "active": 380,
        "enabled": 385,
        "disabled": 390,
        "group-hover": 391,
        "group-focus": 392,
        "peer": 393,
        "peer-checked": 394,
        "peer-focus": 395,
        "peer-hover": 396,
    },
)

OTHER_RULES = _rules(
    VariantKind.OTHER,
    {
        "dark": 300,
        "motion-safe": 310,
        "motion-reduce": 311,
        "landscape": 320,
        "portrait": 321,
        "print": 322,
        "rtl": 330,
        "ltr": 331,
        "before": 340,
        "after": 341,
        "placeholder": 342,
        "selection": 343,
        "marker": 344,
        "file": 345,
        "first-letter": 346,
        "first-line": 347,
        "data": 350,
    },
)

VARIANT_RULES: dict[str, VariantRule] = {**RESPONSIVE_RULES, **STATE_RULES, **OTHER_RULES}

# Shown when an unknown variant has no closer match.
POPULAR_VARIANTS = (
    "hover",
    "focus",
    "active",
    "sm",
    "md",
    "lg",
    "xl",
    "2xl",
    "group-hover",
    "peer",
    "dark",
    "disabled",
)


def lookup_variant(name: str) -> VariantRule | None:
    """Return the rule for *name*, accepting ``data-*`` and bracketed variants."""
    key = name.lower()
    rule = VARIANT_RULES.get(key)
    if rule is not None:
        return rule
    if key.startswith("data-") and len(key) > len("data-"):
        return VariantRule(name, VariantKind.OTHER, VARIANT_RULES["data"].rank)
    if len(key) > 2 and key.startswith("[") and key.endswith("]"):
        return VariantRule(name, VariantKind.OTHER, 355)
    return None
