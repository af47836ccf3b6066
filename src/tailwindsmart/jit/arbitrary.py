"""Arbitrary-value ("JIT") syntax: ``w-[100px]``, ``bg-[#1da1f2]``, ``[mask-type:luminance]``.

Validation is syntax-level only: the bracketed value is never
checked for CSS correctness.
"""

from __future__ import annotations

import re
from enum import Enum

from tailwindsmart.model.result import VALID, Invalid, IssueKind, ValidationResult

__all__ = [
    "ARBITRARY_PREFIXES",
    "ArbitraryKind",
    "arbitrary_value_kind",
    "decode_value",
    "is_arbitrary",
    "parse_arbitrary",
    "parse_arbitrary_property",
    "split_arbitrary",
]

# Prefixes accepted before a bracketed value, in suggestion order.
ARBITRARY_PREFIXES: tuple[str, ...] = (
    "w", "h", "min-w", "min-h", "max-w", "max-h",
    "p", "px", "py", "pt", "pr", "pb", "pl",
    "m", "mx", "my", "mt", "mr", "mb", "ml",
    "top", "right", "bottom", "left", "inset",
    "gap", "gap-x", "gap-y",
    "text", "leading", "tracking", "rounded",
    "bg", "border",
)

_ARBITRARY_RE = re.compile(r"^([a-z-]+)-\[([^\]]+)\]")
_SHAPE_RE = re.compile(r"^!?-?[a-z][a-z0-9-]*-\[.*\]")
_PROPERTY_RE = re.compile(r"^\[([a-z-]+|--[a-zA-Z0-9_-]+):(.+)\]$")

_COLOR_RE = re.compile(r"^(#[0-9a-fA-F]{3,8}|(rgb|rgba|hsl|hsla|oklch|oklab|color)\(.*\))$")
_LENGTH_RE = re.compile(
    r"^-?(\d+\.?\d*|\.\d+)(px|rem|em|%|vh|vw|vmin|vmax|svh|lvh|dvh|svw|lvw|dvw|ch|ex|pt|pc|cm|mm|in|fr)$"
)
_NUMBER_RE = re.compile(r"^-?(\d+\.?\d*|\.\d+)$")


class ArbitraryKind(Enum):
    """Rough type of a bracketed value, used to pick the CSS property."""

    COLOR = "color"
    LENGTH = "length"
    NUMBER = "number"
    VARIABLE = "variable"
    CALC = "calc"
    URL = "url"
    OTHER = "other"


def is_arbitrary(base: str) -> bool:
    """True if *base* has ``prefix-[...]`` shape (modifiers allowed)."""
    return _SHAPE_RE.match(base) is not None


def decode_value(value: str) -> str:
    """Turn Tailwind's ``_`` space encoding back into spaces (``\\_`` stays ``_``)."""
    return value.replace("\\_", "\0").replace("_", " ").replace("\0", "_")


def split_arbitrary(remainder: str) -> str | None:
    """Return the decoded value if *remainder* is a bracketed ``[...]`` value."""
    if len(remainder) > 2 and remainder.startswith("[") and remainder.endswith("]"):
        return decode_value(remainder[1:-1])
    return None


def arbitrary_value_kind(value: str) -> ArbitraryKind:
    value = value.strip()
    if _COLOR_RE.match(value):
        return ArbitraryKind.COLOR
    if _LENGTH_RE.match(value):
        return ArbitraryKind.LENGTH
    if _NUMBER_RE.match(value):
        return ArbitraryKind.NUMBER
    if value.startswith("var("):
        return ArbitraryKind.VARIABLE
    if value.startswith(("calc(", "min(", "max(", "clamp(")):
        return ArbitraryKind.CALC
    if value.startswith("url("):
        return ArbitraryKind.URL
    return ArbitraryKind.OTHER


def parse_arbitrary_property(base: str) -> tuple[str, str] | None:
    """Split ``[property:value]`` into its parts, or ``None``."""
    match = _PROPERTY_RE.match(base)
    if match is None:
        return None
    return match.group(1), decode_value(match.group(2))


def parse_arbitrary(base: str) -> ValidationResult:
    """Validate ``prefix-[value]`` syntax for *base*.

    The prefix must be one of :data:`ARBITRARY_PREFIXES` and the value must
    not be blank. Never raises.
    """
    match = _ARBITRARY_RE.match(base)
    if match is None:
        return Invalid(
            kind=IssueKind.INVALID_ARBITRARY_SYNTAX,
            reason="Invalid arbitrary value syntax",
            class_name=base,
        )

    prefix, value = match.group(1), match.group(2)
    if prefix not in ARBITRARY_PREFIXES:
        return Invalid(
            kind=IssueKind.INVALID_ARBITRARY_PREFIX,
            reason=f"Invalid prefix '{prefix}' for arbitrary value",
            class_name=base,
            suggestions=tuple(
                p for p in ARBITRARY_PREFIXES if p.startswith(prefix) or prefix.startswith(p)
            ),
        )

    if not value.strip():
        return Invalid(
            kind=IssueKind.EMPTY_ARBITRARY_VALUE,
            reason="Arbitrary value cannot be empty",
            class_name=base,
        )
    return VALID
