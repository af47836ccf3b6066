"""Conflict rules.

Each rule takes the tokens of one variant-chain bucket (all sharing the
same ``variants``) and returns the conflicts it finds there.
"""

from __future__ import annotations

import re

from tailwindsmart.classify.classifier import strip_modifiers
from tailwindsmart.model.conflict import Conflict, ConflictKind
from tailwindsmart.model.token import ClassToken


# ---------------------------------------------------------------------------
# Known value sets
# ---------------------------------------------------------------------------

DISPLAY_CLASSES = frozenset({
    "block",
    "inline",
    "inline-block",
    "flex",
    "inline-flex",
    "grid",
    "inline-grid",
    "table",
    "inline-table",
    "hidden",
})

POSITION_CLASSES = frozenset({"static", "fixed", "absolute", "relative", "sticky"})

_GENERAL_PADDING_RE = re.compile(r"^p-")
_DIRECTIONAL_PADDING_RE = re.compile(r"^p[xyltrb]-")
_GENERAL_MARGIN_RE = re.compile(r"^m-")
_DIRECTIONAL_MARGIN_RE = re.compile(r"^m[xyltrb]-")


def _utility(token: ClassToken) -> str:
    return strip_modifiers(token.base)[0]


def _general_vs_directional(
    tokens: list[ClassToken],
    kind: ConflictKind,
    general: re.Pattern[str],
    directional: re.Pattern[str],
) -> list[Conflict]:
    has_general = any(general.match(_utility(t)) for t in tokens)
    has_directional = any(directional.match(_utility(t)) for t in tokens)
    if not (has_general and has_directional):
        return []
    involved = tuple(
        t for t in tokens if general.match(_utility(t)) or directional.match(_utility(t))
    )
    return [Conflict(kind=kind, tokens=involved)]


def _mutually_exclusive(
    tokens: list[ClassToken], kind: ConflictKind, values: frozenset[str]
) -> list[Conflict]:
    involved = tuple(t for t in tokens if _utility(t) in values)
    if len(involved) < 2:
        return []
    return [Conflict(kind=kind, tokens=involved)]


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def check_padding(tokens: list[ClassToken]) -> list[Conflict]:
    """``p-*`` together with any of ``px-/py-/pt-/pr-/pb-/pl-*``."""
    return _general_vs_directional(
        tokens, ConflictKind.PADDING, _GENERAL_PADDING_RE, _DIRECTIONAL_PADDING_RE
    )


def check_margin(tokens: list[ClassToken]) -> list[Conflict]:
    """``m-*`` together with any of ``mx-/my-/mt-/mr-/mb-/ml-*``."""
    return _general_vs_directional(
        tokens, ConflictKind.MARGIN, _GENERAL_MARGIN_RE, _DIRECTIONAL_MARGIN_RE
    )


def check_display(tokens: list[ClassToken]) -> list[Conflict]:
    """Two or more display utilities."""
    return _mutually_exclusive(tokens, ConflictKind.DISPLAY, DISPLAY_CLASSES)


def check_position(tokens: list[ClassToken]) -> list[Conflict]:
    """Two or more position utilities."""
    return _mutually_exclusive(tokens, ConflictKind.POSITION, POSITION_CLASSES)


def check_sizing(tokens: list[ClassToken]) -> list[Conflict]:
    """Width/height range contradictions. Always empty.

    Comparing ``min-w-*`` with ``max-w-*`` needs numeric scale values, which
    arbitrary and variable-backed sizes do not have.
    """
    return []


ALL_RULES = [
    check_padding,
    check_margin,
    check_display,
    check_position,
    check_sizing,
]
