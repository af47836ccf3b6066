"""Ordered prefix table mapping utility names to categories.

A key ending in ``-`` or ``[`` matches any utility starting with it. Any other key
matches the utility exactly or followed by ``-`` (``border`` matches
``border`` and ``border-t-2`` but not ``borderless``). The longest matching
key wins, so ``flex-col`` resolves through ``flex-`` rather than ``flex``.
"""

from __future__ import annotations

from typing import NamedTuple

from tailwindsmart.model.category import Category


class PrefixRule(NamedTuple):
    key: str
    category: Category
    group: str | None = None


def _rules(category: Category, group: str | None, *keys: str) -> list[PrefixRule]:
    return [PrefixRule(key, category, group) for key in keys]


DISPLAY_VALUES: dict[str, str] = {
    "block": "block",
    "inline-block": "inline-block",
    "inline": "inline",
    "flex": "flex",
    "inline-flex": "inline-flex",
    "table": "table",
    "inline-table": "inline-table",
    "table-row": "table-row",
    "table-cell": "table-cell",
    "grid": "grid",
    "inline-grid": "inline-grid",
    "contents": "contents",
    "flow-root": "flow-root",
    "list-item": "list-item",
    "hidden": "none",
}

POSITION_VALUES = ("static", "fixed", "absolute", "relative", "sticky")

PREFIX_RULES: list[PrefixRule] = [
    *_rules(Category.LAYOUT, None,
            "container", "columns-", "break-after-", "break-before-", "break-inside-",
            "box-decoration-", "box-", "float-", "clear-", "isolate", "isolation-",
            "object-", "overflow-", "overscroll-", "aspect-", "table-", "@container"),
    *_rules(Category.DISPLAY, "display", *DISPLAY_VALUES),
    *_rules(Category.DISPLAY, "visibility", "visible", "invisible", "collapse"),
    *_rules(Category.POSITION, "position", *POSITION_VALUES),
    *_rules(Category.POSITION, "inset",
            "inset-", "inset-x-", "inset-y-", "top-", "right-", "bottom-", "left-",
            "start-", "end-"),
    *_rules(Category.POSITION, "z-index", "z-"),
    *_rules(Category.SPACING, "padding",
            "p-", "px-", "py-", "pt-", "pr-", "pb-", "pl-", "ps-", "pe-"),
    *_rules(Category.SPACING, "margin",
            "m-", "mx-", "my-", "mt-", "mr-", "mb-", "ml-", "ms-", "me-"),
    *_rules(Category.SPACING, "gap", "gap-", "gap-x-", "gap-y-"),
    *_rules(Category.SPACING, "space", "space-x-", "space-y-"),
    *_rules(Category.SIZING, "width", "w-", "min-w-", "max-w-"),
    *_rules(Category.SIZING, "height", "h-", "min-h-", "max-h-"),
    *_rules(Category.SIZING, "size", "size-"),
    *_rules(Category.FLEXBOX, None,
            "flex-", "grow", "shrink", "basis-", "order-", "justify-", "items-",
            "content-", "self-", "place-"),
    *_rules(Category.GRID, None,
            "grid-", "col-", "row-", "auto-cols-", "auto-rows-"),
    *_rules(Category.BACKGROUND, "background", "bg-", "from-", "via-", "to-"),
    *_rules(Category.BORDER, "radius", "rounded"),
    *_rules(Category.BORDER, "border", "border"),
    *_rules(Category.BORDER, "divide", "divide"),
    *_rules(Category.TYPOGRAPHY, None,
            "text-", "font-", "tracking-", "leading-", "list-", "placeholder-",
            "indent-", "align-", "whitespace-", "break-", "hyphens-", "decoration-",
            "underline", "overline", "line-through", "no-underline", "uppercase",
            "lowercase", "capitalize", "normal-case", "italic", "not-italic",
            "truncate", "antialiased", "subpixel-antialiased", "line-clamp-",
            "content-none", "content-[",
            "ordinal", "slashed-zero", "lining-nums", "tabular-nums", "normal-nums"),
    *_rules(Category.EFFECTS, None,
            "shadow", "opacity-", "mix-blend-", "bg-blend-", "filter", "blur",
            "brightness-", "contrast-", "grayscale", "invert", "saturate-", "sepia",
            "drop-shadow", "backdrop-", "ring", "outline"),
    *_rules(Category.TRANSFORM, None,
            "transform", "scale-", "rotate-", "translate-", "skew-", "origin-"),
    *_rules(Category.TRANSITION, None,
            "transition", "duration-", "ease-", "delay-"),
    *_rules(Category.ANIMATION, None, "animate-"),
    *_rules(Category.INTERACTIVITY, None,
            "cursor-", "pointer-events-", "resize", "select-", "scroll-", "snap-",
            "touch-", "accent-", "caret-", "appearance-", "will-change-"),
    *_rules(Category.ACCESSIBILITY, None, "sr-only", "not-sr-only", "forced-color-adjust-"),
]


def match_prefix(utility: str) -> tuple[PrefixRule, str] | None:
    """Find the longest rule matching *utility*.

    Returns the rule and the remainder after the key (and its joining
    ``-`` for bare keys), or ``None`` when nothing matches.
    """
    best: PrefixRule | None = None
    remainder = ""
    for rule in PREFIX_RULES:
        key = rule.key
        if best is not None and len(key) <= len(best.key):
            continue
        if key.endswith(("-", "[")):
            if utility.startswith(key):
                best, remainder = rule, utility[len(key):]
        elif utility == key:
            best, remainder = rule, ""
        elif utility.startswith(key + "-"):
            best, remainder = rule, utility[len(key) + 1:]
    if best is None:
        return None
    return best, remainder
