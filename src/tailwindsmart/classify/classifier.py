"""Category classifier: base utility -> (Category, optional CSS declaration).

Lookup is table driven: :func:`~tailwindsmart.classify.tables.match_prefix`
picks the category, then a per-group resolver turns the remainder into a
concrete value using the static scales. Unknown utilities are ``OTHER``.
"""

from __future__ import annotations

import logging
from typing import Callable

from tailwindsmart.cache import ClassCache
from tailwindsmart.classify.palette import lookup_color, with_alpha
from tailwindsmart.classify.scales import (
    BORDER_WIDTHS,
    FONT_SIZES,
    HEIGHT_SCALE,
    INSET_SCALE,
    MAX_WIDTH_SCALE,
    RADIUS_SCALE,
    SPACING_SCALE,
    WIDTH_SCALE,
)
from tailwindsmart.classify.tables import DISPLAY_VALUES, PrefixRule, match_prefix
from tailwindsmart.jit.arbitrary import (
    ArbitraryKind,
    arbitrary_value_kind,
    parse_arbitrary_property,
    split_arbitrary,
)
from tailwindsmart.model.category import UNCLASSIFIED, Category, Classification, CssProperty

__all__ = ["classify", "resolve_color", "strip_modifiers"]

logger = logging.getLogger(__name__)

Resolver = Callable[[str, str], "CssProperty | None"]


# ---------------------------------------------------------------------------
# Property names by utility stem
# ---------------------------------------------------------------------------

_BOX_SIDES: dict[str, tuple[str, ...]] = {
    "": ("",),
    "x": ("-left", "-right"),
    "y": ("-top", "-bottom"),
    "t": ("-top",),
    "r": ("-right",),
    "b": ("-bottom",),
    "l": ("-left",),
    "s": ("-inline-start",),
    "e": ("-inline-end",),
}

_SPACING_PROPS: dict[str, tuple[str, ...]] = {
    **{f"p{side}": tuple(f"padding{s}" for s in suffixes) for side, suffixes in _BOX_SIDES.items()},
    **{f"m{side}": tuple(f"margin{s}" for s in suffixes) for side, suffixes in _BOX_SIDES.items()},
    "gap": ("gap",),
    "gap-x": ("column-gap",),
    "gap-y": ("row-gap",),
}

_INSET_PROPS: dict[str, tuple[str, ...]] = {
    "inset": ("inset",),
    "inset-x": ("left", "right"),
    "inset-y": ("top", "bottom"),
    "top": ("top",),
    "right": ("right",),
    "bottom": ("bottom",),
    "left": ("left",),
    "start": ("inset-inline-start",),
    "end": ("inset-inline-end",),
}

_SIZING_PROPS: dict[str, tuple[tuple[str, ...], dict[str, str]]] = {
    "w": (("width",), WIDTH_SCALE),
    "min-w": (("min-width",), WIDTH_SCALE),
    "max-w": (("max-width",), MAX_WIDTH_SCALE),
    "h": (("height",), HEIGHT_SCALE),
    "min-h": (("min-height",), HEIGHT_SCALE),
    "max-h": (("max-height",), HEIGHT_SCALE),
    "size": (("width", "height"), WIDTH_SCALE),
}

_RADIUS_CORNERS: dict[str, tuple[str, ...]] = {
    "t": ("top-left", "top-right"),
    "r": ("top-right", "bottom-right"),
    "b": ("bottom-right", "bottom-left"),
    "l": ("top-left", "bottom-left"),
    "tl": ("top-left",),
    "tr": ("top-right",),
    "br": ("bottom-right",),
    "bl": ("bottom-left",),
    "s": ("start-start", "end-start"),
    "e": ("start-end", "end-end"),
    "ss": ("start-start",),
    "se": ("start-end",),
    "es": ("end-start",),
    "ee": ("end-end",),
}

_BORDER_STYLES = ("solid", "dashed", "dotted", "double", "hidden", "none")

_TEXT_ALIGN = ("left", "center", "right", "justify", "start", "end")
_TEXT_OVERFLOW = {"ellipsis": "ellipsis", "clip": "clip"}
_TEXT_WRAP = ("wrap", "nowrap", "balance", "pretty")

_FONT_WEIGHTS: dict[str, str] = {
    "thin": "100",
    "extralight": "200",
    "light": "300",
    "normal": "400",
    "medium": "500",
    "semibold": "600",
    "bold": "700",
    "extrabold": "800",
    "black": "900",
}

_BACKGROUND_KEYWORDS: dict[str, tuple[str, str]] = {
    "fixed": ("background-attachment", "fixed"),
    "local": ("background-attachment", "local"),
    "scroll": ("background-attachment", "scroll"),
    "auto": ("background-size", "auto"),
    "cover": ("background-size", "cover"),
    "contain": ("background-size", "contain"),
    "center": ("background-position", "center"),
    "top": ("background-position", "top"),
    "bottom": ("background-position", "bottom"),
    "left": ("background-position", "left"),
    "right": ("background-position", "right"),
    "repeat": ("background-repeat", "repeat"),
    "no-repeat": ("background-repeat", "no-repeat"),
    "repeat-x": ("background-repeat", "repeat-x"),
    "repeat-y": ("background-repeat", "repeat-y"),
    "repeat-round": ("background-repeat", "round"),
    "repeat-space": ("background-repeat", "space"),
    "none": ("background-image", "none"),
}

# bg-* families that are never colors; no variable fallback for these.
_BACKGROUND_NON_COLOR = ("clip-", "origin-", "gradient-", "blend-", "opacity-", "left-", "right-")

_GRADIENT_STOPS = {"from": "--tw-gradient-from", "via": "--tw-gradient-via", "to": "--tw-gradient-to"}

_VISIBILITY = {"visible": "visible", "invisible": "hidden", "collapse": "collapse"}


# ---------------------------------------------------------------------------
# Value helpers
# ---------------------------------------------------------------------------


def _variable(token: str) -> str | None:
    return f"var(--{token})" if token else None


def resolve_color(token: str) -> str | None:
    """Resolve a palette token with an optional ``/alpha`` modifier."""
    name, _, alpha = token.partition("/")
    color = lookup_color(name)
    if color is None or not alpha:
        return color
    return with_alpha(color, alpha) or color


def _color_or_variable(token: str) -> str | None:
    color = resolve_color(token)
    if color is not None:
        return color
    return _variable(token.partition("/")[0])


def _scale_value(remainder: str, scale: dict[str, str], fallback: bool = True) -> str | None:
    arbitrary = split_arbitrary(remainder)
    if arbitrary is not None:
        return arbitrary
    if remainder in scale:
        return scale[remainder]
    return _variable(remainder) if fallback else None


def _stem(rule: PrefixRule) -> str:
    return rule.key.rstrip("-")


# ---------------------------------------------------------------------------
# Resolvers, keyed by rule group
# ---------------------------------------------------------------------------


def _resolve_spacing(stem: str, remainder: str) -> CssProperty | None:
    props = _SPACING_PROPS.get(stem)
    if props is None or not remainder:
        return None
    scale = SPACING_SCALE
    if stem.startswith("m"):
        scale = {**SPACING_SCALE, "auto": "auto"}
    value = _scale_value(remainder, scale)
    return CssProperty(props, value) if value else None


def _resolve_inset(stem: str, remainder: str) -> CssProperty | None:
    props = _INSET_PROPS.get(stem)
    if props is None or not remainder:
        return None
    value = _scale_value(remainder, INSET_SCALE, fallback=False)
    return CssProperty(props, value) if value else None


def _resolve_z_index(stem: str, remainder: str) -> CssProperty | None:
    value = split_arbitrary(remainder)
    if value is None and (remainder.isdigit() or remainder == "auto"):
        value = remainder
    return CssProperty(("z-index",), value) if value else None


def _resolve_sizing(stem: str, remainder: str) -> CssProperty | None:
    entry = _SIZING_PROPS.get(stem)
    if entry is None or not remainder:
        return None
    props, scale = entry
    value = _scale_value(remainder, scale)
    return CssProperty(props, value) if value else None


def _resolve_background(stem: str, remainder: str) -> CssProperty | None:
    if stem in _GRADIENT_STOPS:
        color = _color_or_variable(remainder)
        return CssProperty((_GRADIENT_STOPS[stem],), color) if color else None

    arbitrary = split_arbitrary(remainder)
    if arbitrary is not None:
        kind = arbitrary_value_kind(arbitrary)
        prop = "background-image" if kind is ArbitraryKind.URL else "background-color"
        return CssProperty((prop,), arbitrary)
    if remainder in _BACKGROUND_KEYWORDS:
        prop, value = _BACKGROUND_KEYWORDS[remainder]
        return CssProperty((prop,), value)
    if not remainder or remainder.startswith(_BACKGROUND_NON_COLOR):
        return None
    color = _color_or_variable(remainder)
    return CssProperty(("background-color",), color) if color else None


def _resolve_radius(stem: str, remainder: str) -> CssProperty | None:
    corner, _, size = remainder.partition("-")
    if corner in _RADIUS_CORNERS:
        props = tuple(f"border-{c}-radius" for c in _RADIUS_CORNERS[corner])
    else:
        props, size = ("border-radius",), remainder
    value = _scale_value(size, RADIUS_SCALE, fallback=False)
    return CssProperty(props, value) if value else None


def _resolve_border(stem: str, remainder: str) -> CssProperty | None:
    side, _, rest = remainder.partition("-")
    if side in _BOX_SIDES and side:
        suffixes = _BOX_SIDES[side]
    else:
        suffixes, rest = ("",), remainder

    arbitrary = split_arbitrary(rest)
    if arbitrary is not None:
        is_width = arbitrary_value_kind(arbitrary) in (ArbitraryKind.LENGTH, ArbitraryKind.NUMBER)
        field = "width" if is_width else "color"
        return CssProperty(tuple(f"border{s}-{field}" for s in suffixes), arbitrary)
    if rest in BORDER_WIDTHS:
        return CssProperty(tuple(f"border{s}-width" for s in suffixes), BORDER_WIDTHS[rest])
    if suffixes == ("",) and rest in _BORDER_STYLES:
        return CssProperty(("border-style",), rest)
    if suffixes == ("",) and rest in ("collapse", "separate"):
        return CssProperty(("border-collapse",), rest)
    if rest.startswith(("opacity-", "spacing-")):
        return None
    color = _color_or_variable(rest)
    return CssProperty(tuple(f"border{s}-color" for s in suffixes), color) if color else None


def _resolve_typography(stem: str, remainder: str) -> CssProperty | None:
    if stem == "font":
        weight = _FONT_WEIGHTS.get(remainder)
        return CssProperty(("font-weight",), weight) if weight else None
    if stem != "text" or not remainder:
        return None

    arbitrary = split_arbitrary(remainder)
    if arbitrary is not None:
        is_size = arbitrary_value_kind(arbitrary) in (ArbitraryKind.LENGTH, ArbitraryKind.CALC)
        return CssProperty(("font-size" if is_size else "color",), arbitrary)
    size, _, _ = remainder.partition("/")
    if size in FONT_SIZES:
        return CssProperty(("font-size",), FONT_SIZES[size])
    if remainder in _TEXT_ALIGN:
        return CssProperty(("text-align",), remainder)
    if remainder in _TEXT_OVERFLOW:
        return CssProperty(("text-overflow",), _TEXT_OVERFLOW[remainder])
    if remainder in _TEXT_WRAP:
        return CssProperty(("text-wrap",), remainder)
    if remainder.startswith("opacity-"):
        return None
    color = _color_or_variable(remainder)
    return CssProperty(("color",), color) if color else None


def _resolve_display(stem: str, remainder: str) -> CssProperty | None:
    if stem in DISPLAY_VALUES and not remainder:
        return CssProperty(("display",), DISPLAY_VALUES[stem])
    return None


def _resolve_visibility(stem: str, remainder: str) -> CssProperty | None:
    if stem in _VISIBILITY and not remainder:
        return CssProperty(("visibility",), _VISIBILITY[stem])
    return None


def _resolve_position(stem: str, remainder: str) -> CssProperty | None:
    return None if remainder else CssProperty(("position",), stem)


_RESOLVERS: dict[str | None, Resolver] = {
    "padding": _resolve_spacing,
    "margin": _resolve_spacing,
    "gap": _resolve_spacing,
    "inset": _resolve_inset,
    "z-index": _resolve_z_index,
    "width": _resolve_sizing,
    "height": _resolve_sizing,
    "size": _resolve_sizing,
    "background": _resolve_background,
    "radius": _resolve_radius,
    "border": _resolve_border,
    "display": _resolve_display,
    "visibility": _resolve_visibility,
    "position": _resolve_position,
}


def _negate(css: CssProperty) -> CssProperty:
    value = css.value
    if value in ("0px", "auto") or value.startswith("-"):
        return css
    if value.startswith(("var(", "calc(")):
        return CssProperty(css.properties, f"calc({value} * -1)")
    return CssProperty(css.properties, f"-{value}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def strip_modifiers(base: str) -> tuple[str, bool, bool]:
    """Remove ``!`` (important, either end) and a leading ``-`` (negative).

    Returns ``(utility, important, negative)``.
    """
    important = False
    if base.startswith("!"):
        base, important = base[1:], True
    elif base.endswith("!"):
        base, important = base[:-1], True
    negative = False
    if base.startswith("-"):
        base, negative = base[1:], True
    return base, important, negative


def _classify(base: str) -> Classification:
    utility, _, negative = strip_modifiers(base)
    if not utility:
        return UNCLASSIFIED
    # Utility names are case-insensitive; bracketed values keep their case.
    head, bracket, tail = utility.partition("[")
    utility = head.lower() + bracket + tail

    prop = parse_arbitrary_property(utility)
    if prop is not None:
        name, value = prop
        return Classification(Category.OTHER, "arbitrary-property", CssProperty((name,), value))

    matched = match_prefix(utility)
    if matched is None:
        return UNCLASSIFIED
    rule, remainder = matched

    resolver = _RESOLVERS.get(rule.group)
    if resolver is None and rule.category is Category.TYPOGRAPHY:
        resolver = _resolve_typography
    css = resolver(_stem(rule), remainder) if resolver else None
    if css is not None and negative:
        css = _negate(css)
    return Classification(rule.category, rule.group, css)


def classify(base: str, cache: ClassCache | None = None) -> Classification:
    """Classify a base utility (variants already removed).

    ``bg-red-500`` -> ``Classification(BACKGROUND, "background",
    CssProperty(("background-color",), "#ef4444"))``. Unmatched input is
    ``OTHER`` with no CSS; this never raises.
    """
    if cache is not None:
        cached = cache.get_classification(base)
        if cached is not None:
            return cached
    result = _classify(base)
    logger.debug("classify %r -> %s", base, result.category.display_name)
    if cache is not None:
        cache.put_classification(base, result)
    return result
