"""Static value scales: spacing, sizing, radius, font size."""

from __future__ import annotations

from fractions import Fraction


def _rem(units: float) -> str:
    value = units / 4
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return f"{text}rem"


_SPACING_STEPS = (
    "0.5", "1", "1.5", "2", "2.5", "3", "3.5", "4", "5", "6", "7", "8", "9",
    "10", "11", "12", "14", "16", "20", "24", "28", "32", "36", "40", "44",
    "48", "52", "56", "60", "64", "72", "80", "96",
)

# Tailwind spacing: one unit is 0.25rem (4px).
SPACING_SCALE: dict[str, str] = {
    "0": "0px",
    "px": "1px",
    **{step: _rem(float(step)) for step in _SPACING_STEPS},
}

_FRACTION_DENOMINATORS = (2, 3, 4, 5, 6, 12)


def _fractions() -> dict[str, str]:
    table: dict[str, str] = {}
    for denominator in _FRACTION_DENOMINATORS:
        for numerator in range(1, denominator):
            percent = float(Fraction(numerator, denominator) * 100)
            text = f"{percent:.6f}".rstrip("0").rstrip(".")
            table[f"{numerator}/{denominator}"] = f"{text}%"
    return table


FRACTIONS: dict[str, str] = _fractions()

_CONTENT_SIZES = {
    "auto": "auto",
    "full": "100%",
    "min": "min-content",
    "max": "max-content",
    "fit": "fit-content",
}

WIDTH_SCALE: dict[str, str] = {
    **SPACING_SCALE,
    **FRACTIONS,
    **_CONTENT_SIZES,
    "screen": "100vw",
    "svw": "100svw",
    "lvw": "100lvw",
    "dvw": "100dvw",
}

HEIGHT_SCALE: dict[str, str] = {
    **SPACING_SCALE,
    **FRACTIONS,
    **_CONTENT_SIZES,
    "screen": "100vh",
    "svh": "100svh",
    "lvh": "100lvh",
    "dvh": "100dvh",
}

MAX_WIDTH_SCALE: dict[str, str] = {
    **SPACING_SCALE,
    **_CONTENT_SIZES,
    "none": "none",
    "xs": "20rem",
    "sm": "24rem",
    "md": "28rem",
    "lg": "32rem",
    "xl": "36rem",
    "2xl": "42rem",
    "3xl": "48rem",
    "4xl": "56rem",
    "5xl": "64rem",
    "6xl": "72rem",
    "7xl": "80rem",
    "prose": "65ch",
    "screen-sm": "640px",
    "screen-md": "768px",
    "screen-lg": "1024px",
    "screen-xl": "1280px",
    "screen-2xl": "1536px",
}

INSET_SCALE: dict[str, str] = {
    **SPACING_SCALE,
    **FRACTIONS,
    "auto": "auto",
    "full": "100%",
}

# Keyed by the suffix after ``rounded`` / ``rounded-<side>``; "" is the bare form.
RADIUS_SCALE: dict[str, str] = {
    "none": "0px",
    "sm": "0.125rem",
    "": "0.25rem",
    "md": "0.375rem",
    "lg": "0.5rem",
    "xl": "0.75rem",
    "2xl": "1rem",
    "3xl": "1.5rem",
    "full": "9999px",
}

BORDER_WIDTHS: dict[str, str] = {
    "": "1px",
    "0": "0px",
    "2": "2px",
    "4": "4px",
    "8": "8px",
}

FONT_SIZES: dict[str, str] = {
    "xs": "0.75rem",
    "sm": "0.875rem",
    "base": "1rem",
    "lg": "1.125rem",
    "xl": "1.25rem",
    "2xl": "1.5rem",
    "3xl": "1.875rem",
    "4xl": "2.25rem",
    "5xl": "3rem",
    "6xl": "3.75rem",
    "7xl": "4.5rem",
    "8xl": "6rem",
    "9xl": "8rem",
}
