"""Variant decomposition: ``md:hover:bg-red-500`` -> (["md", "hover"], "bg-red-500")."""

from __future__ import annotations

from dataclasses import dataclass

from tailwindsmart.distance import levenshtein
from tailwindsmart.model.result import VALID, Invalid, IssueKind, ValidationResult
from tailwindsmart.model.variant import POPULAR_VARIANTS, VariantKind, lookup_variant

__all__ = ["Decomposition", "decompose", "split_variants", "suggest_variants"]


@dataclass(frozen=True)
class Decomposition:
    """A raw token split into its variant chain and base utility.

    ``result`` reports unknown variants, misordered chains and empty bases;
    the split itself is always performed.
    """

    raw: str
    variants: tuple[str, ...]
    base: str
    result: ValidationResult = VALID

    @property
    def is_valid(self) -> bool:
        return self.result.is_valid


def split_variants(raw: str) -> tuple[tuple[str, ...], str]:
    """Split *raw* on ``:`` separators outside of ``[...]``.

    Every segment but the last is a variant; colons inside brackets
    (``[display:flex]``, ``[&:hover]:underline``) are part of their segment.
    """
    segments: list[str] = []
    depth = 0
    last = 0
    for index, char in enumerate(raw):
        if char == "[":
            depth += 1
        elif char == "]" and depth > 0:
            depth -= 1
        elif char == ":" and depth == 0:
            segments.append(raw[last:index])
            last = index + 1
    return tuple(segments), raw[last:]


def suggest_variants(name: str, limit: int = 5, max_distance: int = 2) -> tuple[str, ...]:
    """Popular variants that contain, are contained in, or are close to *name*."""
    key = name.lower()
    if not key:
        return ()
    matches = [
        v
        for v in POPULAR_VARIANTS
        if v in key or key in v or levenshtein(key, v) <= max_distance
    ]
    return tuple(matches[:limit])


def _check_chain(raw: str, variants: tuple[str, ...], base: str) -> ValidationResult:
    kinds: list[VariantKind] = []
    for name in variants:
        rule = lookup_variant(name)
        if rule is None:
            return Invalid(
                kind=IssueKind.INVALID_VARIANT,
                reason=f"Invalid variant '{name}'",
                class_name=raw,
                suggestions=suggest_variants(name),
            )
        kinds.append(rule.kind)

    seen_state = False
    for kind in kinds:
        if kind is VariantKind.STATE:
            seen_state = True
        elif kind is VariantKind.RESPONSIVE and seen_state:
            # Suggest the same chain with responsive variants moved to the front.
            responsive = [v for v, k in zip(variants, kinds) if k is VariantKind.RESPONSIVE]
            rest = [v for v, k in zip(variants, kinds) if k is not VariantKind.RESPONSIVE]
            return Invalid(
                kind=IssueKind.VARIANT_ORDER,
                reason="Responsive variants should come before state variants (e.g., md:hover:bg-blue-500)",
                class_name=raw,
                suggestions=(":".join(responsive + rest + [base]),),
            )
    return VALID


def decompose(raw: str) -> Decomposition:
    """Split *raw* into variants and base, and validate the variant chain.

    Never raises. Zero variants is the common case and yields ``base == raw``.
    """
    variants, base = split_variants(raw)
    if not base:
        result: ValidationResult = Invalid(
            kind=IssueKind.EMPTY_BASE,
            reason="Class has no utility after its variants",
            class_name=raw,
        )
    else:
        result = _check_chain(raw, variants, base)
    return Decomposition(raw=raw, variants=variants, base=base, result=result)
