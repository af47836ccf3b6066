"""Class validator: checks single classes and lints whole attribute values."""

from __future__ import annotations

import dataclasses
import logging
from typing import AbstractSet

from tailwindsmart.cache import ClassCache
from tailwindsmart.classify.classifier import strip_modifiers
from tailwindsmart.config import TailwindSmartConfig
from tailwindsmart.conflicts.detector import detect_conflicts
from tailwindsmart.distance import closest
from tailwindsmart.errors import TailwindSmartError
from tailwindsmart.jit.arbitrary import parse_arbitrary, parse_arbitrary_property
from tailwindsmart.model.diagnostic import Diagnostic
from tailwindsmart.model.result import VALID, Invalid, IssueKind, ValidationResult
from tailwindsmart.parser.classes import parse_class_string
from tailwindsmart.parser.tokenizer import tokenize
from tailwindsmart.parser.variants import decompose

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = TailwindSmartConfig()


class LintError(TailwindSmartError):
    """Raised when linting produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Lint failed with {len(messages)} error(s): " + "; ".join(messages)
        )


def _check_arbitrary(utility: str) -> ValidationResult:
    if utility.startswith("["):
        if parse_arbitrary_property(utility) is not None:
            return VALID
        return Invalid(
            kind=IssueKind.INVALID_ARBITRARY_SYNTAX,
            reason="Invalid arbitrary property syntax. Use format: [property:value]",
        )
    return parse_arbitrary(utility)


def _suggest_classes(
    base: str,
    universe: AbstractSet[str],
    cache: ClassCache | None,
    config: TailwindSmartConfig,
) -> tuple[str, ...]:
    if len(base) < config.min_suggestion_length:
        return ()
    if cache is not None:
        cached = cache.get_suggestions(base)
        if cached is not None:
            return cached
    suggestions = closest(
        base,
        sorted(universe),
        max_distance=config.max_class_distance,
        limit=config.max_suggestions,
    )
    if cache is not None:
        cache.put_suggestions(base, suggestions)
    return suggestions


def validate_class(
    class_name: str,
    universe: AbstractSet[str] | None = None,
    cache: ClassCache | None = None,
    config: TailwindSmartConfig | None = None,
) -> ValidationResult:
    """Validate one class, variants included.

    Checks run in order: variant chain (unknown names, responsive after
    state, empty base), arbitrary-value syntax, then, only when *universe*
    is given, whether the base exists. A cache must only ever be used with
    one universe. Never raises.
    """
    config = config or _DEFAULT_CONFIG
    clean = class_name.strip()
    if not clean:
        return VALID
    if cache is not None:
        cached = cache.get_validation(clean)
        if cached is not None:
            return cached

    parts = decompose(clean)
    utility = strip_modifiers(parts.base)[0]
    if not parts.is_valid:
        result = parts.result
    elif "[" in utility and "]" in utility:
        result = _check_arbitrary(utility)
        if isinstance(result, Invalid):
            result = dataclasses.replace(result, class_name=clean)
    elif universe is not None and not {clean, parts.base, utility} & universe:
        result = Invalid(
            kind=IssueKind.UNKNOWN_CLASS,
            reason=f"Class '{parts.base}' does not exist in Tailwind CSS",
            class_name=clean,
            suggestions=_suggest_classes(utility, universe, cache, config),
        )
    else:
        result = VALID

    if isinstance(result, Invalid):
        logger.debug("Invalid class %r: %s", clean, result.reason)
    if cache is not None:
        cache.put_validation(clean, result)
    return result


def validate_classes(
    class_string: str,
    universe: AbstractSet[str] | None = None,
    cache: ClassCache | None = None,
    config: TailwindSmartConfig | None = None,
) -> list[tuple[str, ValidationResult]]:
    """Validate every class in an attribute value, in source order."""
    return [
        (raw, validate_class(raw, universe=universe, cache=cache, config=config))
        for raw in tokenize(class_string)
    ]


def lint(
    class_string: str,
    universe: AbstractSet[str] | None = None,
    cache: ClassCache | None = None,
    config: TailwindSmartConfig | None = None,
) -> list[Diagnostic]:
    """Lint an attribute value.

    Returns per-class validation diagnostics in source order, followed by
    one WARNING per conflict.
    """
    diagnostics: list[Diagnostic] = []
    for raw, result in validate_classes(class_string, universe, cache, config):
        if isinstance(result, Invalid):
            diagnostics.append(Diagnostic.from_invalid(raw, result))

    for conflict in detect_conflicts(parse_class_string(class_string, cache=cache)):
        diagnostics.append(Diagnostic.from_conflict(conflict))
    return diagnostics


def lint_or_raise(
    class_string: str,
    universe: AbstractSet[str] | None = None,
    cache: ClassCache | None = None,
    config: TailwindSmartConfig | None = None,
) -> list[Diagnostic]:
    """Lint; raises :class:`LintError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings) when no errors are found.
    """
    diagnostics = lint(class_string, universe, cache, config)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise LintError(errors)
    return diagnostics
