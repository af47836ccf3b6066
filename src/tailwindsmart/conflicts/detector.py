"""Conflict detector: runs every rule once per variant-chain bucket."""

from __future__ import annotations

from typing import Callable, Iterable, Union

from tailwindsmart.cache import ClassCache
from tailwindsmart.conflicts.rules import ALL_RULES
from tailwindsmart.model.conflict import Conflict
from tailwindsmart.model.token import ClassToken
from tailwindsmart.parser.classes import build_token

RuleFunc = Callable[[list[ClassToken]], list[Conflict]]


def bucket_by_variants(tokens: Iterable[ClassToken]) -> dict[tuple[str, ...], list[ClassToken]]:
    """Group tokens by identical variant chain, in first-seen order."""
    buckets: dict[tuple[str, ...], list[ClassToken]] = {}
    for token in tokens:
        buckets.setdefault(token.variants, []).append(token)
    return buckets


def _as_tokens(
    items: Iterable[Union[ClassToken, str]], cache: ClassCache | None
) -> list[ClassToken]:
    tokens: list[ClassToken] = []
    for item in items:
        token = build_token(item, cache=cache) if isinstance(item, str) else item
        if token is not None:
            tokens.append(token)
    return tokens


def detect_conflicts(
    tokens: Iterable[Union[ClassToken, str]],
    extra_rules: list[RuleFunc] | None = None,
    cache: ClassCache | None = None,
) -> list[Conflict]:
    """Find conflicts among the classes of one attribute value.

    Accepts :class:`ClassToken` objects or raw class strings. Classes under
    different variant chains never conflict (``p-4`` vs ``hover:px-2``).
    Results are ordered by bucket first appearance, then by rule order.
    """
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    conflicts: list[Conflict] = []
    for bucket in bucket_by_variants(_as_tokens(tokens, cache)).values():
        for rule in rules:
            conflicts.extend(rule(bucket))
    return conflicts
