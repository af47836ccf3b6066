"""Assemble :class:`ClassToken` objects from a class-attribute string."""

from __future__ import annotations

import logging

from tailwindsmart.cache import ClassCache
from tailwindsmart.classify.classifier import classify, strip_modifiers
from tailwindsmart.jit.arbitrary import is_arbitrary
from tailwindsmart.model.token import ClassToken
from tailwindsmart.parser.tokenizer import tokenize
from tailwindsmart.parser.variants import decompose

__all__ = ["build_token", "parse_class_string"]

logger = logging.getLogger(__name__)


def build_token(raw: str, cache: ClassCache | None = None) -> ClassToken | None:
    """Decompose and classify one raw token; ``None`` if its base is empty."""
    parts = decompose(raw)
    if not parts.base:
        return None
    return ClassToken(
        raw=raw,
        variants=parts.variants,
        base=parts.base,
        is_arbitrary=is_arbitrary(strip_modifiers(parts.base)[0]),
        classification=classify(parts.base, cache=cache),
    )


def parse_class_string(source: str, cache: ClassCache | None = None) -> list[ClassToken]:
    """Tokenize, decompose and classify *source*, dropping tokens with no base."""
    tokens: list[ClassToken] = []
    for raw in tokenize(source):
        token = build_token(raw, cache=cache)
        if token is None:
            logger.debug("Dropping %r: no utility after variants", raw)
            continue
        tokens.append(token)
    return tokens
