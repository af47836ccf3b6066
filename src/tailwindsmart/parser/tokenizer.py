"""Whitespace tokenizer for class-attribute strings.

Splits on runs of whitespace, except inside ``[...]`` so that arbitrary
values containing spaces stay in one token::

    grid-cols-[repeat(auto-fit, minmax(250px,1fr))] gap-4
"""

from __future__ import annotations

import re

from tailwindsmart.model.token import TokenSpan

__all__ = ["tokenize", "tokenize_spans"]

_WORD_RE = re.compile(r"\S+")


def _plain_spans(source: str, offset: int) -> list[TokenSpan]:
    return [
        TokenSpan(text=m.group(0), start=offset + m.start(), end=offset + m.end())
        for m in _WORD_RE.finditer(source)
    ]


def tokenize_spans(source: str) -> list[TokenSpan]:
    """Split *source* into tokens with their source offsets.

    A ``[`` opens a nesting level and ``]`` closes one; whitespace only
    splits at level zero. A stray ``]`` never drives the level negative. If
    the string ends inside an unclosed bracket, the unfinished token is
    split on plain whitespace instead of swallowing the rest of the string.
    """
    spans: list[TokenSpan] = []
    depth = 0
    start: int | None = None
    for index, char in enumerate(source):
        if char.isspace() and depth == 0:
            if start is not None:
                spans.append(TokenSpan(text=source[start:index], start=start, end=index))
                start = None
            continue
        if start is None:
            start = index
        if char == "[":
            depth += 1
        elif char == "]" and depth > 0:
            depth -= 1

    if start is not None:
        tail = source[start:]
        if depth > 0:
            spans.extend(_plain_spans(tail, start))
        else:
            spans.append(TokenSpan(text=tail, start=start, end=len(source)))
    return spans


def tokenize(source: str) -> list[str]:
    """Split a class-attribute string into raw class tokens in source order."""
    return [span.text for span in tokenize_spans(source)]
