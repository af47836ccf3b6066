"""Edit-distance helpers for best-effort suggestions."""

from __future__ import annotations

from typing import Iterable


def levenshtein(a: str, b: str) -> int:
    """Classic insert/delete/substitute edit distance between *a* and *b*."""
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost))
        previous = current
    return previous[-1]


def closest(
    word: str,
    candidates: Iterable[str],
    max_distance: int = 3,
    limit: int = 5,
) -> tuple[str, ...]:
    """Candidates within *max_distance* of *word*, nearest first.

    Ties keep the candidates' iteration order, so pass a sorted collection
    for reproducible output.
    """
    scored = []
    for candidate in candidates:
        # Length difference is a lower bound on the distance.
        if abs(len(candidate) - len(word)) > max_distance:
            continue
        dist = levenshtein(word, candidate)
        if dist <= max_distance:
            scored.append((dist, candidate))
    scored.sort(key=lambda pair: pair[0])
    return tuple(candidate for _, candidate in scored[:limit])
