"""Negation word detection."""

from __future__ import annotations

from typing import AbstractSet, Iterable, List


def detect_negations(tokens: Iterable[str], negations: AbstractSet[str]) -> List[str]:
    """Return every token that appears in ``negations``.

    Duplicates are kept and the original token order is preserved, so
    ``"not not good"`` reports ``["not", "not"]``.
    """
    if not negations:
        return []
    return [token for token in tokens if token in negations]


__all__ = ["detect_negations"]
