"""
scorer.py
---------

Lexicon lookup and accumulation.

Negation handling is an all-or-nothing switch: when the phrase contains
any negation word the whole phrase scores zero with no matched words.
There is no attempt to flip only the word that follows the negation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Sequence, Tuple


@dataclass(frozen=True)
class ScoreResult:
    """Raw scorer output before the comparative score is attached."""

    score: int
    words: Tuple[str, ...] = ()
    positive: Tuple[str, ...] = ()
    negative: Tuple[str, ...] = ()


def score_tokens(
    tokens: Sequence[str],
    lexicon: Mapping[str, int],
    negations: Sequence[str] = (),
) -> ScoreResult:
    """Sum the valence of every token found in ``lexicon``.

    Each occurrence counts, so a repeated word contributes its valence
    (and shows up in ``words``) once per occurrence. Tokens missing from
    the lexicon are ignored.

    Args:
        tokens: Output of :func:`valence.tokenizer.tokenize`.
        lexicon: Merged word to valence mapping.
        negations: Negation tokens found in the phrase. Any entry here
            suppresses scoring entirely.
    """
    if negations:
        return ScoreResult(score=0)

    score = 0
    words: List[str] = []
    positive: List[str] = []
    negative: List[str] = []

    for token in tokens:
        if token not in lexicon:
            continue
        valence = lexicon[token]
        words.append(token)
        if valence > 0:
            positive.append(token)
        elif valence < 0:
            negative.append(token)
        score += valence

    return ScoreResult(
        score=score,
        words=tuple(words),
        positive=tuple(positive),
        negative=tuple(negative),
    )


__all__ = ["ScoreResult", "score_tokens"]
