"""
tokenizer.py
------------

Turns a raw phrase into the token sequence the scorer works on.

Normalization is deliberately blunt: everything outside the language's
alphabet (plus hyphen and space) is dropped, hyphens become word
separators, the text is lower-cased and split on single spaces. Runs of
spaces are *not* collapsed, so they produce empty-string tokens. Those
never match a lexicon entry but they do count toward the token total
used for the comparative score.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import List, Optional, Pattern

DEFAULT_ALPHABET = "a-zA-Z"


@lru_cache(maxsize=32)
def _strip_pattern(alphabet: str) -> Pattern[str]:
    return re.compile(f"[^{alphabet}\\- ]+")


def tokenize(phrase: Optional[str], alphabet: str = DEFAULT_ALPHABET) -> List[str]:
    """Split ``phrase`` into lower-cased word tokens.

    Args:
        phrase: Raw input text. ``None`` is treated as an empty string.
        alphabet: Regex character-class body listing the letters that
            survive normalization, e.g. ``"a-zA-Z"``.

    Returns:
        Tokens in left-to-right order. Never empty: a phrase without any
        letters yields ``[""]``.
    """
    if phrase is None:
        phrase = ""

    cleaned = _strip_pattern(alphabet).sub("", phrase)
    return cleaned.replace("-", " ").lower().split(" ")


__all__ = ["DEFAULT_ALPHABET", "tokenize"]
