"""
Valence - AFINN-style lexicon sentiment analysis.

Usage:
    from valence import analyze

    result = analyze("Cats are stupid.")
    result.score        # -2
    result.comparative  # -0.666...
    result.negative     # ("stupid",)

    analyze("Katzen sind dumm", lang="de")
    analyze("hodl", overrides={"hodl": 2})
"""

from .exceptions import (
    InvalidOption,
    LexiconDataError,
    SentimentError,
    UnsupportedCategory,
    UnsupportedLanguage,
)
from .lexicon import LanguagePack, Lexicon, LexiconRegistry, get_registry, reset_registry
from .negation import detect_negations
from .scorer import ScoreResult, score_tokens
from .sentiment import (
    AnalysisOptions,
    AnalysisResult,
    SentimentService,
    analyze,
    analyze_async,
    assemble_result,
    parse_options,
)
from .tokenizer import tokenize


__all__ = [
    # Pipeline
    "analyze",
    "analyze_async",
    "assemble_result",
    "detect_negations",
    "parse_options",
    "score_tokens",
    "tokenize",
    "SentimentService",

    # Models
    "AnalysisOptions",
    "AnalysisResult",
    "ScoreResult",

    # Lexicons
    "LanguagePack",
    "Lexicon",
    "LexiconRegistry",
    "get_registry",
    "reset_registry",

    # Exceptions
    "SentimentError",
    "UnsupportedLanguage",
    "UnsupportedCategory",
    "InvalidOption",
    "LexiconDataError",
]


__version__ = "1.0.0"
