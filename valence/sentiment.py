"""
sentiment.py
------------

Public entry point for AFINN-style sentiment analysis.

A phrase is tokenized, checked for negation words and scored against a
lexicon resolved for the requested language. The outcome is an
immutable :class:`AnalysisResult`::

    >>> analyze("Good service, great food")
    AnalysisResult(score=6, comparative=1.5, ...)

``comparative`` is the score divided by the number of tokens. The
tokenizer never returns an empty sequence, so the division is always
defined: an empty phrase yields one empty token and a comparative of 0.

Options (``lang``, ``category``, ``overrides``, ``strict``) may be given
as an :class:`AnalysisOptions`, a plain mapping or keyword arguments.
Invalid options and unknown languages or categories raise before any
text is processed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, StrictBool, StrictInt, StrictStr, ValidationError, validator

from config import get_config
from valence.exceptions import InvalidOption
from valence.lexicon import LexiconRegistry, get_registry
from valence.logging_utils import get_logger
from valence.negation import detect_negations
from valence.scorer import ScoreResult, score_tokens
from valence.tokenizer import tokenize

logger = get_logger(__name__)


class AnalysisOptions(BaseModel):
    """Per-call analysis options"""
    lang: Optional[StrictStr] = None
    category: Optional[StrictStr] = None
    overrides: Optional[Dict[StrictStr, StrictInt]] = None
    strict: StrictBool = False

    class Config:
        extra = "forbid"

    @validator('lang')
    def validate_lang(cls, v):
        if v is None:
            return v
        v = v.strip().lower()
        if not v:
            raise ValueError("lang cannot be empty")
        return v

    @validator('category')
    def validate_category(cls, v):
        if v is None:
            return v
        v = v.strip().lower()
        if not v:
            raise ValueError("category cannot be empty")
        return v

    @validator('overrides')
    def validate_overrides(cls, v):
        """Lower-case keys so they line up with tokens"""
        if v is None:
            return v
        return {word.lower(): valence for word, valence in v.items()}


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of a single analysis call"""
    score: int
    comparative: float
    tokens: Tuple[str, ...]
    words: Tuple[str, ...]
    positive: Tuple[str, ...]
    negative: Tuple[str, ...]
    negation: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "score": self.score,
            "comparative": self.comparative,
            "tokens": list(self.tokens),
            "words": list(self.words),
            "positive": list(self.positive),
            "negative": list(self.negative),
            "negation": list(self.negation),
        }


OptionsLike = Union[AnalysisOptions, Mapping[str, Any], None]


def _error_summary(error: ValidationError) -> List[Dict[str, Any]]:
    return [
        {
            "loc": [str(part) for part in err.get("loc", ())],
            "msg": str(err.get("msg", "")),
            "type": str(err.get("type", "")),
        }
        for err in error.errors()
    ]


def parse_options(options: OptionsLike = None, **kwargs: Any) -> AnalysisOptions:
    """Normalize the accepted option shapes into :class:`AnalysisOptions`.

    Keyword arguments take precedence over values in ``options``.
    """
    if isinstance(options, AnalysisOptions) and not kwargs:
        return options

    if options is None:
        raw: Dict[str, Any] = {}
    elif isinstance(options, AnalysisOptions):
        raw = options.dict()
    elif isinstance(options, Mapping):
        raw = dict(options)
    else:
        raise InvalidOption(
            "options must be a mapping or AnalysisOptions",
            details={"received": type(options).__name__},
        )
    raw.update(kwargs)

    try:
        return AnalysisOptions(**raw)
    except ValidationError as e:
        errors = _error_summary(e)
        logger.warning(f"Invalid analysis options: {errors}")
        raise InvalidOption("Invalid analysis options", errors=errors)


def assemble_result(
    tokens: Sequence[str],
    negation: Sequence[str],
    scored: ScoreResult,
) -> AnalysisResult:
    """Package scorer output with the comparative score."""
    return AnalysisResult(
        score=scored.score,
        comparative=scored.score / len(tokens) if tokens else 0.0,
        tokens=tuple(tokens),
        words=scored.words,
        positive=scored.positive,
        negative=scored.negative,
        negation=tuple(negation),
    )


class SentimentService:
    """Lexicon-backed sentiment analysis bound to one registry."""

    def __init__(self, registry: Optional[LexiconRegistry] = None):
        self._registry = registry

    @property
    def registry(self) -> LexiconRegistry:
        if self._registry is None:
            self._registry = get_registry()
        return self._registry

    def analyze(self, phrase: Optional[str] = "", options: OptionsLike = None, **kwargs: Any) -> AnalysisResult:
        """Score ``phrase`` and return the full analysis record.

        Raises:
            InvalidOption: An option or the phrase has the wrong type.
            UnsupportedLanguage: No lexicon for ``lang`` and not ``strict``.
            UnsupportedCategory: No ``category`` lexicon for ``lang``.
        """
        if phrase is not None and not isinstance(phrase, str):
            raise InvalidOption(
                "phrase must be a string",
                details={"received": type(phrase).__name__},
            )

        opts = parse_options(options, **kwargs)
        lang = opts.lang or get_config().DEFAULT_LANG
        registry = self.registry
        lexicon = registry.resolve(lang, opts.category, opts.overrides, opts.strict)

        tokens = tokenize(phrase, registry.alphabet(lang))
        negation = detect_negations(tokens, registry.negations(lang))
        scored = score_tokens(tokens, lexicon, negation)
        return assemble_result(tokens, negation, scored)

    async def analyze_async(self, phrase: Optional[str] = "", options: OptionsLike = None, **kwargs: Any) -> AnalysisResult:
        """Awaitable form of :meth:`analyze`; runs inline on the caller's loop."""
        return self.analyze(phrase, options, **kwargs)

    def languages(self) -> Dict[str, List[str]]:
        """Available languages mapped to their categories."""
        registry = self.registry
        return {lang: registry.categories(lang) for lang in registry.languages()}


def analyze(
    phrase: Optional[str] = "",
    options: OptionsLike = None,
    *,
    registry: Optional[LexiconRegistry] = None,
    **kwargs: Any,
) -> AnalysisResult:
    """Analyze ``phrase`` against ``registry`` (the default one when omitted)."""
    return SentimentService(registry).analyze(phrase, options, **kwargs)


async def analyze_async(
    phrase: Optional[str] = "",
    options: OptionsLike = None,
    *,
    registry: Optional[LexiconRegistry] = None,
    **kwargs: Any,
) -> AnalysisResult:
    return analyze(phrase, options, registry=registry, **kwargs)


__all__ = [
    "AnalysisOptions",
    "AnalysisResult",
    "SentimentService",
    "analyze",
    "analyze_async",
    "assemble_result",
    "parse_options",
]
