"""
Lexicon loading and resolution.

Language packs live on disk as a directory per language::

    <lexicon dir>/
        en/
            language.yaml        # name + alphabet
            afinn.yaml           # word -> integer valence
            negations.yaml       # list of negation words
            categories/
                finance.yaml     # extra word -> valence layer

Packs are read once into a :class:`LexiconRegistry`. Resolving a lexicon
for an analysis call is then a pure lookup plus a merge; the result is a
fresh read-only mapping so nothing leaks between calls.
"""

from __future__ import annotations

import re
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple

import yaml
from pydantic import BaseModel, StrictInt, StrictStr, ValidationError, validator

from config import get_config
from valence.exceptions import (
    InvalidOption,
    LexiconDataError,
    UnsupportedCategory,
    UnsupportedLanguage,
)
from valence.logging_utils import get_logger, log_performance
from valence.tokenizer import DEFAULT_ALPHABET

logger = get_logger(__name__)

Lexicon = Mapping[str, int]

_EMPTY: Lexicon = MappingProxyType({})


class LanguagePack(BaseModel):
    """Validated lexicon data for one language"""
    code: StrictStr
    name: str = ""
    alphabet: StrictStr = DEFAULT_ALPHABET
    lexicon: Dict[StrictStr, StrictInt]
    negations: List[StrictStr] = []
    categories: Dict[StrictStr, Dict[StrictStr, StrictInt]] = {}

    @validator('code')
    def validate_code(cls, v):
        """Language codes are short lower-case identifiers"""
        v = v.strip().lower()
        if not v or not v.replace("_", "").replace("-", "").isalnum():
            raise ValueError(f"Invalid language code: {v!r}")
        return v

    @validator('alphabet')
    def validate_alphabet(cls, v):
        """The alphabet must be usable inside a regex character class"""
        if not v:
            raise ValueError("Alphabet cannot be empty")
        try:
            re.compile(f"[{v}]")
        except re.error as e:
            raise ValueError(f"Alphabet is not a valid character class: {e}")
        return v

    @validator('lexicon')
    def validate_lexicon(cls, v):
        """Keys are matched against lower-cased tokens"""
        return {word.lower(): valence for word, valence in v.items()}

    @validator('negations')
    def validate_negations(cls, v):
        return [word.lower() for word in v]

    @validator('categories')
    def validate_categories(cls, v):
        return {
            name: {word.lower(): valence for word, valence in words.items()}
            for name, words in v.items()
        }


class LexiconRegistry:
    """Read-only collection of language packs with lexicon resolution"""

    def __init__(self, packs: Optional[Mapping[str, LanguagePack]] = None, *, cache: bool = True):
        self._packs: Dict[str, LanguagePack] = dict(packs or {})
        self._negations: Dict[str, FrozenSet[str]] = {
            code: frozenset(pack.negations) for code, pack in self._packs.items()
        }
        self._cache_enabled = cache
        self._layers: Dict[Tuple[str, Optional[str], bool], Lexicon] = {}

    @classmethod
    def from_directory(cls, path: Path | str, *, cache: bool = True) -> "LexiconRegistry":
        """Build a registry from a directory of YAML language packs."""
        return cls(load_language_packs(path), cache=cache)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Mapping[str, Any]], *, cache: bool = True) -> "LexiconRegistry":
        """Build a registry from in-memory pack definitions keyed by language code.

        Each value takes the same fields as :class:`LanguagePack`; ``code``
        defaults to the key.
        """
        packs = {}
        for code, raw in data.items():
            pack = _validate_pack({"code": code, **raw}, source=f"<mapping:{code}>")
            packs[pack.code] = pack
        return cls(packs, cache=cache)

    def languages(self) -> List[str]:
        return sorted(self._packs)

    def categories(self, lang: str) -> List[str]:
        pack = self._packs.get(lang)
        return sorted(pack.categories) if pack else []

    def alphabet(self, lang: str) -> str:
        """Character class for ``lang``, Latin letters when unknown."""
        pack = self._packs.get(lang)
        return pack.alphabet if pack else DEFAULT_ALPHABET

    def negations(self, lang: str) -> FrozenSet[str]:
        return self._negations.get(lang, frozenset())

    def resolve(
        self,
        lang: str,
        category: Optional[str] = None,
        overrides: Optional[Mapping[str, int]] = None,
        strict: bool = False,
    ) -> Lexicon:
        """Merge base, category and override layers into one lexicon.

        Later layers win on duplicate keys: base < category < overrides.
        With ``strict`` the base layer is skipped, which also allows a
        language without a pack as long as no category is requested.

        Raises:
            UnsupportedLanguage: ``lang`` has no pack and ``strict`` is off.
            UnsupportedCategory: ``category`` is not available for ``lang``.
            InvalidOption: ``overrides`` is not a mapping.
        """
        if overrides is not None and not isinstance(overrides, Mapping):
            raise InvalidOption(
                "overrides must be a mapping of word to integer valence",
                details={"received": type(overrides).__name__},
            )

        layers = self._base_layers(lang, category, strict)
        if not overrides:
            return layers

        merged = dict(layers)
        merged.update(overrides)
        return MappingProxyType(merged)

    def _base_layers(self, lang: str, category: Optional[str], strict: bool) -> Lexicon:
        key = (lang, category, strict)
        cached = self._layers.get(key)
        if cached is not None:
            return cached

        pack = self._packs.get(lang)
        if pack is None and not strict:
            logger.warning(f"Unsupported language requested: {lang}")
            raise UnsupportedLanguage(lang, details={"available": self.languages()})

        if category is not None and (pack is None or category not in pack.categories):
            logger.warning(f"Unsupported category requested: {category} ({lang})")
            raise UnsupportedCategory(
                category,
                lang,
                details={"available": self.categories(lang)},
            )

        merged: Dict[str, int] = {}
        if pack is not None and not strict:
            merged.update(pack.lexicon)
        if category is not None:
            merged.update(pack.categories[category])

        layers = MappingProxyType(merged) if merged else _EMPTY
        # Unknown strict-mode languages are never cached
        if self._cache_enabled and pack is not None:
            self._layers[key] = layers
            logger.debug(f"Cached lexicon layers for {key}: {len(layers)} words")
        return layers


def _read_yaml(path: Path) -> Any:
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise LexiconDataError(f"Malformed YAML in {path}: {e}", path=str(path))


def _validate_pack(raw: Mapping[str, Any], source: str) -> LanguagePack:
    try:
        return LanguagePack(**raw)
    except ValidationError as e:
        raise LexiconDataError(
            f"Invalid language pack {source}: {e}",
            path=source,
            details={"errors": [str(err.get("msg")) for err in e.errors()]},
        )


def _load_pack_dir(directory: Path) -> LanguagePack:
    meta = {}
    meta_path = directory / "language.yaml"
    if meta_path.exists():
        meta = _read_yaml(meta_path) or {}
        if not isinstance(meta, dict):
            raise LexiconDataError(f"{meta_path} must contain a mapping", path=str(meta_path))

    negations = []
    negations_path = directory / "negations.yaml"
    if negations_path.exists():
        negations = _read_yaml(negations_path) or []

    categories = {}
    categories_dir = directory / "categories"
    if categories_dir.is_dir():
        for category_path in sorted(categories_dir.glob("*.yaml")):
            categories[category_path.stem] = _read_yaml(category_path) or {}

    raw = {
        "code": directory.name,
        **meta,
        "lexicon": _read_yaml(directory / "afinn.yaml") or {},
        "negations": negations,
        "categories": categories,
    }
    return _validate_pack(raw, source=str(directory))


@log_performance()
def load_language_packs(path: Path | str) -> Dict[str, LanguagePack]:
    """Read every language pack below ``path``.

    A subdirectory counts as a pack when it holds an ``afinn.yaml``.
    """
    root = Path(path)
    if not root.is_dir():
        raise LexiconDataError(f"Lexicon directory not found: {root}", path=str(root))

    packs: Dict[str, LanguagePack] = {}
    for directory in sorted(p for p in root.iterdir() if p.is_dir()):
        if not (directory / "afinn.yaml").exists():
            continue
        pack = _load_pack_dir(directory)
        packs[pack.code] = pack
        logger.info(
            f"Loaded language pack {pack.code}: {len(pack.lexicon)} words, "
            f"{len(pack.negations)} negations, {len(pack.categories)} categories"
        )

    return packs


_default_registry: Optional[LexiconRegistry] = None


def get_registry() -> LexiconRegistry:
    """Return the process-wide registry built from the configured directory."""
    global _default_registry
    if _default_registry is None:
        cfg = get_config()
        _default_registry = LexiconRegistry.from_directory(
            cfg.LEXICON_DIR,
            cache=cfg.CACHE_LEXICONS,
        )
    return _default_registry


def reset_registry() -> None:
    """Drop the default registry so the next call reloads it."""
    global _default_registry
    _default_registry = None


__all__ = [
    "LanguagePack",
    "Lexicon",
    "LexiconRegistry",
    "get_registry",
    "load_language_packs",
    "reset_registry",
]
