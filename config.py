"""
Configuration management for the Valence sentiment service
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

BUNDLED_LEXICON_DIR = Path(__file__).resolve().parent / "valence" / "data"


@dataclass
class Config:
    # Environment
    APP_ENV: str
    PORT: int
    LOG_LEVEL: str

    # Analysis defaults
    DEFAULT_LANG: str
    LEXICON_DIR: Path
    CACHE_LEXICONS: bool


_CONFIG_INSTANCE: Optional[Config] = None


def _parse_bool(var: str, default: str) -> bool:
    return os.getenv(var, default).strip().lower() in ("1", "true", "on", "yes")


def _parse_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        return "INFO"
    return level


def _build_config() -> Config:
    """Create a new ``Config`` instance from environment variables."""

    lexicon_dir = os.getenv("VALENCE_LEXICON_DIR")

    return Config(
        # Environment
        APP_ENV=os.getenv("APP_ENV", "prod"),
        PORT=int(os.getenv("PORT", 8000)),
        LOG_LEVEL=_parse_level(os.getenv("LOG_LEVEL", "INFO")),

        # Analysis defaults
        DEFAULT_LANG=os.getenv("VALENCE_DEFAULT_LANG", "en").strip().lower() or "en",
        LEXICON_DIR=Path(lexicon_dir) if lexicon_dir else BUNDLED_LEXICON_DIR,
        CACHE_LEXICONS=_parse_bool("VALENCE_CACHE_LEXICONS", "true"),
    )


def get_config() -> Config:
    """Return the shared configuration object."""

    global _CONFIG_INSTANCE
    if _CONFIG_INSTANCE is None:
        _CONFIG_INSTANCE = _build_config()
    return _CONFIG_INSTANCE


def update_config(**updates: Any) -> Config:
    """Mutate the shared config in place."""

    cfg = get_config()
    for key, value in updates.items():
        if not hasattr(cfg, key):
            raise AttributeError(f"Config has no attribute '{key}'")
        setattr(cfg, key, value)
    return cfg


def reset_config() -> Config:
    """Reload configuration from the environment."""

    global _CONFIG_INSTANCE
    _CONFIG_INSTANCE = _build_config()
    return _CONFIG_INSTANCE
