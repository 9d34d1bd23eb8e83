"""
Sentiment analysis exceptions.

Everything here is raised synchronously while options are validated or
the lexicon is resolved, before a single token is looked at. A token
missing from the lexicon is never an error.
"""

from typing import Any, Optional


class SentimentError(Exception):
    """Base exception for all sentiment analysis errors."""

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class UnsupportedLanguage(SentimentError, LookupError):
    """No base lexicon exists for the requested language."""

    def __init__(self, lang: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(f"Language '{lang}' not supported.", details)
        self.lang = lang

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["lang"] = self.lang
        return data


class UnsupportedCategory(SentimentError, LookupError):
    """No category lexicon exists for the requested language."""

    def __init__(
        self,
        category: str,
        lang: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            f"Category '{category}' not supported for language '{lang}'.",
            details,
        )
        self.category = category
        self.lang = lang

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update({"lang": self.lang, "category": self.category})
        return data


class InvalidOption(SentimentError, ValueError):
    """An analysis option was supplied with the wrong shape."""

    def __init__(
        self,
        message: str,
        errors: Optional[list[dict[str, Any]]] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)
        self.errors = errors or []

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["errors"] = self.errors
        return data


class LexiconDataError(SentimentError, ValueError):
    """Bundled or user-supplied lexicon data could not be loaded."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)
        self.path = path

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["path"] = self.path
        return data
