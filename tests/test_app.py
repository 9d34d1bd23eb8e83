import asyncio
import importlib
import sys

import pytest
from fastapi import HTTPException


@pytest.fixture
def app_module():
    sys.modules.pop("app", None)
    module = importlib.import_module("app")
    yield module
    sys.modules.pop("app", None)


def test_analyze_endpoint_scores_phrase(app_module):
    response = asyncio.run(
        app_module.analyze_phrase(app_module.AnalyzeRequest(phrase="Cats are stupid."))
    )

    assert response["lang"] == "en"
    assert response["category"] is None
    assert response["score"] == -2
    assert response["negative"] == ["stupid"]
    assert response["tokens"] == ["cats", "are", "stupid"]


def test_analyze_endpoint_applies_options(app_module):
    request = app_module.AnalyzeRequest(
        phrase="Bitcoin will moon, great",
        category="finance",
        overrides={"great": -1},
    )
    response = asyncio.run(app_module.analyze_phrase(request))

    assert response["category"] == "finance"
    assert response["score"] == 2
    assert response["words"] == ["moon", "great"]


def test_analyze_endpoint_unknown_language_is_404(app_module):
    request = app_module.AnalyzeRequest(phrase="bonjour", lang="xx")

    with pytest.raises(HTTPException) as exc:
        asyncio.run(app_module.analyze_phrase(request))

    assert exc.value.status_code == 404
    assert exc.value.detail["error_type"] == "UnsupportedLanguage"


def test_analyze_endpoint_unknown_category_is_404(app_module):
    request = app_module.AnalyzeRequest(phrase="good", category="sports")

    with pytest.raises(HTTPException) as exc:
        asyncio.run(app_module.analyze_phrase(request))

    assert exc.value.status_code == 404
    assert exc.value.detail["category"] == "sports"


def test_analyze_endpoint_invalid_option_is_400(app_module):
    request = app_module.AnalyzeRequest(phrase="good", lang="  ")

    with pytest.raises(HTTPException) as exc:
        asyncio.run(app_module.analyze_phrase(request))

    assert exc.value.status_code == 400
    assert exc.value.detail["error_type"] == "InvalidOption"


def test_languages_and_health(app_module):
    languages = asyncio.run(app_module.get_languages())["languages"]
    assert "finance" in languages["en"]
    assert "de" in languages

    health = asyncio.run(app_module.health_check())
    assert health["status"] == "healthy"
    assert health["default_lang"] == "en"
    assert health["languages"] >= 2


def test_analyze_endpoint_echoes_normalized_language(app_module):
    request = app_module.AnalyzeRequest(phrase="good", lang=" EN ", category=" Finance ")
    response = asyncio.run(app_module.analyze_phrase(request))

    assert response["lang"] == "en"
    assert response["category"] == "finance"
    assert response["score"] == 3


@pytest.mark.parametrize(
    "options",
    [
        {"overrides": {"good": True}},
        {"overrides": {"good": "5"}},
        {"strict": "yes"},
        {"strict": 1},
        {"lang": 5},
    ],
)
def test_analyze_endpoint_rejects_loosely_typed_options(app_module, options):
    request = app_module.AnalyzeRequest(phrase="good", **options)

    with pytest.raises(HTTPException) as exc:
        asyncio.run(app_module.analyze_phrase(request))

    assert exc.value.status_code == 400
    assert exc.value.detail["error_type"] == "InvalidOption"
    assert exc.value.detail["errors"]
