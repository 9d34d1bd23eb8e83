"""Pytest configuration: async test support and shared lexicon fixtures."""

from __future__ import annotations

import asyncio
import inspect

import pytest

import config as config_module
from valence.lexicon import LexiconRegistry, reset_registry


def pytest_pyfunc_call(pyfuncitem):  # pragma: no cover - pytest hook
    """Allow pytest to run ``async def`` tests without extra plugins."""
    test_func = pyfuncitem.obj

    if inspect.iscoroutinefunction(test_func):
        funcargs = pyfuncitem.funcargs
        sig = inspect.signature(test_func)
        call_args = {
            name: value
            for name, value in funcargs.items()
            if name in sig.parameters
        }
        asyncio.run(test_func(**call_args))
        return True
    return None


@pytest.fixture(autouse=True)
def _fresh_state():
    """Every test starts from the environment config and an unloaded registry."""
    config_module.reset_config()
    reset_registry()
    yield
    config_module.reset_config()
    reset_registry()


@pytest.fixture
def registry() -> LexiconRegistry:
    """Small in-memory registry with known valences."""
    return LexiconRegistry.from_mapping({
        "en": {
            "alphabet": "a-zA-Z",
            "lexicon": {
                "good": 3,
                "great": 3,
                "bad": -3,
                "stupid": -2,
                "love": 3,
                "crash": -2,
            },
            "negations": ["not", "never", "dont"],
            "categories": {
                "finance": {"bullish": 3, "crash": -3},
            },
        },
        "de": {
            "alphabet": "a-zA-ZäöüÄÖÜß",
            "lexicon": {"schlecht": -3, "schön": 3},
            "negations": ["nicht", "kein"],
        },
    })
