import json
import logging

import pytest

from valence.logging_utils import (
    JSONFormatter,
    get_logger,
    get_structured_logger,
    log_performance,
)


def test_json_formatter_includes_extra_data():
    record = logging.LogRecord(
        name="valence.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=10,
        msg="resolved %s",
        args=("en",),
        exc_info=None,
    )
    record.extra_data = {"lang": "en", "words": 3}

    entry = json.loads(JSONFormatter().format(record))

    assert entry["level"] == "WARNING"
    assert entry["logger"] == "valence.test"
    assert entry["message"] == "resolved en"
    assert entry["lang"] == "en"
    assert entry["words"] == 3
    assert entry["timestamp"].endswith("Z")


def test_get_logger_attaches_one_handler():
    first = get_logger("valence.tests.handlers")
    second = get_logger("valence.tests.handlers")

    assert first is second
    assert len(first.handlers) == 1
    assert isinstance(first.handlers[0].formatter, JSONFormatter)


def test_structured_logger_writes_fields(capsys):
    logger = get_structured_logger("valence.tests.structured")
    logger.info("Phrase analyzed", score=3, tokens=1)

    entry = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert entry["message"] == "Phrase analyzed"
    assert entry["score"] == 3
    assert entry["tokens"] == 1


def test_log_performance_passes_through_result(capsys):
    @log_performance("valence.tests.perf")
    def add(a, b):
        return a + b

    assert add(2, 3) == 5
    entry = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert entry["function"] == "add"
    assert entry["success"] is True


def test_log_performance_reraises(capsys):
    @log_performance("valence.tests.perf_fail")
    def explode():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        explode()

    entry = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert entry["success"] is False
    assert entry["error"] == "boom"
