"""Tests for JSONFormatter / setup_logging."""

import json
import logging

from server_demo.infrastructure import observability
from server_demo.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "server_demo.test", logging.WARNING, __file__, 1, "EMPTY_PARAMS", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "WARNING"
    assert out["logger"] == "server_demo.test"
    assert out["message"] == "EMPTY_PARAMS"
    assert "timestamp" in out


def test_json_formatter_surfaces_known_extras_only():
    out = json.loads(JSONFormatter().format(
        _record(error_code="EMPTY_PARAMS", path="/query", unrelated="x"),
    ))
    assert out["error_code"] == "EMPTY_PARAMS"
    assert out["path"] == "/query"
    assert "unrelated" not in out


def test_setup_logging_is_idempotent():
    before = list(logging.root.handlers)
    setup_logging("INFO", "json")
    setup_logging("INFO", "text")
    added = [h for h in logging.root.handlers if h not in before]
    assert added == [observability._installed_handler]
    assert logging.root.level == logging.INFO
    logging.root.removeHandler(observability._installed_handler)
    observability._installed_handler = None
