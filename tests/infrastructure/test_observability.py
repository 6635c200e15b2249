"""Structured Logging — JSONFormatter output and setup_logging wiring."""

import json
import logging

from roster.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "roster.test", logging.INFO, __file__, 1, "User %s created", (5,), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "roster.test"
    assert log["message"] == "User 5 created"
    assert "timestamp" in log


def test_json_formatter_surfaces_extra_fields():
    log = json.loads(JSONFormatter().format(
        _record(user_id=5, operation="create", error_code=None),
    ))
    assert log["user_id"] == 5
    assert log["operation"] == "create"
    assert "error_code" not in log


def test_json_formatter_keeps_non_ascii():
    record = logging.LogRecord(
        "roster.test", logging.INFO, __file__, 1, "Marcinkevičius", (), None,
    )
    assert "Marcinkevičius" in JSONFormatter().format(record)


def test_setup_logging_installs_json_handler():
    previous_level = logging.root.level
    handler = setup_logging("warning", "json")
    try:
        assert isinstance(handler.formatter, JSONFormatter)
        assert logging.root.level == logging.WARNING
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(previous_level)


def test_setup_logging_text_format():
    previous_level = logging.root.level
    handler = setup_logging("debug", "text")
    try:
        assert not isinstance(handler.formatter, JSONFormatter)
        assert logging.root.level == logging.DEBUG
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(previous_level)
