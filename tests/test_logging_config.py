"""Tests for the JSON logging setup."""

import json
import logging
import sys
from datetime import date

from debtbook.logging_config import LOGGER_NAME, JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="debtbook",
        level=logging.WARNING,
        pathname=__file__,
        lineno=7,
        msg="Rejected %s",
        args=("row",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_fields() -> None:
    record = _record(created=0.0)

    entry = json.loads(JSONFormatter().format(record))

    assert entry["level"] == "WARNING"
    assert entry["logger"] == "debtbook"
    assert entry["message"] == "Rejected row"
    assert entry["location"] == "test_logging_config:7"
    assert entry["timestamp"] == "1970-01-01T00:00:00.000Z"
    assert "exception" not in entry


def test_json_formatter_merges_extra_data() -> None:
    entry = json.loads(JSONFormatter().format(_record(extra_data={"kind": "person", "row": 3})))

    assert entry["kind"] == "person"
    assert entry["row"] == 3


def test_json_formatter_writes_non_json_values_as_strings() -> None:
    """Values such as dates in extra_data must not break formatting."""
    entry = json.loads(JSONFormatter().format(_record(extra_data={"since": date(2024, 3, 1)})))

    assert entry["since"] == "2024-03-01"


def test_json_formatter_includes_exception() -> None:
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()

    entry = json.loads(JSONFormatter().format(record))

    assert "ValueError: boom" in entry["exception"]


def _json_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if isinstance(h.formatter, JSONFormatter)]


def test_setup_logging_is_idempotent() -> None:
    logger = logging.getLogger(LOGGER_NAME)
    before = list(logger.handlers)
    previous_level = logger.level
    try:
        assert setup_logging("DEBUG") is logger
        setup_logging("DEBUG")

        assert len(_json_handlers(logger)) == 1
        assert logger.level == logging.DEBUG
    finally:
        for handler in logger.handlers[:]:
            if handler not in before:
                logger.removeHandler(handler)
        logger.setLevel(previous_level)


def test_dashboard_module_configures_logging() -> None:
    """Importing the dashboard composition attaches the JSON handler."""
    from debtbook import dashboard

    logger = logging.getLogger(LOGGER_NAME)

    assert dashboard.logger is logger
    assert len(_json_handlers(logger)) == 1
