"""Tests for structured JSON logging configuration."""

import json
import logging

from pythonjsonlogger.json import JsonFormatter

from cobuilder.logging_config import LOGGING_CONFIG, configure_logging


def _format(record: logging.LogRecord) -> dict:
    formatter_config = LOGGING_CONFIG["formatters"]["json"]
    formatter = JsonFormatter(
        formatter_config["format"],
        rename_fields=formatter_config["rename_fields"],
        static_fields=formatter_config["static_fields"],
    )
    return json.loads(formatter.format(record))


def test_json_output_uses_gcp_field_names():
    """levelname is emitted as severity and the service name is attached."""
    record = logging.LogRecord("cobuilder.test", logging.WARNING, __file__, 1, "hello", None, None)

    payload = _format(record)

    assert payload["severity"] == "WARNING"
    assert payload["message"] == "hello"
    assert payload["logger"] == "cobuilder.test"
    assert payload["service"] == "cobuilder"


def test_extra_fields_are_included():
    """Values passed via extra= appear as top-level JSON keys."""
    record = logging.LogRecord("cobuilder.test", logging.INFO, __file__, 1, "done", None, None)
    record.channel_id = "C0ADHAF5Y6T"

    assert _format(record)["channel_id"] == "C0ADHAF5Y6T"


def test_configure_logging_sets_root_level():
    """The requested level is applied to the root logger without mutating the template."""
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = root.handlers[:]
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
        assert LOGGING_CONFIG["root"]["level"] == "INFO"
    finally:
        root.handlers = previous_handlers
        root.setLevel(previous_level)
