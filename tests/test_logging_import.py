"""
Test that static_server.logging can be imported without circular import and logger works.
"""

from __future__ import annotations

from datetime import timedelta

import pytest


def test_logging_import():
    """Import get_logger from static_server.logging and use the logger."""
    from static_server.logging import get_logger

    logger = get_logger("test")
    assert logger is not None
    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "warning")
    assert hasattr(logger, "error")
    # Smoke test: call info (should not raise)
    logger.info("test_message", key="value")


def test_logger_binds_name(captured_logs):
    from static_server.logging import get_logger

    get_logger("static_server.test").info("hello", answer=42)
    (entry,) = [e for e in captured_logs if e.get("event") == "hello"]
    assert entry["logger_name"] == "static_server.test"
    assert entry["answer"] == 42
    assert entry["log_level"] == "info"


@pytest.mark.parametrize(
    "value, delta",
    [("+08:00", timedelta(hours=8)), ("-05:30", -timedelta(hours=5, minutes=30)), ("+00:00", timedelta(0))],
)
def test_parse_utc_offset(value, delta):
    from static_server.logging.logger import parse_utc_offset

    assert parse_utc_offset(value).utcoffset(None) == delta


@pytest.mark.parametrize("value", ["8", "+8:00", "08:00", "+24:00", "+08:60", ""])
def test_parse_utc_offset_invalid(value):
    from static_server.logging.logger import parse_utc_offset

    with pytest.raises(ValueError):
        parse_utc_offset(value)


def test_configure_logging_rejects_unknown_options():
    from static_server.logging import configure_logging

    with pytest.raises(ValueError):
        configure_logging(level="LOUD")
    with pytest.raises(ValueError):
        configure_logging(fmt="xml")


def test_console_format(capsys):
    from static_server.logging import configure_logging, get_logger

    configure_logging(level="INFO", fmt="console")
    try:
        get_logger("console").info("console_event", key="value")
        get_logger("console").debug("hidden_event")
        out = capsys.readouterr().out
    finally:
        configure_logging()
    assert "key=value" in out
    assert "hidden_event" not in out


def test_json_output_names_logger(capsys):
    """Rendered lines carry the module name under "logger"."""
    import json

    from static_server.logging import configure_logging, get_logger

    configure_logging(level="INFO", fmt="json")
    try:
        get_logger("static_server.named").info("named_event")
        out = capsys.readouterr().out
    finally:
        configure_logging()
    (line,) = [json.loads(l) for l in out.splitlines() if "named_event" in l]
    assert line["logger"] == "static_server.named"
    assert "logger_name" not in line
    assert line["event_type"] == "named_event"
