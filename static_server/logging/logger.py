"""
Structured logging: timestamp, level, logger name, event_type.

structlog with a fixed-offset millisecond timestamp and consistent keys.
All modules should use get_logger() and log an event_type (first arg) plus
keyword fields.

Uses only Python stdlib logging and structlog; no static_server imports to avoid circular imports.
"""

from __future__ import annotations

import logging
import os
import re
import sys
from datetime import datetime, timedelta, timezone
from typing import Any

import structlog

LOG_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}
LOG_FORMATS = ("json", "console")

DEFAULT_LEVEL = "DEBUG"
DEFAULT_FORMAT = "json"
DEFAULT_UTC_OFFSET = "+08:00"

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):(\d{2})$")


def parse_utc_offset(value: str) -> timezone:
    """
    Parse a "+HH:MM" / "-HH:MM" offset into a fixed timezone.

    Raises ValueError when the value is malformed or out of range.
    """
    match = _OFFSET_RE.match(value.strip())
    if not match:
        raise ValueError(f"Invalid UTC offset {value!r}, expected +HH:MM or -HH:MM")
    sign, hours, minutes = match.groups()
    if int(hours) > 23 or int(minutes) > 59:
        raise ValueError(f"UTC offset out of range: {value!r}")
    delta = timedelta(hours=int(hours), minutes=int(minutes))
    return timezone(-delta if sign == "-" else delta)


def _is_valid_offset(value: str) -> bool:
    try:
        parse_utc_offset(value)
    except ValueError:
        return False
    return True


# Defaults from env; invalid values fall back here and are reported by Settings.build()
LOG_LEVEL = os.getenv("LOG_LEVEL", DEFAULT_LEVEL).strip().upper()
if LOG_LEVEL not in LOG_LEVELS:
    LOG_LEVEL = DEFAULT_LEVEL
LOG_FORMAT = os.getenv("LOG_FORMAT", DEFAULT_FORMAT).strip().lower()
if LOG_FORMAT not in LOG_FORMATS:
    LOG_FORMAT = DEFAULT_FORMAT
LOG_UTC_OFFSET = os.getenv("LOG_UTC_OFFSET", DEFAULT_UTC_OFFSET).strip()
if not _is_valid_offset(LOG_UTC_OFFSET):
    LOG_UTC_OFFSET = DEFAULT_UTC_OFFSET


def _timestamper(tz: timezone) -> Any:
    def add_timestamp(
        logger: Any,
        method_name: str,
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        """Ensure timestamp is always present, to the millisecond."""
        if "timestamp" not in event_dict:
            event_dict["timestamp"] = datetime.now(tz).strftime(TIMESTAMP_FORMAT)[:-3]
        return event_dict

    return add_timestamp


def _rename_logger_name(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Expose the bound logger_name as "logger"."""
    if "logger_name" in event_dict:
        event_dict.setdefault("logger", event_dict.pop("logger_name"))
    return event_dict


def _normalize_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Rename structlog 'event' to event_type for consistency."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    return event_dict


def configure_logging(
    level: str = LOG_LEVEL,
    fmt: str = LOG_FORMAT,
    utc_offset: str = LOG_UTC_OFFSET,
) -> None:
    """
    Configure structlog: level filter, timestamp, event_type, renderer.

    Safe to call again (e.g. once settings are parsed); loggers returned by
    get_logger() pick up the new configuration on their next call.
    """
    level_value = LOG_LEVELS.get(level.upper())
    if level_value is None:
        raise ValueError(f"Unknown log level {level!r}")
    if fmt not in LOG_FORMATS:
        raise ValueError(f"Unknown log format {fmt!r}")

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        _rename_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _timestamper(parse_utc_offset(utc_offset)),
        _normalize_event,
    ]
    if fmt == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


# One-time configuration on first import
if not structlog.is_configured():
    configure_logging()


def get_logger(name: str) -> Any:
    """
    Return a structured logger for the given module name.

        logger = get_logger(__name__)
        logger.info("file_served", path="index.html", size=11)

    Output (JSON): {"path": "index.html", "size": 11, "logger": "module.name",
    "level": "info", "timestamp": "2024-01-01 08:00:00.000", "event_type": "file_served"}
    """
    # "logger" is a wrap_logger() parameter; bind under logger_name and rename when rendering
    return structlog.get_logger(name, logger_name=name)
