"""
Application settings and environment configuration.

Responsibilities:
- Load configuration from environment variables, .env files and the command line.
- Validate required settings and provide defaults for optional ones.
- Expose a single immutable Settings value shared (read-only) by every request.

Precedence: command-line arguments > environment (.env included) > defaults.
"""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from static_server.config.env import load_server_env
from static_server.logging.logger import LOG_FORMATS, LOG_LEVELS, parse_utc_offset

# Requests are only accepted on the loopback interface
LISTEN_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "DEBUG"
DEFAULT_LOG_FORMAT = "json"
DEFAULT_LOG_UTC_OFFSET = "+08:00"


class ConfigError(ValueError):
    """Invalid or missing configuration; fatal at startup."""


@dataclass(frozen=True)
class Settings:
    """Server configuration, created once at startup."""

    static_dir: Path
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    log_format: str = DEFAULT_LOG_FORMAT
    log_utc_offset: str = DEFAULT_LOG_UTC_OFFSET

    @property
    def host(self) -> str:
        return LISTEN_HOST

    @classmethod
    def build(
        cls,
        static_dir: str | Path | None,
        port: int | str | None = None,
        log_level: str | None = None,
        log_format: str | None = None,
        log_utc_offset: str | None = None,
    ) -> "Settings":
        """Validate raw values and return Settings. Raises ConfigError."""
        if static_dir is None or not str(static_dir).strip():
            raise ConfigError("static_dir is required (--static-dir or STATIC_DIR)")
        root = Path(str(static_dir).strip()).expanduser().absolute()
        if not root.is_dir():
            raise ConfigError(f"static_dir is not a directory: {root}")

        port_value = DEFAULT_PORT if port is None or str(port).strip() == "" else port
        try:
            port_value = int(port_value)
        except (TypeError, ValueError):
            raise ConfigError(f"port must be an integer, got {port!r}") from None
        if not 0 <= port_value <= 65535:
            raise ConfigError(f"port out of range (0-65535): {port_value}")

        level = (log_level or DEFAULT_LOG_LEVEL).strip().upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level {log_level!r}")
        fmt = (log_format or DEFAULT_LOG_FORMAT).strip().lower()
        if fmt not in LOG_FORMATS:
            raise ConfigError(f"Unknown log format {log_format!r}")
        offset = (log_utc_offset or DEFAULT_LOG_UTC_OFFSET).strip()
        try:
            parse_utc_offset(offset)
        except ValueError as e:
            raise ConfigError(str(e)) from None

        return cls(
            static_dir=root,
            port=port_value,
            log_level=level,
            log_format=fmt,
            log_utc_offset=offset,
        )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="static-server",
        description="Serve files from a directory over HTTP on 127.0.0.1.",
    )
    parser.add_argument("-s", "--static-dir", help="Root directory to serve files from (env STATIC_DIR)")
    parser.add_argument("-p", "--port", help=f"TCP port to listen on (env PORT, default {DEFAULT_PORT})")
    parser.add_argument("--log-level", help=f"Log level (env LOG_LEVEL, default {DEFAULT_LOG_LEVEL})")
    parser.add_argument("--log-format", choices=LOG_FORMATS, help="json or console (env LOG_FORMAT)")
    return parser


def get_settings(argv: Sequence[str] | None = None) -> Settings:
    """
    Return the application settings.

    When argv is given, command-line values override the environment.
    Raises ConfigError on invalid configuration.
    """
    load_server_env()
    args = build_arg_parser().parse_args(argv) if argv is not None else argparse.Namespace(
        static_dir=None, port=None, log_level=None, log_format=None
    )
    return Settings.build(
        static_dir=args.static_dir or os.getenv("STATIC_DIR"),
        port=args.port or os.getenv("PORT"),
        log_level=args.log_level or os.getenv("LOG_LEVEL"),
        log_format=args.log_format or os.getenv("LOG_FORMAT"),
        log_utc_offset=os.getenv("LOG_UTC_OFFSET"),
    )
