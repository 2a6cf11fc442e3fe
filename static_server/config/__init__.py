"""
Configuration management for Static Server.

Loads and validates settings from the command line, environment variables
and an optional .env file. Exposes a single source of truth for the server.
"""

from static_server.config.settings import ConfigError, Settings, get_settings  # noqa: F401

__all__ = ["ConfigError", "Settings", "get_settings"]
