"""
Structured logging for Static Server.

One JSON (or console) line per event, with timestamp, level and logger name.
Use get_logger() in all modules.
"""

from static_server.logging.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
