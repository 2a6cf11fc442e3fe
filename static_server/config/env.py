"""
Environment loading for Static Server.

- STATIC_DIR: root directory to serve files from (required)
- PORT: TCP port on 127.0.0.1 (default 3000)
- LOG_LEVEL / LOG_FORMAT / LOG_UTC_OFFSET: logging options
- Loads .env from the working directory (or a parent) when available.
  Variables already set in the process environment win over .env values.
"""

from __future__ import annotations

from dotenv import find_dotenv, load_dotenv


def load_server_env() -> bool:
    """Load .env if one is found. Safe to call multiple times."""
    path = find_dotenv(usecwd=True)
    if not path:
        return False
    return load_dotenv(path, override=False)
