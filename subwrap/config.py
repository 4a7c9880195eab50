"""Configuration defaults and .env loading.

WHY: The wrapping engine takes the maximum characters per line (CPL) as a
parameter, but users set it once per project, like a "timing /
max-characters-per-line" preference. The CLI and HTTP API fall back to
these values when a request does not specify its own.

HOW: python-dotenv loads the .env file on import. Defaults are plain
module-level constants. The load_*() functions read the environment at
call time, so tests and long-running servers pick up changes, and raise a
clear error when a value is unusable.

RULES:
- SUBWRAP_MAX_CHARACTERS_PER_LINE: positive integer, default 40
- SUBWRAP_DEFAULT_MODE: "wide" or "evenly" (or an alias), default "wide"
- SUBWRAP_API_HOST / SUBWRAP_API_PORT: uvicorn bind, default 0.0.0.0:8000
- SUBWRAP_LOG_LEVEL: logging level name for entry points, default INFO
- Only entry points read configuration; the autowrap library never does
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

from autowrap import InvalidArgument, WrapMode
from autowrap.modes import resolve_mode

# Load .env from the project root (where the app is run from)
load_dotenv()

DEFAULT_MAX_CHARACTERS_PER_LINE = 40
DEFAULT_MODE = "wide"
DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8000
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def load_max_characters_per_line() -> int:
    """Read the default CPL from SUBWRAP_MAX_CHARACTERS_PER_LINE.

    RULES:
    - Missing or blank variable returns DEFAULT_MAX_CHARACTERS_PER_LINE
    - Raises ValueError if the value is not an integer >= 1
    """
    raw = os.getenv("SUBWRAP_MAX_CHARACTERS_PER_LINE", "").strip()
    if not raw:
        return DEFAULT_MAX_CHARACTERS_PER_LINE
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(
            "SUBWRAP_MAX_CHARACTERS_PER_LINE must be an integer, got '{}'.".format(raw)
        )
    if value < 1:
        raise ValueError(
            "SUBWRAP_MAX_CHARACTERS_PER_LINE must be at least 1, got {}.".format(value)
        )
    return value


def load_default_mode() -> WrapMode:
    """Read the default wrap mode from SUBWRAP_DEFAULT_MODE.

    Raises:
        ValueError: If the variable names an unknown mode.
    """
    raw = os.getenv("SUBWRAP_DEFAULT_MODE", "").strip() or DEFAULT_MODE
    try:
        return resolve_mode(raw)
    except InvalidArgument as exc:
        raise ValueError("SUBWRAP_DEFAULT_MODE: {}".format(exc))


def load_api_bind() -> tuple[str, int]:
    """Return the (host, port) the HTTP API should listen on."""
    host = os.getenv("SUBWRAP_API_HOST", "").strip() or DEFAULT_API_HOST
    raw_port = os.getenv("SUBWRAP_API_PORT", "").strip()
    if not raw_port:
        return host, DEFAULT_API_PORT
    try:
        return host, int(raw_port)
    except ValueError:
        raise ValueError("SUBWRAP_API_PORT must be an integer, got '{}'.".format(raw_port))


def configure_logging() -> None:
    """Set up root logging for an entry point from SUBWRAP_LOG_LEVEL."""
    level_name = os.getenv("SUBWRAP_LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
