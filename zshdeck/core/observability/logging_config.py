"""
Logging setup for the zshdeck entry points (CLI and web).

Modules only ever do ``logger = logging.getLogger(__name__)``; this is the
one place handlers and levels are configured.

Level precedence:
    --debug / --verbose / --quiet  >  ZSHDECK_LOG_LEVEL  >  WARNING

ZSHDECK_LOG_FILE adds a file handler; ZSHDECK_LOG_FILE_LEVEL gives it its
own level (defaults to the console level).
"""

from __future__ import annotations

import logging
import os
import sys

LEVEL_ENV_VAR = "ZSHDECK_LOG_LEVEL"
FILE_ENV_VAR = "ZSHDECK_LOG_FILE"
FILE_LEVEL_ENV_VAR = "ZSHDECK_LOG_FILE_LEVEL"

# Console formats, picked by level
_FORMATS: dict[int, tuple[str, str | None]] = {
    logging.DEBUG: ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    logging.INFO: ("%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
}
_FMT_QUIET = "%(levelname)s: %(message)s"

_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"

# Flask's dev server logs every request at INFO
_NOISY_LOGGERS = ("werkzeug",)


def resolve_level(*, debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Pick the console level name from CLI flags, then the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(LEVEL_ENV_VAR, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure the root logger for the whole process.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional log file path.  Falls back to $ZSHDECK_LOG_FILE.
        log_file_level: Level for the file handler.  Falls back to
            $ZSHDECK_LOG_FILE_LEVEL, then to ``level``.
    """
    console_level = _parse_level(level)
    fmt, datefmt = _FORMATS.get(console_level, (_FMT_QUIET, None))

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    log_file = log_file or os.environ.get(FILE_ENV_VAR)
    if log_file:
        file_level = _parse_level(
            log_file_level or os.environ.get(FILE_LEVEL_ENV_VAR) or level
        )
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)
        root_level = min(root_level, file_level)

    root.setLevel(root_level)

    if console_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def _parse_level(level: str | None) -> int:
    """Level name → numeric level.  Unknown names mean WARNING."""
    numeric = logging.getLevelName((level or "").upper())
    return numeric if isinstance(numeric, int) else logging.WARNING
