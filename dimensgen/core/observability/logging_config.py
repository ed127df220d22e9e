"""
Logging setup for dimensgen.

``configure_logging()`` runs once when the CLI starts. Library code only
does ``logger = logging.getLogger(__name__)``; per-bucket failures are
ERROR records, successes INFO, stat/delete detail DEBUG.

Console level, highest priority first:
    --debug / --verbose / --quiet  >  DIMENSGEN_LOG_LEVEL  >  WARNING

DIMENSGEN_LOG_FILE adds a file handler, at DIMENSGEN_LOG_FILE_LEVEL
(or the console level when unset).
"""

from __future__ import annotations

import logging
import os
import sys

ENV_LOG_LEVEL = "DIMENSGEN_LOG_LEVEL"
ENV_LOG_FILE = "DIMENSGEN_LOG_FILE"
ENV_LOG_FILE_LEVEL = "DIMENSGEN_LOG_FILE_LEVEL"

_DETAILED = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"

# (lowest level the format applies to, format, datefmt); first match wins
_CONSOLE_FORMATS: tuple[tuple[int, str, str | None], ...] = (
    (logging.WARNING, "%(message)s", None),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
    (logging.NOTSET, _DETAILED, "%H:%M:%S"),
)


def resolve_level(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> str:
    """Pick the console level name from CLI flags, then the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(ENV_LOG_LEVEL, "WARNING")


def level_number(name: str | None) -> int:
    """Numeric level for *name*; unknown or empty names mean WARNING."""
    value = logging.getLevelName(name.upper()) if name else None
    return value if isinstance(value, int) else logging.WARNING


def _console_handler(level: int) -> logging.Handler:
    fmt, datefmt = next((f, d) for floor, f, d in _CONSOLE_FORMATS if level >= floor)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return handler


def _file_handler(path: str, level: int) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_DETAILED, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Replace the root handlers with a stderr handler and an optional file.

    Args:
        level: Console level name.
        log_file: Path of an extra log file, if any.
        log_file_level: Level for the file; defaults to ``level``.
    """
    console_level = level_number(level)
    handlers = [_console_handler(console_level)]

    if log_file:
        file_level = level_number(log_file_level) if log_file_level else console_level
        handlers.append(_file_handler(log_file, file_level))

    root = logging.getLogger()
    root.handlers[:] = handlers
    root.setLevel(min(h.level for h in handlers))

    # A broken stderr must not abort generation
    logging.raiseExceptions = False


def configure_logging(*, debug: bool = False, verbose: bool = False, quiet: bool = False) -> None:
    """Set up logging from CLI flags plus the DIMENSGEN_LOG_* environment."""
    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_LOG_FILE),
        log_file_level=os.environ.get(ENV_LOG_FILE_LEVEL),
    )
