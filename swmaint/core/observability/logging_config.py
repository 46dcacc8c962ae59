"""
Logging setup for the swmaint process.

main.py calls ``setup_logging`` once; modules log through
``logging.getLogger(__name__)``. Logs carry diagnostics and per-entry
failures. Normal output (``==>`` lines, the list, dry-run text) goes
through click.echo and is never affected by the level.

Console level: --debug, then --quiet, then $SWMAINT_LOG_LEVEL, then WARNING.
$SWMAINT_LOG_FILE adds a file sink at $SWMAINT_LOG_FILE_LEVEL.
"""

from __future__ import annotations

import logging
import sys

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
DETAILED_FORMAT = "%(asctime)s %(levelname)s %(name)s:%(lineno)d: %(message)s"


def resolve_level(debug: bool, quiet: bool, env_level: str | None) -> str:
    """Pick the console level from CLI flags and the environment."""
    if debug:
        return "DEBUG"
    if quiet:
        return "ERROR"
    return env_level or "WARNING"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Replace the root logger's handlers with a stderr sink and an optional file.

    Unknown level names mean WARNING. At DEBUG the console switches to the
    detailed format, which the file sink always uses.
    """
    console_level = _level_number(level)
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(
        logging.Formatter(DETAILED_FORMAT if console_level <= logging.DEBUG else CONSOLE_FORMAT)
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root.setLevel(console_level)

    if log_file:
        file_level = _level_number(log_file_level or level)
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setLevel(file_level)
        sink.setFormatter(logging.Formatter(DETAILED_FORMAT))
        root.addHandler(sink)
        root.setLevel(min(console_level, file_level))


def _level_number(name: str | None) -> int:
    number = logging.getLevelName((name or "").upper())
    return number if isinstance(number, int) else logging.WARNING
