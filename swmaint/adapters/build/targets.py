"""
Make target discovery — which named targets does a Makefile expose?

Runs make in question mode with its rule database printed and reads the
target names out of the "# Files" section. Nothing is built. Every call
spawns make again; nothing is cached between calls.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from swmaint.adapters.base import Runner
from swmaint.adapters.build.autotools import has_makefile
from swmaint.core.models.command import Command

logger = logging.getLogger(__name__)

# "name:" or "name: deps" or "name::", but not "VAR := value"
_RULE_RE = re.compile(r"^([^\s:=#][^:=#]*?)\s*::?(?!=)")

_FILES_SECTION = "# Files"
_NOT_A_TARGET = "# Not a target:"
_END_OF_DATABASE = "# Finished Make data base"


def database_command(directory: Path | str) -> Command:
    """``make -C <dir> -pRrq :`` — dump rules, remake nothing."""
    return Command(
        program="make",
        args=("--no-print-directory", "-C", str(directory), "-pRrq", ":"),
        capture=True,
    )


def parse_targets(database: str) -> set[str]:
    """Extract real target names from a ``make -p`` database dump."""
    targets: set[str] = set()
    in_files = False
    skip_next = False

    for line in database.splitlines():
        if line.startswith(_END_OF_DATABASE):
            break
        if line.startswith(_FILES_SECTION):
            in_files = True
            continue
        if not in_files:
            continue
        if line.startswith(_NOT_A_TARGET):
            skip_next = True
            continue
        if not line or line.startswith(("#", "\t")):
            continue

        match = _RULE_RE.match(line)
        if not match:
            continue
        if skip_next:
            skip_next = False
            continue

        name = match.group(1).strip()
        # Special (.PHONY, .SUFFIXES) and pattern rules are not targets
        if name.startswith(".") or "%" in name:
            continue
        targets.update(name.split())

    return targets


def list_targets(directory: Path | str, runner: Runner) -> set[str]:
    """Return the make targets available in ``directory``.

    Returns an empty set when there is no Makefile. ``make -q`` exits
    non-zero whenever something is out of date, so the exit status is
    ignored and whatever database was printed is parsed.
    """
    if not has_makefile(directory):
        return set()

    receipt = runner.run(database_command(directory))
    if receipt.failed and not receipt.output:
        logger.warning("Could not list make targets in %s: %s", directory, receipt.error)
        return set()

    targets = parse_targets(receipt.output)
    logger.debug("Make targets in %s: %s", directory, sorted(targets))
    return targets
