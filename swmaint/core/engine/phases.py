"""
Phases — update, build and install one software entry.

Each phase follows the same rule: if the entry carries an override for
the phase, call it with the entry and the runner and stop. Its return
value is ignored; an override replaces the default, it never falls back
to it. Otherwise run the default command sequence.

All phases expect the cwd to already be the entry's directory (see
``swmaint.core.engine.workdir``). A failing command raises PhaseError
and the remaining commands of that phase do not run.
"""

from __future__ import annotations

import logging
import os
from typing import Callable

from swmaint.adapters.base import Runner
from swmaint.adapters.build import autotools
from swmaint.adapters.build.targets import list_targets
from swmaint.adapters.vcs import git
from swmaint.core.models.command import Command, Receipt
from swmaint.core.models.software import SoftwareEntry

logger = logging.getLogger(__name__)

# (directory, runner) -> target names
TargetLister = Callable[[str, Runner], set[str]]

DOCS_TARGET = "docs"
INSTALL_DOCS_TARGET = "install-docs"


class PhaseError(Exception):
    """A command inside a phase exited unsuccessfully."""

    def __init__(self, phase: str, receipt: Receipt):
        self.phase = phase
        self.receipt = receipt
        super().__init__(
            f"{phase} failed: {receipt.command} "
            f"(exit {receipt.return_code}): {receipt.error}"
        )


def run_checked(runner: Runner, command: Command, phase: str) -> Receipt:
    """Run a command and raise PhaseError if it fails."""
    logger.info("[%s] %s", phase, command.display)
    receipt = runner.run(command)
    logger.debug(
        "[%s] %s exited %d after %d ms",
        phase,
        command.program,
        receipt.return_code,
        receipt.duration_ms,
    )
    if receipt.failed:
        raise PhaseError(phase, receipt)
    return receipt


def run_all(runner: Runner, commands: list[Command], phase: str) -> None:
    for command in commands:
        run_checked(runner, command, phase)


def _call_override(entry: SoftwareEntry, phase: str, runner: Runner) -> bool:
    hook = entry.override_for(phase)
    if hook is None:
        return False
    logger.info("[%s] %s: using override %s", phase, entry.name, getattr(hook, "__name__", hook))
    result = hook(entry, runner)
    if result is False:
        logger.warning("[%s] %s: override reported failure", phase, entry.name)
    return True


# ── Phases ──────────────────────────────────────────────────────


def update(entry: SoftwareEntry, runner: Runner) -> None:
    """Fetch origin, check out master, fast-forward to origin/master."""
    if _call_override(entry, "update", runner):
        return
    run_all(runner, git.update_sequence(), "update")


def build(
    entry: SoftwareEntry,
    runner: Runner,
    lister: TargetLister = list_targets,
) -> None:
    """Configure (if there is a configure script), make, make docs."""
    if _call_override(entry, "build", runner):
        return

    if autotools.has_configure():
        run_checked(runner, autotools.configure(entry.install_prefix), "build")

    if autotools.has_makefile():
        run_checked(runner, autotools.make(), "build")
        if DOCS_TARGET in lister(os.getcwd(), runner):
            run_checked(runner, autotools.make(DOCS_TARGET), "build")
    else:
        logger.debug("%s: no Makefile, nothing to build", entry.name)


def install(
    entry: SoftwareEntry,
    runner: Runner,
    lister: TargetLister = list_targets,
) -> None:
    """Privileged make install, then make install-docs if it exists."""
    if _call_override(entry, "install", runner):
        return

    run_checked(runner, autotools.make_install(), "install")
    if INSTALL_DOCS_TARGET in lister(os.getcwd(), runner):
        run_checked(runner, autotools.make_privileged(INSTALL_DOCS_TARGET), "install")
