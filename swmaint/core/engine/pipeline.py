"""
Pipeline — run update, build and install for each software entry.

Flow per entry:
    announce → (dry-run text | update → build → install) inside its directory

Entries are processed strictly one after another. A failure in one
entry is reported and the run moves on to the next entry; it never
aborts the whole run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

import click

from swmaint.adapters.base import Runner
from swmaint.adapters.build.targets import list_targets
from swmaint.core.engine import phases
from swmaint.core.engine.phases import PhaseError, TargetLister
from swmaint.core.engine.workdir import working_directory
from swmaint.core.models.software import SoftwareEntry
from swmaint.core.registry import SoftwareRegistry

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """What happened during a run."""

    processed: list[str] = field(default_factory=list)
    failures: dict[str, str] = field(default_factory=dict)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def succeeded(self) -> int:
        return len(self.processed) - self.failed

    @property
    def all_ok(self) -> bool:
        return not self.failures


class Pipeline:
    """Per-entry orchestration of the three phases.

    Args:
        runner: Executes every external command.
        lister: Lists make targets for a directory.
        dry_run: Print what would happen, run nothing.
        update_only: Skip build and install.
        echo: Where user-facing lines go (default: click.echo).
    """

    def __init__(
        self,
        runner: Runner,
        lister: TargetLister = list_targets,
        dry_run: bool = False,
        update_only: bool = False,
        echo: Callable[[str], None] | None = None,
    ):
        self.runner = runner
        self.lister = lister
        self.dry_run = dry_run
        self.update_only = update_only
        self._echo = echo or click.echo

    def process(self, entry: SoftwareEntry) -> None:
        """Run the pipeline for one entry. Raises on failure."""
        self._echo(f"==> {entry.directory}")

        if self.dry_run:
            self._echo(f"Would update {entry.name} in {entry.directory}")
            if not self.update_only:
                self._echo(f"Would build {entry.name} in {entry.directory}")
                self._echo(f"Would install {entry.name} in {entry.directory}")
            return

        with working_directory(entry.directory):
            phases.update(entry, self.runner)
            if self.update_only:
                return
            phases.build(entry, self.runner, self.lister)
            phases.install(entry, self.runner, self.lister)

    def process_one(self, entry: SoftwareEntry, summary: RunSummary | None = None) -> RunSummary:
        """Run one entry, recording rather than raising its failure."""
        summary = summary if summary is not None else RunSummary()
        summary.processed.append(entry.name)
        try:
            self.process(entry)
        except PhaseError as e:
            self._fail(summary, entry, str(e))
        except OSError as e:
            # Missing or unreadable checkout directory
            reason = f"{e.strerror}: {e.filename}" if e.filename else str(e)
            self._fail(summary, entry, reason)
        except Exception as e:
            # Overrides are arbitrary callables
            logger.debug("%s raised", entry.name, exc_info=True)
            self._fail(summary, entry, f"{type(e).__name__}: {e}")
        return summary

    def process_all(self, registry: SoftwareRegistry) -> RunSummary:
        """Run every entry in registry order."""
        summary = RunSummary()
        for entry in registry:
            self.process_one(entry, summary)
        logger.info(
            "Run finished: %d processed, %d failed",
            len(summary.processed),
            summary.failed,
        )
        return summary

    def _fail(self, summary: RunSummary, entry: SoftwareEntry, reason: str) -> None:
        summary.failures[entry.name] = reason
        logger.error("%s failed: %s", entry.name, reason)
