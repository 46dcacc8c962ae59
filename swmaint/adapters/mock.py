"""
Recording runner — universal test double for process execution.

Records every command it is asked to run (and the directory it would
have run in) without spawning anything. Configurable to fail specific
programs or subcommands and to return canned output.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from swmaint.adapters.base import Runner
from swmaint.core.models.command import Command, Receipt


@dataclass
class RecordedCall:
    """One command seen by the RecordingRunner."""

    command: Command
    cwd: str


class RecordingRunner(Runner):
    """Runner that records instead of executing.

    By default every command succeeds with empty output. Failures and
    outputs are keyed by the command's display prefix, so
    ``set_failure("git fetch")`` fails ``git fetch origin`` too.
    """

    def __init__(self):
        self._failures: dict[str, str] = {}
        self._outputs: dict[str, str] = {}
        self._calls: list[RecordedCall] = []

    @property
    def name(self) -> str:
        return "recording"

    @property
    def calls(self) -> list[RecordedCall]:
        """All commands this runner has received, in order."""
        return self._calls

    @property
    def call_count(self) -> int:
        return len(self._calls)

    @property
    def commands(self) -> list[str]:
        """Display strings of every recorded command."""
        return [c.command.display for c in self._calls]

    def set_failure(self, prefix: str, error: str = "Mock failure") -> None:
        """Make every command starting with ``prefix`` fail."""
        self._failures[prefix] = error

    def set_output(self, prefix: str, output: str) -> None:
        """Return ``output`` for every command starting with ``prefix``."""
        self._outputs[prefix] = output

    def run(self, command: Command) -> Receipt:
        self._calls.append(RecordedCall(command=command, cwd=os.getcwd()))
        display = command.display

        for prefix, error in self._failures.items():
            if display.startswith(prefix):
                return Receipt.failure(command, error=error)

        for prefix, output in self._outputs.items():
            if display.startswith(prefix):
                return Receipt.success(command, output=output)

        return Receipt.success(command)

    def reset(self) -> None:
        """Clear recorded calls and configured responses."""
        self._calls.clear()
        self._failures.clear()
        self._outputs.clear()
