"""
Runner base — the protocol contract between the engine and processes.

The engine never calls ``subprocess`` directly. Every external command
goes through a Runner, which makes the whole pipeline testable with a
recording double and keeps one place where processes are spawned.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from swmaint.core.models.command import Command, Receipt


class Runner(ABC):
    """Abstract base class for process runners.

    Runners execute a Command in the current working directory and
    return a Receipt. They NEVER raise for a failing command; the
    failure is captured in the Receipt with status='failed'.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The runner identifier (e.g., 'subprocess', 'recording')."""

    @abstractmethod
    def run(self, command: Command) -> Receipt:
        """Execute the command, blocking until it exits."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
