"""
Command and Receipt models — the execution contract.

A Command describes one external process (program + ordered arguments).
A Receipt describes what happened when a runner executed it. Runners
return receipts, never exceptions: a failing command is data.
"""

from __future__ import annotations

import shlex
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


class Command(BaseModel):
    """A single external command, never a shell string.

    Arguments are kept as a list all the way to ``subprocess.run`` so
    directory names and prefixes are never re-parsed by a shell.
    """

    model_config = ConfigDict(frozen=True)

    program: str
    args: tuple[str, ...] = ()
    privileged: bool = False        # run through sudo
    capture: bool = False           # collect stdout instead of streaming it

    @property
    def argv(self) -> list[str]:
        """Full argument vector handed to the process runner."""
        argv = [self.program, *self.args]
        if self.privileged:
            argv = ["sudo", *argv]
        return argv

    @property
    def display(self) -> str:
        """Shell-quoted form, for logs and dry-run output only."""
        return shlex.join(self.argv)

    def __str__(self) -> str:
        return self.display


class Receipt(BaseModel):
    """Result of running one Command."""

    command: str
    status: Literal["ok", "failed"] = "ok"
    return_code: int = 0
    duration_ms: int = 0

    output: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the command succeeded."""
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        """Whether the command failed."""
        return self.status == "failed"

    @classmethod
    def success(cls, command: Command, output: str = "", **kwargs: Any) -> Receipt:
        """Create a success receipt."""
        return cls(command=command.display, status="ok", output=output, **kwargs)

    @classmethod
    def failure(
        cls,
        command: Command,
        error: str,
        return_code: int = 1,
        **kwargs: Any,
    ) -> Receipt:
        """Create a failure receipt."""
        return cls(
            command=command.display,
            status="failed",
            return_code=return_code,
            error=error,
            **kwargs,
        )
