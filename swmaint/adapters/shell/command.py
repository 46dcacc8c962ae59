"""
Subprocess runner — execute external commands for real.

This is the single place where ``subprocess.run`` is called. Commands
run in the process's current working directory (the pipeline scopes it
per entry), block until they exit, and have no timeout: builds take as
long as they take.
"""

from __future__ import annotations

import logging
import subprocess
import time

from swmaint.adapters.base import Runner
from swmaint.core.models.command import Command, Receipt

logger = logging.getLogger(__name__)

# Exit status a shell reports for "command not found"
_NOT_FOUND = 127


class SubprocessRunner(Runner):
    """Run commands with ``subprocess.run``.

    Output of non-capturing commands goes straight to the terminal so
    long builds show progress. Capturing commands (``Command.capture``)
    return their stdout in the receipt, decoded as UTF-8 with undecodable
    bytes replaced.
    """

    @property
    def name(self) -> str:
        return "subprocess"

    def run(self, command: Command) -> Receipt:
        logger.debug("Executing: %s", command.display)
        start = time.monotonic()

        try:
            if command.capture:
                result = subprocess.run(
                    command.argv,
                    capture_output=True,
                    text=True,
                    encoding="utf-8",
                    errors="replace",
                )
            else:
                result = subprocess.run(command.argv)
        except OSError as e:
            logger.error("Cannot execute %s: %s", command.program, e)
            return Receipt.failure(
                command,
                error=f"Cannot execute {command.program}: {e}",
                return_code=_NOT_FOUND,
            )
        except Exception as e:
            logger.exception("Running %s failed", command.display)
            return Receipt.failure(command, error=f"{type(e).__name__}: {e}")

        elapsed_ms = int((time.monotonic() - start) * 1000)
        output = (result.stdout or "") if command.capture else ""

        if result.returncode == 0:
            return Receipt.success(command, output=output, duration_ms=elapsed_ms)

        stderr = (result.stderr or "").strip() if command.capture else ""
        return Receipt.failure(
            command,
            error=stderr or f"Command exited with code {result.returncode}",
            return_code=result.returncode,
            output=output,
            duration_ms=elapsed_ms,
        )
