"""Adapters — process runners and command builders for external tools.

Public re-exports for convenient access.
"""

from swmaint.adapters.base import Runner
from swmaint.adapters.mock import RecordingRunner
from swmaint.adapters.shell.command import SubprocessRunner

__all__ = [
    "RecordingRunner",
    "Runner",
    "SubprocessRunner",
]
