"""
Working-directory scoping.

The process cwd is shared by every entry. Each entry's phases run inside
``working_directory(entry.directory)`` and the previous cwd is restored
on the way out, including when a phase raises.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

logger = logging.getLogger(__name__)


@contextmanager
def working_directory(path: Path | str) -> Iterator[Path]:
    """Temporarily ``chdir`` into ``path``."""
    previous = os.getcwd()
    os.chdir(path)
    logger.debug("cwd -> %s", path)
    try:
        yield Path(path)
    finally:
        os.chdir(previous)
        logger.debug("cwd <- %s", previous)
