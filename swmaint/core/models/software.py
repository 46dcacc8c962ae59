"""
Software entry model — one maintained program.

An entry names a source checkout on disk, the prefix it installs into,
and optionally replaces any of the three phases (update, build, install)
with its own callable. Overrides are wired once, when the entry is built,
and entries are frozen afterwards.
"""

from __future__ import annotations

import os
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, field_validator

PHASES = ("update", "build", "install")

# hook(entry, runner) -> bool | None. The return value never triggers a
# fallback to the default phase behavior.
Hook = Callable[..., Any]


class SoftwareEntry(BaseModel):
    """A program kept up to date from its source checkout."""

    model_config = ConfigDict(frozen=True)

    name: str
    directory: str
    install_prefix: str = ""

    update_override: Hook | None = None
    build_override: Hook | None = None
    install_override: Hook | None = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("software name must not be empty")
        return value

    @field_validator("directory")
    @classmethod
    def _normalize_directory(cls, value: str) -> str:
        value = os.path.expanduser(value)
        if not os.path.isabs(value):
            raise ValueError(f"directory must be absolute: {value!r}")
        stripped = value.rstrip(os.sep)
        return stripped or os.sep

    @field_validator("install_prefix")
    @classmethod
    def _expand_prefix(cls, value: str) -> str:
        return os.path.expanduser(value) if value else ""

    @property
    def key(self) -> str:
        """Case-insensitive lookup key."""
        return self.name.casefold()

    def override_for(self, phase: str) -> Hook | None:
        """Return the override callable for a phase, if one is wired."""
        if phase not in PHASES:
            raise ValueError(f"Unknown phase '{phase}'. Valid: {', '.join(PHASES)}")
        return getattr(self, f"{phase}_override")
