"""
Configuration loader — reads software.yml into a SoftwareRegistry.

Reads YAML, validates it against Pydantic schemas, resolves override
recipe names and returns the registry. When no file exists anywhere on
the search path, the built-in catalog is used instead.

Example:

    software:
      - name: Vim
        directory: ~/src/vim
        prefix: ~/.local
      - name: Neovim
        directory: ~/src/neovim
        prefix: ~/.local
        overrides:
          build: cmake-build
          install: cmake-install
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from swmaint.core.config.catalog import default_registry
from swmaint.core.config.errors import ConfigError
from swmaint.core.config.hooks import get_hook
from swmaint.core.models.software import PHASES, SoftwareEntry
from swmaint.core.registry import SoftwareRegistry

logger = logging.getLogger(__name__)

# Default config filename
SOFTWARE_CONFIG_FILE = "software.yml"
SCHEMA_VERSION = 1

__all__ = [
    "ConfigError",
    "SOFTWARE_CONFIG_FILE",
    "find_config_file",
    "load_registry",
    "parse_registry",
]


class OverridesSpec(BaseModel):
    """Recipe names per phase, as written in YAML."""

    model_config = ConfigDict(extra="forbid")

    update: str | None = None
    build: str | None = None
    install: str | None = None


class SoftwareSpec(BaseModel):
    """One ``software:`` item, as written in YAML."""

    model_config = ConfigDict(extra="forbid")

    name: str
    directory: str
    prefix: str = ""
    overrides: OverridesSpec = Field(default_factory=OverridesSpec)


class RegistrySpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    version: int = SCHEMA_VERSION
    software: list[SoftwareSpec] = Field(default_factory=list)

    @field_validator("version")
    @classmethod
    def _known_version(cls, value: int) -> int:
        if value != SCHEMA_VERSION:
            raise ValueError(f"unsupported version {value} (expected {SCHEMA_VERSION})")
        return value


def default_config_path() -> Path:
    """``$XDG_CONFIG_HOME/swmaint/software.yml``."""
    base = os.environ.get("XDG_CONFIG_HOME") or os.path.expanduser("~/.config")
    return Path(base) / "swmaint" / SOFTWARE_CONFIG_FILE


def find_config_file(explicit: Path | None = None) -> Path | None:
    """Locate the registry file.

    Precedence: explicit path > $SWMAINT_CONFIG > XDG default location.
    An explicit or environment path is returned even if missing, so the
    caller reports it instead of silently using the built-in catalog.

    Returns:
        Path to software.yml, or None if no file is configured or found.
    """
    if explicit is not None:
        return explicit

    env_path = os.environ.get("SWMAINT_CONFIG")
    if env_path:
        return Path(env_path).expanduser()

    candidate = default_config_path()
    if candidate.is_file():
        return candidate

    return None


def _to_entry(spec: SoftwareSpec) -> SoftwareEntry:
    hooks = {
        f"{phase}_override": get_hook(name)
        for phase in PHASES
        if (name := getattr(spec.overrides, phase)) is not None
    }
    try:
        return SoftwareEntry(
            name=spec.name,
            directory=spec.directory,
            install_prefix=spec.prefix,
            **hooks,
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid software entry '{spec.name}': {e}") from e


def parse_registry(data: object, source: str = "<config>") -> SoftwareRegistry:
    """Validate already-parsed YAML data and build the registry."""
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {source}, got {type(data).__name__}")

    try:
        spec = RegistrySpec.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid software configuration in {source}: {e}") from e

    if not spec.software:
        logger.warning("%s declares no software", source)

    return SoftwareRegistry(_to_entry(item) for item in spec.software)


def load_registry(path: Path | None = None) -> SoftwareRegistry:
    """Load the software registry.

    Args:
        path: Explicit path to software.yml. If None, searches the
            environment and the XDG config directory.

    Returns:
        The registry from the file, or the built-in catalog if there is
        no file to read.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    path = find_config_file(path)

    if path is None:
        logger.debug("No %s found, using built-in catalog", SOFTWARE_CONFIG_FILE)
        return default_registry()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading software registry from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    registry = parse_registry(data, source=str(path))
    logger.info("Loaded %d software entries from %s", len(registry), path)
    return registry
