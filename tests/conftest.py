"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest

from swmaint.adapters.mock import RecordingRunner
from swmaint.core.models.software import SoftwareEntry
from swmaint.core.registry import SoftwareRegistry


@pytest.fixture(autouse=True)
def not_superuser(monkeypatch):
    """Tests may run as root in containers; the CLI must not refuse them."""
    monkeypatch.setattr("swmaint.main.is_superuser", lambda: False)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch):
    """Keep the user's real software.yml and log settings out of tests."""
    monkeypatch.delenv("SWMAINT_CONFIG", raising=False)
    monkeypatch.delenv("SWMAINT_LOG_FILE", raising=False)
    monkeypatch.delenv("SWMAINT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SWMAINT_LOG_FILE_LEVEL", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))


@pytest.fixture(autouse=True)
def restore_root_logger():
    """The CLI reconfigures the root logger; undo it after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def checkout(tmp_path: Path) -> Path:
    """An empty checkout directory."""
    path = tmp_path / "src" / "tool"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def make_entry(tmp_path: Path):
    """Factory for entries whose directory exists."""

    def _make(name: str, **kwargs) -> SoftwareEntry:
        directory = tmp_path / "src" / name.lower()
        directory.mkdir(parents=True, exist_ok=True)
        return SoftwareEntry(name=name, directory=str(directory), **kwargs)

    return _make


@pytest.fixture
def registry(make_entry) -> SoftwareRegistry:
    return SoftwareRegistry(
        [
            make_entry("vim", install_prefix="/opt/vim"),
            make_entry("Git"),
            make_entry("Mutt"),
        ]
    )


class TargetStub:
    """Stands in for make target discovery; records each directory asked."""

    def __init__(self, targets=()):
        self.targets = set(targets)
        self.calls: list[str] = []

    def __call__(self, directory: str, runner) -> set[str]:
        self.calls.append(directory)
        return set(self.targets)


@pytest.fixture
def lister() -> TargetStub:
    return TargetStub()
