"""
Tests for the update, build and install phases.
"""

from pathlib import Path

import pytest

from swmaint.core.engine import phases
from swmaint.core.engine.phases import PhaseError
from swmaint.core.engine.workdir import working_directory
from swmaint.core.models.software import SoftwareEntry


def _entry(directory: Path, **kwargs) -> SoftwareEntry:
    return SoftwareEntry(name="tool", directory=str(directory), **kwargs)


# ── Update ──────────────────────────────────────────────────────────


class TestUpdate:
    def test_default_sequence(self, checkout, runner):
        with working_directory(checkout):
            phases.update(_entry(checkout), runner)
        assert runner.commands == [
            "git fetch origin",
            "git checkout master",
            "git merge --ff-only origin/master",
        ]
        assert all(Path(c.cwd).resolve() == checkout.resolve() for c in runner.calls)

    def test_stops_at_first_failure(self, checkout, runner):
        runner.set_failure("git checkout", error="pathspec 'master' did not match")
        with working_directory(checkout), pytest.raises(PhaseError) as exc:
            phases.update(_entry(checkout), runner)
        assert exc.value.phase == "update"
        assert "git checkout master" in str(exc.value)
        assert runner.commands == ["git fetch origin", "git checkout master"]

    def test_override_replaces_default(self, checkout, runner):
        seen = []

        def hook(entry, r):
            seen.append((entry.name, r))
            return True

        phases.update(_entry(checkout, update_override=hook), runner)
        assert seen == [("tool", runner)]
        assert runner.call_count == 0

    def test_failed_override_does_not_fall_back(self, checkout, runner):
        phases.update(_entry(checkout, update_override=lambda e, r: False), runner)
        assert runner.call_count == 0


# ── Build ───────────────────────────────────────────────────────────


class TestBuild:
    def test_nothing_to_build(self, checkout, runner, lister):
        with working_directory(checkout):
            phases.build(_entry(checkout), runner, lister)
        assert runner.call_count == 0
        assert lister.calls == []

    def test_configure_with_prefix(self, checkout, runner, lister):
        (checkout / "configure").write_text("#!/bin/sh\n")
        with working_directory(checkout):
            phases.build(_entry(checkout, install_prefix="/opt/tool"), runner, lister)
        assert runner.commands == ["./configure --prefix=/opt/tool"]

    def test_configure_without_prefix(self, checkout, runner, lister):
        (checkout / "configure").write_text("#!/bin/sh\n")
        with working_directory(checkout):
            phases.build(_entry(checkout), runner, lister)
        assert runner.commands == ["./configure"]

    def test_make_without_docs(self, checkout, runner, lister):
        (checkout / "Makefile").write_text("all:\n")
        with working_directory(checkout):
            phases.build(_entry(checkout), runner, lister)
        assert runner.commands == ["make"]
        assert len(lister.calls) == 1

    def test_configure_make_docs(self, checkout, runner, lister):
        (checkout / "configure").write_text("#!/bin/sh\n")
        (checkout / "Makefile").write_text("all:\ndocs:\n")
        lister.targets = {"all", "docs"}
        with working_directory(checkout):
            phases.build(_entry(checkout, install_prefix="/usr/local"), runner, lister)
        assert runner.commands == ["./configure --prefix=/usr/local", "make", "make docs"]

    def test_failed_make_skips_docs(self, checkout, runner, lister):
        (checkout / "Makefile").write_text("all:\n")
        lister.targets = {"docs"}
        runner.set_failure("make")
        with working_directory(checkout), pytest.raises(PhaseError, match="build failed"):
            phases.build(_entry(checkout), runner, lister)
        assert runner.commands == ["make"]
        assert lister.calls == []

    def test_override(self, checkout, runner, lister):
        (checkout / "Makefile").write_text("all:\n")
        calls = []
        entry = _entry(checkout, build_override=lambda e, r: calls.append(e.name))
        with working_directory(checkout):
            phases.build(entry, runner, lister)
        assert calls == ["tool"]
        assert runner.call_count == 0


# ── Install ─────────────────────────────────────────────────────────


class TestInstall:
    def test_default_install(self, checkout, runner, lister):
        with working_directory(checkout):
            phases.install(_entry(checkout), runner, lister)
        assert runner.commands == ["sudo make install"]
        assert runner.calls[0].command.privileged

    def test_install_docs(self, checkout, runner, lister):
        lister.targets = {"install", "install-docs"}
        with working_directory(checkout):
            phases.install(_entry(checkout), runner, lister)
        assert runner.commands == ["sudo make install", "sudo make install-docs"]

    def test_failed_install(self, checkout, runner, lister):
        runner.set_failure("sudo make install", error="permission denied")
        with working_directory(checkout), pytest.raises(PhaseError) as exc:
            phases.install(_entry(checkout), runner, lister)
        assert exc.value.receipt.error == "permission denied"

    def test_override(self, checkout, runner, lister):
        entry = _entry(checkout, install_override=lambda e, r: None)
        phases.install(entry, runner, lister)
        assert runner.call_count == 0
        assert lister.calls == []


# ── Working directory ───────────────────────────────────────────────


class TestWorkingDirectory:
    def test_restored_after_success(self, checkout, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with working_directory(checkout) as path:
            assert Path.cwd().resolve() == checkout.resolve()
            assert path == checkout
        assert Path.cwd().resolve() == tmp_path.resolve()

    def test_restored_after_exception(self, checkout, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(RuntimeError):
            with working_directory(checkout):
                raise RuntimeError("build exploded")
        assert Path.cwd().resolve() == tmp_path.resolve()

    def test_missing_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(FileNotFoundError):
            with working_directory(tmp_path / "nope"):
                pass
        assert Path.cwd().resolve() == tmp_path.resolve()
