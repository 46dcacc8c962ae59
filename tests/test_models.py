"""
Tests for domain models — Command, Receipt, SoftwareEntry.
"""

import pytest
from pydantic import ValidationError

from swmaint.core.models.command import Command, Receipt
from swmaint.core.models.software import PHASES, SoftwareEntry


class TestCommand:
    def test_argv(self):
        cmd = Command(program="git", args=("fetch", "origin"))
        assert cmd.argv == ["git", "fetch", "origin"]

    def test_privileged_argv(self):
        cmd = Command(program="make", args=("install",), privileged=True)
        assert cmd.argv == ["sudo", "make", "install"]

    def test_list_args_accepted(self):
        cmd = Command(program="make", args=["docs"])
        assert cmd.args == ("docs",)

    def test_display_quotes_arguments(self):
        cmd = Command(program="./configure", args=("--prefix=/opt/my tools",))
        assert cmd.display == "./configure '--prefix=/opt/my tools'"
        assert str(cmd) == cmd.display

    def test_frozen(self):
        cmd = Command(program="git")
        with pytest.raises(ValidationError):
            cmd.program = "hg"


class TestReceipt:
    def test_success(self):
        r = Receipt.success(Command(program="true"), output="done")
        assert r.ok
        assert not r.failed
        assert r.command == "true"
        assert r.output == "done"

    def test_failure(self):
        r = Receipt.failure(Command(program="false"), error="boom", return_code=2)
        assert r.failed
        assert r.return_code == 2
        assert r.error == "boom"


class TestSoftwareEntry:
    def test_minimal(self):
        e = SoftwareEntry(name="vim", directory="/src/vim")
        assert e.install_prefix == ""
        assert all(e.override_for(phase) is None for phase in PHASES)

    def test_trailing_separator_stripped(self):
        e = SoftwareEntry(name="vim", directory="/src/vim///")
        assert e.directory == "/src/vim"

    def test_root_directory_kept(self):
        assert SoftwareEntry(name="root", directory="/").directory == "/"

    def test_home_expanded(self, monkeypatch):
        monkeypatch.setenv("HOME", "/home/someone")
        e = SoftwareEntry(name="vim", directory="~/src/vim/", install_prefix="~/.local")
        assert e.directory == "/home/someone/src/vim"
        assert e.install_prefix == "/home/someone/.local"

    def test_relative_directory_rejected(self):
        with pytest.raises(ValidationError):
            SoftwareEntry(name="vim", directory="src/vim")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            SoftwareEntry(name="  ", directory="/src/vim")

    def test_key_is_casefolded(self):
        assert SoftwareEntry(name="NeoVim", directory="/x").key == "neovim"

    def test_override_for(self):
        def hook(entry, runner):
            return True

        e = SoftwareEntry(name="x", directory="/x", build_override=hook)
        assert e.override_for("build") is hook
        assert e.override_for("update") is None

    def test_override_for_unknown_phase(self):
        e = SoftwareEntry(name="x", directory="/x")
        with pytest.raises(ValueError, match="Unknown phase"):
            e.override_for("deploy")

    def test_non_callable_override_rejected(self):
        with pytest.raises(ValidationError):
            SoftwareEntry(name="x", directory="/x", update_override="git pull")

    def test_frozen(self):
        e = SoftwareEntry(name="x", directory="/x")
        with pytest.raises(ValidationError):
            e.install_prefix = "/usr"
