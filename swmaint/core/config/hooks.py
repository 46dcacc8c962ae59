"""
Override recipes — reusable phase overrides, addressable by name.

The built-in catalog wires these directly; a YAML registry refers to
them by name:

    overrides:
      update: git-pull
      build: cmake-build
      install: cmake-install

Every recipe has the override signature ``hook(entry, runner)`` and
raises PhaseError when one of its commands fails.
"""

from __future__ import annotations

from swmaint.adapters.base import Runner
from swmaint.adapters.build import autotools
from swmaint.adapters.vcs import git
from swmaint.core.config.errors import ConfigError
from swmaint.core.engine.phases import run_all, run_checked
from swmaint.core.models.software import Hook, SoftwareEntry


def skip(entry: SoftwareEntry, runner: Runner) -> bool:
    """Do nothing — for phases an entry does not have."""
    return True


def git_pull(entry: SoftwareEntry, runner: Runner) -> bool:
    """Fast-forward whatever branch the checkout tracks."""
    run_checked(runner, git.pull_ff_only(), "update")
    return True


def git_main(entry: SoftwareEntry, runner: Runner) -> bool:
    """The default update sequence, for repositories whose branch is main."""
    run_all(runner, git.update_sequence(branch="main"), "update")
    return True


def cmake_build(entry: SoftwareEntry, runner: Runner) -> bool:
    run_all(
        runner,
        [autotools.cmake_configure(entry.install_prefix), autotools.cmake_build()],
        "build",
    )
    return True


def cmake_install(entry: SoftwareEntry, runner: Runner) -> bool:
    run_checked(runner, autotools.cmake_install(), "install")
    return True


def _prefix_variables(entry: SoftwareEntry) -> dict[str, str]:
    return {"prefix": entry.install_prefix} if entry.install_prefix else {}


def make_prefix(entry: SoftwareEntry, runner: Runner) -> bool:
    """``make prefix=...`` for Makefile-only projects without configure."""
    run_checked(runner, autotools.make(variables=_prefix_variables(entry)), "build")
    return True


def make_prefix_install(entry: SoftwareEntry, runner: Runner) -> bool:
    run_checked(
        runner,
        autotools.make_privileged("install", variables=_prefix_variables(entry)),
        "install",
    )
    return True


HOOKS: dict[str, Hook] = {
    "skip": skip,
    "git-pull": git_pull,
    "git-main": git_main,
    "cmake-build": cmake_build,
    "cmake-install": cmake_install,
    "make-prefix": make_prefix,
    "make-prefix-install": make_prefix_install,
}


def get_hook(name: str) -> Hook:
    """Resolve a recipe name to its callable."""
    try:
        return HOOKS[name]
    except KeyError:
        raise ConfigError(
            f"Unknown override '{name}'. Valid: {', '.join(sorted(HOOKS))}"
        ) from None
