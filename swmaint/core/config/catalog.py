"""
Built-in catalog — the hand-maintained list of software.

This is the registry used when no software.yml is found. Edit it the
same way you would edit the YAML file: one entry per checkout, with
overrides only where the default git/configure/make sequence is wrong.

Checkouts live under $SWMAINT_SRC_ROOT (default ~/src) and install
into $SWMAINT_PREFIX (default ~/.local).
"""

from __future__ import annotations

import os

from swmaint.core.config import hooks
from swmaint.core.models.software import SoftwareEntry
from swmaint.core.registry import SoftwareRegistry

DEFAULT_SRC_ROOT = "~/src"
DEFAULT_PREFIX = "~/.local"


def src_root() -> str:
    return os.path.expanduser(os.environ.get("SWMAINT_SRC_ROOT", DEFAULT_SRC_ROOT))


def user_prefix() -> str:
    return os.path.expanduser(os.environ.get("SWMAINT_PREFIX", DEFAULT_PREFIX))


def default_entries() -> list[SoftwareEntry]:
    root = src_root()
    prefix = user_prefix()

    def checkout(name: str) -> str:
        return os.path.join(root, name)

    return [
        SoftwareEntry(
            name="Git",
            directory=checkout("git"),
            install_prefix=prefix,
            # No configure script in a fresh clone; the Makefile takes prefix=
            build_override=hooks.make_prefix,
            install_override=hooks.make_prefix_install,
        ),
        SoftwareEntry(
            name="Vim",
            directory=checkout("vim"),
            install_prefix=prefix,
        ),
        SoftwareEntry(
            name="Neovim",
            directory=checkout("neovim"),
            install_prefix=prefix,
            build_override=hooks.cmake_build,
            install_override=hooks.cmake_install,
        ),
        SoftwareEntry(
            name="tmux",
            directory=checkout("tmux"),
        ),
        SoftwareEntry(
            name="mutt",
            directory=checkout("mutt"),
            install_prefix=prefix,
        ),
        SoftwareEntry(
            name="dotfiles",
            directory=os.path.expanduser("~/.dotfiles"),
            update_override=hooks.git_pull,
            build_override=hooks.skip,
            install_override=hooks.skip,
        ),
    ]


def default_registry() -> SoftwareRegistry:
    """Build the built-in registry."""
    return SoftwareRegistry(default_entries())
