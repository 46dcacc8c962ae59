"""
Git commands — version control operations as command descriptors.

Uses the git CLI. Every function returns a Command; running it is the
runner's job.
"""

from __future__ import annotations

from swmaint.core.models.command import Command

DEFAULT_REMOTE = "origin"
DEFAULT_BRANCH = "master"


def _git(*args: str) -> Command:
    return Command(program="git", args=args)


def fetch(remote: str = DEFAULT_REMOTE) -> Command:
    return _git("fetch", remote)


def checkout(branch: str = DEFAULT_BRANCH) -> Command:
    return _git("checkout", branch)


def merge_ff_only(ref: str) -> Command:
    """Merge ``ref`` only if it is a fast-forward of HEAD."""
    return _git("merge", "--ff-only", ref)


def pull_ff_only() -> Command:
    """Pull the tracked upstream branch, fast-forward only."""
    return _git("pull", "--ff-only")


def update_sequence(
    remote: str = DEFAULT_REMOTE,
    branch: str = DEFAULT_BRANCH,
) -> list[Command]:
    """Fetch, check out ``branch``, fast-forward it to ``remote/branch``."""
    return [
        fetch(remote),
        checkout(branch),
        merge_ff_only(f"{remote}/{branch}"),
    ]
