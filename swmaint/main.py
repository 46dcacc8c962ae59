"""
swmaint — CLI entrypoint.

Usage:
    swmaint                     update, build and install everything
    swmaint --list
    swmaint -s vim --update-only
    swmaint --dry-run
"""

from __future__ import annotations

import errno
import os
from pathlib import Path
from typing import Any

import click

from swmaint import __version__
from swmaint.adapters.shell.command import SubprocessRunner
from swmaint.core.config.loader import ConfigError, load_registry
from swmaint.core.engine.pipeline import Pipeline
from swmaint.core.observability.logging_config import resolve_level, setup_logging
from swmaint.core.registry import SoftwareRegistry

EXIT_SUPERUSER = 1
EXIT_INVALID_ARGUMENT = errno.EINVAL  # 22


def is_superuser() -> bool:
    return os.geteuid() == 0


class SwmaintCommand(click.Command):
    """Root command with the process-level guards.

    The superuser check runs before any option is parsed, so even
    ``--help`` is refused as root. Usage errors (unknown option, missing
    option value) exit with EINVAL instead of click's default 2.
    """

    def make_context(
        self,
        info_name: str | None,
        args: list[str],
        parent: click.Context | None = None,
        **extra: Any,
    ) -> click.Context:
        if is_superuser():
            click.secho(
                "Error: refusing to run as root. Run swmaint as the user who "
                "owns the checkouts; install steps use sudo when needed.",
                fg="red",
                err=True,
            )
            raise click.exceptions.Exit(EXIT_SUPERUSER)
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.exit_code = EXIT_INVALID_ARGUMENT
            raise


@click.command(
    cls=SwmaintCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, "-v", "--version", prog_name="swmaint")
@click.option("-n", "--dry-run", is_flag=True, help="Show what would be done, do nothing.")
@click.option("-l", "--list", "list_only", is_flag=True, help="List known software and exit.")
@click.option("--update-only", is_flag=True, help="Update checkouts, skip build and install.")
@click.option(
    "-s",
    "--software",
    "software",
    metavar="NAME",
    default=None,
    help="Process only this software (case-insensitive).",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to software.yml (default: $SWMAINT_CONFIG, then ~/.config/swmaint).",
)
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option("--quiet", "-q", is_flag=True, help="Only log errors.")
@click.pass_context
def cli(
    ctx: click.Context,
    dry_run: bool,
    list_only: bool,
    update_only: bool,
    software: str | None,
    config_path: Path | None,
    debug: bool,
    quiet: bool,
) -> None:
    """Update, build and install software from its source checkouts.

    For every known program: git fetch/checkout/merge, then configure,
    make and sudo make install, unless the program overrides a phase.
    """
    ctx.ensure_object(dict)

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(
        level=resolve_level(debug, quiet, os.environ.get("SWMAINT_LOG_LEVEL")),
        log_file=os.environ.get("SWMAINT_LOG_FILE"),
        log_file_level=os.environ.get("SWMAINT_LOG_FILE_LEVEL"),
    )

    registry = _resolve_registry(ctx, config_path)

    if list_only:
        for name in registry.names_sorted():
            click.echo(name)
        return

    pipeline = Pipeline(
        runner=ctx.obj.get("runner") or SubprocessRunner(),
        dry_run=dry_run,
        update_only=update_only,
    )

    if software is not None:
        entry = registry.find(software)
        if entry is None:
            click.secho(
                f"Error: unknown software '{software}'. Use --list to see known names.",
                fg="red",
                err=True,
            )
            ctx.exit(EXIT_INVALID_ARGUMENT)
        pipeline.process_one(entry)
        return

    summary = pipeline.process_all(registry)
    if not summary.all_ok:
        click.secho(
            f"{summary.failed} of {len(summary.processed)} failed: "
            f"{', '.join(summary.failures)}",
            fg="yellow",
            err=True,
        )


def _resolve_registry(ctx: click.Context, config_path: Path | None) -> SoftwareRegistry:
    """Registry from ctx.obj (embedding, tests) or from configuration."""
    if "registry" in ctx.obj:
        return ctx.obj["registry"]
    try:
        return load_registry(config_path)
    except ConfigError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        ctx.exit(EXIT_INVALID_ARGUMENT)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
