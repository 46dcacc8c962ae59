"""
Build-system commands — configure scripts, make and cmake.

Detection helpers look at the current working directory, which the
pipeline scopes to the entry's checkout.
"""

from __future__ import annotations

from pathlib import Path

from swmaint.core.models.command import Command

CONFIGURE_SCRIPT = "configure"

# The names GNU make looks for, in its own search order
MAKEFILE_NAMES = ("GNUmakefile", "makefile", "Makefile")

CMAKE_BUILD_DIR = "build"


# ── Detection ───────────────────────────────────────────────────


def has_configure(directory: Path | str = ".") -> bool:
    return (Path(directory) / CONFIGURE_SCRIPT).is_file()


def has_makefile(directory: Path | str = ".") -> bool:
    return any((Path(directory) / name).is_file() for name in MAKEFILE_NAMES)


# ── Autotools / make ────────────────────────────────────────────


def configure(prefix: str = "") -> Command:
    """``./configure``, with ``--prefix`` only when a prefix is set."""
    args = (f"--prefix={prefix}",) if prefix else ()
    return Command(program=f"./{CONFIGURE_SCRIPT}", args=args)


def make(*targets: str, variables: dict[str, str] | None = None) -> Command:
    args = [f"{key}={value}" for key, value in (variables or {}).items()]
    args.extend(targets)
    return Command(program="make", args=tuple(args))


def make_privileged(*targets: str, variables: dict[str, str] | None = None) -> Command:
    return make(*targets, variables=variables).model_copy(update={"privileged": True})


def make_install() -> Command:
    return make_privileged("install")


# ── CMake ───────────────────────────────────────────────────────


def cmake_configure(prefix: str = "", build_dir: str = CMAKE_BUILD_DIR) -> Command:
    args = ["-S", ".", "-B", build_dir]
    if prefix:
        args.append(f"-DCMAKE_INSTALL_PREFIX={prefix}")
    return Command(program="cmake", args=tuple(args))


def cmake_build(build_dir: str = CMAKE_BUILD_DIR) -> Command:
    return Command(program="cmake", args=("--build", build_dir))


def cmake_install(build_dir: str = CMAKE_BUILD_DIR) -> Command:
    return Command(program="cmake", args=("--install", build_dir), privileged=True)
