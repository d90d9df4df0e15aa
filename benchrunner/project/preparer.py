# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Host project preparation.

Before benchmark files load, the project they exercise has to be importable:
  1. Find the project root (nearest pyproject.toml or setup.py)
  2. Byte-compile its sources, unless --no-compile was given
  3. Put its source root at the front of sys.path

Compilation runs `python -m compileall` in a subprocess with a hard timeout.
It catches syntax errors in the project before any benchmark runs and warms
the bytecode cache so import time doesn't leak into the first measurement.
Any failure here is fatal for the run.
"""

import logging
import re
import subprocess
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from benchrunner.exceptions import ProjectPreparationError
from benchrunner.utils.paths import resolve_project_root, resolve_source_root

logger = logging.getLogger(__name__)

# Never byte-compile these, wherever they sit in the tree.
_ALWAYS_EXCLUDED: tuple[str, ...] = (
    r"\.[^/\\]+",
    "venv",
    "build",
    "dist",
    "node_modules",
    "__pycache__",
)


@dataclass(frozen=True)
class ProjectInfo:
    """What ensure_loaded found and did."""

    root: Path
    source_root: Path
    compiled: bool


def _exclude_regex(extra_dirs: Sequence[str]) -> str:
    names = list(_ALWAYS_EXCLUDED) + [re.escape(d) for d in extra_dirs]
    return r"(^|[/\\])(" + "|".join(names) + r")([/\\]|$)"


def compile_sources(
    source_root: Path,
    timeout_seconds: int = 120,
    exclude_dirs: Sequence[str] = (),
) -> float:
    """
    Byte-compile everything under source_root and return the elapsed seconds.

    Raises:
        ProjectPreparationError: If compileall reports errors, times out, or
            the interpreter can't be started.
    """
    command = [
        sys.executable,
        "-m",
        "compileall",
        "-q",
        "-x",
        _exclude_regex(exclude_dirs),
        ".",
    ]
    start = time.monotonic()

    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            timeout=timeout_seconds,
            cwd=str(source_root),
        )
    except subprocess.TimeoutExpired as err:
        raise ProjectPreparationError(
            f"Compiling {source_root} timed out after {timeout_seconds}s"
        ) from err
    except OSError as err:
        raise ProjectPreparationError(
            f"Cannot run the Python compiler for {source_root}: {err}"
        ) from err

    elapsed = time.monotonic() - start
    logger.debug(
        "Compilation finished",
        extra={
            "exit_code": result.returncode,
            "elapsed_seconds": round(elapsed, 3),
            "source_root": str(source_root),
        },
    )

    if result.returncode != 0:
        output = (result.stdout + result.stderr).strip()
        raise ProjectPreparationError(f"Compilation of {source_root} failed:\n{output}")

    return elapsed


def load_paths(source_root: Path) -> None:
    """Make the project importable by putting its source root first on sys.path."""
    entry = str(source_root)
    if entry in sys.path:
        sys.path.remove(entry)
    sys.path.insert(0, entry)


class ProjectPreparer:
    """
    Compiles the host project and loads its paths.

    Args:
        start: Directory to search upward from. Defaults to the working directory.
        compile_timeout_seconds: Hard limit for the compile subprocess.
        exclude_dirs: Directory names to leave out of compilation. The bench
            directory belongs here: benchmark files are checked when they load.
    """

    def __init__(
        self,
        start: Optional[Path] = None,
        compile_timeout_seconds: int = 120,
        exclude_dirs: Sequence[str] = ("bench",),
    ) -> None:
        self.start = start
        self.compile_timeout_seconds = compile_timeout_seconds
        self.exclude_dirs = tuple(exclude_dirs)

    def ensure_loaded(self, skip_compile: bool) -> ProjectInfo:
        """
        Compile the project unless skip_compile, then load its paths.

        Raises:
            ProjectPreparationError: No project found, or compilation failed.
        """
        try:
            root = resolve_project_root(self.start)
        except RuntimeError as err:
            raise ProjectPreparationError(str(err)) from err

        source_root = resolve_source_root(root)

        if skip_compile:
            logger.info("Skipping project compilation", extra={"project_root": str(root)})
        else:
            elapsed = compile_sources(source_root, self.compile_timeout_seconds, self.exclude_dirs)
            logger.info(
                "Project compiled",
                extra={"source_root": str(source_root), "elapsed_seconds": round(elapsed, 3)},
            )

        load_paths(source_root)
        return ProjectInfo(root=root, source_root=source_root, compiled=not skip_compile)
