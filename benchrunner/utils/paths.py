# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Path utilities for benchrunner.

The host project is whatever Python project the user runs `bench` from. It's
identified the same way pip identifies one: by a build file at its root.
"""

from pathlib import Path
from typing import Optional

PROJECT_MARKERS: tuple[str, ...] = ("pyproject.toml", "setup.py")


def resolve_project_root(start: Optional[Path] = None) -> Path:
    """
    Walk up from `start` (default: the working directory) to the project root.

    The project root is the nearest directory holding one of PROJECT_MARKERS.

    Raises:
        RuntimeError: If no ancestor directory holds a project marker.
    """
    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if any((candidate / marker).is_file() for marker in PROJECT_MARKERS):
            return candidate
    raise RuntimeError(
        f"Cannot find project root from {current}. "
        f"None of {', '.join(PROJECT_MARKERS)} found in any ancestor directory."
    )


def resolve_source_root(project_root: Path) -> Path:
    """Return `src/` for src-layout projects, otherwise the project root itself."""
    src = project_root / "src"
    return src if src.is_dir() else project_root
