# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Benchmark file discovery.

Turns the path patterns from the command line into concrete files:

    bench                           -> bench/**/*_bench.py
    bench bench/str_*_bench.py      -> whatever that glob matches
    bench a_bench.py bench/**/*.py  -> both globs, concatenated in that order

Each pattern is expanded on its own, relative to the working directory, with
`**` matching any number of directories. Matches within one pattern are
sorted so discovery order doesn't depend on the filesystem. Results across
patterns are concatenated without deduplication; the loader takes care of
loading each file only once. A pattern that matches nothing is not an error.
"""

import glob
import logging
from pathlib import Path
from typing import Optional, Sequence

from benchrunner.config.schema import DEFAULT_BENCH_DIRECTORY, DEFAULT_FILE_PATTERN

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = f"{DEFAULT_BENCH_DIRECTORY}/{DEFAULT_FILE_PATTERN}"


def expand_pattern(pattern: str, root: Optional[Path] = None) -> list[Path]:
    """
    Expand one wildcard pattern into the regular files it matches, sorted.

    Relative patterns are resolved against `root` (default: the working
    directory); returned paths keep the pattern's relative form.
    """
    matches = glob.glob(pattern, root_dir=str(root) if root is not None else None, recursive=True)
    base = root if root is not None else Path()
    files = sorted(Path(match) for match in matches if (base / match).is_file())

    if not files:
        logger.debug("Pattern matched no files", extra={"pattern": pattern})
    return files


def locate(
    patterns: Sequence[str],
    default_pattern: str = DEFAULT_PATTERN,
    root: Optional[Path] = None,
) -> list[Path]:
    """
    Resolve path patterns, or the default pattern when there are none, into files.

    Returns:
        Files in pattern order, then sorted within each pattern. May be empty
        and may contain the same file more than once.
    """
    effective = list(patterns) if patterns else [default_pattern]

    files: list[Path] = []
    for pattern in effective:
        files.extend(expand_pattern(pattern, root))

    logger.info(
        "Benchmark files located",
        extra={
            "patterns": effective,
            "default": not patterns,
            "files": len(files),
        },
    )
    return files
