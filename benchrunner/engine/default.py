# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Engine used when the project's helper file doesn't supply one.

It measures nothing. It resolves the snapshot directory the same way a real
engine would, then logs the configuration and one record per benchmark that
would run. That keeps `bench` useful for checking discovery and registration
on a project that hasn't wired up an engine yet.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

from benchrunner.config.schema import DEFAULT_BENCH_DIRECTORY, DEFAULT_SNAPSHOT_DIRECTORY
from benchrunner.engine.interfaces import BenchEngine
from benchrunner.options.models import CanonicalConfig
from benchrunner.suites.models import BenchSuite

logger = logging.getLogger(__name__)


def resolve_snapshot_directory(config: CanonicalConfig, default: Path) -> Optional[Path]:
    """
    Where snapshots go for this run, or None when snapshotting is disabled.

    An explicit `output` wins over the default; an empty `output` disables
    snapshots entirely.
    """
    if "output" not in config:
        return default
    output = config["output"]
    return Path(output) if output else None


class DefaultEngine(BenchEngine):
    """Logs what would run. Used when bench_helper.py doesn't provide an engine."""

    def __init__(
        self,
        snapshot_directory: Path = Path(DEFAULT_BENCH_DIRECTORY) / DEFAULT_SNAPSHOT_DIRECTORY,
    ) -> None:
        self.snapshot_directory = snapshot_directory
        self.runs: list[tuple[CanonicalConfig, list[BenchSuite]]] = []

    def run(self, config: CanonicalConfig, suites: Sequence[BenchSuite]) -> None:
        snapshots = resolve_snapshot_directory(config, self.snapshot_directory)
        self.runs.append((config, list(suites)))

        logger.info(
            "Benchmark run configured",
            extra={
                "config": config.as_dict(),
                "snapshot_directory": str(snapshots) if snapshots is not None else None,
                "suites": len(suites),
            },
        )
        for suite in suites:
            for benchmark in suite.benchmarks:
                logger.info(
                    "Benchmark registered",
                    extra={
                        "suite": suite.name,
                        "benchmark": benchmark.name,
                        "source": str(suite.source),
                    },
                )
