# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
The bench run pipeline.

    normalize -> prepare project -> locate files -> load helper and files -> engine

run_bench raises on the first failure and leaves exit codes to the CLI
boundary in benchrunner.cli.main. The canonical configuration is built once,
before anything is loaded, and is handed to the engine as an argument.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

from benchrunner.config.schema import RunnerConfig
from benchrunner.discovery.loader import BenchFileLoader, LoadResult
from benchrunner.discovery.locator import locate
from benchrunner.engine.default import DefaultEngine
from benchrunner.options.models import CanonicalConfig, ParsedArgs
from benchrunner.options.normalizer import normalize
from benchrunner.project.preparer import ProjectInfo, ProjectPreparer


class Preparer(Protocol):
    def ensure_loaded(self, skip_compile: bool) -> ProjectInfo: ...


@dataclass(frozen=True)
class RunOutcome:
    """Everything a completed run did, for logging and tests."""

    config: CanonicalConfig
    skip_compile: bool
    project: ProjectInfo
    located: tuple[Path, ...]
    load: LoadResult

    @property
    def ran(self) -> bool:
        """Whether the engine was invoked at all."""
        return self.load.engine is not None


def run_bench(
    parsed: ParsedArgs,
    runner_config: Optional[RunnerConfig] = None,
    preparer: Optional[Preparer] = None,
) -> RunOutcome:
    """
    Execute one bench run.

    Raises:
        ProjectPreparationError: The host project couldn't be compiled or loaded.
        FileLoadError: The helper or a benchmark file failed to load.
    """
    runner_config = runner_config or RunnerConfig()
    config, skip_compile = normalize(parsed.raw_options)

    if preparer is None:
        preparer = ProjectPreparer(
            compile_timeout_seconds=runner_config.compile_timeout_seconds,
            exclude_dirs=(runner_config.bench_directory,),
        )
    project = preparer.ensure_loaded(skip_compile)

    files = locate(parsed.paths, default_pattern=runner_config.default_pattern)

    loader = BenchFileLoader(
        config,
        helper_path=runner_config.helper_path,
        default_engine=lambda: DefaultEngine(runner_config.snapshot_path),
        load_workers=runner_config.load_workers,
    )
    result = loader.load(files)

    if result.engine is not None:
        result.engine.run(config, result.suites)

    return RunOutcome(
        config=config,
        skip_compile=skip_compile,
        project=project,
        located=tuple(files),
        load=result,
    )
