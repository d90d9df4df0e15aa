# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Benchmark file loader.

Given the located files, the loader:
  1. Does nothing at all if there are no files
  2. Loads bench/bench_helper.py once, if it exists, to get the engine
     (otherwise the default engine is used)
  3. Executes each benchmark file exactly once, in order, and collects the
     suites it exports

Registration is explicit. A benchmark file exports SUITE (one BenchSuite) or
SUITES (a list of them); the loader reads the export and adds the suites to a
per-run SuiteRegistry. A file that exports neither is a load error, not a
silent no-op.

The helper may export:
  ENGINE                 a ready BenchEngine instance
  create_engine(config)  a factory called with the canonical configuration

A failure in any file stops the load. Suites from files that already loaded
stay collected; there is no rollback.
"""

import importlib.util
import logging
import re
import sys
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Callable, Optional, Sequence

from benchrunner.config.schema import DEFAULT_BENCH_DIRECTORY, DEFAULT_HELPER_FILE
from benchrunner.engine.default import DefaultEngine
from benchrunner.engine.interfaces import BenchEngine
from benchrunner.exceptions import FileLoadError
from benchrunner.options.models import CanonicalConfig
from benchrunner.suites.models import BenchSuite
from benchrunner.suites.registry import SuiteRegistry

logger = logging.getLogger(__name__)

DEFAULT_HELPER_PATH = Path(DEFAULT_BENCH_DIRECTORY) / DEFAULT_HELPER_FILE


@dataclass(frozen=True)
class LoadResult:
    """
    Outcome of loading a file list.

    engine is None only when there was nothing to load.
    """

    helper: Optional[Path]
    engine: Optional[BenchEngine]
    files: tuple[Path, ...]
    suites: tuple[BenchSuite, ...]


def load_module(path: Path) -> ModuleType:
    """
    Execute a Python file as a fresh module and return it.

    The module is registered in sys.modules under a name derived from its
    resolved path while it runs, so dataclasses and pickling inside the file
    work. On failure the half-initialized module is removed again.

    Raises:
        FileLoadError: Missing file, syntax error, or any exception raised
            while the file executes, sys.exit() included.
    """
    resolved = path.resolve()
    if not resolved.is_file():
        raise FileLoadError(path, "file not found")

    stem = re.sub(r"\W", "_", resolved.stem)
    mod_name = f"benchrunner_bench_{stem}_{abs(hash(str(resolved)))}"
    spec = importlib.util.spec_from_file_location(mod_name, str(resolved))
    if spec is None or spec.loader is None:
        raise FileLoadError(path, "cannot be imported as a Python module")

    module = importlib.util.module_from_spec(spec)
    sys.modules[mod_name] = module
    try:
        spec.loader.exec_module(module)
    except (Exception, SystemExit) as err:
        sys.modules.pop(mod_name, None)
        raise FileLoadError(path, f"{type(err).__name__}: {err}") from err

    return module


def collect_suites(module: ModuleType, path: Path) -> list[BenchSuite]:
    """
    Read the SUITE / SUITES export of a loaded benchmark file.

    Raises:
        FileLoadError: No export, both exports, or values that aren't BenchSuite.
    """
    has_single = hasattr(module, "SUITE")
    has_many = hasattr(module, "SUITES")

    if has_single and has_many:
        raise FileLoadError(path, "exports both SUITE and SUITES; pick one")
    if not has_single and not has_many:
        raise FileLoadError(path, "must export SUITE (BenchSuite) or SUITES (list of BenchSuite)")

    if has_single:
        candidates = [module.SUITE]
    else:
        if not isinstance(module.SUITES, (list, tuple)):
            raise FileLoadError(
                path, f"SUITES must be a list or tuple, got {type(module.SUITES).__name__}"
            )
        candidates = list(module.SUITES)

    for candidate in candidates:
        if not isinstance(candidate, BenchSuite):
            raise FileLoadError(
                path, f"unsupported suite export type {type(candidate).__name__}; expected BenchSuite"
            )
        if candidate.source is None:
            candidate.source = path

    return candidates


def _engine_from_helper(module: ModuleType, path: Path, config: CanonicalConfig) -> Optional[BenchEngine]:
    """Pull the engine out of a loaded helper module, or None if it doesn't provide one."""
    if hasattr(module, "ENGINE"):
        engine = module.ENGINE
    elif hasattr(module, "create_engine"):
        try:
            engine = module.create_engine(config)
        except (Exception, SystemExit) as err:
            raise FileLoadError(path, f"create_engine failed: {type(err).__name__}: {err}") from err
    else:
        return None

    if not isinstance(engine, BenchEngine):
        raise FileLoadError(
            path, f"engine must be a BenchEngine, got {type(engine).__name__}"
        )
    return engine


class BenchFileLoader:
    """
    Loads the helper and benchmark files for one run.

    Args:
        config: Canonical configuration, passed to the helper's create_engine.
        helper_path: Location of the optional helper script.
        default_engine: Factory for the engine used when the helper doesn't supply one.
        load_workers: Threads used to execute benchmark files. 1 means sequential.
    """

    def __init__(
        self,
        config: CanonicalConfig,
        helper_path: Path = DEFAULT_HELPER_PATH,
        default_engine: Callable[[], BenchEngine] = DefaultEngine,
        load_workers: int = 1,
    ) -> None:
        if load_workers < 1:
            raise ValueError(f"load_workers must be >= 1, got {load_workers}")
        self.config = config
        self.helper_path = helper_path
        self.default_engine = default_engine
        self.load_workers = load_workers

    def load(self, files: Sequence[Path]) -> LoadResult:
        """
        Load the helper and every file once, returning what was loaded.

        Raises:
            FileLoadError: The helper or a benchmark file failed to load.
        """
        if not files:
            logger.info("No benchmark files to load")
            return LoadResult(helper=None, engine=None, files=(), suites=())

        helper, engine = self._load_helper()

        seen: set[Path] = set()
        if helper is not None:
            seen.add(helper.resolve())

        unique: list[Path] = []
        for path in files:
            key = path.resolve()
            if key in seen:
                logger.debug("Skipping already loaded file", extra={"path": str(path)})
                continue
            seen.add(key)
            unique.append(path)

        registry = SuiteRegistry()
        if self.load_workers > 1 and len(unique) > 1:
            self._load_parallel(unique, registry)
        else:
            for path in unique:
                self._register(path, self._load_file(path), registry)

        logger.info(
            "Benchmark files loaded",
            extra={
                "files": len(unique),
                "suites": len(registry),
                "helper": str(helper) if helper is not None else None,
            },
        )
        return LoadResult(
            helper=helper,
            engine=engine,
            files=tuple(unique),
            suites=tuple(registry.suites()),
        )

    def _load_helper(self) -> tuple[Optional[Path], BenchEngine]:
        if not self.helper_path.is_file():
            logger.debug("No helper file, using default engine", extra={"path": str(self.helper_path)})
            return None, self.default_engine()

        module = load_module(self.helper_path)
        engine = _engine_from_helper(module, self.helper_path, self.config)
        if engine is None:
            logger.debug("Helper provides no engine, using default", extra={"path": str(self.helper_path)})
            engine = self.default_engine()

        logger.info(
            "Helper loaded",
            extra={"path": str(self.helper_path), "engine": type(engine).__name__},
        )
        return self.helper_path, engine

    def _load_file(self, path: Path) -> list[BenchSuite]:
        module = load_module(path)
        suites = collect_suites(module, path)
        if not suites:
            logger.warning("Benchmark file exports no suites", extra={"path": str(path)})
        logger.debug("Loaded benchmark file", extra={"path": str(path), "suites": len(suites)})
        return suites

    def _register(self, path: Path, suites: list[BenchSuite], registry: SuiteRegistry) -> None:
        for suite in suites:
            try:
                registry.register(suite)
            except ValueError as err:
                raise FileLoadError(path, str(err)) from err

    def _load_parallel(self, files: list[Path], registry: SuiteRegistry) -> None:
        """
        Execute files on a thread pool, registering results in file order.

        Blocks until every file has loaded or one failed. On failure, files
        not yet started are cancelled; ones already running finish first.
        """
        with ThreadPoolExecutor(
            max_workers=self.load_workers, thread_name_prefix="BenchLoader"
        ) as pool:
            futures: list[Future[list[BenchSuite]]] = [
                pool.submit(self._load_file, path) for path in files
            ]
            try:
                for path, future in zip(files, futures):
                    self._register(path, future.result(), registry)
            except BaseException:
                for future in futures:
                    future.cancel()
                raise
