# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Shared pytest fixtures for benchrunner tests.

Fixtures here are available to every test file automatically.
Only what more than one test module needs lives here.
"""

import logging
import sys
import textwrap
from pathlib import Path
from typing import Callable, Iterator

import pytest

from benchrunner.logging.logger import PACKAGE_LOGGER, JsonFormatter


def _benchrunner_handlers() -> dict[str, list[logging.Handler]]:
    """Current handlers of the package logger and the test loggers, by logger name."""
    return {
        name: list(logging.getLogger(name).handlers)
        for name in list(logging.Logger.manager.loggerDict)
        if name == PACKAGE_LOGGER or name.startswith("benchrunner.test")
    }


@pytest.fixture(autouse=True)
def _isolate_process_state() -> Iterator[None]:
    """
    Undo what a run does to the interpreter: sys.path entries added by the
    project preparer, modules created by the loader, and handlers attached to
    the package logger (which would otherwise hold on to a stale capture stream).
    Handlers that were already there, such as pytest's own capture handlers,
    are left in place.
    """
    saved_path = list(sys.path)
    saved_modules = set(sys.modules)
    saved_handlers = _benchrunner_handlers()
    yield
    sys.path[:] = saved_path
    for name in set(sys.modules) - saved_modules:
        if name.startswith("benchrunner_bench_"):
            del sys.modules[name]
    for name, handlers in _benchrunner_handlers().items():
        logger = logging.getLogger(name)
        for handler in handlers:
            if isinstance(handler.formatter, JsonFormatter) and handler not in saved_handlers.get(name, []):
                logger.removeHandler(handler)
                handler.close()


def _write_file(path: Path, content: str) -> Path:
    """Write dedented content to path, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


def _suite_source(name: str, *bench_names: str) -> str:
    """Source of a benchmark file exporting one suite with the given benchmarks."""
    lines = [
        "from benchrunner import BenchSuite",
        "",
        f"SUITE = BenchSuite({name!r})",
    ]
    for bench in bench_names or ("noop",):
        lines += ["", "", "@SUITE.bench", f"def {bench}():", "    return None"]
    return "\n".join(lines) + "\n"


@pytest.fixture()
def bench_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    A minimal host project, used as the working directory.

    Layout:
        pyproject.toml
        mypkg/__init__.py
        bench/a_bench.py
        bench/sub/b_bench.py
    """
    _write_file(tmp_path / "pyproject.toml", '[project]\nname = "mypkg"\nversion = "0.0.1"\n')
    _write_file(tmp_path / "mypkg" / "__init__.py", "VALUE = 42\n")
    _write_file(tmp_path / "bench" / "a_bench.py", _suite_source("alpha", "first", "second"))
    _write_file(tmp_path / "bench" / "sub" / "b_bench.py", _suite_source("beta"))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture()
def runner_config_file(tmp_path: Path) -> Path:
    """A small valid runner config YAML file."""
    return _write_file(
        tmp_path / "runner.yaml",
        """\
        config_version: "1.0.0"
        bench_directory: "bench"
        load_workers: 2
        log_level: "DEBUG"
        """,
    )


@pytest.fixture()
def broken_yaml_file(tmp_path: Path) -> Path:
    """A file that isn't valid YAML at all."""
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("{{not: yaml: at: all:::", encoding="utf-8")
    return config_file


@pytest.fixture()
def write_file() -> Callable[[Path, str], Path]:
    """Fixture form of _write_file."""
    return _write_file


@pytest.fixture()
def write_suite() -> Callable[..., Path]:
    """Returns write(path, suite_name, *bench_names): a benchmark file exporting one suite."""

    def _write(path: Path, name: str, *bench_names: str) -> Path:
        return _write_file(path, _suite_source(name, *bench_names))

    return _write
