# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Benchmark and suite types.

These are what a benchmark file hands back to the runner. A file builds one
or more BenchSuite objects, attaches benchmark functions to them, and exports
them as SUITE or SUITES. The loader reads those exports; nothing registers
itself behind the runner's back.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

BenchFunction = Callable[[], object]


@dataclass(frozen=True)
class Benchmark:
    """A single named, zero-argument callable to be timed by the engine."""

    name: str
    func: BenchFunction


@dataclass
class BenchSuite:
    """
    A named group of benchmarks defined in one file.

    Benchmarks keep the order they were added in. `source` is filled in by
    the loader with the file the suite came from, for error messages and
    reporting.
    """

    name: str
    benchmarks: list[Benchmark] = field(default_factory=list)
    source: Optional[Path] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Suite name must not be empty")

    def add(self, name: str, func: BenchFunction) -> Benchmark:
        """
        Add a benchmark under `name`.

        Raises:
            ValueError: If the suite already has a benchmark with that name.
        """
        if any(b.name == name for b in self.benchmarks):
            raise ValueError(f"Suite '{self.name}' already has a benchmark named '{name}'")
        benchmark = Benchmark(name=name, func=func)
        self.benchmarks.append(benchmark)
        return benchmark

    def bench(self, func: BenchFunction) -> BenchFunction:
        """Decorator form of add(), using the function's name. Returns the function unchanged."""
        self.add(func.__name__, func)
        return func

    def __len__(self) -> int:
        return len(self.benchmarks)
