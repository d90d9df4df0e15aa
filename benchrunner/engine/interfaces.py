# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Abstract base class for benchmark execution engines.

The runner does discovery and loading; an engine does everything after:
timing, statistics, memory sampling, output and snapshots. The contract is a
single entry call that receives the canonical configuration explicitly along
with the suites collected from benchmark files. Engines must treat the
configuration as read-only.

A project picks its engine in bench/bench_helper.py, either by exporting a
ready instance as ENGINE or a factory `create_engine(config)`.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from benchrunner.options.models import CanonicalConfig
from benchrunner.suites.models import BenchSuite


class BenchEngine(ABC):
    """
    Base class for all execution engines.

    Contract:
        run(config, suites) executes every benchmark of every suite, in order,
        and returns when done. Failures propagate as exceptions.
    """

    @abstractmethod
    def run(self, config: CanonicalConfig, suites: Sequence[BenchSuite]) -> None:
        """
        Execute the suites.

        Args:
            config: The canonical run configuration (format, verbose, mem_stats, ...).
            suites: Suites in the order their files were loaded.
        """
        ...
