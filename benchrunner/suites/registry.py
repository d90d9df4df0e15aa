# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Suite registry for a single bench run.

The loader adds every suite a benchmark file exports; the engine receives
the registry's contents in registration order. There is one registry per
run, created by the loader, so nothing about registration lives in module
globals.

Suite names are unique within a run. Two files defining the same suite name
is almost always a copy-paste mistake, and silently running both would make
results ambiguous.
"""

import logging
import threading

from benchrunner.suites.models import BenchSuite

logger = logging.getLogger(__name__)


class SuiteRegistry:
    """Ordered, name-unique collection of suites. Safe to call from loader threads."""

    def __init__(self) -> None:
        self._suites: dict[str, BenchSuite] = {}
        self._lock = threading.Lock()

    def register(self, suite: BenchSuite) -> None:
        """
        Register a suite under its name.

        Raises:
            ValueError: If a suite with the same name is already registered.
        """
        with self._lock:
            existing = self._suites.get(suite.name)
            if existing is not None:
                raise ValueError(
                    f"Suite '{suite.name}' is already registered from {existing.source}"
                )
            self._suites[suite.name] = suite
        logger.debug(
            "registered_suite",
            extra={
                "suite": suite.name,
                "benchmarks": len(suite),
                "source": str(suite.source),
            },
        )

    def get(self, name: str) -> BenchSuite:
        """
        Retrieve a registered suite by name.

        Raises:
            KeyError: If `name` is not registered.
        """
        if name not in self._suites:
            available = sorted(self._suites.keys())
            raise KeyError(f"Unknown suite '{name}'. Available: {available}")
        return self._suites[name]

    def suites(self) -> list[BenchSuite]:
        """All registered suites, in registration order."""
        return list(self._suites.values())

    def names(self) -> list[str]:
        return list(self._suites.keys())

    def __len__(self) -> int:
        return len(self._suites)

    def __contains__(self, name: object) -> bool:
        return name in self._suites
