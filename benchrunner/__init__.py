# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
benchrunner: command-line front end for running Python benchmarks.

The `bench` command turns its flags into a canonical run configuration,
prepares the host project, discovers `*_bench.py` files, loads them and
hands the suites they register to the execution engine.

Benchmark files only need the two names exported here:

    from benchrunner import BenchSuite

    SUITE = BenchSuite("strings")

    @SUITE.bench
    def join_small():
        "-".join(["a"] * 10)
"""

__version__ = "0.4.0"

from benchrunner.suites.models import Benchmark, BenchSuite  # noqa: E402

__all__ = ["Benchmark", "BenchSuite", "__version__"]
