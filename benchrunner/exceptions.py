# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Exceptions raised by the bench run pipeline.

Every stage of a run (parse, prepare, load) fails with one of these. None of
them are retried: they travel up to the CLI boundary, which logs the message
and turns the exception type into an exit code.

Configuration file errors live in benchrunner.config.exceptions so the config
layer can be used without pulling in the rest of the pipeline.
"""

from pathlib import Path
from typing import Optional


class BenchError(Exception):
    """Base for all bench run failures."""


class InvalidOption(BenchError):
    """
    An unknown flag, or a known flag whose value has the wrong shape.

    Raised by the argument parser before any other stage runs.
    """

    def __init__(self, flag: str, value: Optional[str] = None) -> None:
        self.flag = flag
        self.value = value
        valstr = f"={value}" if value is not None else ""
        super().__init__(f"Invalid option: {flag}{valstr}")


class ProjectPreparationError(BenchError):
    """The host project could not be found, compiled, or put on the import path."""


class FileLoadError(BenchError):
    """
    A benchmark file (or the helper file) failed to load.

    Covers syntax errors, exceptions raised while the file executes, and
    files that don't register their suites the expected way.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}: {reason}")
