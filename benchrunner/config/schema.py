# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Type-safe schema for the runner configuration file.

The runner configuration describes where benchmarks live and how the runner
itself behaves. It is not the canonical run configuration handed to the
engine; that one is built from command-line flags by the option normalizer.

The model uses pydantic v2's ConfigDict with:
  - frozen=True: immutability after construction
  - extra="forbid": unknown fields cause immediate failure
  - validate_default=True: even defaults get type-checked
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from benchrunner.logging.logger import VALID_LOG_LEVELS

DEFAULT_BENCH_DIRECTORY = "bench"
DEFAULT_FILE_PATTERN = "**/*_bench.py"
DEFAULT_HELPER_FILE = "bench_helper.py"
DEFAULT_SNAPSHOT_DIRECTORY = "snapshots"


class RunnerConfig(BaseModel):
    """
    Settings for a bench run that don't come from flags.

    Every field has a default, so running without a config file is the same
    as loading a file that only carries `config_version`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    config_version: str = Field(
        default="1.0.0",
        description="Schema version for compatibility tracking, e.g. '1.0.0'",
    )
    bench_directory: str = Field(
        default=DEFAULT_BENCH_DIRECTORY,
        min_length=1,
        description="Directory holding benchmark files, relative to the working directory",
    )
    file_pattern: str = Field(
        default=DEFAULT_FILE_PATTERN,
        min_length=1,
        description="Glob applied under bench_directory when no paths are given",
    )
    helper_file: str = Field(
        default=DEFAULT_HELPER_FILE,
        min_length=1,
        description="Optional helper script inside bench_directory, loaded before benchmarks",
    )
    snapshot_directory: str = Field(
        default=DEFAULT_SNAPSHOT_DIRECTORY,
        description="Default snapshot directory inside bench_directory, used by the engine",
    )
    load_workers: int = Field(
        default=1,
        ge=1,
        le=64,
        description="Threads used to load benchmark files; 1 loads them sequentially",
    )
    compile_timeout_seconds: int = Field(
        default=120,
        ge=1,
        description="Hard timeout for byte-compiling the host project",
    )
    log_level: str = Field(
        default="INFO",
        description="One of DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path for file-based log output",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        upper = value.upper()
        if upper not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {VALID_LOG_LEVELS}, got '{value}'")
        return upper

    @property
    def default_pattern(self) -> str:
        """The glob used when the command line names no paths."""
        return str(Path(self.bench_directory) / self.file_pattern)

    @property
    def helper_path(self) -> Path:
        return Path(self.bench_directory) / self.helper_file

    @property
    def snapshot_path(self) -> Path:
        return Path(self.bench_directory) / self.snapshot_directory
