# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for the runner config loader and schema.

We test:
  1. No path means defaults, no file access
  2. Valid YAML loads into a frozen, correct config object
  3. Unknown fields and bad values raise ConfigValidationError
  4. Missing files and broken YAML raise ConfigLoadError
  5. Derived paths follow bench_directory
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from benchrunner.config.exceptions import ConfigLoadError, ConfigValidationError
from benchrunner.config.loader import load_config
from benchrunner.config.schema import RunnerConfig


class TestDefaults:
    def test_no_path_returns_defaults(self) -> None:
        config = load_config(None)
        assert config == RunnerConfig()
        assert config.bench_directory == "bench"
        assert config.load_workers == 1
        assert config.log_level == "INFO"
        assert config.log_file is None

    def test_default_derived_paths(self) -> None:
        config = RunnerConfig()
        assert config.default_pattern == "bench/**/*_bench.py"
        assert config.helper_path == Path("bench/bench_helper.py")
        assert config.snapshot_path == Path("bench/snapshots")


class TestLoadValidConfig:
    def test_loads_valid_config(self, runner_config_file: Path) -> None:
        config = load_config(runner_config_file)
        assert config.config_version == "1.0.0"
        assert config.load_workers == 2
        assert config.log_level == "DEBUG"

    def test_log_level_is_uppercased(self, write_file, tmp_path: Path) -> None:
        path = write_file(tmp_path / "lower.yaml", 'log_level: "warning"\n')
        assert load_config(path).log_level == "WARNING"

    def test_custom_bench_directory_moves_derived_paths(self, write_file, tmp_path: Path) -> None:
        path = write_file(
            tmp_path / "custom.yaml",
            """\
            bench_directory: "perf"
            file_pattern: "*_perf.py"
            helper_file: "helper.py"
            snapshot_directory: "out"
            """,
        )
        config = load_config(path)
        assert config.default_pattern == "perf/*_perf.py"
        assert config.helper_path == Path("perf/helper.py")
        assert config.snapshot_path == Path("perf/out")


class TestValidationErrors:
    def test_unknown_field(self, write_file, tmp_path: Path) -> None:
        path = write_file(tmp_path / "extra.yaml", "bench_dir: bench\n")
        with pytest.raises(ConfigValidationError, match="bench_dir"):
            load_config(path)

    @pytest.mark.parametrize(
        "content",
        [
            "load_workers: 0\n",
            "load_workers: many\n",
            "compile_timeout_seconds: 0\n",
            'log_level: "LOUD"\n',
            'bench_directory: ""\n',
        ],
    )
    def test_bad_values(self, write_file, tmp_path: Path, content: str) -> None:
        path = write_file(tmp_path / "bad.yaml", content)
        with pytest.raises(ConfigValidationError):
            load_config(path)


class TestLoadErrors:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError, match="not found"):
            load_config(tmp_path / "nope.yaml")

    def test_directory_instead_of_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError, match="not a file"):
            load_config(tmp_path)

    def test_broken_yaml(self, broken_yaml_file: Path) -> None:
        with pytest.raises(ConfigLoadError):
            load_config(broken_yaml_file)

    def test_non_mapping_yaml(self, write_file, tmp_path: Path) -> None:
        path = write_file(tmp_path / "list.yaml", "- a\n- b\n")
        with pytest.raises(ConfigLoadError, match="mapping"):
            load_config(path)


class TestImmutability:
    def test_config_is_frozen(self, runner_config_file: Path) -> None:
        config = load_config(runner_config_file)
        with pytest.raises(ValidationError):
            config.load_workers = 8  # type: ignore[misc]
