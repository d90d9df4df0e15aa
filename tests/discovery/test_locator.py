# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for benchmark file discovery.

We verify:
  - no patterns means the default recursive pattern
  - each pattern is expanded separately, sorted within itself
  - results are concatenated in pattern order, duplicates kept
  - directories and non-matching patterns contribute nothing
"""

from pathlib import Path

from benchrunner.discovery.locator import DEFAULT_PATTERN, expand_pattern, locate


class TestDefaultPattern:
    def test_default_pattern_value(self) -> None:
        assert DEFAULT_PATTERN == "bench/**/*_bench.py"

    def test_no_patterns_finds_all_bench_files(self, bench_project: Path) -> None:
        files = locate([])
        assert files == [Path("bench/a_bench.py"), Path("bench/sub/b_bench.py")]

    def test_default_ignores_other_files(self, bench_project: Path, write_file) -> None:
        write_file(bench_project / "bench" / "bench_helper.py", "")
        write_file(bench_project / "bench" / "notes.txt", "")
        write_file(bench_project / "mypkg" / "x_bench.py", "")
        assert locate([]) == [Path("bench/a_bench.py"), Path("bench/sub/b_bench.py")]

    def test_custom_default_pattern(self, bench_project: Path) -> None:
        assert locate([], default_pattern="bench/*_bench.py") == [Path("bench/a_bench.py")]

    def test_missing_bench_directory_finds_nothing(self, tmp_path: Path) -> None:
        assert locate([], root=tmp_path) == []


class TestExplicitPatterns:
    def test_single_file(self, bench_project: Path) -> None:
        assert locate(["bench/sub/b_bench.py"]) == [Path("bench/sub/b_bench.py")]

    def test_patterns_concatenate_in_order(self, bench_project: Path) -> None:
        files = locate(["bench/sub/*.py", "bench/a_bench.py"])
        assert files == [Path("bench/sub/b_bench.py"), Path("bench/a_bench.py")]

    def test_duplicates_are_kept(self, bench_project: Path) -> None:
        files = locate(["bench/a_bench.py", "bench/*_bench.py"])
        assert files == [Path("bench/a_bench.py"), Path("bench/a_bench.py")]

    def test_matches_sorted_within_pattern(self, bench_project: Path, write_suite) -> None:
        write_suite(bench_project / "bench" / "c_bench.py", "gamma")
        write_suite(bench_project / "bench" / "0_bench.py", "zero")
        assert expand_pattern("bench/*_bench.py") == [
            Path("bench/0_bench.py"),
            Path("bench/a_bench.py"),
            Path("bench/c_bench.py"),
        ]

    def test_unmatched_pattern_is_not_an_error(self, bench_project: Path) -> None:
        assert locate(["bench/nothing_*.py"]) == []

    def test_directories_are_skipped(self, bench_project: Path) -> None:
        assert locate(["bench/*"]) == [Path("bench/a_bench.py")]

    def test_root_argument(self, bench_project: Path, monkeypatch) -> None:
        monkeypatch.chdir(bench_project / "bench")
        assert locate(["bench/a_bench.py"], root=bench_project) == [Path("bench/a_bench.py")]
