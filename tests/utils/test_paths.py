# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Tests for project root and source root resolution."""

from pathlib import Path

import pytest

from benchrunner.utils.paths import resolve_project_root, resolve_source_root


class TestProjectRoot:
    def test_finds_pyproject_in_start_directory(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("", encoding="utf-8")
        assert resolve_project_root(tmp_path) == tmp_path.resolve()

    def test_walks_up_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "setup.py").write_text("", encoding="utf-8")
        nested = tmp_path / "bench" / "sub"
        nested.mkdir(parents=True)
        assert resolve_project_root(nested) == tmp_path.resolve()

    def test_nearest_marker_wins(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("", encoding="utf-8")
        inner = tmp_path / "inner"
        inner.mkdir()
        (inner / "pyproject.toml").write_text("", encoding="utf-8")
        assert resolve_project_root(inner) == inner.resolve()

    def test_defaults_to_working_directory(self, bench_project: Path) -> None:
        assert resolve_project_root() == bench_project.resolve()

    def test_directory_named_like_marker_is_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").mkdir()
        with pytest.raises(RuntimeError, match="Cannot find project root"):
            resolve_project_root(tmp_path)

    def test_no_marker_raises(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError, match="Cannot find project root"):
            resolve_project_root(tmp_path)


class TestSourceRoot:
    def test_flat_layout(self, tmp_path: Path) -> None:
        assert resolve_source_root(tmp_path) == tmp_path

    def test_src_layout(self, tmp_path: Path) -> None:
        (tmp_path / "src").mkdir()
        assert resolve_source_root(tmp_path) == tmp_path / "src"
