"""Tests for core.discovery module."""

import os
from pathlib import Path

import pytest

from langsplit.core.discovery import detect, get_language_breakdown
from langsplit.schemas import DetectionStrategy


def paths_of(breakdown: dict, language: str) -> list[str]:
    return [detection.path for detection in breakdown[language]]


class TestGetLanguageBreakdown:
    """Tests for get_language_breakdown function."""

    def test_breakdown_basic(self, tmp_path: Path) -> None:
        """Test basic detection across languages."""
        (tmp_path / "a.rs").write_text("fn main() {}\n")
        (tmp_path / "b.rs").write_text("fn helper() {}\n")
        (tmp_path / "README.md").write_text("# Title\n")

        result = get_language_breakdown(tmp_path)

        assert set(result) == {"Rust", "Markdown"}
        assert len(result["Rust"]) == 2
        assert len(result["Markdown"]) == 1
        assert all(d.strategy == DetectionStrategy.EXTENSION for d in result["Rust"])

    def test_breakdown_with_subdirectories(self, tmp_path: Path) -> None:
        """Test detection in nested directories."""
        (tmp_path / "src" / "utils").mkdir(parents=True)
        (tmp_path / "src" / "main.py").write_text("print('hi')\n")
        (tmp_path / "src" / "utils" / "helper.py").write_text("X = 1\n")

        result = get_language_breakdown(tmp_path)

        assert len(result["Python"]) == 2

    def test_paths_joined_onto_root_as_given(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A root of "." yields "./"-prefixed paths."""
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "lib.rs").write_text("pub fn f() {}\n")
        monkeypatch.chdir(tmp_path)

        result = get_language_breakdown(".")

        assert paths_of(result, "Rust") == [os.path.join(".", "src", "lib.rs")]

    def test_breakdown_default_excludes(self, tmp_path: Path) -> None:
        """Test exclusion of dependency and VCS directories."""
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "main.py").write_text("pass\n")
        (tmp_path / "node_modules").mkdir()
        (tmp_path / "node_modules" / "package.js").write_text("module.exports = 1;\n")
        (tmp_path / ".git").mkdir()
        (tmp_path / ".git" / "config.py").write_text("pass\n")
        (tmp_path / "__pycache__").mkdir()
        (tmp_path / "__pycache__" / "cache.py").write_text("pass\n")

        result = get_language_breakdown(tmp_path)

        assert set(result) == {"Python"}
        assert [Path(p).name for p in paths_of(result, "Python")] == ["main.py"]

    def test_breakdown_custom_exclude(self, tmp_path: Path) -> None:
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "main.py").write_text("pass\n")
        (tmp_path / "tests").mkdir()
        (tmp_path / "tests" / "test_main.py").write_text("pass\n")

        result = get_language_breakdown(tmp_path, exclude_patterns={"tests"})

        assert [Path(p).name for p in paths_of(result, "Python")] == ["main.py"]

    def test_unrecognised_files_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "blob.bin").write_bytes(b"\x00\x01\x02")
        (tmp_path / "notes").write_text("no extension, no shebang\n")

        assert get_language_breakdown(tmp_path) == {}

    def test_scan_order_is_sorted(self, tmp_path: Path) -> None:
        for name in ("c.go", "a.go", "b.go"):
            (tmp_path / name).write_text("package main\n")

        result = get_language_breakdown(tmp_path)

        assert [Path(p).name for p in paths_of(result, "Go")] == ["a.go", "b.go", "c.go"]

    def test_breakdown_nonexistent_path(self) -> None:
        """A missing root has nothing to report."""
        assert get_language_breakdown(Path("/nonexistent/path")) == {}

    def test_breakdown_single_file(self, tmp_path: Path) -> None:
        """A file root is detected on its own and recorded as given."""
        file_path = tmp_path / "main.rs"
        file_path.write_text("fn main() {}\n")

        result = get_language_breakdown(str(file_path))

        assert list(result) == ["Rust"]
        assert paths_of(result, "Rust") == [str(file_path)]
        assert result["Rust"][0].strategy == DetectionStrategy.EXTENSION

    def test_breakdown_single_unrecognised_file(self, tmp_path: Path) -> None:
        file_path = tmp_path / "notes"
        file_path.write_text("plain text\n")

        assert get_language_breakdown(file_path) == {}

    def test_breakdown_relative_file_root(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "run.py").write_text("print(1)\n")
        monkeypatch.chdir(tmp_path)

        result = get_language_breakdown("./run.py")

        assert paths_of(result, "Python") == ["./run.py"]


class TestDetect:
    """Tests for the per-file strategy cascade."""

    def test_filename(self, tmp_path: Path) -> None:
        path = tmp_path / "Makefile"
        path.write_text("all:\n\techo hi\n")

        assert detect(path) == ("Makefile", DetectionStrategy.FILENAME)

    def test_shebang_env(self, tmp_path: Path) -> None:
        path = tmp_path / "run"
        path.write_text("#!/usr/bin/env python3\nprint('hi')\n")

        assert detect(path) == ("Python", DetectionStrategy.SHEBANG)

    def test_shebang_versioned_interpreter(self, tmp_path: Path) -> None:
        path = tmp_path / "tool"
        path.write_text("#!/usr/local/bin/python3.11\n")

        assert detect(path) == ("Python", DetectionStrategy.SHEBANG)

    def test_shebang_beats_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "build.txt"
        path.write_text("#!/bin/bash\necho hi\n")

        assert detect(path) == ("Shell", DetectionStrategy.SHEBANG)

    def test_extension_case_insensitive(self, tmp_path: Path) -> None:
        path = tmp_path / "Main.GO"
        path.write_text("package main\n")

        assert detect(path) == ("Go", DetectionStrategy.EXTENSION)

    def test_heuristics(self, tmp_path: Path) -> None:
        path = tmp_path / "view.h"
        path.write_text("#import <Foundation/Foundation.h>\n@interface View : NSObject\n@end\n")

        assert detect(path) == ("Objective-C", DetectionStrategy.HEURISTICS)

    def test_classifier_fallback(self, tmp_path: Path) -> None:
        path = tmp_path / "util.h"
        path.write_text("#include <stdio.h>\ntypedef struct point { int x; } point;\n")

        assert detect(path) == ("C", DetectionStrategy.CLASSIFIER)

    def test_binary_ambiguous_file_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "weird.h"
        path.write_bytes(b"\x00\x00\x00")

        assert detect(path) is None

    def test_unknown_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "image.png"
        path.write_bytes(b"\x89PNG\r\n")

        assert detect(path) is None
