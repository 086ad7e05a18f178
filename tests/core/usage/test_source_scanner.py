"""Tests for SourceScanner file discovery."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from extcheck.core.usage import SourceScanner
from extcheck.exceptions import ScanError
from tests.helpers import touch


def relative_names(root: Path, paths: list[Path]) -> list[str]:
    return [p.relative_to(root.absolute()).as_posix() for p in paths]


class TestExtensionFiltering:

    def test_yields_only_recognized_extensions(self, tmp_path: Path) -> None:
        for name in ("a.js", "b.ts", "c.tsx", "d.jsx", "e.css", "f.json", "README.md"):
            touch(tmp_path, name)
        found = relative_names(tmp_path, list(SourceScanner().iter_files(tmp_path)))
        assert found == ["a.js", "b.ts", "c.tsx", "d.jsx"]

    def test_custom_extensions_without_dot(self, tmp_path: Path) -> None:
        touch(tmp_path, "a.mjs")
        touch(tmp_path, "b.js")
        scanner = SourceScanner(extensions=["mjs"])
        assert relative_names(tmp_path, list(scanner.iter_files(tmp_path))) == ["a.mjs"]
        assert scanner.extensions == frozenset({".mjs"})

    def test_extension_match_is_case_insensitive(self, tmp_path: Path) -> None:
        touch(tmp_path, "LEGACY.JS")
        assert len(list(SourceScanner().iter_files(tmp_path))) == 1


class TestDirectoryWalk:

    def test_recurses_depth_first_in_name_order(self, tmp_path: Path) -> None:
        touch(tmp_path, "src/b/deep.js")
        touch(tmp_path, "src/a.js")
        touch(tmp_path, "z.js")
        found = relative_names(tmp_path, list(SourceScanner().iter_files(tmp_path)))
        assert found == ["src/a.js", "src/b/deep.js", "z.js"]

    @pytest.mark.parametrize("excluded", ["node_modules", "dist", ".git"])
    def test_excluded_directories_are_never_entered(
        self, tmp_path: Path, excluded: str,
    ) -> None:
        touch(tmp_path, f"{excluded}/lib/index.js", "chrome.tabs.query({})")
        touch(tmp_path, f"src/{excluded}/nested.js")
        touch(tmp_path, "src/app.js")
        found = relative_names(tmp_path, list(SourceScanner().iter_files(tmp_path)))
        assert found == ["src/app.js"]

    def test_paths_are_absolute(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        touch(tmp_path, "proj/a.js")
        monkeypatch.chdir(tmp_path)
        paths = list(SourceScanner().iter_files("proj"))
        assert all(p.is_absolute() for p in paths)

    def test_iteration_is_lazy(self, tmp_path: Path) -> None:
        touch(tmp_path, "a.js")
        iterator = SourceScanner().iter_files(tmp_path / "missing")
        # No error until the generator is advanced.
        with pytest.raises(ScanError):
            next(iterator)

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlinks_are_not_followed(self, tmp_path: Path) -> None:
        touch(tmp_path, "real/a.js")
        (tmp_path / "real" / "loop").symlink_to(tmp_path / "real", target_is_directory=True)
        (tmp_path / "link.js").symlink_to(tmp_path / "real" / "a.js")
        found = relative_names(tmp_path, list(SourceScanner().iter_files(tmp_path)))
        assert found == ["real/a.js"]

    def test_root_that_is_a_file_raises_scan_error(self, tmp_path: Path) -> None:
        target = touch(tmp_path, "a.js")
        with pytest.raises(ScanError, match="Cannot read directory"):
            list(SourceScanner().iter_files(target))
