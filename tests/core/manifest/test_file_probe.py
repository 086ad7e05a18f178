"""Tests for FileProbe path resolution."""

from __future__ import annotations

from pathlib import Path

from extcheck.core.manifest import FileProbe


class TestFileProbe:
    """Existence checks relative to the manifest directory."""

    def test_existing_file(self, tmp_path: Path) -> None:
        (tmp_path / "icons").mkdir()
        (tmp_path / "icons" / "16.png").write_bytes(b"")
        assert FileProbe(tmp_path).exists("icons/16.png") is True

    def test_missing_file(self, tmp_path: Path) -> None:
        assert FileProbe(tmp_path).exists("icons/16.png") is False

    def test_leading_slash_stays_inside_base(self, tmp_path: Path) -> None:
        (tmp_path / "sw.js").write_text("")
        probe = FileProbe(tmp_path)
        assert probe.resolve("/sw.js") == tmp_path / "sw.js"
        assert probe.exists("/sw.js") is True

    def test_base_dir_property(self, tmp_path: Path) -> None:
        assert FileProbe(str(tmp_path)).base_dir == tmp_path
