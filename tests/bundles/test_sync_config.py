"""Tests for the YAML sync configuration loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from extcheck.bundles import SyncConfig, load_sync_config
from extcheck.exceptions import RegistrySyncError
from tests.helpers import touch


class TestLoadSyncConfig:

    def test_no_path_gives_defaults(self) -> None:
        assert load_sync_config(None) == SyncConfig()
        assert load_sync_config(None).excluded_categories == frozenset()

    def test_excluded_categories(self, tmp_path: Path) -> None:
        path = touch(tmp_path, "sync.yaml", "excluded_categories:\n  - templates\n  - archived\n")
        config = load_sync_config(path)
        assert config.excluded_categories == {"templates", "archived"}

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = touch(tmp_path, "sync.yaml", "")
        assert load_sync_config(path) == SyncConfig()

    @pytest.mark.parametrize("content", [
        "- just\n- a list\n",
        "excluded_categories: templates\n",
        "excluded_categories:\n  - 1\n",
    ])
    def test_wrong_shape_raises(self, tmp_path: Path, content: str) -> None:
        path = touch(tmp_path, "sync.yaml", content)
        with pytest.raises(RegistrySyncError):
            load_sync_config(path)

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        path = touch(tmp_path, "sync.yaml", "excluded_categories: [unclosed\n")
        with pytest.raises(RegistrySyncError, match="Failed to load sync config"):
            load_sync_config(path)

    def test_unreadable_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(RegistrySyncError):
            load_sync_config(tmp_path / "missing.yaml")
