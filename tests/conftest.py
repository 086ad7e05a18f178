"""Shared fixtures for extcheck tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers import VALID_MANIFEST, touch, write_manifest


@pytest.fixture
def valid_extension_dir(tmp_path: Path) -> Path:
    """An extension directory whose manifest produces no findings."""
    ext_dir = tmp_path / "extension"
    write_manifest(ext_dir, VALID_MANIFEST)
    for size in ("16", "32", "48", "128"):
        touch(ext_dir, f"icons/{size}.png")
    touch(ext_dir, "background.js", "chrome.storage.local.get('k');\n")
    touch(ext_dir, "content.js")
    touch(ext_dir, "content.css")
    return ext_dir
