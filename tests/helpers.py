"""Shared test helpers for building fake extension projects on disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def write_manifest(directory: Path, data: Any) -> Path:
    """Write ``data`` as ``manifest.json`` in ``directory`` and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    manifest = directory / "manifest.json"
    manifest.write_text(json.dumps(data), encoding="utf-8")
    return manifest


def touch(directory: Path, relative: str, content: str = "") -> Path:
    """Create a file (and its parents) under ``directory``."""
    path = directory / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


VALID_MANIFEST: dict[str, Any] = {
    "manifest_version": 3,
    "name": "Tab Saver",
    "version": "1.0.0",
    "icons": {
        "16": "icons/16.png",
        "32": "icons/32.png",
        "48": "icons/48.png",
        "128": "icons/128.png",
    },
    "background": {"service_worker": "background.js", "type": "module"},
    "permissions": ["storage"],
    "content_scripts": [
        {
            "matches": ["https://example.com/*"],
            "js": ["content.js"],
            "css": ["content.css"],
            "run_at": "document_idle",
        }
    ],
}
