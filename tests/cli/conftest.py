"""Shared fixtures for CLI tests.

Provides a Click runner plus temporary extension projects and plugin
registries in clean and problematic states.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.helpers import VALID_MANIFEST, touch, write_manifest


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def warning_only_manifest(valid_extension_dir: Path) -> Path:
    """A manifest whose only finding is the missing-icons warning."""
    data = {k: v for k, v in VALID_MANIFEST.items() if k != "icons"}
    return write_manifest(valid_extension_dir, data)


@pytest.fixture
def error_manifest(valid_extension_dir: Path) -> Path:
    """A manifest declaring Manifest V2 with an unsafe CSP."""
    data = dict(VALID_MANIFEST)
    data["manifest_version"] = 2
    data["content_security_policy"] = {"extension_pages": "script-src 'self' 'unsafe-eval'"}
    return write_manifest(valid_extension_dir, data)


@pytest.fixture
def malformed_manifest(tmp_path: Path) -> Path:
    """A manifest.json that is not valid JSON."""
    return touch(tmp_path, "broken/manifest.json", '{"manifest_version": 3,')


@pytest.fixture
def mismatched_project(tmp_path: Path) -> Path:
    """Declares ``tabs`` but the code only uses ``chrome.storage``."""
    root = tmp_path / "project"
    write_manifest(root, {
        "manifest_version": 3,
        "name": "Mismatch",
        "version": "1.0",
        "permissions": ["tabs"],
    })
    touch(root, "src/background.ts", "chrome.storage.local.set({ seen: true });\n")
    return root


@pytest.fixture
def plugins_dir(tmp_path: Path) -> Path:
    """A registry with one stale category and one up-to-date category."""
    root = tmp_path / "plugins"
    touch(root, "devtools/.claude-plugin/plugin.json",
          json.dumps({"name": "devtools", "skills": []}))
    touch(root, "devtools/linter/skills/SKILL.md")
    touch(root, "writing/.claude-plugin/plugin.json",
          json.dumps({"name": "writing", "skills": ["./editor/"]}))
    touch(root, "writing/editor/SKILL.md")
    return root
