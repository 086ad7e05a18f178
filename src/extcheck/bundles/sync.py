"""Keep category bundle ``plugin.json`` skill lists in sync with disk.

Layout::

    plugins/
      <category>/
        .claude-plugin/plugin.json     {"name": ..., "skills": [...]}
        <plugin>/skills/SKILL.md       -> "./<plugin>/skills/"
        <other-plugin>/SKILL.md        -> "./<other-plugin>/"

For every category holding ``.claude-plugin/plugin.json``, the plugin
directories are listed in name order and mapped to a skill path. A
plugin with neither ``skills/SKILL.md`` nor ``SKILL.md`` is skipped. When
the derived list differs from the file's ``skills`` array the file is
rewritten, other keys untouched and in their original order.

The rewrite is a plain read-modify-write with no locking; concurrent
runs against the same registry are unsupported.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from extcheck.bundles.models import CategoryChange, SyncConfig, SyncResult
from extcheck.exceptions import RegistrySyncError

logger = logging.getLogger(__name__)

PLUGIN_META_DIR = ".claude-plugin"
PLUGIN_JSON = "plugin.json"
SKILL_FILE = "SKILL.md"


def _subdirectories(path: Path) -> list[str]:
    try:
        return sorted(entry.name for entry in path.iterdir() if entry.is_dir())
    except OSError as exc:
        raise RegistrySyncError(f"Cannot list directory {path}: {exc}") from exc


def detect_skill_path(category_path: Path, plugin_name: str) -> str | None:
    """Return the skill path for one plugin directory, or None if it has none.

    ``skills/SKILL.md`` takes precedence over a top-level ``SKILL.md``.
    """
    plugin_path = category_path / plugin_name
    if (plugin_path / "skills" / SKILL_FILE).exists():
        return f"./{plugin_name}/skills/"
    if (plugin_path / SKILL_FILE).exists():
        return f"./{plugin_name}/"
    return None


def generate_skill_paths(category_path: Path) -> list[str]:
    """Derive a category's skill list from its plugin directories."""
    skill_paths: list[str] = []
    for plugin_name in _subdirectories(category_path):
        if plugin_name == PLUGIN_META_DIR:
            continue
        skill_path = detect_skill_path(category_path, plugin_name)
        if skill_path is None:
            logger.warning(
                "[%s/%s] %s not found, skipping", category_path.name, plugin_name, SKILL_FILE,
            )
            continue
        skill_paths.append(skill_path)
    return skill_paths


def read_plugin_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise RegistrySyncError(f"Failed to read {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise RegistrySyncError(f"{path} must contain a JSON object")
    return data


def write_plugin_json(path: Path, metadata: dict[str, Any]) -> None:
    content = json.dumps(metadata, indent=2, ensure_ascii=False) + "\n"
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise RegistrySyncError(f"Failed to write {path}: {exc}") from exc


class RegistrySync:
    """Synchronizes every category bundle under a plugins directory.

    Usage::

        result = RegistrySync(Path("plugins")).run(dry_run=True)
        for change in result.changed:
            print(change.category, change.added, change.removed)
    """

    def __init__(self, plugins_dir: Path | str, config: SyncConfig | None = None) -> None:
        self._plugins_dir = Path(plugins_dir)
        self._config = config or SyncConfig()

    def find_categories(self) -> list[str]:
        """Category directory names, sorted, minus excluded ones."""
        return [
            name for name in _subdirectories(self._plugins_dir)
            if name not in self._config.excluded_categories
        ]

    def run(self, dry_run: bool = False) -> SyncResult:
        """Compare and, unless ``dry_run``, rewrite each category's skill list.

        Raises:
            RegistrySyncError: On unreadable directories or plugin.json
                files, or failed writes.
        """
        result = SyncResult(dry_run=dry_run)
        for category in self.find_categories():
            category_path = self._plugins_dir / category
            plugin_json = category_path / PLUGIN_META_DIR / PLUGIN_JSON
            if not plugin_json.is_file():
                logger.warning(
                    "[%s] Not a valid category bundle (missing %s/%s), skipping",
                    category, PLUGIN_META_DIR, PLUGIN_JSON,
                )
                result.skipped_categories.append(category)
                continue

            metadata = read_plugin_json(plugin_json)
            old_skills = metadata.get("skills") or []
            if not isinstance(old_skills, list):
                raise RegistrySyncError(f"'skills' in {plugin_json} must be an array")

            change = CategoryChange(
                category=category,
                plugin_json=plugin_json,
                old_skills=[str(s) for s in old_skills],
                new_skills=generate_skill_paths(category_path),
            )
            if change.changed and not dry_run:
                metadata["skills"] = change.new_skills
                write_plugin_json(plugin_json, metadata)
                change.written = True
                logger.debug("Updated %s", plugin_json)
            result.categories.append(change)
        return result
