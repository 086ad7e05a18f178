"""Result types for plugin registry synchronization."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class SyncConfig:
    """Registry sync settings.

    Attributes:
        excluded_categories: Category directory names that are never synced.
    """

    excluded_categories: frozenset[str] = frozenset()


@dataclass
class CategoryChange:
    """Skill-list difference for one category bundle.

    Attributes:
        category: Category directory name.
        plugin_json: Path to the category's ``plugin.json``.
        old_skills: Skill paths currently listed in ``plugin.json``.
        new_skills: Skill paths derived from the directory layout.
        written: True once the new list has been written to disk.
    """

    category: str
    plugin_json: Path
    old_skills: list[str]
    new_skills: list[str]
    written: bool = False

    @property
    def changed(self) -> bool:
        return self.old_skills != self.new_skills

    @property
    def added(self) -> list[str]:
        return [p for p in self.new_skills if p not in self.old_skills]

    @property
    def removed(self) -> list[str]:
        return [p for p in self.old_skills if p not in self.new_skills]


@dataclass
class SyncResult:
    """Outcome of syncing every category under a plugins directory.

    Attributes:
        categories: One entry per valid category, in name order.
        skipped_categories: Directories lacking ``.claude-plugin/plugin.json``.
        dry_run: True when no file was written.
    """

    categories: list[CategoryChange] = field(default_factory=list)
    skipped_categories: list[str] = field(default_factory=list)
    dry_run: bool = False

    @property
    def changed(self) -> list[CategoryChange]:
        return [c for c in self.categories if c.changed]
