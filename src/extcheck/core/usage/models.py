"""Data models for permission usage analysis.

``CapabilityUsageRecord`` ties one detected capability to its permission
and the files it appeared in. ``AnalysisResult`` is the complete,
read-only cross-reference between what the manifest declares and what
the source tree uses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CapabilityUsageRecord:
    """One capability observed in the source tree.

    Attributes:
        capability: Identifier such as ``"chrome.storage"``.
        permission: The manifest permission the capability requires.
        files: Project-relative POSIX paths where it appeared.
    """

    capability: str
    permission: str
    files: frozenset[str]

    @property
    def sorted_files(self) -> list[str]:
        return sorted(self.files)


@dataclass(frozen=True)
class AnalysisResult:
    """Cross-reference of declared and used permissions.

    ``unused_permissions`` and ``missing_permissions`` have set semantics;
    they are stored as tuples in a deterministic order (declared order
    for unused, alphabetical for missing) so reports are reproducible.

    Attributes:
        declared_permissions: The manifest ``permissions`` list.
        declared_host_permissions: The manifest ``host_permissions`` list.
        usages: One record per detected, mapped capability, sorted by
            capability identifier.
        unused_permissions: Declared but never observed in use.
        missing_permissions: Observed in use but not declared.
        suggestions: Human-readable recommendations, in fixed order.
    """

    declared_permissions: tuple[str, ...]
    declared_host_permissions: tuple[str, ...]
    usages: tuple[CapabilityUsageRecord, ...]
    unused_permissions: tuple[str, ...]
    missing_permissions: tuple[str, ...]
    suggestions: tuple[str, ...]

    @property
    def required_permissions(self) -> frozenset[str]:
        """Permissions the detected capabilities require."""
        return frozenset(record.permission for record in self.usages)

    def used_permissions(self) -> dict[str, list[CapabilityUsageRecord]]:
        """Group usage records by permission, permissions in sorted order."""
        grouped: dict[str, list[CapabilityUsageRecord]] = {}
        for record in sorted(self.usages, key=lambda r: (r.permission, r.capability)):
            grouped.setdefault(record.permission, []).append(record)
        return grouped

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable form of the result."""
        used: list[dict[str, Any]] = []
        for permission, records in self.used_permissions().items():
            files: set[str] = set()
            for record in records:
                files.update(record.files)
            used.append({
                "permission": permission,
                "capabilities": [r.capability for r in records],
                "files": sorted(files),
            })
        return {
            "declared_permissions": list(self.declared_permissions),
            "declared_host_permissions": list(self.declared_host_permissions),
            "used_permissions": used,
            "unused_permissions": list(self.unused_permissions),
            "missing_permissions": list(self.missing_permissions),
            "suggestions": list(self.suggestions),
        }
