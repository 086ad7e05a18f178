"""Permission usage analyzer.

``UsageAnalyzer`` cross-references a manifest against the source tree
that ships with it:

1. **Scan** -- ``SourceScanner`` yields every eligible source file.
2. **Detect** -- each file's text is matched for capability identifiers;
   per capability, the set of files it appeared in is recorded.
3. **Map** -- detected capabilities are mapped to permissions through the
   closed ``CAPABILITY_PERMISSIONS`` table; unmapped ones are dropped.
4. **Compare** -- ``unused = declared - required`` and
   ``missing = required - declared``.
5. **Suggest** -- recommendations in a fixed order: remove unused, add
   missing, narrow each broad host permission, make non-critical
   permissions optional.

Every output is derived from one document and one tree snapshot; the
analyzer keeps no state between runs.
"""

from __future__ import annotations

import logging
from pathlib import Path

from extcheck.core.manifest import MANIFEST_FILENAME, ConfigDocument, load_manifest
from extcheck.core.usage.models import AnalysisResult, CapabilityUsageRecord
from extcheck.core.usage.patterns import (
    NON_CRITICAL_PERMISSIONS,
    detect_capabilities,
    permission_for,
)
from extcheck.core.usage.scanner import SourceScanner
from extcheck.exceptions import ScanError

logger = logging.getLogger(__name__)


class UsageAnalyzer:
    """Compares declared permissions against capabilities used in code.

    Usage::

        analyzer = UsageAnalyzer()
        result = analyzer.analyze_project(Path("my-extension"))
        print(result.missing_permissions)
    """

    def __init__(self, scanner: SourceScanner | None = None) -> None:
        self._scanner = scanner or SourceScanner()

    def analyze_project(
        self, root: Path | str, manifest_path: Path | str | None = None,
    ) -> AnalysisResult:
        """Load the project's manifest and analyze the tree under ``root``.

        Args:
            root: Project directory to scan.
            manifest_path: Manifest to compare against. Defaults to
                ``<root>/manifest.json``.

        Raises:
            ManifestLoadError: If the manifest cannot be loaded.
            ScanError: If the tree cannot be traversed.
        """
        root_path = Path(root)
        path = Path(manifest_path) if manifest_path else root_path / MANIFEST_FILENAME
        document = load_manifest(path)
        return self.analyze(document, root_path)

    def analyze(self, document: ConfigDocument, root: Path | str) -> AnalysisResult:
        """Analyze the source tree under ``root`` against ``document``.

        Raises:
            ScanError: If the tree or an eligible file cannot be read.
        """
        usages = self._collect_usages(Path(root))
        required = frozenset(record.permission for record in usages)

        declared = document.declared_permissions
        declared_set = frozenset(declared)
        unused = tuple(dict.fromkeys(p for p in declared if p not in required))
        missing = tuple(sorted(required - declared_set))

        suggestions = self._generate_suggestions(document, unused, missing)

        return AnalysisResult(
            declared_permissions=declared,
            declared_host_permissions=document.declared_host_permissions,
            usages=usages,
            unused_permissions=unused,
            missing_permissions=missing,
            suggestions=suggestions,
        )

    # -- Scan + detect -----------------------------------------------------

    def _collect_usages(self, root: Path) -> tuple[CapabilityUsageRecord, ...]:
        root_abs = root.absolute()
        seen: dict[str, set[str]] = {}
        file_count = 0

        for file_path in self._scanner.iter_files(root_abs):
            file_count += 1
            try:
                text = file_path.read_text(encoding="utf-8", errors="replace")
            except OSError as exc:
                raise ScanError(f"Cannot read source file {file_path}: {exc}") from exc

            relative = file_path.relative_to(root_abs).as_posix()
            for capability in detect_capabilities(text):
                seen.setdefault(capability, set()).add(relative)

        logger.debug(
            "Scanned %d file(s) under %s, %d capability identifier(s) found",
            file_count, root_abs, len(seen),
        )

        records: list[CapabilityUsageRecord] = []
        for capability in sorted(seen):
            permission = permission_for(capability)
            if permission is None:
                continue
            records.append(CapabilityUsageRecord(
                capability=capability,
                permission=permission,
                files=frozenset(seen[capability]),
            ))
        return tuple(records)

    # -- Suggestions -------------------------------------------------------

    @staticmethod
    def _generate_suggestions(
        document: ConfigDocument,
        unused: tuple[str, ...],
        missing: tuple[str, ...],
    ) -> tuple[str, ...]:
        suggestions: list[str] = []

        if unused:
            suggestions.append(f"Remove unused permissions: {', '.join(unused)}")

        if missing:
            suggestions.append(f"Add missing permissions: {', '.join(missing)}")

        for host_perm in document.broad_host_permissions:
            suggestions.append(
                f'Consider narrowing host permission: "{host_perm}" to specific domains'
            )

        can_be_optional = [
            p for p in document.declared_permissions if p in NON_CRITICAL_PERMISSIONS
        ]
        if can_be_optional:
            suggestions.append(
                f"Consider making these permissions optional: {', '.join(can_be_optional)}"
            )

        return tuple(suggestions)
