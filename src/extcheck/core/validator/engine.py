"""Manifest validation engine.

``ManifestValidator`` runs every check in ``CHECK_ORDER`` against one
``ConfigDocument`` and concatenates their findings. Checks are
independent: a finding from one never suppresses or alters another, and
severity never short-circuits the run. Identical input always yields an
identical, identically ordered report.
"""

from __future__ import annotations

import logging
from pathlib import Path

from extcheck.core.manifest import ConfigDocument, FileProbe, load_manifest
from extcheck.core.validator.checks import CHECK_ORDER, Check, run_check
from extcheck.core.validator.models import Finding, ValidationReport

logger = logging.getLogger(__name__)


class ManifestValidator:
    """Rule-based validator for Manifest V3 documents.

    The validator is stateless; each ``validate()`` call is independent.

    Usage::

        validator = ManifestValidator()
        report = validator.validate_file(Path("manifest.json"))
        for finding in report.findings:
            print(f"[{finding.severity.name}] {finding.render()}")
    """

    def __init__(self, checks: tuple[Check, ...] = CHECK_ORDER) -> None:
        self._checks = checks

    @property
    def checks(self) -> tuple[Check, ...]:
        return self._checks

    def validate(self, document: ConfigDocument, base_dir: Path | str) -> ValidationReport:
        """Validate a loaded document.

        Args:
            document: The manifest to validate.
            base_dir: Directory that relative paths in the manifest
                resolve against (normally the manifest's own directory).

        Returns:
            A ``ValidationReport`` with findings in check order.
        """
        probe = FileProbe(base_dir)
        findings: list[Finding] = []
        for check in self._checks:
            produced = run_check(check, document, probe)
            logger.debug("Check %s produced %d finding(s)", check.value, len(produced))
            findings.extend(produced)
        return ValidationReport(findings=tuple(findings))

    def validate_file(self, manifest_path: Path | str) -> ValidationReport:
        """Load a manifest and validate it against its own directory.

        Raises:
            ManifestLoadError: If the manifest cannot be loaded. No check
                runs in that case.
        """
        path = Path(manifest_path)
        document = load_manifest(path)
        return self.validate(document, path.parent)
