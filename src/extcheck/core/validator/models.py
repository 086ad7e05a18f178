"""Data models for manifest validation: Severity, Finding, ValidationReport.

These types are decoupled from the rule implementations so that the CLI
formatters can import them without pulling in the checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


# ---------------------------------------------------------------------------
# Severity: Ordered finding severity levels
# ---------------------------------------------------------------------------


class Severity(IntEnum):
    """Three-level severity scale for validation findings.

    The integer encoding enables direct comparison: INFO < WARNING < ERROR.
    Only ERROR findings make a manifest invalid.
    """

    INFO = 1
    WARNING = 2
    ERROR = 3

    @property
    def label(self) -> str:
        """Lower-case name used in JSON output (``"error"`` etc.)."""
        return self.name.lower()


# ---------------------------------------------------------------------------
# Finding: A single validation outcome
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Finding:
    """One validation outcome.

    Attributes:
        severity: ERROR, WARNING, or INFO.
        message: Human-readable description.
        field: Dotted/indexed locator of the manifest part concerned
            (e.g. ``"icons.16"`` or ``"content_scripts[0].js"``), or None.
    """

    severity: Severity
    message: str
    field: str | None = None

    def render(self) -> str:
        """Format as ``<message> [<field>]``, omitting an absent locator."""
        if self.field:
            return f"{self.message} [{self.field}]"
        return self.message

    def to_dict(self) -> dict[str, str | None]:
        return {
            "severity": self.severity.label,
            "message": self.message,
            "field": self.field,
        }


# ---------------------------------------------------------------------------
# ValidationReport: Complete output of one validation run
# ---------------------------------------------------------------------------

# Reporting order: most severe first.
SEVERITY_ORDER: tuple[Severity, ...] = (Severity.ERROR, Severity.WARNING, Severity.INFO)


@dataclass(frozen=True)
class ValidationReport:
    """All findings of a validation run, in check order.

    Attributes:
        findings: Findings in the fixed order the checks produced them.
    """

    findings: tuple[Finding, ...] = ()

    @property
    def has_errors(self) -> bool:
        """True when at least one ERROR finding exists."""
        return any(f.severity is Severity.ERROR for f in self.findings)

    @property
    def is_valid(self) -> bool:
        return not self.has_errors

    @property
    def max_severity(self) -> Severity | None:
        """Return the highest severity among all findings, or None if clean."""
        if not self.findings:
            return None
        return max(f.severity for f in self.findings)

    def by_severity(self) -> dict[Severity, list[Finding]]:
        """Group findings ERROR, WARNING, INFO, keeping check order within a group."""
        grouped: dict[Severity, list[Finding]] = {sev: [] for sev in SEVERITY_ORDER}
        for finding in self.findings:
            grouped[finding.severity].append(finding)
        return grouped

    def counts(self) -> dict[str, int]:
        return {sev.label: len(items) for sev, items in self.by_severity().items()}
