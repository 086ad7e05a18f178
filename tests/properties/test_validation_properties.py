"""Property-based tests for manifest validation.

Verifies that validation is a deterministic function of the document,
that the version shape check accepts exactly 2 to 4 numeric components,
and that the verdict follows from the findings alone.
"""
from __future__ import annotations

from pathlib import Path

from hypothesis import given
from hypothesis import strategies as st

from extcheck.core.manifest import parse_manifest
from extcheck.core.validator import ManifestValidator, Severity
from extcheck.core.validator.checks import is_valid_version


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

components = st.integers(min_value=0, max_value=10_000).map(str)
permission_names = st.sampled_from(
    ["storage", "tabs", "alarms", "history", "https://*/*", "<all_urls>", "cookies"]
)
manifests = st.fixed_dictionaries(
    {},
    optional={
        "manifest_version": st.sampled_from([2, 3, "3"]),
        "name": st.text(max_size=90),
        "version": st.sampled_from(["1.0", "1.0.0", "v2", "1.2.3.4.5", ""]),
        "permissions": st.lists(permission_names, max_size=8),
        "host_permissions": st.lists(permission_names, max_size=3),
        "content_security_policy": st.fixed_dictionaries(
            {"extension_pages": st.sampled_from(
                ["script-src 'self'", "script-src 'unsafe-eval' 'unsafe-inline'"]
            )}
        ),
    },
)


class TestVersionShape:
    """Version strings accepted by the semantic-version check."""

    @given(parts=st.lists(components, min_size=2, max_size=4))
    def test_two_to_four_components_accepted(self, parts: list[str]) -> None:
        assert is_valid_version(".".join(parts))

    @given(parts=st.lists(components, min_size=5, max_size=8))
    def test_more_than_four_components_rejected(self, parts: list[str]) -> None:
        assert not is_valid_version(".".join(parts))

    @given(part=components)
    def test_single_component_rejected(self, part: str) -> None:
        assert not is_valid_version(part)


class TestValidationDeterminism:
    """Same document in, same report out."""

    @given(data=manifests)
    def test_repeated_validation_is_identical(self, data: dict) -> None:
        document = parse_manifest(data)
        validator = ManifestValidator()
        base = Path("/nonexistent-extension-root")
        assert validator.validate(document, base) == validator.validate(document, base)

    @given(data=manifests)
    def test_verdict_follows_findings(self, data: dict) -> None:
        report = ManifestValidator().validate(parse_manifest(data), Path("/nonexistent"))
        has_error = any(f.severity is Severity.ERROR for f in report.findings)
        assert report.has_errors is has_error
        assert report.is_valid is not has_error

    @given(data=manifests)
    def test_grouping_preserves_every_finding(self, data: dict) -> None:
        report = ManifestValidator().validate(parse_manifest(data), Path("/nonexistent"))
        grouped = report.by_severity()
        assert list(grouped) == [Severity.ERROR, Severity.WARNING, Severity.INFO]
        assert sum(len(items) for items in grouped.values()) == len(report.findings)
        for severity, items in grouped.items():
            assert items == [f for f in report.findings if f.severity is severity]
