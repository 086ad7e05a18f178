"""``extcheck validate <manifest-path>`` - Validate a Manifest V3 document.

Loads the manifest, runs every rule check in a fixed order, and prints the
findings grouped by severity (errors, then warnings, then infos).

Exit Codes:
    0 - No findings, or only warning/info findings.
    1 - At least one error finding.
    2 - The manifest could not be loaded (or a usage error).
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from extcheck.core.validator import ManifestValidator, ValidationReport
from extcheck.exceptions import ManifestLoadError


def _report_to_json(report: ValidationReport, manifest_path: Path) -> dict:
    """Convert a validation report to a JSON-serializable dict."""
    return {
        "manifest": str(manifest_path),
        "valid": report.is_valid,
        "counts": report.counts(),
        "findings": [f.to_dict() for f in report.findings],
    }


@click.command("validate")
@click.argument("manifest_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def validate_command(manifest_path: str, output_format: str) -> None:
    """Validate a manifest.json for Manifest V3 compliance.

    Relative paths declared in MANIFEST_PATH (icons, service worker,
    content scripts) are checked against the manifest's own directory.

    Exit code 0 if valid (warnings allowed), 1 if errors exist.
    """
    path = Path(manifest_path)
    validator = ManifestValidator()

    try:
        report = validator.validate_file(path)
    except ManifestLoadError as exc:
        if output_format == "json":
            click.echo(json.dumps({"error": str(exc)}))
        else:
            click.echo(f"Error: {exc}")
        sys.exit(2)

    if output_format == "json":
        click.echo(json.dumps(_report_to_json(report, path), indent=2))
    else:
        from extcheck.cli.output import print_validation_report
        print_validation_report(report, path)

    sys.exit(1 if report.has_errors else 0)
