"""``extcheck permissions <project-root>`` - Analyze permission usage.

Scans the extension's source files for ``chrome.*`` API references,
maps them to permissions, and compares the result with the permissions
the manifest declares.

Exit Codes:
    0 - Analysis completed (unused or missing permissions do not fail).
    2 - The manifest could not be loaded or the tree could not be read.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from extcheck.core.usage import DEFAULT_EXTENSIONS, SourceScanner, UsageAnalyzer
from extcheck.exceptions import ManifestLoadError, ScanError


@click.command("permissions")
@click.argument("project_root", type=click.Path(exists=True, file_okay=False))
@click.option(
    "--manifest", "manifest_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Manifest to compare against (default: PROJECT_ROOT/manifest.json).",
)
@click.option(
    "--ext", "extensions",
    multiple=True,
    help="Source file extension to scan (repeatable). "
         f"Default: {', '.join(sorted(DEFAULT_EXTENSIONS))}.",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def permissions_command(
    project_root: str,
    manifest_path: str | None,
    extensions: tuple[str, ...],
    output_format: str,
) -> None:
    """Compare declared permissions with the APIs the code uses.

    Reports unused permissions (declared, never referenced) and missing
    permissions (referenced, never declared), plus suggestions.

    Exit code 0 whenever the analysis completes.
    """
    root = Path(project_root)
    scanner = SourceScanner(extensions=extensions or DEFAULT_EXTENSIONS)
    analyzer = UsageAnalyzer(scanner=scanner)

    try:
        result = analyzer.analyze_project(root, manifest_path=manifest_path)
    except (ManifestLoadError, ScanError) as exc:
        if output_format == "json":
            click.echo(json.dumps({"error": str(exc)}))
        else:
            click.echo(f"Error: {exc}")
        sys.exit(2)

    if output_format == "json":
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        from extcheck.cli.output import print_usage_report
        print_usage_report(result, root)
