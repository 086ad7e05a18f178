"""Rich output formatting helpers for the ExtCheck CLI.

Provides consistent, severity-colored terminal output for validation
reports, permission usage reports, and registry sync summaries.

Severity Color Mapping:
    ERROR = bold red, WARNING = yellow, INFO = cyan

Manifest-derived strings (messages, paths, field locators) may contain
square brackets, so they are always wrapped in ``Text`` rather than
passed through Rich markup.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from extcheck.bundles import SyncResult
from extcheck.core.usage import AnalysisResult
from extcheck.core.validator import Severity, ValidationReport

_SEVERITY_STYLES: dict[Severity, str] = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
    Severity.INFO: "cyan",
}

# Files listed per used permission before truncating with "...".
MAX_FILES_SHOWN = 3

console = Console()


def severity_style(severity: Severity) -> str:
    """Return the Rich style string for a given severity level."""
    return _SEVERITY_STYLES.get(severity, "white")


def print_validation_report(report: ValidationReport, manifest_path: Path) -> None:
    """Print findings grouped ERROR, WARNING, INFO, then a verdict.

    Args:
        report: Validation report for one manifest.
        manifest_path: Path shown in the header.
    """
    header = Text.assemble(("Manifest: ", "bold"), (str(manifest_path), ""))
    console.print(Panel(header, title="Manifest Validation"))

    if not report.findings:
        console.print(Text("Manifest is valid!", style="bold green"))
        return

    for severity, items in report.by_severity().items():
        if not items:
            continue
        style = severity_style(severity)
        console.print()
        console.print(Text(f"{severity.name}S ({len(items)}):", style=style))
        for finding in items:
            console.print(Text(f"  {finding.render()}"))

    console.print()
    if report.has_errors:
        console.print(Text("Validation failed", style="bold red"))
    else:
        console.print(Text("Validation completed with warnings", style="bold yellow"))


def _print_list(title: str, items: tuple[str, ...] | list[str], empty: str = "(none)") -> None:
    console.print(Text(title, style="bold"))
    if not items:
        console.print(Text(f"  {empty}", style="dim"))
        return
    for item in items:
        console.print(Text(f"  - {item}"))


def print_usage_report(result: AnalysisResult, project_root: Path) -> None:
    """Print the declared/used/unused/missing cross-reference.

    Args:
        result: Analysis result for one project.
        project_root: Directory shown in the header.
    """
    header = Text.assemble(("Project: ", "bold"), (str(project_root), ""))
    console.print(Panel(header, title="Permission Analysis"))

    _print_list("DECLARED PERMISSIONS:", result.declared_permissions)
    console.print()
    _print_list("HOST PERMISSIONS:", result.declared_host_permissions)
    console.print()

    used = result.used_permissions()
    if not used:
        _print_list("USED PERMISSIONS:", [], empty="(none detected)")
    else:
        table = Table(title="Used Permissions", show_header=True, header_style="bold")
        table.add_column("Permission", style="bold")
        table.add_column("APIs")
        table.add_column("Files", style="dim")
        for permission, records in used.items():
            files = sorted({f for record in records for f in record.files})
            shown = ", ".join(files[:MAX_FILES_SHOWN])
            if len(files) > MAX_FILES_SHOWN:
                shown += "..."
            table.add_row(
                Text(permission),
                Text(", ".join(r.capability for r in records)),
                Text(shown),
            )
        console.print(table)

    if result.unused_permissions:
        console.print()
        console.print(Text("UNUSED PERMISSIONS:", style="yellow"))
        for perm in result.unused_permissions:
            console.print(Text(f"  - {perm}"))

    if result.missing_permissions:
        console.print()
        console.print(Text("MISSING PERMISSIONS:", style="bold red"))
        for perm in result.missing_permissions:
            console.print(Text(f"  - {perm}"))

    if result.suggestions:
        console.print()
        console.print(Text("SUGGESTIONS:", style="cyan"))
        for suggestion in result.suggestions:
            console.print(Text(f"  - {suggestion}"))

    console.print()
    console.print("[dim]Analysis complete. Review suggestions to optimize permissions.[/dim]")


def print_sync_result(result: SyncResult) -> None:
    """Print one line per category and a closing summary."""
    for category in result.skipped_categories:
        console.print(Text(f"[{category}] Not a valid category bundle, skipped", style="dim"))

    for change in result.categories:
        if not change.changed:
            console.print(Text(
                f"[{change.category}] No changes ({len(change.new_skills)} skills)",
                style="green",
            ))
            continue
        console.print(Text(f"[{change.category}] Changes detected:", style="bold"))
        console.print(Text(f"   Old: {len(change.old_skills)} skills"))
        console.print(Text(f"   New: {len(change.new_skills)} skills"))
        if result.dry_run:
            if change.added:
                console.print(Text(f"   + Added: {', '.join(change.added)}", style="green"))
            if change.removed:
                console.print(Text(f"   - Removed: {', '.join(change.removed)}", style="red"))
        elif change.written:
            console.print(Text(f"   Updated: {change.plugin_json}", style="green"))

    changed = len(result.changed)
    console.print()
    if changed == 0:
        console.print("[bold green]All plugin.json files are up to date![/bold green]")
    elif result.dry_run:
        console.print(f"Dry-run mode: {changed} file(s) would be updated")
        console.print("   Run without --dry-run to apply changes")
    else:
        console.print(f"[bold green]Successfully updated {changed} file(s)[/bold green]")

