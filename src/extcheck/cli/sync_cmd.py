"""``extcheck sync-registry <plugins-dir>`` - Sync bundle skill lists.

Rewrites each category's ``.claude-plugin/plugin.json`` ``skills`` array
to match the plugin directories on disk.

Exit Codes:
    0 - Sync (or dry run) completed.
    2 - A directory, config, or plugin.json could not be read or written.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from extcheck.bundles import RegistrySync, SyncResult, load_sync_config
from extcheck.exceptions import RegistrySyncError


def _result_to_json(result: SyncResult) -> dict:
    return {
        "dry_run": result.dry_run,
        "skipped_categories": result.skipped_categories,
        "categories": [
            {
                "category": c.category,
                "changed": c.changed,
                "written": c.written,
                "added": c.added,
                "removed": c.removed,
                "skills": c.new_skills,
            }
            for c in result.categories
        ],
    }


@click.command("sync-registry")
@click.argument("plugins_dir", type=click.Path(exists=True, file_okay=False))
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Report differences without writing any file.",
)
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML file with an excluded_categories list.",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def sync_registry_command(
    plugins_dir: str,
    dry_run: bool,
    config_path: str | None,
    output_format: str,
) -> None:
    """Regenerate category plugin.json skill lists from PLUGINS_DIR.

    Each plugin directory contributes "./<plugin>/skills/" when it holds
    skills/SKILL.md, or "./<plugin>/" when it holds SKILL.md.
    """
    try:
        config = load_sync_config(config_path)
        result = RegistrySync(Path(plugins_dir), config).run(dry_run=dry_run)
    except RegistrySyncError as exc:
        if output_format == "json":
            click.echo(json.dumps({"error": str(exc)}))
        else:
            click.echo(f"Error: {exc}")
        sys.exit(2)

    if output_format == "json":
        click.echo(json.dumps(_result_to_json(result), indent=2))
    else:
        from extcheck.cli.output import print_sync_result
        print_sync_result(result)
