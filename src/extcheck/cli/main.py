"""ExtCheck CLI - Manifest and permission checks for browser extensions.

Entry point for the ``extcheck`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    validate       - Validate a manifest.json for Manifest V3 compliance.
    permissions    - Compare declared permissions with APIs used in code.
    sync-registry  - Regenerate plugin.json skill lists from disk.

Usage::

    extcheck validate ./my-extension/manifest.json
    extcheck validate ./my-extension/manifest.json --format json
    extcheck permissions ./my-extension
    extcheck permissions ./my-extension --ext .mjs --ext .js
    extcheck sync-registry ./plugins --dry-run
"""

from __future__ import annotations

import click

from extcheck import __version__
from extcheck.cli.permissions_cmd import permissions_command
from extcheck.cli.sync_cmd import sync_registry_command
from extcheck.cli.validate_cmd import validate_command


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """ExtCheck: Manifest validation and permission analysis.

    Validate Manifest V3 documents against a fixed rule set and find
    permissions a browser extension declares but never uses, or uses
    but never declares.
    """


# Register all subcommands
cli.add_command(validate_command)
cli.add_command(permissions_command)
cli.add_command(sync_registry_command)
