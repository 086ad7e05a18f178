"""Optional YAML configuration for registry synchronization.

Example ``sync.yaml``::

    excluded_categories:
      - templates
      - archived
"""

from __future__ import annotations

from pathlib import Path

import yaml

from extcheck.bundles.models import SyncConfig
from extcheck.exceptions import RegistrySyncError


def load_sync_config(path: Path | str | None) -> SyncConfig:
    """Load sync settings, or defaults when ``path`` is None.

    Raises:
        RegistrySyncError: If the file cannot be read or has the wrong shape.
    """
    if path is None:
        return SyncConfig()

    config_path = Path(path)
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise RegistrySyncError(f"Failed to load sync config {config_path}: {exc}") from exc

    if data is None:
        return SyncConfig()
    if not isinstance(data, dict):
        raise RegistrySyncError(f"Sync config {config_path} must be a mapping")

    excluded = data.get("excluded_categories") or []
    if not isinstance(excluded, list) or not all(isinstance(e, str) for e in excluded):
        raise RegistrySyncError(
            f"'excluded_categories' in {config_path} must be a list of names"
        )
    return SyncConfig(excluded_categories=frozenset(excluded))
