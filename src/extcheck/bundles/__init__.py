"""Plugin registry skill-list synchronization.

Public API::

    from extcheck.bundles import RegistrySync, load_sync_config

    result = RegistrySync(Path("plugins"), load_sync_config(None)).run()
"""

from __future__ import annotations

from extcheck.bundles.config import load_sync_config
from extcheck.bundles.models import CategoryChange, SyncConfig, SyncResult
from extcheck.bundles.sync import RegistrySync, detect_skill_path, generate_skill_paths

__all__ = [
    "CategoryChange",
    "RegistrySync",
    "SyncConfig",
    "SyncResult",
    "detect_skill_path",
    "generate_skill_paths",
    "load_sync_config",
]
