"""Manifest V3 document model, loader, and path probe.

Submodules
----------
- ``models``: The immutable ``ConfigDocument`` and its descriptors.
- ``loader``: ``load_manifest`` / ``parse_manifest`` (JSON to document).
- ``probe``: ``FileProbe`` for existence checks of declared paths.

All public names are re-exported here::

    from extcheck.core.manifest import ConfigDocument, FileProbe, load_manifest
"""

from extcheck.core.manifest.models import (
    BROAD_HOST_PATTERNS,
    ActionDescriptor,
    BackgroundDescriptor,
    ConfigDocument,
    ContentScript,
    ContentSecurityPolicy,
    RunAt,
    WebAccessibleResource,
)
from extcheck.core.manifest.loader import MANIFEST_FILENAME, load_manifest, parse_manifest
from extcheck.core.manifest.probe import FileProbe

__all__ = [
    "ActionDescriptor",
    "BROAD_HOST_PATTERNS",
    "BackgroundDescriptor",
    "ConfigDocument",
    "ContentScript",
    "ContentSecurityPolicy",
    "FileProbe",
    "MANIFEST_FILENAME",
    "RunAt",
    "WebAccessibleResource",
    "load_manifest",
    "parse_manifest",
]
