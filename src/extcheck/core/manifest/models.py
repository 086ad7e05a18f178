"""Typed, immutable representation of a Manifest V3 document.

``ConfigDocument`` is produced once per invocation by the loader and is
never mutated afterwards. Every optional field uses ``None`` to mean
"the key was absent from the JSON", which is distinct from a present but
empty value (``()`` or ``{}``). The validation rules depend on that
distinction: an absent ``icons`` map yields one warning, an empty one
yields a warning per recommended size.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

# Host patterns that grant access to every site.
BROAD_HOST_PATTERNS: frozenset[str] = frozenset({"*://*/*", "<all_urls>"})


class RunAt(str, Enum):
    """Content-script injection timing."""

    DOCUMENT_START = "document_start"
    DOCUMENT_END = "document_end"
    DOCUMENT_IDLE = "document_idle"


@dataclass(frozen=True)
class BackgroundDescriptor:
    """The ``background`` entry of a manifest.

    Attributes:
        service_worker: Entry-point path, or None when the key is absent
            or null.
        module: True when ``"type": "module"`` is declared.
        has_service_worker_key: True when ``service_worker`` appears in
            the JSON, even with a null value.
    """

    service_worker: str | None = None
    module: bool = False
    has_service_worker_key: bool = False


@dataclass(frozen=True)
class ContentScript:
    """One ``content_scripts`` entry.

    Attributes:
        matches: Match patterns, or None when the key is absent.
        js: Script paths in injection order, or None when absent.
        css: Style paths in injection order, or None when absent.
        run_at: Injection timing, or None when absent.
    """

    matches: tuple[str, ...] | None = None
    js: tuple[str, ...] | None = None
    css: tuple[str, ...] | None = None
    run_at: RunAt | None = None


@dataclass(frozen=True)
class WebAccessibleResource:
    """One ``web_accessible_resources`` entry."""

    resources: tuple[str, ...] | None = None
    matches: tuple[str, ...] | None = None


@dataclass(frozen=True)
class ContentSecurityPolicy:
    """The ``content_security_policy`` entry."""

    extension_pages: str | None = None
    sandbox: str | None = None


@dataclass(frozen=True)
class ActionDescriptor:
    """The toolbar ``action`` entry.

    ``default_icon`` is either a single path or a size-to-path map.
    """

    default_popup: str | None = None
    default_title: str | None = None
    default_icon: str | Mapping[str, str] | None = None


@dataclass(frozen=True)
class ConfigDocument:
    """Immutable snapshot of a loaded manifest.

    ``manifest_version`` keeps whatever scalar the JSON held so that the
    version check can report the value it actually found.
    """

    manifest_version: Any = None
    name: str | None = None
    version: str | None = None
    description: str | None = None
    icons: Mapping[str, str] | None = None
    action: ActionDescriptor | None = None
    background: BackgroundDescriptor | None = None
    content_scripts: tuple[ContentScript, ...] | None = None
    permissions: tuple[str, ...] | None = None
    host_permissions: tuple[str, ...] | None = None
    optional_permissions: tuple[str, ...] | None = None
    web_accessible_resources: tuple[WebAccessibleResource, ...] | None = None
    content_security_policy: ContentSecurityPolicy | None = None
    source_path: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.icons is not None and not isinstance(self.icons, MappingProxyType):
            object.__setattr__(self, "icons", MappingProxyType(dict(self.icons)))

    @property
    def declared_permissions(self) -> tuple[str, ...]:
        """Plain permissions, empty when the key is absent."""
        return self.permissions or ()

    @property
    def declared_host_permissions(self) -> tuple[str, ...]:
        """Host-scoped permissions, empty when the key is absent."""
        return self.host_permissions or ()

    @property
    def broad_host_permissions(self) -> tuple[str, ...]:
        """Declared host permissions that match every site, in declared order."""
        return tuple(
            perm for perm in self.declared_host_permissions
            if perm in BROAD_HOST_PATTERNS
        )
