"""Capability detection pattern and the capability-to-permission table.

Detection is lexical: any ``chrome.<namespace>`` reference in the text
counts, including ones inside comments and string literals. That
over-approximation is accepted; it can only surface a permission as
used, never hide one.

``CAPABILITY_PERMISSIONS`` is closed-world. Identifiers outside it (for
example ``chrome.runtime``, which needs no permission) are ignored
rather than reported as unknown.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

# chrome.<namespace> optionally followed by .<member>. The capability is
# the two-level ``chrome.<namespace>`` name.
_CAPABILITY_PATTERN: re.Pattern[str] = re.compile(r"\bchrome\.(\w+)(?:\.(\w+))?")

CAPABILITY_PERMISSIONS: Mapping[str, str] = MappingProxyType({
    "chrome.tabs": "tabs",
    "chrome.storage": "storage",
    "chrome.bookmarks": "bookmarks",
    "chrome.history": "history",
    "chrome.cookies": "cookies",
    "chrome.webRequest": "webRequest",
    "chrome.webNavigation": "webNavigation",
    "chrome.scripting": "scripting",
    "chrome.downloads": "downloads",
    "chrome.notifications": "notifications",
    "chrome.contextMenus": "contextMenus",
    "chrome.identity": "identity",
    "chrome.alarms": "alarms",
    "chrome.declarativeNetRequest": "declarativeNetRequest",
})

# Permissions whose features can usually be requested at runtime.
NON_CRITICAL_PERMISSIONS: tuple[str, ...] = ("tabs", "bookmarks", "history")


def detect_capabilities(text: str) -> frozenset[str]:
    """Return the distinct capability identifiers referenced in ``text``."""
    return frozenset(
        f"chrome.{match.group(1)}" for match in _CAPABILITY_PATTERN.finditer(text)
    )


def permission_for(capability: str) -> str | None:
    """Return the permission a capability requires, or None if unmapped."""
    return CAPABILITY_PERMISSIONS.get(capability)
