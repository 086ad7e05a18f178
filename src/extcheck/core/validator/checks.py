"""Manifest V3 rule checks.

Each check is a pure function ``(document, probe) -> list[Finding]``.
Checks share no state and never look at each other's findings, so any
one of them can be tested in isolation. ``Check`` enumerates them and
``CHECK_ORDER`` fixes the sequence the engine runs them in, which keeps
report output stable across runs.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable

from extcheck.core.manifest import BROAD_HOST_PATTERNS, ConfigDocument, FileProbe
from extcheck.core.validator.models import Finding, Severity

SUPPORTED_MANIFEST_VERSION = 3
MAX_NAME_LENGTH = 75
RECOMMENDED_ICON_SIZES: tuple[str, ...] = ("16", "32", "48", "128")
UNSAFE_CSP_DIRECTIVES: tuple[str, ...] = ("unsafe-eval", "unsafe-inline", "unsafe-hashes")

# Above this many permissions, optional_permissions are recommended.
OPTIONAL_PERMISSIONS_THRESHOLD = 5

# 2 to 4 dot-separated numeric components.
_VERSION_PATTERN: re.Pattern[str] = re.compile(r"^\d+\.\d+(\.\d+)?(\.\d+)?$")

# Scheme-qualified match pattern, which belongs in host_permissions.
_HOST_PATTERN: re.Pattern[str] = re.compile(r"^(\*|https?|ftp)://")


def is_valid_version(version: str) -> bool:
    """Check a version string against the 1.2[.3[.4]] shape."""
    return _VERSION_PATTERN.match(version) is not None


def is_host_pattern(permission: str) -> bool:
    """Check whether a permission string is a URL match pattern."""
    return _HOST_PATTERN.match(permission) is not None


# ---------------------------------------------------------------------------
# Individual checks
# ---------------------------------------------------------------------------


def check_manifest_version(document: ConfigDocument, probe: FileProbe) -> list[Finding]:
    if document.manifest_version == SUPPORTED_MANIFEST_VERSION:
        return []
    found = "missing" if document.manifest_version is None else document.manifest_version
    return [Finding(
        Severity.ERROR,
        f"manifest_version must be {SUPPORTED_MANIFEST_VERSION} (found: {found})",
        "manifest_version",
    )]


def check_required_fields(document: ConfigDocument, probe: FileProbe) -> list[Finding]:
    """Name and version must be present. Name length and version shape."""
    findings: list[Finding] = []
    for field_name in ("name", "version"):
        if not getattr(document, field_name):
            findings.append(Finding(
                Severity.ERROR, f'Required field "{field_name}" is missing', field_name,
            ))

    if document.name and len(document.name) > MAX_NAME_LENGTH:
        findings.append(Finding(
            Severity.ERROR, f"Name must be {MAX_NAME_LENGTH} characters or less", "name",
        ))

    # A malformed version is not fatal.
    if document.version and not is_valid_version(document.version):
        findings.append(Finding(
            Severity.WARNING,
            "Version should follow semantic versioning (e.g., 1.0.0)",
            "version",
        ))
    return findings


def check_icons(document: ConfigDocument, probe: FileProbe) -> list[Finding]:
    if document.icons is None:
        return [Finding(
            Severity.WARNING, "Icons are recommended for better user experience", "icons",
        )]

    findings: list[Finding] = []
    for size in RECOMMENDED_ICON_SIZES:
        icon_path = document.icons.get(size)
        if not icon_path:
            findings.append(Finding(
                Severity.WARNING, f"Icon size {size}x{size} is recommended", f"icons.{size}",
            ))
        elif not probe.exists(icon_path):
            findings.append(Finding(
                Severity.ERROR, f"Icon file not found: {icon_path}", f"icons.{size}",
            ))
    return findings


def check_background(document: ConfigDocument, probe: FileProbe) -> list[Finding]:
    background = document.background
    if background is None:
        # Service workers are optional.
        return [Finding(
            Severity.INFO, "No background service worker defined", "background",
        )]

    # A null service_worker still counts as declared.
    if not background.has_service_worker_key:
        return [Finding(
            Severity.ERROR,
            "Manifest V3 requires 'service_worker' in background field",
            "background",
        )]

    if background.service_worker and not probe.exists(background.service_worker):
        return [Finding(
            Severity.ERROR,
            f"Service worker file not found: {background.service_worker}",
            "background.service_worker",
        )]
    return []


def check_permissions(document: ConfigDocument, probe: FileProbe) -> list[Finding]:
    findings: list[Finding] = []
    permissions = document.declared_permissions

    for perm in permissions:
        if is_host_pattern(perm):
            findings.append(Finding(
                Severity.ERROR,
                f'Host permission "{perm}" should be in "host_permissions", '
                f'not "permissions"',
                "permissions",
            ))

    for perm in document.declared_host_permissions:
        if perm in BROAD_HOST_PATTERNS:
            findings.append(Finding(
                Severity.WARNING,
                f'Overly broad host permission: "{perm}". Consider narrowing scope.',
                "host_permissions",
            ))

    if len(permissions) > OPTIONAL_PERMISSIONS_THRESHOLD and not document.optional_permissions:
        findings.append(Finding(
            Severity.INFO,
            "Consider using optional_permissions for non-critical features",
            "permissions",
        ))
    return findings


def check_content_scripts(document: ConfigDocument, probe: FileProbe) -> list[Finding]:
    findings: list[Finding] = []
    for index, script in enumerate(document.content_scripts or ()):
        prefix = f"content_scripts[{index}]"
        if not script.matches:
            findings.append(Finding(
                Severity.ERROR,
                f"Content script {index} must have at least one match pattern",
                f"{prefix}.matches",
            ))
        for js_file in script.js or ():
            if not probe.exists(js_file):
                findings.append(Finding(
                    Severity.ERROR, f"Content script file not found: {js_file}", f"{prefix}.js",
                ))
        for css_file in script.css or ():
            if not probe.exists(css_file):
                findings.append(Finding(
                    Severity.ERROR,
                    f"Content script CSS file not found: {css_file}",
                    f"{prefix}.css",
                ))
    return findings


def check_web_accessible_resources(
    document: ConfigDocument, probe: FileProbe,
) -> list[Finding]:
    findings: list[Finding] = []
    for index, entry in enumerate(document.web_accessible_resources or ()):
        prefix = f"web_accessible_resources[{index}]"
        if not entry.resources:
            findings.append(Finding(
                Severity.ERROR,
                "web_accessible_resources must have at least one resource",
                f"{prefix}.resources",
            ))
        if not entry.matches:
            findings.append(Finding(
                Severity.ERROR,
                "web_accessible_resources must have at least one match pattern",
                f"{prefix}.matches",
            ))
    return findings


def check_content_security_policy(
    document: ConfigDocument, probe: FileProbe,
) -> list[Finding]:
    """Substring scan of the extension-pages policy. No syntax validation."""
    csp = document.content_security_policy
    if csp is None or not csp.extension_pages:
        return []
    return [
        Finding(
            Severity.WARNING,
            f"CSP contains unsafe directive: {directive}",
            "content_security_policy.extension_pages",
        )
        for directive in UNSAFE_CSP_DIRECTIVES
        if directive in csp.extension_pages
    ]


# ---------------------------------------------------------------------------
# Check catalog
# ---------------------------------------------------------------------------

CheckFunction = Callable[[ConfigDocument, FileProbe], list[Finding]]


class Check(str, Enum):
    """The fixed set of manifest checks."""

    MANIFEST_VERSION = "manifest_version"
    REQUIRED_FIELDS = "required_fields"
    ICONS = "icons"
    BACKGROUND = "background"
    PERMISSIONS = "permissions"
    CONTENT_SCRIPTS = "content_scripts"
    WEB_ACCESSIBLE_RESOURCES = "web_accessible_resources"
    CONTENT_SECURITY_POLICY = "content_security_policy"


_CHECK_FUNCTIONS: dict[Check, CheckFunction] = {
    Check.MANIFEST_VERSION: check_manifest_version,
    Check.REQUIRED_FIELDS: check_required_fields,
    Check.ICONS: check_icons,
    Check.BACKGROUND: check_background,
    Check.PERMISSIONS: check_permissions,
    Check.CONTENT_SCRIPTS: check_content_scripts,
    Check.WEB_ACCESSIBLE_RESOURCES: check_web_accessible_resources,
    Check.CONTENT_SECURITY_POLICY: check_content_security_policy,
}

# Execution order; findings are reported in this order.
CHECK_ORDER: tuple[Check, ...] = tuple(Check)


def run_check(check: Check, document: ConfigDocument, probe: FileProbe) -> list[Finding]:
    """Run a single check and return its findings."""
    return _CHECK_FUNCTIONS[check](document, probe)
