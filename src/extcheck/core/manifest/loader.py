"""Load a ``manifest.json`` file into a ``ConfigDocument``.

Loading is all-or-nothing. An unreadable file, malformed JSON, a
top-level value that is not an object, or a field whose JSON type does
not fit the manifest shape raises ``ManifestLoadError``; no partially
populated document is ever returned.

Two sections are exempt because Manifest V2 gave them a different
shape: a string ``content_security_policy`` and bare path strings in
``web_accessible_resources``. Those load as present but empty, so an
older manifest still reaches validation and is reported there.

Absent keys become ``None`` on the document. Present keys keep their
value even when empty, so ``"icons": {}`` and a missing ``icons`` key
remain distinguishable downstream.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from extcheck.core.manifest.models import (
    ActionDescriptor,
    BackgroundDescriptor,
    ConfigDocument,
    ContentScript,
    ContentSecurityPolicy,
    RunAt,
    WebAccessibleResource,
)
from extcheck.exceptions import ManifestLoadError

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "manifest.json"


# ---------------------------------------------------------------------------
# Field coercion helpers
# ---------------------------------------------------------------------------


def _type_error(field_path: str, expected: str, value: Any) -> ManifestLoadError:
    return ManifestLoadError(
        f"Invalid manifest field {field_path!r}: expected {expected}, "
        f"got {type(value).__name__}"
    )


def _opt_str(data: Mapping[str, Any], key: str, field_path: str) -> str | None:
    if key not in data or data[key] is None:
        return None
    value = data[key]
    if not isinstance(value, str):
        raise _type_error(field_path, "a string", value)
    return value


def _opt_str_list(
    data: Mapping[str, Any], key: str, field_path: str,
) -> tuple[str, ...] | None:
    if key not in data or data[key] is None:
        return None
    value = data[key]
    if not isinstance(value, list):
        raise _type_error(field_path, "an array", value)
    for index, item in enumerate(value):
        if not isinstance(item, str):
            raise _type_error(f"{field_path}[{index}]", "a string", item)
    return tuple(value)


def _opt_object(
    data: Mapping[str, Any], key: str, field_path: str,
) -> dict[str, Any] | None:
    if key not in data or data[key] is None:
        return None
    value = data[key]
    if not isinstance(value, dict):
        raise _type_error(field_path, "an object", value)
    return value


def _opt_list(
    data: Mapping[str, Any], key: str, field_path: str,
) -> list[Any] | None:
    if key not in data or data[key] is None:
        return None
    value = data[key]
    if not isinstance(value, list):
        raise _type_error(field_path, "an array", value)
    return value


def _opt_object_list(
    data: Mapping[str, Any], key: str, field_path: str,
) -> list[dict[str, Any]] | None:
    value = _opt_list(data, key, field_path)
    if value is None:
        return None
    for index, item in enumerate(value):
        if not isinstance(item, dict):
            raise _type_error(f"{field_path}[{index}]", "an object", item)
    return value


def _path_map(raw: dict[str, Any], field_path: str) -> Mapping[str, str]:
    for size, rel_path in raw.items():
        if not isinstance(rel_path, str):
            raise _type_error(f"{field_path}.{size}", "a string", rel_path)
    return MappingProxyType(dict(raw))


# ---------------------------------------------------------------------------
# Section parsers
# ---------------------------------------------------------------------------


def _parse_action(raw: dict[str, Any]) -> ActionDescriptor:
    icon = raw.get("default_icon")
    default_icon: str | Mapping[str, str] | None
    if icon is None or isinstance(icon, str):
        default_icon = icon
    elif isinstance(icon, dict):
        default_icon = _path_map(icon, "action.default_icon")
    else:
        raise _type_error("action.default_icon", "a string or an object", icon)
    return ActionDescriptor(
        default_popup=_opt_str(raw, "default_popup", "action.default_popup"),
        default_title=_opt_str(raw, "default_title", "action.default_title"),
        default_icon=default_icon,
    )


def _parse_background(raw: dict[str, Any]) -> BackgroundDescriptor:
    return BackgroundDescriptor(
        service_worker=_opt_str(raw, "service_worker", "background.service_worker"),
        module=raw.get("type") == "module",
        has_service_worker_key="service_worker" in raw,
    )


def _parse_content_script(raw: dict[str, Any], index: int) -> ContentScript:
    prefix = f"content_scripts[{index}]"
    run_at_raw = _opt_str(raw, "run_at", f"{prefix}.run_at")
    run_at: RunAt | None = None
    if run_at_raw is not None:
        try:
            run_at = RunAt(run_at_raw)
        except ValueError as exc:
            raise ManifestLoadError(
                f"Invalid manifest field '{prefix}.run_at': "
                f"unknown injection timing {run_at_raw!r}"
            ) from exc
    return ContentScript(
        matches=_opt_str_list(raw, "matches", f"{prefix}.matches"),
        js=_opt_str_list(raw, "js", f"{prefix}.js"),
        css=_opt_str_list(raw, "css", f"{prefix}.css"),
        run_at=run_at,
    )


def _parse_web_resource(raw: Any, index: int) -> WebAccessibleResource:
    prefix = f"web_accessible_resources[{index}]"
    if not isinstance(raw, dict):
        logger.debug("Treating %s as an empty entry (legacy %s)", prefix, type(raw).__name__)
        return WebAccessibleResource()
    return WebAccessibleResource(
        resources=_opt_str_list(raw, "resources", f"{prefix}.resources"),
        matches=_opt_str_list(raw, "matches", f"{prefix}.matches"),
    )


def _parse_csp(raw: Any) -> ContentSecurityPolicy:
    if not isinstance(raw, dict):
        # Manifest V2 single policy string: no extension_pages policy.
        logger.debug("Treating content_security_policy %s as empty", type(raw).__name__)
        return ContentSecurityPolicy()
    return ContentSecurityPolicy(
        extension_pages=_opt_str(
            raw, "extension_pages", "content_security_policy.extension_pages",
        ),
        sandbox=_opt_str(raw, "sandbox", "content_security_policy.sandbox"),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_manifest(data: Any, source_path: str | None = None) -> ConfigDocument:
    """Build a ``ConfigDocument`` from already-decoded JSON data.

    Args:
        data: The decoded JSON value. Must be an object.
        source_path: Where the data came from, kept for reporting only.

    Returns:
        The immutable document.

    Raises:
        ManifestLoadError: If the data does not fit the manifest shape.
    """
    if not isinstance(data, dict):
        raise ManifestLoadError(
            f"Manifest must be a JSON object, got {type(data).__name__}"
        )

    icons = _opt_object(data, "icons", "icons")
    action = _opt_object(data, "action", "action")
    background = _opt_object(data, "background", "background")
    scripts = _opt_object_list(data, "content_scripts", "content_scripts")
    resources = _opt_list(data, "web_accessible_resources", "web_accessible_resources")
    csp = data.get("content_security_policy")

    return ConfigDocument(
        manifest_version=data.get("manifest_version"),
        name=_opt_str(data, "name", "name"),
        version=_opt_str(data, "version", "version"),
        description=_opt_str(data, "description", "description"),
        icons=_path_map(icons, "icons") if icons is not None else None,
        action=_parse_action(action) if action is not None else None,
        background=_parse_background(background) if background is not None else None,
        content_scripts=(
            tuple(_parse_content_script(s, i) for i, s in enumerate(scripts))
            if scripts is not None else None
        ),
        permissions=_opt_str_list(data, "permissions", "permissions"),
        host_permissions=_opt_str_list(data, "host_permissions", "host_permissions"),
        optional_permissions=_opt_str_list(
            data, "optional_permissions", "optional_permissions",
        ),
        web_accessible_resources=(
            tuple(_parse_web_resource(r, i) for i, r in enumerate(resources))
            if resources is not None else None
        ),
        content_security_policy=_parse_csp(csp) if csp is not None else None,
        source_path=source_path,
    )


def load_manifest(path: Path | str) -> ConfigDocument:
    """Read and parse a manifest file.

    Args:
        path: Path to ``manifest.json``.

    Returns:
        The loaded ``ConfigDocument``.

    Raises:
        ManifestLoadError: If the file cannot be read or parsed.
    """
    manifest_path = Path(path)
    try:
        raw_content = manifest_path.read_text(encoding="utf-8")
        data = json.loads(raw_content)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ManifestLoadError(f"Failed to load manifest.json: {exc}") from exc

    document = parse_manifest(data, source_path=str(manifest_path))
    logger.debug("Loaded manifest %s (name=%r)", manifest_path, document.name)
    return document
