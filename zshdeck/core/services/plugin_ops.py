"""
Plugin management — the ``plugins=( ... )`` list in the plugin host file.

Enable and disable touch only the first marker span of the host document.
A host without a marker is left alone: both operations fail with
``source_missing`` instead of inventing one.

Channel-independent: no click or Flask dependency.
"""

from __future__ import annotations

import logging

from zshdeck.core.data import get_registry
from zshdeck.core.models.paths import ShellPaths
from zshdeck.core.models.records import ErrorKind, PluginInfo
from zshdeck.core.parsing.plugins import find_plugin_span, parse_plugins, splice_plugins
from zshdeck.core.persistence.shell_file import ShellFileError, read_text, write_text
from zshdeck.core.services.results import fail, ok

logger = logging.getLogger(__name__)


def _is_installed(paths: ShellPaths, name: str) -> bool:
    return any((d / name).exists() for d in paths.omz_plugin_dirs)


def _plugin_info(paths: ShellPaths, name: str, *, enabled: bool) -> dict:
    entry = get_registry().lookup_plugin(name)
    info = PluginInfo(
        **entry.model_dump(),
        enabled=enabled,
        installed=_is_installed(paths, name),
    )
    return info.model_dump(mode="json")


def _validate_name(name: str) -> dict | None:
    if not name:
        return fail(ErrorKind.INVALID, "Plugin name is required")
    if any(ch.isspace() or ch in "()" for ch in name):
        return fail(ErrorKind.INVALID, f"Invalid plugin name '{name}'")
    return None


# ═══════════════════════════════════════════════════════════════════
#  Read
# ═══════════════════════════════════════════════════════════════════


def list_enabled(paths: ShellPaths) -> dict:
    """Enabled plugins, sorted by name, with catalog metadata."""
    host = paths.plugin_host
    try:
        text = read_text(host)
    except ShellFileError as e:
        return fail(ErrorKind.IO_FAILURE, str(e))

    if text is None:
        return {"path": str(host), "exists": False, "marker": False, "plugins": []}

    span = find_plugin_span(text)
    names = sorted(span.plugins) if span else []
    return {
        "path": str(host),
        "exists": True,
        "marker": span is not None,
        "plugins": [_plugin_info(paths, n, enabled=True) for n in names],
    }


def list_catalog_unused(paths: ShellPaths) -> dict:
    """Catalog plugins that are not currently enabled, sorted by name."""
    try:
        text = read_text(paths.plugin_host)
    except ShellFileError as e:
        return fail(ErrorKind.IO_FAILURE, str(e))

    enabled = set(parse_plugins(text or ""))
    names = sorted(n for n in get_registry().plugin_catalog if n not in enabled)
    return {"plugins": [_plugin_info(paths, n, enabled=False) for n in names]}


# ═══════════════════════════════════════════════════════════════════
#  Mutations
# ═══════════════════════════════════════════════════════════════════


def enable_plugin(paths: ShellPaths, name: str) -> dict:
    """Add ``name`` to the plugin list.  The whole list is re-sorted."""
    name = name.strip()
    invalid = _validate_name(name)
    if invalid:
        return invalid

    host = paths.plugin_host
    try:
        text = read_text(host)
        if text is None:
            return fail(ErrorKind.NOT_FOUND, f"{host} does not exist")

        span = find_plugin_span(text)
        if span is None:
            return fail(ErrorKind.SOURCE_MISSING, f"No plugins=( ... ) list found in {host}")

        if name in span.plugins:
            return fail(
                ErrorKind.ALREADY_EXISTS,
                f"Plugin '{name}' is already enabled",
                name=name,
            )

        plugins = sorted([*span.plugins, name])
        write_text(host, splice_plugins(text, span, plugins))
    except ShellFileError as e:
        return fail(ErrorKind.IO_FAILURE, str(e))

    logger.info("Enabled plugin %s in %s", name, host)
    return ok(f"Enabled plugin {name}", name=name, plugins=plugins)


def disable_plugin(paths: ShellPaths, name: str) -> dict:
    """Remove ``name`` from the plugin list, keeping the current order."""
    name = name.strip()
    host = paths.plugin_host
    try:
        text = read_text(host)
        if text is None:
            return fail(ErrorKind.NOT_FOUND, f"{host} does not exist")

        span = find_plugin_span(text)
        if span is None:
            return fail(ErrorKind.SOURCE_MISSING, f"No plugins=( ... ) list found in {host}")

        if name not in span.plugins:
            return fail(
                ErrorKind.NOT_FOUND,
                f"Plugin '{name}' is not enabled",
                name=name,
            )

        plugins = [p for p in span.plugins if p != name]
        write_text(host, splice_plugins(text, span, plugins))
    except ShellFileError as e:
        return fail(ErrorKind.IO_FAILURE, str(e))

    logger.info("Disabled plugin %s in %s", name, host)
    return ok(f"Disabled plugin {name}", name=name, plugins=plugins)
