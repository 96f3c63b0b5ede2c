"""
Alias CRUD — list, add, update, delete ``alias`` lines.

Add appends one line.  Update and delete rewrite the file line by line,
touching only the first matching alias line; every other line (comments,
exports, malformed aliases) is written back verbatim.

Channel-independent: no click or Flask dependency.
"""

from __future__ import annotations

import logging
from pathlib import Path

from zshdeck.core.models.paths import ShellPaths
from zshdeck.core.models.records import ErrorKind, Scope
from zshdeck.core.parsing.aliases import parse_alias_line, parse_aliases, render_alias
from zshdeck.core.parsing.lines import split_lines
from zshdeck.core.persistence.shell_file import (
    ShellFileError,
    ensure_parent_dir,
    read_text,
    write_lines,
    write_text,
)
from zshdeck.core.services.results import fail, ok

logger = logging.getLogger(__name__)


def _validate_name(name: str) -> dict | None:
    if not name.strip():
        return fail(ErrorKind.INVALID, "Alias name is required")
    if "=" in name or any(ch.isspace() for ch in name.strip()):
        return fail(ErrorKind.INVALID, f"Invalid alias name '{name}'")
    return None


def _validate_value(name: str, value: str) -> dict | None:
    # One alias per line
    if "\n" in value or "\r" in value:
        return fail(ErrorKind.INVALID, f"Alias '{name}' value must be a single line")
    return None


def _find_line(lines: list[str], name: str) -> int | None:
    """Index of the first alias line defining ``name``."""
    for i, line in enumerate(lines):
        record = parse_alias_line(line)
        if record is not None and record.name == name:
            return i
    return None


# ═══════════════════════════════════════════════════════════════════
#  Read
# ═══════════════════════════════════════════════════════════════════


def _list_from(path: Path, scope: Scope) -> dict:
    try:
        text = read_text(path)
    except ShellFileError as e:
        return fail(ErrorKind.IO_FAILURE, str(e))

    records = parse_aliases(text or "", scope)
    return {
        "scope": scope.value,
        "path": str(path),
        "exists": text is not None,
        "aliases": [r.model_dump(mode="json") for r in records],
    }


def list_aliases(paths: ShellPaths, scope: Scope) -> dict:
    """Aliases of one scope in file order.  Absent file → empty list."""
    return _list_from(paths.aliases(scope), scope)


def list_secrets_aliases(paths: ShellPaths) -> dict:
    """Aliases from the secrets file.  Always local scope, read-only."""
    if paths.secrets_aliases is None:
        return {"scope": Scope.LOCAL.value, "path": None, "exists": False, "aliases": []}
    return _list_from(paths.secrets_aliases, Scope.LOCAL)


# ═══════════════════════════════════════════════════════════════════
#  Mutations
# ═══════════════════════════════════════════════════════════════════


def add_alias(paths: ShellPaths, name: str, value: str, scope: Scope) -> dict:
    """Append a new alias.  Creates the file (and its directory) if needed."""
    name = name.strip()
    invalid = _validate_name(name) or _validate_value(name, value)
    if invalid:
        return invalid

    path = paths.aliases(scope)
    try:
        content = read_text(path) or ""
        if any(r.name == name for r in parse_aliases(content)):
            return fail(
                ErrorKind.ALREADY_EXISTS,
                f"Alias '{name}' already exists in {path}",
                name=name,
            )

        if content and not content.endswith("\n"):
            content += "\n"
        content += render_alias(name, value) + "\n"

        ensure_parent_dir(path)
        write_text(path, content)
    except ShellFileError as e:
        return fail(ErrorKind.IO_FAILURE, str(e))

    logger.info("Added alias %s to %s", name, path)
    return ok(f"Added alias {name}", name=name, scope=scope.value)


def update_alias(
    paths: ShellPaths,
    old_name: str,
    new_name: str | None,
    value: str,
    scope: Scope,
) -> dict:
    """Replace the first alias named ``old_name`` (optionally renaming it)."""
    target = (new_name or old_name).strip()
    invalid = _validate_name(target) or _validate_value(target, value)
    if invalid:
        return invalid

    path = paths.aliases(scope)
    try:
        content = read_text(path)
        if content is None:
            return fail(ErrorKind.NOT_FOUND, f"Alias file not found: {path}")

        lines = split_lines(content)
        idx = _find_line(lines, old_name)
        if idx is None:
            return fail(
                ErrorKind.NOT_FOUND,
                f"Alias '{old_name}' not found in {path}",
                name=old_name,
            )

        if target != old_name and _find_line(lines, target) is not None:
            return fail(
                ErrorKind.ALREADY_EXISTS,
                f"Alias '{target}' already exists in {path}",
                name=target,
            )

        lines[idx] = render_alias(target, value)
        write_lines(path, lines)
    except ShellFileError as e:
        return fail(ErrorKind.IO_FAILURE, str(e))

    if target != old_name:
        logger.info("Renamed alias %s -> %s in %s", old_name, target, path)
    else:
        logger.info("Updated alias %s in %s", target, path)
    return ok(f"Updated alias {target}", name=target, scope=scope.value)


def delete_alias(paths: ShellPaths, name: str, scope: Scope) -> dict:
    """Remove the first alias line named ``name``."""
    path = paths.aliases(scope)
    try:
        content = read_text(path)
        if content is None:
            return fail(ErrorKind.NOT_FOUND, f"Alias file not found: {path}")

        lines = split_lines(content)
        idx = _find_line(lines, name)
        if idx is None:
            return fail(
                ErrorKind.NOT_FOUND,
                f"Alias '{name}' not found in {path}",
                name=name,
            )

        del lines[idx]
        write_lines(path, lines)
    except ShellFileError as e:
        return fail(ErrorKind.IO_FAILURE, str(e))

    logger.info("Deleted alias %s from %s", name, path)
    return ok(f"Deleted alias {name}", name=name, scope=scope.value)
