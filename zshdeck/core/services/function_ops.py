"""
Function CRUD — list, add, update, delete, format function blocks.

Add appends a block (after one blank separator line).  Update and delete
splice only the affected block's line span, so comments, unclosed headers
and any other text in the file stay exactly as they were.

``format_functions`` is the one operation that regenerates the whole file
from the recognized blocks; it drops everything else and says how much.

Channel-independent: no click or Flask dependency.
"""

from __future__ import annotations

import logging
import textwrap

from zshdeck.core.models.paths import ShellPaths
from zshdeck.core.models.records import ErrorKind, Scope
from zshdeck.core.parsing.functions import (
    FunctionBlock,
    parse_functions,
    render_function,
    render_functions,
    scan_blocks,
)
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
    if not name:
        return fail(ErrorKind.INVALID, "Function name is required")
    if any(ch.isspace() or ch in "(){}" for ch in name):
        return fail(ErrorKind.INVALID, f"Invalid function name '{name}'")
    return None


def _normalize_body(body: str) -> str:
    return textwrap.dedent(body.rstrip()).strip("\n")


def _is_blank(line: str) -> bool:
    return not line.strip(" \t\r")


def _find_block(blocks: list[FunctionBlock], name: str) -> FunctionBlock | None:
    return next((b for b in blocks if b.name == name), None)


def list_functions(paths: ShellPaths, scope: Scope) -> dict:
    """Function blocks of one scope in file order.  Absent file → empty list."""
    path = paths.functions(scope)
    try:
        text = read_text(path)
    except ShellFileError as e:
        return fail(ErrorKind.IO_FAILURE, str(e))

    records = parse_functions(text or "", scope)
    return {
        "scope": scope.value,
        "path": str(path),
        "exists": text is not None,
        "functions": [r.model_dump(mode="json") for r in records],
    }


def add_function(paths: ShellPaths, name: str, body: str, scope: Scope) -> dict:
    """Append a new function block.  Creates the file if needed."""
    name = name.strip()
    invalid = _validate_name(name)
    if invalid:
        return invalid

    path = paths.functions(scope)
    try:
        content = read_text(path) or ""
        if any(r.name == name for r in parse_functions(content)):
            return fail(
                ErrorKind.ALREADY_EXISTS,
                f"Function '{name}' already exists in {path}",
                name=name,
            )

        if content and not content.endswith("\n"):
            content += "\n"
        if content:
            content += "\n"
        content += render_function(name, _normalize_body(body))

        ensure_parent_dir(path)
        write_text(path, content)
    except ShellFileError as e:
        return fail(ErrorKind.IO_FAILURE, str(e))

    logger.info("Added function %s to %s", name, path)
    return ok(f"Added function {name}", name=name, scope=scope.value)


def update_function(
    paths: ShellPaths,
    name: str,
    body: str,
    scope: Scope,
    *,
    new_name: str | None = None,
) -> dict:
    """Replace the body (and optionally the name) of the first block ``name``."""
    target = (new_name or name).strip()
    invalid = _validate_name(target)
    if invalid:
        return invalid

    path = paths.functions(scope)
    try:
        content = read_text(path)
        if content is None:
            return fail(ErrorKind.NOT_FOUND, f"Function file not found: {path}")

        lines = split_lines(content)
        blocks = scan_blocks(lines)
        block = _find_block(blocks, name)
        if block is None:
            return fail(
                ErrorKind.NOT_FOUND,
                f"Function '{name}' not found in {path}",
                name=name,
            )

        if target != name and _find_block(blocks, target) is not None:
            return fail(
                ErrorKind.ALREADY_EXISTS,
                f"Function '{target}' already exists in {path}",
                name=target,
            )

        rendered = split_lines(render_function(target, _normalize_body(body)))
        write_lines(path, lines[:block.start] + rendered + lines[block.end + 1:])
    except ShellFileError as e:
        return fail(ErrorKind.IO_FAILURE, str(e))

    logger.info("Updated function %s in %s (lines %d-%d)",
                target, path, block.start + 1, block.end + 1)
    return ok(f"Updated function {target}", name=target, scope=scope.value)


def delete_function(paths: ShellPaths, name: str, scope: Scope) -> dict:
    """Remove the first block ``name`` and one adjacent blank separator."""
    path = paths.functions(scope)
    try:
        content = read_text(path)
        if content is None:
            return fail(ErrorKind.NOT_FOUND, f"Function file not found: {path}")

        lines = split_lines(content)
        block = _find_block(scan_blocks(lines), name)
        if block is None:
            return fail(
                ErrorKind.NOT_FOUND,
                f"Function '{name}' not found in {path}",
                name=name,
            )

        start, end = block.start, block.end + 1
        if end < len(lines) and _is_blank(lines[end]):
            end += 1
        elif start > 0 and _is_blank(lines[start - 1]):
            start -= 1

        write_lines(path, lines[:start] + lines[end:])
    except ShellFileError as e:
        return fail(ErrorKind.IO_FAILURE, str(e))

    logger.info("Deleted function %s from %s", name, path)
    return ok(f"Deleted function {name}", name=name, scope=scope.value)


def format_functions(paths: ShellPaths, scope: Scope) -> dict:
    """Rewrite the whole file in canonical form from the recognized blocks.

    Text outside recognized blocks is discarded; the result reports how
    many non-blank lines that was.
    """
    path = paths.functions(scope)
    try:
        content = read_text(path)
        if content is None:
            return fail(ErrorKind.NOT_FOUND, f"Function file not found: {path}")

        lines = split_lines(content)
        blocks = scan_blocks(lines)
        covered: set[int] = set()
        for b in blocks:
            covered.update(range(b.start, b.end + 1))
        discarded = sum(
            1 for i, line in enumerate(lines) if i not in covered and line.strip()
        )

        write_text(path, render_functions(b.to_record(scope) for b in blocks))
    except ShellFileError as e:
        return fail(ErrorKind.IO_FAILURE, str(e))

    if discarded:
        logger.warning("Formatting %s discarded %d line(s) outside function blocks",
                       path, discarded)
    logger.info("Formatted %d function(s) in %s", len(blocks), path)
    return ok(
        f"Formatted {len(blocks)} functions",
        count=len(blocks),
        discarded_lines=discarded,
        scope=scope.value,
    )
