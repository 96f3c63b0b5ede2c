"""
Brace-block function parser and serializer.

Recognized headers (first match wins)::

    function name() {
    name() {

The scanner works in two passes:

1. every line is classified as HEADER, COMMENT, BLANK or OTHER;
2. from each HEADER line the brace depth is accumulated forward
   (Searching until the first ``{``, then InBlock until depth is back
   to 0) to find the closing line.

A header whose block never closes produces no record; scanning carries on
with the next line.  Headers inside a completed block are never parsed on
their own because scanning resumes after the block's closing line.

Known limitation: the ``name() {`` shape also matches some non-function
constructs.  It is kept as-is so existing files keep parsing the same way.
"""

from __future__ import annotations

import logging
import textwrap
from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable

from zshdeck.core.models.records import FunctionRecord, Scope
from zshdeck.core.parsing.lines import split_lines

logger = logging.getLogger(__name__)

_KEYWORD = "function "
_INDENT = "  "


class LineKind(StrEnum):
    HEADER = "header"
    COMMENT = "comment"
    BLANK = "blank"
    OTHER = "other"


@dataclass(frozen=True)
class FunctionBlock:
    """A recognized block and where it sits in the file.

    ``start`` is the header line index, ``end`` the closing line index
    (inclusive).
    """

    name: str
    body: str
    start: int
    end: int

    def to_record(self, scope: Scope = Scope.SHARED) -> FunctionRecord:
        return FunctionRecord(name=self.name, body=self.body, scope=scope)


# ── Pass 1: classification ──────────────────────────────────────


def header_name(line: str) -> str | None:
    """Return the function name if ``line`` opens a function, else None."""
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None

    if stripped.startswith(_KEYWORD):
        rest = stripped[len(_KEYWORD):].strip()
        paren = rest.find("(")
        if paren != -1:
            name = rest[:paren].strip()
            if name:
                return name

    paren = stripped.find("(")
    if paren != -1:
        name = stripped[:paren].strip()
        if name and stripped[paren:].startswith("()"):
            return name

    return None


def classify_line(line: str) -> tuple[LineKind, str | None]:
    """Classify one line.  The name is set only for HEADER lines."""
    stripped = line.strip()
    if not stripped:
        return LineKind.BLANK, None
    if stripped.startswith("#"):
        return LineKind.COMMENT, None
    name = header_name(stripped)
    if name is not None:
        return LineKind.HEADER, name
    return LineKind.OTHER, None


# ── Pass 2: block extraction ────────────────────────────────────


def _find_block_end(lines: list[str], start: int) -> int | None:
    """Index of the line closing the block opened at ``start``, or None."""
    depth = 0
    opened = False  # Searching until the first "{", InBlock afterwards

    for idx in range(start, len(lines)):
        for ch in lines[idx]:
            if ch == "{":
                depth += 1
                opened = True
            elif ch == "}":
                depth -= 1
        if opened and depth == 0:
            return idx

    return None


def _extract_body(inner: list[str]) -> str:
    """Body text from the lines after the header up to the closing line."""
    raw = "\n".join(line.removesuffix("\r") for line in inner)
    cut = raw.rfind("}")
    if cut != -1:
        raw = raw[:cut]
    return textwrap.dedent(raw.rstrip()).strip("\n")


def scan_blocks(lines: list[str]) -> list[FunctionBlock]:
    """Find every complete function block in ``lines``, in file order."""
    kinds = [classify_line(line) for line in lines]

    blocks: list[FunctionBlock] = []
    i = 0
    while i < len(lines):
        kind, name = kinds[i]
        if kind is LineKind.HEADER and name is not None:
            end = _find_block_end(lines, i)
            if end is not None:
                body = _extract_body(lines[i + 1:end + 1])
                blocks.append(FunctionBlock(name=name, body=body, start=i, end=end))
                i = end + 1
                continue
            logger.debug("Function header '%s' at line %d never closes", name, i + 1)
        i += 1

    return blocks


def parse_functions(text: str, scope: Scope = Scope.SHARED) -> list[FunctionRecord]:
    """All function records in ``text`` (duplicates kept, file order)."""
    return [block.to_record(scope) for block in scan_blocks(split_lines(text))]


# ── Serialization ───────────────────────────────────────────────


def render_function(name: str, body: str) -> str:
    """Canonical block text, terminated by ``}\\n``.

    Non-blank body lines get a two-space indent; blank lines stay empty.
    """
    out = [f"function {name}() {{"]
    for line in split_lines(body):
        out.append(_INDENT + line if line.strip() else "")
    out.append("}")
    return "\n".join(out) + "\n"


def render_functions(records: Iterable[FunctionRecord]) -> str:
    """Whole-file rendering: blocks separated by exactly one blank line."""
    return "\n".join(render_function(r.name, r.body) for r in records)
