"""
Alias line parser and serializer.

Recognized shape (one per line)::

    alias name="value"
    alias name='value'
    alias name=value

Anything else (comments, blank lines, exports, malformed aliases) yields
no record and is preserved verbatim by line-by-line rewrites.
"""

from __future__ import annotations

import logging
import re

from zshdeck.core.models.records import AliasRecord, Scope
from zshdeck.core.parsing.lines import split_lines
from zshdeck.core.parsing.quoting import unquote

logger = logging.getLogger(__name__)

_ALIAS_PREFIX = re.compile(r"^alias\s+")


def parse_alias_line(line: str, scope: Scope = Scope.SHARED) -> AliasRecord | None:
    """Parse one line into an AliasRecord, or None if it isn't an alias."""
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None

    m = _ALIAS_PREFIX.match(stripped)
    if m is None:
        return None

    rest = stripped[m.end():]
    name, sep, value = rest.partition("=")
    if not sep:
        logger.debug("Skipping alias line without '=': %r", line)
        return None

    name = name.strip()
    if not name:
        logger.debug("Skipping alias line with empty name: %r", line)
        return None

    return AliasRecord(name=name, value=unquote(value), scope=scope)


def parse_aliases(text: str, scope: Scope = Scope.SHARED) -> list[AliasRecord]:
    """All alias records in ``text``, in file order (duplicates kept)."""
    records = []
    for line in split_lines(text):
        record = parse_alias_line(line, scope)
        if record is not None:
            records.append(record)
    return records


def render_alias(name: str, value: str) -> str:
    """Canonical alias line.  Always double-quoted, no trailing newline."""
    return f'alias {name}="{value}"'
