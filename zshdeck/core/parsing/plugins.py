"""
Plugin list parser — the ``plugins=( ... )`` marker inside a host document.

Only the first marker occurrence is read or rewritten; everything around it
is copied through untouched.  The document is matched once per call and the
rewrite is a single splice by offsets.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_MARKER = re.compile(r"plugins=\(\s*([^)]*)\s*\)")


@dataclass(frozen=True)
class PluginSpan:
    """The matched marker: its offsets in the document and its tokens."""

    start: int
    end: int
    plugins: list[str]


def find_plugin_span(text: str) -> PluginSpan | None:
    """Locate the first plugin marker, or None when the document has none."""
    m = _MARKER.search(text)
    if m is None:
        return None
    return PluginSpan(start=m.start(), end=m.end(), plugins=m.group(1).split())


def parse_plugins(text: str) -> list[str]:
    """Enabled plugin names in document order.  No marker means no plugins."""
    span = find_plugin_span(text)
    return span.plugins if span else []


def render_plugin_list(plugins: list[str]) -> str:
    """Marker text for ``plugins``: one per line, or ``plugins=()`` if empty."""
    if not plugins:
        return "plugins=()"
    body = "\n".join(f"  {name}" for name in plugins)
    return f"plugins=(\n{body}\n)"


def splice_plugins(text: str, span: PluginSpan, plugins: list[str]) -> str:
    """Replace the marker at ``span`` with the rendering of ``plugins``."""
    return text[:span.start] + render_plugin_list(plugins) + text[span.end:]
