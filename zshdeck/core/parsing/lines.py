"""Line splitting for zsh files.

Only ``\\n`` ends a line.  ``str.splitlines`` also breaks on form feeds,
vertical tabs, U+2028 and friends, which would rewrite those characters as
newlines in lines a mutation never meant to touch.  A ``\\r`` before the
``\\n`` stays part of the line so CRLF lines are written back unchanged.
"""

from __future__ import annotations


def split_lines(text: str) -> list[str]:
    """Split ``text`` on ``\\n`` only.  A final newline adds no empty line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines
