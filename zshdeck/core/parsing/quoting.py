"""Quoted-value lexer."""

from __future__ import annotations

_QUOTES = ('"', "'")


def unquote(raw: str) -> str:
    """Trim ``raw`` and strip one pair of matching surrounding quotes.

    Asymmetric or absent quoting is left as-is::

        unquote(' "ls -la" ')  -> 'ls -la'
        unquote("'it\\"")      -> "'it\\""
    """
    value = raw.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    return value
