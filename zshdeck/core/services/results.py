"""
Result helpers shared by the service modules.

Services never raise for expected failures.  They return JSON-ready dicts:
``{"success": True, ...}`` on success and ``{"error": msg, "kind": kind}``
otherwise, where ``kind`` is an :class:`ErrorKind` value.
"""

from __future__ import annotations

from typing import Any

from zshdeck.core.models.records import ErrorKind


def fail(kind: ErrorKind, message: str, **extra: Any) -> dict:
    """Build a failure result."""
    return {"error": message, "kind": kind.value, **extra}


def ok(message: str, **extra: Any) -> dict:
    """Build a success result."""
    return {"success": True, "message": message, **extra}
