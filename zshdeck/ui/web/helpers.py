"""
Shared helpers for the API blueprints.
"""

from __future__ import annotations

from flask import abort, current_app, jsonify, request

from zshdeck.core.models.paths import ShellPaths
from zshdeck.core.models.records import ErrorKind, Scope

_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND.value: 404,
    ErrorKind.SOURCE_MISSING.value: 404,
    ErrorKind.ALREADY_EXISTS.value: 409,
    ErrorKind.IO_FAILURE.value: 500,
    ErrorKind.INVALID.value: 400,
}


def shell_paths() -> ShellPaths:
    return current_app.config["SHELL_PATHS"]


def scope_param(payload: dict | None = None) -> Scope:
    """Scope from the JSON body or the query string (default: shared)."""
    raw = (payload or {}).get("scope") or request.args.get("scope", Scope.SHARED.value)
    try:
        return Scope(raw)
    except ValueError:
        abort(400, description=f"Unknown scope '{raw}'")


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400, description="Expected a JSON object body")
    return data


def respond(result: dict, *, created: bool = False):  # type: ignore[no-untyped-def]
    """Turn a service result dict into a response with a fitting status."""
    if "error" in result:
        return jsonify(result), _STATUS_BY_KIND.get(result.get("kind", ""), 400)
    return jsonify(result), 201 if created else 200
