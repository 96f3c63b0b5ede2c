"""
Function API routes.

GET    /api/functions?scope=…          → function blocks of one scope
POST   /api/functions                  → add {name, body, scope}
PUT    /api/functions/<name>           → update {body, new_name?, scope}
DELETE /api/functions/<name>?scope=…   → delete
POST   /api/functions/format?scope=…   → rewrite the file canonically
"""

from __future__ import annotations

from flask import Blueprint

from zshdeck.core.services import function_ops
from zshdeck.ui.web.helpers import json_body, respond, scope_param, shell_paths

functions_bp = Blueprint("functions", __name__)


@functions_bp.route("/functions")
def api_functions_list():  # type: ignore[no-untyped-def]
    return respond(function_ops.list_functions(shell_paths(), scope_param()))


@functions_bp.route("/functions", methods=["POST"])
def api_functions_add():  # type: ignore[no-untyped-def]
    data = json_body()
    result = function_ops.add_function(
        shell_paths(),
        str(data.get("name", "")),
        str(data.get("body", "")),
        scope_param(data),
    )
    return respond(result, created=True)


@functions_bp.route("/functions/format", methods=["POST"])
def api_functions_format():  # type: ignore[no-untyped-def]
    return respond(function_ops.format_functions(shell_paths(), scope_param()))


@functions_bp.route("/functions/<name>", methods=["PUT"])
def api_functions_update(name: str):  # type: ignore[no-untyped-def]
    data = json_body()
    result = function_ops.update_function(
        shell_paths(),
        name,
        str(data.get("body", "")),
        scope_param(data),
        new_name=data.get("new_name") or None,
    )
    return respond(result)


@functions_bp.route("/functions/<name>", methods=["DELETE"])
def api_functions_delete(name: str):  # type: ignore[no-untyped-def]
    return respond(function_ops.delete_function(shell_paths(), name, scope_param()))
