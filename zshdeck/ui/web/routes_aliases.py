"""
Alias API routes.

GET    /api/aliases?scope=shared|local  → aliases of one scope
GET    /api/aliases/secrets             → aliases from the secrets file
POST   /api/aliases                     → add {name, value, scope}
PUT    /api/aliases/<name>              → update {value, new_name?, scope}
DELETE /api/aliases/<name>?scope=…      → delete
"""

from __future__ import annotations

from flask import Blueprint

from zshdeck.core.services import alias_ops
from zshdeck.ui.web.helpers import json_body, respond, scope_param, shell_paths

aliases_bp = Blueprint("aliases", __name__)


@aliases_bp.route("/aliases")
def api_aliases_list():  # type: ignore[no-untyped-def]
    return respond(alias_ops.list_aliases(shell_paths(), scope_param()))


@aliases_bp.route("/aliases/secrets")
def api_aliases_secrets():  # type: ignore[no-untyped-def]
    return respond(alias_ops.list_secrets_aliases(shell_paths()))


@aliases_bp.route("/aliases", methods=["POST"])
def api_aliases_add():  # type: ignore[no-untyped-def]
    data = json_body()
    result = alias_ops.add_alias(
        shell_paths(),
        str(data.get("name", "")),
        str(data.get("value", "")),
        scope_param(data),
    )
    return respond(result, created=True)


@aliases_bp.route("/aliases/<name>", methods=["PUT"])
def api_aliases_update(name: str):  # type: ignore[no-untyped-def]
    data = json_body()
    result = alias_ops.update_alias(
        shell_paths(),
        name,
        data.get("new_name") or None,
        str(data.get("value", "")),
        scope_param(data),
    )
    return respond(result)


@aliases_bp.route("/aliases/<name>", methods=["DELETE"])
def api_aliases_delete(name: str):  # type: ignore[no-untyped-def]
    return respond(alias_ops.delete_alias(shell_paths(), name, scope_param()))
