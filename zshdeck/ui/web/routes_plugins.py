"""
Plugin API routes.

GET    /api/plugins            → enabled plugins with metadata
GET    /api/plugins/catalog    → catalog plugins not enabled yet
POST   /api/plugins            → enable {name}
DELETE /api/plugins/<name>     → disable
"""

from __future__ import annotations

from flask import Blueprint

from zshdeck.core.services import plugin_ops
from zshdeck.ui.web.helpers import json_body, respond, shell_paths

plugins_bp = Blueprint("plugins", __name__)


@plugins_bp.route("/plugins")
def api_plugins_list():  # type: ignore[no-untyped-def]
    return respond(plugin_ops.list_enabled(shell_paths()))


@plugins_bp.route("/plugins/catalog")
def api_plugins_catalog():  # type: ignore[no-untyped-def]
    return respond(plugin_ops.list_catalog_unused(shell_paths()))


@plugins_bp.route("/plugins", methods=["POST"])
def api_plugins_enable():  # type: ignore[no-untyped-def]
    data = json_body()
    return respond(plugin_ops.enable_plugin(shell_paths(), str(data.get("name", ""))))


@plugins_bp.route("/plugins/<name>", methods=["DELETE"])
def api_plugins_disable(name: str):  # type: ignore[no-untyped-def]
    return respond(plugin_ops.disable_plugin(shell_paths(), name))
