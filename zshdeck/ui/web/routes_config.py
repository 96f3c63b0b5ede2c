"""
Config API routes.

GET /api/config?scope=…    → raw config file content
PUT /api/config            → replace {content, scope}
GET /api/config/paths      → resolved file layout
GET /api/config/reload     → how to reload zsh
"""

from __future__ import annotations

from flask import Blueprint, jsonify

from zshdeck.core.services import config_ops
from zshdeck.ui.web.helpers import json_body, respond, scope_param, shell_paths

config_bp = Blueprint("config", __name__)


@config_bp.route("/config")
def api_config_read():  # type: ignore[no-untyped-def]
    return respond(config_ops.get_config(shell_paths(), scope_param()))


@config_bp.route("/config", methods=["PUT"])
def api_config_write():  # type: ignore[no-untyped-def]
    data = json_body()
    result = config_ops.update_config(
        shell_paths(), str(data.get("content", "")), scope_param(data),
    )
    return respond(result)


@config_bp.route("/config/paths")
def api_config_paths():  # type: ignore[no-untyped-def]
    return jsonify(shell_paths().model_dump(mode="json"))


@config_bp.route("/config/reload")
def api_config_reload():  # type: ignore[no-untyped-def]
    return jsonify({"message": config_ops.reload_hint()})
