"""
Git API routes for the zsh config directory.

GET  /api/git/status
GET  /api/git/log?n=10
GET  /api/git/diff
POST /api/git/commit   {message}
POST /api/git/pull     {rebase?}
POST /api/git/push
POST /api/git/init
"""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from zshdeck.core.services import git_ops
from zshdeck.ui.web.helpers import shell_paths

git_bp = Blueprint("git", __name__)


def _reply(result: dict):  # type: ignore[no-untyped-def]
    return jsonify(result), 400 if "error" in result else 200


@git_bp.route("/git/status")
def api_git_status():  # type: ignore[no-untyped-def]
    return _reply(git_ops.git_status(shell_paths()))


@git_bp.route("/git/log")
def api_git_log():  # type: ignore[no-untyped-def]
    n = request.args.get("n", 10, type=int)
    return _reply(git_ops.git_log(shell_paths(), n=n))


@git_bp.route("/git/diff")
def api_git_diff():  # type: ignore[no-untyped-def]
    return _reply(git_ops.git_diff(shell_paths()))


@git_bp.route("/git/commit", methods=["POST"])
def api_git_commit():  # type: ignore[no-untyped-def]
    data = request.get_json(silent=True) or {}
    return _reply(git_ops.git_commit(shell_paths(), str(data.get("message", ""))))


@git_bp.route("/git/pull", methods=["POST"])
def api_git_pull():  # type: ignore[no-untyped-def]
    data = request.get_json(silent=True) or {}
    return _reply(git_ops.git_pull(shell_paths(), rebase=bool(data.get("rebase", True))))


@git_bp.route("/git/push", methods=["POST"])
def api_git_push():  # type: ignore[no-untyped-def]
    return _reply(git_ops.git_push(shell_paths()))


@git_bp.route("/git/init", methods=["POST"])
def api_git_init():  # type: ignore[no-untyped-def]
    return _reply(git_ops.git_init(shell_paths()))
