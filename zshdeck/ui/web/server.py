"""
Local JSON API — Flask app factory.

Exposes the alias, function, plugin, config and git services under
``/api`` for a desktop or browser front-end running on the same machine.
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify

from zshdeck.core.models.paths import ShellPaths

logger = logging.getLogger(__name__)


def create_app(paths: ShellPaths) -> Flask:
    """Create and configure the Flask application.

    Args:
        paths: The file layout every request operates on.

    Returns:
        Configured Flask application.
    """
    app = Flask(__name__)
    app.config["SHELL_PATHS"] = paths
    app.json.sort_keys = False  # type: ignore[attr-defined]

    from zshdeck.ui.web.routes_aliases import aliases_bp
    from zshdeck.ui.web.routes_config import config_bp
    from zshdeck.ui.web.routes_functions import functions_bp
    from zshdeck.ui.web.routes_git import git_bp
    from zshdeck.ui.web.routes_plugins import plugins_bp

    app.register_blueprint(aliases_bp, url_prefix="/api")
    app.register_blueprint(functions_bp, url_prefix="/api")
    app.register_blueprint(plugins_bp, url_prefix="/api")
    app.register_blueprint(config_bp, url_prefix="/api")
    app.register_blueprint(git_bp, url_prefix="/api")

    @app.route("/api/health")
    def api_health():  # type: ignore[no-untyped-def]
        from zshdeck import __version__

        return jsonify({"ok": True, "version": __version__})

    logger.info("API app created (aliases=%s)", paths.shared_aliases)
    return app


def run_server(
    app: Flask,
    host: str = "127.0.0.1",
    port: int = 8765,
    debug: bool = False,
) -> None:
    """Run the Flask development server."""
    logger.info("Starting API on %s:%d", host, port)
    app.run(host=host, port=port, debug=debug, use_reloader=False)
