"""
Tests for the JSON API — app factory and routes.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from flask.testing import FlaskClient

from zshdeck.core.models.paths import ShellPaths
from zshdeck.ui.web.server import create_app


@pytest.fixture()
def client(shell_paths: ShellPaths) -> FlaskClient:
    """Flask test client over the temporary layout."""
    app = create_app(shell_paths)
    app.config["TESTING"] = True
    return app.test_client()


class TestAppFactory:
    """Tests for create_app()."""

    def test_health(self, client: FlaskClient):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.get_json()["ok"] is True

    def test_paths_in_config(self, shell_paths: ShellPaths):
        app = create_app(shell_paths)
        assert app.config["SHELL_PATHS"] is shell_paths


class TestAliasRoutes:
    """Tests for /api/aliases."""

    def test_crud(self, client: FlaskClient, shell_paths: ShellPaths):
        resp = client.post("/api/aliases", json={"name": "ll", "value": "ls -la"})
        assert resp.status_code == 201

        resp = client.get("/api/aliases")
        assert resp.get_json()["aliases"] == [{"name": "ll", "value": "ls -la", "scope": "shared"}]

        resp = client.put("/api/aliases/ll", json={"value": "ls -lah", "new_name": "la"})
        assert resp.status_code == 200
        assert shell_paths.shared_aliases.read_text() == 'alias la="ls -lah"\n'

        resp = client.delete("/api/aliases/la")
        assert resp.status_code == 200
        assert shell_paths.shared_aliases.read_text() == ""

    def test_local_scope(self, client: FlaskClient, shell_paths: ShellPaths):
        client.post("/api/aliases", json={"name": "k", "value": "kubectl", "scope": "local"})
        assert shell_paths.local_aliases.is_file()
        assert client.get("/api/aliases?scope=local").get_json()["aliases"][0]["scope"] == "local"

    def test_duplicate_is_conflict(self, client: FlaskClient):
        client.post("/api/aliases", json={"name": "ll", "value": "ls"})
        resp = client.post("/api/aliases", json={"name": "ll", "value": "ls"})
        assert resp.status_code == 409
        assert resp.get_json()["kind"] == "already_exists"

    def test_missing_is_404(self, client: FlaskClient):
        assert client.delete("/api/aliases/nope").status_code == 404
        assert client.put("/api/aliases/nope", json={"value": "x"}).status_code == 404

    def test_bad_requests(self, client: FlaskClient):
        assert client.get("/api/aliases?scope=global").status_code == 400
        assert client.post("/api/aliases", data="not json").status_code == 400
        assert client.post("/api/aliases", json={"name": "a b", "value": "x"}).status_code == 400

    def test_secrets(self, client: FlaskClient, home: Path):
        (home / ".zshrc.secrets").write_text('alias vpn="sudo openvpn"\n')
        data = client.get("/api/aliases/secrets").get_json()
        assert data["aliases"][0]["name"] == "vpn"


class TestFunctionRoutes:
    """Tests for /api/functions."""

    def test_crud(self, client: FlaskClient, shell_paths: ShellPaths):
        resp = client.post("/api/functions", json={"name": "greet", "body": 'echo "hi"'})
        assert resp.status_code == 201

        data = client.get("/api/functions").get_json()
        assert data["functions"] == [{"name": "greet", "body": 'echo "hi"', "scope": "shared"}]

        resp = client.put("/api/functions/greet", json={"body": "echo hello"})
        assert resp.status_code == 200
        assert "echo hello" in shell_paths.shared_functions.read_text()

        assert client.delete("/api/functions/greet").status_code == 200
        assert client.delete("/api/functions/greet").status_code == 404

    def test_format(self, client: FlaskClient, shell_paths: ShellPaths):
        shell_paths.shared_functions.parent.mkdir(parents=True)
        shell_paths.shared_functions.write_text("# x\na() {\n  true\n}\n")
        resp = client.post("/api/functions/format")
        assert resp.status_code == 200
        assert resp.get_json()["discarded_lines"] == 1


class TestPluginRoutes:
    """Tests for /api/plugins."""

    def test_enable_disable(self, client: FlaskClient, plugin_host: Path):
        resp = client.post("/api/plugins", json={"name": "fzf"})
        assert resp.status_code == 200
        assert resp.get_json()["plugins"] == ["fzf", "git"]

        names = [p["name"] for p in client.get("/api/plugins").get_json()["plugins"]]
        assert names == ["fzf", "git"]

        assert client.delete("/api/plugins/fzf").status_code == 200
        assert client.delete("/api/plugins/fzf").status_code == 404

    def test_already_enabled(self, client: FlaskClient, plugin_host: Path):
        assert client.post("/api/plugins", json={"name": "git"}).status_code == 409

    def test_source_missing(self, client: FlaskClient, shell_paths: ShellPaths):
        shell_paths.plugin_host.write_text("# no marker\n")
        resp = client.post("/api/plugins", json={"name": "git"})
        assert resp.status_code == 404
        assert resp.get_json()["kind"] == "source_missing"

    def test_catalog(self, client: FlaskClient, plugin_host: Path):
        names = [p["name"] for p in client.get("/api/plugins/catalog").get_json()["plugins"]]
        assert "git" not in names
        assert len(names) == 17


class TestConfigRoutes:
    """Tests for /api/config."""

    def test_write_and_read(self, client: FlaskClient):
        resp = client.put("/api/config", json={"content": "setopt autocd\n", "scope": "local"})
        assert resp.status_code == 200
        assert "hint" in resp.get_json()

        data = client.get("/api/config?scope=local").get_json()
        assert data["content"] == "setopt autocd\n"

    def test_paths(self, client: FlaskClient, home: Path):
        data = client.get("/api/config/paths").get_json()
        assert data["shared_aliases"] == str(home / ".zsh" / "aliases.zsh")

    def test_reload(self, client: FlaskClient):
        assert "source" in client.get("/api/config/reload").get_json()["message"]


class TestGitRoutes:
    """Tests for /api/git."""

    def test_status_without_directory(self, client: FlaskClient):
        resp = client.get("/api/git/status")
        assert resp.status_code == 400
        assert "error" in resp.get_json()


class TestAliasValueRoutes:
    """Multi-line alias values are rejected over the API."""

    def test_multiline_value_is_bad_request(self, client: FlaskClient, shell_paths: ShellPaths):
        resp = client.post("/api/aliases", json={"name": "x", "value": "echo a\necho b"})
        assert resp.status_code == 400
        assert resp.get_json()["kind"] == "invalid"
        assert not shell_paths.shared_aliases.exists()
