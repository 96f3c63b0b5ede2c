"""
Tests for plugin management — enabled list, catalog, enable, disable.
"""

from pathlib import Path

from zshdeck.core.data import get_registry
from zshdeck.core.models.paths import ShellPaths
from zshdeck.core.services import plugin_ops


class TestCatalog:
    """Tests for the static plugin catalog."""

    def test_catalog_loaded(self):
        catalog = get_registry().plugin_catalog
        assert len(catalog) == 18
        assert "zsh-autosuggestions" in catalog
        assert catalog["fzf"].repository

    def test_unknown_plugin_has_empty_metadata(self):
        entry = get_registry().lookup_plugin("not-a-plugin")
        assert entry.name == "not-a-plugin"
        assert entry.description is None
        assert entry.install_hint is None


class TestListEnabled:
    """Tests for listing enabled plugins."""

    def test_missing_host(self, shell_paths: ShellPaths):
        result = plugin_ops.list_enabled(shell_paths)
        assert result["exists"] is False
        assert result["plugins"] == []

    def test_no_marker(self, shell_paths: ShellPaths):
        shell_paths.plugin_host.write_text("export ZSH=~/.oh-my-zsh\n")
        result = plugin_ops.list_enabled(shell_paths)
        assert result["exists"] is True
        assert result["marker"] is False
        assert result["plugins"] == []

    def test_sorted_with_metadata(self, shell_paths: ShellPaths):
        shell_paths.plugin_host.write_text("plugins=(zsh-syntax-highlighting git my-own)\n")
        (shell_paths.omz_plugin_dirs[0] / "git").mkdir(parents=True)

        plugins = plugin_ops.list_enabled(shell_paths)["plugins"]
        assert [p["name"] for p in plugins] == ["git", "my-own", "zsh-syntax-highlighting"]

        git, mine, _ = plugins
        assert git["enabled"] is True
        assert git["installed"] is True
        assert git["manager"] == "oh-my-zsh"
        assert git["description"]
        assert mine["installed"] is False
        assert mine["description"] is None

    def test_custom_plugin_dir_counts_as_installed(self, shell_paths: ShellPaths):
        shell_paths.plugin_host.write_text("plugins=(fzf-tab)\n")
        (shell_paths.omz_plugin_dirs[1] / "fzf-tab").mkdir(parents=True)
        assert plugin_ops.list_enabled(shell_paths)["plugins"][0]["installed"] is True


class TestCatalogUnused:
    """Tests for the not-yet-enabled catalog view."""

    def test_without_host_lists_whole_catalog(self, shell_paths: ShellPaths):
        result = plugin_ops.list_catalog_unused(shell_paths)
        names = [p["name"] for p in result["plugins"]]
        assert len(names) == 18
        assert names == sorted(names)
        assert all(p["enabled"] is False for p in result["plugins"])

    def test_excludes_enabled(self, shell_paths: ShellPaths, plugin_host: Path):
        names = [p["name"] for p in plugin_ops.list_catalog_unused(shell_paths)["plugins"]]
        assert "git" not in names
        assert "fzf" in names


class TestEnablePlugin:
    """Tests for enabling plugins."""

    def test_enable_sorts_and_preserves_rest(self, shell_paths: ShellPaths, plugin_host: Path):
        result = plugin_ops.enable_plugin(shell_paths, "fzf")
        assert result["success"] is True
        assert result["plugins"] == ["fzf", "git"]
        assert plugin_host.read_text() == (
            'export ZSH="$HOME/.oh-my-zsh"\n'
            "plugins=(\n  fzf\n  git\n)\n"
            "source $ZSH/oh-my-zsh.sh\n"
        )

    def test_enable_into_empty_list_sorts(self, shell_paths: ShellPaths):
        host = shell_paths.plugin_host
        host.write_text("plugins=()\n")
        plugin_ops.enable_plugin(shell_paths, "zeta")
        plugin_ops.enable_plugin(shell_paths, "alpha")
        assert host.read_text() == "plugins=(\n  alpha\n  zeta\n)\n"

    def test_enable_then_disable_restores(self, shell_paths: ShellPaths):
        host = shell_paths.plugin_host
        host.write_text("# omz\nplugins=(\n  alpha\n  zeta\n)\n")
        before = host.read_text()
        plugin_ops.enable_plugin(shell_paths, "mid")
        plugin_ops.disable_plugin(shell_paths, "mid")
        assert host.read_text() == before

    def test_enable_duplicate(self, shell_paths: ShellPaths, plugin_host: Path):
        before = plugin_host.read_bytes()
        result = plugin_ops.enable_plugin(shell_paths, "git")
        assert result["kind"] == "already_exists"
        assert plugin_host.read_bytes() == before

    def test_enable_without_marker(self, shell_paths: ShellPaths):
        host = shell_paths.plugin_host
        host.write_text("source ~/.zshrc.secrets\n")
        result = plugin_ops.enable_plugin(shell_paths, "git")
        assert result["kind"] == "source_missing"
        assert host.read_text() == "source ~/.zshrc.secrets\n"

    def test_enable_without_host(self, shell_paths: ShellPaths):
        assert plugin_ops.enable_plugin(shell_paths, "git")["kind"] == "not_found"
        assert not shell_paths.plugin_host.exists()

    def test_enable_invalid_name(self, shell_paths: ShellPaths, plugin_host: Path):
        assert plugin_ops.enable_plugin(shell_paths, "two words")["kind"] == "invalid"
        assert plugin_ops.enable_plugin(shell_paths, "")["kind"] == "invalid"


class TestDisablePlugin:
    """Tests for disabling plugins."""

    def test_disable_keeps_order(self, shell_paths: ShellPaths):
        host = shell_paths.plugin_host
        host.write_text("plugins=(zsh-autosuggestions git fzf)\n")
        result = plugin_ops.disable_plugin(shell_paths, "git")
        assert result["plugins"] == ["zsh-autosuggestions", "fzf"]
        assert host.read_text() == "plugins=(\n  zsh-autosuggestions\n  fzf\n)\n"

    def test_disable_last_leaves_empty_marker(self, shell_paths: ShellPaths, plugin_host: Path):
        plugin_ops.disable_plugin(shell_paths, "git")
        assert "plugins=()\n" in plugin_host.read_text()

    def test_disable_not_enabled(self, shell_paths: ShellPaths, plugin_host: Path):
        before = plugin_host.read_bytes()
        assert plugin_ops.disable_plugin(shell_paths, "fzf")["kind"] == "not_found"
        assert plugin_host.read_bytes() == before

    def test_disable_without_marker(self, shell_paths: ShellPaths):
        shell_paths.plugin_host.write_text("# nothing\n")
        assert plugin_ops.disable_plugin(shell_paths, "git")["kind"] == "source_missing"

    def test_disable_without_host(self, shell_paths: ShellPaths):
        assert plugin_ops.disable_plugin(shell_paths, "git")["kind"] == "not_found"
