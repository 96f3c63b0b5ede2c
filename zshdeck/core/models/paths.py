"""
ShellPaths — the injected file layout.

The core never computes paths itself.  Entry points resolve a ShellPaths
once at startup (see ``zshdeck.core.config.loader``) and pass it to every
service call.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from zshdeck.core.models.records import Scope


class ShellPaths(BaseModel):
    """Locations of every file zshdeck reads or writes."""

    shared_aliases: Path
    local_aliases: Path
    shared_functions: Path
    local_functions: Path
    plugin_host: Path

    secrets_aliases: Path | None = None
    shared_config: Path | None = None
    local_config: Path | None = None
    config_dir: Path | None = None
    omz_plugin_dirs: list[Path] = Field(default_factory=list)

    @classmethod
    def from_home(cls, home: Path, **overrides: Path | list[Path] | None) -> ShellPaths:
        """Build the conventional layout under ``home``.

        Keyword overrides replace individual defaults.
        """
        zsh_dir = home / ".zsh"
        defaults: dict = {
            "shared_aliases": zsh_dir / "aliases.zsh",
            "local_aliases": zsh_dir / "aliases.local.zsh",
            "shared_functions": zsh_dir / "functions.zsh",
            "local_functions": zsh_dir / "functions.local.zsh",
            "plugin_host": home / ".zshrc.local",
            "secrets_aliases": home / ".zshrc.secrets",
            "shared_config": zsh_dir / "config.zsh",
            "local_config": zsh_dir / "config.local.zsh",
            "config_dir": zsh_dir,
            "omz_plugin_dirs": [
                home / ".oh-my-zsh" / "plugins",
                home / ".oh-my-zsh" / "custom" / "plugins",
            ],
        }
        defaults.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(defaults)

    def aliases(self, scope: Scope) -> Path:
        return self.shared_aliases if scope == Scope.SHARED else self.local_aliases

    def functions(self, scope: Scope) -> Path:
        return self.shared_functions if scope == Scope.SHARED else self.local_functions

    def config(self, scope: Scope) -> Path | None:
        return self.shared_config if scope == Scope.SHARED else self.local_config
