"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest

from zshdeck.core.models.paths import ShellPaths


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own zshdeck environment out of the tests."""
    for var in (
        "ZSHDECK_CONFIG",
        "ZSHDECK_HOME",
        "ZSHDECK_LOG_LEVEL",
        "ZSHDECK_LOG_FILE",
        "ZSHDECK_LOG_FILE_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Return a temporary home directory."""
    return tmp_path


@pytest.fixture
def shell_paths(home: Path) -> ShellPaths:
    """Default file layout under the temporary home."""
    return ShellPaths.from_home(home)


@pytest.fixture
def plugin_host(shell_paths: ShellPaths) -> Path:
    """A host file with a one-plugin marker between other init lines."""
    shell_paths.plugin_host.write_text(
        'export ZSH="$HOME/.oh-my-zsh"\n'
        "plugins=(git)\n"
        "source $ZSH/oh-my-zsh.sh\n"
    )
    return shell_paths.plugin_host


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by setup_logging (CLI invocations, logging tests)."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
