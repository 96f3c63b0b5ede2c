"""
Configuration loader — reads zshdeck.yml into a ShellPaths model.

The file is optional.  Every key it leaves out falls back to the
conventional location under the home directory::

    # ~/.config/zshdeck/zshdeck.yml
    shared_aliases: ~/dotfiles/zsh/aliases.zsh
    plugin_host: ~/.zshrc.local
    omz_plugin_dirs:
      - ~/.oh-my-zsh/plugins
      - ~/.oh-my-zsh/custom/plugins

Entry points call :func:`load_paths` once at startup and pass the
result to the services.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from zshdeck.core.models.paths import ShellPaths

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "ZSHDECK_CONFIG"
CONFIG_FILE = "zshdeck.yml"

_PATH_KEYS = frozenset(ShellPaths.model_fields) - {"omz_plugin_dirs"}


class ConfigError(Exception):
    """Raised when zshdeck configuration is invalid or unreadable."""


def default_config_path(home: Path | None = None) -> Path:
    """``~/.config/zshdeck/zshdeck.yml``."""
    return (home or Path.home()) / ".config" / "zshdeck" / CONFIG_FILE


def find_config_file(home: Path | None = None) -> Path | None:
    """Locate the config file: $ZSHDECK_CONFIG first, then the default path.

    Returns:
        Path to the config file, or None if neither exists.
    """
    env_value = os.environ.get(CONFIG_ENV_VAR)
    if env_value:
        candidate = Path(env_value).expanduser()
        if candidate.is_file():
            return candidate
        logger.warning("%s points to a missing file: %s", CONFIG_ENV_VAR, candidate)

    candidate = default_config_path(home)
    return candidate if candidate.is_file() else None


def _expand(value: object, home: Path) -> Path:
    text = str(value)
    if text == "~" or text.startswith("~/"):
        return home / text[2:]
    return Path(text)


def load_paths(path: Path | None = None, home: Path | None = None) -> ShellPaths:
    """Load and validate the file layout.

    Args:
        path: Explicit config file.  If None, searches via find_config_file().
        home: Home directory for defaults and ``~`` expansion (default:
            the current user's home).

    Returns:
        Validated ShellPaths.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    home = home or Path.home()

    if path is not None and not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    if path is None:
        path = find_config_file(home)

    if path is None:
        logger.debug("No config file, using defaults under %s", home)
        return ShellPaths.from_home(home)

    logger.debug("Loading config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    unknown = set(data) - _PATH_KEYS - {"omz_plugin_dirs"}
    if unknown:
        raise ConfigError(f"Unknown keys in {path}: {', '.join(sorted(unknown))}")

    overrides: dict = {}
    for key, value in data.items():
        if value is None:
            continue
        if key == "omz_plugin_dirs":
            if not isinstance(value, list):
                raise ConfigError(f"'omz_plugin_dirs' must be a list in {path}")
            overrides[key] = [_expand(v, home) for v in value]
        else:
            overrides[key] = _expand(value, home)

    try:
        paths = ShellPaths.from_home(home, **overrides)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.info("Loaded config from %s", path)
    return paths
