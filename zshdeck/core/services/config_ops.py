"""
Raw zsh config files — ``config.zsh`` / ``config.local.zsh``.

These files are free-form; they are read and written whole with no
parsing.
"""

from __future__ import annotations

import logging

from zshdeck.core.models.paths import ShellPaths
from zshdeck.core.models.records import ErrorKind, Scope
from zshdeck.core.persistence.shell_file import (
    ShellFileError,
    ensure_parent_dir,
    read_text,
    write_text,
)
from zshdeck.core.services.results import fail, ok

logger = logging.getLogger(__name__)

RELOAD_HINT = "Please run 'source ~/.zshrc' in your terminal to reload the configuration."


def get_config(paths: ShellPaths, scope: Scope) -> dict:
    """Raw content of the config file (empty string when absent)."""
    path = paths.config(scope)
    if path is None:
        return fail(ErrorKind.NOT_FOUND, f"No {scope.value} config file configured")

    try:
        content = read_text(path)
    except ShellFileError as e:
        return fail(ErrorKind.IO_FAILURE, str(e))

    return {
        "scope": scope.value,
        "path": str(path),
        "exists": content is not None,
        "content": content or "",
    }


def update_config(paths: ShellPaths, content: str, scope: Scope) -> dict:
    """Replace the config file content, creating its directory if needed."""
    path = paths.config(scope)
    if path is None:
        return fail(ErrorKind.NOT_FOUND, f"No {scope.value} config file configured")

    try:
        ensure_parent_dir(path)
        write_text(path, content)
    except ShellFileError as e:
        return fail(ErrorKind.IO_FAILURE, str(e))

    logger.info("Wrote %s config (%d bytes) to %s", scope.value, len(content), path)
    return ok(f"Saved {scope.value} config", scope=scope.value, hint=RELOAD_HINT)


def reload_hint() -> str:
    """zshdeck cannot reload the user's running shell; tell them how."""
    return RELOAD_HINT
