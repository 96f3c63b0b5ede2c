"""
Shell file persistence — whole-file read/write for zsh config files.

Every mutation in zshdeck is read-all → transform → write-all, so this
module only needs whole-file operations.  Writes are a single
``write_text`` call: there is no locking and no atomic rename, so two
processes editing the same file race and the last writer wins.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class ShellFileError(Exception):
    """Raised when a shell file cannot be read or written."""

    def __init__(self, path: Path, action: str, cause: OSError) -> None:
        self.path = path
        self.action = action
        self.cause = cause
        super().__init__(f"Failed to {action} {path}: {cause}")


def path_exists(path: Path) -> bool:
    """True if ``path`` is an existing file."""
    return path.is_file()


def read_text(path: Path) -> str | None:
    """Return the file content, or None when the file does not exist.

    Raises:
        ShellFileError: The file exists but cannot be read.
    """
    if not path.exists():
        logger.debug("No file at %s", path)
        return None

    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ShellFileError(path, "read", e) from e


def ensure_parent_dir(path: Path) -> None:
    """Create the parent directory of ``path`` if needed."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ShellFileError(path, "create directory for", e) from e


def write_text(path: Path, text: str) -> None:
    """Replace the whole content of ``path`` with ``text``."""
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise ShellFileError(path, "write", e) from e
    logger.debug("Wrote %d bytes to %s", len(text), path)


def write_lines(path: Path, lines: list[str]) -> None:
    """Write ``lines`` joined by newlines, each line newline-terminated."""
    write_text(path, "\n".join(lines) + "\n" if lines else "")
