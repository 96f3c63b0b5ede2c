"""
Record models — the structured view of entries parsed out of zsh files.

Records are transient: they are derived from file text on every read and
never persisted as objects.  The files themselves are the store.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class Scope(StrEnum):
    """Which of the two parallel files a record lives in."""

    SHARED = "shared"  # versioned, shared between machines
    LOCAL = "local"    # machine-specific, not versioned

    @classmethod
    def from_flag(cls, local: bool) -> Scope:
        return cls.LOCAL if local else cls.SHARED


class ErrorKind(StrEnum):
    """Failure categories carried in service result dicts."""

    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    SOURCE_MISSING = "source_missing"
    IO_FAILURE = "io_failure"
    INVALID = "invalid"  # rejected input, nothing was read or written


class AliasRecord(BaseModel):
    """One ``alias name="value"`` line."""

    name: str
    value: str
    scope: Scope = Scope.SHARED


class FunctionRecord(BaseModel):
    """One brace-delimited function block.

    ``body`` is the de-indented text between the opening and the matching
    closing brace.
    """

    name: str
    body: str
    scope: Scope = Scope.SHARED


class PluginCatalogEntry(BaseModel):
    """Static metadata about a known plugin.  All fields absent when unknown."""

    name: str
    description: str | None = None
    repository: str | None = None
    install_hint: str | None = None


class PluginInfo(PluginCatalogEntry):
    """A plugin as shown to the user: catalog metadata plus live state."""

    enabled: bool = False
    installed: bool = False
    manager: str = "oh-my-zsh"
