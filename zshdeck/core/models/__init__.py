"""
Domain models — Pydantic types for zshdeck.

    from zshdeck.core.models import AliasRecord, FunctionRecord, Scope, ShellPaths
"""

from zshdeck.core.models.paths import ShellPaths
from zshdeck.core.models.records import (
    AliasRecord,
    ErrorKind,
    FunctionRecord,
    PluginCatalogEntry,
    PluginInfo,
    Scope,
)

__all__ = [
    "AliasRecord",
    "ErrorKind",
    "FunctionRecord",
    "PluginCatalogEntry",
    "PluginInfo",
    "Scope",
    "ShellPaths",
]
