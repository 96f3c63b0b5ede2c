"""
Central data registry for static catalogs.

Loads catalogs from ``zshdeck/core/data/catalogs/`` once at first access
and caches them for the process lifetime.  CLI and web layers both read
from this single source of truth.

Usage::

    from zshdeck.core.data import get_registry

    entry = get_registry().lookup_plugin("fzf")
    entry.description   # "Fuzzy finder integration ..."
"""

from __future__ import annotations

import json
import logging
from functools import cached_property
from pathlib import Path

from zshdeck.core.models.records import PluginCatalogEntry

logger = logging.getLogger(__name__)

_CATALOG_DIR = Path(__file__).parent / "catalogs"


def _read_catalog(filename: str) -> list[dict]:
    """Entries of one packaged catalog file.  Missing file → no entries."""
    path = _CATALOG_DIR / filename
    if not path.is_file():
        logger.warning("Catalog file missing from the package: %s", path)
        return []
    return json.loads(path.read_text(encoding="utf-8"))


class DataRegistry:
    """Static catalogs, each parsed on first access and kept for the
    lifetime of the instance.
    """

    @cached_property
    def plugin_catalog(self) -> dict[str, PluginCatalogEntry]:
        """Known plugins keyed by name, in catalog order."""
        data = _read_catalog("plugins.json")
        catalog = {
            item["name"]: PluginCatalogEntry.model_validate(item) for item in data
        }
        logger.debug("Loaded %d plugin catalog entries", len(catalog))
        return catalog

    def lookup_plugin(self, name: str) -> PluginCatalogEntry:
        """Catalog entry for ``name``.  Unknown names get empty metadata."""
        entry = self.plugin_catalog.get(name)
        if entry is None:
            return PluginCatalogEntry(name=name)
        return entry


_registry: DataRegistry | None = None


def get_registry() -> DataRegistry:
    """Process-wide registry singleton."""
    global _registry  # noqa: PLW0603
    if _registry is None:
        _registry = DataRegistry()
    return _registry
