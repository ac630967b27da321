"""Base platform interfaces — Abstract capabilities consumed by the index service."""

from nextsearch_elastic.platform.base.client import SearchEngineClient
from nextsearch_elastic.platform.base.mapping import ContentProvider, MappingProvider

__all__ = ["ContentProvider", "MappingProvider", "SearchEngineClient"]
