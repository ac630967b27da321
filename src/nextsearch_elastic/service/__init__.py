"""Index service — Lifecycle, dispatch and reconciliation for the global index."""

from nextsearch_elastic.service.index import IndexService

__all__ = ["IndexService"]
