"""Search engine client — Abstract interface to the remote cluster's APIs.

The index service only needs a handful of index-management and document
operations.  Any object implementing them can be used, whatever library sits
underneath.  Implementations must translate backend failures into:
  - RemoteNotFoundError: the index, pipeline or document does not exist
  - RemoteBadRequestError: the request was rejected as malformed
  - RemoteError: any other error answered by the cluster
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class SearchEngineClient(ABC):
    """Abstract base class for remote search-engine clients."""

    @abstractmethod
    async def ping(self) -> bool:
        """Return True if the cluster answers."""

    @abstractmethod
    async def close(self) -> None:
        """Release connections held by the client."""

    # ── Index management ─────────────────────────────────────────────────

    @abstractmethod
    async def index_exists(self, index: str) -> bool:
        """Check whether an index exists."""

    @abstractmethod
    async def create_index(self, index: str, body: dict[str, Any]) -> dict[str, Any]:
        """Create an index with the given settings and mappings."""

    @abstractmethod
    async def delete_index(self, index: str) -> dict[str, Any]:
        """Delete an index."""

    @abstractmethod
    async def create_pipeline(self, pipeline_id: str, body: dict[str, Any]) -> dict[str, Any]:
        """Create or replace an ingest pipeline."""

    @abstractmethod
    async def delete_pipeline(self, pipeline_id: str) -> dict[str, Any]:
        """Delete an ingest pipeline."""

    # ── Documents ────────────────────────────────────────────────────────

    @abstractmethod
    async def create_document(
        self,
        index: str,
        doc_id: str,
        body: dict[str, Any],
        pipeline: str | None = None,
    ) -> dict[str, Any]:
        """Index a new document, optionally through an ingest pipeline."""

    @abstractmethod
    async def update_document(self, index: str, doc_id: str, body: dict[str, Any]) -> dict[str, Any]:
        """Partially update an existing document."""

    @abstractmethod
    async def delete_document(self, index: str, doc_id: str) -> dict[str, Any]:
        """Delete a document."""
