"""Mapping and provider capabilities — Opaque definitions consumed by the index service."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from nextsearch_elastic.models.document import IndexDocument


class ContentProvider(ABC):
    """A content source of the host framework (files, bookmarks, ...)."""

    @property
    @abstractmethod
    def id(self) -> str:
        """Unique provider id, used to namespace document ids in the index."""


class MappingProvider(ABC):
    """Supplies the global index and ingest pipeline definitions.

    The definitions are treated as opaque blobs by the index service; how they
    are produced is entirely up to the implementation.
    """

    @property
    @abstractmethod
    def index_name(self) -> str:
        """Name of the global index."""

    @property
    @abstractmethod
    def pipeline_id(self) -> str:
        """Id of the global ingest pipeline."""

    @abstractmethod
    def generate_index_body(self) -> dict[str, Any]:
        """Settings and mappings used when creating the index."""

    @abstractmethod
    def generate_pipeline_body(self) -> dict[str, Any]:
        """Definition used when creating the ingest pipeline."""

    @abstractmethod
    def generate_document_body(self, provider: ContentProvider, document: IndexDocument) -> dict[str, Any]:
        """Body sent to the cluster when creating or updating a document."""

    def generate_document_id(self, provider: ContentProvider, document: IndexDocument) -> str:
        """Id of the document in the global index (``<provider>:<document>``)."""
        return f"{provider.id}:{document.id}"
