"""Index status record — Tracks where a document is in its indexing lifecycle.

The record is owned by the host framework.  The platform only reads the status
to pick a remote operation and updates it once that operation has completed::

    INDEX_THIS      --create-->  INDEX_DONE
    INDEX_DONE      --update-->  INDEX_DONE
    REMOVE_DOCUMENT --remove-->  DOCUMENT_REMOVED
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, Field


class IndexStatus(str, Enum):
    """Lifecycle stage of a document in the search index."""

    INDEX_THIS = "index_this"
    INDEX_DONE = "index_done"
    REMOVE_DOCUMENT = "remove_document"
    DOCUMENT_REMOVED = "document_removed"


class Index(BaseModel):
    """Status record attached to an indexed document."""

    provider_id: str = Field(description="Content provider that owns the document")
    document_id: str = Field(description="Document identifier within the provider")
    status: IndexStatus = Field(default=IndexStatus.INDEX_THIS, description="Current lifecycle stage")
    last_index: datetime | None = Field(default=None, description="Timestamp of the last successful indexing")

    def is_status(self, status: IndexStatus) -> bool:
        return self.status == status

    def set_status(self, status: IndexStatus) -> None:
        self.status = status

    def set_last_index(self, when: datetime | None = None) -> None:
        """Record the time of the last indexing (defaults to now, UTC)."""
        self.last_index = when or datetime.now(UTC)
