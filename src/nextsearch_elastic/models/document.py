"""Index document model — Content handed over by a provider for indexing."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from nextsearch_elastic.models.index import Index, IndexStatus


class DocumentAccess(BaseModel):
    """Who may see a document in search results."""

    owner: str = Field(default="", description="User id of the document owner")
    users: list[str] = Field(default_factory=list, description="User ids the document is shared with")
    groups: list[str] = Field(default_factory=list, description="Group ids the document is shared with")


class IndexDocument(BaseModel):
    """A document payload plus a reference to its status record.

    Only ``index.status`` is consulted by the platform; everything else is
    forwarded to the cluster as-is.
    """

    id: str = Field(description="Document identifier within the provider")
    provider_id: str = Field(description="Content provider that owns the document")
    title: str = Field(default="", description="Document title")
    content: str = Field(default="", description="Document content (plain text or base64 for attachments)")
    access: DocumentAccess = Field(default_factory=DocumentAccess, description="Access lists")
    tags: list[str] = Field(default_factory=list, description="Associated tags")
    more: dict[str, Any] = Field(default_factory=dict, description="Additional provider-specific fields")
    index: Index = Field(description="Status record for this document")

    @classmethod
    def create(
        cls,
        provider_id: str,
        document_id: str,
        status: IndexStatus = IndexStatus.INDEX_THIS,
        **fields: Any,
    ) -> IndexDocument:
        """Build a document together with a fresh status record."""
        index = Index(provider_id=provider_id, document_id=document_id, status=status)
        return cls(id=document_id, provider_id=provider_id, index=index, **fields)
