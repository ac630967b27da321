"""Data models shared with the host search framework."""

from nextsearch_elastic.models.document import DocumentAccess, IndexDocument
from nextsearch_elastic.models.index import Index, IndexStatus

__all__ = ["DocumentAccess", "Index", "IndexDocument", "IndexStatus"]
