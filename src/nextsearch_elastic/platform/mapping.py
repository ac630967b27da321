"""Static mapping provider — Index and pipeline definitions straight from configuration."""

from __future__ import annotations

import copy
from typing import Any

from nextsearch_elastic.config.settings import ElasticSettings
from nextsearch_elastic.models.document import IndexDocument
from nextsearch_elastic.platform.base.mapping import ContentProvider, MappingProvider


class StaticMappingProvider(MappingProvider):
    """Serves the configured index and pipeline bodies verbatim.

    Args:
        index_name: Name of the global index.
        pipeline_id: Id of the global ingest pipeline.
        index_body: Index settings and mappings.
        pipeline_body: Ingest pipeline definition.
    """

    def __init__(
        self,
        index_name: str,
        pipeline_id: str,
        index_body: dict[str, Any] | None = None,
        pipeline_body: dict[str, Any] | None = None,
    ) -> None:
        self._index_name = index_name
        self._pipeline_id = pipeline_id
        self._index_body = index_body or {}
        self._pipeline_body = pipeline_body or {"processors": []}

    @classmethod
    def from_settings(cls, settings: ElasticSettings) -> StaticMappingProvider:
        return cls(
            index_name=settings.index_name,
            pipeline_id=settings.pipeline_id,
            index_body=settings.index_body,
            pipeline_body=settings.pipeline_body,
        )

    @property
    def index_name(self) -> str:
        return self._index_name

    @property
    def pipeline_id(self) -> str:
        return self._pipeline_id

    def generate_index_body(self) -> dict[str, Any]:
        return copy.deepcopy(self._index_body)

    def generate_pipeline_body(self) -> dict[str, Any]:
        return copy.deepcopy(self._pipeline_body)

    def generate_document_body(self, provider: ContentProvider, document: IndexDocument) -> dict[str, Any]:
        # Extra fields never override the provider namespace or access lists.
        body: dict[str, Any] = dict(document.more)
        body.update(
            provider=provider.id,
            title=document.title,
            content=document.content,
            owner=document.access.owner,
            users=document.access.users,
            groups=document.access.groups,
            tags=document.tags,
        )
        return body
