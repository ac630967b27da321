"""Index service — Global index lifecycle, document dispatch and status reconciliation.

The service is a pass-through: it decides which remote call to issue and
updates the caller's status record once the call has returned.  It never
retries and performs only two error translations:
  - a bad request while creating the index or pipeline becomes ConfigurationError
  - a not-found while tearing them down is ignored
Everything else propagates unchanged.
"""

from __future__ import annotations

from typing import Any

from nextsearch_elastic.models.document import IndexDocument
from nextsearch_elastic.models.index import Index, IndexStatus
from nextsearch_elastic.platform.base.client import SearchEngineClient
from nextsearch_elastic.platform.base.exceptions import (
    ConfigurationError,
    RemoteBadRequestError,
    RemoteNotFoundError,
)
from nextsearch_elastic.platform.base.mapping import ContentProvider, MappingProvider


class IndexService:
    """Drives the global index and the documents stored in it.

    Args:
        mapping: Source of the index name, pipeline id and their definitions.
    """

    def __init__(self, mapping: MappingProvider) -> None:
        self.mapping = mapping

    async def initialize_index(self, client: SearchEngineClient) -> None:
        """Create the global index and ingest pipeline unless the index exists.

        Raises:
            ConfigurationError: If the cluster rejects the creation request.
        """
        try:
            if not await client.index_exists(self.mapping.index_name):
                await client.create_index(self.mapping.index_name, self.mapping.generate_index_body())
                await client.create_pipeline(self.mapping.pipeline_id, self.mapping.generate_pipeline_body())
        except RemoteBadRequestError as e:
            raise ConfigurationError("Check your user/password and the index assigned to that cloud") from e

    async def remove_index(self, client: SearchEngineClient) -> None:
        """Delete the ingest pipeline, then the global index. Missing ones are skipped."""
        try:
            await client.delete_pipeline(self.mapping.pipeline_id)
        except RemoteNotFoundError:
            pass

        try:
            await client.delete_index(self.mapping.index_name)
        except RemoteNotFoundError:
            pass

    async def index_document(
        self,
        client: SearchEngineClient,
        provider: ContentProvider,
        document: IndexDocument,
    ) -> dict[str, Any]:
        """Send a document to the cluster according to its status.

        ``REMOVE_DOCUMENT`` deletes it, ``INDEX_DONE`` updates it, anything else
        creates it.

        Returns:
            The raw response from the cluster.
        """
        index = document.index
        doc_id = self.mapping.generate_document_id(provider, document)

        if index.is_status(IndexStatus.REMOVE_DOCUMENT):
            return await client.delete_document(self.mapping.index_name, doc_id)

        body = self.mapping.generate_document_body(provider, document)
        if index.is_status(IndexStatus.INDEX_DONE):
            return await client.update_document(self.mapping.index_name, doc_id, body)

        return await client.create_document(self.mapping.index_name, doc_id, body, pipeline=self.mapping.pipeline_id)

    def parse_index_result(self, index: Index, result: dict[str, Any]) -> Index:
        """Move the status record forward after a successful ``index_document``.

        The record is updated in place and returned.
        """
        if index.is_status(IndexStatus.REMOVE_DOCUMENT):
            index.set_status(IndexStatus.DOCUMENT_REMOVED)
            return index

        # TODO: inspect ``result`` (e.g. "result": "noop" on update) once the
        # host framework defines how partial failures should be reported.
        index.set_last_index()
        index.set_status(IndexStatus.INDEX_DONE)
        return index
