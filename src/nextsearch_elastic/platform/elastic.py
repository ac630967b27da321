"""Elasticsearch platform — Entry point used by the host search framework.

Wires the configured cluster client, mapping provider and index service
together and exposes the operations the framework calls: load, test,
initialize/reset the index and index documents.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from nextsearch_elastic.config.settings import Settings
from nextsearch_elastic.models.document import IndexDocument
from nextsearch_elastic.models.index import Index
from nextsearch_elastic.platform.base.client import SearchEngineClient
from nextsearch_elastic.platform.base.exceptions import ConfigurationError, RemoteError
from nextsearch_elastic.platform.base.mapping import ContentProvider, MappingProvider
from nextsearch_elastic.platform.mapping import StaticMappingProvider
from nextsearch_elastic.platform.opensearch.client import OpenSearchEngineClient
from nextsearch_elastic.service.index import IndexService

logger = logging.getLogger(__name__)


class ElasticSearchPlatform:
    """Search platform storing every provider's documents in one global index.

    Args:
        settings: Application settings.
        client: Pre-built search engine client. Built from settings on load if None.
        mapping: Mapping provider. Defaults to the static definitions from settings.
    """

    def __init__(
        self,
        settings: Settings,
        client: SearchEngineClient | None = None,
        mapping: MappingProvider | None = None,
    ) -> None:
        self.settings = settings
        self._client = client
        self.index_service = IndexService(mapping or StaticMappingProvider.from_settings(settings.elastic))

    @property
    def id(self) -> str:
        return "elastic_search"

    @property
    def name(self) -> str:
        return "Elasticsearch"

    @property
    def client(self) -> SearchEngineClient:
        if self._client is None:
            raise ConfigurationError("Platform not loaded. Call load_platform() first.")
        return self._client

    async def load_platform(self) -> None:
        """Create the cluster client from settings and check connectivity.

        Raises:
            ConnectionError: If the cluster cannot be reached.
        """
        if self._client is not None:
            return
        es = self.settings.elastic
        client = OpenSearchEngineClient(
            hosts=es.hosts,
            username=es.username,
            password=es.password,
            verify_certs=es.verify_certs,
            **es.extra,
        )
        try:
            await client.connect()
        except Exception:
            await client.close()
            raise
        self._client = client

    async def test_platform(self) -> bool:
        return await self.client.ping()

    async def init_index(self) -> None:
        await self.index_service.initialize_index(self.client)
        logger.info("Index %s ready", self.index_service.mapping.index_name)

    async def reset_index(self) -> None:
        await self.index_service.remove_index(self.client)
        logger.info("Index %s removed", self.index_service.mapping.index_name)

    async def index_document(self, provider: ContentProvider, document: IndexDocument) -> Index:
        """Index a single document and return its updated status record."""
        result = await self.index_service.index_document(self.client, provider, document)
        return self.index_service.parse_index_result(document.index, result)

    async def index_documents(self, provider: ContentProvider, documents: Iterable[IndexDocument]) -> list[Index]:
        """Index documents one after the other.

        A document the cluster refuses is logged and keeps its current status;
        the remaining documents are still processed.

        Returns:
            Status records of the documents that were indexed.
        """
        indexed: list[Index] = []
        for document in documents:
            try:
                indexed.append(await self.index_document(provider, document))
            except RemoteError as e:
                logger.warning(
                    "Failed to index document %s:%s (status %s): %s",
                    provider.id,
                    document.id,
                    e.status_code,
                    e,
                )
        logger.info("Indexed %d documents for provider %s", len(indexed), provider.id)
        return indexed

    async def shutdown(self) -> None:
        """Close the cluster client."""
        if self._client:
            await self._client.close()
            self._client = None
