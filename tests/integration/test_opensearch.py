"""Integration tests for the platform against a real OpenSearch cluster."""

from __future__ import annotations

import uuid

import pytest

from nextsearch_elastic.config.settings import Settings
from nextsearch_elastic.models.document import IndexDocument
from nextsearch_elastic.models.index import IndexStatus
from nextsearch_elastic.platform.base.exceptions import ConfigurationError
from nextsearch_elastic.platform.base.mapping import ContentProvider
from nextsearch_elastic.platform.elastic import ElasticSearchPlatform

pytestmark = [pytest.mark.integration, pytest.mark.opensearch]


class NotesProvider(ContentProvider):
    @property
    def id(self) -> str:
        return "notes"


def _settings(host: str, index_name: str) -> Settings:
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        elastic={
            "hosts": [host],
            "verify_certs": False,
            "index_name": index_name,
            "pipeline_id": f"{index_name}-ingest",
            "index_body": {"mappings": {"properties": {"title": {"type": "text"}, "content": {"type": "text"}}}},
            "pipeline_body": {
                "description": "integration test pipeline",
                "processors": [{"set": {"field": "ingested", "value": True}}],
            },
        },
    )


@pytest.fixture
async def platform(opensearch_ready: str):
    p = ElasticSearchPlatform(_settings(opensearch_ready, f"nextsearch-test-{uuid.uuid4().hex[:8]}"))
    await p.load_platform()
    yield p
    await p.reset_index()
    await p.shutdown()


class TestLifecycle:
    async def test_platform_answers(self, platform: ElasticSearchPlatform) -> None:
        assert await platform.test_platform() is True

    async def test_init_twice_then_reset_twice(self, platform: ElasticSearchPlatform) -> None:
        await platform.init_index()
        await platform.init_index()
        assert await platform.client.index_exists(platform.index_service.mapping.index_name)

        await platform.reset_index()
        await platform.reset_index()
        assert not await platform.client.index_exists(platform.index_service.mapping.index_name)

    async def test_invalid_index_name(self, opensearch_ready: str) -> None:
        p = ElasticSearchPlatform(_settings(opensearch_ready, "Invalid_UPPERCASE"))
        await p.load_platform()
        try:
            with pytest.raises(ConfigurationError):
                await p.init_index()
        finally:
            await p.shutdown()


class TestDocumentLifecycle:
    async def test_create_update_remove(self, platform: ElasticSearchPlatform) -> None:
        await platform.init_index()
        provider = NotesProvider()
        document = IndexDocument.create("notes", "1", title="Groceries", content="milk, eggs")

        index = await platform.index_document(provider, document)
        assert index.status == IndexStatus.INDEX_DONE

        document.title = "Groceries (updated)"
        index = await platform.index_document(provider, document)
        assert index.status == IndexStatus.INDEX_DONE

        document.index.set_status(IndexStatus.REMOVE_DOCUMENT)
        index = await platform.index_document(provider, document)
        assert index.status == IndexStatus.DOCUMENT_REMOVED
