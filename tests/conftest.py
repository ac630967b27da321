"""Shared test fixtures and configuration."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import AsyncMock

import pytest

from nextsearch_elastic.config.settings import Settings
from nextsearch_elastic.models.document import DocumentAccess, IndexDocument
from nextsearch_elastic.models.index import IndexStatus
from nextsearch_elastic.platform.base.client import SearchEngineClient
from nextsearch_elastic.platform.base.mapping import ContentProvider
from nextsearch_elastic.platform.mapping import StaticMappingProvider
from nextsearch_elastic.service.index import IndexService


class FilesProvider(ContentProvider):
    """Minimal content provider used across tests."""

    @property
    def id(self) -> str:
        return "files"


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        elastic={
            "hosts": ["http://localhost:9200"],
            "index_name": "test-index",
            "pipeline_id": "test-pipeline",
            "index_body": {"mappings": {"properties": {"content": {"type": "text"}}}},
            "pipeline_body": {"description": "test", "processors": [{"set": {"field": "seen", "value": True}}]},
        },
    )


@pytest.fixture
def mapping(settings: Settings) -> StaticMappingProvider:
    return StaticMappingProvider.from_settings(settings.elastic)


@pytest.fixture
def service(mapping: StaticMappingProvider) -> IndexService:
    return IndexService(mapping)


@pytest.fixture
def client() -> AsyncMock:
    """Search engine client mock; every remote call succeeds by default."""
    mock = AsyncMock(spec=SearchEngineClient)
    mock.index_exists.return_value = False
    mock.create_index.return_value = {"acknowledged": True, "index": "test-index"}
    mock.create_pipeline.return_value = {"acknowledged": True}
    mock.delete_index.return_value = {"acknowledged": True}
    mock.delete_pipeline.return_value = {"acknowledged": True}
    mock.create_document.return_value = {"_id": "files:42", "result": "created"}
    mock.update_document.return_value = {"_id": "files:42", "result": "updated"}
    mock.delete_document.return_value = {"_id": "files:42", "result": "deleted"}
    mock.ping.return_value = True
    return mock


@pytest.fixture
def provider() -> FilesProvider:
    return FilesProvider()


@pytest.fixture
def make_document() -> Callable[..., IndexDocument]:
    """Factory for documents in a given lifecycle stage."""

    def _make(status: IndexStatus = IndexStatus.INDEX_THIS, document_id: str = "42") -> IndexDocument:
        return IndexDocument.create(
            "files",
            document_id,
            status=status,
            title="Quarterly report",
            content="Revenue grew in every region.",
            access=DocumentAccess(owner="alice", users=["bob"], groups=["finance"]),
            tags=["report"],
        )

    return _make
