"""Tests for the index status and document models."""

from __future__ import annotations

from datetime import UTC, datetime

from nextsearch_elastic.models.document import IndexDocument
from nextsearch_elastic.models.index import Index, IndexStatus


class TestIndex:
    def test_defaults(self) -> None:
        index = Index(provider_id="files", document_id="1")
        assert index.status == IndexStatus.INDEX_THIS
        assert index.last_index is None

    def test_is_status(self) -> None:
        index = Index(provider_id="files", document_id="1", status=IndexStatus.REMOVE_DOCUMENT)
        assert index.is_status(IndexStatus.REMOVE_DOCUMENT)
        assert not index.is_status(IndexStatus.INDEX_DONE)

    def test_status_from_string(self) -> None:
        index = Index(provider_id="files", document_id="1", status="index_done")
        assert index.status is IndexStatus.INDEX_DONE

    def test_set_last_index_explicit(self) -> None:
        when = datetime(2024, 1, 1, tzinfo=UTC)
        index = Index(provider_id="files", document_id="1")
        index.set_last_index(when)
        assert index.last_index == when


class TestIndexDocument:
    def test_create_links_index(self) -> None:
        document = IndexDocument.create("files", "7", status=IndexStatus.INDEX_DONE, title="Notes")
        assert document.id == "7"
        assert document.index.provider_id == "files"
        assert document.index.document_id == "7"
        assert document.index.status == IndexStatus.INDEX_DONE
        assert document.title == "Notes"
        assert document.access.users == []
