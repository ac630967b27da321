"""OpenSearch client — Index management and document ingest for OpenSearch (v2+).

OpenSearch shares its index, ingest and document APIs with Elasticsearch, so
this client also works against Elasticsearch clusters exposing the same REST
surface.  It wraps ``opensearch-py`` (async) and translates transport errors
into the platform's typed remote errors.
"""

from __future__ import annotations

import logging
from typing import Any

from opensearchpy import AsyncOpenSearch, NotFoundError, RequestError, TransportError

from nextsearch_elastic.platform.base.client import SearchEngineClient
from nextsearch_elastic.platform.base.exceptions import (
    ConnectionError,
    RemoteBadRequestError,
    RemoteError,
    RemoteNotFoundError,
)

logger = logging.getLogger(__name__)


def _translate(e: TransportError) -> RemoteError:
    """Map an ``opensearch-py`` transport error to a platform remote error."""
    status = e.status_code if isinstance(e.status_code, int) else None
    message = f"{e.error}: {e.info}" if e.info else str(e.error)
    if isinstance(e, NotFoundError):
        return RemoteNotFoundError(message, status_code=status)
    if isinstance(e, RequestError):
        return RemoteBadRequestError(message, status_code=status)
    return RemoteError(message, status_code=status)


class OpenSearchEngineClient(SearchEngineClient):
    """Search engine client backed by ``AsyncOpenSearch``.

    Args:
        hosts: List of cluster node URLs.
        username: Optional HTTP basic-auth username.
        password: Optional HTTP basic-auth password.
        verify_certs: Whether to verify TLS certificates.
        client: Pre-built ``AsyncOpenSearch`` instance (skips construction).
        **kwargs: Additional keyword arguments forwarded to ``AsyncOpenSearch``.
    """

    def __init__(
        self,
        hosts: list[str] | None = None,
        username: str | None = None,
        password: str | None = None,
        verify_certs: bool = True,
        client: Any = None,
        **kwargs: Any,
    ) -> None:
        self._hosts = hosts or ["https://localhost:9200"]
        self._client = client if client is not None else self._build(username, password, verify_certs, kwargs)

    def _build(
        self,
        username: str | None,
        password: str | None,
        verify_certs: bool,
        extra: dict[str, Any],
    ) -> AsyncOpenSearch:
        client_kwargs: dict[str, Any] = {
            "hosts": self._hosts,
            "verify_certs": verify_certs,
            "ssl_show_warn": False,
        }
        if username and password:
            client_kwargs["http_auth"] = (username, password)
        client_kwargs.update(extra)
        return AsyncOpenSearch(**client_kwargs)

    async def connect(self) -> None:
        """Verify the cluster is reachable and log its identity."""
        try:
            info = await self._client.info()
        except Exception as e:
            raise ConnectionError(f"Failed to connect to search cluster: {e}") from e
        version = info.get("version", {}).get("number", "unknown")
        cluster = info.get("cluster_name", "unknown")
        logger.info("Connected to search cluster: %s (v%s)", cluster, version)

    async def ping(self) -> bool:
        try:
            return bool(await self._client.ping())
        except Exception:
            logger.warning("Ping to search cluster failed", exc_info=True)
            return False

    async def close(self) -> None:
        await self._client.close()

    # ── Index management ─────────────────────────────────────────────────

    async def index_exists(self, index: str) -> bool:
        try:
            return bool(await self._client.indices.exists(index=index))
        except TransportError as e:
            raise _translate(e) from e

    async def create_index(self, index: str, body: dict[str, Any]) -> dict[str, Any]:
        try:
            response = await self._client.indices.create(index=index, body=body)
        except TransportError as e:
            raise _translate(e) from e
        logger.info("Created index %s", index)
        return dict(response)

    async def delete_index(self, index: str) -> dict[str, Any]:
        try:
            response = await self._client.indices.delete(index=index)
        except TransportError as e:
            raise _translate(e) from e
        logger.info("Deleted index %s", index)
        return dict(response)

    async def create_pipeline(self, pipeline_id: str, body: dict[str, Any]) -> dict[str, Any]:
        try:
            response = await self._client.ingest.put_pipeline(id=pipeline_id, body=body)
        except TransportError as e:
            raise _translate(e) from e
        logger.info("Created ingest pipeline %s", pipeline_id)
        return dict(response)

    async def delete_pipeline(self, pipeline_id: str) -> dict[str, Any]:
        try:
            response = await self._client.ingest.delete_pipeline(id=pipeline_id)
        except TransportError as e:
            raise _translate(e) from e
        logger.info("Deleted ingest pipeline %s", pipeline_id)
        return dict(response)

    # ── Documents ────────────────────────────────────────────────────────

    async def create_document(
        self,
        index: str,
        doc_id: str,
        body: dict[str, Any],
        pipeline: str | None = None,
    ) -> dict[str, Any]:
        params: dict[str, Any] = {"pipeline": pipeline} if pipeline else {}
        try:
            response = await self._client.index(index=index, id=doc_id, body=body, **params)
        except TransportError as e:
            raise _translate(e) from e
        return dict(response)

    async def update_document(self, index: str, doc_id: str, body: dict[str, Any]) -> dict[str, Any]:
        try:
            response = await self._client.update(index=index, id=doc_id, body={"doc": body})
        except TransportError as e:
            raise _translate(e) from e
        return dict(response)

    async def delete_document(self, index: str, doc_id: str) -> dict[str, Any]:
        try:
            response = await self._client.delete(index=index, id=doc_id)
        except TransportError as e:
            raise _translate(e) from e
        return dict(response)
