"""OpenSearch-backed search engine client."""

from nextsearch_elastic.platform.opensearch.client import OpenSearchEngineClient

__all__ = ["OpenSearchEngineClient"]
