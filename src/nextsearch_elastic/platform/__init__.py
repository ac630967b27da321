"""Search platform layer — Index lifecycle and document ingest against a remote cluster.

Built-in implementations:
  - opensearch: OpenSearch v2+ / Elasticsearch-compatible cluster via ``opensearch-py``
  - mapping: static index and pipeline definitions taken from configuration

Implement ``SearchEngineClient`` or ``MappingProvider`` to plug in your own.
"""
