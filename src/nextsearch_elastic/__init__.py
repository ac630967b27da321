"""nextsearch-elastic — Elasticsearch/OpenSearch indexing platform for NextSearch."""

__version__ = "0.1.0"
