"""Integration test fixtures — Docker-based search cluster.

Expects a cluster to be running, e.g.:
    docker run -d -p 9201:9200 -e discovery.type=single-node \
        -e DISABLE_SECURITY_PLUGIN=true opensearchproject/opensearch:2

The host can be overridden with NEXTSEARCH_TEST_HOST.
"""

from __future__ import annotations

import os
import time

import httpx
import pytest

DEFAULT_HOST = "http://localhost:9201"


def _wait_for_service(url: str, timeout: float = 15.0) -> bool:
    """Block until *url* returns HTTP 200, or timeout."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            r = httpx.get(url, timeout=5)
            if r.status_code == 200:
                return True
        except httpx.HTTPError:
            pass
        time.sleep(2)
    return False


@pytest.fixture(scope="session")
def opensearch_ready() -> str:
    """Ensure the search cluster is reachable."""
    host = os.environ.get("NEXTSEARCH_TEST_HOST", DEFAULT_HOST)
    if not _wait_for_service(host):
        pytest.skip(f"Search cluster not available at {host}")
    return host
