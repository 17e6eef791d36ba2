"""
Pytest configuration and common fixtures for mapbox_client tests.

Fixtures follow the camelCase naming convention.
"""

import json
from typing import Any, Dict

import httpx
import pytest

from tests.fixtures import responses
from tests.fixtures.transport import MockMapboxTransport

# ============================================================================
# Transport Fixtures
# ============================================================================

ROUTES: Dict[str, Dict[str, Any]] = {
    "/search/geocode/v6/forward": responses.FORWARD_GEOCODING,
    "/search/geocode/v6/reverse": responses.REVERSE_GEOCODING,
    "/search/geocode/v6/batch": responses.BATCH_GEOCODING,
    "/search/searchbox/v1/suggest": responses.SUGGEST,
    "/search/searchbox/v1/forward": responses.SEARCH_FORWARD,
    "/search/searchbox/v1/reverse": responses.SEARCH_REVERSE,
    "/search/searchbox/v1/category": responses.LIST_CATEGORIES,
}


def routeRequest(request: httpx.Request) -> httpx.Response:
    """Answer a request with the canned payload for its path, 404 otherwise."""
    path = request.url.path
    payload = ROUTES.get(path)
    if payload is None and path.startswith("/search/searchbox/v1/retrieve/"):
        payload = responses.RETRIEVE
    elif payload is None and path.startswith("/search/searchbox/v1/category/"):
        payload = responses.CATEGORY_SEARCH

    if payload is None:
        return httpx.Response(404, json=responses.NOT_FOUND_ERROR, request=request)
    return httpx.Response(200, content=json.dumps(payload).encode("utf-8"), request=request)


@pytest.fixture
def routedTransport() -> MockMapboxTransport:
    """
    Provide a transport serving every known endpoint from fixtures.

    Returns:
        MockMapboxTransport: Recording transport routed by request path
    """
    return MockMapboxTransport(handler=routeRequest)
