"""Test configuration and fixtures."""

import json

import httpx
import pytest

from stop_finder.core.fetcher import HttpFetcher


@pytest.fixture
def sample_postcode_response():
    """Sample postcodes.io lookup body."""
    return json.dumps(
        {
            "status": 200,
            "result": {
                "postcode": "SW1A 1AA",
                "latitude": 51.5,
                "longitude": -0.1,
                "admin_district": "Westminster",
            },
        }
    )


@pytest.fixture
def sample_stop_point_response():
    """Sample TfL StopPoint search body."""
    return json.dumps(
        {
            "centrePoint": [51.5, -0.1],
            "stopPoints": [
                {"naptanId": "A", "commonName": "Stop A", "distance": 10.5},
                {"naptanId": "B", "commonName": "Stop B", "distance": 52.1},
                {"naptanId": "C", "commonName": "Stop C", "distance": 98.0},
            ],
            "total": 3,
        }
    )


@pytest.fixture
def make_fetcher():
    """Build an HttpFetcher backed by a mock transport.

    The returned factory takes a handler ``(httpx.Request) -> httpx.Response``
    and records every request in ``factory.requests``.
    """
    def factory(handler):
        def recording_handler(request):
            factory.requests.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        return HttpFetcher(client)

    factory.requests = []
    return factory
