# tests/conftest.py
import os

# auth.py refuses to import without a key.
os.environ.setdefault("API_KEY", "test-key")

import httpx
import pytest

from services.usps import USPSClient


@pytest.fixture
def usps_responder():
    """Build a USPS client factory whose HTTP traffic is served by *handler*.

    Every request the client sends is recorded on ``factory.requests``.
    """
    def make(handler):
        requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        def factory(**kwargs):
            return USPSClient(transport=httpx.MockTransport(record), **kwargs)

        factory.requests = requests
        return factory

    return make
