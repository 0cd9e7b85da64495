"""
Pytest configuration and fixtures for mooring tests.
"""

from typing import Callable

import httpx
import pytest

from mooring.backends.httpx import HTTPXTargetBackend

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def sent_requests() -> list[httpx.Request]:
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def make_backend(
    sent_requests: list[httpx.Request],
) -> Callable[[Handler], HTTPXTargetBackend]:
    """Build a backend whose client answers through `handler` instead of the network."""

    def factory(handler: Handler) -> HTTPXTargetBackend:

        def recording_handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        return HTTPXTargetBackend(client=client)

    return factory
