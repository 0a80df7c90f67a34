"""
Pytest configuration & shared fixtures.
"""

from collections.abc import AsyncIterator, Callable

import httpx
import pytest
import pytest_asyncio

from vmware_client.services.auth import BearerTokenAuthenticator
from vmware_client.services.vmware_service import VmwareService

SERVICE_URL = "https://vmware.test/v1"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def sent_requests() -> list[httpx.Request]:
    """Every request that reached the mock transport, in order."""
    return []


@pytest_asyncio.fixture
async def make_service(
    sent_requests: list[httpx.Request],
) -> AsyncIterator[Callable[..., VmwareService]]:
    """
    Factory for a VmwareService backed by httpx.MockTransport.

    Pass ``handler`` for full control, or ``status`` / ``json`` / ``text``
    for a canned response.
    """
    clients: list[httpx.AsyncClient] = []

    def _factory(
        status: int = 200,
        json: object = None,
        text: str | None = None,
        handler: Handler | None = None,
    ) -> VmwareService:
        def _handler(request: httpx.Request):
            sent_requests.append(request)
            if handler is not None:
                return handler(request)
            if text is not None:
                return httpx.Response(status, text=text)
            if json is None:
                return httpx.Response(status)
            return httpx.Response(status, json=json)

        hc = httpx.AsyncClient(transport=httpx.MockTransport(_handler))
        clients.append(hc)
        return VmwareService(
            service_url=SERVICE_URL,
            authenticator=BearerTokenAuthenticator("test-token"),
            http_client=hc,
        )

    yield _factory

    for hc in clients:
        await hc.aclose()
