"""
Tests for the request authenticators.
"""

import asyncio
from urllib.parse import parse_qs

import httpx
import pytest

from vmware_client.core.exceptions import AuthenticationException, ServiceException
from vmware_client.schemas import ListVdcsOptions
from vmware_client.services.auth import (
    BearerTokenAuthenticator,
    IAMAuthenticator,
    NoAuthAuthenticator,
)
from vmware_client.services.vmware_service import VmwareService

IAM_URL = "https://iam.test"


def _iam_handler(token_requests: list[httpx.Request], expires_in: int = 3600):
    async def _handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/identity/token":
            token_requests.append(request)
            # Give concurrent callers a chance to pile up on the lock.
            await asyncio.sleep(0)
            return httpx.Response(200, json={
                "access_token": f"token-{len(token_requests)}",
                "token_type": "Bearer",
                "expires_in": expires_in,
            })
        return httpx.Response(200, json={
            "vdcs": [],
            "seen_authorization": request.headers.get("Authorization"),
        })
    return _handler


@pytest.mark.asyncio
async def test_iam_token_is_exchanged_once_and_reused() -> None:
    token_requests: list[httpx.Request] = []
    transport = httpx.MockTransport(_iam_handler(token_requests))
    async with httpx.AsyncClient(transport=transport) as hc:
        service = VmwareService(
            authenticator=IAMAuthenticator("my-apikey", url=IAM_URL, http_client=hc),
            http_client=hc,
        )

        first, _, _ = await service.list_vdcs(ListVdcsOptions())
        second, _, _ = await service.list_vdcs(ListVdcsOptions())

    assert len(token_requests) == 1
    assert first.model_extra["seen_authorization"] == "Bearer token-1"
    assert second.model_extra["seen_authorization"] == "Bearer token-1"

    form = parse_qs(token_requests[0].content.decode())
    assert form["grant_type"] == ["urn:ibm:params:oauth:grant-type:apikey"]
    assert form["apikey"] == ["my-apikey"]


@pytest.mark.asyncio
async def test_concurrent_calls_share_one_exchange() -> None:
    token_requests: list[httpx.Request] = []
    transport = httpx.MockTransport(_iam_handler(token_requests))
    async with httpx.AsyncClient(transport=transport) as hc:
        service = VmwareService(
            authenticator=IAMAuthenticator("my-apikey", url=IAM_URL, http_client=hc),
            http_client=hc,
        )

        results = await asyncio.gather(
            *(service.list_vdcs(ListVdcsOptions()) for _ in range(5)))

    assert len(token_requests) == 1
    assert all(err is None for _, _, err in results)


@pytest.mark.asyncio
async def test_token_close_to_expiry_is_refreshed() -> None:
    token_requests: list[httpx.Request] = []
    # Inside the 60 s refresh buffer, so never considered valid.
    transport = httpx.MockTransport(_iam_handler(token_requests, expires_in=30))
    async with httpx.AsyncClient(transport=transport) as hc:
        authenticator = IAMAuthenticator("my-apikey", url=IAM_URL, http_client=hc)

        assert await authenticator.get_token() == "token-1"
        assert await authenticator.get_token() == "token-2"


@pytest.mark.asyncio
async def test_invalidated_token_is_exchanged_again() -> None:
    token_requests: list[httpx.Request] = []
    transport = httpx.MockTransport(_iam_handler(token_requests))
    async with httpx.AsyncClient(transport=transport) as hc:
        authenticator = IAMAuthenticator("my-apikey", url=IAM_URL, http_client=hc)

        await authenticator.get_token()
        authenticator.invalidate_token()
        token = await authenticator.get_token()

    assert token == "token-2"


@pytest.mark.asyncio
async def test_rejected_apikey_is_returned_without_calling_service() -> None:
    service_requests: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/identity/token":
            return httpx.Response(400, json={"errorCode": "BXNIM0415E"})
        service_requests.append(request)
        return httpx.Response(200, json={"vdcs": []})

    transport = httpx.MockTransport(_handler)
    async with httpx.AsyncClient(transport=transport) as hc:
        service = VmwareService(
            authenticator=IAMAuthenticator("bad-key", url=IAM_URL, http_client=hc),
            http_client=hc,
        )
        result, _, err = await service.list_vdcs(ListVdcsOptions())

    assert result is None
    assert isinstance(err, AuthenticationException)
    assert err.status_code == 400
    assert service_requests == []


@pytest.mark.asyncio
async def test_iam_server_error_raises_service_exception() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(503))
    async with httpx.AsyncClient(transport=transport) as hc:
        authenticator = IAMAuthenticator("my-apikey", url=IAM_URL, http_client=hc)

        with pytest.raises(ServiceException) as exc_info:
            await authenticator.get_token()

    assert exc_info.value.status_code == 503


@pytest.mark.asyncio
async def test_iam_response_without_token() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={}))
    async with httpx.AsyncClient(transport=transport) as hc:
        authenticator = IAMAuthenticator("my-apikey", url=IAM_URL, http_client=hc)

        with pytest.raises(AuthenticationException):
            await authenticator.get_token()


@pytest.mark.asyncio
@pytest.mark.parametrize("expires_in", [None, "soon", [3600]])
async def test_iam_response_with_unusable_expiry(expires_in) -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(
        200, json={"access_token": "t", "expires_in": expires_in}))
    async with httpx.AsyncClient(transport=transport) as hc:
        authenticator = IAMAuthenticator("my-apikey", url=IAM_URL, http_client=hc)

        with pytest.raises(AuthenticationException) as exc_info:
            await authenticator.get_token()

    assert exc_info.value.response is not None
    assert exc_info.value.response.status_code == 200
    # Nothing half-cached: the next call exchanges again.
    assert authenticator._token is None


@pytest.mark.asyncio
async def test_unusable_expiry_is_returned_as_error_triple() -> None:
    service_requests: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/identity/token":
            return httpx.Response(200, json={"access_token": "t", "expires_in": None})
        service_requests.append(request)
        return httpx.Response(200, json={"vdcs": []})

    transport = httpx.MockTransport(_handler)
    async with httpx.AsyncClient(transport=transport) as hc:
        service = VmwareService(
            authenticator=IAMAuthenticator("my-apikey", url=IAM_URL, http_client=hc),
            http_client=hc,
        )
        result, response, err = await service.list_vdcs(ListVdcsOptions())

    assert result is None
    assert isinstance(err, AuthenticationException)
    assert response is err.response
    assert service_requests == []


@pytest.mark.asyncio
async def test_bearer_and_no_auth_headers() -> None:
    headers: dict[str, str] = {}
    await BearerTokenAuthenticator("abc").authenticate(headers)
    assert headers == {"Authorization": "Bearer abc"}

    headers = {}
    await NoAuthAuthenticator().authenticate(headers)
    assert headers == {}


def test_empty_credentials_are_rejected() -> None:
    with pytest.raises(ValueError):
        BearerTokenAuthenticator("")
    with pytest.raises(ValueError):
        IAMAuthenticator("")
