"""
HTTP transport for the VMware as a Service API.

A thin layer over ``httpx.AsyncClient`` that sends one request, maps
transport-level failures onto the client exception hierarchy and hands back
a ``DetailedResponse`` whatever the status code. Status interpretation and
body decoding belong to the service facade.
"""

import json
from collections.abc import Mapping
from typing import Any

import httpx

from vmware_client.core.exceptions import (
    TransportConnectionException,
    TransportException,
    TransportTimeoutException,
)
from vmware_client.core.logging import get_logger

logger = get_logger(__name__)


# ── Response container ────────────────────────────────────────────────

class DetailedResponse:
    """Raw HTTP response: status, headers, body text and the decoded result."""

    __slots__ = ("status_code", "headers", "text", "result")

    def __init__(
        self,
        status_code: int,
        headers: Mapping[str, str],
        text: str,
        result: Any = None,
    ) -> None:
        self.status_code = status_code
        self.headers = headers
        self.text = text
        self.result = result

    def json(self) -> Any:
        return json.loads(self.text)

    def __repr__(self) -> str:
        return f"DetailedResponse(status_code={self.status_code})"


# ── Transport ─────────────────────────────────────────────────────────

class HTTPTransport:
    """
    Sends requests through an ``httpx.AsyncClient``.

    A client passed in is borrowed and never closed here; without one the
    transport creates its own on first use and closes it in ``aclose()``.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._client = http_client
        self._owns_client = http_client is None
        self._timeout = timeout

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self._timeout))
        return self._client

    async def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
        body: Any = None,
        form: dict[str, str] | None = None,
    ) -> DetailedResponse:
        """
        Send a single request and return the response, whatever its status.

        ``body`` is JSON-encoded when not None; the caller sets Content-Type.
        ``form`` is sent form-encoded instead.

        Raises:
            TransportTimeoutException:    the request timed out.
            TransportConnectionException: the connection could not be made.
            TransportException:           any other failure to send or read.
        """
        content = json.dumps(body) if body is not None else None
        try:
            response = await self._get_client().request(
                method.upper(),
                url,
                headers=headers,
                params=params,
                content=content,
                data=form,
            )
        except httpx.TimeoutException as exc:
            raise TransportTimeoutException(
                message=f"Request to {url} timed out.",
                details={"endpoint": url, "error": str(exc)},
            ) from exc
        except httpx.ConnectError as exc:
            raise TransportConnectionException(
                details={"endpoint": url, "error": str(exc)},
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportException(
                message=f"{method.upper()} {url} failed: {type(exc).__name__}.",
                details={"endpoint": url, "error": str(exc)},
            ) from exc

        return DetailedResponse(
            status_code=response.status_code,
            headers=response.headers,
            text=response.text,
        )

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
