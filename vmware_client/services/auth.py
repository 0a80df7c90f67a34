"""
Request authenticators.

Each authenticator adds credentials to the outgoing headers of a request:

  - ``NoAuthAuthenticator``     — adds nothing (tests, local mocks).
  - ``BearerTokenAuthenticator`` — a token acquired out-of-band.
  - ``IAMAuthenticator``         — exchanges an IBM Cloud API key for an
    access token and caches it until shortly before it expires.

Tokens and API keys are never logged.
"""

import asyncio
from datetime import datetime, timedelta

import httpx

from vmware_client.core.exceptions import (
    AuthenticationException,
    ServiceException,
)
from vmware_client.core.logging import get_logger
from vmware_client.services.transport import HTTPTransport
from vmware_client.utils.helpers import safe_get, utc_now

logger = get_logger(__name__)

_IAM_TOKEN_PATH = "/identity/token"
_IAM_GRANT_TYPE = "urn:ibm:params:oauth:grant-type:apikey"


class Authenticator:
    """Base authenticator: adds nothing."""

    async def authenticate(self, headers: dict[str, str]) -> None:
        """Add credentials to ``headers`` in place."""


class NoAuthAuthenticator(Authenticator):
    pass


class BearerTokenAuthenticator(Authenticator):
    """Sends a fixed bearer token acquired out-of-band."""

    def __init__(self, bearer_token: str) -> None:
        if not bearer_token:
            raise ValueError("bearer_token must not be empty.")
        self.bearer_token = bearer_token

    async def authenticate(self, headers: dict[str, str]) -> None:
        headers["Authorization"] = f"Bearer {self.bearer_token}"


class IAMAuthenticator(Authenticator):
    """
    Exchanges an API key for an IAM access token.

    The token is cached and reused until ``_TOKEN_EXPIRY_BUFFER`` before it
    expires. Concurrent callers share a single exchange.
    """

    # Refresh 60 s before actual expiry to avoid races
    _TOKEN_EXPIRY_BUFFER = timedelta(seconds=60)

    def __init__(
        self,
        apikey: str,
        url: str = "https://iam.cloud.ibm.com",
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        if not apikey:
            raise ValueError("apikey must not be empty.")
        self._apikey = apikey
        self.url = url.rstrip("/")
        self._transport = HTTPTransport(http_client, timeout=timeout)
        self._token: str | None = None
        self._token_expires_at: datetime | None = None
        self._lock = asyncio.Lock()

    def _is_token_valid(self) -> bool:
        """Return True if a non-expired token is cached."""
        if not self._token or self._token_expires_at is None:
            return False
        return utc_now() < self._token_expires_at - self._TOKEN_EXPIRY_BUFFER

    def invalidate_token(self) -> None:
        self._token = None
        self._token_expires_at = None

    async def authenticate(self, headers: dict[str, str]) -> None:
        token = await self.get_token()
        headers["Authorization"] = f"Bearer {token}"

    async def get_token(self) -> str:
        """Return a valid access token, exchanging the API key if needed."""
        if self._is_token_valid():
            assert self._token is not None
            return self._token
        async with self._lock:
            # Another task may have refreshed while we waited.
            if not self._is_token_valid():
                await self._request_token()
            assert self._token is not None
            return self._token

    async def _request_token(self) -> None:
        """
        POST {iam_url}/identity/token with the API key grant.

        Raises:
            AuthenticationException: IAM rejected the key, sent no token or
                                     an unusable expiry.
            ServiceException:        IAM answered with another error status.
        """
        url = f"{self.url}{_IAM_TOKEN_PATH}"
        logger.info("Requesting IAM access token", extra={"url": url})

        response = await self._transport.request(
            "POST", url,
            headers={"Accept": "application/json"},
            form={"grant_type": _IAM_GRANT_TYPE, "apikey": self._apikey},
        )

        status = response.status_code
        if status in (400, 401, 403):
            raise AuthenticationException(
                message=f"IAM token request rejected (HTTP {status}).",
                status_code=status,
                details={"url": url},
                response=response,
            )
        if not 200 <= status < 300:
            raise ServiceException(
                message=f"IAM endpoint returned HTTP {status}.",
                status_code=status,
                details={"url": url},
                response=response,
            )

        try:
            payload = response.json()
        except ValueError:
            payload = {}
        token = safe_get(payload, "access_token")
        if not token:
            raise AuthenticationException(
                message="IAM response missing access_token.",
                status_code=status,
                details={"url": url},
                response=response,
            )

        expires_in = safe_get(payload, "expires_in", default=3600)
        try:
            expires_at = utc_now() + timedelta(seconds=int(expires_in))
        except (TypeError, ValueError, OverflowError) as exc:
            raise AuthenticationException(
                message="IAM response has an invalid expires_in.",
                status_code=status,
                details={"url": url, "expires_in": repr(expires_in)},
                response=response,
            ) from exc
        self._token = token
        self._token_expires_at = expires_at
        logger.info(
            "IAM authentication successful",
            extra={"token_expires_at": self._token_expires_at.isoformat()},
        )

    async def aclose(self) -> None:
        await self._transport.aclose()
