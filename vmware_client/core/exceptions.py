"""
Custom exception hierarchy for the client.

All client-specific exceptions inherit from ClientException, so callers can
inspect any failure the same way: a message, the HTTP status (when a
response was received), a machine-readable error code, extra details and
the raw response.

Hierarchy:
    ClientException
    ├── ValidationException          — A required option was not set (no I/O)
    ├── TransportException           — Request could not be sent / read
    │   ├── TransportTimeoutException
    │   └── TransportConnectionException
    ├── ServiceException             — Server answered with a non-2xx status
    │   ├── AuthenticationException  — 401 / 403, or IAM token exchange rejected
    │   ├── NotFoundException        — 404
    │   └── RateLimitException       — 429
    └── DecodeException              — 2xx body did not match the model

Cancellation is not part of this hierarchy: ``asyncio.CancelledError``
propagates unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from vmware_client.services.transport import DetailedResponse


class ClientException(Exception):
    """
    Base exception for all client errors.

    Attributes:
        message:     Human-readable error description.
        status_code: HTTP status code of the response, or None when no
                     response was received.
        error_code:  Machine-readable error identifier (e.g. "TRANSPORT_TIMEOUT").
        details:     Optional dict with extra context for debugging.
        response:    The raw response, when one was received.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred.",
        status_code: int | None = None,
        error_code: str = "CLIENT_ERROR",
        details: dict[str, Any] | None = None,
        response: DetailedResponse | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        self.response = response
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the exception into a JSON-friendly dict."""
        payload: dict[str, Any] = {
            "error": True,
            "error_code": self.error_code,
            "message": self.message,
        }
        if self.status_code is not None:
            payload["status_code"] = self.status_code
        if self.details:
            payload["details"] = self.details
        return payload


# ─── Validation Errors ───────────────────────────────────────────────


class ValidationException(ClientException):
    """Raised when an options record is missing a required field."""

    def __init__(
        self,
        message: str = "Validation error.",
        error_code: str = "VALIDATION_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, None, error_code, details)


# ─── Transport Errors ────────────────────────────────────────────────


class TransportException(ClientException):
    """Raised when the request could not be sent or the response not read."""

    def __init__(
        self,
        message: str = "Failed to reach the VMware service.",
        error_code: str = "TRANSPORT_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, None, error_code, details)


class TransportTimeoutException(TransportException):
    """Raised when the request times out."""

    def __init__(
        self,
        message: str = "Request to the VMware service timed out.",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="TRANSPORT_TIMEOUT",
            details=details,
        )


class TransportConnectionException(TransportException):
    """Raised when unable to establish a connection to the service."""

    def __init__(
        self,
        message: str = "Unable to connect to the VMware service.",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="TRANSPORT_CONNECTION_ERROR",
            details=details,
        )


# ─── Service Errors ──────────────────────────────────────────────────


class ServiceException(ClientException):
    """Raised when the service returns a non-2xx status."""

    def __init__(
        self,
        message: str = "The VMware service returned an error.",
        status_code: int | None = None,
        error_code: str = "SERVICE_ERROR",
        details: dict[str, Any] | None = None,
        response: DetailedResponse | None = None,
    ) -> None:
        super().__init__(message, status_code, error_code, details, response)


class AuthenticationException(ServiceException):
    """Raised on authentication or authorization failures."""

    def __init__(
        self,
        message: str = "Authentication failed.",
        status_code: int | None = 401,
        error_code: str = "AUTH_ERROR",
        details: dict[str, Any] | None = None,
        response: DetailedResponse | None = None,
    ) -> None:
        super().__init__(message, status_code, error_code, details, response)


class NotFoundException(ServiceException):
    """Raised when the requested resource does not exist."""

    def __init__(
        self,
        message: str = "Resource not found.",
        status_code: int | None = 404,
        error_code: str = "NOT_FOUND",
        details: dict[str, Any] | None = None,
        response: DetailedResponse | None = None,
    ) -> None:
        super().__init__(message, status_code, error_code, details, response)


class RateLimitException(ServiceException):
    """Raised when the service rejects a request for exceeding a rate limit."""

    def __init__(
        self,
        message: str = "Rate limit exceeded. Please retry later.",
        status_code: int | None = 429,
        error_code: str = "RATE_LIMIT_EXCEEDED",
        details: dict[str, Any] | None = None,
        response: DetailedResponse | None = None,
    ) -> None:
        super().__init__(message, status_code, error_code, details, response)


# ─── Decode Errors ───────────────────────────────────────────────────


class DecodeException(ClientException):
    """Raised when a successful response body does not match the expected model."""

    def __init__(
        self,
        message: str = "Failed to decode the response body.",
        status_code: int | None = None,
        error_code: str = "DECODE_ERROR",
        details: dict[str, Any] | None = None,
        response: DetailedResponse | None = None,
    ) -> None:
        super().__init__(message, status_code, error_code, details, response)
