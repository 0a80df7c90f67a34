from vmware_client.core.exceptions import (
    ClientException,
    ValidationException,
    TransportException,
    TransportTimeoutException,
    TransportConnectionException,
    ServiceException,
    AuthenticationException,
    NotFoundException,
    RateLimitException,
    DecodeException,
)
from vmware_client.core.logging import setup_logging, get_logger

__all__ = [
    "ClientException",
    "ValidationException",
    "TransportException",
    "TransportTimeoutException",
    "TransportConnectionException",
    "ServiceException",
    "AuthenticationException",
    "NotFoundException",
    "RateLimitException",
    "DecodeException",
    "setup_logging",
    "get_logger",
]
