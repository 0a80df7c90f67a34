"""
Async Python client for the IBM Cloud VMware as a Service API.
"""

from vmware_client.services.auth import (
    Authenticator,
    BearerTokenAuthenticator,
    IAMAuthenticator,
    NoAuthAuthenticator,
)
from vmware_client.services.transport import DetailedResponse
from vmware_client.services.vmware_service import (
    DEFAULT_API_VERSION,
    DEFAULT_SERVICE_URL,
    PARAMETERIZED_SERVICE_URL,
    OperationResult,
    VmwareService,
    get_service_url_for_region,
)

__all__ = [
    "VmwareService",
    "OperationResult",
    "DetailedResponse",
    "DEFAULT_SERVICE_URL",
    "PARAMETERIZED_SERVICE_URL",
    "DEFAULT_API_VERSION",
    "get_service_url_for_region",
    "Authenticator",
    "NoAuthAuthenticator",
    "BearerTokenAuthenticator",
    "IAMAuthenticator",
]
