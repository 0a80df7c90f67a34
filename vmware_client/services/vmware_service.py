"""
Async client facade for the VMware as a Service API.

One coroutine per operation. Each takes the operation's options record and
returns an ``OperationResult`` triple ``(result, response, error)``:

  - success:          (model or None for an empty body, response, None)
  - validation error: (None, None, ValidationException), no request is sent
  - service error:    (None, response, ServiceException subclass)
  - transport error:  (None, None, TransportException subclass)
  - decode error:     (None, response, DecodeException)

``asyncio.CancelledError`` is never captured; it propagates to the caller.

Usage:
    async with VmwareService.from_settings() as service:
        sites, response, err = await service.list_director_sites(
            ListDirectorSitesOptions())
"""

import time
from typing import Any, Generic, NamedTuple, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from vmware_client.config import Settings, get_settings
from vmware_client.core.exceptions import (
    AuthenticationException,
    ClientException,
    DecodeException,
    NotFoundException,
    RateLimitException,
    ServiceException,
    ValidationException,
)
from vmware_client.core.logging import get_logger
from vmware_client.schemas import (
    OIDC,
    PVDC,
    VDC,
    Cluster,
    ClusterCollection,
    ClusterSummary,
    CreateDirectorSitesOptions,
    CreateDirectorSitesPvdcsClustersOptions,
    CreateDirectorSitesPvdcsOptions,
    CreateVdcOptions,
    DeleteDirectorSiteOptions,
    DeleteDirectorSitesPvdcsClusterOptions,
    DeleteVdcOptions,
    DirectorSite,
    DirectorSiteCollection,
    DirectorSiteHostProfileCollection,
    DirectorSitePriceQuoteResponse,
    DirectorSitePricingInfo,
    DirectorSiteRegionCollection,
    GetDirectorInstancesPvdcsClusterOptions,
    GetDirectorSiteOptions,
    GetDirectorSitesPvdcsOptions,
    GetOidcConfigurationOptions,
    GetVcddPriceOptions,
    GetVdcOptions,
    ListDirectorSiteHostProfilesOptions,
    ListDirectorSiteRegionsOptions,
    ListDirectorSitesOptions,
    ListDirectorSitesPvdcsClustersOptions,
    ListDirectorSitesPvdcsOptions,
    ListMultitenantDirectorSitesOptions,
    ListPricesOptions,
    ListVdcsOptions,
    MultitenantDirectorSiteCollection,
    NewPassword,
    PVDCCollection,
    ReplaceOrgAdminPasswordOptions,
    SetOidcConfigurationOptions,
    UpdateCluster,
    UpdateDirectorSitesPvdcsClusterOptions,
    UpdateVdcOptions,
    VDCCollection,
)
from vmware_client.services.auth import (
    Authenticator,
    BearerTokenAuthenticator,
    IAMAuthenticator,
    NoAuthAuthenticator,
)
from vmware_client.services.transport import DetailedResponse, HTTPTransport
from vmware_client.utils.helpers import render_path, safe_get

logger = get_logger(__name__)

DEFAULT_SERVICE_URL = "https://api.us-south.vmware.cloud.ibm.com/v1"
PARAMETERIZED_SERVICE_URL = "https://api.{region}.vmware.cloud.ibm.com/v1"
DEFAULT_API_VERSION = "2024-05-01"
DEFAULT_USER_AGENT = "vmware-client/1.0.0"

# Query parameter carrying the API version date on every request.
VERSION_PARAM = "Version"

_JSON = "application/json"
_MERGE_PATCH_JSON = "application/merge-patch+json"

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


def get_service_url_for_region(region: str) -> str:
    """
    Return the service URL for a region, e.g. ``eu-de``.

    Raises:
        ValueError: if region is empty.
    """
    if not region:
        raise ValueError("region must not be empty.")
    return PARAMETERIZED_SERVICE_URL.replace("{region}", region)


class OperationResult(NamedTuple, Generic[T]):
    """Outcome of one operation; unpack as ``result, response, error``."""

    result: T | None
    response: DetailedResponse | None
    error: ClientException | None

    def unwrap(self) -> T | None:
        """Return the result, or raise the captured error."""
        if self.error is not None:
            raise self.error
        return self.result


def _service_error(response: DetailedResponse) -> ServiceException:
    """Map a non-2xx response onto the ServiceException family."""
    try:
        payload = response.json()
    except ValueError:
        payload = None

    status = response.status_code
    code = safe_get(payload, "errors", 0, "code")
    message = (
        safe_get(payload, "errors", 0, "message")
        or f"The VMware service returned HTTP {status}."
    )
    details: dict[str, Any] = {}
    more_info = safe_get(payload, "errors", 0, "more_info")
    if more_info:
        details["more_info"] = more_info
    trace = safe_get(payload, "trace")
    if trace:
        details["trace"] = trace
    if payload is None and response.text:
        details["body"] = response.text[:500]

    if status in (401, 403):
        error_cls: type[ServiceException] = AuthenticationException
    elif status == 404:
        error_cls = NotFoundException
    elif status == 429:
        error_cls = RateLimitException
    else:
        error_cls = ServiceException

    kwargs: dict[str, Any] = {}
    if code:
        kwargs["error_code"] = code
    return error_cls(
        message=message,
        status_code=status,
        details=details,
        response=response,
        **kwargs,
    )


class VmwareService:
    """
    Client for the VMware as a Service API.

    The service holds no per-call state, so one instance can serve
    concurrent calls.
    """

    def __init__(
        self,
        service_url: str = DEFAULT_SERVICE_URL,
        authenticator: Authenticator | None = None,
        http_client: httpx.AsyncClient | None = None,
        version: str = DEFAULT_API_VERSION,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.set_service_url(service_url)
        self.authenticator = authenticator or NoAuthAuthenticator()
        self.version = version
        self.user_agent = user_agent
        self._transport = HTTPTransport(http_client, timeout=timeout)
        self._default_headers: dict[str, str] = {}

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> "VmwareService":
        """
        Build a service from application settings.

        Uses IAM when an API key is configured, otherwise a bearer token,
        otherwise no authentication.
        """
        settings = settings or get_settings()
        authenticator: Authenticator
        if settings.iam_apikey:
            authenticator = IAMAuthenticator(
                settings.iam_apikey,
                url=settings.iam_url,
                http_client=http_client,
                timeout=settings.request_timeout,
            )
        elif settings.bearer_token:
            authenticator = BearerTokenAuthenticator(settings.bearer_token)
        else:
            authenticator = NoAuthAuthenticator()
        return cls(
            service_url=settings.service_url,
            authenticator=authenticator,
            http_client=http_client,
            version=settings.api_version,
            timeout=settings.request_timeout,
            user_agent=settings.user_agent,
        )

    # ── Configuration ─────────────────────────────────────────────────

    @property
    def service_url(self) -> str:
        return self._service_url

    def set_service_url(self, url: str) -> None:
        if not url:
            raise ValueError("service_url must not be empty.")
        self._service_url = url.rstrip("/")

    def set_default_headers(self, headers: dict[str, str]) -> None:
        """Headers sent with every request; per-call headers take precedence."""
        self._default_headers = dict(headers)

    async def close(self) -> None:
        await self._transport.aclose()
        if isinstance(self.authenticator, IAMAuthenticator):
            await self.authenticator.aclose()

    async def __aenter__(self) -> "VmwareService":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    # ── Dispatch ──────────────────────────────────────────────────────

    async def _invoke(
        self,
        operation: str,
        method: str,
        path: str,
        options: Any,
        model: type[M],
        content_type: str | None = None,
    ) -> OperationResult[M]:
        """
        Validate, send and decode one operation.

        A request body is sent only when ``content_type`` is given.
        """
        try:
            options.check_required()
        except ValidationException as exc:
            logger.warning(
                "Invalid options",
                extra={"operation": operation, "missing": exc.details.get("missing")},
            )
            return OperationResult(None, None, exc)

        rendered_path = render_path(path, options.path_params())
        url = f"{self._service_url}{rendered_path}"

        headers = dict(self._default_headers)
        headers.update(options.request_headers())
        headers["Accept"] = _JSON
        headers["User-Agent"] = self.user_agent
        body = None
        if content_type is not None:
            headers["Content-Type"] = content_type
            body = options.request_body()

        started = time.perf_counter()
        try:
            await self.authenticator.authenticate(headers)
            response = await self._transport.request(
                method, url,
                headers=headers,
                params={VERSION_PARAM: self.version, **options.query_params()},
                body=body,
            )
        except ClientException as exc:
            logger.error(
                "Request failed",
                extra={
                    "operation": operation,
                    "method": method,
                    "path": rendered_path,
                    "error_code": exc.error_code,
                },
            )
            return OperationResult(None, exc.response, exc)

        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.info(
            "Request completed",
            extra={
                "operation": operation,
                "method": method,
                "path": rendered_path,
                "status": response.status_code,
                "duration_ms": duration_ms,
            },
        )

        if not 200 <= response.status_code < 300:
            return OperationResult(None, response, _service_error(response))

        if not response.text.strip():
            return OperationResult(None, response, None)

        try:
            result = model.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            error = DecodeException(
                message=f"Failed to decode {model.__name__} from the response.",
                status_code=response.status_code,
                details={"operation": operation, "error": str(exc)},
                response=response,
            )
            return OperationResult(None, response, error)

        response.result = result
        return OperationResult(result, response, None)

    # ── Director sites ────────────────────────────────────────────────

    async def list_director_sites(
        self, options: ListDirectorSitesOptions,
    ) -> OperationResult[DirectorSiteCollection]:
        """GET /director_sites"""
        return await self._invoke(
            "list_director_sites", "GET", "/director_sites",
            options, DirectorSiteCollection)

    async def create_director_sites(
        self, options: CreateDirectorSitesOptions,
    ) -> OperationResult[DirectorSite]:
        """
        POST /director_sites

        Orders a director site with its PVDCs and clusters. Accepts both the
        prototype and the legacy order-info shapes.
        """
        return await self._invoke(
            "create_director_sites", "POST", "/director_sites",
            options, DirectorSite, content_type=_JSON)

    async def get_director_site(
        self, options: GetDirectorSiteOptions,
    ) -> OperationResult[DirectorSite]:
        """GET /director_sites/{id}"""
        return await self._invoke(
            "get_director_site", "GET", "/director_sites/{id}",
            options, DirectorSite)

    async def delete_director_site(
        self, options: DeleteDirectorSiteOptions,
    ) -> OperationResult[DirectorSite]:
        """DELETE /director_sites/{id}"""
        return await self._invoke(
            "delete_director_site", "DELETE", "/director_sites/{id}",
            options, DirectorSite)

    # ── Provider VDCs ─────────────────────────────────────────────────

    async def list_director_sites_pvdcs(
        self, options: ListDirectorSitesPvdcsOptions,
    ) -> OperationResult[PVDCCollection]:
        """GET /director_sites/{site_id}/pvdcs"""
        return await self._invoke(
            "list_director_sites_pvdcs", "GET",
            "/director_sites/{site_id}/pvdcs",
            options, PVDCCollection)

    async def create_director_sites_pvdcs(
        self, options: CreateDirectorSitesPvdcsOptions,
    ) -> OperationResult[PVDC]:
        """POST /director_sites/{site_id}/pvdcs"""
        return await self._invoke(
            "create_director_sites_pvdcs", "POST",
            "/director_sites/{site_id}/pvdcs",
            options, PVDC, content_type=_JSON)

    async def get_director_sites_pvdcs(
        self, options: GetDirectorSitesPvdcsOptions,
    ) -> OperationResult[PVDC]:
        """GET /director_sites/{site_id}/pvdcs/{id}"""
        return await self._invoke(
            "get_director_sites_pvdcs", "GET",
            "/director_sites/{site_id}/pvdcs/{id}",
            options, PVDC)

    # ── Clusters ──────────────────────────────────────────────────────

    async def list_director_sites_pvdcs_clusters(
        self, options: ListDirectorSitesPvdcsClustersOptions,
    ) -> OperationResult[ClusterCollection]:
        """GET /director_sites/{site_id}/pvdcs/{pvdc_id}/clusters"""
        return await self._invoke(
            "list_director_sites_pvdcs_clusters", "GET",
            "/director_sites/{site_id}/pvdcs/{pvdc_id}/clusters",
            options, ClusterCollection)

    async def create_director_sites_pvdcs_clusters(
        self, options: CreateDirectorSitesPvdcsClustersOptions,
    ) -> OperationResult[Cluster]:
        """POST /director_sites/{site_id}/pvdcs/{pvdc_id}/clusters"""
        return await self._invoke(
            "create_director_sites_pvdcs_clusters", "POST",
            "/director_sites/{site_id}/pvdcs/{pvdc_id}/clusters",
            options, Cluster, content_type=_JSON)

    async def get_director_instances_pvdcs_cluster(
        self, options: GetDirectorInstancesPvdcsClusterOptions,
    ) -> OperationResult[Cluster]:
        """GET /director_sites/{site_id}/pvdcs/{pvdc_id}/clusters/{id}"""
        return await self._invoke(
            "get_director_instances_pvdcs_cluster", "GET",
            "/director_sites/{site_id}/pvdcs/{pvdc_id}/clusters/{id}",
            options, Cluster)

    async def delete_director_sites_pvdcs_cluster(
        self, options: DeleteDirectorSitesPvdcsClusterOptions,
    ) -> OperationResult[ClusterSummary]:
        """DELETE /director_sites/{site_id}/pvdcs/{pvdc_id}/clusters/{id}"""
        return await self._invoke(
            "delete_director_sites_pvdcs_cluster", "DELETE",
            "/director_sites/{site_id}/pvdcs/{pvdc_id}/clusters/{id}",
            options, ClusterSummary)

    async def update_director_sites_pvdcs_cluster(
        self, options: UpdateDirectorSitesPvdcsClusterOptions,
    ) -> OperationResult[UpdateCluster]:
        """PATCH /director_sites/{site_id}/pvdcs/{pvdc_id}/clusters/{id} (merge patch)"""
        return await self._invoke(
            "update_director_sites_pvdcs_cluster", "PATCH",
            "/director_sites/{site_id}/pvdcs/{pvdc_id}/clusters/{id}",
            options, UpdateCluster, content_type=_MERGE_PATCH_JSON)

    # ── Catalog ───────────────────────────────────────────────────────

    async def list_director_site_regions(
        self, options: ListDirectorSiteRegionsOptions,
    ) -> OperationResult[DirectorSiteRegionCollection]:
        """GET /director_site_regions"""
        return await self._invoke(
            "list_director_site_regions", "GET", "/director_site_regions",
            options, DirectorSiteRegionCollection)

    async def list_director_site_host_profiles(
        self, options: ListDirectorSiteHostProfilesOptions,
    ) -> OperationResult[DirectorSiteHostProfileCollection]:
        """GET /director_site_host_profiles"""
        return await self._invoke(
            "list_director_site_host_profiles", "GET",
            "/director_site_host_profiles",
            options, DirectorSiteHostProfileCollection)

    async def list_multitenant_director_sites(
        self, options: ListMultitenantDirectorSitesOptions,
    ) -> OperationResult[MultitenantDirectorSiteCollection]:
        """GET /multitenant_director_sites"""
        return await self._invoke(
            "list_multitenant_director_sites", "GET",
            "/multitenant_director_sites",
            options, MultitenantDirectorSiteCollection)

    # ── Pricing & admin password ──────────────────────────────────────

    async def list_prices(
        self, options: ListPricesOptions,
    ) -> OperationResult[DirectorSitePricingInfo]:
        """GET /director_site_pricing"""
        return await self._invoke(
            "list_prices", "GET", "/director_site_pricing",
            options, DirectorSitePricingInfo)

    async def get_vcdd_price(
        self, options: GetVcddPriceOptions,
    ) -> OperationResult[DirectorSitePriceQuoteResponse]:
        """POST /director_site_price_quote"""
        return await self._invoke(
            "get_vcdd_price", "POST", "/director_site_price_quote",
            options, DirectorSitePriceQuoteResponse, content_type=_JSON)

    async def replace_org_admin_password(
        self, options: ReplaceOrgAdminPasswordOptions,
    ) -> OperationResult[NewPassword]:
        """
        PUT /director_site_password?site_id=...

        Generates a new Cloud Director organization admin password.
        """
        return await self._invoke(
            "replace_org_admin_password", "PUT", "/director_site_password",
            options, NewPassword)

    # ── OIDC ──────────────────────────────────────────────────────────

    async def get_oidc_configuration(
        self, options: GetOidcConfigurationOptions,
    ) -> OperationResult[OIDC]:
        """GET /director_sites/{site_id}/oidc_configuration"""
        return await self._invoke(
            "get_oidc_configuration", "GET",
            "/director_sites/{site_id}/oidc_configuration",
            options, OIDC)

    async def set_oidc_configuration(
        self, options: SetOidcConfigurationOptions,
    ) -> OperationResult[OIDC]:
        """
        PUT /director_sites/{site_id}/oidc_configuration

        Starts OIDC federation with IBM Cloud IAM. The request has no body;
        the service answers 202 while the configuration is applied.
        """
        return await self._invoke(
            "set_oidc_configuration", "PUT",
            "/director_sites/{site_id}/oidc_configuration",
            options, OIDC)

    # ── VDCs ──────────────────────────────────────────────────────────

    async def list_vdcs(
        self, options: ListVdcsOptions,
    ) -> OperationResult[VDCCollection]:
        """GET /vdcs"""
        return await self._invoke(
            "list_vdcs", "GET", "/vdcs", options, VDCCollection)

    async def create_vdc(
        self, options: CreateVdcOptions,
    ) -> OperationResult[VDC]:
        """POST /vdcs"""
        return await self._invoke(
            "create_vdc", "POST", "/vdcs", options, VDC, content_type=_JSON)

    async def get_vdc(
        self, options: GetVdcOptions,
    ) -> OperationResult[VDC]:
        """GET /vdcs/{id}"""
        return await self._invoke(
            "get_vdc", "GET", "/vdcs/{id}", options, VDC)

    async def update_vdc(
        self, options: UpdateVdcOptions,
    ) -> OperationResult[VDC]:
        """PATCH /vdcs/{id} (merge patch)"""
        return await self._invoke(
            "update_vdc", "PATCH", "/vdcs/{id}",
            options, VDC, content_type=_MERGE_PATCH_JSON)

    async def delete_vdc(
        self, options: DeleteVdcOptions,
    ) -> OperationResult[VDC]:
        """DELETE /vdcs/{id}"""
        return await self._invoke(
            "delete_vdc", "DELETE", "/vdcs/{id}", options, VDC)
