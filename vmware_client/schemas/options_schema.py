"""
Per-operation options records.

Each record takes the operation's required parameters positionally, in the
documented order, and everything else as keyword arguments. Fields are plain
attributes and may be reassigned until the record is dispatched. Presence of
required fields (and non-empty path parameters) is checked by the service at
dispatch time, before any I/O.

Example:
    options = CreateVdcOptions("sampleVDC", director_site, cpu=4)
    options.ram = 16
    vdc, response, err = await service.create_vdc(options)
"""

from dataclasses import MISSING, fields
from typing import Any, ClassVar

from pydantic.dataclasses import dataclass

from vmware_client.core.exceptions import ValidationException
from vmware_client.schemas.base_schema import VmwareModel
from vmware_client.schemas.director_site_schema import (
    ClusterPatch,
    ClusterPrototype,
    FileSharesPrototype,
    PVDCPrototype,
    ResourceGroupIdentity,
    ServiceIdentity,
)
from vmware_client.schemas.order_info_schema import PVDCOrderInfo
from vmware_client.schemas.vdc_schema import (
    VDCDirectorSitePrototype,
    VDCEdgePrototype,
    VDCPatch,
)


def _to_wire(value: Any) -> Any:
    if isinstance(value, VmwareModel):
        return value.to_dict()
    if isinstance(value, list):
        return [_to_wire(item) for item in value]
    return value


class _RequestOptions:
    """Behaviour shared by every options record."""

    # Fields rendered into the URL template, in template order.
    path_fields: ClassVar[tuple[str, ...]] = ()
    # Fields rendered into the JSON body, in wire order.
    body_fields: ClassVar[tuple[str, ...]] = ()
    # Fields rendered into the query string.
    query_fields: ClassVar[tuple[str, ...]] = ()

    def missing_fields(self) -> list[str]:
        """Names of required fields that are unset (or empty, for path and query fields)."""
        missing = [
            f.name for f in fields(self)
            if f.default is MISSING
            and f.default_factory is MISSING
            and getattr(self, f.name) is None
        ]
        missing += [
            name for name in self.path_fields + self.query_fields
            if getattr(self, name) == "" and name not in missing
        ]
        return missing

    def check_required(self) -> None:
        """Raise ValidationException if any required field is missing."""
        missing = self.missing_fields()
        if missing:
            raise ValidationException(
                message=f"{type(self).__name__} is missing required "
                        f"field(s): {', '.join(missing)}.",
                details={"options": type(self).__name__, "missing": missing},
            )

    def path_params(self) -> dict[str, str]:
        return {name: getattr(self, name) for name in self.path_fields}

    def query_params(self) -> dict[str, str]:
        return {
            name: str(getattr(self, name)) for name in self.query_fields
            if getattr(self, name) is not None
        }

    def request_body(self) -> dict[str, Any]:
        """JSON body built from the set body fields; unset (None) fields are omitted."""
        body: dict[str, Any] = {}
        for name in self.body_fields:
            value = getattr(self, name)
            if value is not None:
                body[name] = _to_wire(value)
        return body

    def request_headers(self) -> dict[str, str]:
        headers = dict(getattr(self, "headers", None) or {})
        accept_language = getattr(self, "accept_language", None)
        if accept_language is not None:
            headers["Accept-Language"] = accept_language
        transaction_id = getattr(self, "x_global_transaction_id", None)
        if transaction_id is not None:
            headers["X-Global-Transaction-ID"] = transaction_id
        return headers


# ── Director sites ─────────────────────────────────────────────────────


@dataclass
class ListDirectorSitesOptions(_RequestOptions):
    accept_language: str | None = None
    x_global_transaction_id: str | None = None
    headers: dict[str, str] | None = None


@dataclass
class CreateDirectorSitesOptions(_RequestOptions):
    """
    Options for creating a director site.

    ``pvdcs`` holds ``PVDCPrototype`` records. The legacy order shape
    (``PVDCOrderInfo`` records plus a mandatory string resource group) is
    built with ``from_order_info``.
    """

    name: str | None
    pvdcs: list[PVDCPrototype] | list[PVDCOrderInfo] | None
    resource_group: ResourceGroupIdentity | str | None = None
    services: list[ServiceIdentity] | None = None
    accept_language: str | None = None
    x_global_transaction_id: str | None = None
    headers: dict[str, str] | None = None

    body_fields: ClassVar[tuple[str, ...]] = (
        "name", "resource_group", "pvdcs", "services")

    @classmethod
    def from_order_info(
        cls,
        name: str | None,
        resource_group: str | None,
        pvdcs: list[PVDCOrderInfo] | None,
    ) -> "CreateDirectorSitesOptions":
        return cls(name, pvdcs, resource_group=resource_group)

    @property
    def is_order_info(self) -> bool:
        return bool(self.pvdcs) and isinstance(self.pvdcs[0], PVDCOrderInfo)

    def missing_fields(self) -> list[str]:
        missing = super().missing_fields()
        # The legacy order shape cannot default the resource group.
        if self.is_order_info and not self.resource_group:
            missing.append("resource_group")
        return missing


@dataclass
class GetDirectorSiteOptions(_RequestOptions):
    id: str | None
    accept_language: str | None = None
    x_global_transaction_id: str | None = None
    headers: dict[str, str] | None = None

    path_fields: ClassVar[tuple[str, ...]] = ("id",)


@dataclass
class DeleteDirectorSiteOptions(_RequestOptions):
    id: str | None
    accept_language: str | None = None
    x_global_transaction_id: str | None = None
    headers: dict[str, str] | None = None

    path_fields: ClassVar[tuple[str, ...]] = ("id",)


# ── Provider VDCs ──────────────────────────────────────────────────────


@dataclass
class ListDirectorSitesPvdcsOptions(_RequestOptions):
    site_id: str | None
    accept_language: str | None = None
    x_global_transaction_id: str | None = None
    headers: dict[str, str] | None = None

    path_fields: ClassVar[tuple[str, ...]] = ("site_id",)


@dataclass
class CreateDirectorSitesPvdcsOptions(_RequestOptions):
    site_id: str | None
    name: str | None
    data_center_name: str | None
    clusters: list[ClusterPrototype] | None
    accept_language: str | None = None
    x_global_transaction_id: str | None = None
    headers: dict[str, str] | None = None

    path_fields: ClassVar[tuple[str, ...]] = ("site_id",)
    body_fields: ClassVar[tuple[str, ...]] = (
        "name", "data_center_name", "clusters")


@dataclass
class GetDirectorSitesPvdcsOptions(_RequestOptions):
    site_id: str | None
    id: str | None
    accept_language: str | None = None
    x_global_transaction_id: str | None = None
    headers: dict[str, str] | None = None

    path_fields: ClassVar[tuple[str, ...]] = ("site_id", "id")


# ── Clusters ───────────────────────────────────────────────────────────


@dataclass
class ListDirectorSitesPvdcsClustersOptions(_RequestOptions):
    site_id: str | None
    pvdc_id: str | None
    accept_language: str | None = None
    x_global_transaction_id: str | None = None
    headers: dict[str, str] | None = None

    path_fields: ClassVar[tuple[str, ...]] = ("site_id", "pvdc_id")


@dataclass
class CreateDirectorSitesPvdcsClustersOptions(_RequestOptions):
    site_id: str | None
    pvdc_id: str | None
    name: str | None
    host_count: int | None
    host_profile: str | None
    file_shares: FileSharesPrototype | None
    accept_language: str | None = None
    x_global_transaction_id: str | None = None
    headers: dict[str, str] | None = None

    path_fields: ClassVar[tuple[str, ...]] = ("site_id", "pvdc_id")
    body_fields: ClassVar[tuple[str, ...]] = (
        "name", "host_count", "host_profile", "file_shares")


@dataclass
class GetDirectorInstancesPvdcsClusterOptions(_RequestOptions):
    site_id: str | None
    id: str | None
    pvdc_id: str | None
    accept_language: str | None = None
    x_global_transaction_id: str | None = None
    headers: dict[str, str] | None = None

    path_fields: ClassVar[tuple[str, ...]] = ("site_id", "pvdc_id", "id")


@dataclass
class DeleteDirectorSitesPvdcsClusterOptions(_RequestOptions):
    site_id: str | None
    id: str | None
    pvdc_id: str | None
    accept_language: str | None = None
    x_global_transaction_id: str | None = None
    headers: dict[str, str] | None = None

    path_fields: ClassVar[tuple[str, ...]] = ("site_id", "pvdc_id", "id")


@dataclass
class UpdateDirectorSitesPvdcsClusterOptions(_RequestOptions):
    """``body`` is a merge patch, e.g. ``ClusterPatch(host_count=4).as_patch()``."""

    site_id: str | None
    id: str | None
    pvdc_id: str | None
    body: dict[str, Any] | ClusterPatch | None
    accept_language: str | None = None
    x_global_transaction_id: str | None = None
    headers: dict[str, str] | None = None

    path_fields: ClassVar[tuple[str, ...]] = ("site_id", "pvdc_id", "id")

    def request_body(self) -> dict[str, Any]:
        if isinstance(self.body, ClusterPatch):
            return self.body.as_patch()
        return dict(self.body or {})


# ── Catalog ────────────────────────────────────────────────────────────


@dataclass
class ListDirectorSiteRegionsOptions(_RequestOptions):
    accept_language: str | None = None
    x_global_transaction_id: str | None = None
    headers: dict[str, str] | None = None


@dataclass
class ListDirectorSiteHostProfilesOptions(_RequestOptions):
    accept_language: str | None = None
    x_global_transaction_id: str | None = None
    headers: dict[str, str] | None = None


@dataclass
class ListMultitenantDirectorSitesOptions(_RequestOptions):
    accept_language: str | None = None
    x_global_transaction_id: str | None = None
    headers: dict[str, str] | None = None


# ── Pricing & admin password ───────────────────────────────────────────


@dataclass
class ListPricesOptions(_RequestOptions):
    accept_language: str | None = None
    x_global_transaction_id: str | None = None
    headers: dict[str, str] | None = None


@dataclass
class GetVcddPriceOptions(_RequestOptions):
    """Price quote for a director site in the legacy order shape."""

    name: str | None
    resource_group: str | None
    pvdcs: list[PVDCOrderInfo] | None
    accept_language: str | None = None
    x_global_transaction_id: str | None = None
    headers: dict[str, str] | None = None

    body_fields: ClassVar[tuple[str, ...]] = ("name", "resource_group", "pvdcs")


@dataclass
class ReplaceOrgAdminPasswordOptions(_RequestOptions):
    """The site is selected by the ``site_id`` query parameter; no body is sent."""

    site_id: str | None
    headers: dict[str, str] | None = None

    query_fields: ClassVar[tuple[str, ...]] = ("site_id",)


# ── OIDC ───────────────────────────────────────────────────────────────


@dataclass
class GetOidcConfigurationOptions(_RequestOptions):
    site_id: str | None
    accept_language: str | None = None
    headers: dict[str, str] | None = None

    path_fields: ClassVar[tuple[str, ...]] = ("site_id",)


@dataclass
class SetOidcConfigurationOptions(_RequestOptions):
    """The request has no body; ``content_length`` is sent as Content-Length."""

    site_id: str | None
    content_length: int | None = 0
    accept_language: str | None = None
    headers: dict[str, str] | None = None

    path_fields: ClassVar[tuple[str, ...]] = ("site_id",)

    def request_headers(self) -> dict[str, str]:
        headers = super().request_headers()
        if self.content_length is not None:
            headers["Content-Length"] = str(self.content_length)
        return headers


# ── VDCs ───────────────────────────────────────────────────────────────


@dataclass
class ListVdcsOptions(_RequestOptions):
    accept_language: str | None = None
    headers: dict[str, str] | None = None


@dataclass
class CreateVdcOptions(_RequestOptions):
    name: str | None
    director_site: VDCDirectorSitePrototype | None
    edge: VDCEdgePrototype | None = None
    fast_provisioning_enabled: bool | None = None
    resource_group: ResourceGroupIdentity | None = None
    cpu: int | None = None
    ram: int | None = None
    rhel_byol: bool | None = None
    windows_byol: bool | None = None
    accept_language: str | None = None
    headers: dict[str, str] | None = None

    body_fields: ClassVar[tuple[str, ...]] = (
        "name", "director_site", "edge", "fast_provisioning_enabled",
        "resource_group", "cpu", "ram", "rhel_byol", "windows_byol",
    )


@dataclass
class GetVdcOptions(_RequestOptions):
    id: str | None
    accept_language: str | None = None
    headers: dict[str, str] | None = None

    path_fields: ClassVar[tuple[str, ...]] = ("id",)


@dataclass
class UpdateVdcOptions(_RequestOptions):
    """``vdc_patch`` is a merge patch: a dict, or a ``VDCPatch`` rendered on dispatch."""

    id: str | None
    vdc_patch: dict[str, Any] | VDCPatch | None
    accept_language: str | None = None
    headers: dict[str, str] | None = None

    path_fields: ClassVar[tuple[str, ...]] = ("id",)

    def request_body(self) -> dict[str, Any]:
        if isinstance(self.vdc_patch, VDCPatch):
            return self.vdc_patch.as_patch()
        return dict(self.vdc_patch or {})


@dataclass
class DeleteVdcOptions(_RequestOptions):
    id: str | None
    accept_language: str | None = None
    headers: dict[str, str] | None = None

    path_fields: ClassVar[tuple[str, ...]] = ("id",)
