"""
Pydantic schemas for virtual data centers (VDCs).
"""

from datetime import datetime
from enum import Enum

from pydantic import Field

from vmware_client.schemas.base_schema import (
    PatchModel,
    VmwareModel,
    VmwarePrototype,
)


class VDCStatus(str, Enum):
    CREATING = "creating"
    DELETED = "deleted"
    DELETING = "deleting"
    FAILED = "failed"
    MODIFYING = "modifying"
    READY_TO_USE = "ready_to_use"


class EdgeType(str, Enum):
    """Efficiency edges share resources between VDCs; performance edges do not."""

    EFFICIENCY = "efficiency"
    PERFORMANCE = "performance"


class EdgeSize(str, Enum):
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extra_large"


class StatusReasonCode(str, Enum):
    INSUFFICENT_CPU = "insufficent_cpu"
    INSUFFICENT_RAM = "insufficent_ram"
    INSUFFICENT_CPU_AND_RAM = "insufficent_cpu_and_ram"


# ── Request shapes ─────────────────────────────────────────────────────


class VDCProviderType(VmwareModel):
    """How resources are made available to a VDC on a multitenant site."""

    name: str = Field(..., description="on_demand | reserved")


class DirectorSitePVDC(VmwareModel):
    """The PVDC within the director site in which to deploy the VDC."""

    id: str = Field(..., description="PVDC ID")
    provider_type: VDCProviderType | None = None


class VDCDirectorSitePrototype(VmwarePrototype):
    """The director site (and PVDC) a new VDC consumes capacity from."""

    id: str = Field(..., description="Director site ID")
    pvdc: DirectorSitePVDC = Field(..., description="PVDC selector")


class VDCEdgePrototype(VmwarePrototype):
    """
    Networking edge to deploy with a new VDC.

    ``size`` applies to performance edges only.
    """

    size: str | None = None
    type: str = Field(..., description="efficiency | performance")


class VDCPatch(PatchModel):
    """
    Changes to apply to a VDC.

    Render with ``as_patch()``; fields left untouched are not sent.
    """

    cpu: int | None = Field(default=None, description="vCPU reservation")
    fast_provisioning_enabled: bool | None = None
    ram: int | None = Field(default=None, description="RAM reservation in GB")


# ── Response shapes ────────────────────────────────────────────────────


class Edge(VmwareModel):
    id: str | None = None
    public_ips: list[str] | None = None
    size: str | None = None
    status: str | None = None
    type: str | None = None


class StatusReason(VmwareModel):
    code: str | None = None
    message: str | None = None
    more_info: str | None = None


class VDCDirectorSite(VmwareModel):
    id: str | None = None
    pvdc: DirectorSitePVDC | None = None
    url: str | None = Field(
        default=None, description="Cloud Director console URL")


class VDC(VmwareModel):
    """A virtual data center resource."""

    href: str | None = None
    id: str = Field(..., description="VDC ID")
    provisioned_at: datetime | None = None
    cpu: int | None = None
    crn: str | None = None
    deleted_at: datetime | None = None
    director_site: VDCDirectorSite | None = None
    edges: list[Edge] | None = None
    status_reasons: list[StatusReason] | None = None
    name: str | None = None
    ordered_at: datetime | None = None
    org_name: str | None = None
    ram: int | None = None
    status: str | None = None
    type: str | None = None
    fast_provisioning_enabled: bool | None = None
    rhel_byol: bool | None = None
    windows_byol: bool | None = None


class VDCCollection(VmwareModel):
    vdcs: list[VDC] = Field(default_factory=list)
