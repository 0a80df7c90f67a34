"""
Pydantic schemas for director sites, provider VDCs and clusters.

Field names match the JSON keys of the VMware as a Service API, except the
file-share tiers whose upper-case wire names are carried as aliases.
"""

from datetime import datetime
from enum import Enum

from pydantic import Field

from vmware_client.schemas.base_schema import (
    PatchModel,
    VmwareModel,
    VmwarePrototype,
)


class ResourceStatus(str, Enum):
    """Provisioning status shared by director sites, PVDCs and services."""

    CREATING = "creating"
    DELETED = "deleted"
    DELETING = "deleting"
    READY_TO_USE = "ready_to_use"
    UPDATING = "updating"


class DirectorSiteType(str, Enum):
    MULTITENANT = "multitenant"
    SINGLE_TENANT = "single_tenant"


class StorageType(str, Enum):
    NFS = "nfs"


class BillingPlan(str, Enum):
    MONTHLY = "monthly"


class ServiceName(str, Enum):
    VCDA = "vcda"
    VEEAM = "veeam"


class ProviderTypeName(str, Enum):
    ON_DEMAND = "on_demand"
    RESERVED = "reserved"


# ── File shares ────────────────────────────────────────────────────────


class FileShares(VmwareModel):
    """Chosen storage policies and their sizes, in GB."""

    storage_point_two_five_iops_gb: int | None = Field(
        default=None, alias="STORAGE_POINT_TWO_FIVE_IOPS_GB",
        description="Amount of 0.25 IOPS/GB storage")
    storage_two_iops_gb: int | None = Field(
        default=None, alias="STORAGE_TWO_IOPS_GB",
        description="Amount of 2 IOPS/GB storage")
    storage_four_iops_gb: int | None = Field(
        default=None, alias="STORAGE_FOUR_IOPS_GB",
        description="Amount of 4 IOPS/GB storage")
    storage_ten_iops_gb: int | None = Field(
        default=None, alias="STORAGE_TEN_IOPS_GB",
        description="Amount of 10 IOPS/GB storage")


class FileSharesPrototype(FileShares):
    """File-share quotas requested for a new or updated cluster."""

    model_config = VmwarePrototype.model_config


# ── Identities & references ────────────────────────────────────────────


class ResourceGroupIdentity(VmwarePrototype):
    """The resource group to associate with a new resource."""

    id: str = Field(..., description="Resource group ID")


class ResourceGroupReference(VmwareModel):
    id: str | None = None
    name: str | None = None
    crn: str | None = None


class ServiceIdentity(VmwarePrototype):
    """A service to deploy on a new director site (e.g. ``veeam``)."""

    name: str = Field(..., description="Service name")


class Service(VmwareModel):
    name: str | None = None
    id: str | None = None
    ordered_at: datetime | None = None
    provisioned_at: datetime | None = None
    status: str | None = None
    console_url: str | None = None


class DirectorSiteReference(VmwareModel):
    """Back link to the director site a resource belongs to."""

    crn: str | None = None
    href: str | None = None
    id: str | None = None


class ProviderType(VmwareModel):
    name: str | None = None


# ── Clusters ───────────────────────────────────────────────────────────


class ClusterPrototype(VmwarePrototype):
    """
    Order information for a VMware cluster.

    Cluster names must be unique per director site and cannot be changed
    after creation.
    """

    name: str = Field(..., description="Cluster name")
    host_count: int = Field(..., description="Number of hosts in the cluster")
    host_profile: str = Field(
        ..., description="Host type, e.g. BM_2S_20_CORES_192_GB")
    file_shares: FileSharesPrototype = Field(
        ..., description="Chosen storage policies and their sizes")


class ClusterSummary(VmwareModel):
    name: str | None = None
    host_count: int | None = None
    host_profile: str | None = None
    id: str | None = None
    data_center_name: str | None = None
    status: str | None = None
    href: str | None = None
    file_shares: FileShares | None = None


class Cluster(VmwareModel):
    """A cluster resource."""

    id: str = Field(..., description="Cluster ID")
    name: str | None = None
    href: str | None = None
    ordered_at: datetime | None = None
    provisioned_at: datetime | None = None
    host_count: int | None = None
    status: str | None = None
    data_center_name: str | None = None
    director_site: DirectorSiteReference | None = None
    host_profile: str | None = None
    storage_type: str | None = None
    billing_plan: str | None = None
    file_shares: FileShares | None = None


class UpdateCluster(Cluster):
    """Response of a cluster update, with the tracking operation."""

    message: str | None = None
    operation_id: str | None = None


class ClusterCollection(VmwareModel):
    clusters: list[Cluster] = Field(default_factory=list)


class ClusterPatch(PatchModel):
    """
    Cluster merge patch.

    The service does not accept ``file_shares`` and ``host_count`` in the
    same call.
    """

    file_shares: FileSharesPrototype | None = None
    host_count: int | None = None


# ── Provider VDCs ──────────────────────────────────────────────────────


class PVDCPrototype(VmwarePrototype):
    """Order information for a provider virtual data center."""

    name: str = Field(..., description="PVDC name")
    data_center_name: str = Field(
        ..., description="Data center to deploy in, e.g. dal10")
    clusters: list[ClusterPrototype] = Field(
        ..., description="Clusters to deploy in the PVDC")


class PVDC(VmwareModel):
    """A provider virtual data center resource."""

    name: str | None = None
    data_center_name: str | None = None
    id: str = Field(..., description="PVDC ID")
    href: str | None = None
    clusters: list[ClusterSummary] | None = None
    status: str | None = None
    provider_types: list[ProviderType] | None = None


class PVDCCollection(VmwareModel):
    pvdcs: list[PVDC] = Field(default_factory=list)


# ── Director sites ─────────────────────────────────────────────────────


class DirectorSite(VmwareModel):
    """
    A director site: the infrastructure and VMware software stack
    (vCenter Server, NSX-T and Cloud Director) of one instance.

    Older API versions report ``resource_group`` as a plain string.
    """

    crn: str | None = None
    href: str | None = None
    id: str = Field(..., description="Director site ID")
    ordered_at: datetime | None = None
    provisioned_at: datetime | None = None
    name: str | None = None
    status: str | None = None
    resource_group: ResourceGroupReference | str | None = None
    pvdcs: list[PVDC] | None = None
    type: str | None = None
    services: list[Service] | None = None
    rhel_vm_activation_key: str | None = None


class DirectorSiteCollection(VmwareModel):
    director_sites: list[DirectorSite] = Field(default_factory=list)
