"""
Read-only catalog schemas: host profiles, regions and multitenant sites.
"""

from pydantic import Field

from vmware_client.schemas.base_schema import VmwareModel
from vmware_client.schemas.director_site_schema import ProviderType


class DirectorSiteHostProfile(VmwareModel):
    """
    A physical host SKU, e.g. ``BM_2S_20_CORES_192_GB``.
    """

    id: str = Field(..., description="Host profile ID")
    cpu: int | None = Field(default=None, description="Number of CPU cores")
    family: str | None = None
    processor: str | None = None
    ram: int | None = Field(default=None, description="RAM in GB")
    socket: int | None = None
    speed: str | None = None
    manufacturer: str | None = None
    features: list[str] | None = None


class DirectorSiteHostProfileCollection(VmwareModel):
    director_site_host_profiles: list[DirectorSiteHostProfile] = Field(
        default_factory=list)


class DataCenter(VmwareModel):
    display_name: str | None = None
    name: str | None = None
    uplink_speed: str | None = None


class DirectorSiteRegion(VmwareModel):
    """A region where director sites can be created."""

    name: str | None = None
    data_centers: list[DataCenter] | None = None
    endpoint: str | None = None


class DirectorSiteRegionCollection(VmwareModel):
    director_site_regions: list[DirectorSiteRegion] = Field(
        default_factory=list)


class MultitenantPVDC(VmwareModel):
    name: str | None = None
    id: str | None = None
    data_center_name: str | None = None
    provider_types: list[ProviderType] | None = None


class MultitenantDirectorSite(VmwareModel):
    """A shared director site on which VDCs can be created."""

    name: str | None = None
    display_name: str | None = None
    id: str = Field(..., description="Multitenant director site ID")
    region: str | None = None
    pvdcs: list[MultitenantPVDC] | None = None
    services: list[str] | None = None


class MultitenantDirectorSiteCollection(VmwareModel):
    multitenant_director_sites: list[MultitenantDirectorSite] = Field(
        default_factory=list)
