"""
Legacy order-info shapes for director site creation.

Earlier API versions ordered a director site with a plain-string resource
group, an explicit cluster ``storage_type`` and the data center under
``data_center``. These records sit beside the prototype family; neither
derives from the other.
"""

from pydantic import Field

from vmware_client.schemas.base_schema import VmwarePrototype
from vmware_client.schemas.director_site_schema import FileShares


class ClusterOrderInfo(VmwarePrototype):
    """VMware cluster order information (legacy)."""

    name: str = Field(..., description="Cluster name")
    storage_type: str = Field(..., description="Storage type, e.g. nfs")
    host_count: int = Field(..., description="Number of hosts in the cluster")
    file_shares: FileShares = Field(
        ..., description="Chosen storage policies and their sizes")
    host_profile: str = Field(
        ..., description="Host type, e.g. BM_2S_20_CORES_192_GB")


class PVDCOrderInfo(VmwarePrototype):
    """Provider VDC order information (legacy)."""

    name: str = Field(..., description="PVDC name")
    data_center: str = Field(
        ..., description="Data center to deploy in, e.g. dal10")
    clusters: list[ClusterOrderInfo] = Field(
        ..., description="Clusters to deploy in the PVDC")
