"""
Pydantic schemas for the VMware as a Service API: resource models, merge
patches and per-operation options records.
"""

from vmware_client.schemas.base_schema import PatchModel, VmwareModel, VmwarePrototype
from vmware_client.schemas.catalog_schema import (
    DataCenter,
    DirectorSiteHostProfile,
    DirectorSiteHostProfileCollection,
    DirectorSiteRegion,
    DirectorSiteRegionCollection,
    MultitenantDirectorSite,
    MultitenantDirectorSiteCollection,
    MultitenantPVDC,
)
from vmware_client.schemas.director_site_schema import (
    PVDC,
    BillingPlan,
    Cluster,
    ClusterCollection,
    ClusterPatch,
    ClusterPrototype,
    ClusterSummary,
    DirectorSite,
    DirectorSiteCollection,
    DirectorSiteReference,
    DirectorSiteType,
    FileShares,
    FileSharesPrototype,
    ProviderType,
    ProviderTypeName,
    PVDCCollection,
    PVDCPrototype,
    ResourceGroupIdentity,
    ResourceGroupReference,
    ResourceStatus,
    Service,
    ServiceIdentity,
    ServiceName,
    StorageType,
    UpdateCluster,
)
from vmware_client.schemas.oidc_schema import OIDC
from vmware_client.schemas.options_schema import (
    CreateDirectorSitesOptions,
    CreateDirectorSitesPvdcsClustersOptions,
    CreateDirectorSitesPvdcsOptions,
    CreateVdcOptions,
    DeleteDirectorSiteOptions,
    DeleteDirectorSitesPvdcsClusterOptions,
    DeleteVdcOptions,
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
    ReplaceOrgAdminPasswordOptions,
    SetOidcConfigurationOptions,
    UpdateDirectorSitesPvdcsClusterOptions,
    UpdateVdcOptions,
)
from vmware_client.schemas.order_info_schema import ClusterOrderInfo, PVDCOrderInfo
from vmware_client.schemas.pricing_schema import (
    DirectorSitePriceItem,
    DirectorSitePriceListItem,
    DirectorSitePriceMetric,
    DirectorSitePriceQuoteResponse,
    DirectorSitePricingInfo,
    NewPassword,
    PriceInfoBaseCharge,
    PriceInfoClusterCharge,
    PriceInfoClusterItem,
    PriceInfoClusterSubItem,
)
from vmware_client.schemas.vdc_schema import (
    VDC,
    DirectorSitePVDC,
    Edge,
    EdgeSize,
    EdgeType,
    StatusReason,
    StatusReasonCode,
    VDCCollection,
    VDCDirectorSite,
    VDCDirectorSitePrototype,
    VDCEdgePrototype,
    VDCPatch,
    VDCProviderType,
    VDCStatus,
)

__all__ = [
    "VmwareModel",
    "VmwarePrototype",
    "PatchModel",
    # Director sites, PVDCs, clusters
    "ResourceStatus",
    "DirectorSiteType",
    "StorageType",
    "BillingPlan",
    "ServiceName",
    "ProviderTypeName",
    "FileShares",
    "FileSharesPrototype",
    "ResourceGroupIdentity",
    "ResourceGroupReference",
    "ServiceIdentity",
    "Service",
    "DirectorSiteReference",
    "ProviderType",
    "ClusterPrototype",
    "ClusterSummary",
    "Cluster",
    "UpdateCluster",
    "ClusterCollection",
    "ClusterPatch",
    "PVDCPrototype",
    "PVDC",
    "PVDCCollection",
    "DirectorSite",
    "DirectorSiteCollection",
    # Legacy order info
    "ClusterOrderInfo",
    "PVDCOrderInfo",
    # Catalog
    "DirectorSiteHostProfile",
    "DirectorSiteHostProfileCollection",
    "DataCenter",
    "DirectorSiteRegion",
    "DirectorSiteRegionCollection",
    "MultitenantPVDC",
    "MultitenantDirectorSite",
    "MultitenantDirectorSiteCollection",
    # OIDC
    "OIDC",
    # Pricing & admin password
    "DirectorSitePriceItem",
    "DirectorSitePriceListItem",
    "DirectorSitePriceMetric",
    "DirectorSitePricingInfo",
    "PriceInfoBaseCharge",
    "PriceInfoClusterSubItem",
    "PriceInfoClusterItem",
    "PriceInfoClusterCharge",
    "DirectorSitePriceQuoteResponse",
    "NewPassword",
    # VDCs
    "VDCStatus",
    "EdgeType",
    "EdgeSize",
    "StatusReasonCode",
    "VDCProviderType",
    "DirectorSitePVDC",
    "VDCDirectorSitePrototype",
    "VDCEdgePrototype",
    "VDCPatch",
    "Edge",
    "StatusReason",
    "VDCDirectorSite",
    "VDC",
    "VDCCollection",
    # Options
    "ListDirectorSitesOptions",
    "CreateDirectorSitesOptions",
    "GetDirectorSiteOptions",
    "DeleteDirectorSiteOptions",
    "ListDirectorSitesPvdcsOptions",
    "CreateDirectorSitesPvdcsOptions",
    "GetDirectorSitesPvdcsOptions",
    "ListDirectorSitesPvdcsClustersOptions",
    "CreateDirectorSitesPvdcsClustersOptions",
    "GetDirectorInstancesPvdcsClusterOptions",
    "DeleteDirectorSitesPvdcsClusterOptions",
    "UpdateDirectorSitesPvdcsClusterOptions",
    "ListDirectorSiteRegionsOptions",
    "ListDirectorSiteHostProfilesOptions",
    "ListMultitenantDirectorSitesOptions",
    "ListPricesOptions",
    "GetVcddPriceOptions",
    "ReplaceOrgAdminPasswordOptions",
    "GetOidcConfigurationOptions",
    "SetOidcConfigurationOptions",
    "ListVdcsOptions",
    "CreateVdcOptions",
    "GetVdcOptions",
    "UpdateVdcOptions",
    "DeleteVdcOptions",
]
