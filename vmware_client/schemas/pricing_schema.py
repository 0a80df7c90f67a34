"""
Pricing, price quote and admin password schemas of the legacy director
site API.
"""

from pydantic import Field

from vmware_client.schemas.base_schema import VmwareModel


# ── Price list ────────────────────────────────────────────────────────


class DirectorSitePriceItem(VmwareModel):
    price: float | None = None
    quantity_tier: int | None = None


class DirectorSitePriceListItem(VmwareModel):
    """Prices of one billing metric in one country."""

    country: str | None = None
    currency: str | None = None
    prices: list[DirectorSitePriceItem] | None = None


class DirectorSitePriceMetric(VmwareModel):
    metric: str | None = None
    description: str | None = None
    price_list: list[DirectorSitePriceListItem] | None = None


class DirectorSitePricingInfo(VmwareModel):
    director_site_pricing: list[DirectorSitePriceMetric] = Field(
        default_factory=list)


# ── Price quote ───────────────────────────────────────────────────────


class PriceInfoClusterSubItem(VmwareModel):
    name: str | None = None
    count: int | None = None
    currency: str | None = None
    price: float | None = None


class PriceInfoClusterItem(VmwareModel):
    name: str | None = None
    currency: str | None = None
    price: float | None = None
    items: list[PriceInfoClusterSubItem] | None = None


class PriceInfoClusterCharge(VmwareModel):
    """Charge for one cluster of the quoted configuration."""

    name: str | None = None
    currency: str | None = None
    price: float | None = None
    items: list[PriceInfoClusterItem] | None = None


class PriceInfoBaseCharge(VmwareModel):
    name: str | None = None
    currency: str | None = None
    price: float | None = None


class DirectorSitePriceQuoteResponse(VmwareModel):
    """Quoted price of a director site configuration."""

    base_charge: PriceInfoBaseCharge | None = None
    clusters: list[PriceInfoClusterCharge] | None = None
    currency: str | None = None
    total: float | None = None


# ── Admin password ────────────────────────────────────────────────────


class NewPassword(VmwareModel):
    """Replacement Cloud Director organization admin password."""

    password: str = Field(..., description="New admin password")
