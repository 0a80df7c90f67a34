"""
Director site examples.

Usage:
    python examples/director_sites.py list
    python examples/director_sites.py create --name my_director_site
    python examples/director_sites.py create-legacy --resource-group Default
    python examples/director_sites.py get --id <site_id>
    python examples/director_sites.py delete --id <site_id>
    python examples/director_sites.py price-quote --resource-group Default
    python examples/director_sites.py replace-password --id <site_id>
"""

import argparse

from _common import run

from vmware_client.schemas import (
    ClusterOrderInfo,
    ClusterPrototype,
    CreateDirectorSitesOptions,
    DeleteDirectorSiteOptions,
    FileShares,
    FileSharesPrototype,
    GetDirectorSiteOptions,
    GetVcddPriceOptions,
    ListDirectorSitesOptions,
    PVDCOrderInfo,
    PVDCPrototype,
    ReplaceOrgAdminPasswordOptions,
)


async def list_sites(service, args):
    return await service.list_director_sites(ListDirectorSitesOptions())


async def create_site(service, args):
    cluster = ClusterPrototype(
        name="cluster_1",
        host_count=2,
        host_profile="BM_2S_20_CORES_192_GB",
        file_shares=FileSharesPrototype(),
    )
    pvdc = PVDCPrototype(name="pvdc-1", data_center_name="dal10", clusters=[cluster])
    return await service.create_director_sites(
        CreateDirectorSitesOptions(args.name, [pvdc]))


def _order_info_pvdc():
    cluster = ClusterOrderInfo(
        name="cluster_1",
        storage_type="nfs",
        host_count=3,
        file_shares=FileShares(
            storage_point_two_five_iops_gb=0,
            storage_two_iops_gb=24000,
            storage_four_iops_gb=24000,
            storage_ten_iops_gb=8000,
        ),
        host_profile="BM_2S_20_CORES_192_GB",
    )
    return PVDCOrderInfo(name="pvdc-1", data_center="dal10", clusters=[cluster])


async def create_site_legacy(service, args):
    return await service.create_director_sites(
        CreateDirectorSitesOptions.from_order_info(
            args.name, args.resource_group, [_order_info_pvdc()]))


async def price_quote(service, args):
    return await service.get_vcdd_price(
        GetVcddPriceOptions(args.name, args.resource_group, [_order_info_pvdc()]))


async def replace_password(service, args):
    return await service.replace_org_admin_password(
        ReplaceOrgAdminPasswordOptions(args.id))


async def get_site(service, args):
    return await service.get_director_site(GetDirectorSiteOptions(args.id))


async def delete_site(service, args):
    return await service.delete_director_site(DeleteDirectorSiteOptions(args.id))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--id", default="site_id")
    parser.add_argument("--name", default="my_director_site")
    parser.add_argument("--resource-group", default="Default")
    run(parser, {
        "list": list_sites,
        "create": create_site,
        "create-legacy": create_site_legacy,
        "get": get_site,
        "delete": delete_site,
        "price-quote": price_quote,
        "replace-password": replace_password,
    })
