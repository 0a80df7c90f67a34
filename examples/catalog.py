"""
Catalog examples: host profiles, regions, multitenant director sites and
prices.

Usage:
    python examples/catalog.py host-profiles
    python examples/catalog.py regions
    python examples/catalog.py multitenant-sites
    python examples/catalog.py prices
"""

import argparse

from _common import run

from vmware_client.schemas import (
    ListDirectorSiteHostProfilesOptions,
    ListDirectorSiteRegionsOptions,
    ListMultitenantDirectorSitesOptions,
    ListPricesOptions,
)


async def host_profiles(service, args):
    return await service.list_director_site_host_profiles(
        ListDirectorSiteHostProfilesOptions())


async def regions(service, args):
    return await service.list_director_site_regions(ListDirectorSiteRegionsOptions())


async def multitenant_sites(service, args):
    return await service.list_multitenant_director_sites(
        ListMultitenantDirectorSitesOptions())


async def prices(service, args):
    return await service.list_prices(ListPricesOptions())


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    run(parser, {
        "host-profiles": host_profiles,
        "regions": regions,
        "multitenant-sites": multitenant_sites,
        "prices": prices,
    })
