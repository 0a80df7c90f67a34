"""
OIDC configuration examples.

Usage:
    python examples/oidc.py get --site-id <site_id>
    python examples/oidc.py set --site-id <site_id>
"""

import argparse

from _common import run

from vmware_client.schemas import (
    GetOidcConfigurationOptions,
    SetOidcConfigurationOptions,
)


async def get_oidc(service, args):
    return await service.get_oidc_configuration(
        GetOidcConfigurationOptions(args.site_id))


async def set_oidc(service, args):
    return await service.set_oidc_configuration(
        SetOidcConfigurationOptions(args.site_id))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--site-id", default="site_id")
    run(parser, {"get": get_oidc, "set": set_oidc})
