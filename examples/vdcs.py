"""
Virtual data center examples.

Usage:
    python examples/vdcs.py list
    python examples/vdcs.py create --site-id <site_id> --pvdc-id <pvdc_id>
    python examples/vdcs.py get --id <vdc_id>
    python examples/vdcs.py update --id <vdc_id> --cpu 4
    python examples/vdcs.py delete --id <vdc_id>
"""

import argparse

from _common import run

from vmware_client.schemas import (
    CreateVdcOptions,
    DeleteVdcOptions,
    DirectorSitePVDC,
    GetVdcOptions,
    ListVdcsOptions,
    UpdateVdcOptions,
    VDCDirectorSitePrototype,
    VDCPatch,
)


async def list_vdcs(service, args):
    return await service.list_vdcs(ListVdcsOptions())


async def create_vdc(service, args):
    director_site = VDCDirectorSitePrototype(
        id=args.site_id, pvdc=DirectorSitePVDC(id=args.pvdc_id))
    return await service.create_vdc(CreateVdcOptions(args.name, director_site))


async def get_vdc(service, args):
    return await service.get_vdc(GetVdcOptions(args.id))


async def update_vdc(service, args):
    patch = VDCPatch()
    if args.cpu is not None:
        patch.cpu = args.cpu
    if args.ram is not None:
        patch.ram = args.ram
    return await service.update_vdc(UpdateVdcOptions(args.id, patch))


async def delete_vdc(service, args):
    return await service.delete_vdc(DeleteVdcOptions(args.id))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--id", default="vdc_id")
    parser.add_argument("--name", default="sampleVDC")
    parser.add_argument("--site-id", default="directorsiteuuid")
    parser.add_argument("--pvdc-id", default="pvdc_uuid")
    parser.add_argument("--cpu", type=int)
    parser.add_argument("--ram", type=int)
    run(parser, {
        "list": list_vdcs,
        "create": create_vdc,
        "get": get_vdc,
        "update": update_vdc,
        "delete": delete_vdc,
    })
