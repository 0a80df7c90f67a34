"""
Provider VDC and cluster examples.

Usage:
    python examples/pvdcs.py list --site-id <site_id>
    python examples/pvdcs.py create --site-id <site_id>
    python examples/pvdcs.py get --site-id <site_id> --pvdc-id <pvdc_id>
    python examples/pvdcs.py list-clusters --site-id <site_id> --pvdc-id <pvdc_id>
    python examples/pvdcs.py create-cluster --site-id <site_id> --pvdc-id <pvdc_id>
    python examples/pvdcs.py get-cluster --site-id ... --pvdc-id ... --cluster-id ...
    python examples/pvdcs.py update-cluster --site-id ... --pvdc-id ... --cluster-id ... --host-count 4
    python examples/pvdcs.py delete-cluster --site-id ... --pvdc-id ... --cluster-id ...
"""

import argparse

from _common import run

from vmware_client.schemas import (
    ClusterPatch,
    ClusterPrototype,
    CreateDirectorSitesPvdcsClustersOptions,
    CreateDirectorSitesPvdcsOptions,
    DeleteDirectorSitesPvdcsClusterOptions,
    FileSharesPrototype,
    GetDirectorInstancesPvdcsClusterOptions,
    GetDirectorSitesPvdcsOptions,
    ListDirectorSitesPvdcsClustersOptions,
    ListDirectorSitesPvdcsOptions,
    UpdateDirectorSitesPvdcsClusterOptions,
)


def _cluster() -> ClusterPrototype:
    return ClusterPrototype(
        name="cluster_1",
        host_count=2,
        host_profile="BM_2S_20_CORES_192_GB",
        file_shares=FileSharesPrototype(),
    )


async def list_pvdcs(service, args):
    return await service.list_director_sites_pvdcs(
        ListDirectorSitesPvdcsOptions(args.site_id))


async def create_pvdc(service, args):
    return await service.create_director_sites_pvdcs(
        CreateDirectorSitesPvdcsOptions(
            args.site_id, "pvdc-1", "dal10", [_cluster()]))


async def get_pvdc(service, args):
    return await service.get_director_sites_pvdcs(
        GetDirectorSitesPvdcsOptions(args.site_id, args.pvdc_id))


async def list_clusters(service, args):
    return await service.list_director_sites_pvdcs_clusters(
        ListDirectorSitesPvdcsClustersOptions(args.site_id, args.pvdc_id))


async def create_cluster(service, args):
    cluster = _cluster()
    return await service.create_director_sites_pvdcs_clusters(
        CreateDirectorSitesPvdcsClustersOptions(
            args.site_id, args.pvdc_id, cluster.name, cluster.host_count,
            cluster.host_profile, cluster.file_shares))


async def get_cluster(service, args):
    return await service.get_director_instances_pvdcs_cluster(
        GetDirectorInstancesPvdcsClusterOptions(
            args.site_id, args.cluster_id, args.pvdc_id))


async def update_cluster(service, args):
    return await service.update_director_sites_pvdcs_cluster(
        UpdateDirectorSitesPvdcsClusterOptions(
            args.site_id, args.cluster_id, args.pvdc_id,
            ClusterPatch(host_count=args.host_count)))


async def delete_cluster(service, args):
    return await service.delete_director_sites_pvdcs_cluster(
        DeleteDirectorSitesPvdcsClusterOptions(
            args.site_id, args.cluster_id, args.pvdc_id))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--site-id", default="site_id")
    parser.add_argument("--pvdc-id", default="pvdc_id")
    parser.add_argument("--cluster-id", default="cluster_id")
    parser.add_argument("--host-count", type=int, default=3)
    run(parser, {
        "list": list_pvdcs,
        "create": create_pvdc,
        "get": get_pvdc,
        "list-clusters": list_clusters,
        "create-cluster": create_cluster,
        "get-cluster": get_cluster,
        "update-cluster": update_cluster,
        "delete-cluster": delete_cluster,
    })
