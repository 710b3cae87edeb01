"""
ECS Resource Fetchers Module.

This module contains functions for discovering ECS clusters and services.
"""

from typing import List

from ...utils import fetcher_error_handler, get_logger
from ..types import DiscoveryRecord, ECSClient

logger = get_logger()


def parse_arn_name(arn: str) -> str:
    """
    Returns the resource name of an ARN: the text after the last "/".

    Works for cluster ARNs (``arn:aws:ecs:region:acct:cluster/my-cluster``) and
    both service ARN formats (``service/my-svc`` and ``service/cluster/my-svc``).

    Raises:
        ValueError: If the ARN has no "/"-separated resource name
    """
    prefix, sep, name = arn.rpartition("/")
    if not sep or not prefix or not name:
        raise ValueError(f"Cannot parse resource name from ARN: {arn!r}")
    return name


def _list_cluster_names(ecs_client: ECSClient) -> List[str]:
    response = ecs_client.list_clusters()
    return [parse_arn_name(arn) for arn in response.get("clusterArns", [])]


@fetcher_error_handler("listing ECS clusters")
def fetch_ecs_clusters(ecs_client: ECSClient) -> List[DiscoveryRecord]:
    """
    Discover ECS clusters by name.

    Args:
        ecs_client: Boto3 ECS client

    Returns:
        One record per cluster with {#CLUSTERNAME}
    """
    records: List[DiscoveryRecord] = [
        {"{#CLUSTERNAME}": name} for name in _list_cluster_names(ecs_client)
    ]
    logger.info(f"[ECS] Found {len(records)} clusters")
    return records


@fetcher_error_handler("listing ECS services")
def fetch_ecs_services(ecs_client: ECSClient) -> List[DiscoveryRecord]:
    """
    Discover ECS services of every cluster.

    Clusters are listed first, then services are listed one cluster at a time.
    A failure on any cluster fails the whole discovery.

    Args:
        ecs_client: Boto3 ECS client

    Returns:
        One record per service with {#CLUSTERNAME} and {#SERVICENAME}
    """
    records: List[DiscoveryRecord] = []

    for cluster_name in _list_cluster_names(ecs_client):
        response = ecs_client.list_services(cluster=cluster_name)
        service_arns = response.get("serviceArns", [])
        logger.debug(f"[ECS] Cluster {cluster_name} has {len(service_arns)} services")

        for service_arn in service_arns:
            records.append(
                {
                    "{#CLUSTERNAME}": cluster_name,
                    "{#SERVICENAME}": parse_arn_name(service_arn),
                }
            )

    logger.info(f"[ECS] Found {len(records)} services")
    return records
