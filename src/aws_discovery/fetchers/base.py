"""
Base AWS Resource Fetchers Module.

This module holds the dispatch table from discovery type to fetcher and
creates the boto3 client the selected fetcher needs.
"""

from typing import Dict, List, NamedTuple

import boto3
from botocore.exceptions import BotoCoreError

from ...exceptions import FetchError, UnsupportedDiscoveryTypeError
from ...utils import get_logger
from ..types import DiscoveryRecord, Fetcher
from .apigateway_fetchers import fetch_api_keys
from .cloudfront_fetchers import fetch_cloudfront_distributions
from .ec2_fetchers import fetch_ec2_instances
from .ecs_fetchers import fetch_ecs_clusters, fetch_ecs_services
from .elb_fetchers import fetch_elastic_load_balancers
from .lambda_fetchers import fetch_lambda_functions
from .rds_fetchers import fetch_rds_instances
from .sqs_fetchers import fetch_sqs_queues

logger = get_logger()


class DiscoveryType(NamedTuple):
    """A supported discovery type: boto3 service name and its fetcher."""

    service_name: str
    fetcher: Fetcher


# Type names are matched case-sensitively.
DISCOVERY_TYPES: Dict[str, DiscoveryType] = {
    "EC2": DiscoveryType("ec2", fetch_ec2_instances),
    "RDS": DiscoveryType("rds", fetch_rds_instances),
    "CloudFront": DiscoveryType("cloudfront", fetch_cloudfront_distributions),
    "ELB": DiscoveryType("elb", fetch_elastic_load_balancers),
    "ECSClusters": DiscoveryType("ecs", fetch_ecs_clusters),
    "ECSServices": DiscoveryType("ecs", fetch_ecs_services),
    "Lambda": DiscoveryType("lambda", fetch_lambda_functions),
    "SQS": DiscoveryType("sqs", fetch_sqs_queues),
    "API": DiscoveryType("apigateway", fetch_api_keys),
}


def get_supported_discovery_types() -> List[str]:
    """Returns the supported discovery type names in dispatch table order."""
    return list(DISCOVERY_TYPES)


def resolve_discovery_type(discovery_type: str) -> DiscoveryType:
    """
    Looks up a discovery type in the dispatch table.

    Raises:
        UnsupportedDiscoveryTypeError: If the type has no fetcher
    """
    try:
        return DISCOVERY_TYPES[discovery_type]
    except KeyError:
        raise UnsupportedDiscoveryTypeError(discovery_type) from None


def get_discovery_records(
    discovery_type: str, region_name: str = "eu-central-1"
) -> List[DiscoveryRecord]:
    """
    Runs the fetcher for ``discovery_type`` against ``region_name``.

    The type is resolved before any AWS client is created, so an unsupported
    type never touches the network. Credentials come from the standard boto3
    chain (environment, shared config, instance role).

    Args:
        discovery_type: Discovery type name, e.g. "EC2" or "ECSServices"
        region_name: AWS region for the session

    Returns:
        List of discovery records, empty when AWS returned no resources

    Raises:
        UnsupportedDiscoveryTypeError: If the type has no fetcher
        FetchError: If the session, the client or the AWS API call fails
    """
    selected = resolve_discovery_type(discovery_type)
    logger.info(
        f"Running {discovery_type} discovery "
        f"({selected.service_name}) in region {region_name}"
    )

    try:
        session = boto3.Session(region_name=region_name)
        client = session.client(selected.service_name)
    except BotoCoreError as e:
        logger.debug(f"Could not create {selected.service_name} client: {e}")
        raise FetchError(f"creating {selected.service_name} client", e) from e

    return selected.fetcher(client)
