"""
ELB Resource Fetchers Module.

Covers classic Elastic Load Balancers (the ``elb`` API).
"""

from typing import List

from ...utils import fetcher_error_handler, get_logger
from ..types import DiscoveryRecord, ELBClient

logger = get_logger()


@fetcher_error_handler("reading ELBs")
def fetch_elastic_load_balancers(elb_client: ELBClient) -> List[DiscoveryRecord]:
    response = elb_client.describe_load_balancers()
    records: List[DiscoveryRecord] = [
        {"{#LOADBALANCERNAME}": load_balancer["LoadBalancerName"]}
        for load_balancer in response.get("LoadBalancerDescriptions", [])
    ]

    logger.info(f"[ELB] Found {len(records)} load balancers")
    return records
