"""
CloudFront Resource Fetchers Module.
"""

from typing import List

from ...utils import fetcher_error_handler, get_logger
from ..types import CloudFrontClient, DiscoveryRecord

logger = get_logger()


@fetcher_error_handler("listing CloudFront distributions")
def fetch_cloudfront_distributions(
    cloudfront_client: CloudFrontClient,
) -> List[DiscoveryRecord]:
    """
    Discover CloudFront distributions with their first alias (CNAME).

    AWS leaves out ``Items`` when a list is empty, so a distribution without
    aliases gets an empty {#DISTALIAS}.
    """
    response = cloudfront_client.list_distributions()
    distribution_list = response.get("DistributionList", {})
    records: List[DiscoveryRecord] = []

    for distribution in distribution_list.get("Items", []):
        aliases = distribution.get("Aliases", {}).get("Items", [])
        alias = aliases[0] if aliases else ""
        logger.debug(f"[CloudFront] Distribution {distribution['Id']} alias={alias!r}")
        records.append(
            {
                "{#DISTID}": distribution["Id"],
                "{#DISTALIAS}": alias,
            }
        )

    logger.info(f"[CloudFront] Found {len(records)} distributions")
    return records
