"""
RDS Resource Fetchers Module.

This module contains functions for discovering RDS database instances.
"""

from typing import List

from ...utils import fetcher_error_handler, get_logger
from ..types import DiscoveryRecord, RDSClient

logger = get_logger()


@fetcher_error_handler("getting RDS instances")
def fetch_rds_instances(rds_client: RDSClient) -> List[DiscoveryRecord]:
    """
    Discover RDS database instances.

    Args:
        rds_client: Boto3 RDS client

    Returns:
        One record per instance with {#RDSIDENTIFIER} and {#RDSDBNAME}
    """
    response = rds_client.describe_db_instances()
    records: List[DiscoveryRecord] = []

    for db_instance in response.get("DBInstances", []):
        # DBName is only present when a database was created with the instance
        records.append(
            {
                "{#RDSIDENTIFIER}": db_instance["DBInstanceIdentifier"],
                "{#RDSDBNAME}": db_instance.get("DBName") or "",
            }
        )

    logger.info(f"[RDS] Found {len(records)} DB instances")
    return records
