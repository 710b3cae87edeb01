"""
EC2 Resource Fetchers Module.

This module contains functions for discovering EC2 instances.
"""

from typing import Dict, List, Optional

from ...utils import fetcher_error_handler, get_logger
from ..types import DiscoveryRecord, EC2Client

logger = get_logger()


def extract_name_tag(tags: Optional[List[Dict[str, str]]]) -> str:
    """
    Returns the value of the first tag whose key is exactly "Name".

    Instances without tags, or without a Name tag, get an empty string.
    """
    for tag in tags or []:
        if tag.get("Key") == "Name":
            return str(tag.get("Value", ""))
    return ""


@fetcher_error_handler("getting EC2 instances")
def fetch_ec2_instances(ec2_client: EC2Client) -> List[DiscoveryRecord]:
    """
    Discover all EC2 instances in the client's region.

    Instances are flattened across reservations, in the order AWS returns them.

    Args:
        ec2_client: Boto3 EC2 client

    Returns:
        One record per instance with {#INSTANCEID} and {#INSTANCENAME}
    """
    response = ec2_client.describe_instances()
    records: List[DiscoveryRecord] = []

    for reservation in response.get("Reservations", []):
        for instance in reservation.get("Instances", []):
            instance_id = instance["InstanceId"]
            name = extract_name_tag(instance.get("Tags"))
            logger.debug(f"[EC2] Instance {instance_id} name={name!r}")
            records.append(
                {
                    "{#INSTANCEID}": instance_id,
                    "{#INSTANCENAME}": name,
                }
            )

    logger.info(f"[EC2] Found {len(records)} instances")
    return records
