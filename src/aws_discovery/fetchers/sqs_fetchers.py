"""
SQS Resource Fetchers Module.

Queue names are taken from the queue URLs returned by ``list_queues``, which
have the form ``https://sqs.<region>.amazonaws.com/<account>/<name>``. No extra
``get_queue_attributes`` call is made per queue.
"""

from typing import List

from ...utils import fetcher_error_handler, get_logger
from ..types import DiscoveryRecord, SQSClient

logger = get_logger()

QUEUE_NAME_SEGMENT = 4


def parse_queue_name(queue_url: str) -> str:
    """
    Returns the queue name, the 5th "/"-separated segment of a queue URL.

    Raises:
        ValueError: If the URL does not have the expected shape
    """
    segments = queue_url.split("/")
    if len(segments) <= QUEUE_NAME_SEGMENT or not segments[QUEUE_NAME_SEGMENT]:
        raise ValueError(f"Cannot parse queue name from URL: {queue_url!r}")
    return segments[QUEUE_NAME_SEGMENT]


@fetcher_error_handler("listing queues")
def fetch_sqs_queues(sqs_client: SQSClient) -> List[DiscoveryRecord]:
    """
    Discover SQS queues by name.

    Args:
        sqs_client: Boto3 SQS client

    Returns:
        One record per queue with {#SQSNAME}
    """
    response = sqs_client.list_queues()
    records: List[DiscoveryRecord] = []

    # QueueUrls is absent from the response when the region has no queues
    for queue_url in response.get("QueueUrls", []):
        name = parse_queue_name(queue_url)
        logger.debug(f"[SQS] Queue {name} ({queue_url})")
        records.append({"{#SQSNAME}": name})

    logger.info(f"[SQS] Found {len(records)} queues")
    return records
