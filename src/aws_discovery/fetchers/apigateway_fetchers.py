"""
API Gateway Resource Fetchers Module.
"""

from typing import List

from ...utils import fetcher_error_handler, get_logger
from ..types import APIGatewayClient, DiscoveryRecord

logger = get_logger()


@fetcher_error_handler("listing api gateways")
def fetch_api_keys(apigateway_client: APIGatewayClient) -> List[DiscoveryRecord]:
    """
    Discover API Gateway API keys by name.

    Args:
        apigateway_client: Boto3 API Gateway client

    Returns:
        One record per API key with {#APINAME}
    """
    response = apigateway_client.get_api_keys()
    records: List[DiscoveryRecord] = [
        {"{#APINAME}": api_key.get("name", "")} for api_key in response.get("items", [])
    ]

    logger.info(f"[API Gateway] Found {len(records)} API keys")
    return records
