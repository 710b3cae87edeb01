"""
Lambda Resource Fetchers Module.
"""

from typing import List

from ...utils import fetcher_error_handler, get_logger
from ..types import DiscoveryRecord, LambdaClient

logger = get_logger()


@fetcher_error_handler("listing lambdas")
def fetch_lambda_functions(lambda_client: LambdaClient) -> List[DiscoveryRecord]:
    """
    Discover Lambda functions by name.

    Args:
        lambda_client: Boto3 Lambda client

    Returns:
        One record per function with {#FUNCTIONNAME}
    """
    response = lambda_client.list_functions()
    records: List[DiscoveryRecord] = []

    for function in response.get("Functions", []):
        logger.debug(f"[Lambda] Function {function['FunctionName']}")
        records.append({"{#FUNCTIONNAME}": function["FunctionName"]})

    logger.info(f"[Lambda] Found {len(records)} functions")
    return records
