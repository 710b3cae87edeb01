"""
Core discovery orchestration logic.

This module runs one discovery and encodes the result in the envelope Zabbix
low-level discovery expects: ``{"data": [{"{#MACRO}": "value"}, ...]}``.
"""

import json

from ..config import Config
from ..exceptions import OutputEncodingError
from ..utils import get_logger
from .fetchers import get_discovery_records
from .types import DiscoveryResult

logger = get_logger()


def discover(config: Config) -> DiscoveryResult:
    """
    Main entry point for discovery.

    Args:
        config: Validated configuration with discovery type and region

    Returns:
        Discovery result envelope; ``data`` is an empty list when nothing was found

    Raises:
        UnsupportedDiscoveryTypeError: If the discovery type has no fetcher
        FetchError: If the AWS API call fails
    """
    records = get_discovery_records(config.discovery_type, region_name=config.aws_region)
    logger.info(f"{config.discovery_type} discovery returned {len(records)} records")
    return {"data": records}


def render_discovery_result(result: DiscoveryResult, pretty: bool = False) -> str:
    """
    Serialises a discovery result to JSON text.

    Raises:
        OutputEncodingError: If the result is not JSON serialisable
    """
    try:
        if pretty:
            return json.dumps(result, indent=2)
        return json.dumps(result, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise OutputEncodingError(f"encoding discovery result: {e}") from e
