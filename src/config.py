"""
Configuration loader for AWS Zabbix discovery.
"""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_REGION = "eu-central-1"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class Config:
    """Configuration class for one discovery run."""

    discovery_type: str
    aws_region: str = DEFAULT_REGION
    log_level: str = DEFAULT_LOG_LEVEL
    pretty: bool = False


def load_config(
    discovery_type: Optional[str],
    aws_region: Optional[str] = None,
    log_level: Optional[str] = None,
    pretty: bool = False,
) -> Config:
    """
    Loads and validates configuration for a discovery run.

    Values passed explicitly (from the command line) win over the environment.

    Args:
        discovery_type: Discovery type selector, e.g. "EC2"
        aws_region: AWS region; falls back to AWS_DISCOVERY_REGION, then eu-central-1
        log_level: Logging level; falls back to LOG_LEVEL, then WARNING
        pretty: Indent the JSON output

    Returns:
        Config object with validated settings

    Raises:
        ValueError: If required configuration is missing or invalid
    """
    if not discovery_type:
        raise ValueError("discovery type is required")

    if aws_region is None:
        aws_region = os.environ.get("AWS_DISCOVERY_REGION", DEFAULT_REGION)
    if not aws_region:
        raise ValueError("AWS region must not be empty")

    if log_level is None:
        log_level = os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    log_level = log_level.upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(
            f"Invalid log level '{log_level}', expected one of {', '.join(LOG_LEVELS)}"
        )

    return Config(
        discovery_type=discovery_type,
        aws_region=aws_region,
        log_level=log_level,
        pretty=pretty,
    )
