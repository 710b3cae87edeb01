"""
AWS Resource Fetchers Package.

This package contains service-specific modules that turn AWS list/describe
responses into Zabbix discovery records. Each module handles one AWS service.
"""

from .base import (
    DISCOVERY_TYPES,
    get_discovery_records,
    get_supported_discovery_types,
)

__all__ = [
    "DISCOVERY_TYPES",
    "get_discovery_records",
    "get_supported_discovery_types",
]
