"""
AWS Zabbix Discovery Package.

This package lists AWS resources of one type in one region and reshapes them
into Zabbix low-level discovery records. Supported types: EC2, RDS,
CloudFront, ELB, ECSClusters, ECSServices, Lambda, SQS and API.

The discovery process:
1. Resolves the discovery type to a fetcher
2. Creates a region-scoped boto3 client for the fetcher's service
3. Issues the list/describe call and maps each item to a flat record
4. Wraps the records as {"data": [...]} for output
"""

from .core import discover, render_discovery_result

__all__ = ["discover", "render_discovery_result"]
