"""
Type definitions for AWS Zabbix discovery.
"""

# boto3 does not ship static type stubs for service clients and their methods
# are generated at runtime, so client aliases are Any.
from typing import Any, Callable, Dict, List, Optional

EC2Client = Any
RDSClient = Any
CloudFrontClient = Any
ELBClient = Any
ECSClient = Any
LambdaClient = Any
SQSClient = Any
APIGatewayClient = Any

# One discovered resource, keyed by Zabbix LLD macro, e.g. {"{#INSTANCEID}": "i-0abc"}
DiscoveryRecord = Dict[str, str]

# Envelope printed on stdout: {"data": [...]}
DiscoveryResult = Dict[str, Optional[List[DiscoveryRecord]]]

Fetcher = Callable[[Any], List[DiscoveryRecord]]
