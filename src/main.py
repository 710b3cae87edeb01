"""
Command-line entry point for AWS Zabbix discovery.

Prints a Zabbix low-level discovery document for one AWS resource type to
stdout. AWS credentials come from the standard boto3 chain (AWS CLI config,
environment variables or an instance role).

Usage:
    aws-discovery -type EC2
    aws-discovery -type ECSServices -aws.region us-east-1
    aws-discovery --type SQS --region eu-west-1 --log-level DEBUG
"""

import argparse
import sys
from typing import List, Optional

from .aws_discovery import discover, render_discovery_result
from .aws_discovery.fetchers import get_supported_discovery_types
from .config import DEFAULT_REGION, LOG_LEVELS, load_config
from .exceptions import DiscoveryError
from .utils import setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Builds the argument parser; the single-dash flags match existing Zabbix item keys."""
    supported = ", ".join(get_supported_discovery_types())
    parser = argparse.ArgumentParser(
        prog="aws-discovery",
        description="Discover AWS resources for Zabbix low-level discovery",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  aws-discovery -type EC2
  aws-discovery -type ECSServices -aws.region us-east-1
        """,
    )

    parser.add_argument(
        "-type",
        "--type",
        dest="discovery_type",
        help=f"Type of discovery: {supported}",
    )

    parser.add_argument(
        "-aws.region",
        "--aws.region",
        "--region",
        dest="aws_region",
        default=None,
        help=f"AWS region (default: {DEFAULT_REGION})",
    )

    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Logging level for stderr diagnostics (default: LOG_LEVEL or WARNING)",
    )

    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Indent the JSON output",
    )

    parser.add_argument(
        "--list-types",
        action="store_true",
        help="Print the supported discovery types and exit",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the command-line discovery."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_types:
        for discovery_type in get_supported_discovery_types():
            print(discovery_type)
        sys.exit(0)

    if not args.discovery_type:
        parser.error("the following arguments are required: -type")

    try:
        config = load_config(
            args.discovery_type,
            aws_region=args.aws_region,
            log_level=args.log_level,
            pretty=args.pretty,
        )
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    logger = setup_logging(config.log_level)
    logger.info(f"Starting {config.discovery_type} discovery in {config.aws_region}")

    try:
        result = discover(config)
        output = render_discovery_result(result, pretty=config.pretty)
    except (DiscoveryError, ValueError) as e:
        logger.debug("Discovery failed", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    print(output)
    sys.exit(0)


if __name__ == "__main__":
    main()
