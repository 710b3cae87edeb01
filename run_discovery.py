#!/usr/bin/env python3
"""
Run AWS Zabbix discovery from a checkout without installing the package.

Usage:
    python run_discovery.py -type EC2
    python run_discovery.py -type SQS -aws.region eu-west-1

Intended for Zabbix external checks or UserParameter entries, e.g.:
    UserParameter=aws.discovery[*],/opt/aws-discovery/run_discovery.py -type $1 -aws.region $2
"""

import os
import sys

# Make the src package importable when run from any working directory
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from src.main import main  # noqa: E402

if __name__ == "__main__":
    main()
