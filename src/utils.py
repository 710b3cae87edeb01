"""
Utility functions for AWS Zabbix discovery.
"""

import functools
import logging
from typing import Callable, List, TypeVar, cast

from botocore.exceptions import BotoCoreError, ClientError

from .exceptions import FetchError


def setup_logging(log_level: str = "WARNING") -> logging.Logger:
    """
    Sets up logging configuration for the discovery tool.

    Log records go to stderr; stdout is reserved for the discovery JSON.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("aws_discovery")
    logger.setLevel(getattr(logging, log_level.upper()))

    # Prevent duplicate handlers
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger() -> logging.Logger:
    """Returns the shared tool logger without touching its level."""
    return logging.getLogger("aws_discovery")


F = TypeVar("F", bound=Callable[..., List])


def fetcher_error_handler(description: str) -> Callable[[F], F]:
    """
    Decorator for consistent error handling and logging in AWS resource fetchers.

    Catches AWS ClientError and BotoCoreError (credentials, endpoint, network),
    logs them at DEBUG and re-raises as FetchError prefixed with ``description``,
    e.g. "getting EC2 instances: <cause>". Every fetch failure is fatal to the
    run, so nothing is swallowed here.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: object, **kwargs: object) -> List:
            logger = get_logger()
            try:
                return func(*args, **kwargs)
            except ClientError as e:
                code = e.response.get("Error", {}).get("Code", "")
                logger.debug(f"AWS ClientError ({code}) in {func.__name__}: {e}")
                raise FetchError(description, e) from e
            except BotoCoreError as e:
                logger.debug(f"AWS error in {func.__name__}: {e}")
                raise FetchError(description, e) from e

        return cast(F, wrapper)

    return decorator
