"""
Exceptions raised while running a discovery.

All of them are fatal: the CLI reports the message on stderr and exits
non-zero without writing any JSON.
"""


class DiscoveryError(Exception):
    """Base class for discovery failures."""


class UnsupportedDiscoveryTypeError(DiscoveryError):
    """Raised when the requested discovery type has no fetcher."""

    def __init__(self, discovery_type: str) -> None:
        self.discovery_type = discovery_type
        super().__init__(f"discovery type {discovery_type} not supported")


class FetchError(DiscoveryError):
    """Raised when the AWS API call behind a fetcher fails."""

    def __init__(self, description: str, cause: Exception) -> None:
        self.description = description
        self.cause = cause
        super().__init__(f"{description}: {cause}")


class OutputEncodingError(DiscoveryError):
    """Raised when the discovery result cannot be serialised to JSON."""
