"""
Package: delivery
Description: Delivery of log bulks and tags to Coralogix.

Provides the single-attempt HTTP client for the logs and tags APIs.
"""

from .client import FALLBACK_HOST_NAME, CoralogixClient, resolve_host_name

__all__ = [
    "CoralogixClient",
    "FALLBACK_HOST_NAME",
    "resolve_host_name",
]
