"""Spoke SDK for Python.

A thin client for the Spoke helpdesk API (requests, request types, teams,
users, tags).

Public API:
    SpokeClient - Client for the Spoke v1 REST API
    get_spoke_client - SpokeClient configured from environment variables
"""

from spoke_sdk._version import __version__
from spoke_sdk.client import SpokeClient, get_spoke_client
from spoke_sdk.exceptions import SpokeConfigError, SpokeError

__all__ = [
    "__version__",
    "SpokeClient",
    "get_spoke_client",
    "SpokeError",
    "SpokeConfigError",
]
