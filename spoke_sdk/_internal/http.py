"""Shared HTTP client configuration."""

import httpx

from spoke_sdk._version import __version__

DEFAULT_BASE_URL = "https://api.askspoke.com/api/v1/"
DEFAULT_TIMEOUT = 30.0
API_KEY_HEADER = "Api-Key"


def create_http_client(
    token: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    base_url: str | None = None,
) -> httpx.Client:
    """Create configured HTTP client.

    Args:
        token: Spoke API token sent in the Api-Key header.
        timeout: Request timeout in seconds.
        base_url: Optional base URL override. Defaults to the Spoke v1 API.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout,
        base_url=base_url or DEFAULT_BASE_URL,
        follow_redirects=True,
        headers={
            API_KEY_HEADER: token,
            "Accept": "application/json",
            "User-Agent": f"spoke-sdk/{__version__}",
        },
    )
