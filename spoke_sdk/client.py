"""User-facing client for the Spoke helpdesk API.

Example usage:
    from spoke_sdk import SpokeClient

    spoke = SpokeClient(secret_path="general/IT/spoke/it-admin-api-token")

    teams = spoke.list_teams({"q": "Information Technology"}).json()
    spoke.update_team(teams["results"][0]["id"], {"settings": {...}})

Every method returns the httpx.Response. Non-2xx responses raise
httpx.HTTPStatusError; the response (status, headers, JSON body) is on the
exception.
"""

import os
from typing import Any
from urllib.parse import quote

import httpx

from spoke_sdk._internal.credentials import (
    DEFAULT_SECRET_REGION,
    AwsSecretsManagerStore,
    SecretStore,
    TokenResolver,
)
from spoke_sdk._internal.dispatch import RequestDispatcher
from spoke_sdk._internal.dispatch.dispatcher import DEFAULT_TIMEOUT_MS
from spoke_sdk._internal.http import DEFAULT_BASE_URL
from spoke_sdk.exceptions import SpokeConfigError

Params = dict[str, Any]


def _segment(value: str | int) -> str:
    """Percent-encode an identifier as a single path segment.

    Raises:
        ValueError: If the identifier is empty, "." or "..", which would
            resolve to a different endpoint.
    """
    text = str(value)
    if text in ("", ".", ".."):
        raise ValueError(f"invalid identifier for a path segment: {text!r}")
    return quote(text, safe="")


class SpokeClient:
    """Client for the Spoke v1 REST API.

    The API token is either passed in as ``access_token`` or read from a
    secret store at ``secret_path`` on the first request and cached for the
    life of the client.

    See https://askspoke.com/api/reference for request and response schemas.
    """

    def __init__(
        self,
        *,
        access_token: str | None = None,
        secret_path: str | None = None,
        secret_store: SecretStore | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            access_token: Literal Spoke API token.
            secret_path: Secret store path holding the Spoke API token.
            secret_store: Store for ``secret_path``. Defaults to AWS Secrets
                Manager in us-east-1.
            base_url: Spoke API base URL.
            timeout_ms: Request timeout in milliseconds.
            debug: Enable debug logging to stderr.

        Raises:
            SpokeConfigError: If neither or both of ``access_token`` and
                ``secret_path`` are given.
        """
        self._resolver = TokenResolver(
            access_token=access_token,
            secret_path=secret_path,
            secret_store=secret_store,
            debug=debug,
        )
        self._dispatcher = RequestDispatcher(
            self._resolver,
            base_url=base_url,
            timeout_ms=timeout_ms,
            debug=debug,
        )

    @classmethod
    def from_env(cls) -> "SpokeClient":
        """Create a client from environment variables.

        Environment variables (one of the first two is required):
            SPOKE_ACCESS_TOKEN: Literal API token (preferred).
            SPOKE_SECRET_PATH: Secrets Manager path holding the API token.

        Optional environment variables:
            SPOKE_SECRET_REGION: AWS region of the secret (default: us-east-1).
            SPOKE_BASE_URL: API base URL override.
            SPOKE_TIMEOUT_MS: Request timeout in milliseconds.
            SPOKE_DEBUG: Set to "1" to enable debug logging.

        Raises:
            SpokeConfigError: If neither SPOKE_ACCESS_TOKEN nor SPOKE_SECRET_PATH is set.
            ValueError: If SPOKE_TIMEOUT_MS is not an integer.
        """
        access_token = os.environ.get("SPOKE_ACCESS_TOKEN") or None
        # A literal token wins over the secret path
        secret_path = None if access_token else os.environ.get("SPOKE_SECRET_PATH") or None
        if not access_token and not secret_path:
            raise SpokeConfigError("SPOKE_ACCESS_TOKEN or SPOKE_SECRET_PATH must be set")

        secret_store = None
        if secret_path:
            region = os.environ.get("SPOKE_SECRET_REGION", DEFAULT_SECRET_REGION)
            secret_store = AwsSecretsManagerStore(region_name=region)

        return cls(
            access_token=access_token,
            secret_path=secret_path,
            secret_store=secret_store,
            base_url=os.environ.get("SPOKE_BASE_URL") or DEFAULT_BASE_URL,
            timeout_ms=int(os.environ.get("SPOKE_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS))),
            debug=os.environ.get("SPOKE_DEBUG", "") == "1",
        )

    @property
    def secret_path(self) -> str | None:
        return self._resolver.secret_path

    def token(self) -> str:
        """Return the API token, reading the secret store on first use."""
        return self._resolver.resolve()

    # =========================================================================
    # Request types, teams, users
    # =========================================================================

    def list_request_types(self, params: Params | None = None) -> httpx.Response:
        """GET /request_types."""
        return self._dispatcher.call("GET", "request_types", params=params)

    def list_teams(self, params: Params | None = None) -> httpx.Response:
        """GET /teams.

        Args:
            params: Query parameters, e.g. ``{"q": "IT"}``.
        """
        return self._dispatcher.call("GET", "teams", params=params)

    def update_team(self, team_id: str, params: Any) -> httpx.Response:
        """PATCH /teams/{team_id}.

        Args:
            team_id: Spoke team ID.
            params: JSON body, e.g. ``{"settings": {"delegation": {...}}}``.
        """
        return self._dispatcher.call("PATCH", f"teams/{_segment(team_id)}", json=params)

    def list_users(self, params: Params | None = None) -> httpx.Response:
        """GET /users."""
        return self._dispatcher.call("GET", "users", params=params)

    # =========================================================================
    # Requests
    # =========================================================================

    def list_requests(self, params: Params | None = None) -> httpx.Response:
        """GET /requests."""
        return self._dispatcher.call("GET", "requests", params=params)

    def get_request(self, request_id: str) -> httpx.Response:
        """GET /requests/{request_id}."""
        return self._dispatcher.call("GET", f"requests/{_segment(request_id)}")

    def delete_request(self, request_id: str) -> httpx.Response:
        """DELETE /requests/{request_id}."""
        return self._dispatcher.call("DELETE", f"requests/{_segment(request_id)}")

    def post_request(self, request: Any) -> httpx.Response:
        """POST /requests.

        Args:
            request: JSON body. The API requires ``subject`` and ``requester``;
                ``body`` and ``team`` are optional.
        """
        return self._dispatcher.call("POST", "requests", json=request)

    def post_message(self, request_id: str, message: Any) -> httpx.Response:
        """POST /requests/{request_id}/messages.

        Args:
            request_id: Full Spoke request ID (not the permalink number).
            message: JSON body with ``actor`` ({kind, ref}) and
                ``content.message.text``.
        """
        return self._dispatcher.call(
            "POST", f"requests/{_segment(request_id)}/messages", json=message
        )

    def update_request(self, request_id: str, params: Any) -> httpx.Response:
        """PATCH /requests/{request_id}.

        Args:
            request_id: Full Spoke request ID (not the permalink number).
            params: JSON body (subject, owner, status, requestTypeInfo, ...).
        """
        return self._dispatcher.call("PATCH", f"requests/{_segment(request_id)}", json=params)

    # =========================================================================
    # Tags
    # =========================================================================

    def list_tags(self, params: Params | None = None) -> httpx.Response:
        """GET /tags."""
        return self._dispatcher.call("GET", "tags", params=params)

    def add_tags(self, request_id: str, params: Any) -> httpx.Response:
        """PATCH /requests/{request_id}/tags.

        Args:
            request_id: Spoke request ID.
            params: JSON body, e.g. ``{"tags": [{"_id": "..."}]}``.
        """
        return self._dispatcher.call(
            "PATCH", f"requests/{_segment(request_id)}/tags", json=params
        )

    def remove_tags(self, request_id: str, tag_id: str) -> httpx.Response:
        """DELETE /requests/{request_id}/tags/{tag_id}."""
        return self._dispatcher.call(
            "DELETE", f"requests/{_segment(request_id)}/tags/{_segment(tag_id)}"
        )


def get_spoke_client() -> SpokeClient:
    """Get a SpokeClient configured from environment variables.

    Returns:
        A configured SpokeClient instance.
    """
    return SpokeClient.from_env()
