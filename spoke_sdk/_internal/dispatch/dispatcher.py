"""Request dispatcher for the Spoke API."""

import sys
from typing import Any

import httpx

from spoke_sdk._internal.credentials import TokenResolver
from spoke_sdk._internal.dispatch.models import RequestContext
from spoke_sdk._internal.dispatch.redaction import redact_headers, redact_payload
from spoke_sdk._internal.http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, create_http_client

DEFAULT_TIMEOUT_MS = int(DEFAULT_TIMEOUT * 1000)


class RequestDispatcher:
    """Sends one request per call to the Spoke API.

    Every call builds its own RequestContext and its own httpx.Client, so
    nothing about one call is visible to another. Errors are not handled
    here: secret-store failures, transport errors and non-2xx responses
    (as httpx.HTTPStatusError) are raised to the caller unchanged.
    """

    def __init__(
        self,
        resolver: TokenResolver,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            resolver: Source of the API token.
            base_url: API base URL every path is joined onto.
            timeout_ms: Request timeout in milliseconds.
            debug: Enable debug logging to stderr.
        """
        self._resolver = resolver
        self._base_url = base_url
        self._timeout_ms = timeout_ms
        self._debug = debug

    @property
    def base_url(self) -> str:
        return self._base_url

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[spoke-sdk] {message}", file=sys.stderr)

    def call(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> httpx.Response:
        """Issue exactly one request against the Spoke API.

        Args:
            method: HTTP verb.
            path: Path relative to the base URL, identifiers already substituted.
            params: Optional query parameters.
            json: Optional JSON body (dict, list or pydantic model).

        Returns:
            The httpx.Response, unmodified.

        Raises:
            httpx.HTTPStatusError: The API answered with a non-2xx status.
            httpx.TransportError: The request could not be completed.
        """
        context = RequestContext(method=method, path=path, params=params, json_body=json)
        return self.send(context)

    def send(self, context: RequestContext) -> httpx.Response:
        """Send a prepared RequestContext. See ``call``."""
        token = self._resolver.resolve()

        with create_http_client(
            token, timeout=self._timeout_ms / 1000, base_url=self._base_url
        ) as client:
            self._log_debug(
                f"{context.method} {context.path} "
                f"headers={redact_headers(client.headers)} "
                f"params={redact_payload(context.params)} "
                f"json={redact_payload(context.json_body)}"
            )
            response = client.request(
                context.method,
                context.path,
                params=context.params,
                json=context.json_body,
            )
            self._log_debug(f"{context.method} {context.path} -> {response.status_code}")
            response.raise_for_status()
            return response
