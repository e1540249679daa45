"""API token resolution for the Spoke client.

The token is either passed in literally or read once from AWS Secrets Manager
and kept on the resolver for the rest of its life.
"""

import sys
from typing import Any, Protocol

import boto3

from spoke_sdk.exceptions import SpokeConfigError

DEFAULT_SECRET_REGION = "us-east-1"


class SecretStore(Protocol):
    """Key-value secret store keyed by a string path."""

    def get_secret(self, secret_id: str) -> str: ...


class AwsSecretsManagerStore:
    """Secret store backed by AWS Secrets Manager.

    The boto3 client is created on first read so that building a store never
    touches AWS credentials or the network.
    """

    def __init__(self, *, region_name: str = DEFAULT_SECRET_REGION) -> None:
        self._region_name = region_name
        self._client: Any = None

    @property
    def region_name(self) -> str:
        return self._region_name

    def get_secret(self, secret_id: str) -> str:
        """Return the SecretString stored under ``secret_id``.

        botocore errors (not found, access denied, endpoint errors) are
        raised unchanged.

        Raises:
            SpokeConfigError: If the secret has no SecretString (binary secret).
        """
        if self._client is None:
            self._client = boto3.client("secretsmanager", region_name=self._region_name)
        data = self._client.get_secret_value(SecretId=secret_id)
        if "SecretString" not in data:
            raise SpokeConfigError(f"Secret {secret_id} has no SecretString value")
        return data["SecretString"]


class TokenResolver:
    """Resolves the Spoke API token, reading the secret store at most once."""

    def __init__(
        self,
        *,
        access_token: str | None = None,
        secret_path: str | None = None,
        secret_store: SecretStore | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the resolver.

        Args:
            access_token: Literal API token. No secret store is used.
            secret_path: Secret store path holding the API token.
            secret_store: Store used for ``secret_path`` lookups. Defaults to
                AWS Secrets Manager in us-east-1.
            debug: Enable debug logging to stderr.

        Raises:
            SpokeConfigError: If neither or both of ``access_token`` and
                ``secret_path`` are given.
        """
        if access_token and secret_path:
            raise SpokeConfigError("Pass either access_token or secret_path, not both")
        if not access_token and not secret_path:
            raise SpokeConfigError("An access_token or a secret_path is required")

        self._access_token = access_token
        self._secret_path = secret_path
        self._secret_store = secret_store
        self._debug = debug
        self._token: str | None = access_token

    @property
    def secret_path(self) -> str | None:
        return self._secret_path

    @property
    def cached(self) -> bool:
        """Check if a token is held without further I/O."""
        return self._token is not None

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[spoke-sdk] {message}", file=sys.stderr)

    def _store(self) -> SecretStore:
        if self._secret_store is None:
            self._secret_store = AwsSecretsManagerStore()
        return self._secret_store

    def resolve(self) -> str:
        """Return the API token.

        Returns:
            The literal token, the cached token, or the value read from the
            secret store on the first call.
        """
        if self._token is not None:
            return self._token

        self._log_debug(f"Reading API token from secret {self._secret_path}")
        token = self._store().get_secret(self._secret_path)  # type: ignore[arg-type]
        self._token = token
        return token
