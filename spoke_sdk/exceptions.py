"""Public exceptions for the Spoke SDK.

Secret-store, transport and HTTP status errors are not wrapped: they reach
the caller as the botocore/httpx exceptions that were raised.
"""


class SpokeError(Exception):
    """Base exception for all Spoke SDK errors."""


class SpokeConfigError(SpokeError):
    """Configuration error (missing or conflicting credentials, bad env vars)."""
