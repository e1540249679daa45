"""Redaction of sensitive values before they reach debug output."""

from collections.abc import Mapping
from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "api-key",
    "api_key",
    "apikey",
    "token",
    "secret",
    "password",
    "authorization",
    "private_key",
    "credentials",
})

REDACTED_VALUE = "[REDACTED]"


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of ``headers`` with credential headers replaced."""
    return {
        key: REDACTED_VALUE if key.lower() in REDACT_KEYS else value
        for key, value in headers.items()
    }


def redact_payload(payload: Any) -> Any:
    """Recursively redact sensitive keys from a query or JSON payload.

    The original payload is never mutated.

    Args:
        payload: Dict, list or scalar to redact.

    Returns:
        A new structure with sensitive values replaced by "[REDACTED]".
    """
    if isinstance(payload, dict):
        result = {}
        for key, value in payload.items():
            key_lower = key.lower() if isinstance(key, str) else key
            if key_lower in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = redact_payload(value)
        return result
    elif isinstance(payload, list):
        return [redact_payload(item) for item in payload]
    else:
        return payload
