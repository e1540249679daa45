"""Tests for redaction logic."""

from spoke_sdk._internal.dispatch.redaction import (
    REDACTED_VALUE,
    redact_headers,
    redact_payload,
)


class TestRedactHeaders:
    """Tests for redact_headers function."""

    def test_redacts_api_key_header(self):
        """Should redact the Api-Key header regardless of case."""
        result = redact_headers({"Api-Key": "tok-1", "accept": "application/json"})
        assert result["Api-Key"] == REDACTED_VALUE
        assert result["accept"] == "application/json"

    def test_redacts_lowercase_and_authorization(self):
        """Should redact lower-case and Authorization headers."""
        result = redact_headers({"api-key": "tok", "Authorization": "Bearer x"})
        assert result == {"api-key": REDACTED_VALUE, "Authorization": REDACTED_VALUE}


class TestRedactPayload:
    """Tests for redact_payload function."""

    def test_redacts_sensitive_keys(self):
        """Should redact sensitive keys and keep the rest."""
        payload = {"api_key": "key1", "password": "p", "subject": "Laptop broken"}
        result = redact_payload(payload)
        assert result["api_key"] == REDACTED_VALUE
        assert result["password"] == REDACTED_VALUE
        assert result["subject"] == "Laptop broken"

    def test_redacts_nested_structures(self):
        """Should redact inside nested dicts and lists."""
        payload = {"tags": [{"_id": "t1", "token": "x"}], "actor": {"secret": "s"}}
        result = redact_payload(payload)
        assert result["tags"][0] == {"_id": "t1", "token": REDACTED_VALUE}
        assert result["actor"]["secret"] == REDACTED_VALUE

    def test_does_not_mutate_original(self):
        """Should leave the input untouched."""
        payload = {"config": {"token": "original"}}
        redact_payload(payload)
        assert payload["config"]["token"] == "original"

    def test_passes_through_scalars_and_none(self):
        """Should return non-container values unchanged."""
        assert redact_payload(None) is None
        assert redact_payload("text") == "text"
        assert redact_payload(42) == 42
