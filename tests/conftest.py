"""Shared fixtures for Spoke SDK tests."""

import pytest


class FakeSecretStore:
    """In-memory secret store that records every read."""

    def __init__(self, secrets: dict[str, str] | None = None, error: Exception | None = None):
        self.secrets = secrets or {}
        self.error = error
        self.reads: list[str] = []

    def get_secret(self, secret_id: str) -> str:
        self.reads.append(secret_id)
        if self.error is not None:
            raise self.error
        return self.secrets[secret_id]


@pytest.fixture
def secret_store() -> FakeSecretStore:
    return FakeSecretStore({"path/to/secret": "tok-2"})
