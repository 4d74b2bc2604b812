"""Shared test fixtures for claimcheck."""

import time
from collections.abc import Callable
from typing import Any

import pytest

from helpers import (
    CLIENT_ID,
    ISSUER,
    POOL_ID,
    REGION,
    FakeJWKSEndpoint,
    SigningKey,
    generate_signing_key,
)


@pytest.fixture(scope="session")
def signing_key() -> SigningKey:
    return generate_signing_key("kid-primary")


@pytest.fixture(scope="session")
def second_key() -> SigningKey:
    return generate_signing_key("kid-secondary")


@pytest.fixture(scope="session")
def unpublished_key() -> SigningKey:
    return generate_signing_key("kid-unpublished")


@pytest.fixture
def claims() -> dict[str, Any]:
    """A currently valid access-token payload."""
    now = int(time.time())
    return {
        "sub": "807aa0ed-875f-4406-959e-158880091ffc",
        "token_use": "access",
        "auth_time": now - 60,
        "iss": ISSUER,
        "exp": now + 3600,
        "iat": now - 60,
        "username": "gson",
        "client_id": CLIENT_ID,
        "name": "gson",
    }


@pytest.fixture
def jwks_endpoint(
    signing_key: SigningKey, second_key: SigningKey
) -> FakeJWKSEndpoint:
    return FakeJWKSEndpoint(keys=[signing_key, second_key])


@pytest.fixture
def fixed_clock() -> Callable[[int], Callable[[], float]]:
    """Build a clock pinned to a given epoch second."""

    def _make(epoch: int) -> Callable[[], float]:
        return lambda: float(epoch)

    return _make


@pytest.fixture(autouse=True)
def _set_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set environment variables for test settings."""
    monkeypatch.setenv("CLAIMCHECK_REGION", REGION)
    monkeypatch.setenv("CLAIMCHECK_USER_POOL_ID", POOL_ID)
    monkeypatch.setenv("CLAIMCHECK_LOG_JSON", "false")
