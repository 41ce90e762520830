"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_PAGEWALK_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_PAGEWALK_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_PAGEWALK_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def live_settings():
    from pagewalk import ClientSettings

    settings = ClientSettings()
    if settings.api_key is None:
        pytest.skip("PAGEWALK_API_KEY is not set")
    return settings
