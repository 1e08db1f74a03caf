"""Integration test fixtures (provider credentials).

Integration tests call the real provider APIs and are skipped unless the
matching API key is set in the environment or .env.
"""

import pytest

from civic_triage.config import Settings


@pytest.fixture(scope="session")
def live_settings() -> Settings:
    return Settings()


@pytest.fixture
def require_sarvam(live_settings):
    if not live_settings.SARVAM_API_KEY:
        pytest.skip("SARVAM_API_KEY not set")


@pytest.fixture
def require_openrouter(live_settings):
    if not live_settings.OPENROUTER_API_KEY:
        pytest.skip("OPENROUTER_API_KEY not set")
