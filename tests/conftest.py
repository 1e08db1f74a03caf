"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import json

import pytest

from civic_triage.config import Settings
from civic_triage.orchestration.selection import OPENROUTER, SARVAM, ProviderSelection


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with both providers configured and no .env lookup.

    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            settings = test_settings.model_copy(update={"SARVAM_API_KEY": None})
    """
    return Settings(
        _env_file=None,
        # === Application ===
        APP_NAME="Civic Complaint Classifier (Test)",
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",

        # === Providers ===
        SARVAM_API_KEY="sk-sarvam-test",
        OPENROUTER_API_KEY="sk-or-test",
        PREFERRED_PROVIDER="sarvam",

        # === Generation ===
        PROVIDER_TIMEOUT=30.0,
        LLM_TEMPERATURE=0.1,
        LLM_MAX_TOKENS=500,
    )


@pytest.fixture
def both_configured() -> ProviderSelection:
    """Sarvam preferred, both providers have keys."""
    return ProviderSelection(preferred=SARVAM, configured=frozenset({SARVAM, OPENROUTER}))


@pytest.fixture
def none_configured() -> ProviderSelection:
    """No provider has a key."""
    return ProviderSelection(preferred=SARVAM, configured=frozenset())


@pytest.fixture
def pothole_json() -> str:
    """Model answer for the canonical pothole complaint."""
    return json.dumps({
        "classifiable": True,
        "category": "ROAD_DAMAGE",
        "severity": "HIGH",
        "department": "PUBLIC_WORKS",
    })


@pytest.fixture
def not_a_complaint_json() -> str:
    """Model answer rejecting a non-civic submission, with noisy extra fields."""
    return json.dumps({
        "classifiable": False,
        "category": "NOT_A_COMPLAINT",
        "severity": "HIGH",
        "department": "PUBLIC_WORKS",
    })


@pytest.fixture
def default_json() -> str:
    """The all-defaults answer a silently degraded provider gives."""
    return json.dumps({
        "classifiable": True,
        "category": "OTHER",
        "severity": "MEDIUM",
        "department": "OTHER",
    })
