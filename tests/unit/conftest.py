"""Unit test fixtures (mocks and stubs).

Provides mock provider clients so the engine can be tested without network access.
"""

from typing import Any, Iterable, Optional
from unittest.mock import AsyncMock, Mock

import pytest

from civic_triage.llm.prompt_builder import PromptBuilder
from civic_triage.models.llm_models import LLMGenerationResponse


MODELS = {
    "sarvam": ("sarvam-m", "sarvam-m"),
    "openrouter": ("deepseek/deepseek-chat", "google/gemini-2.0-flash-001"),
}


@pytest.fixture
def create_llm_response():
    """Factory fixture to create LLMGenerationResponse with custom content.

    Usage:
        def test_something(create_llm_response):
            response = create_llm_response('{"category": "ROAD_DAMAGE"}', provider="openrouter")
    """
    def _create(content: str, provider: str = "sarvam") -> LLMGenerationResponse:
        return LLMGenerationResponse(
            content=content,
            provider=provider,
            model_version=MODELS[provider][0],
            finish_reason="stop",
            prompt_tokens=900,
            completion_tokens=40,
            latency_ms=1200,
            raw_metadata={},
        )

    return _create


@pytest.fixture
def create_mock_client(create_llm_response):
    """Factory fixture for a mock provider client.

    ``outcomes`` is consumed one item per ``generate`` call: strings become
    provider responses, exceptions are raised.

    Usage:
        def test_something(create_mock_client):
            sarvam = create_mock_client("sarvam", [LLMTimeoutError("timeout")])
    """
    def _create(provider: str, outcomes: Optional[Iterable[Any]] = None) -> AsyncMock:
        model, vision_model = MODELS[provider]
        mock = AsyncMock()
        mock.provider_name = provider
        mock.model = model
        mock.vision_model = vision_model
        mock.is_configured = True
        mock.model_for = Mock(side_effect=lambda has_image: vision_model if has_image else model)

        side_effect = [
            create_llm_response(item, provider=provider) if isinstance(item, str) else item
            for item in (outcomes or [])
        ]
        mock.generate = AsyncMock(side_effect=side_effect)
        mock.close = AsyncMock()
        return mock

    return _create


@pytest.fixture
def prompt_builder() -> PromptBuilder:
    """PromptBuilder using the packaged template."""
    return PromptBuilder()

