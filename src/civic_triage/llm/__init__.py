"""
LLM client abstraction and implementations.

Components:
- BaseLLMClient: Shared chat-completion call (single attempt, fixed timeout)
- SarvamClient: Sarvam AI (api-subscription-key auth)
- OpenRouterClient: OpenRouter (bearer auth, separate vision model)
- PromptBuilder: Renders the classification prompt
- text_utils: Truncation, JSON extraction, gibberish heuristics
- exceptions: LLM-specific exceptions
"""

from civic_triage.llm.base_client import BaseLLMClient
from civic_triage.llm.sarvam_client import SarvamClient
from civic_triage.llm.openrouter_client import OpenRouterClient
from civic_triage.llm.prompt_builder import PromptBuilder
from civic_triage.llm.exceptions import (
    LLMClientError,
    LLMNotConfiguredError,
    LLMConnectionError,
    LLMTimeoutError,
    LLMGenerationError,
    LLMAuthenticationError,
    LLMRateLimitError,
)

__all__ = [
    "BaseLLMClient",
    "SarvamClient",
    "OpenRouterClient",
    "PromptBuilder",
    "LLMClientError",
    "LLMNotConfiguredError",
    "LLMConnectionError",
    "LLMTimeoutError",
    "LLMGenerationError",
    "LLMAuthenticationError",
    "LLMRateLimitError",
]
