"""
Wiring for the classification engine.

Provides singleton instances of expensive resources (provider clients,
prompt builder) and the engine factory used by the host application.
"""

from functools import lru_cache
from pathlib import Path

from civic_triage.config import Settings, settings
from civic_triage.llm.base_client import BaseLLMClient
from civic_triage.llm.openrouter_client import OpenRouterClient
from civic_triage.llm.prompt_builder import PromptBuilder
from civic_triage.llm.sarvam_client import SarvamClient
from civic_triage.orchestration.engine import ClassificationEngine
from civic_triage.orchestration.input_gate import InputGate
from civic_triage.orchestration.selection import OPENROUTER, SARVAM, ProviderSelection
from civic_triage.validation.pipeline import ResponsePipeline


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.

    Returns:
        Settings instance
    """
    return settings


def build_clients(settings: Settings) -> dict[str, BaseLLMClient]:
    """
    Create one client per provider, configured or not.

    Unconfigured clients are never called; keeping them registered makes
    the selection policy the only place that decides who goes first.
    """
    return {
        SARVAM: SarvamClient(
            api_key=settings.SARVAM_API_KEY,
            base_url=settings.SARVAM_BASE_URL,
            model=settings.SARVAM_MODEL,
            vision_model=settings.SARVAM_VISION_MODEL,
            timeout=settings.PROVIDER_TIMEOUT,
            max_tokens=settings.LLM_MAX_TOKENS,
            temperature=settings.LLM_TEMPERATURE,
        ),
        OPENROUTER: OpenRouterClient(
            api_key=settings.OPENROUTER_API_KEY,
            base_url=settings.OPENROUTER_BASE_URL,
            model=settings.OPENROUTER_MODEL,
            vision_model=settings.OPENROUTER_VISION_MODEL,
            timeout=settings.PROVIDER_TIMEOUT,
            max_tokens=settings.LLM_MAX_TOKENS,
            temperature=settings.LLM_TEMPERATURE,
            app_name=settings.APP_NAME,
        ),
    }


def build_prompt_builder(settings: Settings) -> PromptBuilder:
    """Prompt builder using packaged templates unless PROMPT_TEMPLATES_DIR is set."""
    templates_dir = Path(settings.PROMPT_TEMPLATES_DIR) if settings.PROMPT_TEMPLATES_DIR else None
    return PromptBuilder(
        templates_dir=templates_dir,
        description_limit=settings.DESCRIPTION_MAX_LENGTH,
        default_temperature=settings.LLM_TEMPERATURE,
        default_max_tokens=settings.LLM_MAX_TOKENS,
    )


def build_engine(settings: Settings) -> ClassificationEngine:
    """
    Create a fully wired engine.

    Credentials are read once here; the engine gets an immutable
    ProviderSelection and never looks at the environment again.
    """
    return ClassificationEngine(
        clients=build_clients(settings),
        selection=ProviderSelection.from_settings(settings),
        prompt_builder=build_prompt_builder(settings),
        pipeline=ResponsePipeline(),
        input_gate=InputGate(min_description_length=settings.MIN_DESCRIPTION_LENGTH),
    )


@lru_cache()
def get_engine() -> ClassificationEngine:
    """
    Get the process-wide engine singleton.

    Safe to share: the engine keeps no per-request state and the clients
    pool their HTTP connections.
    """
    return build_engine(get_settings())
