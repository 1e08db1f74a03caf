"""
Configuration settings for the civic complaint classification engine.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development (see .env.example).
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    APP_NAME: str = "Civic Complaint Classifier"
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    # === Provider credentials (presence drives provider selection) ===
    SARVAM_API_KEY: Optional[str] = None
    OPENROUTER_API_KEY: Optional[str] = None
    PREFERRED_PROVIDER: str = "sarvam"  # "sarvam" or "openrouter"

    # === Sarvam ===
    SARVAM_BASE_URL: str = "https://api.sarvam.ai/v1"
    SARVAM_MODEL: str = "sarvam-m"
    SARVAM_VISION_MODEL: str = "sarvam-m"

    # === OpenRouter ===
    OPENROUTER_BASE_URL: str = "https://openrouter.ai/api/v1"
    OPENROUTER_MODEL: str = "deepseek/deepseek-chat"
    OPENROUTER_VISION_MODEL: str = "google/gemini-2.0-flash-001"

    # === LLM Generation Parameters ===
    PROVIDER_TIMEOUT: float = 30.0  # seconds, single attempt
    LLM_TEMPERATURE: float = 0.1  # Low for determinism
    LLM_MAX_TOKENS: int = 500

    # === Input Processing ===
    MIN_DESCRIPTION_LENGTH: int = 10  # chars, description-only submissions
    DESCRIPTION_MAX_LENGTH: int = 2000  # chars, same cap as the intake form
    PROMPT_TEMPLATES_DIR: Optional[str] = None  # None = packaged templates



# Global settings instance
settings = Settings()
