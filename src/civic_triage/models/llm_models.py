"""
LLM-specific data models for request/response cycle.

These models are internal to the LLM layer and handle the raw communication
with the chat-completion providers (Sarvam, OpenRouter). They are separate
from the business models (ClassificationResult) so provider details never
leak into what gets persisted.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, ConfigDict


class LLMGenerationRequest(BaseModel):
    """
    Internal request model for LLM generation.

    Provider-neutral: each client turns it into its own chat-completion payload.
    When ``image_url`` is set the client sends a multimodal message.
    """
    model_config = ConfigDict(frozen=True)

    prompt: str = Field(..., description="Rendered classification prompt")
    model: str = Field(..., description="Model name/identifier (e.g., 'sarvam-m')")
    temperature: float = Field(default=0.1, ge=0.0, le=2.0, description="Sampling temperature")
    max_tokens: int = Field(default=500, ge=1, le=8192, description="Maximum tokens to generate")
    image_url: Optional[str] = Field(default=None, description="Image reference for vision models")


class LLMGenerationResponse(BaseModel):
    """
    Internal response model from LLM generation.

    Contains the raw generated text plus metadata for the audit log.
    Parsing and normalization of the content happen in the validation layer.
    """
    model_config = ConfigDict(frozen=True)

    content: str = Field(..., description="Generated text (expected to contain one JSON object)")
    provider: str = Field(..., description="Provider that produced the response")
    model_version: str = Field(..., description="Model reported by the provider")
    finish_reason: Optional[str] = Field(default=None, description="Why generation stopped")
    prompt_tokens: Optional[int] = Field(default=None, description="Tokens in prompt")
    completion_tokens: Optional[int] = Field(default=None, description="Tokens in completion")
    latency_ms: int = Field(..., ge=0, description="Round-trip latency in milliseconds")
    raw_metadata: Dict[str, Any] = Field(
        default_factory=dict,
        description="Provider-specific metadata (for debugging)"
    )
