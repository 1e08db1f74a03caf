"""
Base client for chat-completion providers.

Both providers expose an OpenAI-style ``POST /chat/completions`` endpoint,
so the request/response handling lives here and subclasses only supply
credentials, headers and defaults. This abstraction keeps provider details
out of the orchestrator and the validation pipeline.
"""

import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import httpx
import structlog

from civic_triage.llm.exceptions import (
    LLMAuthenticationError,
    LLMConnectionError,
    LLMGenerationError,
    LLMNotConfiguredError,
    LLMRateLimitError,
    LLMTimeoutError,
)
from civic_triage.models.llm_models import LLMGenerationRequest, LLMGenerationResponse
from civic_triage.monitoring.metrics import llm_latency_seconds, llm_tokens_total


logger = structlog.get_logger(__name__)


class BaseLLMClient(ABC):
    """
    Abstract base class for chat-completion provider clients.

    Responsibilities:
    - Build the chat-completion payload (text-only or multimodal)
    - Send exactly one HTTP request with a fixed timeout
    - Extract the first choice's message content
    - Map transport and HTTP failures onto LLMClientError subclasses

    Does NOT handle:
    - Prompt construction (that's PromptBuilder's job)
    - Parsing the model's JSON (that's ResponsePipeline's job)
    - Retries or fallback (that's ClassificationEngine's job)
    """

    provider_name: str = "base"
    completions_path: str = "/chat/completions"

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str,
        model: str,
        vision_model: Optional[str] = None,
        timeout: float = 30.0,
        max_tokens: int = 500,
        temperature: float = 0.1,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize base client.

        Args:
            api_key: Provider credential; None leaves the client unconfigured
            base_url: API root (e.g., https://api.sarvam.ai/v1)
            model: Text model identifier
            vision_model: Model used when an image is attached (defaults to ``model``)
            timeout: Request timeout in seconds
            max_tokens: Completion size limit sent with every request
            temperature: Sampling temperature
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.api_key = api_key or None
        self.base_url = base_url.rstrip('/')
        self.model = model
        self.vision_model = vision_model or model
        self.timeout = timeout
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

        logger.info(
            "Initialized LLM client",
            provider=self.provider_name,
            base_url=self.base_url,
            model=self.model,
            vision_model=self.vision_model,
            timeout=timeout,
            configured=self.is_configured,
        )

    @property
    def is_configured(self) -> bool:
        """True when a credential is present. The key's value is never checked."""
        return self.api_key is not None

    @abstractmethod
    def auth_headers(self) -> Dict[str, str]:
        """Provider-specific authentication headers."""

    def model_for(self, has_image: bool) -> str:
        """Vision-capable model when an image is attached, text model otherwise."""
        return self.vision_model if has_image else self.model

    def build_messages(self, request: LLMGenerationRequest) -> list[Dict[str, Any]]:
        """
        Single user message, multimodal when the request carries an image.

        Text-only:  {"role": "user", "content": "<prompt>"}
        Multimodal: {"role": "user", "content": [
                        {"type": "text", "text": "<prompt>"},
                        {"type": "image_url", "image_url": {"url": "<url>"}}]}
        """
        if request.image_url:
            content: Any = [
                {"type": "text", "text": request.prompt},
                {"type": "image_url", "image_url": {"url": request.image_url}},
            ]
        else:
            content = request.prompt
        return [{"role": "user", "content": content}]

    def build_payload(self, request: LLMGenerationRequest) -> Dict[str, Any]:
        """Chat-completion request body."""
        return {
            "model": request.model,
            "messages": self.build_messages(request),
            "max_tokens": request.max_tokens,
            "temperature": request.temperature,
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
            logger.debug("Created new httpx AsyncClient", provider=self.provider_name)
        return self._client

    async def generate(self, request: LLMGenerationRequest) -> LLMGenerationResponse:
        """
        Send one chat-completion request and return the raw text.

        Response shape (both providers):
        {
            "model": "sarvam-m",
            "choices": [{"message": {"content": "..."}, "finish_reason": "stop"}],
            "usage": {"prompt_tokens": 900, "completion_tokens": 40}
        }

        Raises:
            LLMNotConfiguredError: No API key
            LLMTimeoutError: Call exceeded ``timeout``
            LLMConnectionError: Network failure
            LLMAuthenticationError: 401/403
            LLMRateLimitError: 429
            LLMGenerationError: Any other non-2xx, unreadable or malformed body, empty content
        """
        if not self.is_configured:
            raise LLMNotConfiguredError(
                f"{self.provider_name} API key is not configured",
                details={"provider": self.provider_name},
            )

        payload = self.build_payload(request)
        start_time = time.time()

        logger.info(
            "Sending classification request",
            provider=self.provider_name,
            model=request.model,
            prompt_length=len(request.prompt),
            has_image=request.image_url is not None,
            max_tokens=request.max_tokens,
        )

        try:
            client = await self._get_client()
            response = await client.post(
                self.completions_path,
                json=payload,
                headers={**self.auth_headers(), "Content-Type": "application/json"},
            )
            response.raise_for_status()
            response_data = response.json()

        except httpx.TimeoutException as e:
            self._observe_failure(start_time)
            logger.warning(
                "Provider request timeout",
                provider=self.provider_name,
                timeout=self.timeout,
                error=str(e),
            )
            raise LLMTimeoutError(
                f"Request timeout after {self.timeout}s",
                details={"provider": self.provider_name, "timeout": self.timeout},
            ) from e

        except httpx.HTTPStatusError as e:
            self._observe_failure(start_time)
            status_code = e.response.status_code
            error_text = e.response.text[:500]
            logger.error(
                "Provider HTTP error",
                provider=self.provider_name,
                status_code=status_code,
                error_text=error_text,
            )
            details = {"provider": self.provider_name, "status": status_code, "error": error_text}
            if status_code in (401, 403):
                raise LLMAuthenticationError(
                    f"{self.provider_name} rejected credentials: {status_code}", details=details
                ) from e
            if status_code == 429:
                raise LLMRateLimitError(
                    f"{self.provider_name} rate limited the request", details=details
                ) from e
            raise LLMGenerationError(
                f"{self.provider_name} returned HTTP {status_code}", details=details
            ) from e

        except httpx.TransportError as e:
            self._observe_failure(start_time)
            logger.warning(
                "Provider network error",
                provider=self.provider_name,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise LLMConnectionError(
                f"Network error: {str(e)}",
                details={"provider": self.provider_name, "error_type": type(e).__name__},
            ) from e

        except httpx.HTTPError as e:
            # DecodingError, TooManyRedirects and other non-transport request errors
            self._observe_failure(start_time)
            logger.error(
                "Provider response could not be read",
                provider=self.provider_name,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise LLMGenerationError(
                f"Unreadable response from {self.provider_name}: {str(e)}",
                details={"provider": self.provider_name, "error_type": type(e).__name__},
            ) from e

        except ValueError as e:
            # json.JSONDecodeError, UnicodeDecodeError
            self._observe_failure(start_time)
            logger.error(
                "Failed to parse provider response body",
                provider=self.provider_name,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise LLMGenerationError(
                f"Invalid JSON body from {self.provider_name}",
                details={"provider": self.provider_name, "parse_error": str(e)},
            ) from e

        except Exception as e:
            self._observe_failure(start_time)
            logger.error(
                "Unexpected error in provider request",
                provider=self.provider_name,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise LLMGenerationError(
                f"Unexpected error: {str(e)}",
                details={"provider": self.provider_name, "error_type": type(e).__name__},
            ) from e

        latency_ms = int((time.time() - start_time) * 1000)
        content = self._extract_content(response_data)
        if not content:
            self._observe_failure(start_time)
            logger.error("No content in provider response", provider=self.provider_name)
            raise LLMGenerationError(
                f"Empty response from {self.provider_name}",
                details={"provider": self.provider_name, "response": str(response_data)[:500]},
            )

        usage = response_data.get("usage")
        if not isinstance(usage, dict):
            usage = {}
        prompt_tokens = usage.get("prompt_tokens")
        completion_tokens = usage.get("completion_tokens")
        choice = response_data["choices"][0]

        logger.info(
            "Provider generation successful",
            provider=self.provider_name,
            model=response_data.get("model", request.model),
            latency_ms=latency_ms,
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            finish_reason=choice.get("finish_reason"),
        )

        llm_latency_seconds.labels(
            provider=self.provider_name, success="true"
        ).observe(latency_ms / 1000.0)
        if prompt_tokens:
            llm_tokens_total.labels(
                provider=self.provider_name, token_type="prompt"
            ).inc(prompt_tokens)
        if completion_tokens:
            llm_tokens_total.labels(
                provider=self.provider_name, token_type="completion"
            ).inc(completion_tokens)

        return LLMGenerationResponse(
            content=content,
            provider=self.provider_name,
            model_version=response_data.get("model", request.model),
            finish_reason=choice.get("finish_reason"),
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            latency_ms=latency_ms,
            raw_metadata={"id": response_data.get("id")},
        )

    @staticmethod
    def _extract_content(response_data: Any) -> Optional[str]:
        """First choice's message content, or None when the shape is wrong."""
        if not isinstance(response_data, dict):
            return None
        choices = response_data.get("choices")
        if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
            return None
        message = choices[0].get("message") or {}
        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str) or not content.strip():
            return None
        return content

    def _observe_failure(self, start_time: float) -> None:
        llm_latency_seconds.labels(
            provider=self.provider_name, success="false"
        ).observe(time.time() - start_time)

    async def close(self):
        """Close the HTTP client connection."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Closed LLM client connection", provider=self.provider_name)

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"base_url={self.base_url}, "
            f"model={self.model}, "
            f"configured={self.is_configured})"
        )
