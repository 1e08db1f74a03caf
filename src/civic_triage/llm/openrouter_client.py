"""
OpenRouter client.

OpenRouter proxies many hosted models behind one OpenAI-compatible API.
Text-only complaints go to DeepSeek; complaints with a photo go to a
vision-capable model, since DeepSeek chat cannot read images.
"""

from typing import Dict, Optional

import httpx

from civic_triage.llm.base_client import BaseLLMClient


class OpenRouterClient(BaseLLMClient):
    """
    OpenRouter-specific client.

    API Endpoints:
    - POST /api/v1/chat/completions (Authorization: Bearer <key>)

    ``app_name`` is sent as X-Title so calls are attributable in the
    OpenRouter dashboard.
    """

    provider_name = "openrouter"

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://openrouter.ai/api/v1",
        model: str = "deepseek/deepseek-chat",
        vision_model: Optional[str] = "google/gemini-2.0-flash-001",
        timeout: float = 30.0,
        max_tokens: int = 500,
        temperature: float = 0.1,
        app_name: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(
            api_key=api_key,
            base_url=base_url,
            model=model,
            vision_model=vision_model,
            timeout=timeout,
            max_tokens=max_tokens,
            temperature=temperature,
            transport=transport,
        )
        self.app_name = app_name

    def auth_headers(self) -> Dict[str, str]:
        headers = {"Authorization": f"Bearer {self.api_key or ''}"}
        if self.app_name:
            headers["X-Title"] = self.app_name
        return headers
